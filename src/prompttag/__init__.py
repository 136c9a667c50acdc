# topmark:header:start
#
#   project      : PromptTag
#   file         : __init__.py
#   file_relpath : src/prompttag/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PromptTag package.

PromptTag composes structured text blocks (typically LLM prompts) from literal
fragments and interpolated values. It normalizes whitespace, wraps content in
named ``==== Name ====`` sections that can be switched off, and formats
interpolated domain objects through user-registered, predicate-driven
formatters.

Public API (stable surface):
    - [`render`][prompttag.rendering.api.render] / ``section``: the plain renderer.
    - [`make_formatting_renderer`][prompttag.formatting.registry.make_formatting_renderer]:
      a renderer factory with type-directed value formatting.
    - [`is_array`][prompttag.formatting.guards.is_array]: predicate for registering
      whole-array formatters.

Example:
    ```python
    from prompttag import render

    system = render()([
        "\\n  You are a helpful assistant.\\n  ",
        "\\n",
    ], render("Rules")(["Be concise."]))
    ```
"""

from __future__ import annotations

from prompttag.config.model import FormatterConfig
from prompttag.constants import PROMPTTAG_VERSION
from prompttag.formatting.guards import is_array
from prompttag.formatting.registry import (
    FormatterEntry,
    FormatterRegistry,
    make_formatting_renderer,
)
from prompttag.rendering.api import render, section, wrap_section
from prompttag.rendering.whitespace import normalize_whitespace

__all__ = [
    "PROMPTTAG_VERSION",
    "FormatterConfig",
    "FormatterEntry",
    "FormatterRegistry",
    "is_array",
    "make_formatting_renderer",
    "normalize_whitespace",
    "render",
    "section",
    "wrap_section",
]
