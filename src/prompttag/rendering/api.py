# topmark:header:start
#
#   project      : PromptTag
#   file         : api.py
#   file_relpath : src/prompttag/rendering/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""API for rendering PromptTag sections.

This module provides the leaf renderer of PromptTag: it interleaves literal
fragments with already-stringified values, normalizes the whitespace of the
result and optionally wraps it in named section markers.

Typical usage:
    ```python
    from prompttag import render

    intro = render("Intro")(["\\n  Hello ", ".\\n"], "world")
    # '\\n==== Intro ====\\nHello world.\\n==== End of Intro ====\\n'

    hidden = render("Debug", False)(["never shown"])
    # ''
    ```

Rendered sections can be interpolated into other renderer calls; the outer
normalization pass absorbs the padding newlines of the inner section.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import TYPE_CHECKING

from prompttag.config.logging import get_logger
from prompttag.constants import SECTION_END_MARKER, SECTION_START_MARKER
from prompttag.rendering.whitespace import normalize_whitespace

if TYPE_CHECKING:
    from collections.abc import Sequence

    from prompttag.config.logging import PromptTagLogger
    from prompttag.rendering.types import Renderer

logger: PromptTagLogger = get_logger(__name__)


def stringify(value: object) -> str:
    """Return ``""`` for ``None``, else ``str(value)``."""
    return "" if value is None else str(value)


def interleave(fragments: Sequence[str], values: Sequence[object]) -> str:
    """Concatenate fragments with the string form of the values between them.

    Produces ``F[0] + V[0] + F[1] + ... + F[N]``. Missing trailing values are
    treated as absent; values beyond ``len(fragments) - 1`` are ignored.

    Args:
        fragments (Sequence[str]): Literal text chunks.
        values (Sequence[object]): Interpolated values.

    Returns:
        str: The raw, un-normalized content.
    """
    parts: list[str] = []
    for fragment, value in zip_longest(fragments, values[: max(len(fragments) - 1, 0)]):
        parts.append(fragment)
        parts.append(stringify(value))
    return "".join(parts)


def wrap_section(name: str, content: str) -> str:
    """Wrap ``content`` in the start/end markers of section ``name``.

    The leading and trailing newlines keep nested sections visually separated
    once an enclosing renderer normalizes them.

    Args:
        name (str): Section name (used verbatim in both markers).
        content (str): Normalized section content.

    Returns:
        str: ``"\\n==== name ====\\ncontent\\n==== End of name ====\\n"``.
    """
    start: str = SECTION_START_MARKER.format(name=name)
    end: str = SECTION_END_MARKER.format(name=name)
    return f"\n{start}\n{content}\n{end}\n"


def render(name: str | None = None, condition: bool = True) -> Renderer:
    """Return a renderer for an optionally named, optionally hidden section.

    Args:
        name (str | None): Section name. Blank or ``None`` renders the bare
            normalized content without markers.
        condition (bool): When False the renderer always returns ``""``.

    Returns:
        Renderer: A callable ``(fragments, *values) -> str``.
    """

    def _render(fragments: Sequence[str], *values: object) -> str:
        if not condition:
            logger.trace("section %r hidden by condition", name)
            return ""

        content: str = normalize_whitespace(interleave(fragments, values))
        if not content:
            logger.trace("section %r suppressed: empty content", name)
            return ""

        if name is None or not name.strip():
            return content

        return wrap_section(name, content)

    return _render


# Callers who prefer `section("Name")([...])` for sub-blocks.
section = render
