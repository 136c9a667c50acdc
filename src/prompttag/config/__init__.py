# topmark:header:start
#
#   project      : PromptTag
#   file         : __init__.py
#   file_relpath : src/prompttag/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for PromptTag.

This package groups the formatter configuration model and the logging setup.

Public modules:
    - prompttag.config.model
    - prompttag.config.logging
"""

from __future__ import annotations

from prompttag.config.model import FormatterConfig, resolve_config

__all__ = [
    "FormatterConfig",
    "resolve_config",
]
