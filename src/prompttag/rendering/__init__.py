# topmark:header:start
#
#   project      : PromptTag
#   file         : __init__.py
#   file_relpath : src/prompttag/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering helpers for PromptTag.

This package holds the leaf renderer: fragment/value interleaving, whitespace
normalization and section wrapping. It has no dependency on
``prompttag.formatting``.

Public modules:
    - prompttag.rendering.api
    - prompttag.rendering.types
    - prompttag.rendering.whitespace

"""

from __future__ import annotations
