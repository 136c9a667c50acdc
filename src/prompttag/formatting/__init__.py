# topmark:header:start
#
#   project      : PromptTag
#   file         : __init__.py
#   file_relpath : src/prompttag/formatting/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type-directed value formatting for PromptTag.

This package builds the value-to-string step that sits in front of the
renderer: ordered ``(predicate, formatter)`` dispatch, array aggregation and
object/primitive fallbacks.

Public modules:
    - prompttag.formatting.registry
    - prompttag.formatting.guards
    - prompttag.formatting.defaults
    - prompttag.formatting.types

"""

from __future__ import annotations
