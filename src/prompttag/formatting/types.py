# topmark:header:start
#
#   project      : PromptTag
#   file         : types.py
#   file_relpath : src/prompttag/formatting/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type aliases for the formatting layer."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeAlias

Predicate: TypeAlias = Callable[[Any], bool]
"""Decides whether a formatter applies to a value."""

Formatter: TypeAlias = Callable[[Any], str]
"""Maps one matched value to its display text."""

ItemFormatter: TypeAlias = Callable[[Any], str]
"""Per-item formatter handed to an array formatter."""

ArrayFormatter: TypeAlias = Callable[[Sequence[Any], ItemFormatter], str]
"""Combines array items into one string, formatting each with the item formatter."""

ObjectFormatter: TypeAlias = Callable[[Any], str]
"""Fallback for composite values no predicate matched."""
