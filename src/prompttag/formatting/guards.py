# topmark:header:start
#
#   project      : PromptTag
#   file         : guards.py
#   file_relpath : src/prompttag/formatting/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value-kind predicates used by the formatting dispatch.

Values fall into three disjoint kinds:

- *arrays*: ``list`` and plain ``tuple`` instances (named tuples are records
  and count as composite values);
- *primitives*: ``None``, ``str``, ``bytes``, ``int``, ``float``, ``complex``
  and ``bool``;
- *composites*: everything else (dicts, sets, dataclasses, class instances).

[`is_array`][prompttag.formatting.guards.is_array] is also public so callers
can register a formatter for whole arrays, which then takes precedence over the
automatic array aggregation.
"""

from __future__ import annotations

from typing import Any, Final, TypeGuard

_PRIMITIVE_TYPES: Final[tuple[type, ...]] = (str, bytes, int, float, complex, bool)


def is_array(value: object) -> TypeGuard[list[Any] | tuple[Any, ...]]:
    """Return True if ``value`` is a list or a plain (non-named) tuple."""
    if isinstance(value, list):
        return True
    return isinstance(value, tuple) and not hasattr(value, "_fields")


def is_primitive(value: object) -> bool:
    """Return True if ``value`` is ``None`` or a scalar builtin."""
    return value is None or isinstance(value, _PRIMITIVE_TYPES)


def is_composite(value: object) -> bool:
    """Return True if ``value`` is neither a primitive nor an array."""
    return not is_primitive(value) and not is_array(value)
