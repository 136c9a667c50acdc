# topmark:header:start
#
#   project      : PromptTag
#   file         : defaults.py
#   file_relpath : src/prompttag/formatting/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Default array and object formatting strategies."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from prompttag.constants import DEFAULT_ARRAY_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Sequence

    from prompttag.formatting.types import ItemFormatter


def identity(item: Any) -> Any:
    """Return ``item`` unchanged (item formatter for pre-formatted arrays)."""
    return item


def default_array_formatter(items: Sequence[Any], item_formatter: ItemFormatter) -> str:
    """Format each item and join them with one blank line between items.

    Args:
        items (Sequence[Any]): The array elements.
        item_formatter (ItemFormatter): Formatter applied to every element.

    Returns:
        str: The joined display text (``""`` for no items).
    """
    return DEFAULT_ARRAY_SEPARATOR.join(item_formatter(item) for item in items)


def default_object_formatter(value: Any) -> str:
    """Return the value's own string conversion."""
    return str(value)


def to_json_object_formatter(value: Any) -> str:
    """Render ``value`` through its ``to_json()`` method when it has one.

    A string result is used verbatim, any other result is serialized with
    ``json.dumps``. Values without a callable ``to_json`` fall back to
    ``str(value)``.

    Args:
        value (Any): A composite value no predicate matched.

    Returns:
        str: The display text.
    """
    to_json = getattr(value, "to_json", None)
    if not callable(to_json):
        return str(value)
    result: Any = to_json()
    if isinstance(result, str):
        return result
    return json.dumps(result)
