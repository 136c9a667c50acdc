# topmark:header:start
#
#   project      : PromptTag
#   file         : model.py
#   file_relpath : src/prompttag/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter configuration model for PromptTag.

[`FormatterConfig`][prompttag.config.model.FormatterConfig] is an immutable
snapshot of the array and object fallback strategies used by a
[`FormatterRegistry`][prompttag.formatting.registry.FormatterRegistry].

Public entry points accept either a frozen ``FormatterConfig`` or a plain
mapping with the same keys; mappings are normalized through
[`resolve_config`][prompttag.config.model.resolve_config]:

```python
from prompttag import make_formatting_renderer

bullets = make_formatting_renderer(
    [(is_task, lambda t: t.name)],
    config={"array_formatter": lambda items, fmt: "\\n".join(f"- {fmt(i)}" for i in items)},
)
```

To change a setting, build a new config with ``dataclasses.replace``; instances
are never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from prompttag.config.logging import get_logger
from prompttag.formatting.defaults import (
    default_array_formatter,
    default_object_formatter,
    to_json_object_formatter,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from prompttag.config.logging import PromptTagLogger
    from prompttag.formatting.types import ArrayFormatter, ObjectFormatter

logger: PromptTagLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Immutable fallback strategies for a formatter registry.

    Attributes:
        array_formatter (ArrayFormatter): Combines array items into one string.
            Defaults to joining formatted items with a blank line.
        object_formatter (ObjectFormatter | None): Fallback for composite values
            no predicate matched. ``None`` selects the default (see
            ``use_to_json``).
        use_to_json (bool): When no ``object_formatter`` is given, render
            composite values through their ``to_json()`` method if they have one.
    """

    array_formatter: ArrayFormatter = default_array_formatter
    object_formatter: ObjectFormatter | None = None
    use_to_json: bool = False

    def __post_init__(self) -> None:
        """Validate the configured strategies.

        Raises:
            TypeError: If a strategy is not callable.
        """
        if not callable(self.array_formatter):
            raise TypeError(f"array_formatter must be callable, got {self.array_formatter!r}")
        if self.object_formatter is not None and not callable(self.object_formatter):
            raise TypeError(f"object_formatter must be callable, got {self.object_formatter!r}")

    @property
    def effective_object_formatter(self) -> ObjectFormatter:
        """Return the object fallback actually used by the registry."""
        if self.object_formatter is not None:
            return self.object_formatter
        return to_json_object_formatter if self.use_to_json else default_object_formatter

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> FormatterConfig:
        """Build a config from a plain mapping.

        Keys mirror the dataclass fields; ``None`` values select the default.

        Args:
            data (Mapping[str, Any]): The mapping to normalize.

        Returns:
            FormatterConfig: The frozen config.

        Raises:
            TypeError: If ``data`` contains unknown keys.
        """
        known: set[str] = {f.name for f in fields(cls)}
        unknown: list[str] = sorted(set(data) - known)
        if unknown:
            raise TypeError(
                f"Unknown formatter config key(s): {', '.join(unknown)}; "
                f"expected any of: {', '.join(sorted(known))}"
            )
        kwargs: dict[str, Any] = {k: v for k, v in data.items() if v is not None}
        logger.debug("formatter config from mapping: %s", sorted(kwargs))
        return cls(**kwargs)


def resolve_config(config: FormatterConfig | Mapping[str, Any] | None) -> FormatterConfig:
    """Normalize ``config`` into a frozen `FormatterConfig`.

    Args:
        config (FormatterConfig | Mapping[str, Any] | None): A frozen config, a
            plain mapping, or None for the defaults.

    Returns:
        FormatterConfig: The effective config.
    """
    if config is None:
        return FormatterConfig()
    if isinstance(config, FormatterConfig):
        return config
    return FormatterConfig.from_mapping(config)
