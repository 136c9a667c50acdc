# topmark:header:start
#
#   project      : PromptTag
#   file         : registry.py
#   file_relpath : src/prompttag/formatting/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter registry: type-directed formatting in front of the renderer.

A [`FormatterRegistry`][prompttag.formatting.registry.FormatterRegistry] holds an
ordered tuple of ``(predicate, formatter)`` entries plus a frozen
[`FormatterConfig`][prompttag.config.model.FormatterConfig]. Calling the registry
with ``(name, condition)`` returns a renderer with the exact shape of
[`prompttag.rendering.api.render`][], so both can be nested freely.

Each interpolated value is converted with the following precedence:

1. **Direct match**: the first entry whose predicate accepts the value. This
   also applies to arrays, so a registered ``is_array`` formatter wins over
   aggregation.
2. **Array aggregation**: for arrays no entry matched directly:
   an empty array renders as ``""``; if every element satisfies the same
   predicate (first such entry wins) the array formatter receives the raw
   elements and that entry's formatter; otherwise each element is formatted
   on its own and the array formatter joins the resulting strings.
3. **Object fallback**: composite values go through the configured object
   formatter.
4. **Primitive fallback**: ``str(value)``, with ``None`` rendering as ``""``.

Predicate and formatter exceptions propagate to the caller unchanged.

Typical usage:
    ```python
    from prompttag import make_formatting_renderer

    notes = make_formatting_renderer([(is_note, lambda n: f"* {n.title}\\n{n.content}")])
    text = notes("Notes")(["", ""], [note_a, note_b])
    ```

Registries are immutable; [`FormatterRegistry.extended`][prompttag.formatting.registry.FormatterRegistry.extended]
returns a new registry with extra entries appended.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from prompttag.config.logging import TRACE_LEVEL, get_logger
from prompttag.config.model import resolve_config
from prompttag.formatting.defaults import identity
from prompttag.formatting.guards import is_array, is_composite
from prompttag.rendering.api import render, stringify
from prompttag.utils.introspection import format_callable_pretty

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from prompttag.config.logging import PromptTagLogger
    from prompttag.config.model import FormatterConfig
    from prompttag.formatting.types import Formatter, ObjectFormatter, Predicate
    from prompttag.rendering.types import Renderer

logger: PromptTagLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FormatterEntry:
    """A ``(predicate, formatter)`` pair.

    Attributes:
        predicate (Predicate): Decides whether ``formatter`` applies to a value.
        formatter (Formatter): Produces the display text for matched values.
    """

    predicate: Predicate
    formatter: Formatter

    def __post_init__(self) -> None:
        """Validate that both members are callable.

        Raises:
            TypeError: If the predicate or the formatter is not callable.
        """
        if not callable(self.predicate):
            raise TypeError(f"predicate must be callable, got {self.predicate!r}")
        if not callable(self.formatter):
            raise TypeError(f"formatter must be callable, got {self.formatter!r}")

    def matches(self, value: Any) -> bool:
        """Return True if the predicate accepts ``value``."""
        return bool(self.predicate(value))

    def matches_all(self, items: Sequence[Any]) -> bool:
        """Return True if the predicate accepts every element of ``items``."""
        return all(self.matches(item) for item in items)


EntryLike = Union[FormatterEntry, "tuple[Predicate, Formatter]"]


def coerce_entry(entry: EntryLike, index: int) -> FormatterEntry:
    """Return ``entry`` as a `FormatterEntry`.

    Args:
        entry (EntryLike): A `FormatterEntry` or a 2-item ``(predicate, formatter)``
            tuple/list.
        index (int): Position of the entry, used in error messages.

    Returns:
        FormatterEntry: The normalized entry.

    Raises:
        TypeError: If ``entry`` is not a pair.
    """
    if isinstance(entry, FormatterEntry):
        return entry
    if isinstance(entry, (tuple, list)) and len(entry) == 2:
        predicate, formatter = entry
        return FormatterEntry(predicate=predicate, formatter=formatter)
    raise TypeError(f"formatter entry #{index} must be a (predicate, formatter) pair, got {entry!r}")


class FormatterRegistry:
    """Ordered formatter entries plus fallback strategies.

    Instances are immutable and can be shared between call sites and threads.
    Calling an instance behaves like [`render`][prompttag.rendering.api.render].
    """

    __slots__ = ("_config", "_entries", "_object_formatter")

    def __init__(
        self,
        entries: Iterable[EntryLike] = (),
        config: FormatterConfig | Mapping[str, Any] | None = None,
    ) -> None:
        """Build a registry.

        Args:
            entries (Iterable[EntryLike]): ``(predicate, formatter)`` pairs, tried
                in order.
            config (FormatterConfig | Mapping[str, Any] | None): Array/object
                fallback strategies, or None for the defaults.
        """
        self._entries: tuple[FormatterEntry, ...] = tuple(
            coerce_entry(entry, i) for i, entry in enumerate(entries)
        )
        self._config: FormatterConfig = resolve_config(config)
        self._object_formatter: ObjectFormatter = self._config.effective_object_formatter
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "formatter registry with %d entr%s, array formatter %s, object formatter %s",
                len(self._entries),
                "y" if len(self._entries) == 1 else "ies",
                format_callable_pretty(self._config.array_formatter),
                format_callable_pretty(self._object_formatter),
            )

    @property
    def entries(self) -> tuple[FormatterEntry, ...]:
        """Registered entries in dispatch order."""
        return self._entries

    @property
    def config(self) -> FormatterConfig:
        """The effective fallback configuration."""
        return self._config

    def extended(self, entries: Iterable[EntryLike]) -> FormatterRegistry:
        """Return a new registry with ``entries`` appended (same config).

        Existing entries keep their precedence over the appended ones.
        """
        return FormatterRegistry((*self._entries, *entries), self._config)

    def match(self, value: Any) -> FormatterEntry | None:
        """Return the first entry whose predicate accepts ``value``."""
        for entry in self._entries:
            if entry.matches(value):
                return entry
        return None

    def match_all(self, items: Sequence[Any]) -> FormatterEntry | None:
        """Return the first entry whose predicate accepts every element of ``items``."""
        for entry in self._entries:
            if entry.matches_all(items):
                return entry
        return None

    def _fallback(self, value: Any) -> str:
        if is_composite(value):
            logger.trace("object fallback for %s", type(value).__name__)
            return self._object_formatter(value)
        return stringify(value)

    def format_item(self, item: Any) -> str:
        """Format one element of a mixed array.

        First matching entry, else the object fallback for composite values,
        else the element's string form.
        """
        entry: FormatterEntry | None = self.match(item)
        if entry is not None:
            return entry.formatter(item)
        return self._fallback(item)

    def _format_array(self, items: Sequence[Any]) -> str:
        if not items:
            return ""

        entry: FormatterEntry | None = self.match_all(items)
        if entry is not None:
            if logger.isEnabledFor(TRACE_LEVEL):
                logger.trace(
                    "homogeneous array of %d item(s) via %s",
                    len(items),
                    format_callable_pretty(entry.formatter),
                )
            return self._config.array_formatter(items, entry.formatter)

        logger.trace("mixed array of %d item(s)", len(items))
        formatted: list[str] = [self.format_item(item) for item in items]
        return self._config.array_formatter(formatted, identity)

    def format_value(self, value: Any) -> str:
        """Convert one interpolated value into display text.

        Args:
            value (Any): The interpolated value.

        Returns:
            str: The display text.
        """
        entry: FormatterEntry | None = self.match(value)
        if entry is not None:
            if logger.isEnabledFor(TRACE_LEVEL):
                logger.trace(
                    "%s matched %s",
                    type(value).__name__,
                    format_callable_pretty(entry.predicate),
                )
            return entry.formatter(value)

        if is_array(value):
            return self._format_array(value)

        return self._fallback(value)

    def renderer(self, name: str | None = None, condition: bool = True) -> Renderer:
        """Return a renderer that formats values through this registry.

        Args:
            name (str | None): Section name, as for `render`.
            condition (bool): When False the renderer returns ``""`` without
                formatting any value.

        Returns:
            Renderer: A callable ``(fragments, *values) -> str``.
        """
        base: Renderer = render(name, condition)

        def _render(fragments: Sequence[str], *values: object) -> str:
            if not condition:
                return base(fragments)
            return base(fragments, *(self.format_value(v) for v in values))

        return _render

    def __call__(self, name: str | None = None, condition: bool = True) -> Renderer:
        """Alias for [`renderer`][prompttag.formatting.registry.FormatterRegistry.renderer]."""
        return self.renderer(name, condition)

    def __repr__(self) -> str:
        """Return a debug representation listing the registered formatters."""
        formatters: str = ", ".join(format_callable_pretty(e.formatter) for e in self._entries)
        return f"{type(self).__name__}([{formatters}])"


def make_formatting_renderer(
    entries: Iterable[EntryLike] = (),
    config: FormatterConfig | Mapping[str, Any] | None = None,
) -> FormatterRegistry:
    """Build a renderer factory that formats values by registered predicates.

    The returned registry is called like [`render`][prompttag.rendering.api.render]:
    ``make_formatting_renderer(entries)(name, condition)(fragments, *values)``.

    Args:
        entries (Iterable[EntryLike]): Ordered ``(predicate, formatter)`` pairs.
        config (FormatterConfig | Mapping[str, Any] | None): Optional
            ``array_formatter`` / ``object_formatter`` / ``use_to_json`` settings.

    Returns:
        FormatterRegistry: The renderer factory.
    """
    return FormatterRegistry(entries, config)
