# topmark:header:start
#
#   project      : PromptTag
#   file         : test_arrays.py
#   file_relpath : tests/formatting/test_arrays.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Array aggregation: homogeneous, mixed, empty and whole-array formatters."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, NamedTuple

from prompttag.config.model import FormatterConfig
from prompttag.formatting.guards import is_array
from prompttag.formatting.registry import make_formatting_renderer
from tests.formatting.domain import (
    Note,
    Task,
    format_note,
    format_task,
    is_note,
    is_task,
    notes_and_tasks,
)


def test_homogeneous_array_joins_with_blank_lines() -> None:
    """Arrays of one registered type are joined with a blank line by default."""
    notes = [
        Note("Task 1", "Review the pull request"),
        Note("Task 2", "Update documentation"),
        Note("Task 3", "Fix the failing tests"),
    ]

    result = notes_and_tasks()("All Notes")(["", ""], notes)

    assert result == (
        "\n==== All Notes ====\n"
        "• Task 1\nReview the pull request\n\n"
        "• Task 2\nUpdate documentation\n\n"
        "• Task 3\nFix the failing tests\n"
        "==== End of All Notes ====\n"
    )


def test_homogeneous_tasks_default_formatting() -> None:
    """Task arrays use the task formatter for every item."""
    tasks = [Task("Review code", True), Task("Write tests", False)]

    result = notes_and_tasks()("Task List")(["", ""], tasks)

    assert result == (
        "\n==== Task List ====\n[x] Review code\n\n[ ] Write tests\n==== End of Task List ====\n"
    )


def test_custom_array_formatter_with_commas() -> None:
    """A custom array formatter controls the separator."""
    registry = make_formatting_renderer(
        [(is_note, lambda note: note.title)],
        {"array_formatter": lambda items, fmt: ", ".join(fmt(i) for i in items)},
    )
    notes = [Note("Task 1", "Content 1"), Note("Task 2", "Content 2"), Note("Task 3", "Content 3")]

    result = registry("Note Names")(["", ""], notes)

    assert result == "\n==== Note Names ====\nTask 1, Task 2, Task 3\n==== End of Note Names ====\n"


def test_custom_array_formatter_with_arrows() -> None:
    """A custom array formatter can decorate every item."""

    def arrows(items: Sequence[Any], fmt: Any) -> str:
        return "\n".join(f"→ {fmt(item)}" for item in items)

    registry = make_formatting_renderer(
        [(is_task, lambda task: task.name)],
        FormatterConfig(array_formatter=arrows),
    )
    tasks = [Task("Review code", False), Task("Write tests", False), Task("Deploy", False)]

    result = registry("Task List")(["", ""], tasks)

    assert result == (
        "\n==== Task List ====\n→ Review code\n→ Write tests\n→ Deploy\n==== End of Task List ====\n"
    )


def test_homogeneous_array_receives_raw_items_and_formatter() -> None:
    """The array formatter gets the raw elements and the matching formatter."""
    calls: list[tuple[list[Any], Any]] = []

    def spy(items: Sequence[Any], fmt: Any) -> str:
        calls.append((list(items), fmt))
        return "spied"

    registry = make_formatting_renderer([(is_note, format_note)], {"array_formatter": spy})
    notes = [Note("a", "1"), Note("b", "2")]

    assert registry.format_value(notes) == "spied"
    assert calls == [(notes, format_note)]


def test_mixed_array_formats_each_item() -> None:
    """Mixed arrays format every element on its own, never the array as a whole."""
    mixed = [Note("Note", "Content"), Task("Task", True), "plain string"]

    result = notes_and_tasks()("Mixed Array")(["", ""], mixed)

    assert result == (
        "\n==== Mixed Array ====\n"
        "• Note\nContent\n\n"
        "[x] Task\n\n"
        "plain string\n"
        "==== End of Mixed Array ====\n"
    )
    assert "[Note(" not in result


def test_mixed_array_fallbacks_per_item() -> None:
    """Unmatched items use the object fallback or their string form."""
    registry = make_formatting_renderer([(is_note, format_note)])
    mixed = [Note("Note", "Content"), Task("Task", True), "s", None, 3]

    assert registry.format_value(mixed) == (
        "• Note\nContent\n\nTask(name='Task', completed=True)\n\ns\n\n\n\n3"
    )


def test_mixed_array_formatter_receives_strings() -> None:
    """For mixed arrays the array formatter gets pre-formatted strings."""
    received: list[Any] = []

    def collect(items: Sequence[Any], fmt: Any) -> str:
        received.extend(fmt(item) for item in items)
        return "|".join(received)

    registry = make_formatting_renderer(
        [(is_note, format_note), (is_task, format_task)], {"array_formatter": collect}
    )

    assert registry.format_value([Note("n", "c"), 5, Task("t", False)]) == "• n\nc|5|[ ] t"


def test_first_predicate_matching_all_items_wins() -> None:
    """Homogeneity is checked predicate by predicate in registration order."""
    registry = make_formatting_renderer(
        [(is_note, lambda n: "note"), (lambda o: not is_array(o), lambda o: "any")],
    )

    assert registry.format_value([Note("a", "b"), Note("c", "d")]) == "note\n\nnote"
    assert registry.format_value([Note("a", "b"), Task("t", True)]) == "any\n\nany"
    assert registry.match_all([Note("a", "b"), Task("t", True)]) is registry.entries[1]


def test_catch_all_predicate_claims_arrays_directly() -> None:
    """A predicate that accepts the list itself wins before any aggregation."""
    registry = make_formatting_renderer(
        [(is_note, lambda n: "note"), (lambda o: True, lambda o: "any")],
    )

    assert registry.format_value([Note("a", "b"), Note("c", "d")]) == "any"


def test_nested_array_in_mixed_array_uses_string_form() -> None:
    """Inner arrays of a mixed array are not aggregated again."""
    registry = make_formatting_renderer([(is_note, format_note)])

    assert registry.format_value([Note("Note", "Content"), [1, 2]]) == "• Note\nContent\n\n[1, 2]"


def test_empty_array_suppresses_section() -> None:
    """An empty array contributes nothing, so the section disappears."""
    registry = notes_and_tasks()

    assert registry("Empty")(["", ""], []) == ""
    assert registry.format_value(()) == ""


def test_single_item_array_has_no_separator() -> None:
    """One-item arrays render just the item."""
    result = notes_and_tasks()("Single Note")(["", ""], [Note("Single", "Only one note")])

    assert result == "\n==== Single Note ====\n• Single\nOnly one note\n==== End of Single Note ====\n"


def test_array_predicate_takes_precedence_over_aggregation() -> None:
    """A registered is_array formatter wins over automatic aggregation."""
    registry = make_formatting_renderer(
        [
            (is_array, lambda arr: f"Array with {len(arr)} items"),
            (is_note, format_note),
        ]
    )

    assert registry.format_value([Note("a", "b"), Note("c", "d")]) == "Array with 2 items"
    assert registry.format_value([]) == "Array with 0 items"
    assert registry.format_value(Note("a", "b")) == "• a\nb"


def test_tuples_aggregate_like_lists() -> None:
    """Plain tuples are arrays."""
    assert notes_and_tasks().format_value((Task("a", True), Task("b", True))) == "[x] a\n\n[x] b"


class _Point(NamedTuple):
    x: int
    y: int


def test_named_tuples_are_records() -> None:
    """Named tuples go through the object fallback, not aggregation."""
    registry = make_formatting_renderer([], {"object_formatter": lambda o: f"point {o.x},{o.y}"})

    assert registry.format_value(_Point(1, 2)) == "point 1,2"
