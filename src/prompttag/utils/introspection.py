# topmark:header:start
#
#   project      : PromptTag
#   file         : introspection.py
#   file_relpath : src/prompttag/utils/introspection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Introspection helpers used in PromptTag log records."""

from __future__ import annotations

from functools import partial
from inspect import getmodule
from typing import Any


def format_callable_pretty(obj: Any) -> str:
    """Return a human-friendly (module.qualname) for any callable.

    Handles functions, lambdas, bound methods and callable instances. A
    ``functools.partial`` (a common way to parametrize a formatter) is described
    by the function it wraps, as ``"(partial module.qualname)"``. Other objects
    fall back to their class name, with ``inspect.getmodule`` as a last resort
    to resolve the module name.

    Args:
        obj: The callable object to describe.

    Returns:
        A string like ``"(package.module.QualifiedName)"`` or ``"(QualifiedName)"``
        if the module cannot be resolved.
    """
    if isinstance(obj, partial):
        return f"(partial {format_callable_pretty(obj.func)[1:-1]})"

    mod_name: str | None = getattr(obj, "__module__", None)
    call_name: str | None = getattr(obj, "__qualname__", None)

    if call_name is None:
        call_name = getattr(obj, "__name__", None)
    if call_name is None:
        call_name = type(obj).__name__

    if not mod_name:
        mod = getmodule(obj)
        if mod is not None and getattr(mod, "__name__", None):
            mod_name = mod.__name__

    return f"({mod_name}.{call_name})" if mod_name else f"({call_name})"
