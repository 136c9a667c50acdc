# topmark:header:start
#
#   project      : PromptTag
#   file         : types.py
#   file_relpath : src/prompttag/rendering/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Callable shapes shared by the renderer and the formatting layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence


class Renderer(Protocol):
    """A bound template renderer: ``(fragments, *values) -> str``.

    ``fragments`` holds the literal text chunks and ``values`` the interpolated
    values between them (``len(fragments) == len(values) + 1``).
    """

    def __call__(self, fragments: Sequence[str], *values: object) -> str:
        """Render ``fragments`` interleaved with ``values``."""
        ...


class RendererFactory(Protocol):
    """Builds a [`Renderer`][prompttag.rendering.types.Renderer] for one section."""

    def __call__(self, name: str | None = None, condition: bool = True) -> Renderer:
        """Return a renderer bound to the section ``name`` and ``condition``."""
        ...
