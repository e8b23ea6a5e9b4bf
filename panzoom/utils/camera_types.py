"""
Lightweight camera/viewport protocols.

- Uses `from __future__ import annotations` so pygame types in annotations
  don't need pygame at import-time.
- `CameraSink` is what the controller writes clamped results into.
- `ViewportLike` is anything that can report its pixel size; a pygame
  display `Surface` satisfies it as-is.
"""

from __future__ import annotations

from typing import Optional, Protocol, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    import pygame  # noqa: F401

Size = Tuple[float, float]
ZoomValue = Union[float, Tuple[float, float], "pygame.Vector2"]


class CameraSink(Protocol):
    """
    Minimal requirements for objects driven by the controller.
    `zoom` is the uniform zoom scalar; setters receive already-clamped values.
    """

    @property
    def position(self) -> "pygame.Vector2": ...

    @property
    def zoom(self) -> float: ...

    def set_position(self, position: "pygame.Vector2") -> None: ...
    def set_zoom(self, zoom: ZoomValue) -> None: ...


class ViewportLike(Protocol):
    """Anything that reports a pixel size."""

    def get_size(self) -> Tuple[int, int]: ...


def viewport_size_of(viewport: ViewportLike) -> Size:
    """
    Query the viewport size directly, honouring an optional `size_override`
    attribute (a (w, h) pair, or None/falsy when unset).
    """
    override: Optional[Size] = getattr(viewport, "size_override", None)
    if override:
        w, h = override
    else:
        w, h = viewport.get_size()
    return float(w), float(h)


__all__ = [
    "CameraSink",
    "Size",
    "ViewportLike",
    "ZoomValue",
    "viewport_size_of",
]
