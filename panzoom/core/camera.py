# panzoom/core/camera.py
"""
A minimal 2D camera that satisfies `CameraSink`.

- `position` is the world-space anchor: the view centre for CENTER anchor,
  the top-left corner for TOP_LEFT.
- `zoom` is an inverse magnification stored as a uniform Vector2
  (visible world extent = viewport size * zoom).
- Screen <-> world transforms and the visible world rectangle, so hosts can
  draw with it and tests can check clamping in world space.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

import pygame

from panzoom.core.camera_clamp import AnchorMode
from panzoom.utils.camera_types import ZoomValue

Vec2 = pygame.math.Vector2
_EPS = 1e-6


class Camera2D:
    """Holds position/zoom for one viewport."""

    __slots__ = ("position", "zoom_vector", "anchor_mode")

    def __init__(self, position: Tuple[float, float] = (0.0, 0.0), zoom: float = 1.0,
                 anchor_mode: AnchorMode = AnchorMode.CENTER) -> None:
        self.position = Vec2(position)
        self.zoom_vector = Vec2(zoom, zoom)
        self.anchor_mode = anchor_mode

    @property
    def zoom(self) -> float:
        return self.zoom_vector.x

    def set_zoom(self, zoom: ZoomValue) -> None:
        """Accept a scalar or a vector; only uniform zoom is supported, so x wins."""
        if isinstance(zoom, (int, float)):
            z = float(zoom)
        else:
            z = float(Vec2(zoom).x)
        self.zoom_vector.update(z, z)

    def set_position(self, position: Tuple[float, float]) -> None:
        self.position.update(position)

    # -------------------------
    # Coordinate transforms
    # -------------------------

    def _origin(self, viewport_size: Tuple[float, float]) -> Vec2:
        """Screen point that maps onto `position`."""
        if self.anchor_mode is AnchorMode.CENTER:
            return Vec2(viewport_size[0] * 0.5, viewport_size[1] * 0.5)
        return Vec2(0.0, 0.0)

    def screen_to_world(self, screen_pos: Tuple[float, float],
                        viewport_size: Tuple[float, float]) -> Vec2:
        return self.position + (Vec2(screen_pos) - self._origin(viewport_size)) * self.zoom

    def world_to_screen(self, world_pos: Tuple[float, float],
                        viewport_size: Tuple[float, float]) -> Vec2:
        inv_z = 1.0 / max(self.zoom, _EPS)
        return self._origin(viewport_size) + (Vec2(world_pos) - self.position) * inv_z

    def visible_world_rect(self, viewport_size: Tuple[float, float]) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom) of the world area currently on screen."""
        left, top = self.screen_to_world((0.0, 0.0), viewport_size)
        right, bottom = self.screen_to_world(viewport_size, viewport_size)
        return (left, top, right, bottom)

    # -------------------------
    # Debug helpers
    # -------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pos": (float(self.position.x), float(self.position.y)),
            "zoom": float(self.zoom),
            "anchor_mode": self.anchor_mode.value,
        }

    def __repr__(self) -> str:
        return f"Camera2D(pos=({self.position.x:.1f}, {self.position.y:.1f}), zoom={self.zoom:.3f})"
