# panzoom/core/camera_clamp.py
"""
Zoom-range and scroll-limit clamping.

Zoom here is an inverse magnification: the visible world extent is
`viewport_size * zoom`. Both clamps are total functions; the zoom clamp must
run first because position bounds depend on the clamped zoom.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

import pygame

import panzoom.utils.settings as settings

if TYPE_CHECKING:
    from panzoom.core.config import GestureConfig
    from panzoom.core.gestures import CameraCommand

Vec2 = pygame.math.Vector2
Bounds = Tuple[float, float, float, float]  # (left, top, right, bottom)


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


class AnchorMode(enum.Enum):
    """How the camera position relates to the visible rectangle."""
    CENTER = "center"
    TOP_LEFT = "top_left"


@dataclass(frozen=True)
class ScrollLimits:
    """World-space rectangle the visible viewport must stay within."""
    left: float = settings.SCROLL_LIMIT_LEFT
    top: float = settings.SCROLL_LIMIT_TOP
    right: float = settings.SCROLL_LIMIT_RIGHT
    bottom: float = settings.SCROLL_LIMIT_BOTTOM

    @property
    def is_inverted(self) -> bool:
        return self.left > self.right or self.top > self.bottom

    def as_tuple(self) -> Bounds:
        return (self.left, self.top, self.right, self.bottom)


def clamp_zoom(zoom: float, min_zoom: float, max_zoom: float) -> float:
    return _clamp(float(zoom), min_zoom, max_zoom)


def position_bounds(
    limits: ScrollLimits,
    viewport_size: Tuple[float, float],
    zoom: float,
    anchor: AnchorMode,
) -> Bounds:
    """
    Effective (left, top, right, bottom) range for the camera position.

    CENTER shrinks every side by half the visible extent; TOP_LEFT only pulls
    right/bottom in by the full visible extent.
    """
    vw, vh = viewport_size
    if anchor is AnchorMode.CENTER:
        ox = vw * 0.5 * zoom
        oy = vh * 0.5 * zoom
        return (limits.left + ox, limits.top + oy, limits.right - ox, limits.bottom - oy)
    ox = vw * zoom
    oy = vh * zoom
    return (limits.left, limits.top, limits.right - ox, limits.bottom - oy)


def _clamp_axis(value: float, lo: float, hi: float) -> float:
    if lo > hi:
        # Visible extent is larger than the limits on this axis: pin to the middle.
        return (lo + hi) * 0.5
    return _clamp(value, lo, hi)


def clamp_position(
    candidate: Tuple[float, float],
    limits: ScrollLimits,
    viewport_size: Tuple[float, float],
    zoom: float,
    anchor: AnchorMode,
) -> Vec2:
    left, top, right, bottom = position_bounds(limits, viewport_size, zoom, anchor)
    x, y = candidate
    return Vec2(_clamp_axis(x, left, right), _clamp_axis(y, top, bottom))


class CameraClamp:
    """Applies the zoom clamp, then the position clamp, using one config."""

    __slots__ = ("config",)

    def __init__(self, config: GestureConfig) -> None:
        self.config = config

    def zoom(self, zoom: float) -> float:
        return clamp_zoom(zoom, self.config.min_zoom, self.config.max_zoom)

    def position(self, candidate: Tuple[float, float], zoom: float,
                 viewport_size: Tuple[float, float]) -> Vec2:
        return clamp_position(candidate, self.config.scroll_limits, viewport_size,
                              zoom, self.config.anchor_mode)

    def apply(self, command: CameraCommand,
              viewport_size: Tuple[float, float]) -> Tuple[Vec2, float]:
        """Clamp a candidate command. Returns (position, zoom)."""
        z = self.zoom(command.zoom)
        return self.position(command.position, z, viewport_size), z
