# panzoom/core/config.py
"""
Gesture configuration surface.

`GestureConfig` is immutable per session and validated on construction, so
bad bounds or increments fail at setup instead of somewhere in the event path.
Inverted scroll limits are accepted but logged; clamping still pins the
camera to a usable position in that case.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, Mapping

import panzoom.utils.settings as settings
from panzoom.core.camera_clamp import AnchorMode, ScrollLimits
from panzoom.utils.logging_setup import get_logger

log = get_logger(__name__)


class ConfigError(ValueError):
    """Raised for configuration values that can't be used at run time."""


def _default_limits() -> ScrollLimits:
    return ScrollLimits(
        settings.SCROLL_LIMIT_LEFT,
        settings.SCROLL_LIMIT_TOP,
        settings.SCROLL_LIMIT_RIGHT,
        settings.SCROLL_LIMIT_BOTTOM,
    )


@dataclass(frozen=True)
class GestureConfig:
    min_zoom: float = settings.MIN_ZOOM
    max_zoom: float = settings.MAX_ZOOM
    zoom_sensitivity: float = settings.ZOOM_SENSITIVITY
    zoom_increment: float = settings.ZOOM_INCREMENT
    mouse_zoom_increment: float = settings.MOUSE_ZOOM_INCREMENT
    move_while_zooming: bool = settings.MOVE_WHILE_ZOOMING
    handle_mouse_events: bool = settings.HANDLE_MOUSE_EVENTS
    anchor_mode: AnchorMode = AnchorMode(settings.ANCHOR_MODE)
    scroll_limits: ScrollLimits = field(default_factory=_default_limits)

    def __post_init__(self) -> None:
        # Accept "center"/"top_left" strings and (l, t, r, b) tuples for convenience.
        if not isinstance(self.anchor_mode, AnchorMode):
            try:
                object.__setattr__(self, "anchor_mode", AnchorMode(self.anchor_mode))
            except ValueError:
                raise ConfigError(f"unknown anchor_mode {self.anchor_mode!r}") from None
        if not isinstance(self.scroll_limits, ScrollLimits):
            object.__setattr__(self, "scroll_limits", ScrollLimits(*self.scroll_limits))
        self._validate()

    def _validate(self) -> None:
        if self.min_zoom <= 0 or self.max_zoom <= 0:
            raise ConfigError(
                f"zoom bounds must be > 0 (min_zoom={self.min_zoom}, max_zoom={self.max_zoom})"
            )
        if self.min_zoom > self.max_zoom:
            raise ConfigError(f"min_zoom {self.min_zoom} exceeds max_zoom {self.max_zoom}")
        if self.zoom_increment <= 0:
            raise ConfigError(f"zoom_increment must be > 0, got {self.zoom_increment}")
        if self.mouse_zoom_increment <= 0:
            raise ConfigError(f"mouse_zoom_increment must be > 0, got {self.mouse_zoom_increment}")
        if self.zoom_sensitivity < 0:
            raise ConfigError(f"zoom_sensitivity must be >= 0, got {self.zoom_sensitivity}")
        if self.scroll_limits.is_inverted:
            log.warning("Scroll limits are inverted %s; camera will pin to their midpoint",
                        self.scroll_limits.as_tuple())

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_settings(cls) -> "GestureConfig":
        """Build from the current values in `panzoom.utils.settings`."""
        return cls(
            min_zoom=settings.MIN_ZOOM,
            max_zoom=settings.MAX_ZOOM,
            zoom_sensitivity=settings.ZOOM_SENSITIVITY,
            zoom_increment=settings.ZOOM_INCREMENT,
            mouse_zoom_increment=settings.MOUSE_ZOOM_INCREMENT,
            move_while_zooming=settings.MOVE_WHILE_ZOOMING,
            handle_mouse_events=settings.HANDLE_MOUSE_EVENTS,
            anchor_mode=settings.ANCHOR_MODE,
            scroll_limits=_default_limits(),
        )

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "GestureConfig":
        """Build from a plain mapping; unknown keys are rejected."""
        known = set(cls.__dataclass_fields__)
        unknown = set(d) - known
        if unknown:
            raise ConfigError(f"unknown config keys: {sorted(unknown)}")
        data = dict(d)
        limits = data.get("scroll_limits")
        if isinstance(limits, Mapping):
            data["scroll_limits"] = ScrollLimits(**limits)
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["anchor_mode"] = self.anchor_mode.value
        return d

    def replace(self, **changes: Any) -> "GestureConfig":
        """Copy with changes; re-validates."""
        return replace(self, **changes)
