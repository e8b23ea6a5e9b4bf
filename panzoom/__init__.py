"""
Top-level package marker for the pan/zoom touch camera.

Exports the pieces most hosts need; everything else is importable from
`panzoom.core.*` and `panzoom.utils.*`.
"""
from panzoom.core.camera import Camera2D
from panzoom.core.camera_clamp import AnchorMode, ScrollLimits
from panzoom.core.config import ConfigError, GestureConfig
from panzoom.core.controller import PanZoomController
from panzoom.core.input_events import InputEvent, InputKind

__all__ = [
    "AnchorMode",
    "Camera2D",
    "ConfigError",
    "GestureConfig",
    "InputEvent",
    "InputKind",
    "PanZoomController",
    "ScrollLimits",
]
