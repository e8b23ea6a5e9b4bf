# panzoom/core/controller.py
"""
Per-camera controller: owns the gesture state for one camera, clamps every
candidate update and writes the result into the camera sink.

Viewport size comes from a "viewport_resized" notification when a bus is
supplied; otherwise the viewport is queried directly each time.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

import pygame

from panzoom.core.camera_clamp import CameraClamp
from panzoom.core.config import GestureConfig
from panzoom.core.contacts import ContactTracker
from panzoom.core.gestures import CameraCommand, GestureResolver
from panzoom.core.input_events import InputEvent, from_pygame
from panzoom.utils.camera_types import CameraSink, Size, ViewportLike, viewport_size_of
from panzoom.utils.event_bus import VIEWPORT_RESIZED, EventBus
from panzoom.utils.logging_setup import get_logger

log = get_logger(__name__)


class PanZoomController:
    """Touch/mouse pan & zoom for a single camera."""

    def __init__(
        self,
        camera: CameraSink,
        viewport: ViewportLike,
        config: Optional[GestureConfig] = None,
        *,
        bus: Optional[EventBus] = None,
    ) -> None:
        self.camera = camera
        self.viewport = viewport
        self.config = config or GestureConfig()
        self.resolver = GestureResolver(self.config)
        self.clamp = CameraClamp(self.config)

        self._known_size: Optional[Size] = None
        self._off = None
        if bus is not None:
            self._off = bus.on(VIEWPORT_RESIZED, self.on_viewport_resized)
            self._known_size = viewport_size_of(viewport)
        log.info("PanZoomController ready zoom=[%s, %s] anchor=%s limits=%s",
                 self.config.min_zoom, self.config.max_zoom,
                 self.config.anchor_mode.value, self.config.scroll_limits.as_tuple())

    @property
    def tracker(self) -> ContactTracker:
        return self.resolver.tracker

    # -------------------------
    # Viewport size
    # -------------------------

    @property
    def viewport_size(self) -> Size:
        """The viewport's `size_override` when set, else the last notified size, else a query."""
        if self._known_size is None or getattr(self.viewport, "size_override", None):
            return viewport_size_of(self.viewport)
        return self._known_size

    def on_viewport_resized(self, payload: Dict[str, Any]) -> None:
        """
        Bus handler; payload carries `w` and `h`. Missing values fall back to a
        direct query. A `size_override` on the viewport still takes precedence.
        """
        w, h = payload.get("w"), payload.get("h")
        if w is None or h is None:
            self._known_size = viewport_size_of(self.viewport)
        else:
            self._known_size = (float(w), float(h))
        log.debug("Viewport resized to %s (effective %s)", self._known_size, self.viewport_size)
        self.reclamp()

    # -------------------------
    # Event processing
    # -------------------------

    def process_input_event(self, event: InputEvent) -> Optional[CameraCommand]:
        """Update gesture state and return the unclamped command (camera untouched)."""
        return self.resolver.process_input_event(event, self.camera.position, self.camera.zoom)

    def apply(self, command: CameraCommand) -> None:
        """Clamp `command` (zoom first, then position) and write it to the camera."""
        position, zoom = self.clamp.apply(command, self.viewport_size)
        self.camera.set_zoom(zoom)
        self.camera.set_position(position)

    def handle_event(self, event: InputEvent) -> bool:
        """Process one event end to end. Returns True if the camera was written."""
        command = self.process_input_event(event)
        if command is None:
            return False
        self.apply(command)
        return True

    def handle_pygame_event(self, event: pygame.event.Event) -> bool:
        translated = from_pygame(event, self.viewport_size)
        if translated is None:
            return False
        return self.handle_event(translated)

    def handle_events(self, events: Iterable[pygame.event.Event]) -> bool:
        """Feed a frame's pygame events in order. Returns True if any moved the camera."""
        moved = False
        for e in events:
            if self.handle_pygame_event(e):
                moved = True
        return moved

    def reclamp(self) -> None:
        """Re-apply both clamps to the camera's current state."""
        pos = pygame.math.Vector2(self.camera.position)
        zoom = self.camera.zoom
        self.apply(CameraCommand(pos, zoom))

    def reset(self) -> None:
        self.resolver.reset()

    def close(self) -> None:
        """Unsubscribe from the bus; further resizes fall back to direct queries."""
        if self._off is not None:
            self._off()
            self._off = None
        self._known_size = None
