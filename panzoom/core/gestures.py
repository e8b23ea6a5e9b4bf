# panzoom/core/gestures.py
"""
Gesture resolution: turns tracked contacts plus one input event into a
candidate camera update.

- One active contact pans: position -= relative * zoom.
- Two contacts occupying both pinch slots pinch: each time the distance
  between them changes by more than the sensitivity, zoom steps by
  `zoom_increment` (closer = zoom out, i.e. a larger zoom scalar).
- Mouse wheel steps zoom by `mouse_zoom_increment` while no contact is held.

Nothing here touches the camera. `process_input_event` returns a
`CameraCommand` holding unclamped candidates; the controller clamps and
applies it.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple

import pygame

import panzoom.utils.settings as settings
from panzoom.core.config import GestureConfig
from panzoom.core.contacts import ContactSource, ContactTracker
from panzoom.core.input_events import InputEvent, InputKind
from panzoom.utils.logging_setup import get_logger

Vec2 = pygame.math.Vector2

log = get_logger(__name__)


class GestureKind(enum.Enum):
    PAN = "pan"
    PINCH = "pinch"
    WHEEL = "wheel"


@dataclass
class CameraCommand:
    """Desired camera state before clamping."""
    position: Vec2
    zoom: float
    gesture: Optional[GestureKind] = None  # None for re-clamps


class GestureResolver:
    """Owns the contact tracker and pinch state for one camera."""

    def __init__(self, config: GestureConfig, tracker: Optional[ContactTracker] = None) -> None:
        self.config = config
        self.tracker = tracker if tracker is not None else ContactTracker(config.zoom_sensitivity)
        self.last_pinch_distance = 0.0
        self._pinching = False

    @property
    def pinching(self) -> bool:
        return self._pinching

    def reset(self) -> None:
        """Forget every contact and the pinch reference."""
        self.tracker.clear()
        self.last_pinch_distance = 0.0
        self._pinching = False

    def process_input_event(self, event: InputEvent, position: Tuple[float, float],
                            zoom: float) -> Optional[CameraCommand]:
        """
        Update contact/pinch state for `event` and return the candidate camera
        update, or None when the event doesn't move the camera.
        `position` and `zoom` are the camera's current values.
        """
        kind = event.kind
        if kind.is_pointer and not self.config.handle_mouse_events:
            return None

        if kind is InputKind.CONTACT_PRESS:
            if event.contact_id is not None:
                self._press(event.contact_id, event.position, ContactSource.TOUCH)
            return None
        if kind is InputKind.CONTACT_RELEASE:
            if event.contact_id is not None:
                self._release(event.contact_id)
            return None
        if kind is InputKind.BUTTON_PRESS:
            if event.contact_id == pygame.BUTTON_LEFT:
                self._press(settings.MOUSE_CONTACT_ID, event.position, ContactSource.MOUSE)
            return None
        if kind is InputKind.BUTTON_RELEASE:
            if event.contact_id == pygame.BUTTON_LEFT:
                self._release(settings.MOUSE_CONTACT_ID)
            return None
        if kind is InputKind.CONTACT_MOTION:
            if event.contact_id is None:
                return None
            return self._motion(event.contact_id, event, position, zoom)
        if kind is InputKind.POINTER_MOTION:
            return self._motion(settings.MOUSE_CONTACT_ID, event, position, zoom)
        if kind in (InputKind.WHEEL_UP, InputKind.WHEEL_DOWN):
            return self._wheel(kind, position, zoom)
        return None

    # -------------------------
    # Contact bookkeeping
    # -------------------------

    def _press(self, contact_id: int, position: Vec2, source: ContactSource) -> None:
        mouse_id = settings.MOUSE_CONTACT_ID
        if not self.config.move_while_zooming:
            # The mouse never joins a pinch in this mode, whichever contact came first.
            if source is ContactSource.MOUSE and self._touch_active():
                log.debug("Ignored mouse press while touch contacts are down")
                return
            if source is ContactSource.TOUCH and mouse_id in self.tracker:
                self.tracker.on_release(mouse_id)
                log.debug("Dropped mouse contact on touch press %s", contact_id)
        self.tracker.on_press(contact_id, position, source)
        self._sync_pinch()

    def _touch_active(self) -> bool:
        return any(c.source is ContactSource.TOUCH for c in self.tracker)

    def _release(self, contact_id: int) -> None:
        if self.tracker.on_release(contact_id):
            self._sync_pinch()

    def _is_pinch(self) -> bool:
        return self.tracker.active_count() == 2 and self.tracker.pinch_pair() is not None

    def _sync_pinch(self) -> None:
        pinching = self._is_pinch()
        if pinching and not self._pinching:
            # Seed from the real starting distance so the first step measures actual change.
            self.last_pinch_distance = self.tracker.pinch_distance() or 0.0
            log.debug("Pinch start slots=%s distance=%.1f", self.tracker.slots, self.last_pinch_distance)
        elif self._pinching and not pinching:
            log.debug("Pinch end")
        self._pinching = pinching

    # -------------------------
    # Gestures
    # -------------------------

    def _motion(self, contact_id: int, event: InputEvent, position: Tuple[float, float],
                zoom: float) -> Optional[CameraCommand]:
        if not self.tracker.on_move(contact_id, event.position):
            return None
        count = self.tracker.active_count()
        if count == 1:
            return CameraCommand(Vec2(position) - event.relative * zoom, zoom, GestureKind.PAN)
        if count == 2 and self.tracker.pinch_pair() is not None:
            return self._pinch(event, position, zoom)
        return None

    def _pinch(self, event: InputEvent, position: Tuple[float, float],
               zoom: float) -> Optional[CameraCommand]:
        cfg = self.config
        new_position = Vec2(position)
        new_zoom = zoom
        changed = False

        if cfg.move_while_zooming and event.relative.length_squared() > 0:
            new_position -= event.relative * settings.PINCH_PAN_FACTOR * zoom
            changed = True

        distance = self.tracker.pinch_distance() or 0.0
        if abs(distance - self.last_pinch_distance) > cfg.zoom_sensitivity:
            if distance < self.last_pinch_distance:
                new_zoom = zoom + cfg.zoom_increment
            else:
                new_zoom = zoom - cfg.zoom_increment
            self.last_pinch_distance = distance
            changed = True

        if not changed:
            return None
        return CameraCommand(new_position, new_zoom, GestureKind.PINCH)

    def _wheel(self, kind: InputKind, position: Tuple[float, float],
               zoom: float) -> Optional[CameraCommand]:
        # Any held contact is already driving a pan or a pinch.
        if self._pinching or self.tracker.active_count() > 0:
            return None
        step = self.config.mouse_zoom_increment
        new_zoom = zoom - step if kind is InputKind.WHEEL_UP else zoom + step
        return CameraCommand(Vec2(position), new_zoom, GestureKind.WHEEL)
