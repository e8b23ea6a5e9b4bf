# panzoom/core/input_events.py
"""
Typed input events consumed by the gesture resolver, plus translation from
raw pygame events.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Tuple

import pygame

import panzoom.utils.settings as settings

Vec2 = pygame.math.Vector2


class InputKind(enum.Enum):
    CONTACT_PRESS = "contact_press"
    CONTACT_RELEASE = "contact_release"
    CONTACT_MOTION = "contact_motion"
    BUTTON_PRESS = "button_press"
    BUTTON_RELEASE = "button_release"
    POINTER_MOTION = "pointer_motion"
    WHEEL_UP = "wheel_up"
    WHEEL_DOWN = "wheel_down"

    @property
    def is_pointer(self) -> bool:
        """True for mouse-originated kinds (gated by handle_mouse_events)."""
        return self in _POINTER_KINDS


_POINTER_KINDS = frozenset({
    InputKind.BUTTON_PRESS,
    InputKind.BUTTON_RELEASE,
    InputKind.POINTER_MOTION,
    InputKind.WHEEL_UP,
    InputKind.WHEEL_DOWN,
})


@dataclass
class InputEvent:
    """One input event. `contact_id` is the finger id for touch kinds and the
    button number for button kinds; motion kinds carry `relative`."""
    kind: InputKind
    position: Vec2 = field(default_factory=Vec2)
    relative: Vec2 = field(default_factory=Vec2)
    contact_id: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.position, Vec2):
            self.position = Vec2(self.position)
        if not isinstance(self.relative, Vec2):
            self.relative = Vec2(self.relative)


# Small helpers for authoring
def touch_press(contact_id: int, pos: Tuple[float, float]) -> InputEvent:
    return InputEvent(InputKind.CONTACT_PRESS, Vec2(pos), contact_id=contact_id)

def touch_release(contact_id: int, pos: Tuple[float, float] = (0.0, 0.0)) -> InputEvent:
    return InputEvent(InputKind.CONTACT_RELEASE, Vec2(pos), contact_id=contact_id)

def touch_move(contact_id: int, pos: Tuple[float, float], rel: Tuple[float, float]) -> InputEvent:
    return InputEvent(InputKind.CONTACT_MOTION, Vec2(pos), Vec2(rel), contact_id=contact_id)

def mouse_press(pos: Tuple[float, float], button: int = pygame.BUTTON_LEFT) -> InputEvent:
    return InputEvent(InputKind.BUTTON_PRESS, Vec2(pos), contact_id=button)

def mouse_release(pos: Tuple[float, float], button: int = pygame.BUTTON_LEFT) -> InputEvent:
    return InputEvent(InputKind.BUTTON_RELEASE, Vec2(pos), contact_id=button)

def mouse_move(pos: Tuple[float, float], rel: Tuple[float, float]) -> InputEvent:
    return InputEvent(InputKind.POINTER_MOTION, Vec2(pos), Vec2(rel), contact_id=settings.MOUSE_CONTACT_ID)

def wheel(up: bool, pos: Tuple[float, float] = (0.0, 0.0)) -> InputEvent:
    return InputEvent(InputKind.WHEEL_UP if up else InputKind.WHEEL_DOWN, Vec2(pos))


# ---------------------------------------------------------------------------
# pygame translation
# ---------------------------------------------------------------------------

_ID_BITS = 32
_ID_MASK = (1 << _ID_BITS) - 1


def finger_contact_id(touch_id: int, finger_id: int) -> int:
    """
    One non-negative contact id per (device, finger). Finger ids are only
    unique per touch device, so two devices can both report finger 0.
    """
    return ((int(touch_id) & _ID_MASK) << _ID_BITS) | (int(finger_id) & _ID_MASK)


def from_pygame(event: pygame.event.Event,
                viewport_size: Tuple[float, float]) -> Optional[InputEvent]:
    """
    Translate a pygame event, or return None for anything irrelevant.

    Finger events carry normalized coordinates and are scaled by the viewport
    size. SDL also synthesizes mouse events from the first finger (flagged
    `touch=True`); those are dropped so a finger is never tracked twice.
    Wheel buttons 4/5 are dropped in favour of MOUSEWHEEL.
    """
    etype = event.type
    vw, vh = viewport_size

    if etype in (pygame.FINGERDOWN, pygame.FINGERUP, pygame.FINGERMOTION):
        pos = Vec2(event.x * vw, event.y * vh)
        cid = finger_contact_id(getattr(event, "touch_id", 0), event.finger_id)
        if etype == pygame.FINGERDOWN:
            return InputEvent(InputKind.CONTACT_PRESS, pos, contact_id=cid)
        if etype == pygame.FINGERUP:
            return InputEvent(InputKind.CONTACT_RELEASE, pos, contact_id=cid)
        rel = Vec2(event.dx * vw, event.dy * vh)
        return InputEvent(InputKind.CONTACT_MOTION, pos, rel, contact_id=cid)

    if getattr(event, "touch", False):
        return None

    if etype in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
        if event.button in (4, 5):
            return None
        kind = InputKind.BUTTON_PRESS if etype == pygame.MOUSEBUTTONDOWN else InputKind.BUTTON_RELEASE
        return InputEvent(kind, Vec2(event.pos), contact_id=int(event.button))

    if etype == pygame.MOUSEMOTION:
        return InputEvent(InputKind.POINTER_MOTION, Vec2(event.pos), Vec2(event.rel),
                          contact_id=settings.MOUSE_CONTACT_ID)

    if etype == pygame.MOUSEWHEEL:
        dy = event.y
        if getattr(event, "flipped", False):
            dy = -dy
        if dy == 0:
            return None
        # MOUSEWHEEL carries no position; ask the mouse only when a window exists.
        has_window = pygame.display.get_init() and pygame.display.get_surface() is not None
        pos = Vec2(pygame.mouse.get_pos()) if has_window else Vec2()
        return InputEvent(InputKind.WHEEL_UP if dy > 0 else InputKind.WHEEL_DOWN, pos)

    return None
