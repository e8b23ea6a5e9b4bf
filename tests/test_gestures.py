# tests/test_gestures.py
"""
GestureResolver: pan, pinch and wheel recognition (no clamping here).
"""
from __future__ import annotations

import pygame
import pytest

from panzoom.core.config import GestureConfig
from panzoom.core.gestures import GestureKind, GestureResolver
from panzoom.core.input_events import (
    InputEvent,
    InputKind,
    mouse_move,
    mouse_press,
    mouse_release,
    touch_move,
    touch_press,
    touch_release,
    wheel,
)
from panzoom.utils import settings

from util_asserts import assert_vec2_almost_equal

ORIGIN = pygame.Vector2(0, 0)


def make_resolver(**overrides) -> GestureResolver:
    base = dict(min_zoom=0.5, max_zoom=2.0, zoom_sensitivity=10.0, zoom_increment=0.05,
                mouse_zoom_increment=0.1, move_while_zooming=False)
    base.update(overrides)
    return GestureResolver(GestureConfig(**base))


def feed(resolver: GestureResolver, *events, pos=ORIGIN, zoom=1.0):
    """Feed events, return the last result."""
    result = None
    for e in events:
        result = resolver.process_input_event(e, pos, zoom)
    return result


# ---------------------------------------------------------------------------
# Pan
# ---------------------------------------------------------------------------

def test_press_and_release_never_produce_commands():
    r = make_resolver()
    assert feed(r, touch_press(0, (10, 10))) is None
    assert feed(r, touch_release(0)) is None


@pytest.mark.parametrize("zoom", [0.5, 1.0, 2.0])
def test_single_contact_pans_by_relative_times_zoom(zoom):
    r = make_resolver()
    feed(r, touch_press(0, (100, 100)))
    cmd = r.process_input_event(touch_move(0, (130, 120), (30, 20)), pygame.Vector2(5, 5), zoom)
    assert cmd is not None and cmd.gesture is GestureKind.PAN
    assert_vec2_almost_equal(None, cmd.position, (5 - 30 * zoom, 5 - 20 * zoom))
    assert cmd.zoom == zoom


def test_pan_does_not_mutate_camera_position():
    r = make_resolver()
    feed(r, touch_press(0, (0, 0)))
    current = pygame.Vector2(1, 1)
    r.process_input_event(touch_move(0, (50, 0), (50, 0)), current, 1.0)
    assert current == pygame.Vector2(1, 1)


def test_jitter_is_ignored():
    r = make_resolver()
    feed(r, touch_press(0, (100, 100)))
    assert feed(r, touch_move(0, (104, 103), (4, 3))) is None
    assert_vec2_almost_equal(None, r.tracker.get(0).last_position, (100, 100))


def test_motion_for_unknown_contact_is_ignored():
    r = make_resolver()
    assert feed(r, touch_move(3, (50, 50), (50, 50))) is None
    assert r.tracker.active_count() == 0


def test_contact_event_without_id_is_absorbed():
    r = make_resolver()
    assert feed(r, InputEvent(InputKind.CONTACT_PRESS, (1, 1))) is None
    assert feed(r, InputEvent(InputKind.CONTACT_MOTION, (40, 1), (39, 0))) is None
    assert r.tracker.active_count() == 0


def test_release_of_never_pressed_id_changes_nothing():
    r = make_resolver()
    feed(r, touch_press(0, (0, 0)))
    before = (r.tracker.slots, r.last_pinch_distance, r.pinching)
    assert feed(r, touch_release(5)) is None
    assert (r.tracker.slots, r.last_pinch_distance, r.pinching) == before


# ---------------------------------------------------------------------------
# Pinch
# ---------------------------------------------------------------------------

def test_second_contact_seeds_pinch_distance():
    r = make_resolver()
    feed(r, touch_press(0, (0, 0)), touch_press(1, (100, 0)))
    assert r.pinching
    assert r.last_pinch_distance == pytest.approx(100.0)


def test_fingers_together_zoom_out_by_increment():
    r = make_resolver()
    feed(r, touch_press(0, (0, 0)), touch_press(1, (100, 0)))
    cmd = feed(r, touch_move(1, (40, 0), (-60, 0)))
    assert cmd.gesture is GestureKind.PINCH
    assert cmd.zoom == pytest.approx(1.05)
    assert r.last_pinch_distance == pytest.approx(40.0)
    # move_while_zooming off: no pan
    assert_vec2_almost_equal(None, cmd.position, ORIGIN)


def test_fingers_apart_zoom_in_by_increment():
    r = make_resolver()
    feed(r, touch_press(0, (0, 0)), touch_press(1, (100, 0)))
    cmd = feed(r, touch_move(1, (160, 0), (60, 0)))
    assert cmd.zoom == pytest.approx(0.95)
    assert r.last_pinch_distance == pytest.approx(160.0)


def test_pinch_below_distance_threshold_has_no_zoom_step():
    r = make_resolver()
    feed(r, touch_press(0, (0, 0)), touch_press(1, (100, 0)))
    # Contact moves 15px (accepted) but the distance only changes by ~1.1px.
    assert feed(r, touch_move(1, (100, 15), (0, 15))) is None
    assert r.last_pinch_distance == pytest.approx(100.0)


def test_pinch_step_is_relative_to_last_step():
    r = make_resolver()
    feed(r, touch_press(0, (0, 0)), touch_press(1, (100, 0)))
    first = feed(r, touch_move(1, (80, 0), (-20, 0)))
    assert first.zoom == pytest.approx(1.05)
    # 80 -> 75 is a 5px contact move: rejected by the tracker, reference stays 80
    assert feed(r, touch_move(1, (75, 0), (-5, 0)), zoom=1.05) is None
    assert r.last_pinch_distance == pytest.approx(80.0)
    # 80 -> 65 measures 15px of change from the last step, not 35 from the start
    second = feed(r, touch_move(1, (65, 0), (-10, 0)), zoom=1.05)
    assert second.zoom == pytest.approx(1.10)
    assert r.last_pinch_distance == pytest.approx(65.0)


def test_move_while_zooming_pans_with_half_motion():
    r = make_resolver(move_while_zooming=True)
    feed(r, touch_press(0, (0, 0)), touch_press(1, (100, 0)))
    cmd = feed(r, touch_move(1, (100, 40), (0, 40)), zoom=2.0)
    assert cmd.gesture is GestureKind.PINCH
    assert_vec2_almost_equal(None, cmd.position, (0, -40 * 0.5 * 2.0))
    assert cmd.zoom == 2.0  # distance changed ~7.7px only


def test_pinch_start_reseeds_after_previous_pinch():
    r = make_resolver()
    feed(r, touch_press(0, (0, 0)), touch_press(1, (100, 0)), touch_release(1))
    assert not r.pinching
    feed(r, touch_press(2, (0, 300)))
    assert r.last_pinch_distance == pytest.approx(300.0)


def test_three_contacts_are_ignored():
    r = make_resolver()
    feed(r, touch_press(0, (0, 0)), touch_press(1, (100, 0)), touch_press(2, (200, 0)))
    assert not r.pinching
    assert feed(r, touch_move(2, (400, 0), (200, 0))) is None
    assert feed(r, touch_move(1, (20, 0), (-80, 0))) is None


def test_release_of_slot_contact_promotes_and_reseeds():
    r = make_resolver()
    feed(r, touch_press(0, (0, 0)), touch_press(1, (100, 0)), touch_press(2, (300, 0)))
    feed(r, touch_release(0))
    assert r.tracker.slots == (1, 2)
    assert r.pinching
    assert r.last_pinch_distance == pytest.approx(200.0)
    cmd = feed(r, touch_move(2, (150, 0), (-150, 0)))
    assert cmd.zoom == pytest.approx(1.05)


def test_pinch_back_to_single_contact_pans():
    r = make_resolver()
    feed(r, touch_press(0, (0, 0)), touch_press(1, (100, 0)), touch_release(0))
    cmd = feed(r, touch_move(1, (130, 0), (30, 0)))
    assert cmd.gesture is GestureKind.PAN
    assert_vec2_almost_equal(None, cmd.position, (-30, 0))


# ---------------------------------------------------------------------------
# Mouse
# ---------------------------------------------------------------------------

def test_left_drag_pans_like_a_touch():
    r = make_resolver()
    feed(r, mouse_press((10, 10)))
    assert settings.MOUSE_CONTACT_ID in r.tracker
    cmd = feed(r, mouse_move((40, 10), (30, 0)))
    assert cmd.gesture is GestureKind.PAN
    assert_vec2_almost_equal(None, cmd.position, (-30, 0))
    feed(r, mouse_release((40, 10)))
    assert r.tracker.active_count() == 0


def test_hover_without_button_does_nothing():
    r = make_resolver()
    assert feed(r, mouse_move((40, 10), (30, 0))) is None


def test_other_buttons_are_not_contacts():
    r = make_resolver()
    feed(r, mouse_press((10, 10), button=pygame.BUTTON_RIGHT))
    assert r.tracker.active_count() == 0


def test_mouse_ignored_when_disabled():
    r = make_resolver(handle_mouse_events=False)
    feed(r, mouse_press((10, 10)))
    assert r.tracker.active_count() == 0
    assert feed(r, wheel(up=True)) is None
    # touch still works
    feed(r, touch_press(0, (0, 0)))
    assert feed(r, touch_move(0, (20, 0), (20, 0))) is not None


def test_mouse_and_touch_pinch_when_moving_while_zooming():
    r = make_resolver(move_while_zooming=True)
    feed(r, mouse_press((0, 0)), touch_press(0, (100, 0)))
    assert r.tracker.slots == (settings.MOUSE_CONTACT_ID, 0)
    cmd = feed(r, touch_move(0, (40, 0), (-60, 0)))
    assert cmd.zoom == pytest.approx(1.05)


def test_touch_press_drops_mouse_contact_without_move_while_zooming():
    r = make_resolver(move_while_zooming=False)
    feed(r, mouse_press((0, 0)), touch_press(0, (100, 0)))
    assert settings.MOUSE_CONTACT_ID not in r.tracker
    assert not r.pinching
    cmd = feed(r, touch_move(0, (130, 0), (30, 0)))
    assert cmd.gesture is GestureKind.PAN


def test_mouse_press_after_touch_is_not_tracked_without_move_while_zooming():
    r = make_resolver(move_while_zooming=False)
    feed(r, touch_press(0, (100, 0)), mouse_press((0, 0)))
    assert settings.MOUSE_CONTACT_ID not in r.tracker
    assert r.tracker.slots == (0,)
    assert not r.pinching
    cmd = feed(r, touch_move(0, (40, 0), (-60, 0)))
    assert cmd.gesture is GestureKind.PAN
    assert cmd.zoom == 1.0
    # the untracked button neither drags nor errors on release
    assert feed(r, mouse_move((50, 0), (50, 0))) is None
    assert feed(r, mouse_release((50, 0))) is None
    assert r.tracker.active_count() == 1


def test_mouse_press_after_touch_pinches_with_move_while_zooming():
    r = make_resolver(move_while_zooming=True)
    feed(r, touch_press(0, (100, 0)), mouse_press((0, 0)))
    assert r.tracker.slots == (0, settings.MOUSE_CONTACT_ID)
    assert r.pinching


# ---------------------------------------------------------------------------
# Wheel
# ---------------------------------------------------------------------------

def test_wheel_up_zooms_in_one_step():
    r = make_resolver()
    cmd = feed(r, wheel(up=True))
    assert cmd.gesture is GestureKind.WHEEL
    assert cmd.zoom == pytest.approx(0.9)


def test_wheel_down_zooms_out_one_step():
    r = make_resolver()
    assert feed(r, wheel(up=False), zoom=1.5).zoom == pytest.approx(1.6)


def test_wheel_ignored_during_pinch():
    r = make_resolver()
    feed(r, touch_press(0, (0, 0)), touch_press(1, (100, 0)))
    assert feed(r, wheel(up=True)) is None


@pytest.mark.parametrize("press", [touch_press(0, (10, 10)), mouse_press((10, 10))])
def test_wheel_ignored_while_a_contact_pans(press):
    r = make_resolver()
    feed(r, press)
    assert feed(r, wheel(up=True)) is None
    r.reset()
    assert feed(r, wheel(up=True)).zoom == pytest.approx(0.9)


def test_reset_forgets_everything():
    r = make_resolver()
    feed(r, touch_press(0, (0, 0)), touch_press(1, (100, 0)))
    r.reset()
    assert r.tracker.active_count() == 0
    assert r.last_pinch_distance == 0.0
    assert not r.pinching
