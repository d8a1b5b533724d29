"""Tests for the per-frame update: gestures, freeze, modes and effects together."""

import random

import pytest

from switchable_eyes.config import Config
from switchable_eyes.eyes.animator import EyeAnimator
from switchable_eyes.eyes.eye_renderer import EyeRenderer
from switchable_eyes.eyes.eye_state import FrameInput, Mode


def _animator(rng=None):
    return EyeAnimator(Config(), rng=rng or random.Random(1))


def _frame(now_ms, cursor=(50, 50), window=(100, 100), **kwargs):
    return FrameInput(cursor=cursor, window_position=window, now_ms=now_ms, **kwargs)


class TestDoubleClick:
    def test_two_quick_clicks_toggle_mode_once_without_moving(self):
        eyes = _animator()
        moves = []
        moves.append(eyes.update(_frame(0, left_pressed=True, left_held=True)))
        moves.append(eyes.update(_frame(50)))
        moves.append(eyes.update(_frame(100, left_pressed=True, left_held=True)))
        for t in range(116, 500, 16):
            moves.append(eyes.update(_frame(t)))

        assert eyes.state.mode == Mode.CREEPY
        assert all(r.window_position is None for r in moves)
        assert not eyes.state.dragging

    def test_double_click_held_does_not_start_a_drag(self):
        eyes = _animator()
        eyes.update(_frame(0, left_pressed=True, left_held=True))
        eyes.update(_frame(100, left_pressed=True, left_held=True))
        for t in range(116, 600, 16):
            r = eyes.update(_frame(t, left_held=True))
            assert r.window_position is None
        assert not eyes.state.dragging

    def test_second_double_click_switches_back_and_clears_blood(self, scripted_rng):
        eyes = _animator(scripted_rng([0.0]))
        eyes.update(_frame(0, left_pressed=True, left_held=True))
        eyes.update(_frame(100, left_pressed=True, left_held=True))
        assert eyes.state.mode == Mode.CREEPY

        for t in range(1000, 1000 + 100 * 16, 16):
            eyes.update(_frame(t))
        assert eyes.effects.drops
        assert eyes.effects.trails

        eyes.update(_frame(5000, left_pressed=True, left_held=True))
        eyes.update(_frame(5100, left_pressed=True, left_held=True))
        assert eyes.state.mode == Mode.NORMAL
        assert len(eyes.effects.drops) == 0
        assert len(eyes.effects.trails) == 0

    def test_third_quick_click_starts_its_own_drag_after_the_delay(self):
        eyes = _animator()
        eyes.update(_frame(0, left_pressed=True, left_held=True))
        eyes.update(_frame(100, left_pressed=True, left_held=True))
        eyes.update(_frame(150, left_pressed=True, left_held=True))
        assert eyes.state.mode == Mode.CREEPY

        # The first click's deadline is gone; the third click's is 150 + 200
        for t in (200, 250, 300, 349):
            eyes.update(_frame(t, left_held=True))
            assert not eyes.state.dragging
        eyes.update(_frame(350, left_held=True))
        assert eyes.state.dragging
        assert eyes.state.mode == Mode.CREEPY


class TestDrag:
    def test_held_click_drags_the_window_after_the_grace_delay(self):
        eyes = _animator()
        r = eyes.update(_frame(0, left_pressed=True, left_held=True))
        assert r.window_position is None

        for t in range(20, 200, 20):
            r = eyes.update(_frame(t, left_held=True))
            assert r.window_position is None
            assert not eyes.state.dragging

        r = eyes.update(_frame(200, left_held=True))
        assert eyes.state.dragging
        assert r.window_position == (100, 100)

        r = eyes.update(_frame(220, cursor=(70, 60), left_held=True))
        assert r.window_position == (120, 110)

        # Host moved the window; cursor sits at the same screen spot
        r = eyes.update(_frame(240, cursor=(50, 50), window=(120, 110), left_held=True))
        assert r.window_position == (120, 110)

        r = eyes.update(_frame(300, cursor=(50, 50), window=(120, 110)))
        assert r.window_position is None
        assert not eyes.state.dragging

    def test_quick_click_never_moves_the_window(self):
        eyes = _animator()
        eyes.update(_frame(0, left_pressed=True, left_held=True))
        for t in range(16, 600, 16):
            r = eyes.update(_frame(t, cursor=(t % 90, 40)))
            assert r.window_position is None
        assert not eyes.state.dragging

    def test_dragging_centers_the_gaze(self):
        eyes = _animator()
        eyes.update(_frame(0, left_pressed=True, left_held=True))
        eyes.update(_frame(250, cursor=(5, 5), left_held=True))
        assert eyes.state.dragging
        assert eyes.state.gaze == (240.0, 160.0)


class TestFreezeAndExit:
    def test_right_click_toggles_freeze(self):
        eyes = _animator()
        eyes.update(_frame(0, right_pressed=True))
        assert eyes.state.frozen
        eyes.update(_frame(16, right_pressed=True))
        assert not eyes.state.frozen

    def test_right_click_suppresses_left_click_processing(self):
        eyes = _animator()
        eyes.update(_frame(0, left_pressed=True, left_held=True))
        eyes.update(_frame(100, left_pressed=True, left_held=True, right_pressed=True))
        assert eyes.state.frozen
        assert eyes.state.mode == Mode.NORMAL
        assert eyes.gestures.state.click_count == 1
        assert eyes.gestures.state.last_click_ms == 0

    def test_right_click_centers_the_pupils_on_the_same_frame(self):
        eyes = _animator()
        eyes.update(_frame(0, cursor=(0, 0)))
        eyes.update(_frame(16, cursor=(0, 0), right_pressed=True))
        assert eyes.state.frozen
        assert eyes.state.gaze == (240.0, 160.0)

        prims = EyeRenderer(eyes.geometry).render(eyes.state, eyes.effects)
        left_pupil, right_pupil = prims[6], prims[7]
        assert left_pupil.center == pytest.approx((232.0, 160.0))
        assert right_pupil.center == pytest.approx((248.0, 160.0))

    def test_frozen_pupils_stay_centered_while_the_cursor_moves(self):
        eyes = _animator()
        eyes.update(_frame(0, right_pressed=True))
        for t in range(16, 200, 16):
            eyes.update(_frame(t, cursor=(t, 300)))
            prims = EyeRenderer(eyes.geometry).render(eyes.state, eyes.effects)
            assert prims[6].center == pytest.approx((232.0, 160.0))

    def test_freeze_key_toggles_freeze(self):
        eyes = _animator()
        eyes.update(_frame(0, freeze_pressed=True))
        assert eyes.state.frozen
        assert eyes.state.gaze == (240.0, 160.0)

    def test_freeze_key_and_right_click_in_one_frame_cancel_out(self):
        eyes = _animator()
        eyes.update(_frame(0, freeze_pressed=True, right_pressed=True))
        assert not eyes.state.frozen

    def test_exit_key_requests_termination(self):
        eyes = _animator()
        r = eyes.update(_frame(0, exit_pressed=True, left_pressed=True, right_pressed=True))
        assert r.terminate
        assert not eyes.state.frozen
        assert eyes.gestures.state.last_click_ms is None


class TestModeRouting:
    def test_normal_mode_tracks_idle_time(self):
        eyes = _animator()
        for t in range(0, 10 * 16, 16):
            eyes.update(_frame(t, cursor=(30, 30)))
        assert eyes.state.idle_frames == 9

    def test_creepy_mode_skips_idle_tracking_and_ticks_effects(self, scripted_rng):
        eyes = _animator(scripted_rng([0.0]))
        eyes.set_mode(Mode.CREEPY)
        for t in range(0, 10 * 16, 16):
            eyes.update(_frame(t, cursor=(30, 30)))
        assert eyes.state.idle_frames == 0
        assert eyes.state.cursor == (30, 30)
        assert len(eyes.effects.trails) == 10

    def test_entering_creepy_mode_keeps_effect_state(self, scripted_rng):
        eyes = _animator(scripted_rng([0.0]))
        eyes.set_mode(Mode.CREEPY)
        eyes.effects.shake = 2.0
        eyes.set_mode(Mode.CREEPY)
        assert eyes.effects.shake == 2.0

    def test_cursor_is_recorded_every_frame(self):
        eyes = _animator()
        eyes.update(_frame(0, cursor=(7, 8), right_pressed=True))
        assert eyes.state.cursor == (7, 8)
