import logging
import random

from switchable_eyes.config import WanderConfig
from switchable_eyes.eyes.eye_state import AppState, EyeGeometry
from switchable_eyes.utils.math_helpers import lerp

log = logging.getLogger("switchable-eyes")


class WanderModel:
    """Follows the cursor, and lets the gaze drift to random spots once it sits still."""

    def __init__(self, config: WanderConfig, geometry: EyeGeometry,
                 rng: random.Random):
        self._cfg = config
        self._geometry = geometry
        self._rng = rng
        self._next_pick = config.idle_threshold

    def update(self, state: AppState, cursor: tuple):
        if cursor != state.last_cursor:
            state.idle_frames = 0
            state.last_cursor = cursor
            self._next_pick = self._cfg.idle_threshold
        else:
            state.idle_frames += 1
            if state.idle_frames >= self._next_pick:
                self._pick_target(state)

        if state.dragging or state.frozen:
            state.gaze = self._geometry.center
        elif state.idle_frames < self._cfg.idle_threshold:
            state.gaze = (float(state.last_cursor[0]), float(state.last_cursor[1]))
        else:
            t = self._cfg.smoothing
            state.gaze = (
                lerp(state.gaze[0], state.wander_target[0], t),
                lerp(state.gaze[1], state.wander_target[1], t),
            )

    def _pick_target(self, state: AppState):
        state.wander_target = (
            self._rng.random() * self._geometry.width,
            self._rng.random() * self._geometry.height,
        )
        self._next_pick = (
            state.idle_frames
            + self._cfg.interval_min
            + int(self._rng.random() * self._cfg.interval_jitter)
        )
        log.debug(f"Wander target {state.wander_target[0]:.0f},{state.wander_target[1]:.0f}")
