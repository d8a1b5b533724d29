import logging
import random

from switchable_eyes.config import Config
from switchable_eyes.eyes.creepy_effects import CreepyEffects
from switchable_eyes.eyes.eye_state import (
    AppState, EyeGeometry, FrameInput, FrameRequests, Mode,
)
from switchable_eyes.eyes.gestures import GestureRecognizer
from switchable_eyes.eyes.wander import WanderModel

log = logging.getLogger("switchable-eyes")


class EyeAnimator:
    """State machine that advances the eyes by one frame per update."""

    def __init__(self, config: Config, rng: random.Random | None = None):
        self._rng = rng or random.Random()
        self.geometry = EyeGeometry.from_config(config.window, config.eyes)
        self.state = AppState()
        self.gestures = GestureRecognizer(config.gestures)
        self.wander = WanderModel(config.wander, self.geometry, self._rng)
        self.effects = CreepyEffects(config.creepy, self.geometry, self._rng)

    def update(self, frame: FrameInput) -> FrameRequests:
        """Consume one frame of input. Returns what the host should do next."""
        requests = FrameRequests()
        state = self.state

        if frame.exit_pressed:
            requests.terminate = True
            return requests

        state.cursor = frame.cursor

        if frame.freeze_pressed:
            self._toggle_freeze()

        # Right click wins over every left-button gesture this frame
        if frame.right_pressed:
            self._toggle_freeze()
            return requests

        if frame.left_pressed and self.gestures.press(frame.now_ms):
            self.set_mode(Mode.NORMAL if state.creepy else Mode.CREEPY)
            return requests

        self.gestures.poll_drag(state, frame)
        requests.window_position = self.gestures.track_drag(state, frame)

        if state.creepy:
            self.effects.tick()
        else:
            self.wander.update(state, frame.cursor)

        return requests

    def set_mode(self, mode: Mode):
        if mode is self.state.mode:
            return
        self.state.mode = mode
        # Blood never survives a switch back to normal
        if mode is Mode.NORMAL:
            self.effects.clear()
        log.info(f"Mode: {mode.name.lower()}")

    def _toggle_freeze(self):
        self.state.frozen = not self.state.frozen
        if self.state.frozen:
            self.state.gaze = self.geometry.center
        log.info(f"Frozen: {'on' if self.state.frozen else 'off'}")
