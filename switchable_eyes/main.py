#!/usr/bin/env python3
"""Switchable Eyes - desktop overlay entry point and frame loop."""

import argparse
import logging
import random
import signal
import time

import yaml

from switchable_eyes.config import load_config
from switchable_eyes.display.display_manager import DisplayManager
from switchable_eyes.eyes.animator import EyeAnimator
from switchable_eyes.eyes.eye_renderer import EyeRenderer
from switchable_eyes.eyes.eye_state import Mode

log = logging.getLogger("switchable-eyes")


class SwitchableEyes:
    def __init__(self, config_path: str = "config.yaml", seed: int | None = None,
                 creepy: bool = False):
        self.config = load_config(config_path)
        self._rng = random.Random(seed)
        self._start_creepy = creepy
        self._running = False

        self._window = None
        self._display = None
        self._animator = None
        self._renderer = None
        self._frame_ms = 1

    def start(self):
        # Set up logging
        logging.basicConfig(
            level=getattr(logging, self.config.log_level),
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

        # Tk is only needed once a window is actually opened
        from switchable_eyes.display.overlay_window import OverlayWindow

        self.attach(OverlayWindow(self.config.window))
        log.info(f"Entering frame loop at {self.config.window.fps_target} FPS target")

        self._window.schedule(0, self._tick)
        try:
            self._window.run()
        except KeyboardInterrupt:
            log.info("Interrupted")
        finally:
            self._running = False
            log.info("Done")

    def attach(self, window):
        """Wire the animator, renderer and display to a window."""
        cfg = self.config.window
        self._window = window
        self._display = DisplayManager(window, cfg)
        self._animator = EyeAnimator(self.config, rng=self._rng)
        if self._start_creepy:
            self._animator.set_mode(Mode.CREEPY)
        self._renderer = EyeRenderer(self._animator.geometry)
        self._frame_ms = max(1, round(1000 / cfg.fps_target))
        self._running = True

    def _tick(self):
        if not self._running:
            self._window.close()
            return

        started = time.monotonic()
        frame = self._window.poll(int(time.time() * 1000))
        requests = self._animator.update(frame)

        if requests.terminate:
            log.info("Exit requested")
            self._running = False
            self._window.close()
            return

        if requests.window_position is not None:
            self._window.move(*requests.window_position)

        primitives = self._renderer.render(self._animator.state, self._animator.effects)
        self._display.update(primitives)

        # Frame rate limiting
        elapsed_ms = (time.monotonic() - started) * 1000
        self._window.schedule(max(1, int(self._frame_ms - elapsed_ms)), self._tick)

    def stop(self):
        self._running = False


def main():
    parser = argparse.ArgumentParser(description="Switchable Eyes")
    parser.add_argument("--config", default="config.yaml", help="Config file path")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random effects")
    parser.add_argument("--creepy", action="store_true", help="Start in creepy mode")
    args = parser.parse_args()

    try:
        app = SwitchableEyes(config_path=args.config, seed=args.seed, creepy=args.creepy)
    except (yaml.YAMLError, OSError) as e:
        parser.exit(1, f"Could not load config {args.config}: {e}\n")

    signal.signal(signal.SIGTERM, lambda *_: app.stop())

    app.start()


if __name__ == "__main__":
    main()
