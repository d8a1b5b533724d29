#!/usr/bin/env python3
"""Renders eye frames to PNG files for checking the look without opening a window."""

import os
import random
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from switchable_eyes.config import Config
from switchable_eyes.display.display_manager import rasterize
from switchable_eyes.eyes.animator import EyeAnimator
from switchable_eyes.eyes.eye_renderer import EyeRenderer
from switchable_eyes.eyes.eye_state import FrameInput, Mode


def _frame_after(config: Config, cursor: tuple, ticks: int = 1, creepy: bool = False,
                 frozen: bool = False):
    animator = EyeAnimator(config, rng=random.Random(7))
    if creepy:
        animator.set_mode(Mode.CREEPY)
    animator.state.frozen = frozen
    for i in range(ticks):
        animator.update(FrameInput(cursor=cursor, now_ms=i * 16))
    renderer = EyeRenderer(animator.geometry)
    return renderer.render(animator.state, animator.effects)


def main():
    config = Config()
    size = (config.window.width, config.window.height)

    previews = {
        "center": _frame_after(config, (240, 160)),
        "look_left": _frame_after(config, (0, 160)),
        "look_right": _frame_after(config, (480, 160)),
        "look_up": _frame_after(config, (240, 0)),
        "frozen": _frame_after(config, (0, 0), frozen=True),
        "creepy": _frame_after(config, (400, 60), creepy=True),
        "creepy_bleeding": _frame_after(config, (100, 300), ticks=600, creepy=True),
    }

    out_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "preview_output")
    os.makedirs(out_dir, exist_ok=True)

    for name, primitives in previews.items():
        img = rasterize(primitives, size, supersample=2)
        path = os.path.join(out_dir, f"{name}.png")
        img.save(path)
        print(f"Saved {path}")

    print(f"\nAll previews saved to {out_dir}/")


if __name__ == "__main__":
    main()
