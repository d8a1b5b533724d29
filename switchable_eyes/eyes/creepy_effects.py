"""Horror-mode effects: pupil twitch, falling blood drops, fading streaks and veins."""

import logging
import math
import random
from dataclasses import dataclass

from switchable_eyes.config import CreepyConfig
from switchable_eyes.eyes.eye_state import EyeGeometry
from switchable_eyes.eyes.primitives import StrokedLine

log = logging.getLogger("switchable-eyes")

# Horizontal scatter of a new drop around the eye center
DROP_SPREAD = 48
# Streaks start this far above the bottom edge of the eye
TRAIL_INSET = 8

# Radial veins: (inner radius, outer radius, width, color)
VEIN_ANGLES = tuple(i * 0.5 for i in range(12))
RADIAL_VEINS = (
    (20, 48, 0.96, (180, 30, 30, 150)),
    (28, 56, 0.64, (160, 40, 40, 120)),
)
# Cross veins as (x0, y0, x1, y1) offsets from the eye center
CROSS_VEINS = (
    (-32, -16, 24, -12),
    (-24, 20, 32, 16),
    (-16, -32, -8, 28),
    (12, -28, 20, 24),
    (-40, 0, 36, 4),
    (-20, -24, 16, 28),
)
CROSS_VEIN_WIDTH = 0.72
CROSS_VEIN_COLOR = (170, 35, 35, 130)


@dataclass
class BloodDrop:
    x: float
    y: float
    speed: float
    length: float
    width: float
    alpha: int


@dataclass
class BloodTrail:
    x: float
    y: float
    length: float
    thickness: float
    alpha: int


def vein_pattern(center: tuple) -> list[StrokedLine]:
    """Bloodshot texture for one eye. Same center, same segments, every time."""
    cx, cy = center
    lines = []
    for angle in VEIN_ANGLES:
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        for inner, outer, width, color in RADIAL_VEINS:
            lines.append(StrokedLine(
                start=(cx + cos_a * inner, cy + sin_a * inner),
                end=(cx + cos_a * outer, cy + sin_a * outer),
                width=width,
                color=color,
            ))
    for x0, y0, x1, y1 in CROSS_VEINS:
        lines.append(StrokedLine(
            start=(cx + x0, cy + y0),
            end=(cx + x1, cy + y1),
            width=CROSS_VEIN_WIDTH,
            color=CROSS_VEIN_COLOR,
        ))
    return lines


class CreepyEffects:
    """Per-frame state of the creepy mode effects."""

    def __init__(self, config: CreepyConfig, geometry: EyeGeometry,
                 rng: random.Random):
        self._cfg = config
        self._geometry = geometry
        self._rng = rng

        self.drops: list[BloodDrop] = []
        self.trails: list[BloodTrail] = []

        # Twitch magnitude and the offset both pupils share this frame
        self.shake = 0.0
        self.shake_offset = (0.0, 0.0)

        self._shake_timer = 0
        self._drop_timer = 0

    def tick(self):
        self._update_shake()
        self._maybe_spawn_drop()
        self._maybe_spawn_trail()
        self._advance_drops()
        self._fade_trails()

    def clear(self):
        self.drops = []
        self.trails = []

    def _update_shake(self):
        cfg = self._cfg
        self._shake_timer += 1
        if self._shake_timer > cfg.shake_cooldown and self._rng.random() < cfg.shake_chance:
            self.shake = self._rng.uniform(cfg.shake_min, cfg.shake_max)
            self._shake_timer = 0
        if self.shake > 0:
            self.shake *= cfg.shake_decay

        if self.shake > 0:
            self.shake_offset = (
                (self._rng.random() - 0.5) * self.shake,
                (self._rng.random() - 0.5) * self.shake,
            )
        else:
            self.shake_offset = (0.0, 0.0)

    def _pick_eye(self) -> tuple:
        if self._rng.random() < 0.5:
            return self._geometry.left_center
        return self._geometry.right_center

    def _maybe_spawn_drop(self):
        cfg = self._cfg
        self._drop_timer += 1
        if self._drop_timer <= cfg.drop_interval or self._rng.random() >= cfg.drop_chance:
            return

        r = self._rng.random
        eye_x, eye_y = self._pick_eye()
        drop = BloodDrop(
            x=eye_x + (r() - 0.5) * DROP_SPREAD,
            y=eye_y + self._geometry.eye_radius,
            speed=0.3 + r() * 1.2,
            length=20 + r() * 32,
            width=3.2 + r() * 3.2,
            alpha=180 + int(r() * 70),
        )
        self.drops.append(drop)
        self._drop_timer = 0
        log.debug(f"Blood drop at {drop.x:.0f},{drop.y:.0f} ({len(self.drops)} live)")

    def _maybe_spawn_trail(self):
        if self._rng.random() >= self._cfg.trail_chance:
            return

        r = self._rng.random
        eye_x, eye_y = self._pick_eye()
        radius = self._geometry.eye_radius
        self.trails.append(BloodTrail(
            x=eye_x + (r() - 0.5) * radius * 0.8,
            y=eye_y + radius - TRAIL_INSET,
            length=16 + r() * 28,
            thickness=1.6 + r() * 2.4,
            alpha=130 + int(r() * 90),
        ))

    def _advance_drops(self):
        cfg = self._cfg
        floor_y = self._geometry.height + cfg.drop_offscreen_margin
        kept = []
        for drop in self.drops:
            drop.y += drop.speed
            drop.alpha = int(drop.alpha * cfg.drop_decay)
            if drop.y > floor_y or drop.alpha < cfg.drop_min_alpha:
                continue
            kept.append(drop)
        self.drops = kept

    def _fade_trails(self):
        cfg = self._cfg
        kept = []
        for trail in self.trails:
            trail.alpha = int(trail.alpha * cfg.trail_decay)
            if trail.alpha >= cfg.trail_min_alpha:
                kept.append(trail)
        self.trails = kept
