from switchable_eyes.eyes.creepy_effects import CreepyEffects, vein_pattern
from switchable_eyes.eyes.eye_state import AppState, EyeGeometry
from switchable_eyes.eyes.primitives import FilledCircle, StrokedCircle, StrokedLine
from switchable_eyes.utils.math_helpers import clamp_to_eye

# Normal mode palette
SHADOW = (100, 100, 100, 120)
SCLERA = (255, 255, 255, 255)
BORDER = (200, 200, 200, 255)
PUPIL = (0, 0, 0, 255)
HIGHLIGHT = (255, 255, 255, 255)

# Creepy mode palette
CREEPY_SHADOW = (40, 10, 10, 120)
BLOODSHOT = (240, 180, 180, 255)
CREEPY_BORDER = (100, 20, 20, 255)
PUPIL_RIM = (20, 5, 5, 255)
PUPIL_CORE = (0, 0, 0, 255)
RED_HIGHLIGHT = (200, 50, 50, 180)
TRAIL_RGB = (130, 10, 10)
DROP_RGB = (120, 15, 15)
DROP_TIP_RGB = (100, 10, 10)


class EyeRenderer:
    """Turns the current state into an ordered list of draw primitives.

    render() only reads the state it is given.
    """

    def __init__(self, geometry: EyeGeometry):
        self._geo = geometry

    def render(self, state: AppState, effects: CreepyEffects) -> list:
        if state.creepy:
            return self._render_creepy(state, effects)
        return self._render_normal(state)

    def _pupils(self, target: tuple, pupil_radius: float) -> list[tuple]:
        geo = self._geo
        return [clamp_to_eye(c, target, geo.eye_radius, pupil_radius)
                for c in geo.eye_centers]

    def _eye_base(self, shadow, sclera, border, border_width) -> tuple[list, list]:
        """Shadows and whites, with the borders returned separately so veins sit under them."""
        geo = self._geo
        r = geo.eye_radius
        off = geo.shadow_offset
        out = [FilledCircle((cx + off, cy + off), r, shadow) for cx, cy in geo.eye_centers]
        out += [FilledCircle(c, r, sclera) for c in geo.eye_centers]
        return out, [StrokedCircle(c, r, border_width, border) for c in geo.eye_centers]

    def _render_normal(self, state: AppState) -> list:
        pr = self._geo.pupil_radius
        if state.dragging or state.frozen:
            target = self._geo.center
        else:
            target = state.gaze
        pupils = self._pupils(target, pr)

        out, borders = self._eye_base(SHADOW, SCLERA, BORDER, 1.6)
        out += borders
        out += [FilledCircle(p, pr, PUPIL) for p in pupils]
        shift = pr // 3
        out += [FilledCircle((px - shift, py - shift), pr // 4, HIGHLIGHT)
                for px, py in pupils]
        return out

    def _render_creepy(self, state: AppState, effects: CreepyEffects) -> list:
        geo = self._geo
        pr = geo.creepy_pupil_radius
        if state.dragging or state.frozen:
            target = geo.center
        else:
            target = state.cursor
        sx, sy = effects.shake_offset
        pupils = [(px + sx, py + sy) for px, py in self._pupils(target, pr)]

        out, borders = self._eye_base(CREEPY_SHADOW, BLOODSHOT, CREEPY_BORDER, 2.4)
        for center in geo.eye_centers:
            out += vein_pattern(center)
        out += borders
        out += [FilledCircle(p, pr, PUPIL_RIM) for p in pupils]
        out += [FilledCircle(p, pr - 2.4, PUPIL_CORE) for p in pupils]
        shift = pr // 3
        out += [FilledCircle((px - shift, py - shift), pr // 6, RED_HIGHLIGHT)
                for px, py in pupils]

        for t in effects.trails:
            out.append(StrokedLine((t.x, t.y), (t.x, t.y + t.length), t.thickness,
                                   TRAIL_RGB + (t.alpha,)))
        for d in effects.drops:
            tip = (d.x, d.y + d.length)
            out.append(StrokedLine((d.x, d.y), tip, d.width, DROP_RGB + (d.alpha,)))
            out.append(FilledCircle(tip, d.width / 2 + 0.8, DROP_TIP_RGB + (d.alpha,)))
        return out
