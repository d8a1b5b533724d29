import math


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b by factor t (0.0-1.0)."""
    return a + (b - a) * t


def clamp_to_eye(center: tuple, target: tuple, eye_radius: float,
                 pupil_radius: float) -> tuple:
    """Keep a pupil aimed at target fully inside the eye.

    Returns target unchanged when it already lies within eye_radius - pupil_radius
    of center, otherwise the point at that distance along the center->target ray.
    """
    dx = target[0] - center[0]
    dy = target[1] - center[1]
    dist = math.hypot(dx, dy)
    max_dist = eye_radius - pupil_radius

    # pupil_radius < eye_radius, so dist > 0 in this branch
    if dist > max_dist:
        return (center[0] + dx / dist * max_dist, center[1] + dy / dist * max_dist)
    return (target[0], target[1])
