"""Draw primitives handed to the rasterizer, in paint order."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FilledCircle:
    center: tuple
    radius: float
    color: tuple
    antialias: bool = False


@dataclass(frozen=True)
class StrokedCircle:
    center: tuple
    radius: float
    width: float
    color: tuple


@dataclass(frozen=True)
class StrokedLine:
    start: tuple
    end: tuple
    width: float
    color: tuple
