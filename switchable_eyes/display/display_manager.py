import numpy as np
from PIL import Image, ImageDraw

from switchable_eyes.config import WindowConfig
from switchable_eyes.eyes.primitives import FilledCircle, StrokedCircle, StrokedLine

# Scale used for antialiased primitives when no supersampling is configured
AA_SCALE = 4


def _stroke_width(width: float, scale: int) -> int:
    return max(1, round(width * scale))


def _bounds(prim, scale: int) -> tuple:
    """Pixel bounding box of a primitive at the given scale, stroke included."""
    if isinstance(prim, StrokedLine):
        pad = _stroke_width(prim.width, scale)
        xs = (prim.start[0] * scale, prim.end[0] * scale)
        ys = (prim.start[1] * scale, prim.end[1] * scale)
        return (min(xs) - pad, min(ys) - pad, max(xs) + pad, max(ys) + pad)
    pad = prim.radius * scale + 1
    if isinstance(prim, StrokedCircle):
        pad += _stroke_width(prim.width, scale)
    cx, cy = prim.center[0] * scale, prim.center[1] * scale
    return (cx - pad, cy - pad, cx + pad, cy + pad)


def _draw(draw: ImageDraw.ImageDraw, prim, scale: int, ox: float = 0, oy: float = 0):
    if isinstance(prim, StrokedLine):
        points = [
            (prim.start[0] * scale + ox, prim.start[1] * scale + oy),
            (prim.end[0] * scale + ox, prim.end[1] * scale + oy),
        ]
        draw.line(points, fill=prim.color, width=_stroke_width(prim.width, scale))
        return

    r = prim.radius * scale
    cx = prim.center[0] * scale + ox
    cy = prim.center[1] * scale + oy
    box = [cx - r, cy - r, cx + r, cy + r]
    if isinstance(prim, FilledCircle):
        draw.ellipse(box, fill=prim.color)
    else:
        draw.ellipse(box, outline=prim.color, width=_stroke_width(prim.width, scale))


def rasterize(primitives: list, size: tuple, supersample: int = 1) -> Image.Image:
    """Paint primitives in order onto a transparent RGBA image of the given size."""
    scale = max(1, supersample)
    if scale == 1 and any(getattr(p, "antialias", False) for p in primitives):
        scale = AA_SCALE

    w, h = size[0] * scale, size[1] * scale
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    direct = ImageDraw.Draw(canvas)

    for prim in primitives:
        if prim.color[3] >= 255:
            _draw(direct, prim, scale)
            continue

        # ImageDraw overwrites RGBA pixels, so translucent shapes are
        # composited from a layer covering just their bounding box
        x0, y0, x1, y1 = _bounds(prim, scale)
        x0, y0 = max(0, int(x0)), max(0, int(y0))
        x1, y1 = min(w, int(x1) + 1), min(h, int(y1) + 1)
        if x1 <= x0 or y1 <= y0:
            continue
        layer = Image.new("RGBA", (x1 - x0, y1 - y0), (0, 0, 0, 0))
        _draw(ImageDraw.Draw(layer), prim, scale, -x0, -y0)
        canvas.alpha_composite(layer, dest=(x0, y0))

    if scale > 1:
        canvas = canvas.resize(size, Image.LANCZOS)
    return canvas


def to_chromakey(image: Image.Image, key: tuple, threshold: int = 16) -> Image.Image:
    """Flatten an RGBA image to RGB, painting see-through pixels with the key color."""
    arr = np.asarray(image.convert("RGBA"), dtype=np.uint8)
    rgb = arr[:, :, :3].copy()
    rgb[arr[:, :, 3] < threshold] = key
    return Image.fromarray(rgb)


class DisplayManager:
    """Rasterizes frames and pushes them to the overlay window."""

    def __init__(self, window, config: WindowConfig):
        self._window = window
        self._size = (config.width, config.height)
        self._key = tuple(config.chromakey)
        self._supersample = config.supersample
        self._threshold = config.key_threshold

    def update(self, primitives: list):
        image = rasterize(primitives, self._size, self._supersample)
        self._window.show(to_chromakey(image, self._key, self._threshold))
