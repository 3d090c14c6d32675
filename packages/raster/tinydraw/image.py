"""RGB8 pixel buffer with bottom-left origin drawing coordinates."""

from __future__ import annotations

import base64
import numbers
from typing import Sequence

import numpy as np

from tinydraw_core.config import DrawConfig

from . import lines, png_io, rects
from .errors import InvalidByteLength, InvalidCoordinate, OutOfBounds
from .models import Background, Color, Samples, coerce_color


class ImageRGB8:
    """In-memory RGB8 image that drawing calls mutate in place.

    Drawing coordinates put (0, 0) at the bottom-left corner with ``y`` growing
    upward. Samples are stored top row first, which is also the order used by
    ``to_bytes``/``from_bytes`` and PNG files.
    """

    def __init__(self, width: int, height: int, background: Sequence[int] = (0, 0, 0)) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"image dimensions must be non-negative, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self._background = Background.solid(background)
        self.samples: Samples = np.empty((self.width * self.height, 3), dtype=np.uint8)
        self._background.restore(self.samples)

    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes) -> "ImageRGB8":
        """Build an image from flat RGB bytes; ``clear()`` will restore them."""
        if width < 0 or height < 0:
            raise ValueError(f"image dimensions must be non-negative, got {width}x{height}")
        if len(data) != width * height * 3:
            raise InvalidByteLength(width, height, len(data))

        decoded = np.frombuffer(bytes(data), dtype=np.uint8).reshape((width * height, 3))
        image = cls.__new__(cls)
        image.width = int(width)
        image.height = int(height)
        image._background = Background.snapshot(decoded)
        image.samples = decoded.copy()
        return image

    @classmethod
    def from_png(cls, source: png_io.PngSource) -> "ImageRGB8":
        decoded = png_io.read_png(source)
        return cls.from_bytes(decoded.width, decoded.height, decoded.rgb)

    @property
    def background(self) -> Background:
        return self._background

    def to_bytes(self) -> bytes:
        return self.samples.tobytes()

    def to_png(self, destination: png_io.PngDestination, config: DrawConfig | None = None) -> None:
        png_io.encode_png(self, destination, config)

    def to_data_url(self, config: DrawConfig | None = None) -> str:
        b64 = base64.b64encode(png_io.encode_png_bytes(self, config)).decode("ascii")
        return f"data:image/png;base64,{b64}"

    def clear(self) -> None:
        self._background.restore(self.samples)

    def check_bounds(self, x: int, y: int) -> None:
        for value in (x, y):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidCoordinate(f"coordinates must be integers, got ({x!r}, {y!r})")
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            raise OutOfBounds(x, y, self.width, self.height)

    def index(self, x: int, y: int) -> int:
        """Linear sample index of logical (x, y); callers check bounds first."""
        return self.width * (self.height - 1 - int(y)) + int(x)

    def get_pixel(self, x: int, y: int) -> Color:
        self.check_bounds(x, y)
        r, g, b = self.samples[self.index(x, y)]
        return (int(r), int(g), int(b))

    def set_pixel(self, x: int, y: int, color: Sequence[int]) -> None:
        rgb = coerce_color(color)
        self.check_bounds(x, y)
        self.samples[self.index(x, y)] = rgb

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Sequence[int]) -> None:
        lines.draw_line(self, x1, y1, x2, y2, color)

    def draw_rectangle(
        self, x1: int, y1: int, x2: int, y2: int, color: Sequence[int], thickness: int = 1
    ) -> None:
        rects.draw_rectangle(self, x1, y1, x2, y2, color, thickness)

    def draw_rectangle_filled(self, x1: int, y1: int, x2: int, y2: int, color: Sequence[int]) -> None:
        rects.draw_rectangle_filled(self, x1, y1, x2, y2, color)

    def __repr__(self) -> str:
        return f"ImageRGB8(width={self.width}, height={self.height}, background={self._background.kind.value})"


def decode_png(source: png_io.PngSource) -> ImageRGB8:
    return ImageRGB8.from_png(source)


def encode_png(image: ImageRGB8, destination: png_io.PngDestination, config: DrawConfig | None = None) -> None:
    png_io.encode_png(image, destination, config)
