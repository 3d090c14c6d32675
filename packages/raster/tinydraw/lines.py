"""Anti-aliased line rasterization (Xiaolin Wu style, blending into existing pixels)."""

from __future__ import annotations

import math
from typing import Iterator, NamedTuple, Sequence

import numpy as np

from .models import Color, coerce_color

SNAP_EPSILON = 1e-5


class LineSample(NamedTuple):
    """One pixel touched by a line.

    ``weight`` applies to the line color and ``keep`` to the pixel already in
    the buffer. A sample with ``keep == 0.0`` replaces the pixel outright.
    """

    x: int
    y: int
    weight: float
    keep: float


def line_samples(x1: int, y1: int, x2: int, y2: int) -> Iterator[LineSample]:
    """Yield the pixels and coverage fractions of the segment (x1, y1)-(x2, y2).

    Coordinates are logical (origin bottom-left). Every iterated column (or row
    for steep lines) produces one exact sample or a pair whose weights add to 1.
    """
    if x1 == x2:
        for y in range(min(y1, y2), max(y1, y2) + 1):
            yield LineSample(x1, y, 1.0, 0.0)
        return

    slope = (float(y1) - float(y2)) / (float(x1) - float(x2))

    if abs(slope) <= 1.0:
        if x1 > x2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        for x in range(x1, x2 + 1):
            y = slope * (x - x1) + y1
            if abs(y - round(y)) < SNAP_EPSILON:
                yield LineSample(x, int(round(y)), 1.0, 0.0)
                continue
            # upper pixel gets the distance above floor(y), the lower one the rest
            upper = y - math.floor(y)
            lower = 1.0 - upper
            yield LineSample(x, math.ceil(y), upper, lower)
            yield LineSample(x, math.floor(y), lower, upper)
    else:
        if y1 > y2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        for y in range(y1, y2 + 1):
            x = (y - y1) / slope + x1
            if abs(x - round(x)) < SNAP_EPSILON:
                yield LineSample(int(round(x)), y, 1.0, 0.0)
                continue
            left = math.ceil(x) - x
            right = 1.0 - left
            yield LineSample(math.floor(x), y, left, right)
            yield LineSample(math.floor(x) + 1, y, right, left)


def blend_channels(old: np.ndarray, color: Color, weight: float, keep: float) -> np.ndarray:
    """Mix ``color`` into ``old`` per channel, rounding halves up."""
    mixed = old.astype(np.float64) * keep + np.asarray(color, dtype=np.float64) * weight
    return np.floor(mixed + 0.5).clip(0, 255).astype(np.uint8)


def draw_line(image, x1: int, y1: int, x2: int, y2: int, color: Sequence[int]) -> None:
    """Render an anti-aliased segment onto ``image`` in place.

    Raises ``OutOfBounds`` before touching any pixel if an endpoint lies
    outside the image.
    """
    rgb = coerce_color(color)
    image.check_bounds(x1, y1)
    image.check_bounds(x2, y2)

    samples = image.samples
    for sample in line_samples(x1, y1, x2, y2):
        index = image.index(sample.x, sample.y)
        if sample.keep == 0.0:
            samples[index] = rgb
        else:
            samples[index] = blend_channels(samples[index], rgb, sample.weight, sample.keep)


__all__ = ["SNAP_EPSILON", "LineSample", "blend_channels", "draw_line", "line_samples"]
