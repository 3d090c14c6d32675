"""Typed raster models: colors and the buffer background."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidColor

Color = Tuple[int, int, int]
Samples = NDArray[np.uint8]  # (width * height, 3), top row first


def coerce_color(value: Sequence[int] | NDArray[np.generic]) -> Color:
    """Validate a 3-channel 8-bit color and return it as an ``(r, g, b)`` tuple."""
    try:
        raw = list(value)
    except TypeError as exc:
        raise InvalidColor(f"color must be a sequence of 3 integers, got {value!r}") from exc
    if any(isinstance(c, bool) or not isinstance(c, numbers.Integral) for c in raw):
        raise InvalidColor(f"color channels must be integers, got {value!r}")
    channels = [int(c) for c in raw]
    if len(channels) != 3:
        raise InvalidColor(f"color must have exactly 3 channels, got {len(channels)}")
    if any(c < 0 or c > 255 for c in channels):
        raise InvalidColor(f"color channels must be within 0..255, got {tuple(channels)}")
    return (channels[0], channels[1], channels[2])


class BackgroundKind(str, Enum):
    SOLID = "solid"
    SNAPSHOT = "snapshot"


@dataclass(frozen=True, eq=False)
class Background:
    """What ``clear()`` restores: a solid fill color or a captured snapshot."""

    kind: BackgroundKind
    color: Color | None = None
    samples: Samples | None = None

    @classmethod
    def solid(cls, color: Sequence[int]) -> "Background":
        return cls(kind=BackgroundKind.SOLID, color=coerce_color(color))

    @classmethod
    def snapshot(cls, samples: Samples) -> "Background":
        frozen = np.array(samples, dtype=np.uint8, copy=True)
        frozen.flags.writeable = False
        return cls(kind=BackgroundKind.SNAPSHOT, samples=frozen)

    def restore(self, target: Samples) -> None:
        if self.kind is BackgroundKind.SOLID:
            target[:] = self.color
        else:
            target[:] = self.samples


__all__ = ["Background", "BackgroundKind", "Color", "Samples", "coerce_color"]
