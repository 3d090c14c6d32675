"""Axis-aligned rectangle rasterization: concentric borders and solid fills."""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple

from .errors import InvalidThickness, ThicknessTooLarge
from .models import coerce_color

Box = Tuple[int, int, int, int]  # (left, bottom, right, top), inclusive


def _normalize(x1: int, y1: int, x2: int, y2: int) -> Box:
    return min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2)


def thickness_limit(x1: int, x2: int) -> int:
    """Largest border thickness whose inset rings cannot cross horizontally."""
    return abs(x2 - x1) // 2 + 1


def border_layers(x1: int, y1: int, x2: int, y2: int, thickness: int) -> Iterator[Box]:
    """Yield the boxes of each 1-pixel border ring, outermost first.

    Each ring is the previous one shrunk by a pixel on every side and then
    re-normalized, so a ring whose vertical span collapses flips over itself.
    """
    box = _normalize(x1, y1, x2, y2)
    for _ in range(thickness):
        yield box
        left, bottom, right, top = box
        box = _normalize(left + 1, bottom + 1, right - 1, top - 1)


def _fill_row(image, y: int, left: int, right: int, color) -> None:
    start = image.index(left, y)
    image.samples[start : start + (right - left) + 1] = color


def draw_rectangle(image, x1: int, y1: int, x2: int, y2: int, color: Sequence[int], thickness: int = 1) -> None:
    """Draw a hollow rectangle border ``thickness`` pixels wide.

    Thick borders are concentric 1-pixel rings, each inset by one pixel from
    the previous. No anti-aliasing is applied. Every ring is bounds-checked
    before the first pixel is written.
    """
    rgb = coerce_color(color)
    for x, y in ((x1, y1), (x2, y2)):
        image.check_bounds(x, y)
    if thickness < 1:
        raise InvalidThickness(thickness)
    limit = thickness_limit(x1, x2)
    if thickness > limit:
        raise ThicknessTooLarge(thickness, limit)

    layers = list(border_layers(x1, y1, x2, y2, thickness))
    for left, bottom, right, top in layers[1:]:
        image.check_bounds(left, bottom)
        image.check_bounds(right, top)

    for left, bottom, right, top in layers:
        _fill_row(image, bottom, left, right, rgb)
        _fill_row(image, top, left, right, rgb)
        for y in range(bottom, top + 1):
            row = image.index(0, y)
            image.samples[row + left] = rgb
            image.samples[row + right] = rgb


def draw_rectangle_filled(image, x1: int, y1: int, x2: int, y2: int, color: Sequence[int]) -> None:
    """Fill the closed box spanned by the two corners."""
    rgb = coerce_color(color)
    for x, y in ((x1, y1), (x2, y2)):
        image.check_bounds(x, y)

    left, bottom, right, top = _normalize(x1, y1, x2, y2)
    for y in range(bottom, top + 1):
        _fill_row(image, y, left, right, rgb)


__all__ = ["border_layers", "draw_rectangle", "draw_rectangle_filled", "thickness_limit"]
