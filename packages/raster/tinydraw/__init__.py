"""tinydraw: anti-aliased lines and rectangles on an in-memory RGB8 image.

Example::

    from tinydraw import ImageRGB8

    image = ImageRGB8(640, 360, (255, 155, 0))
    image.draw_line(0, 0, 639, 359, (255, 255, 255))
    image.draw_rectangle(0, 0, 639, 359, (255, 255, 255), thickness=3)
    image.to_png("image.png")
"""

from .errors import (
    DecodeError,
    DrawError,
    EncodeError,
    ImageIOError,
    InvalidByteLength,
    InvalidColor,
    InvalidCoordinate,
    InvalidThickness,
    OutOfBounds,
    ThicknessTooLarge,
    UnsupportedBitDepth,
    UnsupportedColorType,
)
from .image import ImageRGB8, decode_png, encode_png
from .lines import LineSample, line_samples
from .models import Background, BackgroundKind, Color
from .png_io import PngHeader, encode_png_bytes, read_png_header
from .rects import border_layers, thickness_limit

__all__ = [
    "Background",
    "BackgroundKind",
    "Color",
    "DecodeError",
    "DrawError",
    "EncodeError",
    "ImageIOError",
    "ImageRGB8",
    "InvalidByteLength",
    "InvalidColor",
    "InvalidCoordinate",
    "InvalidThickness",
    "LineSample",
    "OutOfBounds",
    "PngHeader",
    "ThicknessTooLarge",
    "UnsupportedBitDepth",
    "UnsupportedColorType",
    "border_layers",
    "decode_png",
    "encode_png",
    "encode_png_bytes",
    "line_samples",
    "read_png_header",
    "thickness_limit",
]
