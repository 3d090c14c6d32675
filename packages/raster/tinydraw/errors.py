"""Typed, recoverable failures raised by tinydraw."""

from __future__ import annotations


class DrawError(Exception):
    """Base class for every error raised by this package."""


class InvalidByteLength(DrawError, ValueError):
    def __init__(self, width: int, height: int, length: int) -> None:
        self.width = width
        self.height = height
        self.length = length
        super().__init__(
            f"expected {width * height * 3} bytes for a {width}x{height} RGB image, got {length}"
        )


class InvalidColor(DrawError, ValueError):
    pass


class InvalidCoordinate(DrawError, TypeError):
    pass


class UnsupportedBitDepth(DrawError, ValueError):
    def __init__(self, bit_depth: int) -> None:
        self.bit_depth = bit_depth
        super().__init__(f"PNG bit depth must be 8, got {bit_depth}")


class UnsupportedColorType(DrawError, ValueError):
    def __init__(self, color_type: str) -> None:
        self.color_type = color_type
        super().__init__(f"PNG color type must be RGB or RGBA, got {color_type}")


class DecodeError(DrawError, ValueError):
    pass


class EncodeError(DrawError, ValueError):
    pass


class ImageIOError(DrawError, OSError):
    pass


class OutOfBounds(DrawError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(f"coordinates ({x}, {y}) exceed image limits {width}x{height}")


class InvalidThickness(DrawError, ValueError):
    def __init__(self, thickness: int, message: str | None = None) -> None:
        self.thickness = thickness
        super().__init__(message or f"thickness must be at least 1, got {thickness}")


class ThicknessTooLarge(InvalidThickness):
    def __init__(self, thickness: int, limit: int) -> None:
        self.limit = limit
        super().__init__(thickness, f"thickness {thickness} exceeds the rectangle limit of {limit}")


__all__ = [
    "DecodeError",
    "DrawError",
    "EncodeError",
    "ImageIOError",
    "InvalidByteLength",
    "InvalidColor",
    "InvalidCoordinate",
    "InvalidThickness",
    "OutOfBounds",
    "ThicknessTooLarge",
    "UnsupportedBitDepth",
    "UnsupportedColorType",
]
