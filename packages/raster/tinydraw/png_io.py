"""PNG boundary: decode 8-bit RGB/RGBA streams and encode RGB8 images via Pillow."""

from __future__ import annotations

import io
import os
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from tinydraw_core.config import DEFAULT_CONFIG, DrawConfig
from tinydraw_core.logging_setup import get_logger

from .errors import DecodeError, EncodeError, ImageIOError, UnsupportedBitDepth, UnsupportedColorType

PngSource = Union[str, os.PathLike, bytes, bytearray, memoryview, BinaryIO]
PngDestination = Union[str, os.PathLike, BinaryIO]

_PNG_SIG = b"\x89PNG\r\n\x1a\n"

COLOR_TYPE_NAMES: dict[int, str] = {
    0: "Grayscale",
    2: "RGB",
    3: "Indexed",
    4: "GrayscaleAlpha",
    6: "RGBA",
}
COLOR_TYPE_RGB = 2
COLOR_TYPE_RGBA = 6

logger = get_logger("png")


@dataclass(frozen=True)
class PngHeader:
    width: int
    height: int
    bit_depth: int
    color_type: int

    @property
    def color_type_name(self) -> str:
        return COLOR_TYPE_NAMES.get(self.color_type, f"unknown({self.color_type})")


@dataclass(frozen=True)
class DecodedPng:
    width: int
    height: int
    rgb: bytes


def read_png_header(data: bytes) -> PngHeader:
    """Parse the IHDR chunk, which the PNG format requires to come first."""
    if len(data) < 26 or not data.startswith(_PNG_SIG) or data[12:16] != b"IHDR":
        raise DecodeError("stream is not a PNG image")
    width, height, bit_depth, color_type = struct.unpack(">IIBB", data[16:26])
    return PngHeader(width=width, height=height, bit_depth=bit_depth, color_type=color_type)


def _read_source(source: PngSource) -> bytes:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    if isinstance(source, (str, os.PathLike)):
        try:
            return Path(source).read_bytes()
        except OSError as exc:
            raise ImageIOError(f"can't open {source}: {exc}") from exc
    try:
        return source.read()
    except OSError as exc:
        raise ImageIOError(f"can't read PNG stream: {exc}") from exc


def read_png(source: PngSource) -> DecodedPng:
    """Decode a PNG into flat RGB bytes, dropping the alpha channel of RGBA input."""
    data = _read_source(source)
    header = read_png_header(data)
    if header.bit_depth != 8:
        raise UnsupportedBitDepth(header.bit_depth)
    if header.color_type not in (COLOR_TYPE_RGB, COLOR_TYPE_RGBA):
        raise UnsupportedColorType(header.color_type_name)

    try:
        with Image.open(io.BytesIO(data), formats=["PNG"]) as im:
            im.load()
            mode = im.mode
            width, height = im.size
            raw = im.tobytes()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError, struct.error, Image.DecompressionBombError) as exc:
        logger.warning("png decode failed", extra={"event": "png_decode_failed"})
        raise DecodeError(f"can't decode PNG: {exc}") from exc

    if mode == "RGBA":
        logger.debug("flattening RGBA to RGB", extra={"event": "png_alpha_dropped"})
        raw = np.frombuffer(raw, dtype=np.uint8).reshape((-1, 4))[:, :3].tobytes()
    elif mode != "RGB":
        raise UnsupportedColorType(mode)

    logger.debug(f"png decoded {width}x{height} {mode}", extra={"event": "png_decoded"})
    return DecodedPng(width=width, height=height, rgb=raw)


def _to_pil(image) -> Image.Image:
    if image.width == 0 or image.height == 0:
        raise EncodeError("can't encode an image with zero width or height")
    try:
        return Image.frombytes("RGB", (image.width, image.height), image.to_bytes())
    except ValueError as exc:
        raise EncodeError(f"can't build PNG frame: {exc}") from exc


def encode_png(image, destination: PngDestination, config: DrawConfig | None = None) -> None:
    """Write ``image`` as an 8-bit RGB PNG to a path or binary stream."""
    png_cfg = (config or DEFAULT_CONFIG).png
    level = png_cfg.compress_level
    if isinstance(level, bool) or not isinstance(level, int) or not 0 <= level <= 9:
        raise EncodeError(f"PNG compress_level must be an integer in 0..9, got {level!r}")
    frame = _to_pil(image)
    target = str(destination) if isinstance(destination, os.PathLike) else destination
    try:
        frame.save(target, format="PNG", compress_level=png_cfg.compress_level, optimize=png_cfg.optimize)
    except OSError as exc:
        logger.warning("png write failed", extra={"event": "png_write_failed"})
        raise ImageIOError(f"can't write PNG: {exc}") from exc
    except ValueError as exc:
        raise EncodeError(f"can't encode PNG: {exc}") from exc
    logger.debug(f"png encoded {image.width}x{image.height}", extra={"event": "png_encoded"})


def encode_png_bytes(image, config: DrawConfig | None = None) -> bytes:
    buf = io.BytesIO()
    encode_png(image, buf, config)
    return buf.getvalue()


__all__ = [
    "COLOR_TYPE_NAMES",
    "DecodedPng",
    "PngHeader",
    "encode_png",
    "encode_png_bytes",
    "read_png",
    "read_png_header",
]
