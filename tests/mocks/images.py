"""Synthetic image helpers for tests."""

import struct
import zlib
from io import BytesIO

import numpy as np
from PIL import Image

DARK = 20
BRIGHT = 230


def png_bytes(value: int, size=(8, 8), mode: str = "L") -> bytes:
    """Encode a uniform image as PNG bytes."""
    if mode == "RGB":
        array = np.full((size[0], size[1], 3), value, dtype=np.uint8)
    else:
        array = np.full(size, value, dtype=np.uint8)
    buffer = BytesIO()
    Image.fromarray(array).save(buffer, format="PNG")
    return buffer.getvalue()


def _png_chunk(chunk_type: bytes, payload: bytes) -> bytes:
    crc = zlib.crc32(chunk_type + payload) & 0xFFFFFFFF
    return struct.pack(">I", len(payload)) + chunk_type + payload + struct.pack(">I", crc)


def oversized_png_header(width: int = 20000, height: int = 20000) -> bytes:
    """PNG with a valid IHDR declaring huge dimensions and no pixel data."""
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 0, 0, 0, 0)
    return b"\x89PNG\r\n\x1a\n" + _png_chunk(b"IHDR", ihdr) + _png_chunk(b"IEND", b"")
