"""
Image decoding and encoding backed by Pillow.

Decoded images always pass through the luma conversion in
``reconeval.core.normalize`` so the rest of the pipeline works on a single
grayscale channel.
"""

from io import BytesIO
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from reconeval.core.exceptions import InvalidImageError
from reconeval.core.normalize import grayscale_from_color

DEFAULT_IMAGE_FORMAT = "PNG"


def decode_grayscale(data: bytes, path: Optional[str] = None) -> np.ndarray:
    """
    Decode image bytes into a grayscale buffer.

    Args:
        data: Encoded image bytes
        path: Source path, used in error messages only

    Returns:
        (H, W) uint8 buffer

    Raises:
        InvalidImageError: If the bytes cannot be decoded, or the header declares
            a size above Pillow's decompression bomb limit
    """
    try:
        with Image.open(BytesIO(data)) as img:
            rgb = np.asarray(img.convert("RGB"))
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
        raise InvalidImageError(f"Cannot decode image: {e}", path=path) from e

    return grayscale_from_color(rgb)


def image_format_for(filename: Union[str, Path]) -> str:
    """Pillow format name for a file name, based on its extension."""
    suffix = Path(filename).suffix.lower()
    return Image.registered_extensions().get(suffix, DEFAULT_IMAGE_FORMAT)


def encode_grayscale(image: np.ndarray, filename: Union[str, Path]) -> bytes:
    """
    Encode a grayscale buffer in the format implied by ``filename``.

    Args:
        image: (H, W) uint8 buffer
        filename: Target file name; its extension selects the format

    Returns:
        Encoded image bytes
    """
    buffer = BytesIO()
    Image.fromarray(np.asarray(image, dtype=np.uint8)).save(
        buffer, format=image_format_for(filename)
    )
    return buffer.getvalue()
