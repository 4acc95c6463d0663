"""
Image Normalization
===================

Conversions between grayscale image buffers and the tensor layouts expected by
the two models.

Image buffers are 2-D ``uint8`` arrays of shape (height, width). Tensors are
4-D ``float32`` arrays laid out as (batch=1, channel, height, width):

- autoencoder input: 3 channels, values in [0, 1]
- discriminator input: 1 channel, values in [-1, 1]

All functions are pure and return new arrays.
"""

import numpy as np

from reconeval.core.exceptions import InvalidImageError

# ITU-R BT.601 luma weights
LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float64)

AUTOENCODER_CHANNELS = 3
DISCRIMINATOR_CHANNELS = 1


def _check_image(image: np.ndarray) -> np.ndarray:
    """Validate a grayscale buffer and return it as an array."""
    if image is None:
        raise InvalidImageError("Image buffer is undefined.")

    image = np.asarray(image)
    if image.ndim != 2:
        raise InvalidImageError(f"Expected a 2-D grayscale buffer, got shape {image.shape}.")

    height, width = image.shape
    if height <= 0 or width <= 0:
        raise InvalidImageError(f"Image dimensions must be positive, got {width}x{height}.")

    return image


def _luma(channels: np.ndarray) -> np.ndarray:
    """Combine an (H, W, 3) array into an (H, W) uint8 luma buffer."""
    gray = channels.astype(np.float64) @ LUMA_WEIGHTS
    return np.clip(np.rint(gray), 0, 255).astype(np.uint8)


def to_autoencoder_input(image: np.ndarray) -> np.ndarray:
    """
    Convert a grayscale buffer to the autoencoder input tensor.

    The single channel is replicated into R, G and B and scaled to [0, 1].

    Args:
        image: (H, W) buffer with values in [0, 255]

    Returns:
        float32 tensor of shape (1, 3, H, W)
    """
    image = _check_image(image)
    scaled = image.astype(np.float32) / 255.0
    tensor = np.repeat(scaled[np.newaxis, np.newaxis, :, :], AUTOENCODER_CHANNELS, axis=1)
    return np.ascontiguousarray(tensor, dtype=np.float32)


def to_discriminator_input(image: np.ndarray) -> np.ndarray:
    """
    Convert a grayscale buffer to the discriminator input tensor.

    Values are mapped to [-1, 1] via ``value / 255 * 2 - 1``.

    Args:
        image: (H, W) buffer with values in [0, 255]

    Returns:
        float32 tensor of shape (1, 1, H, W)
    """
    image = _check_image(image)
    scaled = image.astype(np.float32) / 255.0 * 2.0 - 1.0
    return np.ascontiguousarray(scaled[np.newaxis, np.newaxis, :, :], dtype=np.float32)


def from_autoencoder_output(tensor: np.ndarray) -> np.ndarray:
    """
    Convert an autoencoder output tensor back to a grayscale buffer.

    Each channel is scaled by 255 and clamped to [0, 255] before the three
    channels are collapsed with the luma weights. Per-channel differences the
    autoencoder produced are not preserved.

    Args:
        tensor: (1, 3, H, W) array, values approximately in [0, 1]

    Returns:
        (H, W) uint8 buffer
    """
    if tensor is None:
        raise InvalidImageError("Output tensor is undefined.")

    tensor = np.asarray(tensor)
    if tensor.ndim != 4 or tensor.shape[0] != 1 or tensor.shape[1] != AUTOENCODER_CHANNELS:
        raise InvalidImageError(
            f"Expected autoencoder output of shape (1, 3, H, W), got {tensor.shape}."
        )
    if tensor.shape[2] <= 0 or tensor.shape[3] <= 0:
        raise InvalidImageError(f"Output tensor has empty spatial dimensions: {tensor.shape}.")

    channels = np.clip(tensor[0].astype(np.float64) * 255.0, 0.0, 255.0)
    return _luma(np.moveaxis(channels, 0, -1))


def grayscale_from_color(image: np.ndarray) -> np.ndarray:
    """
    Collapse a decoded source image to a single grayscale channel.

    The weighted sum is rounded to the nearest integer, not truncated. A gray
    pixel (v, v, v) therefore stays v, which keeps the restored pass comparable
    with the original one. Color pixels can differ by 1 from a truncating
    conversion.

    Args:
        image: (H, W, 3) RGB array, or (H, W) array that is already grayscale

    Returns:
        (H, W) uint8 buffer
    """
    if image is None:
        raise InvalidImageError("Image buffer is undefined.")

    image = np.asarray(image)
    if image.ndim == 2:
        return _check_image(image).astype(np.uint8, copy=True)

    if image.ndim != 3 or image.shape[2] != 3:
        raise InvalidImageError(f"Expected an (H, W, 3) RGB buffer, got shape {image.shape}.")
    if image.shape[0] <= 0 or image.shape[1] <= 0:
        raise InvalidImageError(f"Image dimensions must be positive, got shape {image.shape}.")

    return _luma(image)
