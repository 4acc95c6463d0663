"""
Unit tests for reconeval.core.normalize module.
"""

import numpy as np
import pytest

from reconeval.core.exceptions import InvalidImageError
from reconeval.core.normalize import (
    from_autoencoder_output,
    grayscale_from_color,
    to_autoencoder_input,
    to_discriminator_input,
)


@pytest.fixture
def gradient_image():
    """4x6 buffer covering the full intensity range."""
    return np.linspace(0, 255, 24).astype(np.uint8).reshape(4, 6)


class TestToAutoencoderInput:
    def test_shape_and_dtype(self, gradient_image):
        tensor = to_autoencoder_input(gradient_image)

        assert tensor.shape == (1, 3, 4, 6)
        assert tensor.dtype == np.float32

    def test_channels_are_replicated(self, gradient_image):
        tensor = to_autoencoder_input(gradient_image)

        np.testing.assert_array_equal(tensor[0, 0], tensor[0, 1])
        np.testing.assert_array_equal(tensor[0, 0], tensor[0, 2])

    def test_values_scaled_to_unit_range(self, gradient_image):
        tensor = to_autoencoder_input(gradient_image)

        assert tensor.min() == 0.0
        assert tensor.max() == 1.0
        np.testing.assert_allclose(tensor[0, 0], gradient_image / 255.0, rtol=1e-6)

    def test_input_is_not_mutated(self, gradient_image):
        before = gradient_image.copy()

        to_autoencoder_input(gradient_image)

        np.testing.assert_array_equal(gradient_image, before)


class TestToDiscriminatorInput:
    def test_shape(self, gradient_image):
        tensor = to_discriminator_input(gradient_image)

        assert tensor.shape == (1, 1, 4, 6)
        assert tensor.dtype == np.float32

    @pytest.mark.parametrize(
        "value,expected",
        [(0, -1.0), (255, 1.0), (128, 0.0039)],
    )
    def test_reference_values(self, value, expected):
        tensor = to_discriminator_input(np.full((2, 2), value, dtype=np.uint8))

        assert tensor[0, 0, 0, 0] == pytest.approx(expected, abs=1e-4)

    def test_monotonic(self):
        values = np.arange(256, dtype=np.uint8).reshape(16, 16)

        flat = to_discriminator_input(values).reshape(-1)

        assert np.all(np.diff(flat) > 0)
        assert flat.min() >= -1.0
        assert flat.max() <= 1.0


class TestFromAutoencoderOutput:
    def test_uniform_round_trip(self):
        """Test a uniform tensor of v/255 reconstructs v for every intensity."""
        for value in range(256):
            image = np.full((3, 3), value, dtype=np.uint8)

            restored = from_autoencoder_output(to_autoencoder_input(image))

            assert restored.dtype == np.uint8
            assert restored.shape == (3, 3)
            assert np.all(restored == value), f"round trip failed for {value}"

    def test_values_are_clamped(self):
        tensor = np.stack(
            [np.full((2, 2), 1.7), np.full((2, 2), 2.0), np.full((2, 2), 5.0)]
        )[np.newaxis].astype(np.float32)

        assert np.all(from_autoencoder_output(tensor) == 255)
        assert np.all(from_autoencoder_output(-tensor) == 0)

    def test_luma_weighting(self):
        """Test channels are combined with 0.299/0.587/0.114, not averaged."""
        tensor = np.zeros((1, 3, 1, 1), dtype=np.float32)
        tensor[0, 0] = 1.0  # pure red

        restored = from_autoencoder_output(tensor)

        assert restored[0, 0] == round(255 * 0.299)

    @pytest.mark.parametrize("shape", [(3, 4, 4), (1, 1, 4, 4), (2, 3, 4, 4), (1, 3, 0, 4)])
    def test_rejects_malformed_tensor(self, shape):
        with pytest.raises(InvalidImageError):
            from_autoencoder_output(np.zeros(shape, dtype=np.float32))

    def test_rejects_none(self):
        with pytest.raises(InvalidImageError):
            from_autoencoder_output(None)


class TestGrayscaleFromColor:
    def test_luma_formula(self):
        rgb = np.zeros((1, 3, 3), dtype=np.uint8)
        rgb[0, 0] = [255, 0, 0]
        rgb[0, 1] = [0, 255, 0]
        rgb[0, 2] = [0, 0, 255]

        gray = grayscale_from_color(rgb)

        assert gray.tolist() == [[76, 150, 29]]

    def test_gray_triplet_keeps_its_value(self):
        rgb = np.full((2, 2, 3), 77, dtype=np.uint8)

        assert np.all(grayscale_from_color(rgb) == 77)

    def test_grayscale_input_is_copied(self):
        gray = np.full((2, 2), 9, dtype=np.uint8)

        result = grayscale_from_color(gray)

        assert result is not gray
        np.testing.assert_array_equal(result, gray)

    def test_luma_rounds_to_nearest(self):
        """Test the weighted sum is rounded, not truncated."""
        rgb = np.array([[[0, 255, 255]]], dtype=np.uint8)  # 178.755

        assert grayscale_from_color(rgb)[0, 0] == 179


class TestInvalidDimensions:
    @pytest.mark.parametrize(
        "func", [to_autoencoder_input, to_discriminator_input, grayscale_from_color]
    )
    def test_empty_image(self, func):
        with pytest.raises(InvalidImageError):
            func(np.zeros((0, 5), dtype=np.uint8))

    @pytest.mark.parametrize(
        "func", [to_autoencoder_input, to_discriminator_input, grayscale_from_color]
    )
    def test_undefined_image(self, func):
        with pytest.raises(InvalidImageError):
            func(None)

    def test_wrong_rank(self):
        with pytest.raises(InvalidImageError):
            to_discriminator_input(np.zeros((2, 2, 2, 2), dtype=np.uint8))

    def test_wrong_channel_count(self):
        with pytest.raises(InvalidImageError):
            grayscale_from_color(np.zeros((2, 2, 4), dtype=np.uint8))
