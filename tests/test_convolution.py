import numpy as np
import pytest
from PIL import Image

from visionbasics.convolution import (
    GAUSSIAN_3X3,
    GAUSSIAN_HORIZONTAL,
    GAUSSIAN_VERTICAL,
    SOBEL_X,
    convolve,
    main,
    separable_convolve,
)


@pytest.fixture
def colour_image():
    rng = np.random.default_rng(42)
    return rng.integers(0, 256, size=(9, 11, 3), dtype=np.uint8)


def test_identity_kernel_returns_image(colour_image):
    identity = np.zeros((3, 3))
    identity[1, 1] = 1.0
    assert np.array_equal(convolve(colour_image, identity), colour_image)


def test_gaussian_keeps_constant_image_constant():
    image = np.full((6, 7, 3), 90, dtype=np.uint8)
    assert np.array_equal(convolve(image, GAUSSIAN_3X3), image)


def test_sobel_of_constant_image_is_zero():
    image = np.full((5, 5, 3), 200, dtype=np.uint8)
    assert not convolve(image, SOBEL_X).any()


def test_results_saturate_to_byte_range():
    image = np.full((4, 4), 200, dtype=np.uint8)
    double = np.zeros((3, 3))
    double[1, 1] = 2.0
    np.testing.assert_array_equal(
        convolve(image, double), np.full((4, 4), 255, dtype=np.uint8)
    )
    np.testing.assert_array_equal(
        convolve(image, -double), np.zeros((4, 4), dtype=np.uint8)
    )


def test_single_element_kernel_is_anchored_one_pixel_up_left(colour_image):
    result = convolve(colour_image, [[1.0]])
    assert np.array_equal(result[1:, 1:], colour_image[:-1, :-1])
    assert np.array_equal(result[0, 0], colour_image[0, 0])


def test_channels_are_independent(colour_image):
    combined = convolve(colour_image, SOBEL_X)
    per_channel = np.stack(
        [convolve(channel, SOBEL_X) for channel in np.moveaxis(colour_image, -1, 0)],
        axis=-1,
    )
    assert np.array_equal(combined, per_channel)


def test_output_matches_input_shape(colour_image):
    result = convolve(colour_image, np.ones((5, 5)) / 25.0)
    assert result.shape == colour_image.shape
    assert result.dtype == np.uint8


def test_separable_is_two_passes(colour_image):
    expected = convolve(convolve(colour_image, GAUSSIAN_VERTICAL), GAUSSIAN_HORIZONTAL)
    result = separable_convolve(colour_image, [0.25, 0.5, 0.25], [0.25, 0.5, 0.25])
    assert np.array_equal(result, expected)


@pytest.mark.parametrize("kernel", [np.ones(3), np.zeros((0, 3))])
def test_invalid_kernel_rejected(colour_image, kernel):
    with pytest.raises(ValueError):
        convolve(colour_image, kernel)


def test_invalid_image_rejected():
    with pytest.raises(ValueError):
        convolve(np.zeros(5, dtype=np.uint8), SOBEL_X)


def test_main_writes_half_size_results(tmp_path, colour_image):
    source = tmp_path / "input.png"
    width, height = 20, 16
    Image.fromarray(np.resize(colour_image, (height, width, 3))).save(source)
    out_dir = tmp_path / "out"
    assert main([str(source), str(out_dir)]) == 0
    for name in ("sobel.png", "gaussian.png", "separable.png"):
        with Image.open(out_dir / name) as written:
            assert written.size == (width // 2, height // 2)


def test_main_missing_input(tmp_path):
    assert main([str(tmp_path / "absent.png"), str(tmp_path)]) == 1