import numpy as np
import pytest
from PIL import Image

from visionbasics.masking import main, mask_background


def sample():
    return np.array(
        [
            [[230, 230, 230], [10, 20, 30]],
            [[255, 255, 255], [255, 255, 254]],
        ],
        dtype=np.uint8,
    )


def test_default_colours_become_transparent():
    result = mask_background(sample())
    assert result.shape == (2, 2, 4)
    np.testing.assert_array_equal(result[0, 0], [0, 0, 0, 0])
    np.testing.assert_array_equal(result[1, 0], [0, 0, 0, 0])


def test_other_colours_kept_opaque():
    result = mask_background(sample())
    np.testing.assert_array_equal(result[0, 1], [10, 20, 30, 255])
    np.testing.assert_array_equal(result[1, 1], [255, 255, 254, 255])


def test_custom_ignore_list():
    result = mask_background(sample(), ignore=[(10, 20, 30)])
    np.testing.assert_array_equal(result[0, 1], [0, 0, 0, 0])
    np.testing.assert_array_equal(result[1, 0], [255, 255, 255, 255])


def test_empty_ignore_keeps_every_pixel():
    result = mask_background(sample(), ignore=[])
    np.testing.assert_array_equal(result[..., :3], sample())
    assert np.all(result[..., 3] == 255)


def test_rejects_grayscale_image():
    with pytest.raises(ValueError):
        mask_background(np.zeros((3, 3), dtype=np.uint8))


def test_rejects_bad_ignore_colour():
    with pytest.raises(ValueError):
        mask_background(sample(), ignore=[(1, 2)])


def test_main_round_trip(tmp_path):
    source = tmp_path / "in.png"
    output = tmp_path / "out.png"
    Image.fromarray(sample()).save(source)
    assert main([str(source), str(output)]) == 0
    with Image.open(output) as saved:
        assert saved.mode == "RGBA"
        np.testing.assert_array_equal(np.asarray(saved), mask_background(sample()))


def test_main_missing_input(tmp_path):
    assert main([str(tmp_path / "nope.png"), str(tmp_path / "out.png")]) == 1