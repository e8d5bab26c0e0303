"""Image resizing by bilinear and nearest-neighbour interpolation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import numpy as np
from PIL import Image

DEFAULT_INPUT = "assets/pixel3.jpg"
DEFAULT_UPSCALED = "assets/pixeli3s.jpg"
DEFAULT_DOWNSCALED = "assets/pixeli3d.jpg"
UPSCALE_SIZE = 1000
DOWNSCALE_SIZE = 100


def _as_image(image: np.ndarray) -> np.ndarray:
    array = np.asarray(image)
    if array.ndim not in (2, 3):
        raise ValueError("image must be a 2-D grayscale or 3-D multi-channel array")
    if array.shape[0] == 0 or array.shape[1] == 0:
        raise ValueError("image must contain at least one pixel")
    return array


def _check_target(width: int, height: int) -> None:
    if width < 2 or height < 2:
        raise ValueError("target width and height must both be at least 2")


def _check_position(image: np.ndarray, y: int, x: int) -> None:
    rows, cols = image.shape[:2]
    if not (0 <= y < rows and 0 <= x < cols):
        raise IndexError(f"pixel ({y}, {x}) lies outside a {rows}x{cols} image")


def get_pixel(image: np.ndarray, y: int, x: int) -> tuple[int, ...]:
    """Return the channel values of the pixel at row ``y``, column ``x``."""
    array = _as_image(image)
    _check_position(array, y, x)
    return tuple(int(v) for v in np.atleast_1d(array[y, x]))


def set_pixel(image: np.ndarray, value: Sequence[int] | int, y: int, x: int) -> None:
    """Set the pixel at row ``y``, column ``x`` in place."""
    _check_position(_as_image(image), y, x)
    image[y, x] = value


def _sample_axis(source_size: int, target_size: int) -> np.ndarray:
    ratio = (source_size - 1) / (target_size - 1)
    return ratio * np.arange(target_size, dtype=np.float64)


def _with_channels(weights: np.ndarray, ndim: int) -> np.ndarray:
    return weights[..., None] if ndim == 3 else weights


def bilinear_interpolate(image: np.ndarray, width: int, height: int) -> np.ndarray:
    """Resize to ``width`` x ``height`` by weighting the four surrounding pixels."""
    src = _as_image(image)
    _check_target(width, height)
    rows, cols = src.shape[:2]

    xs = _sample_axis(cols, width)
    ys = _sample_axis(rows, height)
    x_low = np.floor(xs).astype(np.int64)
    y_low = np.floor(ys).astype(np.int64)
    x_high = np.minimum(np.ceil(xs).astype(np.int64), cols - 1)
    y_high = np.minimum(np.ceil(ys).astype(np.int64), rows - 1)
    x_weight = _with_channels((xs - x_low).astype(np.float32)[None, :], src.ndim)
    y_weight = _with_channels((ys - y_low).astype(np.float32)[:, None], src.ndim)

    pixels = src.astype(np.float32)
    top_left = pixels[y_low[:, None], x_low[None, :]]
    top_right = pixels[y_low[:, None], x_high[None, :]]
    bottom_left = pixels[y_high[:, None], x_low[None, :]]
    bottom_right = pixels[y_high[:, None], x_high[None, :]]

    one = np.float32(1.0)
    blended = (
        top_left * (one - x_weight) * (one - y_weight)
        + top_right * x_weight * (one - y_weight)
        + bottom_left * (one - x_weight) * y_weight
        + bottom_right * x_weight * y_weight
    )
    return np.clip(blended, 0, 255).astype(np.uint8)


def nearest_neighbour_interpolate(image: np.ndarray, width: int, height: int) -> np.ndarray:
    """Resize to ``width`` x ``height`` by copying the closest source pixel."""
    src = _as_image(image)
    _check_target(width, height)
    rows, cols = src.shape[:2]

    # Round half away from zero; the coordinates are never negative.
    x_near = np.minimum(np.floor(_sample_axis(cols, width) + 0.5).astype(np.int64), cols - 1)
    y_near = np.minimum(np.floor(_sample_axis(rows, height) + 0.5).astype(np.int64), rows - 1)
    return src[y_near[:, None], x_near[None, :]].astype(np.uint8)


def main(argv: list[str] | None = None) -> int:
    """Upscale and downscale an image, saving both results."""
    parser = argparse.ArgumentParser(
        prog="visionbasics-interpolate",
        description="Resize an image with bilinear and nearest-neighbour interpolation.",
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("upscaled", nargs="?", default=DEFAULT_UPSCALED)
    parser.add_argument("downscaled", nargs="?", default=DEFAULT_DOWNSCALED)
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        with Image.open(args.input) as opened:
            source = np.asarray(opened.convert("RGB"))
    except OSError:
        print(f"Could not open or find the image: {args.input}", file=sys.stderr)
        return 1

    downscaled = nearest_neighbour_interpolate(source, DOWNSCALE_SIZE, DOWNSCALE_SIZE)
    upscaled = bilinear_interpolate(source, UPSCALE_SIZE, UPSCALE_SIZE)
    Image.fromarray(upscaled).save(args.upscaled)
    Image.fromarray(downscaled).save(args.downscaled)
    return 0


if __name__ == "__main__":
    sys.exit(main())