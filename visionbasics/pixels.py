"""Direct pixel manipulation: row masking, drawing, cropping and translation."""

from __future__ import annotations

import numpy as np

WHITE = 255


def black_out_rows(image: np.ndarray) -> np.ndarray:
    """Return a copy with every even-numbered row set to black."""
    result = np.array(image, copy=True)
    result[::2] = 0
    return result


def change_blue(image: np.ndarray) -> np.ndarray:
    """Return a copy of a BGR image with the blue channel saturated on even rows."""
    result = np.array(image, copy=True)
    if result.ndim != 3 or result.shape[2] < 3:
        raise ValueError("change_blue needs an image with at least three channels")
    result[::2, :, 0] = 255
    return result


def draw_lines(height: int = 480, width: int = 720) -> np.ndarray:
    """Draw a horizontal, a vertical and a 45-degree white line on a black BGR canvas."""
    if height <= 400 or width <= 620:
        raise ValueError("canvas must be taller than 400 and wider than 620 pixels")
    canvas = np.zeros((height, width, 3), dtype=np.uint8)
    canvas[200, 100:621] = WHITE
    canvas[80:401, 300] = WHITE
    diagonal = np.arange(100, 301)
    canvas[diagonal, diagonal] = WHITE
    return canvas


def crop(image: np.ndarray, rows: int, cols: int) -> np.ndarray:
    """Return a copy of the top-left ``rows`` x ``cols`` region."""
    if rows < 0 or cols < 0:
        raise ValueError("crop size must not be negative")
    if rows > image.shape[0] or cols > image.shape[1]:
        raise ValueError("crop region lies outside the image")
    return np.array(image[:rows, :cols], copy=True)


def translation_matrix(tx: float, ty: float) -> np.ndarray:
    """Return the 2x3 affine matrix that shifts by ``tx`` right and ``ty`` down."""
    return np.array([[1.0, 0.0, tx], [0.0, 1.0, ty]], dtype=np.float32)


def _shift_axis(values: np.ndarray, shift: float, axis: int) -> np.ndarray:
    """Shift along one axis with linear interpolation and a zero border."""
    size = values.shape[axis]
    source = np.arange(size, dtype=np.float64) - shift
    lower = np.floor(source).astype(np.int64)
    weight = source - lower

    broadcast = [1] * values.ndim
    broadcast[axis] = size

    def gather(indices: np.ndarray) -> np.ndarray:
        valid = ((indices >= 0) & (indices < size)).reshape(broadcast)
        taken = np.take(values, np.clip(indices, 0, size - 1), axis=axis)
        return taken * valid

    weight = weight.reshape(broadcast)
    return gather(lower) * (1.0 - weight) + gather(lower + 1) * weight


def translate(image: np.ndarray, tx: float, ty: float) -> np.ndarray:
    """Shift an image by ``tx`` columns and ``ty`` rows, filling uncovered pixels with zero."""
    original = np.asarray(image)
    shifted = _shift_axis(original.astype(np.float64), ty, axis=0)
    shifted = _shift_axis(shifted, tx, axis=1)
    if np.issubdtype(original.dtype, np.integer):
        limits = np.iinfo(original.dtype)
        shifted = np.clip(np.rint(shifted), limits.min, limits.max)
    return shifted.astype(original.dtype)