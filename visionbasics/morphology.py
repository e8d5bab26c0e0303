"""Binary morphology on grayscale images: erosion, dilation and their combinations."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

import numpy as np
from PIL import Image

WHITE = 255
BLACK = 0
DEFAULT_KERNEL_SIZE = 3


def _check_kernel_size(kernel_size: int) -> None:
    if kernel_size < 3 or kernel_size % 2 != 1:
        raise ValueError("Kernel size should be odd and greater than or equal to 3")


def _as_gray(image: np.ndarray) -> np.ndarray:
    array = np.asarray(image)
    if array.ndim != 2:
        raise ValueError("morphology needs a single-channel (2-D) image")
    return array


def kernel_sum(image: np.ndarray, row: int, col: int, kernel_size: int) -> int:
    """Sum the pixels of the square window centred on (``row``, ``col``).

    Parts of the window that fall outside the image add nothing.
    """
    _check_kernel_size(kernel_size)
    array = _as_gray(image)
    half = (kernel_size - 1) // 2
    top, left = max(row - half, 0), max(col - half, 0)
    bottom, right = max(row + half + 1, 0), max(col + half + 1, 0)
    return int(array[top:bottom, left:right].astype(np.int64).sum())


def _window_sums(image: np.ndarray, kernel_size: int) -> np.ndarray:
    """Return the kernel sum for every pixel at once, using an integral image."""
    _check_kernel_size(kernel_size)
    array = _as_gray(image).astype(np.int64)
    pad = kernel_size // 2
    padded = np.pad(array, pad)
    integral = np.zeros((padded.shape[0] + 1, padded.shape[1] + 1), dtype=np.int64)
    integral[1:, 1:] = padded.cumsum(axis=0).cumsum(axis=1)
    k = kernel_size
    return integral[k:, k:] - integral[:-k, k:] - integral[k:, :-k] + integral[:-k, :-k]


def erosion(image: np.ndarray, kernel_size: int = DEFAULT_KERNEL_SIZE) -> np.ndarray:
    """Keep a pixel white only where its whole window lies in the image and is white."""
    full = WHITE * kernel_size * kernel_size
    sums = _window_sums(image, kernel_size)
    return np.where(sums == full, WHITE, BLACK).astype(np.uint8)


def dilation(image: np.ndarray, kernel_size: int = DEFAULT_KERNEL_SIZE) -> np.ndarray:
    """Make a pixel white wherever any pixel of its window is non-zero."""
    sums = _window_sums(image, kernel_size)
    return np.where(sums > 0, WHITE, BLACK).astype(np.uint8)


def opening(image: np.ndarray, kernel_size: int = DEFAULT_KERNEL_SIZE) -> np.ndarray:
    """Erode, then dilate: removes small white specks."""
    return dilation(erosion(image, kernel_size), kernel_size)


def closing(image: np.ndarray, kernel_size: int = DEFAULT_KERNEL_SIZE) -> np.ndarray:
    """Dilate, then erode: fills small black holes."""
    return erosion(dilation(image, kernel_size), kernel_size)


def difference(first: np.ndarray, second: np.ndarray) -> np.ndarray:
    """Return the absolute per-pixel difference of two equally sized images."""
    a = _as_gray(first)
    b = _as_gray(second)
    if a.shape != b.shape:
        raise ValueError("Images are of different sizes.")
    return np.abs(a.astype(np.int64) - b.astype(np.int64)).clip(0, 255).astype(np.uint8)


def gradient(image: np.ndarray, kernel_size: int = DEFAULT_KERNEL_SIZE) -> np.ndarray:
    """Return the outline of shapes: dilation minus erosion."""
    return difference(dilation(image, kernel_size), erosion(image, kernel_size))


OPERATIONS: dict[str, Callable[[np.ndarray, int], np.ndarray]] = {
    "erosion": erosion,
    "dilation": dilation,
    "opening": opening,
    "closing": closing,
    "gradient": gradient,
}


def main(argv: list[str] | None = None) -> int:
    """Apply a morphological operation to a grayscale image and save the result."""
    parser = argparse.ArgumentParser(
        prog="visionbasics-morph",
        description="Apply erosion, dilation, opening, closing or gradient to an image.",
    )
    parser.add_argument("operation", choices=sorted(OPERATIONS))
    parser.add_argument("image_path")
    parser.add_argument("output_path")
    parser.add_argument("--kernel-size", type=int, default=DEFAULT_KERNEL_SIZE)
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        with Image.open(args.image_path) as opened:
            source = np.asarray(opened.convert("L"))
    except OSError:
        print("Could not open or find the image", file=sys.stderr)
        return 1

    try:
        result = OPERATIONS[args.operation](source, args.kernel_size)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    Image.fromarray(result).save(args.output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())