"""A straightforward 2-D convolution with replicated borders, and a small timing demo."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

import numpy as np
from PIL import Image

DEFAULT_INPUT = "./assets/Dog_img.jpeg"

SOBEL_X = np.array([[-1.0, 0.0, 1.0], [-2.0, 0.0, 2.0], [-1.0, 0.0, 1.0]])
GAUSSIAN_3X3 = np.array([[1.0, 2.0, 1.0], [2.0, 4.0, 2.0], [1.0, 2.0, 1.0]]) / 16.0
GAUSSIAN_VERTICAL = np.array([[0.25], [0.5], [0.25]])
GAUSSIAN_HORIZONTAL = np.array([[0.25, 0.5, 0.25]])


def convolve(image: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    """Apply ``kernel`` to every channel of ``image`` and saturate to 8 bits.

    The image is padded by one replicated pixel on each side.  The kernel is not
    flipped; its element (1, 1) sits over the output pixel, so the window of an
    output pixel (r, c) spans padded rows r .. r + kernel rows - 1 and columns
    c .. c + kernel columns - 1.  Window parts beyond the padded image add nothing.
    """
    source = np.asarray(image)
    if source.ndim not in (2, 3) or source.shape[0] == 0 or source.shape[1] == 0:
        raise ValueError("image must be a non-empty 2-D or 3-D array")
    weights = np.asarray(kernel, dtype=np.float64)
    if weights.ndim != 2 or weights.size == 0:
        raise ValueError("kernel must be a non-empty 2-D array")

    rows, cols = source.shape[:2]
    kernel_rows, kernel_cols = weights.shape
    channel_pad = ((0, 0),) * (source.ndim - 2)

    padded = np.pad(source.astype(np.float64), ((1, 1), (1, 1)) + channel_pad, mode="edge")
    overhang = ((0, max(kernel_rows - 3, 0)), (0, max(kernel_cols - 3, 0))) + channel_pad
    padded = np.pad(padded, overhang, mode="constant")

    total = np.zeros(source.shape, dtype=np.float64)
    for (k, l), weight in np.ndenumerate(weights):
        total += weight * padded[k:k + rows, l:l + cols]
    return np.clip(np.rint(total), 0, 255).astype(np.uint8)


def separable_convolve(
    image: np.ndarray, vertical: np.ndarray, horizontal: np.ndarray
) -> np.ndarray:
    """Convolve with a column kernel, then with a row kernel."""
    column = np.asarray(vertical, dtype=np.float64).reshape(-1, 1)
    row = np.asarray(horizontal, dtype=np.float64).reshape(1, -1)
    return convolve(convolve(image, column), row)


def _timed(label: str, action):
    start = time.perf_counter_ns()
    result = action()
    elapsed = (time.perf_counter_ns() - start) // 1000
    print(f"{label} {elapsed} microseconds.")
    return result


def main(argv: list[str] | None = None) -> int:
    """Time Sobel, full Gaussian and separable Gaussian convolutions and save the results."""
    parser = argparse.ArgumentParser(
        prog="visionbasics-convolve",
        description="Demonstrate naive and separable convolution on an image.",
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("output_dir", nargs="?", default=".")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        with Image.open(args.input) as opened:
            picture = opened.convert("RGB")
            half = (int(picture.width * 0.5), int(picture.height * 0.5))
            source = np.asarray(picture.resize(half))
    except (OSError, ValueError):
        print(f"Could not open or find the image: {args.input}", file=sys.stderr)
        return 1

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    print("Demonstrating naive convolution...")
    sobel = _timed("Naive convolution took", lambda: convolve(source, SOBEL_X))
    Image.fromarray(sobel).save(output_dir / "sobel.png")
    print()

    print("Demonstrating separable convolutions...")
    full = _timed("Regular convolution took", lambda: convolve(source, GAUSSIAN_3X3))
    Image.fromarray(full).save(output_dir / "gaussian.png")
    separated = _timed(
        "Naive Seperated Convolution",
        lambda: separable_convolve(source, GAUSSIAN_VERTICAL, GAUSSIAN_HORIZONTAL),
    )
    Image.fromarray(separated).save(output_dir / "separable.png")
    return 0


if __name__ == "__main__":
    sys.exit(main())