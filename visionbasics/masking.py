"""Removing chosen background colours by making them transparent."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

import numpy as np
from PIL import Image

GREY = (230, 230, 230)
WHITE = (255, 255, 255)
DEFAULT_IGNORE = (GREY, WHITE)
DEFAULT_INPUT = "assets/nike.png"
DEFAULT_OUTPUT = "assets/bg_free.png"


def mask_background(
    image: np.ndarray, ignore: Iterable[Sequence[int]] | None = None
) -> np.ndarray:
    """Return a four-channel copy in which the ignored colours are fully transparent.

    Every other pixel keeps its three channel values and gets an opaque alpha.
    Ignored pixels are all zero.
    """
    array = np.asarray(image)
    if array.ndim != 3 or array.shape[2] != 3:
        raise ValueError("mask_background needs a three-channel image")
    colours = [tuple(colour) for colour in (DEFAULT_IGNORE if ignore is None else ignore)]
    if any(len(colour) != 3 for colour in colours):
        raise ValueError("ignored colours must have three channel values")

    ignored = np.zeros(array.shape[:2], dtype=bool)
    for colour in colours:
        ignored |= np.all(array == np.asarray(colour), axis=-1)

    result = np.zeros(array.shape[:2] + (4,), dtype=np.uint8)
    keep = ~ignored
    result[keep, :3] = array[keep]
    result[keep, 3] = 255
    return result


def main(argv: list[str] | None = None) -> int:
    """Make the grey and white background of an image transparent and save it."""
    parser = argparse.ArgumentParser(
        prog="visionbasics-mask",
        description="Replace grey and white background pixels with transparency.",
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        with Image.open(args.input) as opened:
            source = np.asarray(opened.convert("RGB"))
    except OSError:
        print(f"Could not open or find the image: {args.input}", file=sys.stderr)
        return 1

    Image.fromarray(mask_background(source), mode="RGBA").save(args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())