"""Colour statistics and HSV colour-range masking used for blob and object detection."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

HUE_MARGIN = 5
SV_MARGIN = 50
CHANNEL_MAX = 255

YELLOW_LOWER = (15, 30, 150)
YELLOW_UPPER = (36, 255, 255)
BLUE_LOWER = (33, 52, 80)
BLUE_UPPER = (150, 200, 255)


def median(values: Iterable[float]) -> float:
    """Return the median of ``values``; an empty collection gives 0.0.

    With an even count the two middle values are averaged.
    """
    ordered = sorted(float(value) for value in values)
    size = len(ordered)
    if size == 0:
        return 0.0
    middle = size // 2
    if size % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2.0
    return ordered[middle]


def _three_channel(image: np.ndarray) -> np.ndarray:
    array = np.asarray(image)
    if array.ndim != 3 or array.shape[2] < 3:
        raise ValueError("image must have at least three channels")
    return array


def median_pixel_values(image: np.ndarray) -> tuple[float, float, float]:
    """Return the median value of each of the first three channels."""
    pixels = _three_channel(image)[..., :3].reshape(-1, 3)
    first, second, third = (median(channel) for channel in pixels.T)
    return first, second, third


def bgr_to_hsv(image: np.ndarray) -> np.ndarray:
    """Convert an 8-bit BGR image to HSV with hue in [0, 180) and S, V in [0, 255]."""
    bgr = _three_channel(image)[..., :3].astype(np.float64)
    blue, green, red = bgr[..., 0], bgr[..., 1], bgr[..., 2]
    value = bgr.max(axis=-1)
    spread = value - bgr.min(axis=-1)

    safe_value = np.where(value > 0, value, 1.0)
    saturation = np.where(value > 0, spread * CHANNEL_MAX / safe_value, 0.0)

    safe_spread = np.where(spread > 0, spread, 1.0)
    hue = np.select(
        [spread == 0, value == red, value == green],
        [
            0.0,
            60.0 * (green - blue) / safe_spread,
            120.0 + 60.0 * (blue - red) / safe_spread,
        ],
        240.0 + 60.0 * (red - green) / safe_spread,
    )
    hue = np.where(hue < 0, hue + 360.0, hue)
    hue = np.rint(hue / 2.0) % 180

    hsv = np.stack([hue, np.rint(saturation), np.rint(value)], axis=-1)
    return np.clip(hsv, 0, CHANNEL_MAX).astype(np.uint8)


def in_range(image: np.ndarray, lower: Sequence[float], upper: Sequence[float]) -> np.ndarray:
    """Return a mask that is 255 where every channel lies within the inclusive bounds."""
    array = np.asarray(image)
    if array.ndim == 2:
        array = array[..., None]
    if array.ndim != 3:
        raise ValueError("image must be a 2-D or 3-D array")
    low = np.asarray(lower, dtype=np.float64)
    high = np.asarray(upper, dtype=np.float64)
    channels = array.shape[2]
    if low.shape != (channels,) or high.shape != (channels,):
        raise ValueError("bounds must give one value per channel")
    values = array.astype(np.float64)
    inside = np.all((values >= low) & (values <= high), axis=-1)
    return np.where(inside, CHANNEL_MAX, 0).astype(np.uint8)


def hsv_bounds(h: float, s: float, v: float) -> tuple[tuple[int, int, int], tuple[int, int, int]]:
    """Return the lower and upper HSV bounds around a sampled colour."""
    hue, sat, val = int(h), int(s), int(v)
    lower = (hue - HUE_MARGIN, max(0, sat - SV_MARGIN), max(0, val - SV_MARGIN))
    upper = (
        hue + HUE_MARGIN,
        min(sat + SV_MARGIN, CHANNEL_MAX),
        min(val + SV_MARGIN, CHANNEL_MAX),
    )
    return lower, upper


def apply_mask(image: np.ndarray, mask: np.ndarray) -> np.ndarray:
    """Keep the pixels of ``image`` where ``mask`` is non-zero and black out the rest."""
    array = np.asarray(image)
    selector = np.asarray(mask)
    if selector.ndim != 2 or selector.shape != array.shape[:2]:
        raise ValueError("mask must be 2-D and match the image's height and width")
    keep = selector != 0
    if array.ndim == 3:
        keep = keep[..., None]
    return np.where(keep, array, 0).astype(array.dtype)