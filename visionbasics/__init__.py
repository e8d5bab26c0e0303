"""Readable image-processing routines on NumPy arrays: BMP reading, pixel access,
interpolation, convolution, morphology, background masking and HSV colour masks."""

__version__ = "0.1.0"

__all__ = [
    "bmp",
    "colour",
    "convolution",
    "interpolation",
    "masking",
    "morphology",
    "pixels",
]