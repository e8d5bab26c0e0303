# visionbasics

Plain, readable implementations of basic image-processing operations,
built on NumPy arrays. Each routine is short and written out step by step,
so the package works both as a small toolkit and as a reference for how
these operations behave.

Images are NumPy arrays: `(height, width)` for grayscale and
`(height, width, channels)` for colour, normally `uint8`. Most routines do
not care about channel order. `pixels.change_blue` and `colour.bgr_to_hsv`
treat channel 0 as blue (BGR order). The command-line tools load files with
Pillow, which gives RGB order.

## Installation

```
pip install visionbasics
```

For the test suite:

```
pip install "visionbasics[test]"
pytest
```

## Modules

### `visionbasics.bmp`

Reads uncompressed 8-bit grayscale BMP files.

- `parse_bmp(data)` parses the bytes of a file. `read_bmp(path)` reads the
  file and parses it.
- The result is a `BmpImage` with `header` (`BitmapFileHeader`), `info`
  (`BitmapInfoHeader`) and `data`, which holds the raw pixel bytes, bottom
  row first. It also has `width`, `height`, `pixel_rows()` (rows top first)
  and `to_image()` (a grayscale Pillow image).
- `describe(image)` returns a text listing of every header field.
- Bad input raises `BmpError`, a `ValueError`. This covers a missing `BM`
  signature, truncated headers, a depth other than 8 bits per pixel, and
  dimensions that are not positive. Missing pixel bytes at the end of a file
  are filled with zeros.

### `visionbasics.pixels`

Direct pixel work. Every function returns a new array.

- `black_out_rows(image)` sets every even-numbered row to zero.
- `change_blue(image)` sets channel 0 to 255 on even-numbered rows. It needs
  at least three channels.
- `draw_lines(height=480, width=720)` returns a black BGR canvas with three
  white lines: a horizontal line on row 200 (columns 100 to 620), a vertical
  line on column 300 (rows 80 to 400), and a 45° diagonal from (100, 100) to
  (300, 300). The canvas must be taller than 400 and wider than 620 pixels.
- `crop(image, rows, cols)` returns the top-left region.
- `translation_matrix(tx, ty)` returns the 2×3 `float32` affine shift matrix.
- `translate(image, tx, ty)` shifts the image `tx` columns right and `ty`
  rows down. It interpolates linearly for fractional shifts and fills
  uncovered pixels with zero.

### `visionbasics.interpolation`

Resizing by hand.

- `get_pixel(image, y, x)` returns the channel values at a position as a
  tuple.
- `set_pixel(image, value, y, x)` sets the pixel in place.
- Both raise `IndexError` for positions outside the image.
- `bilinear_interpolate(image, width, height)` resizes using the four
  surrounding source pixels.
- `nearest_neighbour_interpolate(image, width, height)` resizes by copying
  the closest source pixel.
- Both resizing functions map the corner pixels onto each other, need a
  target of at least 2×2, and return `uint8`.

### `visionbasics.convolution`

- `convolve(image, kernel)` applies a kernel to every channel.
  - The image is padded by one replicated pixel on each side.
  - The kernel is not flipped, and its element (1, 1) sits over the output
    pixel.
  - Results are rounded and clipped to 0–255.
- `separable_convolve(image, vertical, horizontal)` convolves with a column
  kernel and then with a row kernel.
- The module constants `SOBEL_X`, `GAUSSIAN_3X3`, `GAUSSIAN_VERTICAL` and
  `GAUSSIAN_HORIZONTAL` hold the kernels used by the demo command.

### `visionbasics.morphology`

Binary morphology on 2-D grayscale images. Kernel sizes must be odd and at
least 3; any other size raises `ValueError`.

- `kernel_sum(image, row, col, kernel_size)` sums the square window around a
  pixel. Parts of the window outside the image add nothing.
- `erosion(image, kernel_size=3)` makes a pixel 255 only if its whole window
  lies inside the image and is 255. Otherwise the pixel is 0, so border
  pixels always erode.
- `dilation(image, kernel_size=3)` makes a pixel 255 if any pixel in its
  window is non-zero.
- `opening` erodes and then dilates. `closing` dilates and then erodes.
- `difference(first, second)` returns the absolute per-pixel difference. It
  raises `ValueError` if the sizes differ.
- `gradient(image, kernel_size=3)` returns dilation minus erosion.

### `visionbasics.masking`

- `mask_background(image, ignore=None)` returns an RGBA-shaped
  `(h, w, 4)` copy of a three-channel image.
  - Pixels that exactly match one of the ignored colours become all zero,
    which makes them fully transparent.
  - Every other pixel keeps its channels and gets alpha 255.
  - By default the ignored colours are `(230, 230, 230)` and
    `(255, 255, 255)`.

### `visionbasics.colour`

Helpers for colour segmentation.

- `median(values)` returns the median, averaging the two middle values for
  an even count. An empty input gives `0.0`.
- `median_pixel_values(image)` returns the median of each of the first three
  channels.
- `bgr_to_hsv(image)` converts 8-bit BGR to HSV, with hue in [0, 180) and
  saturation and value in [0, 255].
- `in_range(image, lower, upper)` returns a mask that is 255 where every
  channel lies within the inclusive bounds, and 0 elsewhere.
- `hsv_bounds(h, s, v)` returns lower and upper bounds around a sampled
  colour: ±5 on hue and ±50 on saturation and value, with saturation and
  value kept within 0–255.
- `apply_mask(image, mask)` keeps the pixels where the mask is non-zero and
  zeroes the rest.
- `YELLOW_LOWER`/`YELLOW_UPPER` and `BLUE_LOWER`/`BLUE_UPPER` are ready-made
  HSV ranges.

```python
import numpy as np

from visionbasics.colour import apply_mask, bgr_to_hsv, in_range
from visionbasics.convolution import SOBEL_X, convolve
from visionbasics.interpolation import bilinear_interpolate
from visionbasics.morphology import gradient

image = np.zeros((64, 64, 3), dtype=np.uint8)
image[16:48, 16:48] = (0, 200, 255)

edges = convolve(image, SOBEL_X)
larger = bilinear_interpolate(image, 128, 128)
outline = gradient(image[:, :, 2].copy(), 3)

hsv = bgr_to_hsv(image)
selected = apply_mask(image, in_range(hsv, (15, 30, 150), (36, 255, 255)))
```

## Command-line tools

Each command prints a message and exits with status 1 if its input image
cannot be opened.

- `visionbasics-bmp INPUT.bmp [OUTPUT.png]` prints the headers of an 8-bit
  BMP file. If an output path is given, it also saves the pixels as an
  image.
- `visionbasics-interpolate [INPUT] [UPSCALED] [DOWNSCALED]` saves a
  1000×1000 bilinear upscale and a 100×100 nearest-neighbour downscale.
  - The input defaults to `assets/pixel3.jpg`.
  - The outputs default to `assets/pixeli3s.jpg` and `assets/pixeli3d.jpg`.
- `visionbasics-convolve [INPUT] [OUTPUT_DIR]` halves the image and runs
  three convolutions, printing the time each takes in microseconds. It
  writes `sobel.png`, `gaussian.png` and `separable.png` to the output
  directory.
  - The input defaults to `./assets/Dog_img.jpeg`.
  - The output directory defaults to the current directory.
- `visionbasics-morph OPERATION IMAGE OUTPUT [--kernel-size N]` loads the
  image as grayscale, applies the operation and saves the result.
  `OPERATION` is one of `closing`, `dilation`, `erosion`, `gradient` or
  `opening`.
- `visionbasics-mask [INPUT] [OUTPUT]` makes grey and white background
  transparent and saves the result as RGBA.
  - The input defaults to `assets/nike.png`.
  - The output defaults to `assets/bg_free.png`.

## What it does not do

- No results are shown on screen: the commands write files instead.
- There is no camera capture or interactive region selection.
- There is no contour finding or drawing. The colour helpers provide the
  masking steps of blob and object detection, but they do not track blobs
  in live video.