"""Reading and inspecting uncompressed 8-bit grayscale BMP files."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

FILE_HEADER = struct.Struct("<2sIHHI")
INFO_HEADER = struct.Struct("<IiiHHIIiiII")
SIGNATURE = b"BM"

_RULE = "-" * 61


class BmpError(ValueError):
    """Raised when data is not a BMP image this module can read."""


@dataclass(frozen=True)
class BitmapFileHeader:
    """The 14-byte file header that opens every BMP file."""

    file_type: bytes
    file_size: int
    reserved1: int
    reserved2: int
    pixel_data_offset: int

    @classmethod
    def unpack(cls, raw: bytes) -> BitmapFileHeader:
        return cls(*FILE_HEADER.unpack(raw))


@dataclass(frozen=True)
class BitmapInfoHeader:
    """The 40-byte information header describing the image."""

    header_size: int
    width: int
    height: int
    planes: int
    bits_per_pixel: int
    compression: int
    image_size: int
    x_pixels_per_meter: int
    y_pixels_per_meter: int
    colors_used: int
    colors_important: int

    @classmethod
    def unpack(cls, raw: bytes) -> BitmapInfoHeader:
        return cls(*INFO_HEADER.unpack(raw))


@dataclass(frozen=True)
class BmpImage:
    """Both headers plus the raw grayscale pixel bytes, stored bottom row first."""

    header: BitmapFileHeader
    info: BitmapInfoHeader
    data: bytes

    @property
    def width(self) -> int:
        return self.info.width

    @property
    def height(self) -> int:
        return self.info.height

    def pixel_rows(self) -> list[bytes]:
        """Return the pixel rows in display order, top row first."""
        stored = [
            self.data[start:start + self.width]
            for start in range(0, self.width * self.height, self.width)
        ]
        return stored[::-1]

    def to_image(self) -> Image.Image:
        """Return the pixels as a grayscale Pillow image."""
        return Image.frombytes("L", (self.width, self.height), b"".join(self.pixel_rows()))


def parse_bmp(data: bytes) -> BmpImage:
    """Parse the bytes of an 8-bit BMP file."""
    data = bytes(data)
    if len(data) < FILE_HEADER.size:
        raise BmpError("Input file is too short for a BMP file header")
    header = BitmapFileHeader.unpack(data[:FILE_HEADER.size])
    if header.file_type != SIGNATURE:
        raise BmpError("Input file is not a BMP image")

    info_end = FILE_HEADER.size + INFO_HEADER.size
    if len(data) < info_end:
        raise BmpError("Input file is too short for a BMP info header")
    info = BitmapInfoHeader.unpack(data[FILE_HEADER.size:info_end])
    if info.bits_per_pixel != 8:
        raise BmpError("Input file is not an 8-bit BMP image")
    if info.width <= 0 or info.height <= 0:
        raise BmpError("Image dimensions must be positive")

    size = info.width * info.height
    pixels = data[info_end:info_end + size]
    pixels += bytes(size - len(pixels))
    return BmpImage(header, info, pixels)


def read_bmp(path: str | Path) -> BmpImage:
    """Read and parse an 8-bit BMP file from disk."""
    return parse_bmp(Path(path).read_bytes())


def describe(image: BmpImage) -> str:
    """Return a human-readable listing of both headers."""
    header, info = image.header, image.info
    lines = [
        "",
        "-------------------- Bit Map File Header --------------------",
        f"File type: {header.file_type.decode('latin-1')}",
        f"File Size: {header.file_size}",
        f"Pixel Data Offset: {header.pixel_data_offset}",
        _RULE,
        "",
        "-------------------- Bit Map Info Header --------------------",
        f"Header Size: {info.header_size}",
        f"Width: {info.width}",
        f"Height: {info.height}",
        f"Planes: {info.planes}",
        f"Bits per pixel: {info.bits_per_pixel}",
        f"Compression type: {info.compression}",
        f"Image Size: {info.image_size}",
        f"X pixels per meter: {info.x_pixels_per_meter}",
        f"Y pixels per meter: {info.y_pixels_per_meter}",
        f"Number of Colors Used: {info.colors_used}",
        f"Number of important colors: {info.colors_important}",
        _RULE,
        "",
    ]
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Print the headers of a BMP file and optionally save its pixels as an image."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (1, 2):
        print("Usage: visionbasics-bmp <input_file.bmp> [output.png]", file=sys.stderr)
        return 1

    path = args[0]
    try:
        image = read_bmp(path)
    except OSError:
        print(f"Error: Could not open input file: {path}", file=sys.stderr)
        return 1
    except BmpError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(describe(image))
    if len(args) == 2:
        image.to_image().save(args[1])
    return 0


if __name__ == "__main__":
    sys.exit(main())