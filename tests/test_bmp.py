import struct

import pytest
from PIL import Image

from visionbasics.bmp import (
    BitmapFileHeader,
    BitmapInfoHeader,
    BmpError,
    BmpImage,
    describe,
    main,
    parse_bmp,
    read_bmp,
)


def make_bmp(width, height, pixels, bits=8, signature=b"BM"):
    offset = 54
    file_header = struct.pack("<2sIHHI", signature, offset + len(pixels), 0, 0, offset)
    info_header = struct.pack(
        "<IiiHHIIiiII", 40, width, height, 1, bits, 0, 0, 2835, 2835, 0, 0
    )
    return file_header + info_header + bytes(pixels)


def test_parse_reads_headers():
    image = parse_bmp(make_bmp(3, 2, range(6)))
    assert image.header.file_type == b"BM"
    assert image.header.pixel_data_offset == 54
    assert image.header.file_size == 60
    assert image.info.header_size == 40
    assert image.info.width == 3
    assert image.info.height == 2
    assert image.info.bits_per_pixel == 8
    assert image.info.x_pixels_per_meter == 2835


def test_parse_reads_pixel_data():
    image = parse_bmp(make_bmp(3, 2, range(6)))
    assert image.data == bytes(range(6))


def test_header_classes_unpack():
    raw = make_bmp(4, 4, bytes(16))
    header = BitmapFileHeader.unpack(raw[:14])
    info = BitmapInfoHeader.unpack(raw[14:54])
    assert header.file_type == b"BM"
    assert (info.width, info.height, info.planes) == (4, 4, 1)


def test_pixel_rows_are_top_first():
    image = parse_bmp(make_bmp(2, 3, [1, 2, 3, 4, 5, 6]))
    assert image.pixel_rows() == [bytes([5, 6]), bytes([3, 4]), bytes([1, 2])]


def test_pixel_rows_cover_all_data():
    image = parse_bmp(make_bmp(4, 3, range(12)))
    rows = image.pixel_rows()
    assert len(rows) == 3
    assert all(len(row) == 4 for row in rows)
    assert sorted(b"".join(rows)) == list(range(12))


def test_short_pixel_data_is_zero_padded():
    image = parse_bmp(make_bmp(2, 2, [9, 9]))
    assert image.data == bytes([9, 9, 0, 0])


def test_wrong_signature_rejected():
    with pytest.raises(BmpError, match="not a BMP image"):
        parse_bmp(make_bmp(2, 2, bytes(4), signature=b"XX"))


def test_non_8bit_rejected():
    with pytest.raises(BmpError, match="8-bit"):
        parse_bmp(make_bmp(2, 2, bytes(12), bits=24))


def test_truncated_header_rejected():
    with pytest.raises(BmpError):
        parse_bmp(b"BM\x00")


def test_truncated_info_header_rejected():
    with pytest.raises(BmpError):
        parse_bmp(make_bmp(2, 2, bytes(4))[:30])


def test_zero_size_rejected():
    with pytest.raises(BmpError):
        parse_bmp(make_bmp(0, 2, b""))


def test_describe_lists_fields():
    text = describe(parse_bmp(make_bmp(3, 2, range(6))))
    assert "File type: BM" in text
    assert "Width: 3" in text
    assert "Height: 2" in text
    assert "Bits per pixel: 8" in text
    assert "Pixel Data Offset: 54" in text
    assert "Bit Map Info Header" in text


def test_to_image_matches_rows():
    image = parse_bmp(make_bmp(2, 2, [10, 20, 30, 40]))
    pil = image.to_image()
    assert pil.size == (2, 2)
    assert pil.getpixel((0, 0)) == 30
    assert pil.getpixel((1, 1)) == 20


def test_read_bmp_from_file(tmp_path):
    path = tmp_path / "img.bmp"
    path.write_bytes(make_bmp(2, 2, [1, 2, 3, 4]))
    image = read_bmp(path)
    assert isinstance(image, BmpImage)
    assert image.data == bytes([1, 2, 3, 4])


def test_main_without_arguments_fails(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_missing_file_fails(tmp_path, capsys):
    missing = tmp_path / "missing.bmp"
    assert main([str(missing)]) == 1
    assert "Could not open input file" in capsys.readouterr().err


def test_main_bad_file_fails(tmp_path, capsys):
    path = tmp_path / "bad.bmp"
    path.write_bytes(make_bmp(2, 2, bytes(4), signature=b"PN"))
    assert main([str(path)]) == 1
    assert "not a BMP image" in capsys.readouterr().err


def test_main_prints_and_saves(tmp_path, capsys):
    path = tmp_path / "img.bmp"
    out = tmp_path / "out.png"
    path.write_bytes(make_bmp(2, 2, [10, 20, 30, 40]))
    assert main([str(path), str(out)]) == 0
    assert "Width: 2" in capsys.readouterr().out
    with Image.open(out) as saved:
        assert saved.getpixel((0, 0)) == 30
        assert saved.getpixel((0, 1)) == 10