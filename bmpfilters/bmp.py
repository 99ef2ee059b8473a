"""Reading and writing the headers and pixel rows of 24-bit BMP files."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass
from typing import BinaryIO, ClassVar

from bmpfilters.pixels import Grid, Pixel

_PAD_BYTE = b"\x01"


class BmpFormatError(ValueError):
    """Raised when a stream ends before a complete header or pixel row."""


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise BmpFormatError(f"truncated {what}: expected {size} bytes, got {len(data)}")
    return data


@dataclass
class BmpHeader:
    """The 14-byte file header that opens every BMP file."""

    signature: bytes = b"BM"
    file_size: int = 0
    reserved1: int = 0
    reserved2: int = 0
    pixel_offset: int = 54

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<2sihhi")

    @classmethod
    def read(cls, stream: BinaryIO) -> "BmpHeader":
        """Read a file header from the current position of ``stream``."""
        data = _read_exact(stream, cls._FORMAT.size, "BMP header")
        return cls(*cls._FORMAT.unpack(data))

    def write(self, stream: BinaryIO) -> None:
        """Write this header to ``stream``."""
        stream.write(self._FORMAT.pack(*astuple(self)))


@dataclass
class DibHeader:
    """The 40-byte information header that follows the file header."""

    width: int = 0
    height: int = 0
    header_size: int = 40
    planes: int = 1
    bits_per_pixel: int = 24
    compression: int = 0
    image_size: int = 0
    x_pixels_per_meter: int = 0
    y_pixels_per_meter: int = 0
    colors_in_color_table: int = 0
    important_color_count: int = 0

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<iiihhiiiiii")

    @classmethod
    def read(cls, stream: BinaryIO) -> "DibHeader":
        """Read an information header from the current position of ``stream``."""
        data = _read_exact(stream, cls._FORMAT.size, "DIB header")
        (
            header_size,
            width,
            height,
            planes,
            bits_per_pixel,
            compression,
            image_size,
            x_ppm,
            y_ppm,
            colors,
            important,
        ) = cls._FORMAT.unpack(data)
        return cls(
            width=width,
            height=height,
            header_size=header_size,
            planes=planes,
            bits_per_pixel=bits_per_pixel,
            compression=compression,
            image_size=image_size,
            x_pixels_per_meter=x_ppm,
            y_pixels_per_meter=y_ppm,
            colors_in_color_table=colors,
            important_color_count=important,
        )

    def write(self, stream: BinaryIO) -> None:
        """Write this header to ``stream``."""
        stream.write(
            self._FORMAT.pack(
                self.header_size,
                self.width,
                self.height,
                self.planes,
                self.bits_per_pixel,
                self.compression,
                self.image_size,
                self.x_pixels_per_meter,
                self.y_pixels_per_meter,
                self.colors_in_color_table,
                self.important_color_count,
            )
        )


def row_padding(width: int) -> int:
    """Number of padding bytes after each pixel row of the given width."""
    return (4 - width % 4) % 4


def read_pixels(stream: BinaryIO, width: int, height: int) -> Grid:
    """Read ``height`` rows of ``width`` blue-green-red pixels, skipping padding."""
    padding = row_padding(width)
    rows: Grid = []
    for row_number in range(height):
        data = _read_exact(stream, 3 * width, f"pixel row {row_number}")
        rows.append(
            [
                Pixel(blue=data[k], green=data[k + 1], red=data[k + 2])
                for k in range(0, len(data), 3)
            ]
        )
        stream.read(padding)
    return rows


def write_pixels(stream: BinaryIO, pixels: Grid, width: int, height: int) -> None:
    """Write ``height`` rows of ``width`` pixels, each row followed by padding."""
    padding = _PAD_BYTE * row_padding(width)
    for row in pixels[:height]:
        stream.write(
            b"".join(bytes((p.blue, p.green, p.red)) for p in row[:width]) + padding
        )