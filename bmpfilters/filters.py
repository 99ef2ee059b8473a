"""The blur and swiss cheese filters over whole BMP files, and the command line."""

from __future__ import annotations

import argparse
import os
import random
from concurrent.futures import ThreadPoolExecutor
from typing import BinaryIO, Callable, Sequence

from bmpfilters.bmp import BmpHeader, DibHeader, read_pixels, write_pixels
from bmpfilters.pixels import Grid, blur_columns, create_holes, swiss_cheese_columns

THREAD_COUNT = 150


class ThreadCountError(ValueError):
    """Raised when an image cannot be split into the requested number of strips."""


def column_ranges(width: int, thread_count: int) -> list[tuple[int, int]]:
    """Split ``width`` columns into ``thread_count`` contiguous strips.

    Every strip but the last is ``width // thread_count`` wide; the last
    takes whatever columns remain.
    """
    if thread_count < 1:
        raise ThreadCountError(f"thread count must be at least 1, got {thread_count}")
    if thread_count > width:
        raise ThreadCountError(
            f"thread count {thread_count} is larger than image width {width}"
        )
    step = width // thread_count
    bounds = [k * step for k in range(thread_count)] + [width]
    return list(zip(bounds, bounds[1:]))


def hole_count(width: int, height: int) -> int:
    """Number of holes to punch: a tenth of the smaller image side."""
    return min(width, height) // 10


def average_radius(width: int, height: int) -> int:
    """Average hole radius: a tenth of the smaller image side."""
    return min(width, height) // 10


def _load(source: BinaryIO) -> tuple[BmpHeader, DibHeader, Grid]:
    bmp_header = BmpHeader.read(source)
    dib_header = DibHeader.read(source)
    pixels = read_pixels(source, dib_header.width, dib_header.height)
    return bmp_header, dib_header, pixels


def _save(
    destination: BinaryIO, bmp_header: BmpHeader, dib_header: DibHeader, pixels: Grid
) -> None:
    bmp_header.write(destination)
    dib_header.write(destination)
    write_pixels(destination, pixels, dib_header.width, dib_header.height)


def _run_strips(
    work: Callable[[int, int], None], ranges: Sequence[tuple[int, int]]
) -> None:
    with ThreadPoolExecutor(max_workers=len(ranges)) as pool:
        futures = [pool.submit(work, start, end) for start, end in ranges]
        for future in futures:
            future.result()


def apply_blur(
    source: BinaryIO, destination: BinaryIO, thread_count: int = THREAD_COUNT
) -> None:
    """Read a BMP from ``source``, box-blur it in strips and write it out."""
    bmp_header, dib_header, pixels = _load(source)
    width, height = dib_header.width, dib_header.height
    ranges = column_ranges(width, thread_count)

    _run_strips(
        lambda start, end: blur_columns(pixels, start, end, width, height), ranges
    )
    _save(destination, bmp_header, dib_header, pixels)


def apply_swiss_cheese(
    source: BinaryIO,
    destination: BinaryIO,
    thread_count: int = THREAD_COUNT,
    rng: random.Random | None = None,
) -> None:
    """Read a BMP, tint it yellow, punch random holes in it and write it out."""
    if rng is None:
        rng = random.Random()
    bmp_header, dib_header, pixels = _load(source)
    width, height = dib_header.width, dib_header.height
    holes = create_holes(
        hole_count(width, height), average_radius(width, height), width, height, rng
    )
    ranges = column_ranges(width, thread_count)

    _run_strips(
        lambda start, end: swiss_cheese_columns(pixels, holes, start, end, height),
        ranges,
    )
    _save(destination, bmp_header, dib_header, pixels)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bmpfilters",
        description="Apply a blur (b) or swiss cheese (c) filter to a 24-bit BMP.",
    )
    parser.add_argument("-i", dest="input", help="input BMP file")
    parser.add_argument("-o", dest="output", help="output BMP file")
    parser.add_argument("-f", dest="filter", default="", help="filters: b, c or both")
    return parser


def _run_filter(
    apply: Callable[[BinaryIO, BinaryIO], None], input_path: str, output_path: str
) -> None:
    with open(input_path, "rb") as source, open(output_path, "wb") as destination:
        apply(source, destination)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    args, unknown = _parser().parse_known_args(argv)
    for option in unknown:
        print(f"unknown option: {option.lstrip('-')}")

    if not args.input or not os.path.exists(args.input):
        print(
            "Please specify a valid input file path ./reader -i test2.bmp "
            "(Then Options -o -f)\nProgram Closing."
        )
        return 1
    print("File OK")

    chosen = args.filter or ""
    jobs: list[Callable[[BinaryIO, BinaryIO], None]] = []
    if "c" in chosen:
        jobs.append(lambda src, dst: apply_swiss_cheese(src, dst, THREAD_COUNT))
    if "b" in chosen:
        jobs.append(lambda src, dst: apply_blur(src, dst, THREAD_COUNT))
    if jobs and not args.output:
        print("Please specify an output file path with -o.")
        return 1

    try:
        for job in jobs:
            _run_filter(job, args.input, args.output)
    except ThreadCountError:
        print("ThreadCount is larger than Image Width.")
        print(
            "Exiting Program, please define THREAD_COUNT as a number smaller than width"
        )
        return 1
    return 0