# bmpfilters

bmpfilters applies photo filters to uncompressed 24-bit BMP images. It splits
the image into vertical strips of columns and gives each strip to its own
worker thread. All the workers change the same pixel grid in place.

The package has two filters.

- **blur** is a 3×3 box blur. Each pixel is replaced by the integer average of
  itself and those of its eight neighbours that fall inside the grid. The grid
  is updated as the filter goes, so a neighbour that was already blurred adds
  its new value, not its original one.
- **swiss cheese** tints the image yellow by adding 65 to red and to green,
  clamped at 255. Every pixel inside one of the holes is set to black. The
  holes are circles at random positions. The number of holes and their
  average radius are both one tenth of the smaller image dimension, rounded
  down. Half of the holes, rounded down, get the average radius. Half of the
  rest, rounded down, get 1.25 times the average. The remaining holes get
  half the average.

## Installation

```
pip install .
```

## Command line

```
bmpfilters -i input.bmp -o output.bmp -f b
bmpfilters -i input.bmp -o output.bmp -f c
```

- `-i` names the input BMP file. If it is missing or the file does not exist,
  the command prints a message and exits with status 1. Otherwise it prints
  `File OK`.
- `-o` names the output BMP file. If a filter is selected and `-o` is not
  given, the command exits with status 1.
- `-f` selects the filter: `b` for blur and `c` for swiss cheese. If the value
  contains both letters, both filters run on the original input. The swiss
  cheese result is written first and the blur result then overwrites it.

The command prints any option it does not recognise as `unknown option: ...`
and carries on. It always uses 150 worker threads, so the image must be at
least 150 pixels wide. For a narrower image it prints a message and exits with
status 1.

## Library use

```python
import random
from bmpfilters.filters import apply_blur, apply_swiss_cheese

with open("input.bmp", "rb") as src, open("blurred.bmp", "wb") as dst:
    apply_blur(src, dst, 8)

with open("input.bmp", "rb") as src, open("cheese.bmp", "wb") as dst:
    apply_swiss_cheese(src, dst, 8, random.Random(42))
```

`bmpfilters.filters` also provides the following:

- `column_ranges(width, thread_count)`: the strips of columns. Every strip
  except the last is `width // thread_count` wide, and the last strip takes
  the remaining columns.
- `hole_count(width, height)` and `average_radius(width, height)`.
- `main(argv=None)`: the command line. It returns the exit status.

`bmpfilters.bmp` works with the file format:

- `BmpHeader` is the 14-byte file header and `DibHeader` is the 40-byte
  information header. Each has `read(stream)` and `write(stream)`.
- `read_pixels(stream, width, height)` and
  `write_pixels(stream, pixels, width, height)` handle the pixel rows. Each
  row is padded to a multiple of four bytes. Padding is skipped on reading
  and written as bytes of value 1.
- `row_padding(width)` gives the number of padding bytes per row.
- `BmpFormatError` is raised when a stream ends before a header or a pixel row
  is complete.

`bmpfilters.pixels` holds the grid and the filters that change it in place:

- `Pixel` is a frozen blue/green/red value. Its `shifted()` returns a copy
  with each channel shifted and clamped.
- `Hole` is a circle. Its `contains()` tells whether a position lies strictly
  inside it.
- The filters are `color_shift_pixels`, `box_blur`, `blur_columns`,
  `swiss_cheese`, `swiss_cheese_columns` and `create_holes`.

`column_ranges`, `apply_blur` and `apply_swiss_cheese` raise
`ThreadCountError` when the thread count is less than 1 or larger than the
image width.

## Limitations

- The header fields are read and written back unchanged. They are not
  checked, so the signature, the bit depth and the compression are never
  validated. The pixel data is always treated as uncompressed 24-bit rows.
- The command line offers only the blur and swiss cheese filters. The colour
  shift (`color_shift_pixels`) can be used from Python only.