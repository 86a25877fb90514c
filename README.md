# rasterlab

Small image-processing experiments on raw, planar RGB files: resampling,
hue isolation and a comparison of DCT and DWT compression.

The input format is a headerless `.rgb` file holding every red value of the
image, then every green value, then every blue value, one byte each, rows
from top to bottom. A file shorter than three full planes is read with the
missing samples set to zero.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

Every command writes its results to files and prints where it wrote them.
An output path ending in `.rgb` is written as planar bytes in the input
format; any other suffix is saved as an ordinary image through Pillow. On
invalid arguments or an unreadable input file a command prints the reason to
standard error and exits with status 1.

### Resampling

```
rasterlab-resample IMAGE.rgb WIDTH HEIGHT FORMAT [-o OUTPUT]
```

`WIDTH HEIGHT` must be `4000 3000` or `400 300`. `FORMAT` selects the
output size:

| Format | Size      |
|--------|-----------|
| `O1`   | 1920x1080 |
| `O2`   | 1280x720  |
| `O3`   | 640x480   |

When the output is narrower than the input, each channel is first blurred
with a 5x5 Gaussian kernel (edge pixels repeated at the borders). `O1` and
`O2` then sample with a non-linear stretch away from the image centre; `O3`
samples on a fixed integer step. When the output is wider (every format from
400x300), bilinear interpolation is used.

Without `-o` the result goes next to the input as `<name>_<FORMAT>.png`.

### Hue isolation

```
rasterlab-hue IMAGE.rgb HUE1 HUE2 [-o OUTPUT]
```

Reads a 512x512 image and keeps the colour of pixels whose hue, truncated to
whole degrees, lies between `HUE1` and `HUE2` (both in 0–360,
`HUE1 <= HUE2`); every other pixel is turned grey by setting its saturation
to zero. Without `-o` the result goes next to the input as
`<name>_hue_<HUE1>_<HUE2>.png`.

### DCT versus DWT

```
rasterlab-compress IMAGE.rgb N [-d OUTPUT_DIR] [--format {png,rgb}]
```

Reads a 512x512 image, reconstructs it from a reduced set of DCT and Haar
DWT coefficients, and writes each reconstruction as a numbered frame
`NNN_<dct|dwt>_n<count>.<format>` into `OUTPUT_DIR` (default: the current
directory, created if missing; default format `png`). Each frame's title is
printed with its path.

- `N > 0`: two frames. The DCT keeps the first `N // 4096` coefficients of
  every 8x8 block in zig-zag order; the DWT keeps the top-left
  `isqrt(N) x isqrt(N)` corner of the transform.
- `N = -1`: a progressive run. The DCT frames use `4096`, then
  `4096 * 2 ... 4096 * 64` coefficients; the DWT frames use `1`, then `4^k`
  coefficients for `k = 1 ... 9`.
- `N = -2`: a progressive run where both transforms use
  `4096 * 1 ... 4096 * 64` coefficients, the DWT keeping whole blocks of an
  8x8 grid over the coefficients (64x64 for a 512x512 image) in order of
  decomposition level.
- Any other value writes nothing.

## What it does not do

The package has no viewer: results are only written to files, never shown in
a window, and the progressive runs produce a sequence of frame files rather
than an animated display.

## Library use

The pieces behind the commands work directly on NumPy arrays:

```python
from rasterlab.rawrgb import read_planar_rgb, save_image, interleave
from rasterlab.resample import OutputFormat, resample_image
from rasterlab.hue import isolate_hue
from rasterlab.compression import Method, compress_image

red, green, blue = read_planar_rgb("photo.rgb", 512, 512)

grey_but_red = isolate_hue(red, green, blue, 0, 30)
save_image(interleave(*grey_but_red), "red_only.png")

dct_version = compress_image(red, green, blue, 16384, Method.DCT, False)
```

- `rasterlab.rawrgb`: `read_planar_rgb`, `interleave`, `save_image`.
- `rasterlab.resample`: `OutputFormat` (with `from_name`),
  `validate_input_size`, `gaussian_kernel`, `apply_kernel`,
  `scale_down_stretched`, `scale_down_stepped`, `scale_up_bilinear`,
  `resample_channel`, `resample_image`.
- `rasterlab.hue`: `validate_hue_range`, `rgb_to_hsv`, `hsv_to_rgb`,
  `isolate_hue`.
- `rasterlab.dct`: `cosine_table`, `dct_block`, `idct_block`, `encode_dct`,
  `decode_dct`, `zigzag_order`, `truncate_dct`.
- `rasterlab.dwt`: `haar_forward`, `haar_inverse`, `keep_low_band`,
  `keep_blocks`.
- `rasterlab.compression`: `Method`, `Frame`, `compress_channel`,
  `compress_image`, `progression`.

Invalid sizes, ranges and arguments raise `ValueError`.