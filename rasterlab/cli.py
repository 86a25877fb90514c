"""Command-line entry points for resampling, hue isolation and compression."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

import numpy as np

from rasterlab.compression import compress_image, progression
from rasterlab.hue import isolate_hue, validate_hue_range
from rasterlab.rawrgb import interleave, read_planar_rgb, save_image
from rasterlab.resample import OutputFormat, resample_image, validate_input_size

_SQUARE_SIZE = 512


def _write_planes(path: Path, red: np.ndarray, green: np.ndarray, blue: np.ndarray) -> None:
    """Write planar ``.rgb`` bytes, or any image format Pillow knows from the suffix."""
    if path.suffix.lower() == ".rgb":
        path.write_bytes(
            b"".join(np.ascontiguousarray(p, dtype=np.uint8).tobytes() for p in (red, green, blue))
        )
    else:
        save_image(interleave(red, green, blue), path)


def _read(path: str, width: int, height: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    try:
        return read_planar_rgb(path, width, height)
    except OSError as exc:
        raise ValueError(f"error opening file for reading: {exc}") from exc


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def resample_main(argv: Sequence[str] | None = None) -> int:
    """Resample a 4000x3000 or 400x300 planar RGB file to O1, O2 or O3."""
    parser = argparse.ArgumentParser(prog="rasterlab-resample", description=resample_main.__doc__)
    parser.add_argument("path", help="planar RGB input file")
    parser.add_argument("width", type=int, help="input width: 4000 or 400")
    parser.add_argument("height", type=int, help="input height: 3000 or 300")
    parser.add_argument("format", help="output format: O1, O2 or O3")
    parser.add_argument("-o", "--output", help="output file (.rgb or an image format)")
    args = parser.parse_args(argv)

    try:
        validate_input_size(args.width, args.height)
        fmt = OutputFormat.from_name(args.format)
        red, green, blue = _read(args.path, args.width, args.height)
        planes = resample_image(red, green, blue, fmt.width, fmt.height)
    except ValueError as exc:
        return _fail(str(exc))

    output = Path(args.output or Path(args.path).with_name(f"{Path(args.path).stem}_{fmt.name}.png"))
    _write_planes(output, *planes)
    print(output)
    return 0


def hue_main(argv: Sequence[str] | None = None) -> int:
    """Keep colours of a 512x512 planar RGB file whose hue is in a range; grey the rest."""
    parser = argparse.ArgumentParser(prog="rasterlab-hue", description=hue_main.__doc__)
    parser.add_argument("path", help="planar RGB input file")
    parser.add_argument("hue1", type=int, help="lowest hue kept, 0-360")
    parser.add_argument("hue2", type=int, help="highest hue kept, 0-360")
    parser.add_argument("-o", "--output", help="output file (.rgb or an image format)")
    args = parser.parse_args(argv)

    try:
        validate_hue_range(args.hue1, args.hue2)
        red, green, blue = _read(args.path, _SQUARE_SIZE, _SQUARE_SIZE)
        planes = isolate_hue(red, green, blue, args.hue1, args.hue2)
    except ValueError as exc:
        return _fail(str(exc))

    source = Path(args.path)
    output = Path(args.output or source.with_name(f"{source.stem}_hue_{args.hue1}_{args.hue2}.png"))
    _write_planes(output, *planes)
    print(output)
    return 0


def compression_main(argv: Sequence[str] | None = None) -> int:
    """Compress a 512x512 planar RGB file with DCT and DWT and write every frame."""
    parser = argparse.ArgumentParser(
        prog="rasterlab-compress", description=compression_main.__doc__
    )
    parser.add_argument("path", help="planar RGB input file")
    parser.add_argument(
        "n", type=int, help="coefficients kept, or -1 / -2 for the progressive sequences"
    )
    parser.add_argument("-d", "--output-dir", default=".", help="directory for the frames")
    parser.add_argument("--format", choices=("png", "rgb"), default="png", help="frame file type")
    args = parser.parse_args(argv)

    try:
        red, green, blue = _read(args.path, _SQUARE_SIZE, _SQUARE_SIZE)
    except ValueError as exc:
        return _fail(str(exc))

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    for index, frame in enumerate(progression(args.n), start=1):
        try:
            planes = compress_image(red, green, blue, frame.n, frame.method, frame.blockwise)
        except ValueError as exc:
            return _fail(str(exc))
        name = f"{index:03d}_{frame.method.value.lower()}_n{frame.n}.{args.format}"
        path = output_dir / name
        _write_planes(path, *planes)
        print(f"{frame.title}: {path}")
    return 0