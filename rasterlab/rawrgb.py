"""Reading and writing raw planar RGB images."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

PathType = Union[str, "PathLike[str]"]


def read_planar_rgb(path: PathType, width: int, height: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Read a planar ``RRR...GGG...BBB`` file into three ``(height, width)`` uint8 planes.

    A file shorter than three full planes leaves the missing samples at zero.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    plane = width * height
    data = Path(path).read_bytes()[: 3 * plane]
    buffer = np.zeros(3 * plane, dtype=np.uint8)
    buffer[: len(data)] = np.frombuffer(data, dtype=np.uint8)
    red, green, blue = (p.reshape(height, width) for p in np.split(buffer, 3))
    return red, green, blue


def interleave(red: np.ndarray, green: np.ndarray, blue: np.ndarray) -> np.ndarray:
    """Combine three equally sized planes into one ``(height, width, 3)`` RGB array."""
    red, green, blue = (np.asarray(p, dtype=np.uint8) for p in (red, green, blue))
    if not (red.shape == green.shape == blue.shape) or red.ndim != 2:
        raise ValueError(
            f"planes must be 2-D and of equal shape, got {red.shape}, {green.shape}, {blue.shape}"
        )
    return np.stack((red, green, blue), axis=-1)


def save_image(pixels: np.ndarray, path: PathType) -> None:
    """Write an interleaved ``(height, width, 3)`` RGB array to an image file."""
    pixels = np.asarray(pixels, dtype=np.uint8)
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"expected an array of shape (height, width, 3), got {pixels.shape}")
    Image.fromarray(pixels, "RGB").save(path)