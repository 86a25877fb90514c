"""Gaussian pre-filtering, down-sampling and bilinear up-sampling of image planes."""

from __future__ import annotations

from enum import Enum

import numpy as np

KERNEL_SIZE = 5
_STRETCH_POWER = 10.0

_VALID_INPUT_SIZES = {(4000, 3000), (400, 300)}


class OutputFormat(Enum):
    """Supported output resolutions."""

    O1 = (1920, 1080)
    O2 = (1280, 720)
    O3 = (640, 480)

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    @classmethod
    def from_name(cls, name: str) -> "OutputFormat":
        """Look up a format by its name (``O1``, ``O2`` or ``O3``)."""
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"output format {name!r} is not O1, O2, or O3") from None


def validate_input_size(width: int, height: int) -> None:
    """Raise ``ValueError`` unless the input is 4000x3000 or 400x300."""
    if width not in (4000, 400):
        raise ValueError(f"input width {width} is not 4000 or 400")
    if height not in (3000, 300):
        raise ValueError(f"input height {height} is not 3000 or 300")
    if (width, height) not in _VALID_INPUT_SIZES:
        raise ValueError(f"resolution {width}x{height} is not valid")


def _as_channel(channel: np.ndarray) -> np.ndarray:
    channel = np.asarray(channel, dtype=np.uint8)
    if channel.ndim != 2 or channel.size == 0:
        raise ValueError(f"expected a non-empty 2-D channel, got shape {channel.shape}")
    return channel


def _check_out_size(out_width: int, out_height: int, minimum: int = 1) -> None:
    if out_width < minimum or out_height < minimum:
        raise ValueError(
            f"output size must be at least {minimum}x{minimum}, got {out_width}x{out_height}"
        )


def gaussian_kernel(size: int) -> np.ndarray:
    """Return a normalised square Gaussian kernel of side ``2 * (size // 2) + 1``."""
    radius = size // 2
    if radius < 1:
        raise ValueError(f"kernel size must be at least 2, got {size}")
    sigma = radius / 2.0
    offsets = (np.arange(2 * radius + 1, dtype=np.float64) - radius) / sigma
    profile = np.exp(-0.5 * offsets * offsets)
    kernel = np.outer(profile, profile)
    total = sum(kernel.ravel().tolist())
    return kernel / total


def apply_kernel(channel: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    """Convolve a channel with a square kernel, repeating edge pixels at the borders."""
    channel = _as_channel(channel)
    kernel = np.asarray(kernel, dtype=np.float64)
    if kernel.ndim != 2 or kernel.shape[0] != kernel.shape[1] or kernel.shape[0] % 2 == 0:
        raise ValueError(f"kernel must be square with odd side, got shape {kernel.shape}")
    radius = kernel.shape[0] // 2
    height, width = channel.shape
    padded = np.pad(channel.astype(np.float64), radius, mode="edge")
    total = np.zeros((height, width), dtype=np.float64)
    for (dy, dx), weight in np.ndenumerate(kernel):
        total += padded[dy : dy + height, dx : dx + width] * weight
    return np.clip(np.trunc(total), 0, 255).astype(np.uint8)


def scale_down_stretched(channel: np.ndarray, out_width: int, out_height: int) -> np.ndarray:
    """Down-sample with a sampling grid that stretches away from the centre (O1/O2)."""
    channel = _as_channel(channel)
    _check_out_size(out_width, out_height, minimum=2)
    height, width = channel.shape

    def source_indices(count: int, size: int) -> np.ndarray:
        step = size / count
        center = float(count // 2)
        positions = np.arange(count, dtype=np.float64)
        stretch = np.tanh(np.abs(positions - center) / center * 0.5) * _STRETCH_POWER
        origin = np.clip((stretch + positions) * step, 0.0, size - 1.0)
        return origin.astype(np.intp)

    rows = source_indices(out_height, height)
    cols = source_indices(out_width, width)
    return channel[np.ix_(rows, cols)]


def scale_down_stepped(channel: np.ndarray, out_width: int, out_height: int) -> np.ndarray:
    """Down-sample by picking every n-th pixel with an integer step (O3)."""
    channel = _as_channel(channel)
    _check_out_size(out_width, out_height)
    height, width = channel.shape
    step_x = width // out_width
    step_y = height // out_height
    rows = np.arange(out_height) * step_y
    cols = np.arange(out_width) * step_x
    if rows[-1] >= height or cols[-1] >= width:
        raise ValueError(f"cannot sample {out_width}x{out_height} from {width}x{height}")
    return channel[np.ix_(rows, cols)]


def scale_up_bilinear(channel: np.ndarray, out_width: int, out_height: int) -> np.ndarray:
    """Resize with bilinear interpolation in single precision."""
    channel = _as_channel(channel)
    _check_out_size(out_width, out_height, minimum=2)
    height, width = channel.shape

    def axis(count: int, size: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        ratio = np.float32(size - 1) / np.float32(count - 1)
        position = ratio * np.arange(count, dtype=np.float32)
        low = np.floor(position)
        high = np.ceil(position)
        weight = position - low
        low_idx = np.clip(low.astype(np.intp), 0, size - 1)
        high_idx = np.clip(high.astype(np.intp), 0, size - 1)
        return low_idx, high_idx, weight.astype(np.float32)

    y1, yh, yw = axis(out_height, height)
    x1, xh, xw = axis(out_width, width)
    source = channel.astype(np.float32)
    a = source[np.ix_(y1, x1)]
    b = source[np.ix_(y1, xh)]
    c = source[np.ix_(yh, x1)]
    d = source[np.ix_(yh, xh)]
    xw = xw[np.newaxis, :]
    yw = yw[:, np.newaxis]
    one = np.float32(1.0)
    pixel = (
        a * (one - xw) * (one - yw)
        + b * xw * (one - yw)
        + c * yw * (one - xw)
        + d * xw * yw
    )
    return np.clip(np.trunc(pixel), 0, 255).astype(np.uint8)


def resample_channel(channel: np.ndarray, out_width: int, out_height: int) -> np.ndarray:
    """Resample one channel to the output size, choosing the method from the sizes."""
    channel = _as_channel(channel)
    width = channel.shape[1]
    if out_width < width:
        if out_width in (OutputFormat.O1.width, OutputFormat.O2.width):
            blurred = apply_kernel(channel, gaussian_kernel(KERNEL_SIZE))
            return scale_down_stretched(blurred, out_width, out_height)
        if out_width == OutputFormat.O3.width:
            blurred = apply_kernel(channel, gaussian_kernel(KERNEL_SIZE))
            return scale_down_stepped(blurred, out_width, out_height)
        raise ValueError(f"no down-sampling method for output width {out_width}")
    if out_width > width:
        return scale_up_bilinear(channel, out_width, out_height)
    raise ValueError(f"output width {out_width} equals input width; nothing to resample")


def resample_image(
    red: np.ndarray,
    green: np.ndarray,
    blue: np.ndarray,
    out_width: int,
    out_height: int,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Resample all three channels of an image."""
    planes = [_as_channel(p) for p in (red, green, blue)]
    if len({p.shape for p in planes}) != 1:
        raise ValueError("red, green and blue channels must have the same shape")
    r, g, b = (resample_channel(p, out_width, out_height) for p in planes)
    return r, g, b