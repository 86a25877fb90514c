"""DCT and DWT compression of whole images and the progressive display sequences."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

import numpy as np

from rasterlab.dct import decode_dct, encode_dct, truncate_dct
from rasterlab.dwt import haar_forward, haar_inverse, keep_blocks, keep_low_band

_BASE_COEFFICIENTS = 4096
_MAX_MULTIPLIER = 64
_MAX_WAVELET_LEVEL = 10


class Method(Enum):
    """Transform used to compress an image."""

    DCT = "DCT"
    DWT = "DWT"


@dataclass(frozen=True)
class Frame:
    """One image of a display sequence: its title and how to compress it."""

    title: str
    n: int
    method: Method
    blockwise: bool = False


def _to_bytes(samples: np.ndarray) -> np.ndarray:
    return np.trunc(np.clip(samples, 0.0, 255.0)).astype(np.uint8)


def compress_channel(
    channel: np.ndarray, n: int, method: Method | str, blockwise: bool = False
) -> np.ndarray:
    """Encode a channel, keep ``n`` coefficients' worth of it and decode it to uint8.

    ``blockwise`` only affects the DWT: when set, whole coefficient blocks are kept
    in quadrant order instead of a top-left square.
    """
    method = Method(method)
    if n <= 0:
        raise ValueError(f"coefficient count must be positive, got {n}")
    if method is Method.DCT:
        decoded = decode_dct(truncate_dct(encode_dct(channel), n))
    else:
        coefficients = haar_forward(channel)
        if blockwise:
            kept = keep_blocks(coefficients, n)
        else:
            kept = keep_low_band(coefficients, n)
        decoded = haar_inverse(kept)
    return _to_bytes(decoded)


def compress_image(
    red: np.ndarray,
    green: np.ndarray,
    blue: np.ndarray,
    n: int,
    method: Method | str,
    blockwise: bool = False,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Compress all three channels of an image with the same settings."""
    planes = [np.asarray(p) for p in (red, green, blue)]
    if len({p.shape for p in planes}) != 1:
        raise ValueError("red, green and blue channels must have the same shape")
    r, g, b = (compress_channel(p, n, method, blockwise) for p in planes)
    return r, g, b


def progression(mode: int) -> Iterator[Frame]:
    """Yield the frames shown for a coefficient argument.

    A positive ``mode`` gives one DCT and one DWT frame with that many coefficients.
    ``-1`` and ``-2`` give the two progressive sequences; other values give nothing.
    """
    if mode > 0:
        yield Frame(f"DCT with n = {mode}", mode, Method.DCT)
        yield Frame(f"DWT with n = {mode}", mode, Method.DWT)
    elif mode == -1:
        yield Frame(
            f"DCT Progressive (n == -1) n == {_BASE_COEFFICIENTS}",
            _BASE_COEFFICIENTS,
            Method.DCT,
        )
        yield Frame("DWT Progressive (n == -1) k == 0", 1, Method.DWT)
        level = 1
        for multiplier in range(2, _MAX_MULTIPLIER + 1):
            n = _BASE_COEFFICIENTS * multiplier
            yield Frame(f"DCT Progressive (n == -1) n == {n}", n, Method.DCT)
            if level < _MAX_WAVELET_LEVEL:
                yield Frame(
                    f"DWT Progressive (n == -1) k == {level}", 4**level, Method.DWT
                )
                level += 1
    elif mode == -2:
        for multiplier in range(1, _MAX_MULTIPLIER + 1):
            n = _BASE_COEFFICIENTS * multiplier
            yield Frame(f"DCT Progressive (n == -2) n == {n}", n, Method.DCT)
            yield Frame(f"DWT Progressive (n == -2) n == {n}", n, Method.DWT, True)