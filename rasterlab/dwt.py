"""Multi-level Haar wavelet transform of square channels and coefficient selection."""

from __future__ import annotations

import math

import numpy as np

_BLOCKS_PER_IMAGE = 4096
_GRID = 8


def _quadrant_order() -> list[tuple[int, int]]:
    inner = [
        (br + r, bc + c)
        for br, bc in ((0, 0), (0, 2), (2, 0), (2, 2))
        for r in range(2)
        for c in range(2)
    ]
    outer = [
        (r0 + r, c0 + c)
        for r0, c0 in ((0, 4), (4, 0), (4, 4))
        for r in range(4)
        for c in range(4)
    ]
    return inner + outer


_BLOCK_ORDER = _quadrant_order()


def _as_square(plane: np.ndarray) -> np.ndarray:
    plane = np.asarray(plane, dtype=np.float64)
    if plane.ndim != 2 or plane.size == 0 or plane.shape[0] != plane.shape[1]:
        raise ValueError(f"expected a non-empty square 2-D array, got shape {plane.shape}")
    size = plane.shape[0]
    if size & (size - 1):
        raise ValueError(f"side {size} is not a power of two")
    return plane


def haar_forward(channel: np.ndarray) -> np.ndarray:
    """Apply the averaging Haar transform repeatedly down to a single coefficient."""
    result = _as_square(channel).copy()
    size = result.shape[0]
    while size > 1:
        half = size // 2
        region = result[:size, :size]
        even, odd = region[:, 0::2], region[:, 1::2]
        rows = np.concatenate(((even + odd) / 2.0, (even - odd) / 2.0), axis=1)
        even, odd = rows[0::2], rows[1::2]
        result[:half, :size] = (even + odd) / 2.0
        result[half:size, :size] = (even - odd) / 2.0
        size = half
    return result


def haar_inverse(coefficients: np.ndarray) -> np.ndarray:
    """Invert :func:`haar_forward` and clamp the samples to ``0..255``."""
    result = _as_square(coefficients).copy()
    full = result.shape[0]
    size = 2
    while size <= full:
        half = size // 2
        region = result[:size, :size]
        low, high = region[:half], region[half:size]
        columns = np.empty((size, size))
        columns[0::2] = low + high
        columns[1::2] = low - high
        low, high = columns[:, :half], columns[:, half:size]
        result[:size, 0:size:2] = low + high
        result[:size, 1:size:2] = low - high
        size *= 2
    return np.clip(result, 0.0, 255.0)


def keep_low_band(coefficients: np.ndarray, n: int) -> np.ndarray:
    """Keep the top-left ``isqrt(n)`` square of coefficients and zero the rest."""
    if n <= 0:
        raise ValueError(f"coefficient count must be positive, got {n}")
    plane = _as_square(coefficients)
    side = math.isqrt(n)
    kept = np.zeros_like(plane)
    kept[:side, :side] = plane[:side, :side]
    return kept


def keep_blocks(coefficients: np.ndarray, n: int) -> np.ndarray:
    """Keep the first ``n // 4096`` of an 8x8 grid of blocks in quadrant order."""
    if n <= 0:
        raise ValueError(f"coefficient count must be positive, got {n}")
    plane = _as_square(coefficients)
    size = plane.shape[0]
    if size % _GRID:
        raise ValueError(f"side {size} is not a multiple of {_GRID}")
    side = size // _GRID
    kept = np.zeros_like(plane)
    for row, col in _BLOCK_ORDER[: n // _BLOCKS_PER_IMAGE]:
        rows = slice(row * side, (row + 1) * side)
        cols = slice(col * side, (col + 1) * side)
        kept[rows, cols] = plane[rows, cols]
    return kept