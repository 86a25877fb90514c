"""Block-wise 8x8 discrete cosine transform with zig-zag coefficient truncation."""

from __future__ import annotations

import math

import numpy as np

BLOCK = 8
# The coefficient budget ``n`` is spread over the 4096 blocks of a 512x512 image.
_BLOCKS_PER_IMAGE = 4096


def cosine_table() -> np.ndarray:
    """Return the 8x8 table ``cos((2x + 1) * u * pi / 16)`` indexed ``[u, x]``."""
    u = np.arange(BLOCK, dtype=np.float64)[:, np.newaxis]
    x = np.arange(BLOCK, dtype=np.float64)[np.newaxis, :]
    return np.cos((2.0 * x + 1.0) * u * math.pi / 16.0)


def _basis() -> np.ndarray:
    weights = np.where(np.arange(BLOCK) == 0, 1.0 / math.sqrt(2.0), 1.0)
    return 0.5 * weights[:, np.newaxis] * cosine_table()


def _as_block(block: np.ndarray) -> np.ndarray:
    block = np.asarray(block, dtype=np.float64)
    if block.shape != (BLOCK, BLOCK):
        raise ValueError(f"expected an {BLOCK}x{BLOCK} block, got shape {block.shape}")
    return block


def _as_plane(plane: np.ndarray) -> np.ndarray:
    plane = np.asarray(plane, dtype=np.float64)
    if plane.ndim != 2 or plane.size == 0:
        raise ValueError(f"expected a non-empty 2-D array, got shape {plane.shape}")
    height, width = plane.shape
    if height % BLOCK or width % BLOCK:
        raise ValueError(f"size {width}x{height} is not a multiple of {BLOCK}")
    return plane


def _split_blocks(plane: np.ndarray) -> np.ndarray:
    height, width = plane.shape
    return plane.reshape(height // BLOCK, BLOCK, width // BLOCK, BLOCK)


def dct_block(block: np.ndarray) -> np.ndarray:
    """Forward DCT of one 8x8 block; the result is indexed ``[v, u]``."""
    basis = _basis()
    return basis @ _as_block(block) @ basis.T


def idct_block(coefficients: np.ndarray) -> np.ndarray:
    """Inverse DCT of one 8x8 coefficient block, clamped to ``0..255``."""
    basis = _basis()
    return np.clip(basis.T @ _as_block(coefficients) @ basis, 0.0, 255.0)


def encode_dct(channel: np.ndarray) -> np.ndarray:
    """Transform every 8x8 block of a channel into DCT coefficients."""
    plane = _as_plane(channel)
    basis = _basis()
    result = np.einsum("vy,iyjx,ux->ivju", basis, _split_blocks(plane), basis)
    return result.reshape(plane.shape)


def decode_dct(coefficients: np.ndarray) -> np.ndarray:
    """Invert :func:`encode_dct` block by block, clamping samples to ``0..255``."""
    plane = _as_plane(coefficients)
    basis = _basis()
    result = np.einsum("vy,ivju,ux->iyjx", basis, _split_blocks(plane), basis)
    return np.clip(result.reshape(plane.shape), 0.0, 255.0)


def zigzag_order() -> list[tuple[int, int]]:
    """Return the 64 ``(row, col)`` positions of an 8x8 block in zig-zag order."""
    order = []
    row = col = 0
    up = True
    while row < BLOCK and col < BLOCK:
        order.append((row, col))
        last = BLOCK - 1
        if up:
            if row == 0 or col == last:
                up = False
                if col == last:
                    row += 1
                else:
                    col += 1
            else:
                row -= 1
                col += 1
        else:
            if row == last or col == 0:
                up = True
                if row == last:
                    col += 1
                else:
                    row += 1
            else:
                row += 1
                col -= 1
    return order


def truncate_dct(coefficients: np.ndarray, n: int) -> np.ndarray:
    """Keep the first ``n // 4096`` zig-zag coefficients of every block and zero the rest."""
    if n <= 0:
        raise ValueError(f"coefficient count must be positive, got {n}")
    plane = _as_plane(coefficients)
    keep = n // _BLOCKS_PER_IMAGE
    mask = np.zeros((BLOCK, BLOCK), dtype=bool)
    for row, col in zigzag_order()[:keep]:
        mask[row, col] = True
    height, width = plane.shape
    full_mask = np.tile(mask, (height // BLOCK, width // BLOCK))
    return np.where(full_mask, plane, 0.0)