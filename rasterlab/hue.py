"""Hue isolation: keep colours whose hue lies in a range and turn the rest grey."""

from __future__ import annotations

import numpy as np

_HUE_MIN = 0
_HUE_MAX = 360


def validate_hue_range(hue1: int, hue2: int) -> None:
    """Raise ``ValueError`` unless ``0 <= hue1 <= hue2 <= 360``."""
    if not _HUE_MIN <= hue1 <= _HUE_MAX:
        raise ValueError(f"hue1 {hue1} is not between {_HUE_MIN} and {_HUE_MAX}")
    if not _HUE_MIN <= hue2 <= _HUE_MAX:
        raise ValueError(f"hue2 {hue2} is not between {_HUE_MIN} and {_HUE_MAX}")
    if hue1 > hue2:
        raise ValueError(f"hue1 {hue1} is greater than hue2 {hue2}")


def _planes(*planes: np.ndarray, dtype: type) -> list[np.ndarray]:
    arrays = [np.asarray(p, dtype=dtype) for p in planes]
    if len({a.shape for a in arrays}) != 1:
        raise ValueError(f"planes must have equal shape, got {[a.shape for a in arrays]}")
    return arrays


def _to_byte(values: np.ndarray) -> np.ndarray:
    """Scale a unit value to 0..255, truncating toward zero and wrapping like a byte."""
    scaled = np.asarray(values, dtype=np.float32) * np.float32(255)
    return (np.trunc(scaled).astype(np.int64) % 256).astype(np.uint8)


def rgb_to_hsv(
    red: np.ndarray, green: np.ndarray, blue: np.ndarray
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Convert uint8 planes to hue in degrees, saturation and value, all float32."""
    r8, g8, b8 = _planes(red, green, blue, dtype=np.uint8)
    r, g, b = ((p.astype(np.float64) / 255.0).astype(np.float32) for p in (r8, g8, b8))

    cmax = np.maximum(r, np.maximum(g, b))
    cmin = np.minimum(r, np.minimum(g, b))
    delta = cmax - cmin
    flat = cmax == cmin
    safe_delta = np.where(flat, np.float32(1), delta)

    with np.errstate(invalid="ignore", divide="ignore"):
        from_red = (g - b) / safe_delta
        from_green = (b - r) / safe_delta + np.float32(2.0)
        from_blue = (r - g) / safe_delta + np.float32(4.0)

    hue = np.select(
        [flat, cmax == r, cmax == g],
        [np.zeros_like(r), from_red, from_green],
        default=from_blue,
    ).astype(np.float32)
    hue = hue * np.float32(60.0)
    hue = np.where(hue < 0, hue + np.float32(360), hue).astype(np.float32)

    safe_max = np.where(cmax == 0, np.float32(1), cmax)
    saturation = np.where(cmax == 0, np.float32(0), delta / safe_max).astype(np.float32)
    return hue, saturation, cmax.astype(np.float32)


def hsv_to_rgb(
    hue: np.ndarray, saturation: np.ndarray, value: np.ndarray
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Convert hue in degrees, saturation and value back to uint8 planes."""
    h, s, v = _planes(hue, saturation, value, dtype=np.float32)

    hp = h / np.float32(60)
    sector = np.floor(hp).astype(np.int64)
    f = (hp - sector.astype(np.float32)).astype(np.float32)
    one = np.float32(1)
    p = v * (one - s)
    q = v * (one - s * f)
    t = v * (one - s * (one - f))

    sectors = [sector == k for k in range(5)]
    red = np.select(sectors, [v, q, p, p, t], default=v)
    green = np.select(sectors, [t, v, v, q, p], default=p)
    blue = np.select(sectors, [p, p, t, v, v], default=q)

    grey = s == 0
    red = np.where(grey, v, red)
    green = np.where(grey, v, green)
    blue = np.where(grey, v, blue)
    return _to_byte(red), _to_byte(green), _to_byte(blue)


def isolate_hue(
    red: np.ndarray, green: np.ndarray, blue: np.ndarray, hue1: int, hue2: int
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Keep pixels whose whole-degree hue lies in ``[hue1, hue2]``; make the others grey."""
    validate_hue_range(hue1, hue2)
    hue, saturation, value = rgb_to_hsv(red, green, blue)
    whole = np.trunc(hue).astype(np.int64)
    outside = (whole < hue1) | (whole > hue2)
    saturation = np.where(outside, np.float32(0), saturation).astype(np.float32)
    return hsv_to_rgb(hue, saturation, value)