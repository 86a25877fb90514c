import numpy as np
import pytest

from rasterlab.dwt import haar_forward, haar_inverse, keep_blocks, keep_low_band


def _random(shape, seed=0, low=0.0, high=255.0):
    return np.random.default_rng(seed).uniform(low, high, size=shape)


def test_forward_of_constant_has_single_coefficient():
    coefficients = haar_forward(np.full((8, 8), 50.0))
    assert coefficients[0, 0] == pytest.approx(50.0)
    rest = coefficients.copy()
    rest[0, 0] = 0.0
    np.testing.assert_allclose(rest, 0.0, atol=1e-12)


def test_forward_top_left_is_mean():
    channel = _random((16, 16), seed=1)
    assert haar_forward(channel)[0, 0] == pytest.approx(channel.mean())


def test_forward_does_not_modify_input():
    channel = _random((8, 8), seed=2)
    original = channel.copy()
    haar_forward(channel)
    np.testing.assert_array_equal(channel, original)


def test_round_trip():
    channel = _random((16, 16), seed=3)
    np.testing.assert_allclose(haar_inverse(haar_forward(channel)), channel, atol=1e-9)


def test_round_trip_single_pixel():
    channel = np.array([[42.0]])
    np.testing.assert_allclose(haar_inverse(haar_forward(channel)), channel)


def test_inverse_clamps_to_byte_range():
    high = np.zeros((4, 4))
    high[0, 0] = 300.0
    low = np.zeros((4, 4))
    low[0, 0] = -20.0
    np.testing.assert_array_equal(haar_inverse(high), np.full((4, 4), 255.0))
    np.testing.assert_array_equal(haar_inverse(low), np.zeros((4, 4)))


def test_rejects_non_square_or_non_power_of_two():
    with pytest.raises(ValueError):
        haar_forward(np.zeros((4, 8)))
    with pytest.raises(ValueError):
        haar_forward(np.zeros((6, 6)))
    with pytest.raises(ValueError):
        haar_inverse(np.zeros((12, 12)))


def test_keep_low_band_keeps_square_corner():
    coefficients = _random((16, 16), seed=4, low=1.0, high=2.0)
    kept = keep_low_band(coefficients, 20)
    np.testing.assert_array_equal(kept[:4, :4], coefficients[:4, :4])
    assert np.count_nonzero(kept) == 16


def test_keep_low_band_single_coefficient_gives_mean_image():
    channel = _random((16, 16), seed=5)
    decoded = haar_inverse(keep_low_band(haar_forward(channel), 1))
    np.testing.assert_allclose(decoded, channel.mean(), atol=1e-9)


def test_keep_low_band_beyond_size_keeps_everything():
    coefficients = _random((8, 8), seed=6)
    np.testing.assert_array_equal(keep_low_band(coefficients, 10_000), coefficients)


def test_keep_low_band_rejects_non_positive_count():
    with pytest.raises(ValueError):
        keep_low_band(np.zeros((8, 8)), 0)


def test_keep_blocks_first_block_only():
    coefficients = _random((16, 16), seed=7, low=1.0, high=2.0)
    kept = keep_blocks(coefficients, 4096)
    np.testing.assert_array_equal(kept[:2, :2], coefficients[:2, :2])
    assert np.count_nonzero(kept) == 4


def test_keep_blocks_follows_quadrant_order():
    coefficients = _random((16, 16), seed=8, low=1.0, high=2.0)
    kept = keep_blocks(coefficients, 5 * 4096)
    np.testing.assert_array_equal(kept[:4, :4], coefficients[:4, :4])
    np.testing.assert_array_equal(kept[:2, 4:6], coefficients[:2, 4:6])
    assert np.count_nonzero(kept[:2, 6:8]) == 0
    assert np.count_nonzero(kept[4:6, :2]) == 0
    assert np.count_nonzero(kept) == 20


def test_keep_blocks_full_budget_and_below_step():
    coefficients = _random((16, 16), seed=9, low=1.0, high=2.0)
    np.testing.assert_array_equal(keep_blocks(coefficients, 64 * 4096), coefficients)
    np.testing.assert_array_equal(keep_blocks(coefficients, 100), np.zeros((16, 16)))


def test_keep_blocks_rejects_bad_input():
    with pytest.raises(ValueError):
        keep_blocks(np.zeros((4, 4)), 4096)
    with pytest.raises(ValueError):
        keep_blocks(np.zeros((16, 16)), 0)