import numpy as np
import pytest

from rasterlab.compression import (
    Frame,
    Method,
    compress_channel,
    compress_image,
    progression,
)


@pytest.fixture
def channel():
    rng = np.random.default_rng(7)
    return rng.integers(0, 256, size=(64, 64), dtype=np.uint8)


def test_dct_with_all_coefficients_round_trips(channel):
    out = compress_channel(channel, 4096 * 64, Method.DCT)
    assert out.dtype == np.uint8
    assert np.abs(out.astype(np.int16) - channel.astype(np.int16)).max() <= 1


def test_dct_with_dc_only_gives_flat_blocks(channel):
    out = compress_channel(channel, 4096, Method.DCT)
    blocks = out.reshape(8, 8, 8, 8)
    assert (blocks == blocks[:, :1, :, :1]).all()


def test_dwt_with_full_band_is_exact(channel):
    out = compress_channel(channel, 64 * 64, Method.DWT)
    assert np.array_equal(out, channel)


def test_dwt_with_one_coefficient_gives_the_mean(channel):
    out = compress_channel(channel, 1, "DWT")
    assert (out == out[0, 0]).all()
    assert abs(int(out[0, 0]) - channel.mean()) <= 1


def test_dwt_blockwise_first_block_matches_low_band(channel):
    blockwise = compress_channel(channel, 4096, Method.DWT, blockwise=True)
    low_band = compress_channel(channel, 64, Method.DWT)
    assert np.array_equal(blockwise, low_band)


def test_dwt_blockwise_all_blocks_is_exact(channel):
    out = compress_channel(channel, 4096 * 64, Method.DWT, blockwise=True)
    assert np.array_equal(out, channel)


@pytest.mark.parametrize("method", [Method.DCT, Method.DWT])
@pytest.mark.parametrize("n", [0, -1])
def test_non_positive_count_is_rejected(channel, method, n):
    with pytest.raises(ValueError):
        compress_channel(channel, n, method)


def test_unknown_method_is_rejected(channel):
    with pytest.raises(ValueError):
        compress_channel(channel, 4096, "FFT")


def test_compress_image_handles_each_plane(channel):
    r, g, b = compress_image(channel, channel.T.copy(), 255 - channel, 64 * 64, Method.DWT)
    assert np.array_equal(r, channel)
    assert np.array_equal(g, channel.T)
    assert np.array_equal(b, 255 - channel)


def test_compress_image_rejects_mismatched_planes(channel):
    with pytest.raises(ValueError):
        compress_image(channel, channel[:32, :32], channel, 4096, Method.DCT)


def test_positive_mode_gives_one_frame_each():
    frames = list(progression(5))
    assert frames == [
        Frame("DCT with n = 5", 5, Method.DCT),
        Frame("DWT with n = 5", 5, Method.DWT),
    ]


def test_first_progressive_sequence():
    frames = list(progression(-1))
    dct = [f for f in frames if f.method is Method.DCT]
    dwt = [f for f in frames if f.method is Method.DWT]
    assert frames[0].n == 4096
    assert frames[1].title == "DWT Progressive (n == -1) k == 0"
    assert frames[1].n == 1
    assert len(dct) == 64
    assert len(dwt) == 10
    assert [f.n for f in dct] == sorted(f.n for f in dct)
    assert dct[-1].n == 4096 * 64
    assert all(b.n == 4 * a.n for a, b in zip(dwt, dwt[1:]))
    assert not any(f.blockwise for f in frames)


def test_second_progressive_sequence():
    frames = list(progression(-2))
    dct = [f for f in frames if f.method is Method.DCT]
    dwt = [f for f in frames if f.method is Method.DWT]
    assert [f.n for f in dct] == [f.n for f in dwt]
    assert all(f.blockwise for f in dwt)
    assert dwt[0].title == "DWT Progressive (n == -2) n == 4096"
    assert dct[-1].n == 4096 * 64


@pytest.mark.parametrize("mode", [0, -3])
def test_other_modes_give_nothing(mode):
    assert list(progression(mode)) == []