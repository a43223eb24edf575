import pytest

from overlayui.mask import alpha_mask


def rgba(alphas):
    return b"".join(bytes((10, 20, 30, a)) for a in alphas)


def test_flags_alpha_below_threshold():
    pixels = rgba([0, 127, 128, 255])
    assert alpha_mask(pixels, 2, 2, 128, workers=1) == [True, True, False, False]


def test_threshold_zero_flags_nothing():
    pixels = rgba([0, 0, 0])
    assert alpha_mask(pixels, 3, 1, 0, workers=1) == [False, False, False]


@pytest.mark.parametrize("workers", [1, 2, 3, 4, 8])
def test_result_independent_of_workers(workers):
    alphas = [(i * 37) % 256 for i in range(5 * 7)]
    pixels = rgba(alphas)
    expected = alpha_mask(pixels, 5, 7, 100, workers=1)
    assert alpha_mask(pixels, 5, 7, 100, workers=workers) == expected
    assert len(expected) == 35


def test_only_alpha_channel_matters():
    pixels = bytes((0, 0, 0, 200, 255, 255, 255, 10))
    assert alpha_mask(pixels, 2, 1, 50, workers=2) == [False, True]


def test_default_workers():
    pixels = rgba([5, 250])
    assert alpha_mask(pixels, 1, 2, 100) == [True, False]


def test_short_buffer_raises():
    with pytest.raises(ValueError):
        alpha_mask(rgba([1, 2, 3]), 2, 2, 10, workers=1)


def test_zero_workers_raises():
    with pytest.raises(ValueError):
        alpha_mask(rgba([1]), 1, 1, 10, workers=0)


def test_empty_image():
    assert alpha_mask(b"", 0, 0, 10, workers=2) == []