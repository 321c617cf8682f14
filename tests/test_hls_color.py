import pytest

from fbgraphkit.hls_color import Color, HlsColor

SAMPLES = [
    Color(255, 0, 0, 255),
    Color(0, 255, 0, 255),
    Color(0, 0, 255, 128),
    Color(12, 200, 77, 255),
    Color(250, 240, 10, 0),
    Color(59, 89, 152, 255),
    Color(128, 128, 128, 255),
]


@pytest.mark.parametrize("color", SAMPLES)
def test_round_trip_within_one_step(color):
    back = HlsColor.from_rgb(color).rgb
    for original, converted in zip(
        (color.r, color.g, color.b, color.a), (back.r, back.g, back.b, back.a)
    ):
        assert abs(original - converted) <= 1


@pytest.mark.parametrize("color", SAMPLES)
def test_components_in_range(color):
    hls = HlsColor.from_rgb(color)
    assert 0 <= hls.hue < 360
    assert 0 <= hls.luminosity <= 1
    assert 0 <= hls.saturation <= 1
    assert hls.alpha == color.a / 255


@pytest.mark.parametrize("value", [0, 17, 128, 255])
def test_grey_has_no_saturation(value):
    hls = HlsColor.from_rgb(Color(value, value, value, 255))
    assert hls.saturation == 0
    assert hls.hue == 0
    assert hls.luminosity == value / 255


def test_primary_red_round_trips_exactly():
    red = Color(255, 0, 0, 255)
    assert HlsColor.from_rgb(red).rgb == red


def test_full_luminosity_is_white():
    hls = HlsColor.from_rgb(Color(255, 0, 0, 255))
    hls.luminosity = 1.0
    assert hls.rgb == Color(255, 255, 255, 255)


def test_zero_luminosity_is_black():
    hls = HlsColor.from_rgb(Color(59, 89, 152, 255))
    hls.luminosity = 0.0
    assert hls.rgb == Color(0, 0, 0, 255)


def test_setting_rgb_replaces_components():
    hls = HlsColor.from_rgb(Color(0, 0, 255, 255))
    hls.rgb = Color(40, 40, 40, 40)
    assert hls.saturation == 0
    assert hls.luminosity == 40 / 255


def test_color_rejects_out_of_range_channel():
    with pytest.raises(ValueError):
        Color(256, 0, 0)