import pytest

from raycub.colour import adjust_brightness, make_colour, normalize_angle


@pytest.mark.parametrize(
    "rgb, packed",
    [
        ((0xFF, 0x00, 0x00), 0xFF0000),
        ((0x00, 0x00, 0xFF), 0x0000FF),
        ((0x87, 0xCE, 0xEB), 0x87CEEB),
        ((0xFF, 0xD7, 0x00), 0xFFD700),
    ],
)
def test_make_colour_matches_named_colours(rgb, packed):
    assert make_colour(*rgb, 0) == packed


def test_make_colour_alpha_in_top_byte():
    assert make_colour(0x12, 0x34, 0x56, 0xFF) >> 24 == 0xFF
    assert make_colour(0x12, 0x34, 0x56, 0xFF) & 0xFFFFFF == make_colour(0x12, 0x34, 0x56, 0)


@pytest.mark.parametrize("percent", [1.0, 1.5, 3.0])
def test_full_brightness_unchanged(percent):
    colour = make_colour(10, 20, 30, 255)
    assert adjust_brightness(colour, percent) == colour


def test_zero_brightness_keeps_only_red_byte():
    colour = make_colour(10, 20, 30, 255)
    assert adjust_brightness(colour, 0.0) == make_colour(10, 0, 0, 0)


def test_half_brightness_halves_scaled_bytes():
    assert adjust_brightness(make_colour(0, 200, 100, 0), 0.5) == make_colour(0, 100, 50, 0)


def test_brightness_never_increases_bytes():
    colour = make_colour(0x80, 0x40, 0xC0, 0xFF)
    darker = adjust_brightness(colour, 0.7)
    for shift in (0, 8, 16, 24):
        assert (darker >> shift) & 0xFF <= (colour >> shift) & 0xFF


@pytest.mark.parametrize("angle", [-721.0, -360.0, -1.0, 0.0, 45.5, 359.0, 360.0, 1000.0])
def test_normalize_angle_range(angle):
    result = normalize_angle(angle)
    assert 0 <= result < 360


@pytest.mark.parametrize("angle", [12.0, 190.0, -30.0])
def test_normalize_angle_periodic(angle):
    assert normalize_angle(angle + 360) == pytest.approx(normalize_angle(angle))


def test_normalize_negative_angle():
    assert normalize_angle(-90.0) == 270.0