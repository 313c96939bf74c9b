import random

from tint.utils.color_codec import alpha, hsl_to_rgb, is_neutral, pack, to_hex, unpack


def test_pack_sets_opaque_alpha_and_channels():
    argb = pack(1.0, 0.0, 0.5)
    assert alpha(argb) == 255
    assert (argb >> 16) & 0xFF == 255
    assert (argb >> 8) & 0xFF == 0
    assert argb & 0xFF == 127


def test_pack_clamps_out_of_range_channels():
    assert pack(-3.0, 1.7, 0.0) == pack(0.0, 1.0, 0.0)
    assert pack(float("nan"), 0.0, 0.0) == pack(0.0, 0.0, 0.0)


def test_round_trip_error_within_one_level():
    rng = random.Random(1234)
    for _ in range(2000):
        r, g, b = rng.random(), rng.random(), rng.random()
        ur, ug, ub = unpack(pack(r, g, b))
        assert abs(ur - r) <= 1 / 255
        assert abs(ug - g) <= 1 / 255
        assert abs(ub - b) <= 1 / 255


def test_unpack_then_pack_is_exact_for_every_level():
    for level in range(256):
        argb = 0xFF000000 | (level << 16) | (level << 8) | level
        assert pack(*unpack(argb)) == argb


def test_is_neutral_only_for_equal_channels():
    assert is_neutral(pack(0.4, 0.4, 0.4))
    assert not is_neutral(pack(0.4, 0.5, 0.4))


def test_hsl_to_rgb_primaries_and_gray():
    assert hsl_to_rgb(0.0, 1.0, 0.5) == (1.0, 0.0, 0.0)
    r, g, b = hsl_to_rgb(120.0, 1.0, 0.5)
    assert (round(r, 6), round(g, 6), round(b, 6)) == (0.0, 1.0, 0.0)
    assert hsl_to_rgb(200.0, 0.0, 0.3) == (0.3, 0.3, 0.3)


def test_to_hex():
    assert to_hex(pack(1.0, 0.0, 0.0)) == "#FF0000"
