from tint.components.tint_state import Style
from tint.config import NeutralRange
from tint.genetics.style_classifier import clamp_arctic_style, classify
from tint.utils.color_codec import pack, unpack
from tests.helpers import make_config


def test_neutral_colors_classify_by_band():
    config = make_config(white=NeutralRange(0.9, 1.18))
    for level in range(256):
        x = unpack(pack(level / 255, level / 255, level / 255))[0]
        style = classify(pack(x, x, x), config)
        if x <= config.dark.max:
            assert style == Style.DARK, x
        elif x >= config.white.min:
            assert style == Style.WHITE, x
        else:
            assert style == Style.GRAY, x


def test_default_white_band_is_above_full_white():
    # White.min 1.05 cannot be reached once packed, so full white reads as Gray.
    assert classify(pack(1.0, 1.0, 1.0), make_config()) == Style.GRAY


def test_unequal_channels_are_soft_hue():
    config = make_config()
    assert classify(pack(0.8, 0.7, 0.7), config) == Style.SOFT_HUE
    assert classify(pack(0.1, 0.1, 0.2), config) == Style.SOFT_HUE


def test_clamp_arctic_style():
    assert clamp_arctic_style(Style.DARK) == Style.DARK
    assert clamp_arctic_style(Style.WHITE) == Style.WHITE
    assert clamp_arctic_style(Style.SOFT_HUE) == Style.GRAY
    assert clamp_arctic_style(Style.MUTANT) == Style.GRAY
