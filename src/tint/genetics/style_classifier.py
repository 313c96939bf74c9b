from tint.components.tint_state import Style
from tint.config import TintConfig
from tint.constants import NEUTRAL_EPSILON
from tint.utils.color_codec import unpack


def classify(argb: int, config: TintConfig) -> Style:
    """Infer a style label for a color that carries none, e.g. a blended one."""
    r, g, b = unpack(argb)
    if abs(r - g) < NEUTRAL_EPSILON and abs(g - b) < NEUTRAL_EPSILON:
        if r <= config.dark.max:
            return Style.DARK
        if r >= config.white.min:
            return Style.WHITE
        return Style.GRAY
    return Style.SOFT_HUE


def clamp_arctic_style(style: Style) -> Style:
    """Arctic creatures only wear Dark, White or Gray."""
    if style in (Style.DARK, Style.WHITE):
        return style
    return Style.GRAY
