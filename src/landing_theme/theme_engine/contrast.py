"""Lightness search that produces AA-compliant foreground colors."""

import logging

from .schema import HSL
from .utils import hsl_to_hex, meets_aa

logger = logging.getLogger(__name__)

LIGHTNESS_STEP = 5
MAX_ITERATIONS = 20

LIGHT_FALLBACK = "#ffffff"
DARK_FALLBACK = "#000000"


def find_accessible_color(base_hsl: HSL, target_background: str, prefer_light: bool) -> str:
    """Find a color of the given hue that reads on ``target_background``.

    The search starts at ``base_hsl.l``, which callers place at the
    preferred extreme (e.g. 95 for light text, 5 for dark text), and walks
    away from it in steps of 5 lightness units, so the first candidate that
    passes normal-text AA is the one closest to the preferred extreme.
    Lightness is clamped to [0, 100].

    If nothing passes within 20 iterations, pure white is returned when
    ``prefer_light`` is set, otherwise pure black. That fallback is not
    guaranteed to pass against mid-luminance backgrounds.

    Args:
        base_hsl: Seed color; hue and saturation are kept, lightness is the start
        target_background: Hex color the result must contrast with
        prefer_light: Bias the result toward light (True) or dark (False)

    Returns:
        Hex color string
    """
    step = -LIGHTNESS_STEP if prefer_light else LIGHTNESS_STEP
    lightness = base_hsl.l

    for _ in range(MAX_ITERATIONS):
        candidate = hsl_to_hex(base_hsl.h, base_hsl.s, lightness)
        if meets_aa(candidate, target_background):
            return candidate

        lightness = max(0, min(100, lightness + step))

    fallback = LIGHT_FALLBACK if prefer_light else DARK_FALLBACK
    logger.debug(
        f"No AA match for hue {base_hsl.h} on {target_background}; "
        f"falling back to {fallback}"
    )
    return fallback
