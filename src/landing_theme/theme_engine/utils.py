"""Utility functions for theme engine operations.

This module provides hex color parsing and normalization, hex/HSL
conversion, and the WCAG relative luminance and contrast calculations used
for accessibility enforcement.
"""

import math
import re
from typing import Any, Optional, Tuple

from .errors import MalformedColorError
from .schema import AA_LARGE_TEXT, AA_NORMAL_TEXT, ABSENT_COLOR_VALUES, HSL, ContrastCheck


_HEX_DIGITS_RE = re.compile(r'^[0-9a-f]+$')


def _round_half_up(value: float) -> int:
    # round() is banker's rounding; channel math expects .5 to round up
    return int(math.floor(value + 0.5))


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def normalize_hex(value: Any) -> str:
    """Normalize a hex color to canonical ``#rrggbb`` form.

    Args:
        value: Hex color string, with or without ``#``, 3 or 6 digits

    Returns:
        Lowercase 6-digit hex color with ``#`` prefix

    Raises:
        MalformedColorError: If value is not a valid hex color
    """
    if not isinstance(value, str):
        raise MalformedColorError(value, "expected a string")

    digits = value.strip().lower()
    if digits.startswith('#'):
        digits = digits[1:]

    if len(digits) == 3:
        digits = ''.join(ch * 2 for ch in digits)

    if len(digits) != 6:
        raise MalformedColorError(value, "expected 3 or 6 hex digits")
    if not _HEX_DIGITS_RE.match(digits):
        raise MalformedColorError(value, "non-hex characters")

    return f"#{digits}"


def normalize_override_hex(value: Any) -> Optional[str]:
    """Normalize a user-supplied override color.

    Empty strings, whitespace and the ``"uploaded"`` placeholder mean no
    override. Anything else gets a leading ``#`` if it lacks one; the digits
    are not validated here.

    Args:
        value: Raw override value from a form or config record

    Returns:
        ``#``-prefixed color string, or None when no override was given
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedColorError(value, "expected a string")

    cleaned = value.strip()
    if cleaned in ABSENT_COLOR_VALUES:
        return None
    if not cleaned.startswith('#'):
        cleaned = f"#{cleaned}"
    return cleaned


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple.

    Args:
        hex_color: Hex color string (e.g., '#FF0000', 'ff0000' or '#f00')

    Returns:
        RGB tuple (r, g, b) with values 0-255

    Raises:
        MalformedColorError: If hex_color is not a valid hex color
    """
    digits = normalize_hex(hex_color)[1:]
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB values to hex color string.

    Args:
        r, g, b: RGB values 0-255

    Returns:
        Lowercase hex color string with # prefix
    """
    r, g, b = (int(_clamp(channel, 0, 255)) for channel in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_hsl(hex_color: str) -> HSL:
    """Convert hex color to an integer HSL triple.

    Args:
        hex_color: Hex color string

    Returns:
        HSL with hue 0-359 and saturation/lightness 0-100

    Raises:
        MalformedColorError: If hex_color is not a valid hex color
    """
    r, g, b = (channel / 255 for channel in hex_to_rgb(hex_color))

    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2
    hue = 0.0
    saturation = 0.0

    if high != low:
        delta = high - low
        if lightness > 0.5:
            saturation = delta / (2 - high - low)
        else:
            saturation = delta / (high + low)

        if high == r:
            hue = ((g - b) / delta + (6 if g < b else 0)) / 6
        elif high == g:
            hue = ((b - r) / delta + 2) / 6
        else:
            hue = ((r - g) / delta + 4) / 6

    return HSL(
        _round_half_up(hue * 360) % 360,
        _round_half_up(saturation * 100),
        _round_half_up(lightness * 100),
    )


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert HSL values to hex color string.

    Args:
        h: Hue in degrees
        s: Saturation percent 0-100
        l: Lightness percent 0-100

    Returns:
        Lowercase hex color string with # prefix
    """
    lightness = l / 100
    amount = s * min(lightness, 1 - lightness) / 100

    def channel(n: int) -> int:
        k = (n + h / 30) % 12
        value = lightness - amount * max(min(k - 3, 9 - k, 1), -1)
        return int(_clamp(_round_half_up(255 * value), 0, 255))

    return rgb_to_hex(channel(0), channel(8), channel(4))


def relative_luminance(r: int, g: int, b: int) -> float:
    """Calculate relative luminance of an RGB color.

    Uses the WCAG formula for luminance calculation.

    Args:
        r, g, b: RGB values 0-255

    Returns:
        Relative luminance 0.0-1.0
    """
    def gamma_correct(value: int) -> float:
        normalized = value / 255.0
        if normalized <= 0.03928:
            return normalized / 12.92
        else:
            return ((normalized + 0.055) / 1.055) ** 2.4

    return 0.2126 * gamma_correct(r) + 0.7152 * gamma_correct(g) + 0.0722 * gamma_correct(b)


def contrast_ratio(color1: str, color2: str) -> float:
    """Calculate WCAG contrast ratio between two colors.

    Argument order does not matter; the lighter color always ends up in the
    numerator.

    Args:
        color1, color2: Hex color strings

    Returns:
        Contrast ratio 1.0-21.0 (higher is more contrast)

    Raises:
        MalformedColorError: If either color cannot be parsed
    """
    lum1 = relative_luminance(*hex_to_rgb(color1))
    lum2 = relative_luminance(*hex_to_rgb(color2))

    lighter, darker = max(lum1, lum2), min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def required_ratio(is_large_text: bool = False) -> float:
    return AA_LARGE_TEXT if is_large_text else AA_NORMAL_TEXT


def meets_aa(foreground: str, background: str, is_large_text: bool = False) -> bool:
    """Check if a color combination meets WCAG AA contrast.

    Args:
        foreground: Foreground hex color
        background: Background hex color
        is_large_text: Use the relaxed 3:1 large-text threshold instead of 4.5:1

    Returns:
        True if contrast meets requirements
    """
    return contrast_ratio(foreground, background) >= required_ratio(is_large_text)


def check_text_contrast(foreground: str, background: str,
                        is_large_text: bool = False) -> ContrastCheck:
    """Check text contrast and report the measured and required ratios."""
    ratio = contrast_ratio(foreground, background)
    required = required_ratio(is_large_text)
    return ContrastCheck(passes=ratio >= required, ratio=ratio, required=required)
