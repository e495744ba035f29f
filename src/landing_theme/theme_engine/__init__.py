"""Landing Theme Engine Package.

This package derives semantic color token sets for landing pages from named
presets and user-chosen colors, with WCAG AA contrast enforced on every
foreground/background pair, and renders them as CSS custom properties.
"""

from .engine import ThemeEngine, audit_tokens, derive_theme_tokens, derive_tokens
from .registry import ThemeRegistry, get_registry
from .contrast import find_accessible_color
from .errors import (
    ThemeEngineError,
    MalformedColorError,
    UnknownPresetError,
    ContrastViolationError,
)
from .schema import (
    # Core models
    ThemeTokens,
    ThemePreset,
    ThemeOverrides,
    SiteThemeConfig,
    ContrastCheck,
    HSL,

    # Enums and constants
    ThemeId,
    TOKEN_NAMES,
    FOREGROUND_PAIRS,
)
from .serializer import (
    tokens_to_css,
    tokens_to_hsl_css,
    hex_to_hsl_triple,
    theme_class_name,
    scoped_style_block,
)
from .utils import (
    normalize_hex,
    normalize_override_hex,
    hex_to_rgb,
    rgb_to_hex,
    hex_to_hsl,
    hsl_to_hex,
    relative_luminance,
    contrast_ratio,
    meets_aa,
    check_text_contrast,
)

__version__ = "1.0.0"

__all__ = [
    # Main classes
    "ThemeEngine",
    "ThemeRegistry",
    "get_registry",

    # Derivation
    "derive_theme_tokens",
    "derive_tokens",
    "audit_tokens",
    "find_accessible_color",

    # Errors
    "ThemeEngineError",
    "MalformedColorError",
    "UnknownPresetError",
    "ContrastViolationError",

    # Schema models
    "ThemeTokens",
    "ThemePreset",
    "ThemeOverrides",
    "SiteThemeConfig",
    "ContrastCheck",
    "HSL",
    "ThemeId",
    "TOKEN_NAMES",
    "FOREGROUND_PAIRS",

    # CSS output
    "tokens_to_css",
    "tokens_to_hsl_css",
    "hex_to_hsl_triple",
    "theme_class_name",
    "scoped_style_block",

    # Color utilities
    "normalize_hex",
    "normalize_override_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "hex_to_hsl",
    "hsl_to_hex",
    "relative_luminance",
    "contrast_ratio",
    "meets_aa",
    "check_text_contrast",
]
