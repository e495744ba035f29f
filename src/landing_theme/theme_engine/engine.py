"""Core theme engine for the landing page theming system.

This module derives complete, internally consistent token sets from a preset
and optional user color overrides, and enforces WCAG AA contrast on every
foreground/background pair of the result. ``ThemeEngine`` wraps the
derivation together with the preset registry and CSS output for callers that
work from configuration.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from .contrast import find_accessible_color
from .errors import ContrastViolationError, MalformedColorError
from .registry import PresetKey, ThemeRegistry, get_registry
from .schema import (
    FOREGROUND_PAIRS,
    HSL,
    SiteThemeConfig,
    ThemeOverrides,
    ThemePreset,
    ThemeTokens,
)
from .serializer import scoped_style_block, theme_class_name, tokens_to_css, tokens_to_hsl_css
from .utils import (
    contrast_ratio,
    hex_to_hsl,
    hsl_to_hex,
    meets_aa,
    normalize_hex,
    required_ratio,
)

logger = logging.getLogger(__name__)

WHITE = "#ffffff"
BLACK = "#000000"

# Lightness offsets of surfaces derived from a custom background
SURFACE_OFFSETS = {
    'card': 5,
    'secondary': 8,
    'muted': 12,
    'border': 10,
}
SURFACE_SATURATION_DROP = 10
SURFACE_LIGHTNESS_RANGE = (5, 95)

MUTED_FOREGROUND_ON_DARK = "#a3a3a3"
MUTED_FOREGROUND_ON_LIGHT = "#71717a"

OverridesInput = Union[ThemeOverrides, Mapping[str, Any], None]


def _coerce_overrides(overrides: OverridesInput) -> ThemeOverrides:
    if overrides is None:
        return ThemeOverrides()
    if isinstance(overrides, ThemeOverrides):
        return overrides
    try:
        return ThemeOverrides(**overrides)
    except ValidationError as e:
        # pydantic wraps errors raised in validators; surface the color error itself
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        raise MalformedColorError(error.get("input"), f"invalid {field} override") from e


def _canonical(color: Optional[str]) -> Optional[str]:
    return normalize_hex(color) if color is not None else None


def _is_dark(color: str) -> bool:
    return hex_to_hsl(color).l < 50


def _foreground_for_background(lightness: int) -> str:
    if lightness < 20:
        return WHITE
    if lightness > 80:
        return BLACK
    return WHITE if lightness < 50 else BLACK


def _apply_background(tokens: Dict[str, str], background: str) -> None:
    """Re-derive the background and every surface that follows it."""
    bg_hsl = hex_to_hsl(background)
    is_dark = bg_hsl.l < 50
    foreground = _foreground_for_background(bg_hsl.l)
    saturation = max(bg_hsl.s - SURFACE_SATURATION_DROP, 0)
    low, high = SURFACE_LIGHTNESS_RANGE

    surfaces = {}
    for name, delta in SURFACE_OFFSETS.items():
        lightness = bg_hsl.l + delta if is_dark else bg_hsl.l - delta
        surfaces[name] = hsl_to_hex(bg_hsl.h, saturation, max(low, min(high, lightness)))

    tokens.update(
        background=background,
        foreground=foreground,
        card=surfaces['card'],
        card_foreground=foreground,
        secondary=surfaces['secondary'],
        secondary_foreground=foreground,
        muted=surfaces['muted'],
        muted_foreground=(
            MUTED_FOREGROUND_ON_DARK if foreground == WHITE else MUTED_FOREGROUND_ON_LIGHT
        ),
        border=surfaces['border'],
        input=surfaces['secondary'],
    )
    logger.debug(f"Background override {background} (dark={is_dark}, foreground={foreground})")


def _primary_foreground(primary: str) -> str:
    primary_hsl = hex_to_hsl(primary)
    return find_accessible_color(HSL(primary_hsl.h, primary_hsl.s, 95), primary, prefer_light=True)


def _apply_primary(tokens: Dict[str, str], primary: str, accent_overridden: bool) -> None:
    tokens['primary'] = primary
    tokens['primary_foreground'] = _primary_foreground(primary)
    if not accent_overridden:
        tokens['ring'] = primary
    logger.debug(f"Primary override {primary} -> foreground {tokens['primary_foreground']}")


def _apply_accent(tokens: Dict[str, str], accent: str) -> None:
    accent_hsl = hex_to_hsl(accent)
    needs_light_foreground = accent_hsl.l < 50
    seed = HSL(accent_hsl.h, accent_hsl.s, 95 if needs_light_foreground else 5)

    tokens['accent'] = accent
    tokens['accent_foreground'] = find_accessible_color(
        seed, accent, prefer_light=needs_light_foreground
    )
    # Accent wins the focus ring even when primary is also overridden
    tokens['ring'] = accent
    logger.debug(f"Accent override {accent} -> foreground {tokens['accent_foreground']}")


def _apply_brand(tokens: Dict[str, str], brand: str) -> None:
    """Derive primary and accent from a single legacy brand color."""
    brand_hsl = hex_to_hsl(brand)
    dark_mode = _is_dark(tokens['background'])

    accent_light = hsl_to_hex(
        brand_hsl.h,
        min(brand_hsl.s + 20, 100),
        min(brand_hsl.l + 20, 90),
    )
    accent_dark = hsl_to_hex(brand_hsl.h, brand_hsl.s, max(brand_hsl.l - 20, 10))
    accent = accent_light if dark_mode else accent_dark

    tokens['primary'] = brand
    tokens['primary_foreground'] = _primary_foreground(brand)
    tokens['accent'] = accent
    tokens['accent_foreground'] = find_accessible_color(
        HSL(brand_hsl.h, brand_hsl.s, 10 if dark_mode else 90),
        accent,
        prefer_light=not dark_mode,
    )
    tokens['ring'] = brand
    logger.debug(f"Brand override {brand} (dark={dark_mode}) -> accent {accent}")


def _repair_foreground(foreground: str, background: str) -> str:
    """Find a replacement foreground that passes AA on ``background``."""
    fg_hsl = hex_to_hsl(foreground)
    # Side follows luminance, not HSL lightness: #0000ff is l=50 yet needs light text
    needs_light = contrast_ratio(WHITE, background) >= contrast_ratio(BLACK, background)
    seed = HSL(fg_hsl.h, fg_hsl.s, 95 if needs_light else 5)

    candidate = find_accessible_color(seed, background, prefer_light=needs_light)
    if meets_aa(candidate, background):
        return candidate

    # The better of black and white always reaches at least ~4.58:1
    return max((WHITE, BLACK), key=lambda color: contrast_ratio(color, background))


def _enforce_contrast(tokens: Dict[str, str]) -> None:
    for fg_key, bg_key in FOREGROUND_PAIRS:
        foreground, background = tokens[fg_key], tokens[bg_key]
        if meets_aa(foreground, background):
            continue

        repaired = _repair_foreground(foreground, background)
        logger.warning(
            f"{fg_key} {foreground} on {bg_key} {background} is "
            f"{contrast_ratio(foreground, background):.2f}:1; replaced with {repaired}"
        )
        tokens[fg_key] = repaired


def audit_tokens(tokens: ThemeTokens, is_large_text: bool = False) -> List[str]:
    """Validate color accessibility of a token set.

    Args:
        tokens: Token set to check
        is_large_text: Check against the 3:1 large-text threshold

    Returns:
        List of accessibility warnings (empty when every pair passes)
    """
    warnings = []
    required = required_ratio(is_large_text)
    values = tokens.model_dump()

    for fg_key, bg_key in FOREGROUND_PAIRS:
        ratio = contrast_ratio(values[fg_key], values[bg_key])
        if ratio < required:
            warnings.append(
                f"Low contrast between {fg_key} and {bg_key}: "
                f"{ratio:.2f}:1 (required {required}:1)"
            )

    return warnings


def derive_theme_tokens(preset: ThemePreset, overrides: OverridesInput = None,
                        verify_contrast: bool = False) -> ThemeTokens:
    """Derive the full token set for a preset and optional color overrides.

    Overrides are applied in a fixed order: background, primary, accent and
    finally the legacy brand color, which is ignored whenever primary or
    accent is given. Afterwards any foreground that misses 4.5:1 against its
    surface is replaced.

    Args:
        preset: Preset providing the base tokens
        overrides: Optional user colors
        verify_contrast: Raise if a pair still fails after enforcement

    Returns:
        Complete ThemeTokens

    Raises:
        MalformedColorError: If an override is not a valid hex color
        ContrastViolationError: If verify_contrast is set and a pair fails
    """
    overrides = _coerce_overrides(overrides)

    # Parse every override before touching tokens so bad input fails cleanly
    background = _canonical(overrides.background)
    primary = _canonical(overrides.primary)
    accent = _canonical(overrides.accent)
    brand = _canonical(overrides.effective_brand)

    tokens = preset.tokens.model_dump()

    if background:
        _apply_background(tokens, background)
    if primary:
        _apply_primary(tokens, primary, accent_overridden=accent is not None)
    if accent:
        _apply_accent(tokens, accent)
    if brand:
        _apply_brand(tokens, brand)

    _enforce_contrast(tokens)
    result = ThemeTokens(**tokens)

    if verify_contrast:
        failures = audit_tokens(result)
        if failures:
            raise ContrastViolationError(failures)

    return result


def derive_tokens(theme_id: PresetKey, overrides: OverridesInput = None) -> ThemeTokens:
    """Derive tokens for a shipped preset id."""
    return derive_theme_tokens(get_registry().get_preset(theme_id), overrides)


class ThemeEngine:
    """Theme engine tying presets, derivation and CSS output together."""

    def __init__(self, registry: Optional[ThemeRegistry] = None,
                 default_theme: str = "noir",
                 css_format: str = "hex",
                 class_prefix: str = "site-theme",
                 verify_contrast: bool = True):
        """Initialize the theme engine.

        Args:
            registry: Preset registry; defaults to the shipped presets
            default_theme: Preset used when no theme id is given
            css_format: 'hex' or 'hsl' custom property values
            class_prefix: Prefix of scoped theme class names
            verify_contrast: Raise ContrastViolationError on invariant failure
        """
        self.registry = registry or get_registry()
        self.default_theme = default_theme
        self.css_format = css_format
        self.class_prefix = class_prefix
        self.verify_contrast = verify_contrast

        logger.debug(f"ThemeEngine initialized with {len(self.registry.theme_ids())} presets")

    @classmethod
    def from_config(cls, config) -> 'ThemeEngine':
        """Create theme engine from application config.

        Args:
            config: EngineConfig instance

        Returns:
            ThemeEngine instance
        """
        return cls(
            default_theme=config.default_theme,
            css_format=config.css_format,
            class_prefix=config.class_prefix,
            verify_contrast=config.verify_contrast,
        )

    def derive(self, theme_id: Optional[PresetKey] = None,
               overrides: OverridesInput = None) -> ThemeTokens:
        """Derive tokens for a preset, using the default preset if none given."""
        preset = self.registry.get_preset(theme_id or self.default_theme)
        return derive_theme_tokens(preset, overrides, verify_contrast=self.verify_contrast)

    def derive_from_site_config(self, site_config: Union[SiteThemeConfig, Mapping[str, Any]]) -> ThemeTokens:
        """Derive tokens from a persisted site theme record."""
        if not isinstance(site_config, SiteThemeConfig):
            site_config = SiteThemeConfig(**site_config)
        return self.derive(site_config.theme_id, site_config.to_overrides())

    def get_css(self, theme_id: Optional[PresetKey] = None,
                overrides: OverridesInput = None,
                css_format: Optional[str] = None,
                scoped: bool = False) -> str:
        """Render derived tokens as CSS custom properties.

        Args:
            theme_id: Preset id
            overrides: Optional user colors
            css_format: 'hex' or 'hsl'; defaults to the engine setting
            scoped: Wrap the declarations in a theme class rule

        Returns:
            CSS text
        """
        overrides = _coerce_overrides(overrides)
        tokens = self.derive(theme_id, overrides)

        css_format = css_format or self.css_format
        if css_format == "hsl":
            css = tokens_to_hsl_css(tokens)
        elif css_format == "hex":
            css = tokens_to_css(tokens)
        else:
            raise ValueError(f"Unsupported CSS format: {css_format}")

        if not scoped:
            return css

        preset_id = self.registry.get_preset(theme_id or self.default_theme).id.value
        class_name = theme_class_name(preset_id, overrides, tokens.background, self.class_prefix)
        return scoped_style_block(class_name, css)

    # Public API for preset management
    def list_themes(self) -> List[Dict[str, Any]]:
        """List all available presets."""
        return self.registry.list_available_themes()

    def theme_exists(self, theme_id: PresetKey) -> bool:
        """Check if a preset exists."""
        return self.registry.theme_exists(theme_id)

    def get_theme_info(self, theme_id: PresetKey) -> Dict[str, Any]:
        """Get detailed preset information."""
        return self.registry.get_theme_info(theme_id)

    def validate_theme(self, theme_id: PresetKey) -> List[str]:
        """Validate a preset's base tokens and return issues."""
        return audit_tokens(self.registry.get_preset(theme_id).tokens)
