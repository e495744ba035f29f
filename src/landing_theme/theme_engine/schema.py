"""Theme schema definitions for the landing page theming system.

This module defines the Pydantic models that validate and structure all theme
data: the semantic token set, presets, per-request color overrides and the
persisted site theme record.
"""

from enum import Enum
from typing import NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"

# Placeholder values the form layer writes into color fields that carry no color
ABSENT_COLOR_VALUES = frozenset({"", "uploaded"})

# WCAG 2.1 AA thresholds
AA_NORMAL_TEXT = 4.5
AA_LARGE_TEXT = 3.0


class ThemeId(str, Enum):
    """Identifiers of the shipped theme presets"""
    NOIR = "noir"
    NEON_NOIR = "neon-noir"
    SLATE_POP = "slate-pop"
    LIGHT_GRADIENT = "light-gradient"
    SLEEK_DARK = "sleek-dark"


class HSL(NamedTuple):
    """Integer HSL triple: hue in degrees, saturation and lightness in percent."""
    h: int
    s: int
    l: int


class ThemeTokens(BaseModel):
    """Semantic color tokens consumed by the rendering layer"""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    background: str = Field(..., description="Page background")
    foreground: str = Field(..., description="Body text on background")
    card: str = Field(..., description="Card/panel surface")
    card_foreground: str = Field(..., description="Text on card")
    primary: str = Field(..., description="Primary brand color")
    primary_foreground: str = Field(..., description="Text on primary")
    secondary: str = Field(..., description="Secondary surface")
    secondary_foreground: str = Field(..., description="Text on secondary")
    accent: str = Field(..., description="Accent color")
    accent_foreground: str = Field(..., description="Text on accent")
    muted: str = Field(..., description="Muted surface")
    muted_foreground: str = Field(..., description="De-emphasized text on muted")
    border: str = Field(..., description="Border color")
    input: str = Field(..., description="Form input background")
    ring: str = Field(..., description="Focus ring color")

    @field_validator('*', mode='before')
    @classmethod
    def validate_color_format(cls, v):
        """Canonicalize every token to lowercase #rrggbb"""
        from .utils import normalize_hex
        return normalize_hex(v)


TOKEN_NAMES: Tuple[str, ...] = tuple(ThemeTokens.model_fields)

# (foreground token, background token) pairs held to AA contrast
FOREGROUND_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("foreground", "background"),
    ("card_foreground", "card"),
    ("primary_foreground", "primary"),
    ("secondary_foreground", "secondary"),
    ("accent_foreground", "accent"),
    ("muted_foreground", "muted"),
)


class ThemePreset(BaseModel):
    """A named, fully authored token set shipped with the engine"""

    model_config = ConfigDict(frozen=True)

    id: ThemeId
    name: str = Field(..., description="Human-readable preset name")
    description: str = ""
    tokens: ThemeTokens
    default_brand_hex: Optional[str] = None

    @field_validator('default_brand_hex', mode='before')
    @classmethod
    def validate_brand_hex(cls, v):
        if v is None:
            return v
        from .utils import normalize_hex
        return normalize_hex(v)


class ThemeOverrides(BaseModel):
    """User-supplied colors that supersede preset-derived tokens.

    Values are only normalized here (placeholders become ``None`` and a
    missing ``#`` is added); hex digits are validated when the engine parses
    them, so a malformed color surfaces as ``MalformedColorError`` from
    ``derive``. A non-string value fails here already; built directly that is a
    ``ValidationError``, while mappings passed to ``derive`` turn it into
    ``MalformedColorError``.
    """

    model_config = ConfigDict(frozen=True)

    background: Optional[str] = None
    primary: Optional[str] = None
    accent: Optional[str] = None
    brand: Optional[str] = None  # legacy single-color theming

    @field_validator('*', mode='before')
    @classmethod
    def normalize_override(cls, v):
        from .utils import normalize_override_hex
        return normalize_override_hex(v)

    @property
    def is_empty(self) -> bool:
        return not any((self.background, self.primary, self.accent, self.brand))

    @property
    def effective_brand(self) -> Optional[str]:
        """Brand color, or None when explicit primary/accent supersede it."""
        if self.primary or self.accent:
            return None
        return self.brand


class SiteThemeConfig(BaseModel):
    """Theme section of a persisted site configuration record"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    theme_id: ThemeId = Field(..., alias="id")
    brand_hex: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)
    primary_hex: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)
    accent_hex: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)
    background_hex: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)

    @field_validator('brand_hex', 'primary_hex', 'accent_hex', 'background_hex', mode='before')
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and v.strip() in ABSENT_COLOR_VALUES:
            return None
        return v

    def to_overrides(self) -> ThemeOverrides:
        return ThemeOverrides(
            background=self.background_hex,
            primary=self.primary_hex,
            accent=self.accent_hex,
            brand=self.brand_hex,
        )


class ContrastCheck(BaseModel):
    """Result of a contrast check for live pass/fail indicators"""

    model_config = ConfigDict(frozen=True)

    passes: bool
    ratio: float
    required: float
