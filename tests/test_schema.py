"""Tests for the theme data models."""

import pytest
from pydantic import ValidationError

from landing_theme.theme_engine import (
    SiteThemeConfig,
    ThemeId,
    ThemeOverrides,
    ThemePreset,
    ThemeTokens,
)


class TestThemeTokens:
    """Test the token model."""

    def test_camel_case_aliases(self, noir):
        data = noir.tokens.model_dump(by_alias=True)
        assert data["cardForeground"] == "#fafafa"
        assert data["mutedForeground"] == "#a3a3a3"

    def test_accepts_aliases_and_names(self, noir):
        data = noir.tokens.model_dump(by_alias=True)
        assert ThemeTokens(**data) == noir.tokens
        assert ThemeTokens(**noir.tokens.model_dump()) == noir.tokens

    def test_values_are_normalized(self, noir):
        data = noir.tokens.model_dump()
        data["background"] = "#0A0A0A"
        data["ring"] = "9CA3AF"
        assert ThemeTokens(**data) == noir.tokens

    def test_invalid_value(self, noir):
        data = noir.tokens.model_dump()
        data["border"] = "#2626"
        with pytest.raises(ValidationError):
            ThemeTokens(**data)

    def test_missing_token(self, noir):
        data = noir.tokens.model_dump()
        del data["ring"]
        with pytest.raises(ValidationError):
            ThemeTokens(**data)


class TestThemePreset:
    """Test the preset model."""

    def test_unknown_id(self, noir):
        with pytest.raises(ValidationError):
            ThemePreset(id="vaporwave", name="Vaporwave", tokens=noir.tokens)

    def test_brand_hex_is_normalized(self, noir):
        preset = ThemePreset(id=ThemeId.NOIR, name="Noir", tokens=noir.tokens, default_brand_hex="ABC")
        assert preset.default_brand_hex == "#aabbcc"


class TestThemeOverrides:
    """Test override normalization and precedence helpers."""

    def test_placeholders_become_none(self):
        overrides = ThemeOverrides(background="", primary="uploaded", accent="  ")
        assert overrides.is_empty

    def test_adds_prefix(self):
        assert ThemeOverrides(primary="3b82f6").primary == "#3b82f6"

    def test_effective_brand(self):
        assert ThemeOverrides(brand="#ff0000").effective_brand == "#ff0000"
        assert ThemeOverrides(brand="#ff0000", primary="#3b82f6").effective_brand is None
        assert ThemeOverrides(brand="#ff0000", accent="#3b82f6").effective_brand is None

    def test_is_frozen(self):
        overrides = ThemeOverrides(primary="#3b82f6")
        with pytest.raises(ValidationError):
            overrides.primary = "#000000"


class TestSiteThemeConfig:
    """Test the persisted site theme record."""

    def test_from_camel_case_record(self):
        record = SiteThemeConfig(**{
            "id": "slate-pop",
            "brandHex": "uploaded",
            "primaryHex": "#3b82f6",
            "accentHex": "",
        })
        assert record.theme_id is ThemeId.SLATE_POP
        assert record.brand_hex is None
        assert record.accent_hex is None

        overrides = record.to_overrides()
        assert overrides.primary == "#3b82f6"
        assert overrides.accent is None

    def test_rejects_unknown_theme(self):
        with pytest.raises(ValidationError):
            SiteThemeConfig(id="vaporwave")

    def test_rejects_malformed_hex(self):
        with pytest.raises(ValidationError):
            SiteThemeConfig(id="noir", primaryHex="blue")
