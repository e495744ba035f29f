"""Tests for CSS output."""

from landing_theme.theme_engine import (
    TOKEN_NAMES,
    ThemeOverrides,
    hex_to_hsl_triple,
    scoped_style_block,
    theme_class_name,
    tokens_to_css,
    tokens_to_hsl_css,
)
from landing_theme.theme_engine.serializer import css_variable_name


class TestCssVariables:
    """Test custom property rendering."""

    def test_variable_names(self):
        assert css_variable_name("background") == "--background"
        assert css_variable_name("card_foreground") == "--card-foreground"

    def test_tokens_to_css(self, noir):
        lines = tokens_to_css(noir.tokens).split("\n")

        assert len(lines) == len(TOKEN_NAMES) == 15
        assert lines[0] == "--background: #0a0a0a;"
        assert "--card-foreground: #fafafa;" in lines
        assert lines[-1] == "--ring: #9ca3af;"

    def test_fixed_order(self, noir):
        names = [line.split(":")[0] for line in tokens_to_css(noir.tokens).splitlines()]
        assert names == [css_variable_name(name) for name in TOKEN_NAMES]

    def test_hsl_triple(self):
        assert hex_to_hsl_triple("#336699") == "210 50% 40%"
        assert hex_to_hsl_triple("#ffffff") == "0 0% 100%"

    def test_tokens_to_hsl_css(self, noir):
        lines = tokens_to_hsl_css(noir.tokens).splitlines()
        assert lines[0] == "--background: 0 0% 4%;"
        assert len(lines) == 15


class TestThemeClass:
    """Test scoped class names and style blocks."""

    def test_class_name_without_overrides(self):
        assert theme_class_name("noir", None, "#0a0a0a") == "site-theme-noir-dark"

    def test_class_name_with_overrides(self):
        overrides = ThemeOverrides(primary="#3B82F6", accent="f59e0b")
        assert theme_class_name("noir", overrides, "#0a0a0a") == "site-theme-noir-3b82f6-f59e0b-dark"

    def test_brand_suffix_always_included(self):
        """Brand names the class even when primary supersedes it for derivation."""
        overrides = ThemeOverrides(primary="#3b82f6", brand="#ff0000")
        assert theme_class_name("noir", overrides, "#0a0a0a") == "site-theme-noir-3b82f6-ff0000-dark"

        brand_only = ThemeOverrides(brand="#ff0000")
        assert theme_class_name("noir", brand_only, "#0a0a0a") == "site-theme-noir-ff0000-dark"

    def test_light_mode_and_prefix(self):
        overrides = ThemeOverrides(background="#ffffff")
        name = theme_class_name("light-gradient", overrides, "#ffffff", prefix="lp")
        assert name == "lp-light-gradient-ffffff-light"

    def test_scoped_style_block(self):
        block = scoped_style_block("site-theme-noir-dark", "--a: #000000;\n--b: #ffffff;")
        assert block == ".site-theme-noir-dark {\n  --a: #000000;\n  --b: #ffffff;\n}"
