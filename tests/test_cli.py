"""Tests for the landing-theme command line interface."""

import json

import pytest
from click.testing import CliRunner

from landing_theme.cli.main import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "config.yaml"


def invoke(runner, config_path, *args):
    return runner.invoke(main, ["--config", str(config_path), *args])


class TestRootCommand:
    """Test the root command group."""

    def test_shows_help_without_command(self, runner, config_path):
        result = invoke(runner, config_path)
        assert result.exit_code == 0
        assert "theme" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_invalid_config(self, runner, config_path):
        config_path.write_text("css_format: rgb\n")
        result = invoke(runner, config_path, "theme", "list")
        assert result.exit_code == 1
        assert "Configuration error" in result.output


class TestThemeCommands:
    """Test the theme command group."""

    def test_list(self, runner, config_path):
        result = invoke(runner, config_path, "theme", "list")
        assert result.exit_code == 0
        for theme_id in ("noir", "neon-noir", "slate-pop"):
            assert theme_id in result.output

    def test_info(self, runner, config_path):
        result = invoke(runner, config_path, "theme", "info", "slate-pop")
        assert result.exit_code == 0
        assert "Slate Pop" in result.output
        assert "#0f172a" in result.output

    def test_info_unknown(self, runner, config_path):
        result = invoke(runner, config_path, "theme", "info", "vaporwave")
        assert result.exit_code == 1
        assert "vaporwave" in result.output

    def test_derive_preset(self, runner, config_path):
        result = invoke(runner, config_path, "theme", "derive", "noir")
        assert result.exit_code == 0
        assert "--background: #0a0a0a;" in result.output
        assert "--ring: #9ca3af;" in result.output

    def test_derive_uses_default_theme(self, runner, config_path):
        config_path.write_text("default_theme: slate-pop\n")
        result = invoke(runner, config_path, "theme", "derive")
        assert result.exit_code == 0
        assert "--background: #0f172a;" in result.output

    def test_derive_with_overrides(self, runner, config_path):
        result = invoke(runner, config_path, "theme", "derive", "noir",
                        "--primary", "#3B82F6", "--background", "000")
        assert result.exit_code == 0
        assert "--primary: #3b82f6;" in result.output
        assert "--background: #000000;" in result.output
        assert "--foreground: #ffffff;" in result.output

    def test_derive_hsl_format(self, runner, config_path):
        result = invoke(runner, config_path, "theme", "derive", "noir", "--format", "hsl")
        assert result.exit_code == 0
        assert "--background: 0 0% 4%;" in result.output

    def test_derive_scoped(self, runner, config_path):
        result = invoke(runner, config_path, "theme", "derive", "noir", "--scoped")
        assert result.exit_code == 0
        assert ".site-theme-noir-dark {" in result.output

    def test_derive_from_site_config(self, runner, config_path, tmp_path):
        site = tmp_path / "site.json"
        site.write_text(json.dumps({"theme": {"id": "slate-pop", "accentHex": "#ff00ff"}}))

        result = invoke(runner, config_path, "theme", "derive", "--config", str(site))
        assert result.exit_code == 0
        assert "--background: #0f172a;" in result.output
        assert "--accent: #ff00ff;" in result.output
        assert "--ring: #ff00ff;" in result.output

    def test_derive_from_yaml_site_config(self, runner, config_path, tmp_path):
        site = tmp_path / "site.yaml"
        site.write_text('id: noir\nbrandHex: uploaded\nprimaryHex: "#3b82f6"\n')

        result = invoke(runner, config_path, "theme", "derive", "--config", str(site),
                        "--accent", "#f59e0b")
        assert result.exit_code == 0
        assert "--primary: #3b82f6;" in result.output
        assert "--ring: #f59e0b;" in result.output

    def test_derive_malformed_color(self, runner, config_path):
        result = invoke(runner, config_path, "theme", "derive", "noir", "--primary", "#12345g")
        assert result.exit_code == 1
        assert "Invalid hex color" in result.output

    def test_derive_unknown_theme(self, runner, config_path):
        result = invoke(runner, config_path, "theme", "derive", "vaporwave")
        assert result.exit_code == 1
        assert "vaporwave" in result.output

    def test_check_pass(self, runner, config_path):
        result = invoke(runner, config_path, "theme", "check", "#000000", "#ffffff")
        assert result.exit_code == 0
        assert "PASS" in result.output
        assert "21.00:1" in result.output

    def test_check_fail(self, runner, config_path):
        result = invoke(runner, config_path, "theme", "check", "#cccccc", "#ffffff")
        assert result.exit_code == 1
        assert "FAIL" in result.output

    def test_check_large_text(self, runner, config_path):
        result = invoke(runner, config_path, "theme", "check", "#777777", "#ffffff", "--large")
        assert result.exit_code == 0
        assert "PASS" in result.output

    def test_check_malformed(self, runner, config_path):
        result = invoke(runner, config_path, "theme", "check", "black", "#ffffff")
        assert result.exit_code == 1
        assert "Invalid hex color" in result.output

    def test_validate(self, runner, config_path):
        result = invoke(runner, config_path, "theme", "validate")
        assert result.exit_code == 0
        assert "All presets pass WCAG AA" in result.output
