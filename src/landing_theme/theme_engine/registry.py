"""Theme registry for the built-in preset catalog.

This module provides the ThemeRegistry class, which loads the shipped theme
presets once and serves them by id. The catalog is read-only after
construction, so a single registry can be shared freely.
"""

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from .errors import UnknownPresetError
from .schema import FOREGROUND_PAIRS, ThemeId, ThemePreset
from .utils import contrast_ratio, hex_to_hsl

logger = logging.getLogger(__name__)

PresetKey = Union[ThemeId, str]


class ThemeRegistry:
    """Registry of immutable theme presets keyed by theme id."""

    def __init__(self, presets_dir: Optional[Path] = None):
        """Initialize the theme registry.

        Args:
            presets_dir: Optional directory of preset YAML files; defaults to
                the presets shipped with the package
        """
        self.package_dir = Path(__file__).parent.parent
        self.presets_dir = Path(presets_dir) if presets_dir else self.package_dir / "theme_presets"

        self._presets: Mapping[str, ThemePreset] = MappingProxyType(self._load_presets())

    def _load_presets(self) -> Dict[str, ThemePreset]:
        """Load and validate every preset file in the presets directory."""
        presets: Dict[str, ThemePreset] = {}

        if not self.presets_dir.exists():
            logger.warning(f"Theme presets directory not found: {self.presets_dir}")
            return presets

        for preset_file in sorted(self.presets_dir.glob("*.yaml")):
            preset = self._parse_preset_data(self._load_yaml_file(preset_file), preset_file)
            if preset.id.value in presets:
                raise ValueError(f"Duplicate theme preset id '{preset.id.value}' in {preset_file}")
            presets[preset.id.value] = preset
            logger.debug(f"Loaded theme preset: {preset.id.value}")

        return presets

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML file safely."""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {file_path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Error reading {file_path}: {e}") from e

    def _parse_preset_data(self, preset_data: Dict[str, Any], file_path: Path) -> ThemePreset:
        """Parse raw preset data into a ThemePreset.

        Raises:
            ValueError: If preset data is invalid
        """
        if 'id' not in preset_data:
            preset_data = {**preset_data, 'id': file_path.stem}
        try:
            return ThemePreset(**preset_data)
        except ValidationError as e:
            raise ValueError(f"Invalid theme preset in {file_path}: {e}") from e

    def get_preset(self, theme_id: PresetKey) -> ThemePreset:
        """Look up a preset by id.

        Args:
            theme_id: ThemeId member or its string value

        Returns:
            ThemePreset instance

        Raises:
            UnknownPresetError: If no preset has this id
        """
        key = theme_id.value if isinstance(theme_id, ThemeId) else theme_id
        try:
            return self._presets[key]
        except KeyError:
            raise UnknownPresetError(theme_id, self._presets.keys()) from None

    def theme_exists(self, theme_id: PresetKey) -> bool:
        key = theme_id.value if isinstance(theme_id, ThemeId) else theme_id
        return key in self._presets

    def theme_ids(self) -> List[str]:
        return list(self._presets)

    def list_presets(self) -> List[ThemePreset]:
        return list(self._presets.values())

    def list_available_themes(self) -> List[Dict[str, Any]]:
        """List all presets with display metadata.

        Returns:
            List of theme info dictionaries
        """
        return [
            {
                'id': preset.id.value,
                'name': preset.name,
                'description': preset.description,
                'default_brand_hex': preset.default_brand_hex,
                'mode': 'dark' if _is_dark(preset) else 'light',
            }
            for preset in self._presets.values()
        ]

    def get_theme_info(self, theme_id: PresetKey) -> Dict[str, Any]:
        """Get detailed information about a preset.

        Args:
            theme_id: Id of the preset

        Returns:
            Theme information dictionary including token values and the
            contrast ratio of every foreground pair
        """
        preset = self.get_preset(theme_id)
        tokens = preset.tokens.model_dump()

        return {
            'id': preset.id.value,
            'name': preset.name,
            'description': preset.description,
            'default_brand_hex': preset.default_brand_hex,
            'mode': 'dark' if _is_dark(preset) else 'light',
            'tokens': tokens,
            'contrast': {
                fg_key: round(contrast_ratio(tokens[fg_key], tokens[bg_key]), 2)
                for fg_key, bg_key in FOREGROUND_PAIRS
            },
        }


def _is_dark(preset: ThemePreset) -> bool:
    return hex_to_hsl(preset.tokens.background).l < 50


@lru_cache(maxsize=1)
def get_registry() -> ThemeRegistry:
    """Get the process-wide registry of shipped presets."""
    return ThemeRegistry()
