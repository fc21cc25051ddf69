"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..models.indicator import IndicatorParams
from ..models.style import GapPolicy, StyleConfig
from .defaults import DefaultConfig, get_default_config


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=config_dir,
            defaults=get_default_config(),
        )

    def load_presets(self) -> dict[str, Any]:
        """Load all named presets from presets.yaml, empty if absent."""
        presets_file = self.config_dir / "presets.yaml"

        if not presets_file.exists():
            return {}

        with open(presets_file) as f:
            presets_config = yaml.safe_load(f) or {}

        return presets_config.get("presets", {}) or {}

    def load_preset(self, preset_name: str) -> dict[str, Any]:
        """Load one preset's overrides."""
        return self.load_presets().get(preset_name, {}) or {}

    def merge_config(
        self,
        preset_name: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Call-site overrides (highest priority)
        2. Named preset from presets.yaml
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        if preset_name:
            config = self._deep_merge(config, self.load_preset(preset_name))

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_params(self, config: dict[str, Any]) -> IndicatorParams:
        """Build an IndicatorParams snapshot from a merged config."""
        section = config.get("indicator", {})
        return IndicatorParams(
            length=section["length"],
            std_multiplier=float(section["std_multiplier"]),
            offset=section["offset"],
        )

    def build_style(self, config: dict[str, Any]) -> StyleConfig:
        """Build a StyleConfig from a merged config."""
        return StyleConfig.from_dict(config.get("style", {}))

    def build_gap_policy(self, config: dict[str, Any]) -> GapPolicy:
        return GapPolicy(config.get("render", {}).get("gap_policy", self.defaults.render.gap_policy))

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
