"""
Configuration Management System

Handles loading, validation, and management of calculator parameters.
"""

import copy
import math

import yaml
from typing import Dict, Any, Optional
from pathlib import Path


VALID_METHODS = ('sequential', 'vectorized')
VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigManager:
    """Manages configuration parameters for the volume calculator."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to configuration file. If None, uses default config.
        """
        self.config_path = config_path or self._get_default_config_path()
        self.config = self._load_config()
        self._validate_config()

    def _get_default_config_path(self) -> str:
        """Get path to default configuration file."""
        package_dir = Path(__file__).parent.parent
        return str(package_dir / "config" / "default_config.yaml")

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        try:
            with open(self.config_path, 'r') as file:
                config = yaml.safe_load(file)
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing configuration file: {e}")

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ValueError(f"Configuration root must be a mapping: {self.config_path}")
        return config

    def _section(self, config: Dict[str, Any], name: str) -> Dict[str, Any]:
        """Return a top-level section, treating an empty section as {}."""
        section = config.get(name)
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise ValueError(f"Configuration section '{name}' must be a mapping")
        return section

    def _validate_config(self, config: Optional[Dict[str, Any]] = None) -> None:
        """Validate configuration parameters for consistency and feasibility."""
        config = self.config if config is None else config

        # Validate volume parameters
        vol = self._section(config, 'volume')
        method = vol.get('method', 'sequential')
        if method not in VALID_METHODS:
            raise ValueError(f"volume.method must be one of {VALID_METHODS}, got {method!r}")

        try:
            tolerance = float(vol.get('tolerance', 1e-4))
        except (TypeError, ValueError):
            raise ValueError(f"volume.tolerance must be a number, got {vol.get('tolerance')!r}")
        if not math.isfinite(tolerance) or tolerance < 0:
            raise ValueError("volume.tolerance must be finite and non-negative")

        # Validate solid dimensions
        solids = self._section(config, 'solids')
        box_dimensions = solids.get('box_dimensions', [4.0, 2.0, 2.0])
        prism_legs = solids.get('prism_legs', [4.0, 4.0])
        if not isinstance(box_dimensions, (list, tuple)) or len(box_dimensions) != 3:
            raise ValueError("solids.box_dimensions must be a list of 3 entries")
        if not isinstance(prism_legs, (list, tuple)) or len(prism_legs) != 2:
            raise ValueError("solids.prism_legs must be a list of 2 entries")

        dimensions = [solids.get('cube_edge', 2.0), solids.get('prism_height', 6.0),
                      solids.get('slant_shift', 1.0)]
        dimensions += list(box_dimensions) + list(prism_legs)
        try:
            values = [float(d) for d in dimensions]
        except (TypeError, ValueError):
            raise ValueError("Solid dimensions must be numbers")
        # slant_shift may be zero or negative
        if any(v <= 0 for v in values[:2] + values[3:]) or not all(math.isfinite(v) for v in values):
            raise ValueError("Solid dimensions must be positive and finite")

        # Validate logging level
        level = str(self._section(config, 'logging').get('level', 'WARNING')).upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {VALID_LOG_LEVELS}, got {level!r}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key: Configuration key (e.g., 'volume.tolerance')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set configuration value using dot notation.

        The change is applied only if the resulting configuration validates;
        otherwise ValueError is raised and the configuration is left unchanged.

        Args:
            key: Configuration key (e.g., 'volume.method')
            value: Value to set
        """
        keys = key.split('.')
        candidate = copy.deepcopy(self.config)
        config_ref = candidate

        for k in keys[:-1]:
            if config_ref.get(k) is None:
                config_ref[k] = {}
            elif not isinstance(config_ref[k], dict):
                raise ValueError(f"Cannot set {key!r}: {k!r} is not a section")
            config_ref = config_ref[k]

        config_ref[keys[-1]] = value
        self._validate_config(candidate)
        self.config = candidate

    def save(self, output_path: Optional[str] = None) -> None:
        """
        Save current configuration to file.

        Args:
            output_path: Path to save configuration. If None, overwrites current file.
        """
        save_path = output_path or self.config_path

        with open(save_path, 'w') as file:
            yaml.dump(self.config, file, default_flow_style=False, indent=2)

    def get_volume_params(self) -> Dict[str, Any]:
        """Get volume calculation parameters as a dictionary."""
        return self._section(self.config, 'volume')

    def get_solid_params(self) -> Dict[str, Any]:
        """Get canonical solid dimensions as a dictionary."""
        return self._section(self.config, 'solids')

    def get_log_level(self) -> str:
        """Get the configured logging level name."""
        return str(self._section(self.config, 'logging').get('level', 'WARNING')).upper()
