"""
Configuration Module for the Scramble Scorecard System.

Interpretation heuristics (anchor keywords, numeric ranges, confidence
levels) and scoring tables live in settings.yaml rather than in code.
A custom file passed with ``--config`` is layered over the defaults, so
it only needs the keys it changes.
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from scramble.utils.exceptions import ConfigurationError

DEFAULT_SETTINGS = Path(__file__).parent / "settings.yaml"


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}", {"path": str(path)})

    with open(path, 'r', encoding='utf-8') as f:
        try:
            loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid configuration file: {path}", {"reason": str(e)}
            ) from e

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigurationError(f"Configuration root must be a mapping: {path}")
    return loaded


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``overrides`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigurationManager:
    """
    Process-wide settings, read once.

    The first instantiation loads the configuration; later ones return
    the same object and ignore their argument. Call :meth:`reset` to
    load a different file.

    Example:
        >>> config = ConfigurationManager("event.yaml")
        >>> config.get("interpreter.row_tolerance")
        20
        >>> config.get("scoring.handicap_allowance")
        0.1
    """

    _instance: Optional['ConfigurationManager'] = None

    def __new__(cls, config_path: Optional[str] = None) -> 'ConfigurationManager':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[str] = None) -> None:
        if self._initialized:
            return

        self.config_path = Path(config_path) if config_path else None
        self._config: Dict[str, Any] = {}
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """
        Load the defaults, then the custom file if one was given.

        Raises:
            ConfigurationError: If a file is missing or not a YAML mapping.
        """
        settings = _read_yaml(DEFAULT_SETTINGS)
        if self.config_path is not None and self.config_path != DEFAULT_SETTINGS:
            settings = _merge(settings, _read_yaml(self.config_path))

        self._config = settings
        self._resolve_paths()

    def _resolve_paths(self) -> None:
        """Make relative entries under ``paths`` absolute, from the project root."""
        project_root = DEFAULT_SETTINGS.parent.parent
        paths = self._config.get('paths') or {}
        for key, value in paths.items():
            if value and not Path(value).is_absolute():
                paths[key] = str(project_root / value)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a value by dotted key, e.g. ``"interpreter.ranges.score"``.

        Returns ``default`` when any part of the key is missing.
        """
        value: Any = self._config
        for part in key.split('.'):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def set(self, key: str, value: Any) -> None:
        """Override a value by dotted key for the rest of the process."""
        *parents, last = key.split('.')
        node = self._config
        for part in parents:
            node = node.setdefault(part, {})
        node[last] = value

    def get_all(self) -> Dict[str, Any]:
        return copy.deepcopy(self._config)

    def reload(self) -> None:
        """Re-read the configuration files, dropping any overrides."""
        self._load_config()

    @classmethod
    def reset(cls) -> None:
        """Forget the loaded configuration (used between tests)."""
        cls._instance = None


def get_config(key: str, default: Any = None) -> Any:
    """Shortcut for ``ConfigurationManager().get(key, default)``."""
    return ConfigurationManager().get(key, default)


__all__ = ['ConfigurationManager', 'get_config']
