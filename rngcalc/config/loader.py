"""
Configuration loader for the Fish It RNG calculator.

Loads and validates YAML configuration files for advice thresholds,
display settings, and the bundled Indonesian strings.
"""

import threading
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional

import yaml


# Config files ship inside the package so an installed copy finds them
CONFIG_DIR = Path(__file__).parent


@dataclass
class AdviceThresholds:
    """Percent thresholds used to pick advisory tier messages."""
    single_chance_low_pct: float = 0.05
    single_chance_mid_pct: float = 0.5
    cumulative_early_pct: float = 20
    cumulative_moderate_pct: float = 60
    cumulative_high_pct: float = 90
    far_past_factor: float = 2


@dataclass
class DisplaySettings:
    """Display defaults for labels and percentages."""
    fish_placeholder: str = "ikan target"
    below_resolution_pct: float = 0.01
    below_resolution_label: str = "< 0,01%"
    empty_value: str = "-"
    percent_decimals: int = 2
    confidence_levels: list = field(default_factory=lambda: [0.5, 0.9, 0.99])
    curve_multiples: list = field(default_factory=lambda: [0.5, 1, 2, 3])


class ConfigCache:
    """Thread-safe holder for loaded configuration data."""

    def __init__(self):
        self._lock = threading.Lock()
        self._constants: Optional[dict] = None
        self._strings: Optional[dict] = None

    def get_constants(self) -> Optional[dict]:
        with self._lock:
            return self._constants

    def get_strings(self) -> Optional[dict]:
        with self._lock:
            return self._strings

    def load(self, name: str, loader):
        """Return the cached value for name, loading it once under the lock."""
        attr = f"_{name}"
        with self._lock:
            value = getattr(self, attr)
            if value is None:
                value = loader()
                setattr(self, attr, value)
            return value

    def clear(self):
        with self._lock:
            self._constants = None
            self._strings = None


_cache = ConfigCache()


def _read_yaml(path: Path) -> dict:
    """Read a YAML mapping from path."""
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at top level of {path}")
    return data


def load_constants() -> dict:
    """
    Load constants from constants.yaml.

    Returns:
        Dict with 'advice', 'display' and 'milestones' sections
    """
    return _cache.load('constants', lambda: _read_yaml(CONFIG_DIR / "constants.yaml"))


def load_strings() -> dict:
    """
    Load the bundled Indonesian strings from strings.yaml.

    Returns:
        Nested dict of message templates (e.g. strings['steps']['enter_caught'])
    """
    return _cache.load('strings', lambda: _read_yaml(CONFIG_DIR / "strings.yaml"))


def _resolve_message_key(key: str, strings: dict) -> str:
    """Resolve a dotted key like 'steps.enter_caught' to its template."""
    node = strings
    for part in key.split('.'):
        if not isinstance(node, dict) or part not in node:
            raise KeyError(f"Unknown message key: {key}")
        node = node[part]
    if not isinstance(node, str):
        raise KeyError(f"Message key '{key}' is a section, not a message")
    return node


def get_message(key: str, **kwargs) -> str:
    """
    Get a bundled message by dotted key, formatted with kwargs.

    Args:
        key: Dotted path into strings.yaml (e.g. 'warnings.base_invalid')
        **kwargs: Values for str.format placeholders

    Returns:
        Formatted message
    """
    template = _resolve_message_key(key, load_strings())
    return template.format(**kwargs) if kwargs else template


def get_advice_thresholds() -> AdviceThresholds:
    """Build AdviceThresholds from the 'advice' section of constants.yaml."""
    section = load_constants().get('advice', {})
    try:
        return AdviceThresholds(**section)
    except TypeError as e:
        raise ValueError(f"Invalid 'advice' section in constants.yaml: {e}") from e


def get_display_settings() -> DisplaySettings:
    """Build DisplaySettings from the 'display' and 'milestones' sections."""
    constants = load_constants()
    section = dict(constants.get('display', {}))
    section.update(constants.get('milestones', {}))
    try:
        return DisplaySettings(**section)
    except TypeError as e:
        raise ValueError(f"Invalid display settings in constants.yaml: {e}") from e


def clear_cache():
    """Clear cached configuration data (useful for testing)."""
    _cache.clear()
