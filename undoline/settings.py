"""User settings for history executors.

Settings are read from a JSON file in the user's config directory. Values
that are missing or invalid fall back to the defaults, with a warning.
History itself is never written here; only the knobs that shape it.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import HistoryConstants
from .history import HistoryManagerOptions

logger = logging.getLogger(__name__)


@dataclass
class HistorySettings:
    """Settings applied when building executors."""
    max_history_length: int = HistoryConstants.DEFAULT_MAX_HISTORY_LENGTH
    record_failed: bool = False

    def to_options(self, initial_state: Any = None, store: Any = None) -> HistoryManagerOptions:
        """Build manager options from these settings."""
        return HistoryManagerOptions(
            max_history_length=self.max_history_length,
            initial_state=initial_state,
            store=store,
        )


def validate_setting(key: str, value: Any) -> bool:
    """Check a single setting value.

    Args:
        key: Setting name.
        value: Value read from the settings file.

    Returns:
        True if the value can be used. Unknown keys are accepted so older
        versions can read newer files.
    """
    if key == 'max_history_length':
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return value > 0
    if key == 'record_failed':
        return isinstance(value, bool)
    return True


class SettingsStore:
    """Loads and saves ``HistorySettings`` as JSON."""

    def __init__(self, config_dir: Optional[Path] = None):
        if config_dir is None:
            config_dir = Path(platformdirs.user_config_dir(HistoryConstants.SETTINGS_APP_NAME))
        self._config_dir = config_dir
        self._settings_file = self._config_dir / HistoryConstants.SETTINGS_FILENAME

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _read_raw(self) -> Dict[str, Any]:
        if not self._settings_file.exists():
            return {}
        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            return {}
        return data

    def load(self) -> HistorySettings:
        """Load settings, replacing invalid values with defaults."""
        settings = HistorySettings()
        for key, value in self._read_raw().items():
            if not hasattr(settings, key):
                continue
            if not validate_setting(key, value):
                logger.warning(f"Ignoring invalid setting {key}={value!r}")
                continue
            setattr(settings, key, value)
        return settings

    def save(self, settings: HistorySettings) -> bool:
        """Save settings atomically (temp file + rename).

        Returns:
            True if the file was written.
        """
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create config directory {self._config_dir}: {e}")
            return False

        temp_file = self._settings_file.with_suffix(HistoryConstants.SETTINGS_TEMP_SUFFIX)
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(asdict(settings), f, indent=2)
            temp_file.replace(self._settings_file)
            return True
        except OSError as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                pass
            return False


def load_settings(config_dir: Optional[Path] = None) -> HistorySettings:
    """Load settings from ``config_dir`` (default: the user config directory)."""
    return SettingsStore(config_dir).load()
