"""Constants and configuration for the undoline history engine."""

class HistoryConstants:
    """Central configuration constants for history and executors."""

    # History bounds
    DEFAULT_MAX_HISTORY_LENGTH = 100  # Entries retained before the oldest is evicted
    EMPTY_CURSOR = -1  # Cursor value when no entry is current

    # Error normalization
    FALLBACK_ERROR_MESSAGE = "An error occurred"

    # Settings file
    SETTINGS_APP_NAME = "undoline"
    SETTINGS_FILENAME = "settings.json"
    SETTINGS_TEMP_SUFFIX = ".tmp"  # Suffix for temporary settings files
