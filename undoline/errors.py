"""Exceptions raised by undoline and normalization of command failures."""

from .constants import HistoryConstants


class HistoryError(Exception):
    """Base class for errors raised by undoline itself."""


class HistoryConfigError(HistoryError, ValueError):
    """Raised at construction time when options are invalid."""


class UnknownEventError(HistoryError, KeyError):
    """Raised when subscribing to an event name that does not exist."""


class CommandError(HistoryError):
    """Reported in place of a failure value that is not an ``Exception``."""


def get_error_with_fallback(error: object) -> Exception:
    """Return ``error`` if it is an exception, otherwise a fallback error.

    Args:
        error: Whatever a command raised or reported.

    Returns:
        The same exception object, or a ``CommandError`` carrying the
        generic fallback message.
    """
    if isinstance(error, Exception):
        return error
    return CommandError(HistoryConstants.FALLBACK_ERROR_MESSAGE)
