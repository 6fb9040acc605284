"""
Shared diagnostic helpers.
"""

import logging
import sys

from .exceptions import InternalError

logger = logging.getLogger(__name__)

_PRERELEASE_MARKERS = ("alpha", "dev", "rc")


def is_prerelease(version: str | None = None) -> bool:
    """
    Check whether failures should be loud.

    True for pre-release versions and when Python runs in development mode
    (`python -X dev`).
    """
    if version is None:
        from . import __version__ as version

    if sys.flags.dev_mode:
        return True
    return any(marker in version for marker in _PRERELEASE_MARKERS)


def error_or_raise(message: str, *, version: str | None = None) -> None:
    """
    Report a condition that should never happen.

    Raises InternalError in pre-release builds so the defect is caught early;
    in releases the message is logged at ERROR level and execution goes on.
    """
    if is_prerelease(version):
        raise InternalError(message)
    logger.error(message)
