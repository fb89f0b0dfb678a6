"""
Types context logger.

Provides logging interface for the types context with automatic [types] prefix.
All types modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[types]"


def _log_debug(message: str) -> None:
    """Log debug message with [types] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
