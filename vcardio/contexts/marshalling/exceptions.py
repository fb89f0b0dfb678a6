"""Custom exceptions for marshalling context."""

from pathlib import Path
from typing import Optional


class InvalidSettingsError(ValueError):
    """
    Exception raised when marshalling settings contain unusable values.

    Attributes:
        message: Error description
        key: The offending settings key
        config_path: Settings file the value came from, if any
    """

    def __init__(self, message: str, key: Optional[str] = None, config_path: Optional[Path] = None):
        self.message = message
        self.key = key
        self.config_path = config_path

        parts = [message]
        if key:
            parts.append(f"Key: {key}")
        if config_path:
            parts.append(f"Config: {config_path}")

        super().__init__("\n".join(parts))
