"""Custom exceptions for the types context."""

from typing import Optional


class SkipMeException(Exception):
    """
    Raised by a property type to ask not to be marshalled.

    Never escapes the types context: VCardType.marshal_value() converts it into
    a None value, which marshallers turn into a warning.

    Attributes:
        reason: Why the property asked to be skipped
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class InvalidVCardDataError(ValueError):
    """
    Exception raised when a vCard description (dict or YAML) is malformed.

    Attributes:
        message: Error description
        field_name: The offending key, if known
    """

    def __init__(self, message: str, field_name: Optional[str] = None):
        self.message = message
        self.field_name = field_name

        parts = [message]
        if field_name:
            parts.append(f"Field: {field_name}")

        super().__init__("\n".join(parts))
