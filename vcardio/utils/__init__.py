"""
Shared utilities for vcardio.

Common functionality used across contexts:
- Escaping and splitting of delimited values
- Logger configuration
"""

from vcardio.utils.string_codec import (
    encode_parameter_value,
    escape,
    escape_newlines,
    join,
    split_by,
    unescape,
)

__all__ = ["encode_parameter_value", "escape", "escape_newlines", "join", "split_by", "unescape"]
