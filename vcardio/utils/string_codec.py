"""
vCard String Codec

Escaping and splitting helpers for delimited property values.

Self-contained module with no project dependencies. Property types call these
to turn lists of values into a single delimited string and back.
"""

from typing import Iterable, List

ESCAPE_CHAR = "\\"
NEWLINE_SEQUENCES = ("\r\n", "\r", "\n")


def escape(value: str, separator: str) -> str:
    """
    Backslash-escape a value so it can be embedded in a delimited string.

    Conversions:
    - \\ → \\\\ (backslash, must be first to avoid double-escaping)
    - separator → \\separator
    - newline (CRLF, CR or LF) → \\n

    Args:
        value: Raw value
        separator: Single-character delimiter the value will be joined with

    Returns:
        Escaped value

    Example:
        >>> escape("Smith, John", ",")
        'Smith\\\\, John'
    """
    if not value:
        return ""

    result = value.replace(ESCAPE_CHAR, ESCAPE_CHAR * 2)
    if separator != ESCAPE_CHAR:
        result = result.replace(separator, ESCAPE_CHAR + separator)
    return escape_newlines(result)


def escape_newlines(value: str) -> str:
    """Replace every CRLF, CR or LF with the two characters \\n, leaving all else as-is."""
    for newline in NEWLINE_SEQUENCES:
        value = value.replace(newline, ESCAPE_CHAR + "n")
    return value


def encode_parameter_value(value: str) -> str:
    """
    Caret-encode a parameter value (RFC 6868).

    Conversions:
    - ^ → ^^ (must be first)
    - newline (CRLF, CR or LF) → ^n
    - " → ^'

    Example:
        >>> encode_parameter_value('say "hi"')
        "say ^'hi^'"
    """
    result = value.replace("^", "^^")
    for newline in NEWLINE_SEQUENCES:
        result = result.replace(newline, "^n")
    return result.replace('"', "^'")


def escape_text(value: str) -> str:
    """Escape a free-text value, which may contain both list and structure delimiters."""
    return escape(value, ",").replace(";", ESCAPE_CHAR + ";")


def unescape(value: str) -> str:
    """
    Reverse backslash escaping.

    \\n and \\N become a newline, any other escaped character stands for itself.
    A trailing lone backslash is kept as-is.

    Args:
        value: Escaped value

    Returns:
        Unescaped value
    """
    if ESCAPE_CHAR not in value:
        return value

    chars = []
    escaped = False
    for char in value:
        if escaped:
            chars.append("\n" if char in ("n", "N") else char)
            escaped = False
        elif char == ESCAPE_CHAR:
            escaped = True
        else:
            chars.append(char)

    if escaped:
        chars.append(ESCAPE_CHAR)
    return "".join(chars)


def split_by(value: str, separator: str, unescape_each: bool, trim_each: bool) -> List[str]:
    """
    Split a delimited string, honoring backslash-escaped separators.

    Scans left to right. A backslash escapes the character after it, so "\\,"
    is not a split point while "\\\\," is (escaped backslash, then separator).

    Args:
        value: Delimited string
        separator: Single-character delimiter
        unescape_each: Reverse escape sequences in each field
        trim_each: Strip surrounding whitespace from each field (after unescaping)

    Returns:
        List of fields. An empty string yields a single empty field.

    Example:
        >>> split_by("Anna,Ann", ",", True, True)
        ['Anna', 'Ann']
        >>> split_by("a\\\\,b,c", ",", True, True)
        ['a,b', 'c']
        >>> split_by("", ",", True, True)
        ['']
    """
    fields = []
    start = 0
    escaped = False

    for pos, char in enumerate(value):
        if escaped:
            escaped = False
        elif char == ESCAPE_CHAR:
            escaped = True
        elif char == separator:
            fields.append(value[start:pos])
            start = pos + 1
    fields.append(value[start:])

    if unescape_each:
        fields = [unescape(field) for field in fields]
    if trim_each:
        fields = [field.strip() for field in fields]
    return fields


def join(values: Iterable[str], separator: str) -> str:
    """
    Escape each value and join them with the separator.

    Args:
        values: Raw values
        separator: Single-character delimiter

    Returns:
        Delimited string ("" for no values, never a trailing separator)
    """
    return separator.join(escape(value, separator) for value in values)
