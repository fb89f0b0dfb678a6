"""
Text List Property Types

Properties whose value is an ordered list of strings, written in plain text as
a single delimited value:

    NICKNAME:Anna,Ann
    ORG:Acme Inc.;Research\\, Development

In xCard each value gets its own <text> element; in jCard each value is one
entry of a "text" value.
"""

from typing import List, Optional

from vcardio.contexts.types.contract import VCardType
from vcardio.contexts.types.jcard_value import JCardValue
from vcardio.contexts.types.versions import CompatibilityMode, VCardVersion
from vcardio.contexts.types.xcard_element import XCardElement
from vcardio.utils.string_codec import join, split_by

XML_VALUE_ELEMENT = "text"


class TextListType(VCardType):
    """
    A property holding an ordered list of text values.

    Order is significant and preserved; duplicates are allowed. Every unmarshal
    call replaces the list rather than adding to it.

    Attributes:
        values: The values (mutable; may be edited directly)
        separator: Delimiter used in plain-text form (e.g., "," or ";")

    Example:
        >>> nickname = TextListType("NICKNAME", ",")
        >>> nickname.add_value("Anna")
        >>> nickname.add_value("Ann")
        >>> nickname.marshal_text(VCardVersion.V4_0, [])
        'Anna,Ann'
    """

    def __init__(
        self,
        type_name: str,
        separator: str,
        values: Optional[List[str]] = None,
        group: Optional[str] = None,
    ):
        super().__init__(type_name, group)
        self.separator = separator
        self.values: List[str] = list(values) if values else []

    def add_value(self, value: str) -> None:
        self.values.append(value)

    def remove_value(self, value: str) -> None:
        """Remove the first occurrence of ``value``. Absent values are ignored."""
        if value in self.values:
            self.values.remove(value)

    def _marshal_text(
        self, version: VCardVersion, warnings: List[str], compatibility_mode: CompatibilityMode
    ) -> str:
        return join(self.values, self.separator)

    def _unmarshal_text(
        self,
        value: str,
        version: VCardVersion,
        warnings: List[str],
        compatibility_mode: CompatibilityMode,
    ) -> None:
        self.values = split_by(value, self.separator, unescape_each=True, trim_each=True)

    def _marshal_xml(
        self, parent: XCardElement, warnings: List[str], compatibility_mode: CompatibilityMode
    ) -> None:
        parent.append(XML_VALUE_ELEMENT, self.values)

    def _unmarshal_xml(
        self, element: XCardElement, warnings: List[str], compatibility_mode: CompatibilityMode
    ) -> None:
        self.values = element.get_all(XML_VALUE_ELEMENT)

    def _marshal_json(self, version: VCardVersion, warnings: List[str]) -> JCardValue:
        return JCardValue.text(*self.values)

    def _unmarshal_json(self, value: JCardValue, version: VCardVersion, warnings: List[str]) -> None:
        # Structured groupings keep only their first component; empty ones are dropped
        self.values = [grouping[0] for grouping in value.get_values_as_strings() if grouping]


class NicknameType(TextListType):
    """NICKNAME: alternate names for the contact."""

    def __init__(self, values: Optional[List[str]] = None, group: Optional[str] = None):
        super().__init__("NICKNAME", ",", values, group)


class CategoriesType(TextListType):
    """CATEGORIES: tags the contact belongs to."""

    def __init__(self, values: Optional[List[str]] = None, group: Optional[str] = None):
        super().__init__("CATEGORIES", ",", values, group)


class OrganizationType(TextListType):
    """ORG: organization name followed by its units, most general first."""

    def __init__(self, values: Optional[List[str]] = None, group: Optional[str] = None):
        super().__init__("ORG", ";", values, group)
