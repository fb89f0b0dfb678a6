"""
Single-Value Property Types

Properties whose value is one string: free text (FN, MAILER), a classification
(KIND), a URI (MEMBER), or an extended property kept verbatim (X-*).
"""

from typing import List, Optional

from vcardio.contexts.types.contract import VCardType
from vcardio.contexts.types.exceptions import SkipMeException
from vcardio.contexts.types.jcard_value import JCardValue
from vcardio.contexts.types.versions import CompatibilityMode, VCardVersion
from vcardio.contexts.types.xcard_element import XCardElement
from vcardio.utils.string_codec import escape_newlines, escape_text, unescape


class TextType(VCardType):
    """
    A property holding a single text value.

    A property without a value asks not to be marshalled.

    Attributes:
        value: The text value, or None
    """

    XML_VALUE_ELEMENT = "text"
    JSON_DATA_TYPE = "text"

    def __init__(self, type_name: str, value: Optional[str] = None, group: Optional[str] = None):
        super().__init__(type_name, group)
        self.value = value

    def _marshal_text(
        self, version: VCardVersion, warnings: List[str], compatibility_mode: CompatibilityMode
    ) -> str:
        if self.value is None:
            raise SkipMeException(f"{self.type_name} has no value")
        return escape_text(self.value)

    def _unmarshal_text(
        self,
        value: str,
        version: VCardVersion,
        warnings: List[str],
        compatibility_mode: CompatibilityMode,
    ) -> None:
        self.value = unescape(value)

    def _marshal_xml(
        self, parent: XCardElement, warnings: List[str], compatibility_mode: CompatibilityMode
    ) -> None:
        if self.value is not None:
            parent.append(self.XML_VALUE_ELEMENT, [self.value])

    def _unmarshal_xml(
        self, element: XCardElement, warnings: List[str], compatibility_mode: CompatibilityMode
    ) -> None:
        self.value = element.first(self.XML_VALUE_ELEMENT)

    def _marshal_json(self, version: VCardVersion, warnings: List[str]) -> JCardValue:
        return JCardValue(self.JSON_DATA_TYPE, [[self.value or ""]])

    def _unmarshal_json(self, value: JCardValue, version: VCardVersion, warnings: List[str]) -> None:
        groupings = [grouping for grouping in value.get_values_as_strings() if grouping]
        self.value = groupings[0][0] if groupings else None


class FormattedNameType(TextType):
    """FN: the display name. Required by every vCard version."""

    def __init__(self, value: Optional[str] = None, group: Optional[str] = None):
        super().__init__("FN", value, group)


class MailerType(TextType):
    """MAILER: the contact's email software. Dropped from vCard 4.0."""

    SUPPORTED_VERSIONS = frozenset({VCardVersion.V2_1, VCardVersion.V3_0})

    def __init__(self, value: Optional[str] = None, group: Optional[str] = None):
        super().__init__("MAILER", value, group)


class KindType(TextType):
    """
    KIND: what sort of entity the vCard describes (vCard 4.0).

    A vCard whose KIND is "group" may list its members with MEMBER properties.
    """

    SUPPORTED_VERSIONS = frozenset({VCardVersion.V4_0})

    INDIVIDUAL = "individual"
    GROUP = "group"
    ORG = "org"
    LOCATION = "location"

    def __init__(self, value: Optional[str] = None, group: Optional[str] = None):
        super().__init__("KIND", value, group)

    @classmethod
    def individual(cls) -> "KindType":
        return cls(cls.INDIVIDUAL)

    @classmethod
    def group_kind(cls) -> "KindType":
        return cls(cls.GROUP)

    @classmethod
    def org(cls) -> "KindType":
        return cls(cls.ORG)

    @classmethod
    def location(cls) -> "KindType":
        return cls(cls.LOCATION)

    def _is(self, kind: str) -> bool:
        return self.value is not None and self.value.strip().lower() == kind

    def is_individual(self) -> bool:
        return self._is(self.INDIVIDUAL)

    def is_group(self) -> bool:
        return self._is(self.GROUP)

    def is_org(self) -> bool:
        return self._is(self.ORG)

    def is_location(self) -> bool:
        return self._is(self.LOCATION)


class MemberType(TextType):
    """
    MEMBER: a URI identifying one member of a group vCard (vCard 4.0).

    Only meaningful when the vCard's KIND is "group".
    """

    SUPPORTED_VERSIONS = frozenset({VCardVersion.V4_0})
    XML_VALUE_ELEMENT = "uri"
    JSON_DATA_TYPE = "uri"

    def __init__(self, uri: Optional[str] = None, group: Optional[str] = None):
        super().__init__("MEMBER", uri, group)

    @property
    def uri(self) -> Optional[str]:
        return self.value

    @uri.setter
    def uri(self, uri: Optional[str]) -> None:
        self.value = uri

    def _marshal_text(
        self, version: VCardVersion, warnings: List[str], compatibility_mode: CompatibilityMode
    ) -> str:
        # URIs are written as-is; commas and semicolons are legal in them
        if self.value is None:
            raise SkipMeException("MEMBER has no URI")
        return escape_newlines(self.value)

    def _unmarshal_text(
        self,
        value: str,
        version: VCardVersion,
        warnings: List[str],
        compatibility_mode: CompatibilityMode,
    ) -> None:
        self.value = value.strip()


class RawType(TextType):
    """
    An extended (X-) or otherwise unrecognized property.

    The value is written and read verbatim, without escaping, because its
    structure is unknown. Only line breaks are written as \\n so the property
    stays on one line.
    """

    XML_VALUE_ELEMENT = "unknown"
    JSON_DATA_TYPE = "unknown"

    def __init__(self, type_name: str, value: Optional[str] = None, group: Optional[str] = None):
        super().__init__(type_name.upper(), value, group)

    def _marshal_text(
        self, version: VCardVersion, warnings: List[str], compatibility_mode: CompatibilityMode
    ) -> str:
        if self.value is None:
            raise SkipMeException(f"{self.type_name} has no value")
        return escape_newlines(self.value)

    def _unmarshal_text(
        self,
        value: str,
        version: VCardVersion,
        warnings: List[str],
        compatibility_mode: CompatibilityMode,
    ) -> None:
        self.value = value
