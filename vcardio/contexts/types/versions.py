"""vCard versions and consumer compatibility modes."""

from enum import Enum

XCARD_NAMESPACE_PREFIX = "urn:ietf:params:xml:ns:vcard-"


class VCardVersion(Enum):
    """Format revisions a marshaller can target."""

    V2_1 = "2.1"
    V3_0 = "3.0"
    V4_0 = "4.0"

    @property
    def version(self) -> str:
        return self.value

    @property
    def xml_namespace(self) -> str:
        """Namespace URI that qualifies every xCard element for this version."""
        return XCARD_NAMESPACE_PREFIX + self.value

    @classmethod
    def value_of(cls, version: str) -> "VCardVersion":
        """
        Look up a version by its string form.

        Raises:
            ValueError: If the string is not a known version
        """
        for member in cls:
            if member.value == str(version).strip():
                return member
        known = [member.value for member in cls]
        raise ValueError(f"Unknown vCard version '{version}'. Known versions: {known}")

    def __str__(self) -> str:
        return self.value


ALL_VERSIONS = frozenset(VCardVersion)


class CompatibilityMode(Enum):
    """
    Consumer software a vCard is being produced for.

    Passed through to property types untouched so each type can adjust its
    output for a specific address book's quirks.
    """

    RFC = "rfc"
    OUTLOOK = "outlook"
    MAC_ADDRESS_BOOK = "mac_address_book"
    GMAIL = "gmail"
    I_PHONE = "i_phone"
    EVOLUTION = "evolution"
    KDE_ADDRESS_BOOK = "kde_address_book"

    @classmethod
    def value_of(cls, name: str) -> "CompatibilityMode":
        """
        Look up a mode by name, case-insensitively ("rfc", "OUTLOOK", ...).

        Raises:
            ValueError: If the name is not a known mode
        """
        key = str(name).strip().lower()
        for member in cls:
            if member.value == key:
                return member
        known = [member.value for member in cls]
        raise ValueError(f"Unknown compatibility mode '{name}'. Known modes: {known}")
