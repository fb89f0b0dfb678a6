"""
Types Context

Responsibilities:
- Defines the property contract every vCard property type implements
- Provides the concrete property types (text, text list, kind, member, extended)
- Holds parameters (sub types) and the xCard/jCard value carriers
- Owns the VCard container and building VCards from YAML

Owns: Property model and per-property marshalling across formats
Never: Assembles whole documents (that belongs to the marshalling context)
"""

from vcardio.contexts.types.builder import load_vcards, vcard_from_dict
from vcardio.contexts.types.contract import VCardProperty, VCardType
from vcardio.contexts.types.exceptions import InvalidVCardDataError, SkipMeException
from vcardio.contexts.types.jcard_value import JCardValue
from vcardio.contexts.types.sub_types import VCardSubTypes
from vcardio.contexts.types.text_list_types import (
    CategoriesType,
    NicknameType,
    OrganizationType,
    TextListType,
)
from vcardio.contexts.types.text_types import (
    FormattedNameType,
    KindType,
    MailerType,
    MemberType,
    RawType,
    TextType,
)
from vcardio.contexts.types.vcard import VCard
from vcardio.contexts.types.versions import CompatibilityMode, VCardVersion
from vcardio.contexts.types.xcard_element import XCardElement

__all__ = [
    # Contract
    "VCardProperty",
    "VCardType",
    "SkipMeException",
    # Versions and parameters
    "VCardVersion",
    "CompatibilityMode",
    "VCardSubTypes",
    # Value carriers
    "JCardValue",
    "XCardElement",
    # Property types
    "TextType",
    "TextListType",
    "FormattedNameType",
    "KindType",
    "MailerType",
    "MemberType",
    "RawType",
    "NicknameType",
    "CategoriesType",
    "OrganizationType",
    # Container and building
    "VCard",
    "vcard_from_dict",
    "load_vcards",
    "InvalidVCardDataError",
]
