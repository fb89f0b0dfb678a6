"""
Property Contract

Defines what every vCard property type must provide to be marshalled, and the
shared base class concrete types build on.

Marshallers depend only on the VCardProperty protocol. VCardType implements the
parts of the protocol that are identical for every type (parameter copying,
skip handling, replace-on-unmarshal) and leaves the format-specific work to
hooks:

    _marshal_text / _unmarshal_text     plain-text value
    _marshal_xml / _unmarshal_xml       xCard child elements
    _marshal_json / _unmarshal_json     jCard value
    _prepare_parameters                 version-specific parameter tweaks
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, FrozenSet, List, Optional, Protocol, runtime_checkable

from vcardio.contexts.types.exceptions import SkipMeException
from vcardio.contexts.types.jcard_value import JCardValue
from vcardio.contexts.types.logger import _log_debug
from vcardio.contexts.types.sub_types import VCardSubTypes
from vcardio.contexts.types.versions import ALL_VERSIONS, CompatibilityMode, VCardVersion
from vcardio.contexts.types.xcard_element import XCardElement

if TYPE_CHECKING:
    from vcardio.contexts.types.vcard import VCard


@runtime_checkable
class VCardProperty(Protocol):
    """Everything a marshaller may ask of a property."""

    type_name: str
    group: Optional[str]
    sub_types: VCardSubTypes

    def supported_versions(self) -> FrozenSet[VCardVersion]: ...

    def marshal_value(
        self,
        version: VCardVersion,
        warnings: List[str],
        compatibility_mode: CompatibilityMode = CompatibilityMode.RFC,
    ) -> Optional[str]: ...

    def marshal_parameters(
        self,
        version: VCardVersion,
        warnings: List[str],
        compatibility_mode: CompatibilityMode,
        vcard: "VCard",
    ) -> VCardSubTypes: ...

    def marshal_text(
        self,
        version: VCardVersion,
        warnings: List[str],
        compatibility_mode: CompatibilityMode = CompatibilityMode.RFC,
    ) -> str: ...

    def unmarshal_text(
        self,
        value: str,
        version: VCardVersion,
        warnings: List[str],
        compatibility_mode: CompatibilityMode = CompatibilityMode.RFC,
        sub_types: Optional[VCardSubTypes] = None,
    ) -> None: ...

    def marshal_xml(
        self,
        parent: XCardElement,
        warnings: List[str],
        compatibility_mode: CompatibilityMode = CompatibilityMode.RFC,
    ) -> None: ...

    def unmarshal_xml(
        self,
        element: XCardElement,
        warnings: List[str],
        compatibility_mode: CompatibilityMode = CompatibilityMode.RFC,
        sub_types: Optional[VCardSubTypes] = None,
    ) -> None: ...

    def marshal_json(self, version: VCardVersion, warnings: List[str]) -> JCardValue: ...

    def unmarshal_json(
        self,
        value: JCardValue,
        version: VCardVersion,
        warnings: List[str],
        sub_types: Optional[VCardSubTypes] = None,
    ) -> None: ...


class VCardType(ABC):
    """
    Base class for concrete property types.

    Attributes:
        type_name: Property name as written on the wire (e.g., "NICKNAME")
        group: Optional group label clustering properties of one vCard
        sub_types: Parameter table
    """

    SUPPORTED_VERSIONS: FrozenSet[VCardVersion] = ALL_VERSIONS

    def __init__(self, type_name: str, group: Optional[str] = None):
        self.type_name = type_name
        self.group = group
        self.sub_types = VCardSubTypes()

    def supported_versions(self) -> FrozenSet[VCardVersion]:
        return self.SUPPORTED_VERSIONS

    def __repr__(self) -> str:
        group = f"{self.group}." if self.group else ""
        return f"<{self.__class__.__name__} {group}{self.type_name}>"

    # Parameters

    def marshal_parameters(
        self,
        version: VCardVersion,
        warnings: List[str],
        compatibility_mode: CompatibilityMode,
        vcard: "VCard",
    ) -> VCardSubTypes:
        """
        Parameters to write for this property.

        Works on a copy so marshalling never mutates the property.
        """
        copy = self.sub_types.copy()
        self._prepare_parameters(copy, version, warnings, compatibility_mode, vcard)
        return copy

    def _prepare_parameters(
        self,
        copy: VCardSubTypes,
        version: VCardVersion,
        warnings: List[str],
        compatibility_mode: CompatibilityMode,
        vcard: "VCard",
    ) -> None:
        """Hook for version-specific parameter adjustments. No-op by default."""

    # Plain text

    def marshal_text(
        self,
        version: VCardVersion,
        warnings: List[str],
        compatibility_mode: CompatibilityMode = CompatibilityMode.RFC,
    ) -> str:
        """
        Property value in plain-text form.

        Raises:
            SkipMeException: If the property asks not to be marshalled
        """
        return self._marshal_text(version, warnings, compatibility_mode)

    def marshal_value(
        self,
        version: VCardVersion,
        warnings: List[str],
        compatibility_mode: CompatibilityMode = CompatibilityMode.RFC,
    ) -> Optional[str]:
        """Plain-text value, or None if the property asked not to be marshalled."""
        try:
            return self.marshal_text(version, warnings, compatibility_mode)
        except SkipMeException as e:
            _log_debug(f"{self.type_name} skipped: {e.reason}")
            return None

    def unmarshal_text(
        self,
        value: str,
        version: VCardVersion,
        warnings: List[str],
        compatibility_mode: CompatibilityMode = CompatibilityMode.RFC,
        sub_types: Optional[VCardSubTypes] = None,
    ) -> None:
        """Replace this property's value (and parameters, if given) from plain text."""
        if sub_types is not None:
            self.sub_types = sub_types
        self._unmarshal_text(value, version, warnings, compatibility_mode)

    # xCard

    def marshal_xml(
        self,
        parent: XCardElement,
        warnings: List[str],
        compatibility_mode: CompatibilityMode = CompatibilityMode.RFC,
    ) -> None:
        """Append this property's value elements to ``parent``."""
        self._marshal_xml(parent, warnings, compatibility_mode)

    def unmarshal_xml(
        self,
        element: XCardElement,
        warnings: List[str],
        compatibility_mode: CompatibilityMode = CompatibilityMode.RFC,
        sub_types: Optional[VCardSubTypes] = None,
    ) -> None:
        """Replace this property's value (and parameters, if given) from an xCard element."""
        if sub_types is not None:
            self.sub_types = sub_types
        self._unmarshal_xml(element, warnings, compatibility_mode)

    # jCard

    def marshal_json(self, version: VCardVersion, warnings: List[str]) -> JCardValue:
        return self._marshal_json(version, warnings)

    def unmarshal_json(
        self,
        value: JCardValue,
        version: VCardVersion,
        warnings: List[str],
        sub_types: Optional[VCardSubTypes] = None,
    ) -> None:
        """Replace this property's value (and parameters, if given) from a jCard value."""
        if sub_types is not None:
            self.sub_types = sub_types
        self._unmarshal_json(value, version, warnings)

    # Format hooks

    @abstractmethod
    def _marshal_text(
        self, version: VCardVersion, warnings: List[str], compatibility_mode: CompatibilityMode
    ) -> str:
        raise NotImplementedError

    @abstractmethod
    def _unmarshal_text(
        self,
        value: str,
        version: VCardVersion,
        warnings: List[str],
        compatibility_mode: CompatibilityMode,
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def _marshal_xml(
        self, parent: XCardElement, warnings: List[str], compatibility_mode: CompatibilityMode
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def _unmarshal_xml(
        self, element: XCardElement, warnings: List[str], compatibility_mode: CompatibilityMode
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def _marshal_json(self, version: VCardVersion, warnings: List[str]) -> JCardValue:
        raise NotImplementedError

    @abstractmethod
    def _unmarshal_json(self, value: JCardValue, version: VCardVersion, warnings: List[str]) -> None:
        raise NotImplementedError
