"""
vCard Container

Holds the properties of one contact record and exposes them to marshallers
through an explicit, ordered listing.
"""

from typing import Dict, List, Optional, Tuple, Type, TypeVar

from vcardio.contexts.types.contract import VCardProperty
from vcardio.contexts.types.text_types import FormattedNameType, KindType, RawType

T = TypeVar("T")


class VCard:
    """
    One contact record: an ordered collection of properties.

    Standard properties are kept in insertion order. Extended properties
    (X-*) are keyed by their upper-cased name and always listed after the
    standard ones.

    Example:
        >>> vcard = VCard()
        >>> vcard.formatted_name = FormattedNameType("Anna Smith")
        >>> vcard.add_type(NicknameType(["Anna", "Ann"]))
        >>> [prop.type_name for _, prop in vcard.properties()]
        ['FN', 'NICKNAME']
    """

    def __init__(self):
        self._types: List[VCardProperty] = []
        self._extended: Dict[str, List[RawType]] = {}

    # Standard properties

    def add_type(self, prop: VCardProperty) -> VCardProperty:
        self._types.append(prop)
        return prop

    def remove_type(self, prop: VCardProperty) -> bool:
        """Remove a property instance. Returns False if it was not attached."""
        for index, existing in enumerate(self._types):
            if existing is prop:
                del self._types[index]
                return True
        return False

    def get_types(self, cls: Optional[Type[T]] = None) -> List[T]:
        """All standard properties, or only those that are instances of ``cls``."""
        if cls is None:
            return list(self._types)
        return [prop for prop in self._types if isinstance(prop, cls)]

    def _get_single(self, cls: Type[T]) -> Optional[T]:
        matches = self.get_types(cls)
        return matches[0] if matches else None

    def _set_single(self, cls: type, prop: Optional[VCardProperty]) -> None:
        self._types = [existing for existing in self._types if not isinstance(existing, cls)]
        if prop is not None:
            self._types.append(prop)

    @property
    def formatted_name(self) -> Optional[FormattedNameType]:
        return self._get_single(FormattedNameType)

    @formatted_name.setter
    def formatted_name(self, prop: Optional[FormattedNameType]) -> None:
        self._set_single(FormattedNameType, prop)

    @property
    def kind(self) -> Optional[KindType]:
        return self._get_single(KindType)

    @kind.setter
    def kind(self, prop: Optional[KindType]) -> None:
        self._set_single(KindType, prop)

    # Extended properties

    def add_extended_type(
        self, name: str, value: Optional[str], group: Optional[str] = None
    ) -> RawType:
        prop = RawType(name, value, group)
        self._extended.setdefault(prop.type_name, []).append(prop)
        return prop

    def get_extended_types(self, name: Optional[str] = None) -> List[RawType]:
        """Extended properties with the given name (case-insensitive), or all of them."""
        if name is not None:
            return list(self._extended.get(name.upper(), []))
        return [prop for props in self._extended.values() for prop in props]

    def remove_extended_types(self, name: str) -> List[RawType]:
        return self._extended.pop(name.upper(), [])

    # Discovery

    def properties(self) -> List[Tuple[Optional[str], VCardProperty]]:
        """
        Every attached property as (group, property) pairs.

        Standard properties come first in insertion order, then extended ones.
        """
        all_props = self._types + self.get_extended_types()
        return [(prop.group, prop) for prop in all_props]

    def __len__(self) -> int:
        return len(self._types) + len(self.get_extended_types())

    def __repr__(self) -> str:
        fn = self.formatted_name
        name = fn.value if fn else None
        return f"<VCard fn={name!r} properties={len(self)}>"
