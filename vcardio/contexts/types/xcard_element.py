"""
xCard Element Wrapper

Thin wrapper around an ElementTree element that keeps every child it creates
in the version-specific xCard namespace.
"""

import xml.etree.ElementTree as ET
from typing import Iterable, List, Optional

from vcardio.contexts.types.versions import VCardVersion


def qualified_name(name: str, version: VCardVersion) -> str:
    """ElementTree tag for an xCard element: {namespace}name."""
    return f"{{{version.xml_namespace}}}{name}"


def local_name(tag: str) -> str:
    """Strip the {namespace} part from an ElementTree tag."""
    return tag.rsplit("}", 1)[-1]


class XCardElement:
    """
    An xCard element bound to a vCard version.

    Property types marshal their values into one of these and read them back
    out of one, without knowing about namespaces.

    Attributes:
        element: The wrapped ElementTree element
        version: vCard version whose namespace child elements are created in
    """

    def __init__(self, element: ET.Element, version: VCardVersion = VCardVersion.V4_0):
        self.element = element
        self.version = version

    @classmethod
    def create(cls, name: str, version: VCardVersion = VCardVersion.V4_0) -> "XCardElement":
        """Create a new, parentless element named ``name``."""
        return cls(ET.Element(qualified_name(name, version)), version)

    @property
    def name(self) -> str:
        return local_name(self.element.tag)

    def append(self, name: str, values: Iterable[str]) -> List[ET.Element]:
        """
        Add one child element per value.

        Values are stored as-is; XML escaping is left to the serializer.

        Args:
            name: Local name of the child elements (e.g., "text")
            values: Text content, one child per value

        Returns:
            The created child elements
        """
        children = []
        for value in values:
            child = ET.SubElement(self.element, qualified_name(name, self.version))
            child.text = value
            children.append(child)
        return children

    def get_all(self, name: str) -> List[str]:
        """
        Text content of every child with the given local name, in document order.

        Children in any namespace match, so elements parsed from documents of a
        different vCard version are still found. Empty elements yield "".
        """
        return [child.text or "" for child in self.element if local_name(child.tag) == name]

    def first(self, name: str) -> Optional[str]:
        values = self.get_all(name)
        return values[0] if values else None
