"""
xCard Marshaller

Builds an xCard (RFC 6351) XML document from vCards:

    <vcards xmlns="urn:ietf:params:xml:ns:vcard-4.0">
      <vcard>
        <fn><text>Anna Smith</text></fn>
        <nickname>
          <parameters><pref><integer>1</integer></pref></parameters>
          <text>Anna,Ann</text>
        </nickname>
        <group name="work">
          <org><text>Acme Inc.;Research</text></org>
        </group>
      </vcard>
    </vcards>

Each add_vcard() call appends one <vcard> and returns that call's warnings.
Content problems never raise; only writing the document can fail.
"""

import copy
import io
import re
import xml.etree.ElementTree as ET
from types import MappingProxyType
from typing import IO, List, Mapping, Optional

from vcardio.contexts.marshalling.discovery import (
    check_formatted_name,
    check_property,
    group_properties,
    skipped_warning,
)
from vcardio.contexts.marshalling.logger import _log_debug, log_record_result
from vcardio.contexts.marshalling.result import MarshalResult
from vcardio.contexts.marshalling.settings import MarshallingSettings
from vcardio.contexts.types.contract import VCardProperty
from vcardio.contexts.types.sub_types import VALUE, VCardSubTypes
from vcardio.contexts.types.vcard import VCard
from vcardio.contexts.types.versions import CompatibilityMode, VCardVersion
from vcardio.contexts.types.xcard_element import qualified_name

# Element holding each value of a parameter, by lower-cased parameter name
PARAMETER_CHILD_ELEMENT_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "altid": "text",
        "calscale": "text",
        "geo": "uri",
        "label": "text",
        "language": "language-tag",
        "mediatype": "text",
        "pid": "text",
        "pref": "integer",
        "sort-as": "text",
        "type": "text",
        "tz": "uri",
    }
)
UNKNOWN_PARAMETER_ELEMENT = "unknown"
VALUE_ELEMENT = "text"

# Characters outside the XML 1.0 Char production
XML_ILLEGAL_CHARS = re.compile("[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


class XCardMarshaller:
    """
    Accumulates vCards into a single xCard document.

    Not safe for concurrent add_vcard() calls on one instance.

    Attributes:
        target_version: Version every property is checked against; also picks
                        the XML namespace
        compatibility_mode: Passed through to property types
        add_generator: Append an X-GENERATOR property to every vCard
    """

    def __init__(
        self,
        target_version: VCardVersion = VCardVersion.V4_0,
        compatibility_mode: CompatibilityMode = CompatibilityMode.RFC,
        add_generator: bool = True,
    ):
        self.target_version = target_version
        self.compatibility_mode = compatibility_mode
        self.add_generator = add_generator
        self._warnings: List[str] = []
        self._root = self._create_element("vcards")

    @classmethod
    def from_settings(cls, settings: MarshallingSettings) -> "XCardMarshaller":
        return cls(
            target_version=settings.target_version,
            compatibility_mode=settings.compatibility_mode,
            add_generator=settings.add_generator,
        )

    @property
    def warnings(self) -> List[str]:
        """Warnings from the most recent add_vcard() call (a copy)."""
        return list(self._warnings)

    @property
    def document(self) -> ET.ElementTree:
        return ET.ElementTree(self._root)

    @property
    def namespace(self) -> str:
        return self.target_version.xml_namespace

    def __len__(self) -> int:
        return len(self._root)

    def add_vcard(self, vcard: VCard) -> MarshalResult:
        """
        Marshal a vCard and append it to the document.

        Properties in a named group are wrapped in <group name="...">. A named
        group whose properties were all dropped gets no wrapper at all.

        Args:
            vcard: vCard to add

        Returns:
            MarshalResult with the new <vcard> element and this call's warnings
        """
        warnings: List[str] = []
        check_formatted_name(vcard, self.target_version, warnings)

        vcard_element = self._create_element("vcard")
        for group_name, props in group_properties(vcard, self.add_generator).items():
            type_elements = [
                element
                for element in (self._marshal_type(prop, vcard, warnings) for prop in props)
                if element is not None
            ]
            if not type_elements:
                continue

            if group_name is None:
                parent = vcard_element
            else:
                parent = self._create_element("group")
                parent.set("name", group_name)
                vcard_element.append(parent)
            parent.extend(type_elements)

        self._root.append(vcard_element)
        self._warnings = warnings

        log_record_result(f"vCard #{len(self)}", "xCard", warnings)
        return MarshalResult(element=vcard_element, warnings=list(warnings))

    def _marshal_type(
        self, prop: VCardProperty, vcard: VCard, warnings: List[str]
    ) -> Optional[ET.Element]:
        """
        Marshal one property into its element, or None to leave it out.

        Nothing is emitted for a rejected or skipped property, not even its
        parameters.
        """
        if not check_property(prop, vcard, self.target_version, warnings):
            return None

        parameters = prop.marshal_parameters(
            self.target_version, warnings, self.compatibility_mode, vcard
        )
        parameters_element = self._marshal_parameters(parameters)

        value = prop.marshal_value(self.target_version, warnings, self.compatibility_mode)
        if value is None:
            warnings.append(skipped_warning(prop))
            return None

        type_element = self._create_element(prop.type_name.lower())
        if parameters_element is not None:
            type_element.append(parameters_element)
        value_element = ET.SubElement(type_element, self._qname(VALUE_ELEMENT))
        value_element.text = value
        if _strip_illegal_chars(type_element):
            warnings.append(
                f"{prop.type_name} type contains characters that are not allowed in XML.  "
                "They were removed."
            )
        return type_element

    def _marshal_parameters(self, parameters: VCardSubTypes) -> Optional[ET.Element]:
        """Build the <parameters> element, or None if there is nothing to write."""
        names = [name for name in parameters.names() if name != VALUE]
        if not names:
            return None

        parameters_element = self._create_element("parameters")
        for name in names:
            param_name = name.lower()
            value_element_name = PARAMETER_CHILD_ELEMENT_NAMES.get(
                param_name, UNKNOWN_PARAMETER_ELEMENT
            )
            parameter_element = ET.SubElement(parameters_element, self._qname(param_name))
            for param_value in parameters.get(name):
                value_element = ET.SubElement(parameter_element, self._qname(value_element_name))
                value_element.text = param_value
        return parameters_element

    def _qname(self, name: str) -> str:
        return qualified_name(name, self.target_version)

    def _create_element(self, name: str) -> ET.Element:
        return ET.Element(self._qname(name))

    # Output

    def write(self, stream: IO, indent: bool = False) -> None:
        """
        Serialize the document to a stream.

        Text streams receive a str document; binary streams receive UTF-8 with
        an XML declaration.

        Args:
            stream: Writable text or binary file-like object
            indent: Pretty-print (applied to a copy; the document is unchanged)

        Raises:
            OSError: If the stream cannot be written
        """
        root = self._root
        if indent:
            root = copy.deepcopy(root)
            ET.indent(root)

        ET.register_namespace("", self.namespace)
        is_text = isinstance(stream, io.TextIOBase)
        ET.ElementTree(root).write(
            stream,
            encoding="unicode" if is_text else "utf-8",
            xml_declaration=not is_text,
        )
        _log_debug(f"Serialized xCard document with {len(self)} vCard(s)")

    def to_string(self, indent: bool = False) -> str:
        buffer = io.StringIO()
        self.write(buffer, indent=indent)
        return buffer.getvalue()


def _strip_illegal_chars(element: ET.Element) -> bool:
    """Remove characters XML cannot represent from every text node. True if any were removed."""
    removed = False
    for node in element.iter():
        if node.text:
            cleaned = XML_ILLEGAL_CHARS.sub("", node.text)
            if cleaned != node.text:
                node.text = cleaned
                removed = True
    return removed
