"""
jCard Marshaller

Builds jCard (RFC 7095) JSON from vCards. Each vCard becomes:

    ["vcard", [
        ["version", {}, "text", "4.0"],
        ["fn", {}, "text", "Anna Smith"],
        ["nickname", {"pref": "1"}, "text", "Anna", "Ann"],
        ["org", {"group": "work"}, "text", "Acme Inc.", "Research"]
    ]]

Property gating and warnings are the same as for xCard.
"""

import json
from typing import IO, Any, Dict, List, Optional

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
from vcardio.contexts.types.sub_types import VALUE
from vcardio.contexts.types.vcard import VCard
from vcardio.contexts.types.versions import CompatibilityMode, VCardVersion


class JCardMarshaller:
    """
    Accumulates vCards into a jCard document (a JSON array of vCards).

    Not safe for concurrent add_vcard() calls on one instance.
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
        self._records: List[list] = []

    @classmethod
    def from_settings(cls, settings: MarshallingSettings) -> "JCardMarshaller":
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
    def document(self) -> List[list]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def add_vcard(self, vcard: VCard) -> MarshalResult:
        """
        Marshal a vCard and append it to the document.

        Returns:
            MarshalResult with the jCard array and this call's warnings
        """
        warnings: List[str] = []
        check_formatted_name(vcard, self.target_version, warnings)

        properties: List[list] = [["version", {}, "text", self.target_version.version]]
        for group_name, props in group_properties(vcard, self.add_generator).items():
            for prop in props:
                entry = self._marshal_type(prop, group_name, vcard, warnings)
                if entry is not None:
                    properties.append(entry)

        record = ["vcard", properties]
        self._records.append(record)
        self._warnings = warnings

        log_record_result(f"vCard #{len(self)}", "jCard", warnings)
        return MarshalResult(element=record, warnings=list(warnings))

    def _marshal_type(
        self, prop: VCardProperty, group_name: Optional[str], vcard: VCard, warnings: List[str]
    ) -> Optional[list]:
        if not check_property(prop, vcard, self.target_version, warnings):
            return None

        parameters = prop.marshal_parameters(
            self.target_version, warnings, self.compatibility_mode, vcard
        )
        # Skip check only; the jCard value below reports its own warnings
        if prop.marshal_value(self.target_version, [], self.compatibility_mode) is None:
            warnings.append(skipped_warning(prop))
            return None

        params: Dict[str, Any] = {}
        if group_name is not None:
            params["group"] = group_name
        for name, values in parameters.items():
            if name == VALUE:
                continue
            params[name.lower()] = values[0] if len(values) == 1 else values

        value = prop.marshal_json(self.target_version, warnings)
        # jCard requires at least one value after the data type
        trailing = value.to_json() or [""]
        return [prop.type_name.lower(), params, value.data_type, *trailing]

    # Output

    def write(self, stream: IO[str], indent: Optional[int] = None) -> None:
        """
        Serialize the document as JSON to a text stream.

        Raises:
            OSError: If the stream cannot be written
        """
        json.dump(self._records, stream, indent=indent, ensure_ascii=False)
        _log_debug(f"Serialized jCard document with {len(self)} vCard(s)")

    def to_string(self, indent: Optional[int] = None) -> str:
        return json.dumps(self._records, indent=indent, ensure_ascii=False)
