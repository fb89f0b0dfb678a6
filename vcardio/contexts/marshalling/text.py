"""
Plain-Text vCard Writer

Writes vCards in the classic line-based format:

    BEGIN:VCARD
    VERSION:4.0
    FN:Anna Smith
    NICKNAME;PREF=1:Anna,Ann
    work.ORG:Acme Inc.;Research
    END:VCARD

Lines end with CRLF and are not folded.
"""

from typing import IO, List, Optional

from vcardio.contexts.marshalling.discovery import (
    check_formatted_name,
    check_property,
    group_properties,
    skipped_warning,
)
from vcardio.contexts.marshalling.logger import log_record_result
from vcardio.contexts.marshalling.result import MarshalResult
from vcardio.contexts.marshalling.settings import MarshallingSettings
from vcardio.contexts.types.contract import VCardProperty
from vcardio.contexts.types.sub_types import VCardSubTypes
from vcardio.contexts.types.vcard import VCard
from vcardio.contexts.types.versions import CompatibilityMode, VCardVersion
from vcardio.utils.string_codec import encode_parameter_value

CRLF = "\r\n"
QUOTE_TRIGGERS = (",", ";", ":")


class VCardTextWriter:
    """
    Writes vCards to a text stream, one after another.

    Not safe for concurrent write() calls on one instance.
    """

    def __init__(
        self,
        stream: IO[str],
        target_version: VCardVersion = VCardVersion.V4_0,
        compatibility_mode: CompatibilityMode = CompatibilityMode.RFC,
        add_generator: bool = True,
    ):
        self.stream = stream
        self.target_version = target_version
        self.compatibility_mode = compatibility_mode
        self.add_generator = add_generator
        self._warnings: List[str] = []
        self._count = 0

    @classmethod
    def from_settings(cls, stream: IO[str], settings: MarshallingSettings) -> "VCardTextWriter":
        return cls(
            stream,
            target_version=settings.target_version,
            compatibility_mode=settings.compatibility_mode,
            add_generator=settings.add_generator,
        )

    @property
    def warnings(self) -> List[str]:
        """Warnings from the most recent write() call (a copy)."""
        return list(self._warnings)

    def __len__(self) -> int:
        return self._count

    def write(self, vcard: VCard) -> MarshalResult:
        """
        Write one vCard to the stream.

        Returns:
            MarshalResult with the written text and this call's warnings

        Raises:
            OSError: If the stream cannot be written
        """
        warnings: List[str] = []
        check_formatted_name(vcard, self.target_version, warnings)

        lines = ["BEGIN:VCARD", f"VERSION:{self.target_version.version}"]
        for group_name, props in group_properties(vcard, self.add_generator).items():
            for prop in props:
                line = self._marshal_type(prop, group_name, vcard, warnings)
                if line is not None:
                    lines.append(line)
        lines.append("END:VCARD")

        text = "".join(line + CRLF for line in lines)
        self.stream.write(text)
        self._count += 1
        self._warnings = warnings

        log_record_result(f"vCard #{self._count}", "text", warnings)
        return MarshalResult(element=text, warnings=list(warnings))

    def _marshal_type(
        self, prop: VCardProperty, group_name: Optional[str], vcard: VCard, warnings: List[str]
    ) -> Optional[str]:
        if not check_property(prop, vcard, self.target_version, warnings):
            return None

        parameters = prop.marshal_parameters(
            self.target_version, warnings, self.compatibility_mode, vcard
        )
        value = prop.marshal_value(self.target_version, warnings, self.compatibility_mode)
        if value is None:
            warnings.append(skipped_warning(prop))
            return None

        prefix = f"{group_name}." if group_name else ""
        return f"{prefix}{prop.type_name.upper()}{format_parameters(parameters)}:{value}"


def format_parameters(parameters: VCardSubTypes) -> str:
    """
    Render parameters as ";NAME=v1,v2" segments.

    Values are caret-encoded (line breaks, double quotes and carets), then
    double-quoted if they contain a comma, semicolon or colon.
    """
    segments = []
    for name, values in parameters.items():
        encoded = [encode_parameter_value(value) for value in values]
        rendered = [
            f'"{value}"' if any(char in value for char in QUOTE_TRIGGERS) else value
            for value in encoded
        ]
        segments.append(f";{name}={','.join(rendered)}")
    return "".join(segments)
