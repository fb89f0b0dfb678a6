"""
Marshalling Context

Responsibilities:
- Assembles whole documents from vCards (xCard XML, jCard JSON, plain text)
- Discovers a vCard's properties and buckets them by group
- Gates properties by target version and structural rules (MEMBER needs KIND=group)
- Collects per-vCard warnings for recoverable content problems
- Loads marshaller settings

Owns: Document assembly, version gating, warnings
Never: Knows how an individual property type encodes its value
"""

from vcardio.contexts.marshalling.jcard import JCardMarshaller
from vcardio.contexts.marshalling.result import MarshalResult
from vcardio.contexts.marshalling.settings import (
    MarshallingSettings,
    load_marshalling_settings,
)
from vcardio.contexts.marshalling.text import VCardTextWriter
from vcardio.contexts.marshalling.xcard import (
    PARAMETER_CHILD_ELEMENT_NAMES,
    XCardMarshaller,
)

__all__ = [
    # Document marshallers
    "XCardMarshaller",
    "JCardMarshaller",
    "VCardTextWriter",
    "MarshalResult",
    "PARAMETER_CHILD_ELEMENT_NAMES",
    # Settings
    "MarshallingSettings",
    "load_marshalling_settings",
]
