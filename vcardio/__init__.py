"""
vcardio - vCard property marshalling

Converts in-memory vCard contact records into their wire representations and,
property by property, back again.

Architecture:
- Types Context: property model (versions, parameters, property types, VCard container)
- Marshalling Context: document marshallers (xCard XML, jCard JSON, plain text)
"""

__version__ = "0.1.0"
__url__ = "https://github.com/vcardio/vcardio"
