"""
Property Discovery and Gating

Shared by every document marshaller: collects a vCard's properties into
group buckets and decides which of them may be written for a target version.
"""

from typing import Dict, List, Optional

from vcardio import __url__, __version__
from vcardio.contexts.types.contract import VCardProperty
from vcardio.contexts.types.text_types import TextType
from vcardio.contexts.types.vcard import VCard
from vcardio.contexts.types.versions import VCardVersion

GENERATOR_TYPE_NAME = "X-GENERATOR"
MEMBER_TYPE_NAME = "MEMBER"


def generator_type() -> TextType:
    """The X-GENERATOR property naming this library."""
    return TextType(GENERATOR_TYPE_NAME, f"vcardio v{__version__} {__url__}")


def group_properties(
    vcard: VCard, add_generator: bool
) -> Dict[Optional[str], List[VCardProperty]]:
    """
    Bucket a vCard's properties by group name.

    Buckets appear in the order their group is first seen; properties keep
    discovery order within a bucket. Ungrouped properties go under None, as
    does the generator signature when requested.

    Args:
        vcard: vCard to read
        add_generator: Append an X-GENERATOR property to the ungrouped bucket

    Returns:
        Ordered mapping of group name (or None) to properties
    """
    buckets: Dict[Optional[str], List[VCardProperty]] = {}
    for group, prop in vcard.properties():
        buckets.setdefault(group, []).append(prop)

    if add_generator:
        buckets.setdefault(None, []).append(generator_type())

    return buckets


def format_versions(versions) -> str:
    """Render a set of versions as "[2.1, 3.0]" in version order."""
    return "[" + ", ".join(v.version for v in sorted(versions, key=lambda v: v.version)) + "]"


def check_property(
    prop: VCardProperty, vcard: VCard, version: VCardVersion, warnings: List[str]
) -> bool:
    """
    Decide whether a property may be written, recording why not.

    Rules:
    - The property must support the target version.
    - MEMBER properties require the vCard's KIND to be "group".

    Args:
        prop: Property to check
        vcard: vCard the property belongs to
        version: Target version
        warnings: Receives one warning if the property is rejected

    Returns:
        True if the property may be marshalled
    """
    supported = prop.supported_versions()
    if version not in supported:
        warnings.append(
            f"The {prop.type_name} type is not supported by vCard version {version}.  "
            f"The supported versions are {format_versions(supported)}.  "
            "This type will not be added to the vCard."
        )
        return False

    if prop.type_name.upper() == MEMBER_TYPE_NAME:
        kind = vcard.kind
        if kind is None or not kind.is_group():
            warnings.append(
                'The value of KIND must be set to "group" in order to add MEMBERs to the vCard.'
            )
            return False

    return True


def check_formatted_name(vcard: VCard, version: VCardVersion, warnings: List[str]) -> None:
    """Record an advisory warning if the vCard has no FN property."""
    if vcard.formatted_name is None:
        warnings.append(f"vCard version {version} requires that a formatted name be defined.")


def skipped_warning(prop: VCardProperty) -> str:
    """Warning recorded when a property's value marshals to None."""
    return f"{prop.type_name} type has requested that it not be marshalled."
