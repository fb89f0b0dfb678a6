"""
vCard Builder

Builds VCard objects from plain mappings, typically loaded from YAML:

    vcards:
      - fn: Anna Smith
        nickname:
          values: [Anna, Ann]
          parameters: {pref: 1}
        org: [Acme Inc., Research]
        extended:
          - name: X-SPOUSE
            value: Bob
            group: family
"""

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from omegaconf import OmegaConf

from vcardio.contexts.types.contract import VCardType
from vcardio.contexts.types.exceptions import InvalidVCardDataError
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
)
from vcardio.contexts.types.vcard import VCard

# Key -> factory taking the entry's value(s)
TEXT_FIELDS: Dict[str, Callable[[str], VCardType]] = {
    "fn": FormattedNameType,
    "kind": KindType,
    "mailer": MailerType,
    "member": MemberType,
}
LIST_FIELDS: Dict[str, Callable[[List[str]], TextListType]] = {
    "nickname": NicknameType,
    "categories": CategoriesType,
    "org": OrganizationType,
}
REPEATABLE_FIELDS = {"member"}


def vcard_from_dict(data: Dict[str, Any]) -> VCard:
    """
    Build a VCard from a mapping.

    Each standard key accepts either a bare value or a mapping with ``value``
    (or ``values`` for list properties) plus optional ``group`` and
    ``parameters``. ``member`` also accepts a list of entries. ``extended``
    takes a list of mappings with ``name``, ``value`` and optional ``group``.

    Args:
        data: vCard description

    Returns:
        The populated VCard

    Raises:
        InvalidVCardDataError: If a key is unknown or an entry is malformed
    """
    if not isinstance(data, dict):
        raise InvalidVCardDataError(f"vCard entry must be a mapping, got {type(data).__name__}")

    vcard = VCard()
    for key, raw in data.items():
        if key in TEXT_FIELDS:
            entries = raw if key in REPEATABLE_FIELDS and isinstance(raw, list) else [raw]
            for entry in entries:
                vcard.add_type(_build_text(key, entry))
        elif key in LIST_FIELDS:
            vcard.add_type(_build_list(key, raw))
        elif key == "extended":
            for entry in raw or []:
                _add_extended(vcard, entry)
        else:
            known = sorted([*TEXT_FIELDS, *LIST_FIELDS, "extended"])
            raise InvalidVCardDataError(f"Unknown vCard key. Known keys: {known}", field_name=key)
    return vcard


def load_vcards(path: Path) -> List[VCard]:
    """
    Load every vCard described in a YAML file.

    The file must contain a ``vcards`` list at its root.

    Raises:
        InvalidVCardDataError: If the file structure is wrong
    """
    conf = OmegaConf.load(path)
    data = OmegaConf.to_container(conf, resolve=True)

    if not isinstance(data, dict) or "vcards" not in data:
        raise InvalidVCardDataError(f"YAML must contain 'vcards' key at root level: {path}")
    if not isinstance(data["vcards"], list):
        raise InvalidVCardDataError("'vcards' must be a list", field_name="vcards")

    return [vcard_from_dict(entry) for entry in data["vcards"]]


def _split_entry(key: str, raw: Any, value_key: str) -> tuple:
    """Return (value, group, parameters) for a bare or mapping entry."""
    if isinstance(raw, dict):
        unknown = set(raw) - {value_key, "group", "parameters"}
        if unknown:
            raise InvalidVCardDataError(f"Unknown entry keys {sorted(unknown)}", field_name=key)
        return raw.get(value_key), raw.get("group"), raw.get("parameters") or {}
    return raw, None, {}


def _apply_parameters(prop: VCardType, key: str, parameters: Dict[str, Any]) -> None:
    if not isinstance(parameters, dict):
        raise InvalidVCardDataError("'parameters' must be a mapping", field_name=key)
    for name, values in parameters.items():
        if not isinstance(values, list):
            values = [values]
        for value in values:
            prop.sub_types.put(str(name), str(value))


def _build_text(key: str, raw: Any) -> VCardType:
    value, group, parameters = _split_entry(key, raw, "value")
    if isinstance(value, (list, dict)):
        raise InvalidVCardDataError("Expected a single value", field_name=key)
    prop = TEXT_FIELDS[key](None if value is None else str(value))
    prop.group = group
    _apply_parameters(prop, key, parameters)
    return prop


def _build_list(key: str, raw: Any) -> TextListType:
    values, group, parameters = _split_entry(key, raw, "values")
    if values is None:
        values = []
    elif not isinstance(values, list):
        values = [values]
    prop = LIST_FIELDS[key]([str(value) for value in values])
    prop.group = group
    _apply_parameters(prop, key, parameters)
    return prop


def _add_extended(vcard: VCard, entry: Any) -> None:
    if not isinstance(entry, dict) or "name" not in entry:
        raise InvalidVCardDataError("Extended entries need a 'name'", field_name="extended")
    value: Optional[Any] = entry.get("value")
    prop = vcard.add_extended_type(
        str(entry["name"]), None if value is None else str(value), entry.get("group")
    )
    _apply_parameters(prop, "extended", entry.get("parameters") or {})
