"""
Property Parameter Table

Holds the parameters ("sub types") attached to a vCard property, such as
TYPE=home or PREF=1.
"""

from typing import Dict, Iterator, List, Optional, Tuple

VALUE = "VALUE"
LANGUAGE = "LANGUAGE"
PREF = "PREF"
TYPE = "TYPE"
ALTID = "ALTID"
MEDIATYPE = "MEDIATYPE"
SORT_AS = "SORT-AS"


class VCardSubTypes:
    """
    Case-insensitive multimap of parameter name to an ordered list of values.

    Names are stored upper-cased. Values keep their insertion order per name,
    and names keep the order in which they were first added.

    Example:
        >>> params = VCardSubTypes()
        >>> params.put("type", "home")
        >>> params.put("TYPE", "voice")
        >>> params.get("Type")
        ['home', 'voice']
    """

    def __init__(self, initial: Optional[Dict[str, List[str]]] = None):
        self._params: Dict[str, List[str]] = {}
        if initial:
            for name, values in initial.items():
                if isinstance(values, str):
                    values = [values]
                for value in values:
                    self.put(name, value)

    @staticmethod
    def _key(name: str) -> str:
        return name.upper()

    def put(self, name: str, value: str) -> None:
        """Add a value to a parameter, keeping any existing values."""
        self._params.setdefault(self._key(name), []).append(str(value))

    def replace(self, name: str, value: Optional[str]) -> List[str]:
        """
        Replace all values of a parameter with a single value.

        Args:
            name: Parameter name
            value: New value, or None to remove the parameter

        Returns:
            The values that were replaced
        """
        previous = self.remove_all(name)
        if value is not None:
            self.put(name, value)
        return previous

    def remove_all(self, name: str) -> List[str]:
        """Remove a parameter entirely, returning its values."""
        return self._params.pop(self._key(name), [])

    def get(self, name: str) -> List[str]:
        """All values of a parameter (empty list if absent)."""
        return list(self._params.get(self._key(name), []))

    def first(self, name: str) -> Optional[str]:
        values = self._params.get(self._key(name))
        return values[0] if values else None

    def names(self) -> List[str]:
        return list(self._params)

    def items(self) -> Iterator[Tuple[str, List[str]]]:
        for name, values in self._params.items():
            yield name, list(values)

    def is_empty(self) -> bool:
        return not self._params

    def copy(self) -> "VCardSubTypes":
        duplicate = VCardSubTypes()
        duplicate._params = {name: list(values) for name, values in self._params.items()}
        return duplicate

    def __contains__(self, name: str) -> bool:
        return self._key(name) in self._params

    def __len__(self) -> int:
        return len(self._params)

    def __eq__(self, other) -> bool:
        if not isinstance(other, VCardSubTypes):
            return NotImplemented
        return self._params == other._params

    def __repr__(self) -> str:
        return f"VCardSubTypes({self._params!r})"

    # Typed accessors for common parameters

    @property
    def value(self) -> Optional[str]:
        """The VALUE parameter (value-type hint such as "uri" or "text")."""
        return self.first(VALUE)

    @value.setter
    def value(self, value: Optional[str]) -> None:
        self.replace(VALUE, value)

    @property
    def language(self) -> Optional[str]:
        return self.first(LANGUAGE)

    @language.setter
    def language(self, language: Optional[str]) -> None:
        self.replace(LANGUAGE, language)

    @property
    def pref(self) -> Optional[int]:
        """
        The PREF parameter as an integer.

        Raises:
            ValueError: If the stored value is not an integer
        """
        pref = self.first(PREF)
        if pref is None:
            return None
        try:
            return int(pref)
        except ValueError as e:
            raise ValueError(f"PREF parameter is not an integer: '{pref}'") from e

    @pref.setter
    def pref(self, pref: Optional[int]) -> None:
        self.replace(PREF, None if pref is None else str(pref))

    @property
    def types(self) -> List[str]:
        return self.get(TYPE)

    def add_type(self, type_value: str) -> None:
        self.put(TYPE, type_value)

    @property
    def alt_id(self) -> Optional[str]:
        return self.first(ALTID)

    @alt_id.setter
    def alt_id(self, alt_id: Optional[str]) -> None:
        self.replace(ALTID, alt_id)

    @property
    def media_type(self) -> Optional[str]:
        return self.first(MEDIATYPE)

    @media_type.setter
    def media_type(self, media_type: Optional[str]) -> None:
        self.replace(MEDIATYPE, media_type)

    @property
    def sort_as(self) -> List[str]:
        return self.get(SORT_AS)

    @sort_as.setter
    def sort_as(self, values: List[str]) -> None:
        self.remove_all(SORT_AS)
        for value in values:
            self.put(SORT_AS, value)
