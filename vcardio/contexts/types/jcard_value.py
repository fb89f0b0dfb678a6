"""
jCard Value Carrier

Represents the value part of a jCard property: the data type name followed by
one or more values, where each value is either a string or an array of strings
(a "grouping", used for structured values).

    ["nickname", {}, "text", "Anna", "Ann"]
                         ^^^^^^^^^^^^^^^^^^^^^^ JCardValue(data_type="text", values=[["Anna"], ["Ann"]])
"""

from dataclasses import dataclass, field
from typing import Any, List


@dataclass
class JCardValue:
    """
    A jCard data type plus its value groupings.

    Attributes:
        data_type: jCard value type name (e.g., "text", "uri")
        values: One list of strings per jCard value
    """

    data_type: str
    values: List[List[str]] = field(default_factory=list)

    @classmethod
    def text(cls, *values: str) -> "JCardValue":
        """A "text" value with one single-string grouping per value."""
        return cls(data_type="text", values=[[value] for value in values])

    @classmethod
    def uri(cls, value: str) -> "JCardValue":
        return cls(data_type="uri", values=[[value]])

    @classmethod
    def from_json(cls, data_type: str, raw_values: List[Any]) -> "JCardValue":
        """
        Build a value from the trailing elements of a jCard property array.

        Strings become single-string groupings; arrays become multi-string
        groupings. Non-string scalars are converted with str(); None becomes "".
        """
        groupings = []
        for raw in raw_values:
            if isinstance(raw, list):
                groupings.append([_to_str(item) for item in raw])
            else:
                groupings.append([_to_str(raw)])
        return cls(data_type=data_type, values=groupings)

    def get_values_as_strings(self) -> List[List[str]]:
        return [list(grouping) for grouping in self.values]

    def to_json(self) -> List[Any]:
        """
        The trailing elements of a jCard property array.

        Single-string groupings collapse to the string; others stay arrays.
        """
        return [grouping[0] if len(grouping) == 1 else list(grouping) for grouping in self.values]


def _to_str(raw: Any) -> str:
    return "" if raw is None else str(raw)
