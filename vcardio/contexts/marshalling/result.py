"""Result type returned by every document marshaller."""

from dataclasses import dataclass, field
from typing import Any, List


@dataclass
class MarshalResult:
    """
    Outcome of marshalling one vCard.

    Attributes:
        element: The record's marshalled form (an xCard <vcard> element, a
                 jCard array, or a block of plain text)
        warnings: Recoverable problems found while marshalling this vCard only
    """

    element: Any
    warnings: List[str] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)
