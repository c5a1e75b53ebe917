"""Classify free-form contact status strings."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .errors import UnclassifiableStatusError


class Status(Enum):
    """Response state of a contact."""

    CONFIRMED = "confirmed"
    PENDING = "pending"
    DECLINED = "declined"

    @property
    def abbreviation(self) -> str:
        return self.value[0]

    @classmethod
    def parse(cls, text: str) -> "Status":
        """Like :func:`parse_status`, but raise on unrecognised input."""
        status = parse_status(text)
        if status is None:
            raise UnclassifiableStatusError(f"unrecognised status {text!r}")
        return status


# Accepted spellings, lower-cased: the full word or its first letter.
_SYNONYMS = {
    spelling: status
    for status in Status
    for spelling in (status.value, status.abbreviation)
}


def parse_status(text: Optional[str]) -> Optional[Status]:
    """Return the Status named by *text*, or None if it names none.

    Matching ignores case and surrounding whitespace, so ``"Confirmed"``,
    ``"CONFIRMED"`` and ``"c"`` all map to ``Status.CONFIRMED``.
    """
    if text is None:
        return None
    return _SYNONYMS.get(text.strip().lower())
