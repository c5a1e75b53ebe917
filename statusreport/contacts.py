"""Contact records and JSON loading for the command line."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional

from .errors import ContactFormatError


@dataclass(frozen=True)
class Contact:
    """A read-only contact as seen by the report."""

    name: str
    status: str  # free-form; classified by status.parse_status
    tags: FrozenSet[str] = field(default_factory=frozenset)
    price: Optional[str] = None  # decimal amount, e.g. "12.50"


def _contact_from_dict(index: int, raw: object) -> Contact:
    if not isinstance(raw, dict):
        raise ContactFormatError(f"contact #{index} is not an object")
    name = raw.get("name")
    status = raw.get("status")
    if not isinstance(name, str) or not isinstance(status, str):
        raise ContactFormatError(
            f"contact #{index} needs string 'name' and 'status' fields"
        )
    tags = raw.get("tags", [])
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise ContactFormatError(f"{name}: 'tags' must be a list of strings")
    price = raw.get("price")
    if price is not None and (
        isinstance(price, bool) or not isinstance(price, (str, int, float))
    ):
        raise ContactFormatError(f"{name}: 'price' must be a number or string")
    return Contact(
        name=name,
        status=status,
        tags=frozenset(tags),
        price=None if price is None else str(price),
    )


def parse_contacts(text: str) -> List[Contact]:
    """Parse a JSON array of contact objects.

    Each object has ``name`` and ``status`` strings, an optional ``tags`` list
    and an optional ``price``. Raises ContactFormatError on anything else.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ContactFormatError(f"invalid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise ContactFormatError("expected a JSON array of contacts")
    return [_contact_from_dict(i, raw) for i, raw in enumerate(data, start=1)]
