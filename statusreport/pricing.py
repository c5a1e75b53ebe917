"""Price totals for the whole contact list and for each tag."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Callable, Iterable, List, Optional, Set

from .errors import SummationError

# (contacts, label) -> formatted total line
Summer = Callable[..., str]


def collect_labels(contacts: Iterable) -> Set[str]:
    """Return every distinct tag used by *contacts*."""
    labels: Set[str] = set()
    for contact in contacts:
        labels.update(contact.tags)
    return labels


def _amount(contact) -> Decimal:
    if contact.price is None or not str(contact.price).strip():
        return Decimal(0)
    try:
        amount = Decimal(str(contact.price).strip())
    except InvalidOperation as exc:
        raise SummationError(
            f"{contact.name}: malformed price {contact.price!r}"
        ) from exc
    if not amount.is_finite() or amount < 0:
        raise SummationError(f"{contact.name}: invalid price {contact.price!r}")
    return amount


def sum_prices(
    contacts: Iterable, label: Optional[str] = None, currency: str = "$"
) -> str:
    """Return a line with the summed price of *contacts*.

    When *label* is given only contacts carrying that tag are counted.
    Contacts without a price count as zero; a malformed or negative price,
    or a total too large to show in cents, raises SummationError.
    """
    total = Decimal(0)
    for contact in contacts:
        if label is not None and label not in contact.tags:
            continue
        total += _amount(contact)
    try:
        total = total.quantize(Decimal("0.01"))
    except InvalidOperation as exc:
        raise SummationError(f"price total out of range: {total}") from exc
    amount = f"{currency}{total}"
    if label is None:
        return f"Total price: {amount}"
    return f"Total price for [{label}]: {amount}"


def price_lines(contacts: Iterable, summer: Summer = sum_prices) -> List[str]:
    """Return the overall total line followed by one line per tag.

    Tags are listed alphabetically. Errors raised by *summer* propagate.
    """
    contacts = list(contacts)
    lines = [summer(contacts)]
    for label in sorted(collect_labels(contacts)):
        lines.append(summer(contacts, label=label))
    return lines
