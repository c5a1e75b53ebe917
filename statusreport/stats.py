"""Per-label and collection-wide status counts for a single report pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from .errors import UnclassifiableStatusError
from .status import Status, parse_status


@dataclass
class StatusTotals:
    """Counts of confirmed, pending and declined contacts."""

    confirmed: int = 0
    pending: int = 0
    declined: int = 0

    def increment(self, status: Status) -> None:
        if status is Status.CONFIRMED:
            self.confirmed += 1
        elif status is Status.PENDING:
            self.pending += 1
        else:
            self.declined += 1

    def __str__(self) -> str:
        return (
            f"{self.confirmed} confirmed, "
            f"{self.pending} pending, "
            f"{self.declined} declined"
        )


@dataclass
class LabelCounter(StatusTotals):
    """Status counts for every contact carrying one label."""

    label: str = ""

    def __str__(self) -> str:
        return f"{self.label}: {StatusTotals.__str__(self)}"


@dataclass
class ReportStats:
    """Holds the counts gathered by one aggregation pass."""

    totals: StatusTotals = field(default_factory=StatusTotals)
    # Label -> counter, in the order labels were first seen
    counters: Dict[str, LabelCounter] = field(default_factory=dict)
    # (contact name, status) pairs skipped because the status was not recognised
    unclassified: List[Tuple[str, str]] = field(default_factory=list)

    def reset(self) -> None:
        self.totals = StatusTotals()
        self.counters.clear()
        self.unclassified.clear()

    def record_occurrence(self, label: str, status: str) -> bool:
        """Count one contact carrying *label* with *status*.

        Returns False, touching nothing, when *status* is not recognised.
        """
        parsed = parse_status(status)
        if parsed is None:
            return False
        counter = self.counters.get(label)
        if counter is None:
            counter = self.counters[label] = LabelCounter(label=label)
        counter.increment(parsed)
        self.totals.increment(parsed)
        return True

    def format_summary(self) -> List[str]:
        """Return the status lines of the report, one per list entry."""
        lines = ["Current status for tags: ", str(self.totals)]
        lines.extend(str(counter) for counter in self.counters.values())
        return lines


def aggregate(contacts: Iterable, strict: bool = False) -> ReportStats:
    """Run one aggregation pass over *contacts* and return its counts.

    Every contact's status is counted once per tag it carries. A contact whose
    status is not recognised is listed in ``unclassified`` and otherwise
    ignored, unless *strict* is set, in which case UnclassifiableStatusError
    is raised.
    """
    stats = ReportStats()
    for contact in contacts:
        try:
            Status.parse(contact.status)
        except UnclassifiableStatusError as exc:
            if strict:
                raise UnclassifiableStatusError(f"{contact.name}: {exc}") from exc
            stats.unclassified.append((contact.name, contact.status))
            continue
        # Sets are unordered; sort so first-seen label order is reproducible.
        for label in sorted(contact.tags):
            stats.record_occurrence(label, contact.status)
    return stats
