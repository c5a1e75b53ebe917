"""Build the status-and-price report text for a list of contacts."""

from __future__ import annotations

from functools import partial
from typing import Iterable, Optional, Tuple

from .config import ReportConfig
from .pricing import Summer, price_lines, sum_prices
from .stats import ReportStats, aggregate


def build_report(
    contacts: Iterable,
    config: Optional[ReportConfig] = None,
    summer: Optional[Summer] = None,
) -> Tuple[ReportStats, str]:
    """Aggregate *contacts* and render the report.

    Returns the pass's ReportStats alongside the text so callers can inspect
    skipped statuses. *summer* defaults to :func:`sum_prices` with the
    configured currency; if it raises, the error propagates and no text is
    produced.
    """
    if config is None:
        config = ReportConfig()
    if summer is None:
        summer = partial(sum_prices, currency=config.currency)
    contacts = list(contacts)
    stats = aggregate(contacts, strict=config.strict_status)
    overall, *by_label = price_lines(contacts, summer=summer)

    text = "".join(line + "\n" for line in stats.format_summary())
    text += f"\n{overall}\n"
    text += "".join(line + "\n" for line in by_label)
    return stats, text


def create_report(
    contacts: Iterable,
    config: Optional[ReportConfig] = None,
    summer: Optional[Summer] = None,
) -> str:
    """Return the report text for *contacts*."""
    return build_report(contacts, config=config, summer=summer)[1]
