"""Tests for statusreport.stats."""

import pytest

from statusreport.errors import UnclassifiableStatusError
from statusreport.stats import LabelCounter, ReportStats, StatusTotals, aggregate

from helpers import _contact


# ---------------------------------------------------------------------------
# StatusTotals / LabelCounter
# ---------------------------------------------------------------------------


def test_totals_str():
    assert str(StatusTotals(3, 1, 0)) == "3 confirmed, 1 pending, 0 declined"


def test_label_counter_str():
    counter = LabelCounter(confirmed=2, pending=0, declined=1, label="staff")
    assert str(counter) == "staff: 2 confirmed, 0 pending, 1 declined"


def test_label_counter_starts_at_zero():
    counter = LabelCounter(label="x")
    assert (counter.confirmed, counter.pending, counter.declined) == (0, 0, 0)


# ---------------------------------------------------------------------------
# record_occurrence / reset
# ---------------------------------------------------------------------------


def test_record_occurrence_creates_counter():
    s = ReportStats()
    assert s.record_occurrence("A", "p") is True
    assert s.counters["A"] == LabelCounter(pending=1, label="A")
    assert s.totals == StatusTotals(pending=1)


def test_record_occurrence_updates_existing_counter():
    s = ReportStats()
    s.record_occurrence("A", "c")
    s.record_occurrence("A", "Declined")
    assert list(s.counters) == ["A"]
    assert s.counters["A"] == LabelCounter(confirmed=1, declined=1, label="A")
    assert s.totals == StatusTotals(confirmed=1, declined=1)


def test_record_occurrence_label_match_is_exact():
    s = ReportStats()
    s.record_occurrence("Staff", "c")
    s.record_occurrence("staff", "c")
    assert list(s.counters) == ["Staff", "staff"]


def test_record_occurrence_unknown_status_touches_nothing():
    s = ReportStats()
    assert s.record_occurrence("A", "maybe") is False
    assert s.counters == {}
    assert s.totals == StatusTotals()


def test_reset_clears_everything():
    s = ReportStats()
    s.record_occurrence("A", "c")
    s.unclassified.append(("x", "?"))
    s.reset()
    assert s == ReportStats()


# ---------------------------------------------------------------------------
# aggregate
# ---------------------------------------------------------------------------


def test_two_labels_one_contact():
    s = aggregate([_contact("Confirmed", "volunteer", "staff")])
    assert s.counters["volunteer"] == LabelCounter(confirmed=1, label="volunteer")
    assert s.counters["staff"] == LabelCounter(confirmed=1, label="staff")
    # totals count label occurrences, so they always equal the column sums
    assert s.totals == StatusTotals(confirmed=2, pending=0, declined=0)


def test_abbreviation_and_full_word_count_alike():
    s = aggregate([_contact("c", "A"), _contact("Confirmed", "A")])
    assert s.counters["A"].confirmed == 2


def test_empty_input():
    s = aggregate([])
    assert s.counters == {}
    assert s.totals == StatusTotals()


def test_first_seen_order():
    s = aggregate([_contact("p", "zeta"), _contact("c", "alpha", "zeta")])
    assert list(s.counters) == ["zeta", "alpha"]


def test_contact_without_tags_not_counted():
    s = aggregate([_contact("c")])
    assert s.totals == StatusTotals()
    assert s.unclassified == []


def test_unclassified_recorded_and_skipped():
    s = aggregate([_contact("maybe", "A", name="Bo"), _contact("d", "A")])
    assert s.unclassified == [("Bo", "maybe")]
    assert s.counters["A"] == LabelCounter(declined=1, label="A")
    assert s.totals == StatusTotals(declined=1)


def test_unclassified_strict_raises():
    with pytest.raises(UnclassifiableStatusError) as exc_info:
        aggregate([_contact("maybe", "A", name="Bo")], strict=True)
    assert str(exc_info.value) == "Bo: unrecognised status 'maybe'"
    assert isinstance(exc_info.value.__cause__, UnclassifiableStatusError)


def test_column_sums_match_totals():
    contacts = [
        _contact("c", "a", "b"),
        _contact("p", "b"),
        _contact("d", "a", "c"),
        _contact("Pending", "c", "a", "b"),
        _contact("x", "a"),
    ]
    s = aggregate(contacts)
    counters = s.counters.values()
    assert sum(c.confirmed for c in counters) == s.totals.confirmed
    assert sum(c.pending for c in counters) == s.totals.pending
    assert sum(c.declined for c in counters) == s.totals.declined


def test_repeated_passes_are_identical():
    contacts = [_contact("c", "a", "b"), _contact("d", "b")]
    assert aggregate(contacts) == aggregate(contacts)


def test_aggregate_does_not_mutate_input():
    contacts = [_contact("c", "a", "b")]
    before = list(contacts)
    aggregate(contacts)
    assert contacts == before


# ---------------------------------------------------------------------------
# format_summary
# ---------------------------------------------------------------------------


def test_format_summary():
    s = aggregate([_contact("c", "staff"), _contact("p", "guest")])
    assert s.format_summary() == [
        "Current status for tags: ",
        "1 confirmed, 1 pending, 0 declined",
        "staff: 1 confirmed, 0 pending, 0 declined",
        "guest: 0 confirmed, 1 pending, 0 declined",
    ]
