import pytest
from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from coopboard.models.capacity import OccupancyStatus
from coopboard.services import reporting


def entry(family_name, hours):
    return SimpleNamespace(family_name=family_name, hours=Decimal(str(hours)))


def slot(max_assignees, assigned_count, day=date(2026, 11, 2)):
    return SimpleNamespace(max_assignees=max_assignees, assigned_count=assigned_count, date=day)


@pytest.fixture
def contributions():
    return [entry("Rossi", "2.5"), entry("Bianchi", "1"), entry("Rossi", "3")]


@pytest.mark.unit
class TestContributionAggregates:
    """Unit tests for the hour aggregates."""

    def test_total_hours(self, contributions):
        assert reporting.total_hours(contributions) == Decimal("6.5")

    def test_total_hours_empty(self):
        assert reporting.total_hours([]) == Decimal("0")

    def test_total_hours_accepts_floats(self):
        rows = [SimpleNamespace(family_name="Rossi", hours=1.25), SimpleNamespace(family_name="Rossi", hours=0.5)]
        assert reporting.total_hours(rows) == Decimal("1.75")

    def test_per_family_totals_sorted_descending(self, contributions):
        totals = reporting.per_family_totals(contributions)

        assert totals == {"Rossi": Decimal("5.5"), "Bianchi": Decimal("1")}
        assert list(totals) == ["Rossi", "Bianchi"]

    def test_per_family_totals_groups_missing_names(self):
        totals = reporting.per_family_totals([entry(None, "2"), entry("Verdi", "1")])
        assert totals == {"Unknown": Decimal("2"), "Verdi": Decimal("1")}

    def test_per_family_totals_keeps_first_seen_order_on_ties(self):
        totals = reporting.per_family_totals([entry("Verdi", "2"), entry("Bianchi", "2")])
        assert list(totals) == ["Verdi", "Bianchi"]

    def test_unique_contributor_count(self, contributions):
        assert reporting.unique_contributor_count(contributions) == 2


@pytest.mark.unit
class TestOccupancyStatus:
    """Unit tests for the calendar colour coding."""

    def test_no_resources(self):
        assert reporting.occupancy_status([]) == OccupancyStatus.NONE

    def test_available(self):
        assert reporting.occupancy_status([slot(2, 0), slot(2, 0)]) == OccupancyStatus.AVAILABLE

    def test_partial(self):
        assert reporting.occupancy_status([slot(2, 2), slot(2, 0)]) == OccupancyStatus.PARTIAL

    def test_full(self):
        assert reporting.occupancy_status([slot(2, 2), slot(1, 1)]) == OccupancyStatus.FULL

    def test_day_statuses_groups_by_day(self):
        monday, tuesday = date(2026, 11, 2), date(2026, 11, 3)
        statuses = reporting.day_statuses([
            slot(2, 1, tuesday),
            slot(2, 2, monday),
            slot(2, 0, tuesday),
        ])

        assert list(statuses) == [monday, tuesday]
        assert statuses[monday] == OccupancyStatus.FULL
        assert statuses[tuesday] == OccupancyStatus.PARTIAL


@pytest.mark.unit
class TestSummarizeAttendees:

    def test_truncates_with_remainder(self):
        shown, remaining = reporting.summarize_attendees(["a", "b", "c", "d", "e"], 3)
        assert shown == ["a", "b", "c"]
        assert remaining == 2

    def test_no_maximum_shows_everyone(self):
        shown, remaining = reporting.summarize_attendees(["a", "b"], None)
        assert shown == ["a", "b"]
        assert remaining == 0

    def test_maximum_larger_than_list(self):
        shown, remaining = reporting.summarize_attendees(["a"], 4)
        assert shown == ["a"]
        assert remaining == 0
