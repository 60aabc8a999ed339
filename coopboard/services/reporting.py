"""
Derived figures for the dashboard.

Everything here works on rows the caller has already loaded, so results are
only as complete as that set.
"""
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar

from coopboard.models.capacity import OccupancyStatus
from coopboard.models.contribution import UNKNOWN_FAMILY

T = TypeVar("T")


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def total_hours(contributions: Iterable) -> Decimal:
    """Sum of ``hours`` over all loaded contributions."""
    return sum((_as_decimal(c.hours) for c in contributions), Decimal("0"))


def per_family_totals(contributions: Iterable) -> Dict[str, Decimal]:
    """
    Hours summed per family display name, largest first.

    Rows without a family name are grouped under "Unknown". Ties keep the
    order in which the families first appear.
    """
    totals: Dict[str, Decimal] = defaultdict(lambda: Decimal("0"))
    for contribution in contributions:
        name = contribution.family_name or UNKNOWN_FAMILY
        totals[name] += _as_decimal(contribution.hours)

    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return dict(ranked)


def unique_contributor_count(contributions: Iterable) -> int:
    return len({c.family_name for c in contributions})


def occupancy_status(resources: Sequence) -> OccupancyStatus:
    """
    Colour code for one calendar day.

    Compares the summed capacity of the day's resources with their summed
    occupancy.
    """
    if not resources:
        return OccupancyStatus.NONE

    available = sum(r.max_assignees for r in resources)
    occupied = sum(r.assigned_count for r in resources)

    if occupied >= available:
        return OccupancyStatus.FULL
    if occupied > 0:
        return OccupancyStatus.PARTIAL
    return OccupancyStatus.AVAILABLE


def day_statuses(resources: Iterable) -> Dict[date, OccupancyStatus]:
    """Occupancy status for every day that has at least one resource."""
    by_day = defaultdict(list)
    for resource in resources:
        by_day[resource.date].append(resource)
    return {day: occupancy_status(by_day[day]) for day in sorted(by_day)}


def summarize_attendees(attendees: Sequence[T], max_display: Optional[int] = None) -> Tuple[List[T], int]:
    """
    Split attendees into the badges to show and the "+N more" remainder.

    A missing or non-positive ``max_display`` shows everyone.
    """
    if not max_display or max_display <= 0:
        return list(attendees), 0
    shown = list(attendees[:max_display])
    return shown, len(attendees) - len(shown)
