"""Delivery calendar: which days have project or service deliveries.

Both functions are pure. Lists that have not loaded yet (None) simply give
empty results, so callers can re-run them on every new snapshot or every
change of the selected day.
"""

from datetime import date, tzinfo
from typing import Iterable, Optional, Sequence, Union

from bizdash.domain.entities import Delivery, EntityKind, Project, Service
from bizdash.utils.date_parser import same_calendar_day, to_local_date

Scheduled = Union[Project, Service]


def delivery_days(
    projects: Optional[Iterable[Project]],
    services: Optional[Iterable[Service]],
    zone: Optional[tzinfo] = None,
) -> list[date]:
    """Return the local calendar date of every defined project/service end date.

    Duplicates are kept; the result only answers "is this a delivery day".

    Args:
        projects: Current project list, or None if not loaded yet
        services: Current service list, or None if not loaded yet
        zone: Calendar timezone (defaults to the local zone)
    """
    return [
        to_local_date(record.end_date, zone)
        for record in _scheduled(projects, services)
    ]


def deliveries_on(
    day: Optional[date],
    projects: Optional[Sequence[Project]],
    services: Optional[Sequence[Service]],
    zone: Optional[tzinfo] = None,
) -> list[Delivery]:
    """Return the projects, then the services, due on ``day``.

    Input order is kept within each kind. No day selected means no deliveries.
    """
    if day is None:
        return []
    deliveries = []
    for kind, records in ((EntityKind.PROJECT, projects), (EntityKind.SERVICE, services)):
        for record in records or ():
            if record.end_date is not None and same_calendar_day(record.end_date, day, zone):
                deliveries.append(Delivery(kind=kind, record=record))
    return deliveries


def is_delivery_day(day: date, days: Iterable[date]) -> bool:
    """Check whether ``day`` is one of the given delivery days."""
    return any(day == delivery for delivery in days)


def _scheduled(projects, services) -> Iterable[Scheduled]:
    for records in (projects, services):
        for record in records or ():
            if record.end_date is not None:
                yield record
