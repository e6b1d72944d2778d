# salon/scheduling/validator.py

import logging
from datetime import datetime
from typing import Iterable, List, Optional

from salon.core import format_minutes, is_hhmm, overlaps, to_minutes
from salon.scheduling.availability import occupying_bookings
from salon.scheduling.errors import (
    ClosedOnDate,
    InvalidServiceSelection,
    OutsideWorkingHours,
    SlotInPast,
    SlotNoLongerAvailable,
)
from salon.scheduling.resolver import resolve_window
from salon.scheduling.types import (
    BookingCandidate,
    BookingDraft,
    BookingRecord,
    BookingStatus,
    ScheduleConfig,
    ServiceInfo,
)

logger = logging.getLogger(__name__)


def _selected_services(candidate: BookingCandidate, config: ScheduleConfig) -> List[ServiceInfo]:
    if not candidate.service_ids:
        raise InvalidServiceSelection()

    selected = []
    for service_id in candidate.service_ids:
        service = config.service_by_id(service_id)
        if service is None:
            raise InvalidServiceSelection(
                "Selected service does not exist", details={"service_id": service_id}
            )
        if not service.active:
            raise InvalidServiceSelection(
                "Selected service is no longer offered", details={"service_id": service_id}
            )
        selected.append(service)

    if candidate.staff_id is not None:
        member = config.staff_by_id(candidate.staff_id)
        if member is not None:
            missing = [s.id for s in selected if s.id not in member.services_offered]
            if missing:
                raise InvalidServiceSelection(
                    "The selected stylist does not offer all chosen services",
                    details={"staff_id": candidate.staff_id, "service_ids": missing},
                )
    return selected


def validate_and_build_booking(
    candidate: BookingCandidate,
    bookings: Iterable[BookingRecord],
    config: ScheduleConfig,
    now: Optional[datetime] = None,
) -> BookingDraft:
    """
    Re-check a booking request against the latest snapshot and build it.

    The slot list shown to the customer may be stale by the time they
    submit, so every check is repeated here. Raises a ``BookingRejected``
    subclass when the request cannot be honoured; persisting the returned
    draft (id, created timestamp) is up to the caller.
    """
    services = _selected_services(candidate, config)
    duration = sum(s.duration_minutes for s in services)

    window = resolve_window(config, candidate.date, candidate.staff_id)
    if window is None:
        raise ClosedOnDate(details={"date": candidate.date.isoformat()})

    if not is_hhmm(candidate.start_time):
        raise OutsideWorkingHours("Start time must be a 24-hour HH:MM time")
    start = to_minutes(candidate.start_time)
    end = start + duration
    if start < window.start_minutes or end > window.end_minutes:
        raise OutsideWorkingHours(
            f"The appointment must start and end between {window.start} and {window.end}",
            details={"window": {"start": window.start, "end": window.end}},
        )

    if now is not None:
        starts_at = datetime.combine(candidate.date, datetime.strptime(candidate.start_time, "%H:%M").time())
        if starts_at <= now.replace(tzinfo=None):
            raise SlotInPast()

    for b_start, b_end in occupying_bookings(bookings, candidate.date, candidate.staff_id):
        if overlaps(start, end, b_start, b_end):
            logger.debug(
                "Rejected %s %s for staff %s: overlaps %s-%s",
                candidate.date, candidate.start_time, candidate.staff_id,
                format_minutes(b_start), format_minutes(b_end),
            )
            raise SlotNoLongerAvailable()

    return BookingDraft(
        staff_id=candidate.staff_id,
        service_ids=list(candidate.service_ids),
        date=candidate.date,
        start_time=candidate.start_time,
        end_time=format_minutes(end),
        duration_minutes=duration,
        status=BookingStatus.pending,
    )
