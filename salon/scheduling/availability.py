# salon/scheduling/availability.py
"""
Availability for the booking page.

``compute_availability`` chains the three steps: resolve the day's working
window, generate candidate slots, then mark the ones that collide with
existing bookings (or have already started) as unavailable.
"""

import logging
from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence, Tuple

from salon.core import is_hhmm, overlaps, to_minutes
from salon.scheduling.resolver import resolve_window
from salon.scheduling.slots import generate_slots
from salon.scheduling.types import BookingRecord, BookingStatus, Id, ScheduleConfig, Slot

logger = logging.getLogger(__name__)


def booking_interval(booking: BookingRecord) -> Optional[Tuple[int, int]]:
    """Occupied ``[start, end)`` in minutes, or None if the stored times are unusable."""
    if not (is_hhmm(booking.start_time) and is_hhmm(booking.end_time)):
        logger.debug("Ignoring booking %s with malformed times", booking.id)
        return None
    start, end = to_minutes(booking.start_time), to_minutes(booking.end_time)
    if start >= end:
        return None
    return start, end


def occupying_bookings(
    bookings: Iterable[BookingRecord],
    on_date: date,
    staff_id: Optional[Id] = None,
) -> List[Tuple[int, int]]:
    """Intervals of the bookings that block the calendar for ``on_date`` (and staff)."""
    intervals = []
    for b in bookings:
        if b.date != on_date:
            continue
        if b.status == BookingStatus.cancelled:
            continue
        if staff_id is not None and b.staff_id != staff_id:
            continue
        interval = booking_interval(b)
        if interval is not None:
            intervals.append(interval)
    return intervals


def filter_available(
    slots: Sequence[Slot],
    duration_minutes: int,
    bookings: Iterable[BookingRecord],
    on_date: date,
    staff_id: Optional[Id] = None,
    now: Optional[datetime] = None,
) -> List[Slot]:
    taken = occupying_bookings(bookings, on_date, staff_id)
    is_today = now is not None and now.date() == on_date

    result = []
    for slot in slots:
        start = to_minutes(slot.time)
        end = start + duration_minutes
        available = slot.available

        if available and any(overlaps(start, end, b_start, b_end) for b_start, b_end in taken):
            available = False

        if available and is_today:
            slot_start = datetime.combine(on_date, datetime.strptime(slot.time, "%H:%M").time())
            if slot_start <= now.replace(tzinfo=None):
                available = False

        result.append(Slot(time=slot.time, available=available))
    return result


def booking_duration(config: ScheduleConfig, service_ids: Sequence[Id]) -> int:
    """Total length of the selected services; the default slot length if none count."""
    total = 0
    for service_id in service_ids:
        service = config.service_by_id(service_id)
        if service is not None and service.active:
            total += service.duration_minutes
    return total or config.default_duration_minutes


def compute_availability(
    config: ScheduleConfig,
    bookings: Iterable[BookingRecord],
    on_date: date,
    service_ids: Sequence[Id] = (),
    staff_id: Optional[Id] = None,
    now: Optional[datetime] = None,
) -> List[Slot]:
    window = resolve_window(config, on_date, staff_id)
    if window is None:
        return []

    duration = booking_duration(config, service_ids)
    slots = generate_slots(window, duration, config.slot_step_minutes)
    return filter_available(slots, duration, bookings, on_date, staff_id, now)
