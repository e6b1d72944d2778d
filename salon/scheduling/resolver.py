# salon/scheduling/resolver.py

from datetime import date, timedelta
from typing import Iterable, List, Optional, Sequence

from salon.core import weekday_name
from salon.scheduling.types import Id, ScheduleConfig, StaffMember, WorkingWindow


def resolve_window(
    config: ScheduleConfig,
    on_date: date,
    staff_id: Optional[Id] = None,
) -> Optional[WorkingWindow]:
    """
    Work out the window during which bookings may happen on ``on_date``.

    Returns None when the day is closed: a blocked date, a salon-wide day
    off, or a day off for the requested staff member. When a staff member is
    given their own hours replace the salon's for that weekday. An id that is
    not in the config falls back to the salon hours.
    """
    if config.is_blocked(on_date):
        return None

    day = weekday_name(on_date)
    window = config.business_hours.get(day)
    if window is None:
        return None

    if staff_id is not None:
        member = config.staff_by_id(staff_id)
        if member is not None:
            return member.working_hours.get(day)

    return window


def is_day_open(config: ScheduleConfig, on_date: date, staff_id: Optional[Id] = None) -> bool:
    return resolve_window(config, on_date, staff_id) is not None


def open_days(
    config: ScheduleConfig,
    start: date,
    end: date,
    staff_id: Optional[Id] = None,
) -> List[date]:
    days = []
    current = start
    while current <= end:
        if is_day_open(config, current, staff_id):
            days.append(current)
        current += timedelta(days=1)
    return days


def staff_for_services(staff: Iterable[StaffMember], service_ids: Sequence[Id]) -> List[StaffMember]:
    """Staff members who offer every one of ``service_ids`` (all staff if none given)."""
    if not service_ids:
        return list(staff)
    return [
        member for member in staff
        if all(service_id in member.services_offered for service_id in service_ids)
    ]
