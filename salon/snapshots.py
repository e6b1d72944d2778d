# salon/snapshots.py
"""
Load in-memory snapshots of the database for the scheduling functions.

The scheduling code never touches the session; it only sees the plain
values built here.
"""

from datetime import date
from typing import List, Optional

from sqlmodel import Session, select

from .models import BlockedDate, Booking, SalonSettings, Service, Staff
from .scheduling import (
    BlockedDate as BlockedDay,
    BookingRecord,
    BookingStatus,
    ScheduleConfig,
    ServiceInfo,
    StaffMember,
)


def to_staff_member(staff: Staff) -> StaffMember:
    return StaffMember(
        id=staff.id,
        working_hours=staff.working_hours or {},
        services_offered=staff.services_offered or [],
    )


def load_schedule(session: Session, salon: SalonSettings) -> ScheduleConfig:
    services = session.exec(select(Service)).all()
    staff = session.exec(select(Staff)).all()
    blocked = session.exec(select(BlockedDate)).all()

    return ScheduleConfig(
        business_hours=salon.business_hours or {},
        staff=[to_staff_member(s) for s in staff],
        services=[
            ServiceInfo(id=s.id, duration_minutes=s.duration_minutes, active=s.active)
            for s in services
        ],
        blocked_dates=[BlockedDay(date=b.date, reason=b.reason) for b in blocked],
        slot_step_minutes=salon.slot_step_minutes,
        default_duration_minutes=salon.slot_duration_minutes,
    )


def to_record(booking: Booking) -> BookingRecord:
    return BookingRecord(
        id=booking.id,
        staff_id=booking.staff_id,
        service_ids=booking.service_ids or [],
        date=booking.date,
        start_time=booking.start_time,
        end_time=booking.end_time,
        status=BookingStatus(booking.status),
    )


def load_bookings(
    session: Session,
    on_date: date,
    exclude_id: Optional[int] = None,
) -> List[BookingRecord]:
    stmt = select(Booking).where(Booking.date == on_date)
    if exclude_id is not None:
        stmt = stmt.where(Booking.id != exclude_id)
    return [to_record(b) for b in session.exec(stmt).all()]
