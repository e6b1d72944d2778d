# salon/routers/bookings_routes.py

import logging
from datetime import date, datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from salon.config import Settings
from salon.core import to_minutes
from salon.db import get_session
from salon.models import Booking, Client, SalonSettings, Service, Staff
from salon.schemas import (
    BookingCreate,
    BookingPublic,
    BookingReceipt,
    BookingStatusUpdate,
    BookingUpdate,
    WhatsAppLink,
)
from salon.auth import get_current_user
from salon.deps import get_app_settings, get_now, get_salon_settings, get_schedule, require_role
from salon.snapshots import load_bookings
from salon.scheduling import (
    BookingCandidate,
    BookingRejected,
    BookingStatus,
    InvalidStatusTransition,
    ScheduleConfig,
    transition,
    validate_and_build_booking,
)
from salon import whatsapp

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/bookings",
    tags=["bookings"],
)

# bookings that can still be moved around the calendar
OPEN_STATUSES = (BookingStatus.pending.value, BookingStatus.confirmed.value)


def _get_booking_or_404(session: Session, booking_id: int) -> Booking:
    booking = session.get(Booking, booking_id)
    if booking is None:
        raise HTTPException(status_code=404, detail="Booking not found")
    return booking


def _check_staff_exists(session: Session, staff_id: Optional[int]):
    if staff_id is not None and session.get(Staff, staff_id) is None:
        raise HTTPException(status_code=404, detail="Staff member not found")


def _service_names(session: Session, service_ids: List[int]) -> List[str]:
    names = []
    for service_id in service_ids or []:
        service = session.get(Service, service_id)
        if service is not None:
            names.append(service.name)
    return names


def _moves_booking(booking: Booking, changes: BookingUpdate) -> bool:
    return (
        (changes.date is not None and changes.date != booking.date)
        or (changes.start_time is not None and changes.start_time != booking.start_time)
        or (changes.service_ids is not None and changes.service_ids != booking.service_ids)
        or (changes.staff_id is not None and changes.staff_id != booking.staff_id)
    )


def _find_or_create_client(session: Session, name: str, phone: str, email: str) -> Client:
    client = session.exec(select(Client).where(Client.phone == phone)).first()
    if client is None:
        client = Client(name=name, phone=phone, email=email)
        session.add(client)
        session.flush()  # fills client.id
        logger.info("Created client %s from a booking request", client.id)
    elif email and not client.email:
        client.email = email
        session.add(client)
    return client


@router.post("", response_model=BookingReceipt, status_code=201)
def create_booking(
    request: BookingCreate,
    session: Session = Depends(get_session),
    schedule: ScheduleConfig = Depends(get_schedule),
    salon: SalonSettings = Depends(get_salon_settings),
    now: datetime = Depends(get_now),
):
    _check_staff_exists(session, request.staff_id)

    candidate = BookingCandidate(
        date=request.date,
        start_time=request.time,
        service_ids=request.service_ids,
        staff_id=request.staff_id,
    )

    # the slot list the customer saw may be stale, check again against the database
    existing = load_bookings(session, request.date)
    try:
        draft = validate_and_build_booking(candidate, existing, schedule, now=now)
    except BookingRejected as exc:
        logger.info("Booking request rejected: %s (%s)", exc.code, exc.message)
        raise exc.to_http_exception()

    client = _find_or_create_client(session, request.client_name, request.client_phone, request.client_email)

    db_booking = Booking(
        client_id=client.id,
        staff_id=draft.staff_id,
        service_ids=list(draft.service_ids),
        date=draft.date,
        start_time=draft.start_time,
        end_time=draft.end_time,
        status=draft.status.value,
        notes=request.notes,
    )
    session.add(db_booking)
    session.commit()
    session.refresh(db_booking)  # fills db_booking.id
    session.refresh(client)
    logger.info(
        "Booking %s created for %s %s-%s (staff %s)",
        db_booking.id, db_booking.date, db_booking.start_time, db_booking.end_time, db_booking.staff_id,
    )

    message = whatsapp.salon_request_message(
        db_booking, client, _service_names(session, db_booking.service_ids), salon
    )
    return BookingReceipt(
        **BookingPublic.model_validate(db_booking, from_attributes=True).model_dump(),
        whatsapp_link=whatsapp.build_link(salon.whatsapp_number, message),
    )


@router.get("", response_model=List[BookingPublic])
def list_bookings(
    on_date: Optional[date] = None,
    status: Optional[BookingStatus] = None,
    staff_id: Optional[int] = None,
    client_id: Optional[int] = None,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")

    stmt = select(Booking)
    if on_date is not None:
        stmt = stmt.where(Booking.date == on_date)
    if status is not None:
        stmt = stmt.where(Booking.status == status.value)
    if staff_id is not None:
        stmt = stmt.where(Booking.staff_id == staff_id)
    if client_id is not None:
        stmt = stmt.where(Booking.client_id == client_id)

    stmt = stmt.order_by(Booking.date.desc(), Booking.start_time)
    return session.exec(stmt).all()


@router.get("/{booking_id}", response_model=BookingPublic)
def get_booking(
    booking_id: int,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")
    return _get_booking_or_404(session, booking_id)


@router.put("/{booking_id}", response_model=BookingPublic)
def reschedule_booking(
    booking_id: int,
    changes: BookingUpdate,
    session: Session = Depends(get_session),
    schedule: ScheduleConfig = Depends(get_schedule),
    now: datetime = Depends(get_now),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")
    db_booking = _get_booking_or_404(session, booking_id)

    if not _moves_booking(db_booking, changes):
        # notes only, nothing to re-check against the calendar
        if changes.notes is not None:
            db_booking.notes = changes.notes
            session.add(db_booking)
            session.commit()
            session.refresh(db_booking)
        return db_booking

    if db_booking.status not in OPEN_STATUSES:
        raise HTTPException(status_code=409, detail=f"A {db_booking.status} booking cannot be rescheduled")

    staff_id = changes.staff_id if changes.staff_id is not None else db_booking.staff_id
    _check_staff_exists(session, staff_id)

    candidate = BookingCandidate(
        date=changes.date or db_booking.date,
        start_time=changes.start_time or db_booking.start_time,
        service_ids=changes.service_ids if changes.service_ids is not None else db_booking.service_ids,
        staff_id=staff_id,
    )

    # the booking being moved must not collide with itself
    existing = load_bookings(session, candidate.date, exclude_id=db_booking.id)
    try:
        draft = validate_and_build_booking(candidate, existing, schedule, now=now)
    except BookingRejected as exc:
        logger.info("Reschedule of booking %s rejected: %s", booking_id, exc.code)
        raise exc.to_http_exception()

    db_booking.staff_id = draft.staff_id
    db_booking.service_ids = list(draft.service_ids)
    db_booking.date = draft.date
    db_booking.start_time = draft.start_time
    db_booking.end_time = draft.end_time
    if changes.notes is not None:
        db_booking.notes = changes.notes

    session.add(db_booking)
    session.commit()
    session.refresh(db_booking)
    logger.info("Booking %s moved to %s %s", booking_id, db_booking.date, db_booking.start_time)
    return db_booking


@router.patch("/{booking_id}/status", response_model=BookingPublic)
def update_booking_status(
    booking_id: int,
    update: BookingStatusUpdate,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")
    db_booking = _get_booking_or_404(session, booking_id)

    try:
        new_status = transition(db_booking.status, update.status, strict=settings.strict_status_transitions)
    except InvalidStatusTransition as exc:
        raise exc.to_http_exception()

    logger.info("Booking %s status %s -> %s", booking_id, db_booking.status, new_status.value)
    db_booking.status = new_status.value
    session.add(db_booking)
    session.commit()
    session.refresh(db_booking)
    return db_booking


@router.delete("/{booking_id}", status_code=204)
def delete_booking(
    booking_id: int,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")
    db_booking = _get_booking_or_404(session, booking_id)

    session.delete(db_booking)
    session.commit()
    logger.info("Booking %s deleted", booking_id)


@router.get("/{booking_id}/whatsapp", response_model=WhatsAppLink)
def booking_whatsapp_link(
    booking_id: int,
    kind: str = "confirmation",
    session: Session = Depends(get_session),
    salon: SalonSettings = Depends(get_salon_settings),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")
    db_booking = _get_booking_or_404(session, booking_id)

    client = session.get(Client, db_booking.client_id) if db_booking.client_id is not None else None
    if client is None:
        raise HTTPException(status_code=404, detail="Booking has no client to message")

    if kind == "confirmation":
        duration = to_minutes(db_booking.end_time) - to_minutes(db_booking.start_time)
        phone, message = client.phone, whatsapp.confirmation_message(db_booking, client, duration, salon)
    elif kind == "cancellation":
        phone, message = client.phone, whatsapp.cancellation_message(db_booking, client, salon)
    elif kind == "request":
        names = _service_names(session, db_booking.service_ids)
        phone, message = salon.whatsapp_number, whatsapp.salon_request_message(db_booking, client, names, salon)
    else:
        raise HTTPException(status_code=422, detail="kind must be 'confirmation', 'cancellation' or 'request'")

    return {
        "phone": whatsapp.format_phone(phone),
        "message": message,
        "link": whatsapp.build_link(phone, message),
    }
