# salon/routers/availability_routes.py

import logging
from datetime import date, datetime, timedelta
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from salon.db import get_session
from salon.models import BlockedDate, Staff
from salon.schemas import AvailabilityResponse, BlockedDateCreate, BlockedDatePublic, OpenDaysResponse
from salon.auth import get_current_user
from salon.deps import get_now, get_schedule, require_role
from salon.snapshots import load_bookings
from salon.scheduling import ScheduleConfig, booking_duration, compute_availability, open_days

logger = logging.getLogger(__name__)

# the booking calendar never asks for more than a couple of months at once
MAX_RANGE_DAYS = 92

router = APIRouter(
    prefix="/availability",
    tags=["availability"],
)


@router.get("", response_model=AvailabilityResponse)
def get_availability(
    date: date,
    staff_id: Optional[int] = None,
    service_ids: List[int] = Query(default=[]),
    session: Session = Depends(get_session),
    schedule: ScheduleConfig = Depends(get_schedule),
    now: datetime = Depends(get_now),
):
    if staff_id is not None and session.get(Staff, staff_id) is None:
        raise HTTPException(status_code=404, detail="Staff member not found")

    bookings = load_bookings(session, date)
    slots = compute_availability(schedule, bookings, date, service_ids, staff_id, now=now)

    return {
        "date": date,
        "staff_id": staff_id,
        "duration_minutes": booking_duration(schedule, service_ids),
        "slots": slots,
    }


@router.get("/days", response_model=OpenDaysResponse)
def get_open_days(
    start: date,
    end: date,
    staff_id: Optional[int] = None,
    session: Session = Depends(get_session),
    schedule: ScheduleConfig = Depends(get_schedule),
):
    if end < start:
        raise HTTPException(status_code=422, detail="end must not be before start")
    if end - start > timedelta(days=MAX_RANGE_DAYS):
        raise HTTPException(status_code=422, detail=f"Range cannot exceed {MAX_RANGE_DAYS} days")
    if staff_id is not None and session.get(Staff, staff_id) is None:
        raise HTTPException(status_code=404, detail="Staff member not found")

    return {
        "start": start,
        "end": end,
        "staff_id": staff_id,
        "open_days": open_days(schedule, start, end, staff_id),
    }


@router.get("/blocked-dates", response_model=List[BlockedDatePublic])
def list_blocked_dates(session: Session = Depends(get_session)):
    return session.exec(select(BlockedDate).order_by(BlockedDate.date)).all()


@router.post("/blocked-dates", response_model=BlockedDatePublic, status_code=201)
def block_date(
    block: BlockedDateCreate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")

    db_block = BlockedDate(date=block.date, reason=block.reason or "Day Off")
    session.add(db_block)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise HTTPException(status_code=409, detail="Date is already blocked")

    session.refresh(db_block)
    logger.info("Blocked %s (%s)", db_block.date, db_block.reason)
    return db_block


@router.delete("/blocked-dates/{block_id}", status_code=204)
def unblock_date(
    block_id: int,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")

    db_block = session.get(BlockedDate, block_id)
    if db_block is None:
        raise HTTPException(status_code=404, detail="Blocked date not found")

    session.delete(db_block)
    session.commit()
