# salon/routers/settings_routes.py

from datetime import datetime

from fastapi import APIRouter, Depends
from sqlmodel import Session, select, func

from salon.db import get_session
from salon.models import Booking, Client, SalonSettings
from salon.schemas import DashboardStats, SettingsPublic, SettingsUpdate, dump_hours
from salon.auth import get_current_user
from salon.deps import get_now, get_salon_settings, require_role
from salon.scheduling import BookingStatus

router = APIRouter(
    tags=["settings"],
)


@router.get("/settings", response_model=SettingsPublic)
def read_settings(salon: SalonSettings = Depends(get_salon_settings)):
    return salon


@router.put("/settings", response_model=SettingsPublic)
def update_settings(
    changes: SettingsUpdate,
    session: Session = Depends(get_session),
    salon: SalonSettings = Depends(get_salon_settings),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")

    values = changes.model_dump(exclude_unset=True, exclude_none=True)
    if changes.business_hours is not None:
        values["business_hours"] = dump_hours(changes.business_hours)
    for field, value in values.items():
        setattr(salon, field, value)

    session.add(salon)
    session.commit()
    session.refresh(salon)
    return salon


def _count(session: Session, stmt) -> int:
    return session.exec(stmt).one()


@router.get("/dashboard", response_model=DashboardStats)
def dashboard(
    session: Session = Depends(get_session),
    now: datetime = Depends(get_now),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")

    bookings = select(func.count()).select_from(Booking)
    month_start = datetime(now.year, now.month, 1)
    clients = session.exec(select(Client)).all()

    return {
        "total_bookings": _count(session, bookings),
        "pending_bookings": _count(session, bookings.where(Booking.status == BookingStatus.pending.value)),
        "confirmed_bookings": _count(session, bookings.where(Booking.status == BookingStatus.confirmed.value)),
        "completed_bookings": _count(session, bookings.where(Booking.status == BookingStatus.completed.value)),
        "bookings_today": _count(session, bookings.where(Booking.date == now.date())),
        "total_clients": len(clients),
        "vip_clients": sum(1 for c in clients if "VIP" in (c.tags or [])),
        "new_clients_this_month": sum(1 for c in clients if c.created_at >= month_start),
    }
