# salon/deps.py

from datetime import datetime

from fastapi import Depends, HTTPException
from sqlmodel import Session

from .config import Settings, get_settings
from .db import get_session
from .models import SalonSettings
from .scheduling import ScheduleConfig
from .snapshots import load_schedule


def require_role(user: dict, role: str):
    if user["role"] != role:
        raise HTTPException(status_code=403, detail="Forbidden")


def get_now() -> datetime:
    # naive local time, the salon runs in a single timezone
    return datetime.now()


def get_salon_settings(session: Session = Depends(get_session)) -> SalonSettings:
    salon = session.get(SalonSettings, 1)
    if salon is None:
        raise HTTPException(status_code=503, detail="Salon settings have not been initialised")
    return salon


def get_schedule(
    session: Session = Depends(get_session),
    salon: SalonSettings = Depends(get_salon_settings),
) -> ScheduleConfig:
    return load_schedule(session, salon)


def get_app_settings() -> Settings:
    return get_settings()
