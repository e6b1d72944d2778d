# salon/routers/auth_routes.py

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from salon.db import get_session
from salon.models import SalonSettings
from salon.schemas import PinChange, PinLogin, Token
from salon.auth import ADMIN_SUBJECT, create_access_token, get_current_user, hash_password, verify_password
from salon.deps import get_salon_settings, require_role

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
)


@router.post("/login", response_model=Token)
def login(
    form: PinLogin,
    salon: SalonSettings = Depends(get_salon_settings),
):
    if not verify_password(form.pin, salon.admin_pin_hash):
        logger.warning("Rejected admin login with an invalid PIN")
        raise HTTPException(status_code=401, detail="Invalid PIN")

    token = create_access_token({"sub": ADMIN_SUBJECT, "role": "admin"})
    return {"access_token": token, "token_type": "bearer"}


@router.put("/pin", status_code=204)
def change_pin(
    change: PinChange,
    session: Session = Depends(get_session),
    salon: SalonSettings = Depends(get_salon_settings),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")

    if not verify_password(change.current_pin, salon.admin_pin_hash):
        raise HTTPException(status_code=401, detail="Invalid PIN")

    salon.admin_pin_hash = hash_password(change.new_pin)
    session.add(salon)
    session.commit()
    logger.info("Admin PIN changed")
