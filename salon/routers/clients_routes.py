# salon/routers/clients_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select, or_

from salon.db import get_session
from salon.models import Booking, Client
from salon.schemas import BookingPublic, ClientCreate, ClientPublic, ClientUpdate
from salon.auth import get_current_user
from salon.deps import require_role

VIP_TAG = "VIP"

router = APIRouter(
    prefix="/clients",
    tags=["clients"],
)


def _get_client_or_404(session: Session, client_id: int) -> Client:
    client = session.get(Client, client_id)
    if client is None:
        raise HTTPException(status_code=404, detail="Client not found")
    return client


@router.get("", response_model=List[ClientPublic])
def list_clients(
    q: Optional[str] = None,
    tag: Optional[str] = None,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")

    stmt = select(Client)
    if q:
        pattern = f"%{q}%"
        stmt = stmt.where(or_(Client.name.ilike(pattern), Client.phone.ilike(pattern), Client.email.ilike(pattern)))
    clients = session.exec(stmt.order_by(Client.name)).all()

    # tags live in a JSON column, filter in Python
    if tag is not None:
        clients = [c for c in clients if tag in (c.tags or [])]
    return clients


@router.get("/{client_id}", response_model=ClientPublic)
def get_client(
    client_id: int,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")
    return _get_client_or_404(session, client_id)


@router.get("/{client_id}/bookings", response_model=List[BookingPublic])
def list_client_bookings(
    client_id: int,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")
    _get_client_or_404(session, client_id)

    stmt = (
        select(Booking)
        .where(Booking.client_id == client_id)
        .order_by(Booking.date.desc(), Booking.start_time)
    )
    return session.exec(stmt).all()


@router.post("", response_model=ClientPublic, status_code=201)
def create_client(
    client: ClientCreate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")

    existing = session.exec(select(Client).where(Client.phone == client.phone)).first()
    if existing is not None:
        raise HTTPException(status_code=409, detail="A client with this phone number already exists")

    db_client = Client(**client.model_dump())
    session.add(db_client)
    session.commit()
    session.refresh(db_client)
    return db_client


@router.put("/{client_id}", response_model=ClientPublic)
def update_client(
    client_id: int,
    changes: ClientUpdate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")
    db_client = _get_client_or_404(session, client_id)

    for field, value in changes.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(db_client, field, value)

    session.add(db_client)
    session.commit()
    session.refresh(db_client)
    return db_client


@router.patch("/{client_id}/vip", response_model=ClientPublic)
def toggle_vip(
    client_id: int,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")
    db_client = _get_client_or_404(session, client_id)

    tags = list(db_client.tags or [])
    if VIP_TAG in tags:
        tags.remove(VIP_TAG)
    else:
        tags.append(VIP_TAG)
    db_client.tags = tags

    session.add(db_client)
    session.commit()
    session.refresh(db_client)
    return db_client


@router.delete("/{client_id}", status_code=204)
def delete_client(
    client_id: int,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")
    db_client = _get_client_or_404(session, client_id)

    session.delete(db_client)
    session.commit()
