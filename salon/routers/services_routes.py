# salon/routers/services_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from salon.db import get_session
from salon.models import Service
from salon.schemas import ServiceCreate, ServicePublic, ServiceUpdate
from salon.auth import get_current_user
from salon.deps import require_role

router = APIRouter(
    prefix="/services",
    tags=["services"],
)


@router.get("", response_model=List[ServicePublic])
def list_services(
    include_inactive: bool = False,
    category: Optional[str] = None,
    session: Session = Depends(get_session),
):
    stmt = select(Service)
    if not include_inactive:
        stmt = stmt.where(Service.active == True)  # noqa: E712
    if category is not None:
        stmt = stmt.where(Service.category == category)
    return session.exec(stmt.order_by(Service.id)).all()


@router.get("/{service_id}", response_model=ServicePublic)
def get_service(service_id: int, session: Session = Depends(get_session)):
    service = session.get(Service, service_id)
    if service is None:
        raise HTTPException(status_code=404, detail="Service not found")
    return service


@router.post("", response_model=ServicePublic, status_code=201)
def create_service(
    service: ServiceCreate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")

    db_service = Service(**service.model_dump())
    session.add(db_service)
    session.commit()
    session.refresh(db_service)
    return db_service


@router.put("/{service_id}", response_model=ServicePublic)
def update_service(
    service_id: int,
    changes: ServiceUpdate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")

    db_service = session.get(Service, service_id)
    if db_service is None:
        raise HTTPException(status_code=404, detail="Service not found")

    for field, value in changes.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(db_service, field, value)

    session.add(db_service)
    session.commit()
    session.refresh(db_service)
    return db_service


@router.delete("/{service_id}", status_code=204)
def delete_service(
    service_id: int,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")

    db_service = session.get(Service, service_id)
    if db_service is None:
        raise HTTPException(status_code=404, detail="Service not found")

    session.delete(db_service)
    session.commit()
