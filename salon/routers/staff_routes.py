# salon/routers/staff_routes.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session, select

from salon.db import get_session
from salon.models import Service, Staff
from salon.schemas import StaffCreate, StaffPublic, StaffUpdate, dump_hours
from salon.auth import get_current_user
from salon.deps import require_role
from salon.snapshots import to_staff_member
from salon.scheduling import staff_for_services

router = APIRouter(
    prefix="/staff",
    tags=["staff"],
)


def _check_services_exist(session: Session, service_ids: List[int]):
    for service_id in service_ids:
        if session.get(Service, service_id) is None:
            raise HTTPException(status_code=422, detail=f"Service {service_id} does not exist")


@router.get("", response_model=List[StaffPublic])
def list_staff(
    service_ids: List[int] = Query(default=[]),
    session: Session = Depends(get_session),
):
    staff = session.exec(select(Staff).order_by(Staff.id)).all()
    if not service_ids:
        return staff

    # only stylists who can do every selected service
    capable = {m.id for m in staff_for_services([to_staff_member(s) for s in staff], service_ids)}
    return [s for s in staff if s.id in capable]


@router.get("/{staff_id}", response_model=StaffPublic)
def get_staff(staff_id: int, session: Session = Depends(get_session)):
    member = session.get(Staff, staff_id)
    if member is None:
        raise HTTPException(status_code=404, detail="Staff member not found")
    return member


@router.post("", response_model=StaffPublic, status_code=201)
def create_staff(
    staff: StaffCreate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")
    _check_services_exist(session, staff.services_offered)

    db_staff = Staff(
        name=staff.name,
        title=staff.title,
        bio=staff.bio,
        avatar=staff.avatar,
        working_hours=dump_hours(staff.working_hours),
        services_offered=staff.services_offered,
    )
    session.add(db_staff)
    session.commit()
    session.refresh(db_staff)
    return db_staff


@router.put("/{staff_id}", response_model=StaffPublic)
def update_staff(
    staff_id: int,
    changes: StaffUpdate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")

    db_staff = session.get(Staff, staff_id)
    if db_staff is None:
        raise HTTPException(status_code=404, detail="Staff member not found")

    for field in ("name", "title", "bio", "avatar"):
        value = getattr(changes, field)
        if value is not None:
            setattr(db_staff, field, value)

    # JSON columns are replaced wholesale so the change is tracked
    if changes.working_hours is not None:
        db_staff.working_hours = dump_hours(changes.working_hours)
    if changes.services_offered is not None:
        _check_services_exist(session, changes.services_offered)
        db_staff.services_offered = list(changes.services_offered)

    session.add(db_staff)
    session.commit()
    session.refresh(db_staff)
    return db_staff


@router.delete("/{staff_id}", status_code=204)
def delete_staff(
    staff_id: int,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_role(current_user, "admin")

    db_staff = session.get(Staff, staff_id)
    if db_staff is None:
        raise HTTPException(status_code=404, detail="Staff member not found")

    session.delete(db_staff)
    session.commit()
