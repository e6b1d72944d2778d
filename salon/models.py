# salon/models.py

from typing import Optional, List, Dict
from datetime import datetime, date as Date

from sqlalchemy.types import JSON
from sqlmodel import SQLModel, Field, Column


class Service(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    name: str
    category: str = "styling"
    duration_minutes: int
    price: float = 0
    description: str = ""
    active: bool = True


class Staff(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    name: str
    title: str = ""
    bio: str = ""
    avatar: str = ""
    # weekday name -> {"start": "HH:MM", "end": "HH:MM"} or null for a day off
    working_hours: Dict[str, Optional[Dict[str, str]]] = Field(default_factory=dict, sa_column=Column(JSON))
    services_offered: List[int] = Field(default_factory=list, sa_column=Column(JSON))


class Client(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    name: str
    phone: str = Field(index=True)
    email: str = ""
    notes: str = ""
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    created_at: datetime = Field(default_factory=datetime.now)


class Booking(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    client_id: Optional[int] = Field(default=None, index=True)
    staff_id: Optional[int] = Field(default=None, index=True)
    service_ids: List[int] = Field(default_factory=list, sa_column=Column(JSON))
    date: Date = Field(index=True)
    start_time: str  # HH:MM
    end_time: str  # HH:MM
    status: str = "pending"  # pending, confirmed, completed, cancelled or no-show
    notes: str = ""
    created_at: datetime = Field(default_factory=datetime.now)


class BlockedDate(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    date: Date = Field(index=True, unique=True)
    reason: str = "Day Off"


class SalonSettings(SQLModel, table=True):
    # single row, id is always 1
    id: Optional[int] = Field(default=1, primary_key=True)

    name: str
    address: str = ""
    phone: str = ""
    email: str = ""
    whatsapp_number: str = ""
    instagram_handle: str = ""
    business_hours: Dict[str, Optional[Dict[str, str]]] = Field(default_factory=dict, sa_column=Column(JSON))
    whatsapp_template: str = ""
    admin_pin_hash: str
    slot_duration_minutes: int = 30
    slot_step_minutes: int = 30
