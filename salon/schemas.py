# salon/schemas.py

from datetime import date as Date, datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .core import is_hhmm
from .scheduling import BookingStatus, Slot, WorkingWindow
from .scheduling.types import check_weekly_schedule

WorkingHours = Dict[str, Optional[WorkingWindow]]


def _check_time(value: str) -> str:
    if not is_hhmm(value):
        raise ValueError("time must be a 24-hour HH:MM string")
    return value


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class PinLogin(BaseModel):
    pin: str = Field(min_length=4, max_length=32)


class PinChange(BaseModel):
    current_pin: str
    new_pin: str = Field(min_length=4, max_length=32)


# Services

class ServiceCreate(BaseModel):
    name: str = Field(min_length=1)
    category: str = "styling"
    duration_minutes: int = Field(gt=0, le=12 * 60)
    price: float = Field(default=0, ge=0)
    description: str = ""
    active: bool = True


class ServiceUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = None
    duration_minutes: Optional[int] = Field(default=None, gt=0, le=12 * 60)
    price: Optional[float] = Field(default=None, ge=0)
    description: Optional[str] = None
    active: Optional[bool] = None


class ServicePublic(BaseModel):
    id: int
    name: str
    category: str
    duration_minutes: int
    price: float
    description: str
    active: bool


# Staff

class StaffCreate(BaseModel):
    name: str = Field(min_length=1)
    title: str = ""
    bio: str = ""
    avatar: str = ""
    working_hours: WorkingHours = Field(default_factory=dict)
    services_offered: List[int] = Field(default_factory=list)

    @field_validator("working_hours")
    @classmethod
    def check_hours(cls, value: WorkingHours) -> WorkingHours:
        return check_weekly_schedule(value)


class StaffUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    title: Optional[str] = None
    bio: Optional[str] = None
    avatar: Optional[str] = None
    working_hours: Optional[WorkingHours] = None
    services_offered: Optional[List[int]] = None

    @field_validator("working_hours")
    @classmethod
    def check_hours(cls, value: Optional[WorkingHours]) -> Optional[WorkingHours]:
        return value if value is None else check_weekly_schedule(value)


class StaffPublic(BaseModel):
    id: int
    name: str
    title: str
    bio: str
    avatar: str
    working_hours: WorkingHours
    services_offered: List[int]


# Clients

class ClientCreate(BaseModel):
    name: str = Field(min_length=1)
    phone: str = Field(min_length=5)
    email: str = ""
    notes: str = ""
    tags: List[str] = Field(default_factory=list)


class ClientUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = Field(default=None, min_length=5)
    email: Optional[str] = None
    notes: Optional[str] = None
    tags: Optional[List[str]] = None


class ClientPublic(BaseModel):
    id: int
    name: str
    phone: str
    email: str
    notes: str
    tags: List[str]
    created_at: datetime


# Bookings

class BookingCreate(BaseModel):
    """What the customer submits from the booking page."""

    service_ids: List[int]
    staff_id: Optional[int] = None
    date: Date
    time: str
    client_name: str = Field(min_length=1)
    client_phone: str = Field(min_length=5)
    client_email: str = ""
    notes: str = ""

    @field_validator("time")
    @classmethod
    def check_time(cls, value: str) -> str:
        return _check_time(value)


class BookingUpdate(BaseModel):
    """Admin reschedule; omitted fields keep their current value."""

    service_ids: Optional[List[int]] = None
    staff_id: Optional[int] = None
    date: Optional[Date] = None
    start_time: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("start_time")
    @classmethod
    def check_start(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else _check_time(value)


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class BookingPublic(BaseModel):
    id: int
    client_id: Optional[int]
    staff_id: Optional[int]
    service_ids: List[int]
    date: Date
    start_time: str
    end_time: str
    status: BookingStatus
    notes: str
    created_at: datetime


class BookingReceipt(BookingPublic):
    """Returned to the customer: the booking plus a link to message the salon."""

    whatsapp_link: str


class WhatsAppLink(BaseModel):
    phone: str
    message: str
    link: str


# Availability

class AvailabilityResponse(BaseModel):
    date: Date
    staff_id: Optional[int]
    duration_minutes: int
    slots: List[Slot]


class OpenDaysResponse(BaseModel):
    start: Date
    end: Date
    staff_id: Optional[int]
    open_days: List[Date]


class BlockedDateCreate(BaseModel):
    date: Date
    reason: str = "Day Off"


class BlockedDatePublic(BaseModel):
    id: int
    date: Date
    reason: str


# Settings

class SettingsPublic(BaseModel):
    name: str
    address: str
    phone: str
    email: str
    whatsapp_number: str
    instagram_handle: str
    business_hours: WorkingHours
    whatsapp_template: str
    slot_duration_minutes: int
    slot_step_minutes: int


class SettingsUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    whatsapp_number: Optional[str] = None
    instagram_handle: Optional[str] = None
    business_hours: Optional[WorkingHours] = None
    whatsapp_template: Optional[str] = None
    slot_duration_minutes: Optional[int] = Field(default=None, gt=0, le=12 * 60)
    slot_step_minutes: Optional[int] = Field(default=None, gt=0, le=12 * 60)

    @field_validator("business_hours")
    @classmethod
    def check_hours(cls, value: Optional[WorkingHours]) -> Optional[WorkingHours]:
        return value if value is None else check_weekly_schedule(value)


class DashboardStats(BaseModel):
    total_bookings: int
    pending_bookings: int
    confirmed_bookings: int
    completed_bookings: int
    bookings_today: int
    total_clients: int
    vip_clients: int
    new_clients_this_month: int


def dump_hours(hours: WorkingHours) -> Dict[str, Optional[Dict[str, str]]]:
    """Plain-JSON form of a weekly schedule, for the JSON columns."""
    return {day: (window.model_dump() if window is not None else None) for day, window in hours.items()}
