# salon/scheduling/types.py

from datetime import date as Date
from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from salon.core import WEEKDAYS, is_hhmm, to_minutes

Id = Union[int, str]


class BookingStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    completed = "completed"
    cancelled = "cancelled"
    no_show = "no-show"


class WorkingWindow(BaseModel):
    """Opening window of one day. ``None`` in a schedule means closed."""

    model_config = ConfigDict(frozen=True)

    start: str
    end: str

    @field_validator("start", "end")
    @classmethod
    def check_format(cls, value: str) -> str:
        if not is_hhmm(value):
            raise ValueError("must be a 24-hour HH:MM time")
        return value

    @model_validator(mode="after")
    def check_order(self) -> "WorkingWindow":
        if to_minutes(self.start) >= to_minutes(self.end):
            raise ValueError("start must be before end")
        return self

    @property
    def start_minutes(self) -> int:
        return to_minutes(self.start)

    @property
    def end_minutes(self) -> int:
        return to_minutes(self.end)


WeeklySchedule = Dict[str, Optional[WorkingWindow]]


def check_weekly_schedule(schedule: WeeklySchedule) -> WeeklySchedule:
    unknown = set(schedule) - set(WEEKDAYS)
    if unknown:
        raise ValueError(f"unknown weekday(s): {', '.join(sorted(unknown))}")
    return schedule


class ServiceInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Id
    duration_minutes: int = Field(gt=0)
    active: bool = True


class StaffMember(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Id
    working_hours: WeeklySchedule = Field(default_factory=dict)
    services_offered: List[Id] = Field(default_factory=list)

    @field_validator("working_hours")
    @classmethod
    def check_hours(cls, value: WeeklySchedule) -> WeeklySchedule:
        return check_weekly_schedule(value)


class BookingRecord(BaseModel):
    """An existing booking as seen by the scheduling functions."""

    model_config = ConfigDict(frozen=True)

    id: Optional[Id] = None
    staff_id: Optional[Id] = None
    service_ids: List[Id] = Field(default_factory=list)
    date: Date
    start_time: str
    end_time: str
    status: BookingStatus = BookingStatus.pending


class BookingDraft(BaseModel):
    """A validated booking, not yet persisted (no id, no timestamp)."""

    staff_id: Optional[Id] = None
    service_ids: List[Id]
    date: Date
    start_time: str
    end_time: str
    duration_minutes: int
    status: BookingStatus = BookingStatus.pending


class BookingCandidate(BaseModel):
    date: Date
    start_time: str
    service_ids: List[Id] = Field(default_factory=list)
    staff_id: Optional[Id] = None


class Slot(BaseModel):
    time: str
    available: bool = True


class BlockedDate(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: Date
    reason: str = "Day Off"


class ScheduleConfig(BaseModel):
    """Snapshot of everything the scheduling functions need to know."""

    model_config = ConfigDict(frozen=True)

    business_hours: WeeklySchedule = Field(default_factory=dict)
    staff: List[StaffMember] = Field(default_factory=list)
    services: List[ServiceInfo] = Field(default_factory=list)
    blocked_dates: List[BlockedDate] = Field(default_factory=list)
    slot_step_minutes: int = Field(default=30, gt=0)
    default_duration_minutes: int = Field(default=30, gt=0)

    @field_validator("business_hours")
    @classmethod
    def check_hours(cls, value: WeeklySchedule) -> WeeklySchedule:
        return check_weekly_schedule(value)

    def staff_by_id(self, staff_id: Id) -> Optional[StaffMember]:
        for member in self.staff:
            if member.id == staff_id:
                return member
        return None

    def service_by_id(self, service_id: Id) -> Optional[ServiceInfo]:
        for service in self.services:
            if service.id == service_id:
                return service
        return None

    def is_blocked(self, on_date: Date) -> bool:
        return any(b.date == on_date for b in self.blocked_dates)
