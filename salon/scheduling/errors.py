# salon/scheduling/errors.py
"""
Rejections raised by the booking validator and the status machine.

None of these are crashes: each one maps to a plain message the customer or
admin can act on (pick another time, fix the selection, ...).
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException


class DomainException(Exception):
    """Base class carrying a stable code, a user-facing message and an HTTP status."""

    status_code = 422
    default_message = "Request could not be processed"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message or self.default_message
        self.code = self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_http_exception(self) -> HTTPException:
        detail: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            detail["details"] = self.details
        return HTTPException(status_code=self.status_code, detail=detail)


class BookingRejected(DomainException):
    default_message = "Booking could not be created"


class InvalidServiceSelection(BookingRejected):
    default_message = "Please select at least one available service"


class ClosedOnDate(BookingRejected):
    default_message = "The salon is closed on this date"


class OutsideWorkingHours(BookingRejected):
    default_message = "The appointment must fit within working hours"


class SlotInPast(BookingRejected):
    default_message = "Cannot book an appointment in the past"


class SlotNoLongerAvailable(BookingRejected):
    status_code = 409
    default_message = "This time is no longer available, please pick another"


class InvalidStatusTransition(DomainException):
    status_code = 409
    default_message = "Booking status cannot be changed this way"
