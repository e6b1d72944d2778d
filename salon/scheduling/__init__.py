"""
Scheduling core.

Pure functions over in-memory snapshots:
- resolver.py: which window a day (and staff member) is open
- slots.py: candidate start times inside a window
- availability.py: collisions and past-time exclusion
- validator.py: final check and construction of a new booking
- status.py: allowed booking status changes
"""

from salon.scheduling.availability import booking_duration, compute_availability, filter_available
from salon.scheduling.errors import (
    BookingRejected,
    ClosedOnDate,
    DomainException,
    InvalidServiceSelection,
    InvalidStatusTransition,
    OutsideWorkingHours,
    SlotInPast,
    SlotNoLongerAvailable,
)
from salon.scheduling.resolver import is_day_open, open_days, resolve_window, staff_for_services
from salon.scheduling.slots import generate_slots
from salon.scheduling.status import transition
from salon.scheduling.types import (
    BlockedDate,
    BookingCandidate,
    BookingDraft,
    BookingRecord,
    BookingStatus,
    ScheduleConfig,
    ServiceInfo,
    Slot,
    StaffMember,
    WorkingWindow,
)
from salon.scheduling.validator import validate_and_build_booking
