# salon/scheduling/status.py

from typing import Dict, FrozenSet, Union

from salon.scheduling.errors import InvalidStatusTransition
from salon.scheduling.types import BookingStatus

ALLOWED_TRANSITIONS: Dict[BookingStatus, FrozenSet[BookingStatus]] = {
    BookingStatus.pending: frozenset({BookingStatus.confirmed, BookingStatus.cancelled}),
    BookingStatus.confirmed: frozenset(
        {BookingStatus.completed, BookingStatus.no_show, BookingStatus.cancelled}
    ),
    BookingStatus.completed: frozenset(),
    BookingStatus.cancelled: frozenset(),
    BookingStatus.no_show: frozenset(),
}


def can_transition(current: BookingStatus, target: BookingStatus) -> bool:
    return target in ALLOWED_TRANSITIONS[current]


def transition(
    current: Union[BookingStatus, str],
    target: Union[BookingStatus, str],
    strict: bool = True,
) -> BookingStatus:
    """
    Return the booking's next status, or raise InvalidStatusTransition.

    With ``strict=False`` any status may be set from any other, which is how
    the admin panel used to behave.
    """
    current = BookingStatus(current)
    target = BookingStatus(target)
    if strict and not can_transition(current, target):
        raise InvalidStatusTransition(
            f"Cannot change a {current.value} booking to {target.value}",
            details={"from": current.value, "to": target.value},
        )
    return target
