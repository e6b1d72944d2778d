# salon/scheduling/slots.py

from typing import List, Optional

from salon.core import format_minutes
from salon.scheduling.types import Slot, WorkingWindow


def generate_slots(
    window: Optional[WorkingWindow],
    duration_minutes: int,
    step_minutes: int = 30,
) -> List[Slot]:
    """
    Enumerate candidate start times inside ``window``.

    The first slot starts at the window start, the last one is the latest
    start that still ends by the window end. Every slot comes back marked
    available; collisions are applied later by ``filter_available``.
    """
    if window is None or duration_minutes <= 0 or step_minutes <= 0:
        return []

    slots = []
    current = window.start_minutes
    last_start = window.end_minutes - duration_minutes
    while current <= last_start:
        slots.append(Slot(time=format_minutes(current), available=True))
        current += step_minutes
    return slots
