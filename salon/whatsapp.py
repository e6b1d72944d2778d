# salon/whatsapp.py
"""
wa.me deep links for booking messages.

Nothing is sent from the server: the admin (or customer) opens the link
and WhatsApp pre-fills the message.
"""

import re
from datetime import date
from typing import Iterable
from urllib.parse import quote

from .models import Booking, Client, SalonSettings

WA_BASE_URL = "https://wa.me/"

TEMPLATE_FIELDS = ("clientName", "serviceName", "date", "time", "id")


def format_phone(phone: str) -> str:
    """Digits only; wa.me wants the international number without '+'."""
    return re.sub(r"\D", "", phone or "")


def build_link(phone: str, message: str) -> str:
    return f"{WA_BASE_URL}{format_phone(phone)}?text={quote(message, safe='')}"


def render_template(template: str, **values: str) -> str:
    # str.format would choke on any other braces the admin types
    message = template
    for field in TEMPLATE_FIELDS:
        message = message.replace("{" + field + "}", str(values.get(field, "")))
    return message


def _long_date(on_date: date) -> str:
    return f"{on_date.strftime('%A, %B')} {on_date.day}, {on_date.year}"


def salon_request_message(booking: Booking, client: Client, service_names: Iterable[str], salon: SalonSettings) -> str:
    return render_template(
        salon.whatsapp_template,
        clientName=client.name if client else "Guest",
        serviceName=", ".join(service_names) or "Appointment",
        date=booking.date.isoformat(),
        time=booking.start_time,
        id=str(booking.id),
    )


def confirmation_message(booking: Booking, client: Client, duration_minutes: int, salon: SalonSettings) -> str:
    hours, minutes = divmod(duration_minutes, 60)
    if minutes:
        duration = f"{hours}h {minutes:02d}m"
    else:
        duration = f"{hours} hour" + ("" if hours == 1 else "s")
    return (
        f"Hi {client.name}!\n\n"
        f"Your appointment at {salon.name} is *CONFIRMED*!\n\n"
        f"Date: {_long_date(booking.date)}\n"
        f"Time: {booking.start_time}\n"
        f"Duration: {duration}\n\n"
        f"Location: {salon.address}\n\n"
        "We look forward to seeing you! If you need to reschedule, please contact us "
        "at least 24 hours in advance.\n\n"
        f"- {salon.name} Team"
    )


def cancellation_message(booking: Booking, client: Client, salon: SalonSettings) -> str:
    return (
        f"Hi {client.name},\n\n"
        f"We regret to inform you that your appointment on {_long_date(booking.date)} "
        f"at {booking.start_time} has been cancelled.\n\n"
        f"Please contact us to book a new time.\n\n"
        f"- {salon.name} Team"
    )
