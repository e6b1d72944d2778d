# salon/data.py

import logging

from sqlmodel import Session, select

from .auth import hash_password
from .config import get_settings
from .models import SalonSettings, Service, Staff

logger = logging.getLogger(__name__)

DEFAULT_BUSINESS_HOURS = {
    "monday": {"start": "09:00", "end": "18:00"},
    "tuesday": {"start": "09:00", "end": "18:00"},
    "wednesday": {"start": "09:00", "end": "18:00"},
    "thursday": {"start": "10:00", "end": "19:00"},
    "friday": {"start": "10:00", "end": "19:00"},
    "saturday": {"start": "09:00", "end": "17:00"},
    "sunday": None,
}

DEFAULT_WHATSAPP_TEMPLATE = (
    "Hello! I'd like to confirm my appointment:\n\n"
    "Name: {clientName}\n"
    "Service: {serviceName}\n"
    "Date: {date}\n"
    "Time: {time}\n"
    "Booking ID: {id}\n\n"
    "Please confirm. Thank you!"
)

shop_settings = {
    "name": "La'Couronne",
    "address": "Nişantaşı, İstanbul",
    "phone": "+90 212 555 0100",
    "email": "info@lacouronne.com",
    "whatsapp_number": "905325550100",
    "instagram_handle": "lcouronne",
    "slot_duration_minutes": 30,
    "slot_step_minutes": 30,
}

# name, category, minutes, price
SERVICES = [
    ("Box Braids", "braids", 180, 2500),
    ("Knotless Braids", "braids", 240, 3500),
    ("Cornrows", "braids", 120, 1500),
    ("Fulani Braids", "braids", 180, 2800),
    ("Twist Styles", "twists", 150, 2000),
    ("Locs Maintenance", "locs", 90, 1200),
    ("Mens Cut & Style", "mens", 45, 800),
    ("Natural Hair Styling", "natural", 60, 1000),
]

# name, title, hours overrides, offered service names
STAFF = [
    (
        "Amara", "Master Braider",
        {"sunday": None},
        ["Box Braids", "Knotless Braids", "Cornrows", "Fulani Braids", "Twist Styles"],
    ),
    (
        "Kwame", "Mens Specialist",
        {
            "monday": None,
            "tuesday": {"start": "10:00", "end": "19:00"},
            "wednesday": {"start": "10:00", "end": "19:00"},
        },
        ["Cornrows", "Locs Maintenance", "Mens Cut & Style"],
    ),
    (
        "Fatima", "Loc Technician",
        {
            "monday": {"start": "09:00", "end": "17:00"},
            "tuesday": {"start": "09:00", "end": "17:00"},
            "wednesday": None,
            "saturday": {"start": "09:00", "end": "16:00"},
        },
        ["Twist Styles", "Locs Maintenance", "Natural Hair Styling"],
    ),
]


def seed_defaults(session: Session, with_catalog: bool = True) -> SalonSettings:
    """
    Create the settings row (and, on an empty database, the starter catalog).

    Safe to call on every startup: existing rows are left alone.
    """
    settings_row = session.get(SalonSettings, 1)
    if settings_row is None:
        settings_row = SalonSettings(
            id=1,
            business_hours=dict(DEFAULT_BUSINESS_HOURS),
            whatsapp_template=DEFAULT_WHATSAPP_TEMPLATE,
            admin_pin_hash=hash_password(get_settings().default_admin_pin),
            **shop_settings,
        )
        session.add(settings_row)
        logger.info("Seeded salon settings")

    has_services = session.exec(select(Service)).first() is not None
    if with_catalog and not has_services:
        by_name = {}
        for name, category, minutes, price in SERVICES:
            service = Service(name=name, category=category, duration_minutes=minutes, price=price)
            session.add(service)
            by_name[name] = service
        session.flush()  # fills service ids

        for name, title, overrides, offered in STAFF:
            hours = dict(DEFAULT_BUSINESS_HOURS)
            hours.update(overrides)
            session.add(Staff(
                name=name,
                title=title,
                working_hours=hours,
                services_offered=[by_name[n].id for n in offered],
            ))
        logger.info("Seeded %d services and %d staff members", len(SERVICES), len(STAFF))

    session.commit()
    session.refresh(settings_row)
    return settings_row
