# tests/test_whatsapp.py

from datetime import date
from urllib.parse import unquote

from salon.models import Booking, Client, SalonSettings
from salon.whatsapp import (
    build_link,
    cancellation_message,
    confirmation_message,
    format_phone,
    render_template,
    salon_request_message,
)


def make_booking():
    return Booking(id=12, client_id=1, service_ids=[1], date=date(2030, 1, 7), start_time="10:00", end_time="14:00")


def make_salon(template="Hi {clientName}: {serviceName} on {date} at {time} (#{id})"):
    return SalonSettings(name="La'Couronne", address="Nişantaşı", whatsapp_template=template, admin_pin_hash="x")


class TestWhatsApp:

    def test_format_phone(self):
        assert format_phone("+90 532 123-4567") == "905321234567"
        assert format_phone("") == ""

    def test_build_link_encodes_message(self):
        link = build_link("+90 532", "Hello there & bye\n")
        assert link.startswith("https://wa.me/90532?text=")
        assert " " not in link
        assert unquote(link.split("?text=")[1]) == "Hello there & bye\n"

    def test_render_template_leaves_other_braces(self):
        message = render_template("{clientName} {unknown}", clientName="Ana")
        assert message == "Ana {unknown}"

    def test_salon_request_message(self):
        client = Client(name="Sarah", phone="1")
        message = salon_request_message(make_booking(), client, ["Box Braids", "Cornrows"], make_salon())
        assert message == "Hi Sarah: Box Braids, Cornrows on 2030-01-07 at 10:00 (#12)"

    def test_confirmation_message(self):
        message = confirmation_message(make_booking(), Client(name="Sarah", phone="1"), 240, make_salon())
        assert "CONFIRMED" in message
        assert "Monday, January 7, 2030" in message
        assert "Duration: 4 hours" in message

    def test_confirmation_message_odd_duration(self):
        message = confirmation_message(make_booking(), Client(name="Sarah", phone="1"), 90, make_salon())
        assert "Duration: 1h 30m" in message

    def test_cancellation_message(self):
        message = cancellation_message(make_booking(), Client(name="Sarah", phone="1"), make_salon())
        assert "has been cancelled" in message
        assert "10:00" in message
