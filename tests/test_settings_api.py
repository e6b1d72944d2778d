# tests/test_settings_api.py

from salon.models import Client


class TestSettingsApi:

    def test_public_settings_hide_the_pin(self, client):
        data = client.get("/settings").json()

        assert data["name"] == "La'Couronne"
        assert data["business_hours"]["sunday"] is None
        assert data["business_hours"]["monday"] == {"start": "09:00", "end": "18:00"}
        assert "admin_pin_hash" not in data

    def test_update_hours_changes_availability(self, client, admin_headers):
        hours = {"monday": {"start": "12:00", "end": "14:00"}}
        response = client.put(
            "/settings", json={"business_hours": hours, "slot_step_minutes": 60}, headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["business_hours"] == hours
        assert response.json()["name"] == "La'Couronne"

        slots = client.get("/availability", params={"date": "2030-01-07"}).json()["slots"]
        assert [s["time"] for s in slots] == ["12:00", "13:00"]

        # tuesday is no longer listed, so it is closed
        assert client.get("/availability", params={"date": "2030-01-08"}).json()["slots"] == []

    def test_update_rejects_bad_window(self, client, admin_headers):
        hours = {"monday": {"start": "18:00", "end": "09:00"}}
        assert client.put("/settings", json={"business_hours": hours}, headers=admin_headers).status_code == 422

    def test_update_requires_admin(self, client):
        assert client.put("/settings", json={"name": "X"}).status_code == 401


class TestDashboard:

    def test_counts(self, client, admin_headers, db, cut):
        for time, phone in (("09:00", "+90 500 000 0001"), ("10:00", "+90 500 000 0002")):
            client.post("/bookings", json={
                "service_ids": [cut.id],
                "date": "2030-01-07",
                "time": time,
                "client_name": "Guest",
                "client_phone": phone,
            })
        client_row = db.get(Client, 1)
        client_row.tags = ["VIP"]
        db.add(client_row)
        db.commit()

        stats = client.get("/dashboard", headers=admin_headers).json()
        assert stats["total_bookings"] == 2
        assert stats["pending_bookings"] == 2
        assert stats["confirmed_bookings"] == 0
        assert stats["bookings_today"] == 0
        assert stats["total_clients"] == 2
        assert stats["vip_clients"] == 1
