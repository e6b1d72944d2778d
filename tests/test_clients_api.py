# tests/test_clients_api.py


def new_client(client, headers, name="Sarah Johnson", phone="+90 532 123 4567", **extra):
    payload = {"name": name, "phone": phone, **extra}
    return client.post("/clients", json=payload, headers=headers)


class TestClientsApi:

    def test_create_and_get(self, client, admin_headers):
        response = new_client(client, admin_headers, email="sarah.j@email.com")
        assert response.status_code == 201
        created = response.json()
        assert created["tags"] == []

        fetched = client.get(f"/clients/{created['id']}", headers=admin_headers).json()
        assert fetched["email"] == "sarah.j@email.com"

    def test_duplicate_phone(self, client, admin_headers):
        new_client(client, admin_headers)
        assert new_client(client, admin_headers, name="Other").status_code == 409

    def test_search(self, client, admin_headers):
        new_client(client, admin_headers)
        new_client(client, admin_headers, name="Marcus Williams", phone="+90 533 234 5678")

        found = client.get("/clients", params={"q": "marcus"}, headers=admin_headers).json()
        assert [c["name"] for c in found] == ["Marcus Williams"]

    def test_toggle_vip(self, client, admin_headers):
        created = new_client(client, admin_headers, tags=["Regular"]).json()
        url = f"/clients/{created['id']}/vip"

        assert client.patch(url, headers=admin_headers).json()["tags"] == ["Regular", "VIP"]
        vips = client.get("/clients", params={"tag": "VIP"}, headers=admin_headers).json()
        assert [c["id"] for c in vips] == [created["id"]]

        assert client.patch(url, headers=admin_headers).json()["tags"] == ["Regular"]

    def test_update(self, client, admin_headers):
        created = new_client(client, admin_headers).json()
        response = client.put(
            f"/clients/{created['id']}", json={"notes": "Sensitive edges"}, headers=admin_headers
        )
        assert response.json()["notes"] == "Sensitive edges"
        assert response.json()["name"] == "Sarah Johnson"

    def test_client_bookings(self, client, admin_headers, cut):
        booked = client.post("/bookings", json={
            "service_ids": [cut.id],
            "date": "2030-01-07",
            "time": "09:00",
            "client_name": "Sarah Johnson",
            "client_phone": "+90 532 123 4567",
        }).json()

        history = client.get(f"/clients/{booked['client_id']}/bookings", headers=admin_headers).json()
        assert [b["id"] for b in history] == [booked["id"]]

    def test_delete(self, client, admin_headers):
        created = new_client(client, admin_headers).json()
        assert client.delete(f"/clients/{created['id']}", headers=admin_headers).status_code == 204
        assert client.get(f"/clients/{created['id']}", headers=admin_headers).status_code == 404
