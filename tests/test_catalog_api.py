# tests/test_catalog_api.py

from salon.models import Service, Staff


class TestServicesApi:

    def test_create_and_list(self, client, admin_headers):
        response = client.post(
            "/services",
            json={"name": "Cornrows", "category": "braids", "duration_minutes": 120, "price": 1500},
            headers=admin_headers,
        )
        assert response.status_code == 201
        created = response.json()
        assert created["active"] is True

        listed = client.get("/services").json()
        assert [s["name"] for s in listed] == ["Cornrows"]

    def test_create_requires_admin(self, client):
        response = client.post("/services", json={"name": "X", "duration_minutes": 30})
        assert response.status_code == 401

    def test_duration_must_be_positive(self, client, admin_headers):
        response = client.post("/services", json={"name": "X", "duration_minutes": 0}, headers=admin_headers)
        assert response.status_code == 422

    def test_inactive_hidden_by_default(self, client, admin_headers, braids):
        response = client.put(f"/services/{braids.id}", json={"active": False}, headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["active"] is False
        assert response.json()["duration_minutes"] == 240

        assert client.get("/services").json() == []
        assert len(client.get("/services", params={"include_inactive": True}).json()) == 1

    def test_filter_by_category(self, client, braids, cut):
        names = [s["name"] for s in client.get("/services", params={"category": "mens"}).json()]
        assert names == ["Mens Cut & Style"]

    def test_get_and_delete(self, client, admin_headers, braids, db):
        service_id = braids.id
        assert client.get(f"/services/{service_id}").json()["name"] == "Knotless Braids"

        assert client.delete(f"/services/{service_id}", headers=admin_headers).status_code == 204
        assert db.get(Service, service_id) is None
        assert client.get(f"/services/{service_id}").status_code == 404


class TestStaffApi:

    def test_create_staff(self, client, admin_headers, braids):
        payload = {
            "name": "Fatima",
            "title": "Loc Technician",
            "working_hours": {
                "monday": {"start": "09:00", "end": "17:00"},
                "wednesday": None,
            },
            "services_offered": [braids.id],
        }
        response = client.post("/staff", json=payload, headers=admin_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["working_hours"]["monday"] == {"start": "09:00", "end": "17:00"}
        assert data["working_hours"]["wednesday"] is None
        assert data["services_offered"] == [braids.id]

    def test_rejects_bad_hours(self, client, admin_headers):
        payload = {"name": "X", "working_hours": {"monday": {"start": "18:00", "end": "09:00"}}}
        assert client.post("/staff", json=payload, headers=admin_headers).status_code == 422

        payload = {"name": "X", "working_hours": {"funday": None}}
        assert client.post("/staff", json=payload, headers=admin_headers).status_code == 422

    def test_rejects_unknown_service(self, client, admin_headers):
        payload = {"name": "X", "services_offered": [999]}
        assert client.post("/staff", json=payload, headers=admin_headers).status_code == 422

    def test_filter_by_service_capability(self, client, db, amara, braids, cut):
        kwame = Staff(name="Kwame", working_hours={}, services_offered=[cut.id])
        db.add(kwame)
        db.commit()

        names = [s["name"] for s in client.get("/staff", params={"service_ids": [braids.id]}).json()]
        assert names == ["Amara"]
        assert client.get("/staff", params={"service_ids": [braids.id, cut.id]}).json() == []
        assert len(client.get("/staff").json()) == 2

    def test_update_hours(self, client, admin_headers, amara):
        response = client.put(
            f"/staff/{amara.id}",
            json={"working_hours": {"monday": {"start": "12:00", "end": "16:00"}}},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()["working_hours"] == {"monday": {"start": "12:00", "end": "16:00"}}
        assert response.json()["name"] == "Amara"

    def test_unknown_staff(self, client, admin_headers):
        assert client.get("/staff/404").status_code == 404
        assert client.delete("/staff/404", headers=admin_headers).status_code == 404
