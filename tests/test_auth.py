# tests/test_auth.py

from salon.auth import create_access_token, hash_password, verify_password


class TestAuth:

    def test_pin_hashing(self):
        hashed = hash_password("4321")
        assert hashed != "4321"
        assert verify_password("4321", hashed) is True
        assert verify_password("0000", hashed) is False

    def test_login_with_default_pin(self, client):
        response = client.post("/auth/login", json={"pin": "1234"})

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["access_token"]

    def test_login_with_wrong_pin(self, client):
        response = client.post("/auth/login", json={"pin": "9999"})
        assert response.status_code == 401

    def test_token_from_login_opens_admin_routes(self, client):
        token = client.post("/auth/login", json={"pin": "1234"}).json()["access_token"]
        response = client.get("/clients", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200

    def test_admin_routes_need_a_token(self, client):
        assert client.get("/clients").status_code == 401
        assert client.get("/bookings").status_code == 401

    def test_invalid_token(self, client):
        response = client.get("/clients", headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == 401

    def test_non_admin_token_is_forbidden(self, client):
        token = create_access_token({"sub": "someone"})
        response = client.get("/clients", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 403

    def test_change_pin(self, client, admin_headers):
        response = client.put(
            "/auth/pin", json={"current_pin": "1234", "new_pin": "5678"}, headers=admin_headers
        )
        assert response.status_code == 204

        assert client.post("/auth/login", json={"pin": "1234"}).status_code == 401
        assert client.post("/auth/login", json={"pin": "5678"}).status_code == 200

    def test_change_pin_requires_current_pin(self, client, admin_headers):
        response = client.put(
            "/auth/pin", json={"current_pin": "0000", "new_pin": "5678"}, headers=admin_headers
        )
        assert response.status_code == 401
