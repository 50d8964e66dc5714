from datetime import datetime

from .conftest import create_user

class TestDashboard:

    def test_counts(self, client, admin_headers, patient):
        today = datetime.utcnow().date()
        client.post(
            "/api/v1/appointments",
            json={"patient_id": patient["id"], "start_time": f"{today}T10:00:00", "force": True},
            headers=admin_headers
        )
        client.post(
            "/api/v1/appointments",
            json={"patient_id": patient["id"], "start_time": "2031-01-10T10:00:00"},
            headers=admin_headers
        )
        client.post("/api/v1/waitlist", json={"patient_name": "Eva"}, headers=admin_headers)

        response = client.get("/api/v1/dashboard", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == {
            "patients": 1,
            "appointments": 2,
            "today_appointments": 1,
            "waitlist": 1,
        }

class TestMenu:

    def test_admin_sees_everything(self, client, admin_headers):
        ids = [item["id"] for item in client.get("/api/v1/menu", headers=admin_headers).json()]
        assert ids[0] == "dashboard"
        assert "config" in ids
        assert len(ids) == 10

    def test_doctor_menu(self, client, admin_headers):
        headers = create_user(client, admin_headers, "medico")
        ids = [item["id"] for item in client.get("/api/v1/menu", headers=headers).json()]
        assert ids == ["dashboard", "agenda", "mensagens", "chat", "medico"]

    def test_front_desk_menu(self, client, admin_headers):
        headers = create_user(client, admin_headers, "recepcao")
        ids = [item["id"] for item in client.get("/api/v1/menu", headers=headers).json()]
        assert "pacientes" in ids
        assert "medico" not in ids
        assert "config" not in ids

class TestConfigStatus:

    def test_admin_only(self, client, admin_headers):
        response = client.get("/api/v1/config", headers=admin_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["database"] == "SQLite"
        assert data["chat_configured"] is False
        assert "patients" in data["tables"]
        assert "public_validations" in data["tables"]

        headers = create_user(client, admin_headers, "medico")
        assert client.get("/api/v1/config", headers=headers).status_code == 403

class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert "X-Process-Time" in response.headers

    def test_not_found(self, client):
        response = client.get("/api/v1/nao-existe")
        assert response.status_code == 404
        assert response.json()["path"] == "/api/v1/nao-existe"
