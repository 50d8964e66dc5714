from .conftest import create_user

class TestPatients:

    def test_create_and_list(self, client, admin_headers):
        response = client.post(
            "/api/v1/patients",
            json={"name": "João Lima", "email": "", "birth_date": "1980-05-02"},
            headers=admin_headers
        )
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "João Lima"
        assert data["email"] is None
        assert data["birth_date"] == "1980-05-02"

        client.post("/api/v1/patients", json={"name": "Ana Costa"}, headers=admin_headers)

        response = client.get("/api/v1/patients", headers=admin_headers)
        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Ana Costa", "João Lima"]

    def test_name_required(self, client, admin_headers):
        response = client.post("/api/v1/patients", json={"name": "   "}, headers=admin_headers)
        assert response.status_code == 422

        response = client.post("/api/v1/patients", json={"phone": "1199999"}, headers=admin_headers)
        assert response.status_code == 422

    def test_search_by_name(self, client, admin_headers):
        for name in ("Carlos Pereira", "Carla Dias", "Bruno Alves"):
            client.post("/api/v1/patients", json={"name": name}, headers=admin_headers)

        response = client.get("/api/v1/patients", params={"search": "carl"}, headers=admin_headers)
        assert sorted(p["name"] for p in response.json()) == ["Carla Dias", "Carlos Pereira"]

    def test_search_treats_wildcards_literally(self, client, admin_headers):
        for name in ("Ana_Paula", "Carlos 100% Silva", "Bruno Alves"):
            client.post("/api/v1/patients", json={"name": name}, headers=admin_headers)

        response = client.get("/api/v1/patients", params={"search": "_"}, headers=admin_headers)
        assert [p["name"] for p in response.json()] == ["Ana_Paula"]

        response = client.get("/api/v1/patients", params={"search": "%"}, headers=admin_headers)
        assert [p["name"] for p in response.json()] == ["Carlos 100% Silva"]

    def test_update(self, client, admin_headers, patient):
        response = client.put(
            f"/api/v1/patients/{patient['id']}",
            json={"name": "Maria Souza Lima", "phone": "", "notes": "Alergia a dipirona"},
            headers=admin_headers
        )
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Maria Souza Lima"
        assert data["phone"] is None
        assert data["notes"] == "Alergia a dipirona"

        response = client.get(f"/api/v1/patients/{patient['id']}", headers=admin_headers)
        assert response.json()["name"] == "Maria Souza Lima"

    def test_unknown_patient(self, client, admin_headers):
        response = client.get("/api/v1/patients/nao-existe", headers=admin_headers)
        assert response.status_code == 404
        assert response.json()["detail"] == "Paciente não encontrado"

        response = client.put(
            "/api/v1/patients/nao-existe", json={"name": "X"}, headers=admin_headers
        )
        assert response.status_code == 404

    def test_delete_removes_appointments(self, client, admin_headers, patient):
        client.post(
            "/api/v1/appointments",
            json={"patient_id": patient["id"], "start_time": "2030-03-04T10:00:00"},
            headers=admin_headers
        )

        response = client.delete(f"/api/v1/patients/{patient['id']}", headers=admin_headers)
        assert response.status_code == 204

        assert client.get("/api/v1/patients", headers=admin_headers).json() == []
        assert client.get("/api/v1/appointments", headers=admin_headers).json() == []

    def test_doctor_can_read_but_not_write(self, client, admin_headers, patient):
        headers = create_user(client, admin_headers, "medico")

        assert client.get("/api/v1/patients", headers=headers).status_code == 200
        response = client.post("/api/v1/patients", json={"name": "Novo"}, headers=headers)
        assert response.status_code == 403
