class TestPublicValidation:

    def test_lookup_without_login(self, client, admin_headers):
        client.post(
            "/api/v1/validations",
            json={"code": "ABC123", "patient_name": "Maria Souza", "doc_type": "Atestado"},
            headers=admin_headers
        )

        response = client.get("/api/v1/public/validations/ABC123")
        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is True
        assert data["message"] == "Documento VÁLIDO"
        assert data["doc_type"] == "Atestado"

    def test_code_is_trimmed(self, client, admin_headers):
        client.post("/api/v1/validations", json={"code": "XYZ9"}, headers=admin_headers)

        response = client.get("/api/v1/public/validations/%20XYZ9%20")
        assert response.status_code == 200

    def test_unknown_code(self, client, test_db):
        response = client.get("/api/v1/public/validations/NAOEXISTE")
        assert response.status_code == 404

    def test_generated_code(self, client, admin_headers):
        response = client.post(
            "/api/v1/validations", json={"patient_name": "João"}, headers=admin_headers
        )
        assert response.status_code == 201
        code = response.json()["code"]
        assert len(code) == 12

        assert client.get(f"/api/v1/public/validations/{code}").status_code == 200

    def test_duplicate_code_conflict(self, client, admin_headers):
        assert client.post(
            "/api/v1/validations", json={"code": "DUP1"}, headers=admin_headers
        ).status_code == 201

        response = client.post("/api/v1/validations", json={"code": "DUP1"}, headers=admin_headers)
        assert response.status_code == 409

    def test_revoke(self, client, admin_headers):
        client.post("/api/v1/validations", json={"code": "REV1"}, headers=admin_headers)

        response = client.patch("/api/v1/validations/REV1/revoke", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["valid"] is False

        data = client.get("/api/v1/public/validations/REV1").json()
        assert data["valid"] is False
        assert data["message"] == "Documento INVÁLIDO/REVOGADO"
