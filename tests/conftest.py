import os

# Must be set before the application is imported
os.environ["TESTING"] = "1"
os.environ["TEST_DATABASE_URL"] = "sqlite:///./test.db"
os.environ.pop("OPENAI_API_KEY", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from medintelli.main import app
from medintelli.core.database import get_db, get_redis, Base
from medintelli import models  # noqa: F401

SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

app.dependency_overrides[get_db] = override_get_db

class FakeRedis:
    """Dict-backed stand-in for the few redis commands the API uses."""

    def __init__(self):
        self.data = {}

    def setex(self, key, time, value):
        self.data[key] = str(value)
        return True

    def get(self, key):
        return self.data.get(key)

    def incr(self, key):
        self.data[key] = str(int(self.data.get(key, "0")) + 1)
        return int(self.data[key])

@pytest.fixture(autouse=True)
def fake_redis():
    redis = FakeRedis()
    app.dependency_overrides[get_redis] = lambda: redis
    yield redis
    app.dependency_overrides.pop(get_redis, None)

@pytest.fixture(scope="function")
def test_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def db_session(test_db):
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture
def client():
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client

ADMIN = {
    "email": "admin@medintelli.com.br",
    "password": "Admin12345",
    "name": "Administração",
    "role": "admin",
}

def login(client, email, password):
    response = client.post("/api/v1/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}

def create_user(client, admin_headers, role, email=None, password="Senha12345"):
    """Register a user through the admin and return their auth headers."""
    email = email or f"{role}@medintelli.com.br"
    response = client.post(
        "/api/v1/auth/register",
        json={"email": email, "password": password, "name": role.title(), "role": role},
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    return login(client, email, password)

@pytest.fixture
def admin_headers(client, test_db):
    response = client.post("/api/v1/auth/register", json=ADMIN)
    assert response.status_code == 201, response.text
    return login(client, ADMIN["email"], ADMIN["password"])

@pytest.fixture
def patient(client, admin_headers):
    response = client.post(
        "/api/v1/patients",
        json={"name": "Maria Souza", "phone": "11999990000", "cpf": "123.456.789-00"},
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()
