import unittest

from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from luct.configs.database import get_db, init_db
from luct.main import app


class ApiTestCase(unittest.TestCase):
    """Runs the app against a fresh in-memory database per test."""

    def setUp(self):
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        init_db(self.engine)

        def override_get_db():
            with Session(self.engine) as session:
                yield session

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        self.engine.dispose()

    def session(self) -> Session:
        return Session(self.engine)

    def register(self, name, email, role, password="secret"):
        return self.client.post("/register", json={
            "name": name, "email": email, "password": password, "role": role,
        })

    def login(self, email, password="secret"):
        return self.client.post("/login", json={"email": email, "password": password})

    def signup(self, name, role, email=None):
        """Register and log in, returning (auth headers, user id)."""
        email = email or f"{name.lower().replace(' ', '.')}@luct.ac.ls"
        registered = self.register(name, email, role)
        self.assertEqual(registered.status_code, 201, registered.text)
        token = self.login(email).json()["token"]
        return {"Authorization": f"Bearer {token}"}, registered.json()["user"]["user_id"]

    def create_class(self, headers, **overrides):
        payload = {
            "class_name": "CS101",
            "course_name": "Introduction to Programming",
            "course_code": "DIT101",
            "lecturer": "Thabo Mokoena",
        }
        payload.update(overrides)
        return self.client.post("/classes", json=payload, headers=headers)
