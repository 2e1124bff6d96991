"""Shared fixtures: in-memory SQLite wired into the real app via dependency overrides."""

import unittest
from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from film_api.core.database import get_db
from film_api.main import app
from film_api.models import Base, Director


def make_engine() -> Engine:
    """
    Single-connection in-memory SQLite with foreign keys on.

    StaticPool keeps one connection so TestClient's worker threads see the same
    database; check_same_thread must be off for the same reason.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    return engine


class ApiTestCase(unittest.TestCase):
    """Base class: fresh database and TestClient per test."""

    def setUp(self) -> None:
        self.engine = make_engine()
        self.SessionTesting = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        def override_get_db() -> Generator[Session, None, None]:
            db = self.SessionTesting()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        self.engine.dispose()

    def register(self, username: str, password: str = "secret123", admin: bool = False) -> dict:
        path = "/auth/register-admin" if admin else "/auth/register"
        resp = self.client.post(path, json={"username": username, "password": password})
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def login(self, username: str, password: str = "secret123") -> str:
        resp = self.client.post("/auth/login", json={"username": username, "password": password})
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()["token"]

    def auth_headers(self, token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    def user_headers(self) -> dict[str, str]:
        """Register and log in a regular user; return its Authorization header."""
        self.register("viewer")
        return self.auth_headers(self.login("viewer"))

    def admin_headers(self) -> dict[str, str]:
        self.register("boss", admin=True)
        return self.auth_headers(self.login("boss"))

    def seed_director(self, name: str = "Peter Jackson", birth_year: int | None = 1961) -> int:
        db = self.SessionTesting()
        try:
            director = Director(name=name, birth_year=birth_year)
            db.add(director)
            db.commit()
            return director.id
        finally:
            db.close()
