"""Pytest configuration and fixtures.

This module provides:
- An isolated SQLite database file (recreated for every test)
- A TestClient that runs the app lifespan (table creation)
- Registered API users with their bearer tokens
- Small helpers to create categories, flashcards and quizzes
"""
import os
import tempfile
from pathlib import Path

# Settings are read at import time, so the environment must be ready first
TEST_DATA_DIR = Path(tempfile.mkdtemp(prefix="quizflip-tests-"))
DB_FILE = TEST_DATA_DIR / "test.db"

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{DB_FILE}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["PASSWORD_HASH_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from quizflip.main import app  # noqa: E402

DEFAULT_PASSWORD = "secret1"


class ApiUser:
    """A registered user plus a client that sends its bearer token."""

    __test__ = False  # Prevent pytest from collecting this as a test class

    def __init__(self, client: TestClient, username: str, email: str, password: str = DEFAULT_PASSWORD):
        response = client.post(
            "/api/users",
            json={"username": username, "email": email, "password": password},
        )
        assert response.status_code == 200, response.text
        body = response.json()

        self.client = client
        self.username = username
        self.email = email
        self.password = password
        self.token = body["token"]
        self.id = body["user"]["id"]

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    def get(self, path: str, **kwargs):
        return self.client.get(path, headers=self.headers, **kwargs)

    def post(self, path: str, **kwargs):
        return self.client.post(path, headers=self.headers, **kwargs)

    def put(self, path: str, **kwargs):
        return self.client.put(path, headers=self.headers, **kwargs)

    def delete(self, path: str, **kwargs):
        return self.client.delete(path, headers=self.headers, **kwargs)


def make_category(user: ApiUser, name: str = "Math", **fields) -> dict:
    response = user.post("/api/categories", json={"name": name, **fields})
    assert response.status_code == 200, response.text
    return response.json()


def make_flashcard(user: ApiUser, category_id: int, question: str = "2+2", answer: str = "4") -> dict:
    response = user.post(
        "/api/flashcards",
        json={"question": question, "answer": answer, "category_id": category_id},
    )
    assert response.status_code == 200, response.text
    return response.json()


def quiz_payload(title: str = "Arithmetic", category_id: int | None = None, **fields) -> dict:
    payload = {
        "title": title,
        "questions": [
            {
                "text": "2+2?",
                "options": [{"text": "4", "is_correct": True}, {"text": "5"}],
                "difficulty": "easy",
            },
            {"text": "3*3?", "options": [{"text": "9", "is_correct": True}]},
        ],
        **fields,
    }
    if category_id is not None:
        payload["category_id"] = category_id
    return payload


def make_quiz(user: ApiUser, title: str = "Arithmetic", category_id: int | None = None, **fields) -> dict:
    response = user.post("/api/quizzes", json=quiz_payload(title, category_id, **fields))
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture()
def client():
    """API client on a fresh database."""
    with TestClient(app) as test_client:
        yield test_client
    DB_FILE.unlink(missing_ok=True)


@pytest.fixture()
def alice(client) -> ApiUser:
    return ApiUser(client, "alice", "a@x.com")


@pytest.fixture()
def bob(client) -> ApiUser:
    return ApiUser(client, "bob", "b@x.com")
