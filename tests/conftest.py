"""
Shared pytest fixtures.

Provides:
  - ``session_local``: sessionmaker bound to a fresh in-memory SQLite database.
  - ``client``: TestClient over the full app; bearer tokens are accepted as-is
    and the token text becomes the user id.
  - ``generator``: controls what the suggestion generator returns during quiz
    submission (``generator.respond(...)`` / ``generator.fail()``).
"""

from __future__ import annotations

from typing import Any, Generator

import httpx
import pytest
from fastapi.testclient import TestClient

from career_guidance import middleware
from career_guidance.app import create_app
from career_guidance.quiz_service import routes as quiz_routes
from career_guidance.quiz_service import suggestions
from career_guidance.shared.database import init_db, make_engine, make_session_local


@pytest.fixture
def session_local():
    engine = make_engine("sqlite://")
    init_db(engine)
    yield make_session_local(engine)
    engine.dispose()


@pytest.fixture
def db(session_local):
    s = session_local()
    yield s
    s.close()


class FakeGenerator:
    """Stands in for the suggestion service over an httpx.MockTransport."""

    def __init__(self) -> None:
        self.status = 200
        self.payload: Any = {"suggestions": ["B.Tech Computer Science", "B.Sc Mathematics"]}
        self.error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def respond(self, payload: Any, status: int = 200) -> None:
        self.payload, self.status, self.error = payload, status, None

    def fail(self, error: Exception | None = None) -> None:
        self.error = error or httpx.ConnectError("generator down")

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status, json=self.payload)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def generator(monkeypatch) -> FakeGenerator:
    fake = FakeGenerator()

    async def resolve(category: str, grade_level: str, token: str | None = None):
        async with fake.client() as c:
            return await suggestions.resolve_suggestions(
                category, grade_level, client=c, url="http://generator.test/ai/suggestions", token=token
            )

    monkeypatch.setattr(quiz_routes, "resolve_suggestions", resolve)
    return fake


@pytest.fixture
def client(session_local, generator, monkeypatch) -> Generator[TestClient, None, None]:
    async def fake_verify(token: str) -> dict[str, Any]:
        if token == "bad":
            raise middleware.TokenRejected("Invalid or expired token")
        return {"sub": token, "email": f"{token}@example.com"}

    monkeypatch.setattr(middleware, "verify_token", fake_verify)
    with TestClient(create_app(session_local)) as c:
        yield c


@pytest.fixture
def auth():
    def headers(user_id: str = "student-1") -> dict[str, str]:
        return {"Authorization": f"Bearer {user_id}"}

    return headers
