"""
Tests for career_guidance/middleware.py: public paths, bearer parsing and the
auth-service round trip (httpx.MockTransport in place of the network).
"""

from __future__ import annotations

import asyncio

import httpx
import pytest

from career_guidance import middleware


def test_public_paths(client):
    assert client.get("/health").json() == {"status": "healthy", "service": "career-guidance"}
    assert client.get("/").status_code == 200


@pytest.mark.parametrize("header", [None, "Basic abc", "Bearer   "])
def test_missing_or_malformed_token(client, header):
    headers = {"Authorization": header} if header else {}
    r = client.get("/profile/me", headers=headers)
    assert r.status_code == 401


def test_rejected_token(client):
    r = client.get("/profile/me", headers={"Authorization": "Bearer bad"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Invalid or expired token"


def test_auth_service_unreachable(client, monkeypatch):
    async def down(token):
        raise httpx.ConnectError("refused")

    monkeypatch.setattr(middleware, "verify_token", down)
    assert client.get("/profile/me", headers={"Authorization": "Bearer x"}).status_code == 503


class TestVerifyToken:
    @pytest.fixture
    def auth_service(self, monkeypatch):
        responses: dict = {"status": 200, "json": {"sub": "42", "email": "a@b.c"}}
        real_client = httpx.AsyncClient

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/auth/verify"
            return httpx.Response(responses["status"], json=responses["json"])

        def fake_client(*args, **kwargs):
            kwargs["transport"] = httpx.MockTransport(handler)
            return real_client(*args, **kwargs)

        monkeypatch.setattr(middleware.httpx, "AsyncClient", fake_client)
        return responses

    def test_normalizes_payload(self, auth_service):
        assert asyncio.run(middleware.verify_token("t")) == {"sub": "42", "email": "a@b.c"}

    def test_unwraps_user_key(self, auth_service):
        auth_service["json"] = {"user": {"sub": 7}}
        assert asyncio.run(middleware.verify_token("t")) == {"sub": "7", "email": ""}

    def test_non_200_rejected(self, auth_service):
        auth_service["status"] = 401
        with pytest.raises(middleware.TokenRejected):
            asyncio.run(middleware.verify_token("t"))

    def test_missing_sub_rejected(self, auth_service):
        auth_service["json"] = {"email": "a@b.c"}
        with pytest.raises(middleware.TokenRejected):
            asyncio.run(middleware.verify_token("t"))
