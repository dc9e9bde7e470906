import logging
from typing import Any

import httpx
from fastapi import Request
from fastapi.responses import JSONResponse

from career_guidance.config import AUTH_SERVICE_URL

logger = logging.getLogger(__name__)

# Public paths that don't require auth
PUBLIC_PATHS = {
    "/",
    "/health",
    "/docs",
    "/openapi.json",
}

PUBLIC_PREFIXES = (
    "/docs/",
)


class TokenRejected(Exception):
    pass


def _is_public_path(path: str) -> bool:
    if path in PUBLIC_PATHS:
        return True
    return any(path.startswith(p) for p in PUBLIC_PREFIXES)


async def verify_token(token: str) -> dict[str, Any]:
    """
    Verify token via auth-service and normalize returned payload.
    REQUIRED: sub
    """
    async with httpx.AsyncClient(timeout=5.0) as client:
        r = await client.post(f"{AUTH_SERVICE_URL}/auth/verify", json={"token": token})

    if r.status_code != 200:
        raise TokenRejected("Invalid or expired token")

    try:
        payload: Any = r.json()
    except ValueError:
        raise TokenRejected("Invalid token payload")

    if isinstance(payload, dict) and isinstance(payload.get("user"), dict):
        payload = payload["user"]
    if not isinstance(payload, dict) or not payload.get("sub"):
        raise TokenRejected("Token missing sub")

    return {"sub": str(payload["sub"]), "email": str(payload.get("email") or "")}


async def auth_middleware(request: Request, call_next):
    # Let CORS preflight pass through
    if request.method == "OPTIONS" or _is_public_path(request.url.path):
        return await call_next(request)

    auth_header = request.headers.get("Authorization", "")
    if not auth_header.lower().startswith("bearer "):
        return JSONResponse(status_code=401, content={"detail": "Missing Bearer token"})

    token = auth_header.split(" ", 1)[1].strip()
    if not token:
        return JSONResponse(status_code=401, content={"detail": "Missing token"})

    try:
        request.state.user = await verify_token(token)
    except TokenRejected as e:
        return JSONResponse(status_code=401, content={"detail": str(e)})
    except httpx.RequestError as e:
        logger.error("Auth service error: %s", e)
        return JSONResponse(status_code=503, content={"detail": "Auth service unavailable"})

    return await call_next(request)
