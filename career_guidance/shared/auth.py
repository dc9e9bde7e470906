from fastapi import HTTPException, Request


def current_user_id(request: Request) -> str:
    # set by the auth middleware after /auth/verify
    user = getattr(request.state, "user", None)
    if not user or not user.get("sub"):
        raise HTTPException(status_code=401, detail="Not authenticated")
    return str(user["sub"])


def bearer_token(request: Request) -> str | None:
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.lower().startswith("bearer "):
        return None
    return auth_header.split(" ", 1)[1].strip() or None
