from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from career_guidance.shared.auth import current_user_id
from career_guidance.shared.database import db_dependency
from .crud import EMPTY_PROFILE, get_profile, upsert_profile
from .schemas import ProfileOut, ProfileUpsertIn


def _out(p) -> ProfileOut:
    return ProfileOut(
        user_id=p.id,
        name=p.name,
        class_completed=p.class_completed,
        stream=p.stream,
        district=p.district,
        language=p.language,
        role=p.role,
    )


def build_router(SessionLocal):
    router = APIRouter()
    get_db = db_dependency(SessionLocal)

    @router.get("/me", response_model=ProfileOut)
    def me(request: Request, db: Session = Depends(get_db)):
        uid = current_user_id(request)
        p = get_profile(db, uid)
        if not p:
            p = upsert_profile(db, uid, dict(EMPTY_PROFILE))
        return _out(p)

    @router.put("/me", response_model=ProfileOut)
    def update_me(payload: ProfileUpsertIn, request: Request, db: Session = Depends(get_db)):
        uid = current_user_id(request)
        return _out(upsert_profile(db, uid, payload.model_dump()))

    return router
