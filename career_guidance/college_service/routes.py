from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from career_guidance.profile_service.crud import get_profile
from career_guidance.shared.auth import current_user_id
from career_guidance.shared.database import db_dependency
from .crud import create_college, get_college, list_colleges_for
from .schemas import CollegeIn, CollegeOut


def build_router(SessionLocal):
    router = APIRouter()
    get_db = db_dependency(SessionLocal)

    @router.get("/", response_model=list[CollegeOut])
    def for_me(request: Request, district: str | None = Query(default=None), db: Session = Depends(get_db)):
        p = get_profile(db, current_user_id(request))
        if not p:
            raise HTTPException(404, "Profile not found")
        return list_colleges_for(db, district or p.district, p.class_completed)

    @router.get("/{college_id}", response_model=CollegeOut)
    def get_one(college_id: int, db: Session = Depends(get_db)):
        c = get_college(db, college_id)
        if not c:
            raise HTTPException(404, "College not found")
        return c

    @router.post("/", response_model=CollegeOut)
    def create(payload: CollegeIn, db: Session = Depends(get_db)):
        return create_college(db, payload.model_dump())

    return router
