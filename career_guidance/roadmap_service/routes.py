from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from career_guidance.shared.database import db_dependency
from .crud import get_roadmap, list_or_seed_roadmaps
from .schemas import RoadmapBody, RoadmapOut


def _out(r) -> RoadmapOut:
    return RoadmapOut(id=r.id, stream_course=r.stream_course, roadmap=RoadmapBody(**(r.roadmap_json or {})))


def build_router(SessionLocal):
    router = APIRouter()
    get_db = db_dependency(SessionLocal)

    @router.get("/", response_model=list[RoadmapOut])
    def get_all(db: Session = Depends(get_db)):
        return [_out(r) for r in list_or_seed_roadmaps(db)]

    @router.get("/{stream_course}", response_model=RoadmapOut)
    def get_one(stream_course: str, db: Session = Depends(get_db)):
        # seed first so a fresh database can still answer a direct lookup
        list_or_seed_roadmaps(db)
        r = get_roadmap(db, stream_course)
        if not r:
            raise HTTPException(404, "Roadmap not found")
        return _out(r)

    return router
