from sqlalchemy import func
from sqlalchemy.orm import Session

from .models import Roadmap
from .seed import SAMPLE_ROADMAPS


def list_roadmaps(db: Session) -> list[Roadmap]:
    return db.query(Roadmap).order_by(Roadmap.stream_course.asc()).all()


def list_or_seed_roadmaps(db: Session) -> list[Roadmap]:
    rows = list_roadmaps(db)
    if rows:
        return rows

    db.add_all([Roadmap(**r) for r in SAMPLE_ROADMAPS])
    db.commit()
    return list_roadmaps(db)


def get_roadmap(db: Session, stream_course: str) -> Roadmap | None:
    return (
        db.query(Roadmap)
        .filter(func.lower(Roadmap.stream_course) == stream_course.strip().lower())
        .first()
    )
