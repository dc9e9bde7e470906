from sqlalchemy.orm import Session

from .models import College

# qualification a student can apply with, by the class they completed
NEXT_ELIGIBILITY: dict[str, list[str]] = {
    "10th": ["Intermediate qualification", "SSC Qualification"],
    "Intermediate": ["Bachelor's qualification", "JEE Main Qualified", "NEET Qualified"],
    "12th": ["Bachelor's qualification", "JEE Main Qualified", "NEET Qualified"],
}


def eligibility_for(class_completed: str) -> list[str]:
    return NEXT_ELIGIBILITY.get(class_completed, [])


def list_colleges_for(db: Session, district: str, class_completed: str) -> list[College]:
    eligible = eligibility_for(class_completed)
    if not eligible:
        return []

    q = db.query(College).filter(College.eligibility.in_(eligible))
    if district:
        q = q.filter(College.district.ilike(f"%{district.strip()}%"))
    return q.order_by(College.name.asc()).all()


def get_college(db: Session, college_id: int) -> College | None:
    return db.query(College).filter(College.id == college_id).first()


def create_college(db: Session, payload: dict) -> College:
    c = College(**payload)
    db.add(c)
    db.commit()
    db.refresh(c)
    return c
