from sqlalchemy.orm import Session

from .models import UserProfile

EMPTY_PROFILE = {
    "name": "",
    "class_completed": "",
    "stream": "",
    "district": "",
    "language": "en",
}


def get_profile(db: Session, user_id: str) -> UserProfile | None:
    return db.query(UserProfile).filter(UserProfile.id == user_id).first()


def upsert_profile(db: Session, user_id: str, payload: dict) -> UserProfile:
    """
    Creates the profile on first use; otherwise updates only the given fields.
    """
    p = get_profile(db, user_id)

    if not p:
        p = UserProfile(id=user_id, **{**EMPTY_PROFILE, **payload})
        db.add(p)
    else:
        for field, value in payload.items():
            if hasattr(p, field):
                setattr(p, field, value)

    db.commit()
    db.refresh(p)
    return p
