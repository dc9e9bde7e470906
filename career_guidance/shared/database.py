from typing import Callable, Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    pass


def make_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        # in-memory sqlite must share one connection across threads
        if ":memory:" in url or url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url, pool_pre_ping=True)


def make_session_local(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    # import models so their tables register on Base.metadata
    from career_guidance.profile_service import models as _profile  # noqa: F401
    from career_guidance.quiz_service import models as _quiz  # noqa: F401
    from career_guidance.college_service import models as _college  # noqa: F401
    from career_guidance.roadmap_service import models as _roadmap  # noqa: F401

    Base.metadata.create_all(bind=engine)


def db_dependency(SessionLocal: sessionmaker) -> Callable[[], Iterator[Session]]:
    def get_db() -> Iterator[Session]:
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    return get_db
