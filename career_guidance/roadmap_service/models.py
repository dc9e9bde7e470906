from sqlalchemy import JSON, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from career_guidance.shared.database import Base


class Roadmap(Base):
    __tablename__ = "roadmaps"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    stream_course: Mapped[str] = mapped_column(String(50), unique=True, index=True)  # "MPC", "B.Tech", ...
    roadmap_json: Mapped[dict] = mapped_column(JSON, default=dict)
