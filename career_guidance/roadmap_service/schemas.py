from pydantic import BaseModel, Field


class RoadmapBody(BaseModel):
    higher_studies: list[str] = Field(default_factory=list)
    government_jobs: list[str] = Field(default_factory=list)
    private_sector: list[str] = Field(default_factory=list)
    entrepreneurship: list[str] = Field(default_factory=list)
    competitive_exams: list[str] = Field(default_factory=list)


class RoadmapOut(BaseModel):
    id: int
    stream_course: str
    roadmap: RoadmapBody
