from pydantic import BaseModel, Field


class SuggestionIn(BaseModel):
    category: str = Field(min_length=1, max_length=50)
    grade_level: str = Field(default="", max_length=20)


class SuggestionOut(BaseModel):
    suggestions: list[str]


class RoadmapIn(BaseModel):
    name: str = Field(default="", max_length=255)
    interests: list[str] = Field(min_length=1)
    grade: str = Field(default="", max_length=20)


class RoadmapOut(BaseModel):
    roadmap: str
