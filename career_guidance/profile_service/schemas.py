from pydantic import BaseModel, Field


class ProfileUpsertIn(BaseModel):
    name: str = Field(default="")
    class_completed: str = Field(
        default="",
        description="Last class completed: 10th/12th/Intermediate",
        pattern=r"^(|10th|12th|Intermediate)$",
    )
    stream: str = Field(default="")
    district: str = Field(default="")
    language: str = Field(default="en", max_length=10)


class ProfileOut(BaseModel):
    user_id: str
    name: str
    class_completed: str
    stream: str
    district: str
    language: str
    role: str
