from pydantic import BaseModel, ConfigDict, Field


class ContactIn(BaseModel):
    phone: str = ""
    email: str = ""


class CollegeIn(BaseModel):
    name: str = Field(min_length=1)
    district: str = Field(min_length=1)
    eligibility: str | None = None
    programs: list[str] = Field(default_factory=list)
    facilities: list[str] = Field(default_factory=list)
    contact: ContactIn | None = None


class CollegeOut(CollegeIn):
    model_config = ConfigDict(from_attributes=True)

    id: int
