from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from synthdata.enums.project import Industry


class ProjectCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Loans Pilot"])
    description: str = Field("", examples=["Synthetic loan book for model testing"])
    industry: Industry = Industry.fintech

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value


class ProjectResponse(BaseModel):
    id: str
    user_id: str
    name: str
    description: str
    industry: str
    created_at: datetime

    class Config:
        from_attributes = True
