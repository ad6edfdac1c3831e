from pydantic import BaseModel, Field
from typing import List
from datetime import datetime


class ColumnSchema(BaseModel):
    name: str
    type: str = "string"
    sensitive: bool = False


class DatasetFromTemplate(BaseModel):
    project_id: str
    template_id: str


class DatasetResponse(BaseModel):
    id: str
    project_id: str
    name: str
    description: str
    schema_json: List[ColumnSchema]
    row_count: int
    data_type: str
    status: str
    source: str
    created_at: datetime

    class Config:
        from_attributes = True


class TemplateResponse(BaseModel):
    id: str
    name: str
    description: str
    category: str
    schema_json: List[ColumnSchema] = Field(default_factory=list)

    class Config:
        from_attributes = True
