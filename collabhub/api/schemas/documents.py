from pydantic import BaseModel, Field


class DocumentCreateDTO(BaseModel):
    project_id: int
    title: str = Field(..., min_length=1)
    content: str = ""


class DocumentDTO(BaseModel):
    document_id: int
    project_id: int
    title: str
    content: str
    created_by: int
    created_at: str
    updated_at: str


class DocumentContributionDTO(BaseModel):
    changes: int = Field(..., description="Net characters changed: positive added, negative removed")
