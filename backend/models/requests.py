from pydantic import BaseModel, Field


class FileMeta(BaseModel):
    """Metadata of an uploaded résumé file."""
    name: str = Field(..., description="Original file name")
    size: int = Field(0, ge=0, description="Size in bytes")
    mime_type: str = Field("", description="Resolved media type")
