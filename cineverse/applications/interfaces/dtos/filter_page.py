from pydantic import BaseModel, Field


class FilterPage(BaseModel):
    query: str = Field(default="", description="Case-insensitive title filter")
    page: int = Field(default=0, ge=0, description="Zero-based page index")
