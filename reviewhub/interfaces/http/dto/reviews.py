from __future__ import annotations

from pydantic import BaseModel, Field


class ReviewContentDTO(BaseModel):
    content: str = Field(min_length=1, max_length=4096)
