from __future__ import annotations

from pydantic import BaseModel, Field


class PostRequestDTO(BaseModel):
    title: str = Field("", max_length=256)
    content: str = ""


class CommentRequestDTO(BaseModel):
    author: str = Field("", max_length=128)
    content: str = ""
    rating: int = Field(..., ge=1, le=5)
