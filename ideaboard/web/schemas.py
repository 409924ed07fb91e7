from __future__ import annotations
from typing import Any, Optional
from pydantic import BaseModel, Field

from ideaboard.models.idea import Idea

class IdeaCreate(BaseModel):
    # Left loose so missing/blank text reaches the service and becomes a 400.
    text: Optional[Any] = Field(None, description="Idea text, at most 280 characters")

class IdeaOut(BaseModel):
    id: int
    text: str
    upvotes: int
    created_at: str

    @classmethod
    def from_idea(cls, idea: Idea) -> "IdeaOut":
        return cls(**idea.to_dict())

class ErrorOut(BaseModel):
    error: str

class HealthOut(BaseModel):
    status: str
    timestamp: str
