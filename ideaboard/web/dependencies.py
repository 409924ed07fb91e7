from __future__ import annotations
from fastapi import Request
from ideaboard.service.idea_service import IdeaService

def get_idea_service(request: Request) -> IdeaService:
    return request.app.state.idea_service
