from __future__ import annotations
import logging
from pathlib import Path
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ideaboard.db.database import PersistenceError
from ideaboard.models.idea import TEXT_MAX_LENGTH
from ideaboard.service.idea_service import IdeaService
from ideaboard.web.dependencies import get_idea_service

logger = logging.getLogger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

POLL_INTERVAL_MS = 5000

@router.get("/", response_class=HTMLResponse)
def home(request: Request):
    return templates.TemplateResponse(request, "home.html", {})

@router.get("/board", response_class=HTMLResponse)
def board(request: Request, idea_service: IdeaService = Depends(get_idea_service)):
    """Board page; the list is rendered server-side, then kept fresh by polling."""
    error = None
    try:
        ideas = idea_service.list_ideas()
    except PersistenceError:
        logger.exception("Error fetching ideas for board page")
        ideas, error = [], "Failed to load ideas. Please try again."
    return templates.TemplateResponse(
        request,
        "board.html",
        {
            "ideas": [i.to_dict() for i in ideas],
            "error": error,
            "max_length": TEXT_MAX_LENGTH,
            "poll_interval_ms": POLL_INTERVAL_MS,
        },
    )
