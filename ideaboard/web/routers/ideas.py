from __future__ import annotations
import logging
from typing import List
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ideaboard.db.database import PersistenceError
from ideaboard.service.idea_service import IdeaService, NotFoundError, ValidationError
from ideaboard.web.dependencies import get_idea_service
from ideaboard.web.schemas import ErrorOut, IdeaCreate, IdeaOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ideas", tags=["ideas"])

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})

@router.get("", response_model=List[IdeaOut], responses={500: {"model": ErrorOut}})
def list_ideas(idea_service: IdeaService = Depends(get_idea_service)):
    try:
        ideas = idea_service.list_ideas()
    except PersistenceError:
        logger.exception("Error fetching ideas")
        return _error(500, "Failed to fetch ideas")
    return [IdeaOut.from_idea(i) for i in ideas]

@router.post("", status_code=201, response_model=IdeaOut, responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}})
def create_idea(payload: IdeaCreate, idea_service: IdeaService = Depends(get_idea_service)):
    try:
        idea = idea_service.create_idea(payload.text)
    except ValidationError as e:
        return _error(400, str(e))
    except PersistenceError:
        logger.exception("Error creating idea")
        return _error(500, "Failed to create idea")
    logger.info("Created idea %s", idea.id)
    return IdeaOut.from_idea(idea)

@router.post("/{idea_id}/upvote", response_model=IdeaOut, responses={404: {"model": ErrorOut}, 500: {"model": ErrorOut}})
def upvote_idea(idea_id: str, idea_service: IdeaService = Depends(get_idea_service)):
    try:
        idea = idea_service.upvote_idea(idea_id)
    except NotFoundError as e:
        return _error(404, str(e))
    except PersistenceError:
        logger.exception("Error upvoting idea %s", idea_id)
        return _error(500, "Failed to upvote idea")
    return IdeaOut.from_idea(idea)
