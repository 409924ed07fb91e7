"""Business rules for the idea board.

Validation happens here, before any SQL runs. Persistence is delegated to
IdeaRepo; its failures surface as ``PersistenceError`` and are left to the
web layer to report.
"""

from __future__ import annotations

from typing import Any, List

from ideaboard.data.idea_repo import IdeaRepo
from ideaboard.models.idea import TEXT_MAX_LENGTH, Idea

# Largest value a sqlite INTEGER column can hold.
MAX_IDEA_ID = 2**63 - 1

class ValidationError(ValueError): pass

class NotFoundError(LookupError): pass

def _parse_idea_id(idea_id: Any) -> int:
    if isinstance(idea_id, bool):
        raise NotFoundError("Idea not found")
    if isinstance(idea_id, int):
        key = idea_id
    elif isinstance(idea_id, str) and idea_id.isascii() and idea_id.isdigit():
        key = int(idea_id)
    else:
        raise NotFoundError("Idea not found")
    if key < 1 or key > MAX_IDEA_ID:
        raise NotFoundError("Idea not found")
    return key

class IdeaService:
    def __init__(self, idea_repo: IdeaRepo):
        self.idea_repo = idea_repo

    def list_ideas(self) -> List[Idea]:
        return self.idea_repo.list_all()

    def create_idea(self, text: Any) -> Idea:
        if not isinstance(text, str) or not text.strip():
            raise ValidationError("Idea text is required")
        # The limit applies to what the caller sent, not the trimmed value.
        if len(text) > TEXT_MAX_LENGTH:
            raise ValidationError(f"Idea must be {TEXT_MAX_LENGTH} characters or less")
        try:
            text.encode("utf-8")
        except UnicodeEncodeError:
            raise ValidationError("Idea text must be valid Unicode") from None
        return self.idea_repo.create(text.strip())

    def upvote_idea(self, idea_id: Any) -> Idea:
        idea = self.idea_repo.increment_upvotes(_parse_idea_id(idea_id))
        if idea is None:
            raise NotFoundError("Idea not found")
        return idea
