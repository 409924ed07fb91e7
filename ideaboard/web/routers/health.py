from __future__ import annotations
from datetime import datetime, timezone
from fastapi import APIRouter

from ideaboard.web.schemas import HealthOut

router = APIRouter(tags=["health"])

@router.get("/health", response_model=HealthOut)
def health():
    return HealthOut(status="ok", timestamp=datetime.now(timezone.utc).isoformat())
