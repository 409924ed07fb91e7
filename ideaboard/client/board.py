"""Polling client for the idea board API.

Keeps a local copy of the board (the idea list, the draft being typed, a
loading flag, a submitting flag, and one error message) and talks to the
API with httpx. Upvotes are applied locally before the server answers and
are not rolled back; the next successful poll replaces the whole list.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field, replace
from typing import List, Optional

import httpx

from ideaboard.models.idea import TEXT_MAX_LENGTH, Idea

logger = logging.getLogger(__name__)

POLL_INTERVAL_SECONDS = 5.0

LOAD_ERROR = "Failed to load ideas. Please try again."
SUBMIT_ERROR = "Failed to submit idea. Please try again."
UPVOTE_ERROR = "Failed to upvote. Please try again."
EMPTY_ERROR = "Please enter an idea"
TOO_LONG_ERROR = f"Idea must be {TEXT_MAX_LENGTH} characters or less"

@dataclass
class BoardState:
    ideas: List[Idea] = field(default_factory=list)
    draft: str = ""
    loading: bool = True
    submitting: bool = False
    error: str = ""

def _idea_from_json(data: dict) -> Idea:
    return Idea(id=int(data["id"]), text=data["text"], upvotes=int(data["upvotes"]), created_at=str(data["created_at"]))

class IdeaBoardClient:
    def __init__(self, base_url: str, http: Optional[httpx.Client] = None, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.http = http or httpx.Client(timeout=timeout)
        self.state = BoardState()
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._poller: Optional[threading.Thread] = None

    # ---------- state helpers ----------

    def _set_error(self, message: str) -> None:
        with self._lock:
            self.state.error = message

    @property
    def remaining_chars(self) -> int:
        return TEXT_MAX_LENGTH - len(self.state.draft)

    # ---------- API operations ----------

    def refresh(self) -> bool:
        """Replace the local list with the server's; keep the old one on failure."""
        try:
            response = self.http.get(f"{self.base_url}/api/ideas")
            response.raise_for_status()
            ideas = [_idea_from_json(item) for item in response.json()]
        except (httpx.HTTPError, ValueError, KeyError, TypeError):
            logger.exception("Error fetching ideas")
            with self._lock:
                self.state.error = LOAD_ERROR
                self.state.loading = False
            return False
        with self._lock:
            self.state.ideas = ideas
            self.state.error = ""
            self.state.loading = False
        return True

    def submit(self, text: Optional[str] = None) -> bool:
        if text is not None:
            self.state.draft = text
        draft = self.state.draft

        if not draft.strip():
            self._set_error(EMPTY_ERROR)
            return False
        if len(draft) > TEXT_MAX_LENGTH:
            self._set_error(TOO_LONG_ERROR)
            return False

        with self._lock:
            self.state.submitting = True
            self.state.error = ""
        try:
            response = self.http.post(f"{self.base_url}/api/ideas", json={"text": draft})
            response.raise_for_status()
        except httpx.HTTPError:
            logger.exception("Error submitting idea")
            self._set_error(SUBMIT_ERROR)
            return False
        finally:
            with self._lock:
                self.state.submitting = False

        with self._lock:
            self.state.draft = ""
        self.refresh()
        return True

    def upvote(self, idea_id: int) -> bool:
        with self._lock:
            self.state.ideas = [
                replace(i, upvotes=i.upvotes + 1) if i.id == idea_id else i for i in self.state.ideas
            ]
        try:
            response = self.http.post(f"{self.base_url}/api/ideas/{idea_id}/upvote")
            response.raise_for_status()
        except httpx.HTTPError:
            logger.exception("Error upvoting idea %s", idea_id)
            self._set_error(UPVOTE_ERROR)
            return False
        return True

    # ---------- polling ----------

    def _poll_loop(self, interval: float) -> None:
        while not self._stop.is_set():
            self.refresh()
            if self._stop.wait(interval):
                break

    def start_polling(self, interval: float = POLL_INTERVAL_SECONDS) -> None:
        if self._poller and self._poller.is_alive():
            return
        self._stop.clear()
        self._poller = threading.Thread(target=self._poll_loop, args=(interval,), name="ideaboard-poller", daemon=True)
        self._poller.start()

    def stop_polling(self) -> None:
        self._stop.set()
        if self._poller:
            self._poller.join()
            self._poller = None

    def close(self) -> None:
        self.stop_polling()
        self.http.close()

    def __enter__(self) -> "IdeaBoardClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
