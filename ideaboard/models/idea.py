from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, Dict

TEXT_MAX_LENGTH = 280

@dataclass(frozen=True)
class Idea:
    id: int
    text: str
    upvotes: int
    created_at: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
