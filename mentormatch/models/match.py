"""
Mentor match model for the Mentor Matching System.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

try:
    from ..config import MATCH_STATUSES
except ImportError:
    from config import MATCH_STATUSES

from .explanation import MatchExplanation


@dataclass
class MentorMatch:
    id: str
    request_id: str
    mentor_id: str
    mentee_id: str
    score: float  # 0..100, rounded for display
    explanation: MatchExplanation
    matched_at: int
    status: str = "active"  # "active" | "completed" | "cancelled" | "expired"
    session_started_at: Optional[int] = None
    last_interaction_at: Optional[int] = None
    expires_at: Optional[int] = None  # informational; expiry uses last_activity_at

    @property
    def is_active(self) -> bool:
        return self.status == "active"

    @property
    def last_activity_at(self) -> int:
        for ts in (self.last_interaction_at, self.session_started_at):
            if ts is not None:
                return int(ts)
        return int(self.matched_at)

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "request_id": self.request_id,
            "mentor_id": self.mentor_id,
            "mentee_id": self.mentee_id,
            "score": float(self.score),
            "explanation": self.explanation.to_dict(),
            "matched_at": int(self.matched_at),
            "status": self.status,
            "session_started_at": self.session_started_at,
            "last_interaction_at": self.last_interaction_at,
            "expires_at": self.expires_at,
        }

    @staticmethod
    def from_dict(d: Dict) -> "MentorMatch":
        d2 = dict(d)
        d2["explanation"] = MatchExplanation.from_dict(d2.get("explanation", {}))
        d2.setdefault("status", "active")
        d2.setdefault("session_started_at", None)
        d2.setdefault("last_interaction_at", None)
        d2.setdefault("expires_at", None)
        if d2["status"] not in MATCH_STATUSES:
            raise ValueError(f"Unknown match status: {d2['status']}")
        return MentorMatch(**d2)
