"""
Mentee request model for the Mentor Matching System.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

try:
    from ..config import DEFAULT_URGENCY, REQUEST_STATUSES
except ImportError:
    from config import DEFAULT_URGENCY, REQUEST_STATUSES

from .mentor import availability_to_dict, availability_from_dict


@dataclass(frozen=True)
class MenteeRequest:
    id: str
    student_id: str
    college: str
    topics: List[str]  # order is kept for explanation text
    preferred_availability: Dict[str, Set[str]] = field(default_factory=dict)
    urgency: str = DEFAULT_URGENCY  # "low" | "medium" | "high"
    created_at: int = 0
    description: Optional[str] = None
    status: str = "pending"  # owned by the store: "pending" | "matched" | "expired"

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "student_id": self.student_id,
            "college": self.college,
            "topics": list(self.topics),
            "preferred_availability": availability_to_dict(self.preferred_availability),
            "urgency": self.urgency,
            "created_at": int(self.created_at),
            "description": self.description,
            "status": self.status,
        }

    @staticmethod
    def from_dict(d: Dict) -> "MenteeRequest":
        status = d.get("status", "pending")
        if status not in REQUEST_STATUSES:
            raise ValueError(f"Unknown request status: {status}")
        return MenteeRequest(
            id=d["id"],
            student_id=d.get("student_id", d["id"]),
            college=d.get("college", ""),
            topics=list(d.get("topics", [])),
            preferred_availability=availability_from_dict(d.get("preferred_availability")),
            urgency=d.get("urgency", DEFAULT_URGENCY),
            created_at=int(d.get("created_at", 0)),
            description=d.get("description"),
            status=status,
        )
