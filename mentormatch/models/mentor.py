"""
Mentor profile model for the Mentor Matching System.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

try:
    from ..config import DEFAULT_MAX_MENTEES
except ImportError:
    from config import DEFAULT_MAX_MENTEES


def availability_to_dict(availability: Dict[str, Set[str]]) -> Dict[str, List[str]]:
    """Serialize a day -> slots schedule with stable slot order."""
    return {day: sorted(slots) for day, slots in availability.items()}


def availability_from_dict(d: Optional[Dict]) -> Dict[str, Set[str]]:
    return {str(day): set(slots or []) for day, slots in (d or {}).items()}


@dataclass
class MentorProfile:
    id: str
    student_id: str
    college: str
    topics: Set[str]
    availability: Dict[str, Set[str]]  # day -> time slots
    karma: int = 0
    streak: int = 0  # consecutive weeks active
    rating: float = 0.0  # 0..5
    is_active: bool = True  # opt-out flag
    max_mentees: int = DEFAULT_MAX_MENTEES
    current_mentees: List[str] = field(default_factory=list)
    last_active_at: int = 0
    created_at: int = 0
    total_sessions: int = 0
    display_name: Optional[str] = None
    bio: Optional[str] = None

    @property
    def open_slots(self) -> int:
        return max(0, int(self.max_mentees) - len(self.current_mentees))

    @property
    def has_capacity(self) -> bool:
        return len(self.current_mentees) < int(self.max_mentees)

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "student_id": self.student_id,
            "college": self.college,
            "topics": sorted(self.topics),
            "availability": availability_to_dict(self.availability),
            "karma": int(self.karma),
            "streak": int(self.streak),
            "rating": float(self.rating),
            "is_active": bool(self.is_active),
            "max_mentees": int(self.max_mentees),
            "current_mentees": list(self.current_mentees),
            "last_active_at": int(self.last_active_at),
            "created_at": int(self.created_at),
            "total_sessions": int(self.total_sessions),
            "display_name": self.display_name,
            "bio": self.bio,
        }

    @staticmethod
    def from_dict(d: Dict) -> "MentorProfile":
        return MentorProfile(
            id=d["id"],
            student_id=d.get("student_id", d["id"]),
            college=d.get("college", ""),
            topics=set(d.get("topics", [])),
            availability=availability_from_dict(d.get("availability")),
            karma=int(d.get("karma", 0)),
            streak=int(d.get("streak", 0)),
            rating=float(d.get("rating", 0.0)),
            is_active=bool(d.get("is_active", True)),
            max_mentees=int(d.get("max_mentees", DEFAULT_MAX_MENTEES)),
            current_mentees=list(d.get("current_mentees", [])),
            last_active_at=int(d.get("last_active_at", 0)),
            created_at=int(d.get("created_at", 0)),
            total_sessions=int(d.get("total_sessions", 0)),
            display_name=d.get("display_name"),
            bio=d.get("bio"),
        )
