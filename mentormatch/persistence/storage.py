"""
State persistence for the Mentor Matching System.
"""

from __future__ import annotations

import json
import os
from dataclasses import replace
from typing import Dict, List, Optional, Set

try:
    from ..config import STATE_FILE
    from ..models.state import MentorshipState
except ImportError:
    from config import STATE_FILE
    from models.state import MentorshipState


def load_state(path: Optional[str] = None) -> MentorshipState:
    """Load the store snapshot from file (fresh state if missing or unreadable)."""
    path = path or STATE_FILE
    if not os.path.exists(path):
        return MentorshipState()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        st = MentorshipState.from_dict(data)
    except Exception as e:
        print(f"Failed to load state from {path}: {e}")
        st = MentorshipState()

    reconcile_state(st)
    return st


def save_state(state: MentorshipState, path: Optional[str] = None) -> None:
    """Save the store snapshot to file."""
    path = path or STATE_FILE
    data = state.to_dict()
    tmp_path = f"{path}.tmp"
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, path)
    except Exception as e:
        print(f"Failed to save state to {path}: {e}")
        try:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
        except Exception:
            pass


def reconcile_state(state: MentorshipState) -> None:
    """
    Make state internally consistent:
    - Remove matches referencing missing mentors.
    - Every active match holds a slot: its mentee is listed on the mentor.
    - Mentee lists carry no duplicates.
    - Requests with an active match are status=matched.
    """
    to_delete: List[str] = [k for k, m in state.matches.items() if m.mentor_id not in state.mentors]
    for k in to_delete:
        state.matches.pop(k, None)

    held: Dict[str, List[str]] = {}
    for m in state.active_matches():
        held.setdefault(m.mentor_id, []).append(m.mentee_id)

    for mid, mentor in list(state.mentors.items()):
        seen: Set[str] = set()
        mentees: List[str] = []
        for mentee_id in list(mentor.current_mentees) + held.get(mid, []):
            if mentee_id not in seen:
                seen.add(mentee_id)
                mentees.append(mentee_id)
        if mentees != list(mentor.current_mentees):
            state.mentors[mid] = replace(mentor, current_mentees=mentees)

    for m in state.active_matches():
        req = state.requests.get(m.request_id)
        if req is not None and req.status != "matched":
            state.requests[req.id] = replace(req, status="matched")
