"""
Allocation summaries for the Mentor Matching System.
"""

from __future__ import annotations

from typing import Dict, Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from ..matching.allocator import AllocationDecision


def summarize_allocation(decisions: Sequence["AllocationDecision"]) -> Dict:
    """
    Headline numbers for one batch:
      total, matched, unmatched, match_rate,
      mean_score / min_score / max_score over matched pairs (0 when none),
      load: mentor id -> mentees assigned in this batch.
    """
    scores = np.array([d.match.score for d in decisions if d.match is not None], dtype=float)
    load: Dict[str, int] = {}
    for d in decisions:
        if d.match is not None:
            load[d.match.mentor.id] = load.get(d.match.mentor.id, 0) + 1

    total = len(decisions)
    matched = int(scores.size)
    return {
        "total": total,
        "matched": matched,
        "unmatched": total - matched,
        "match_rate": float(matched / total) if total else 0.0,
        "mean_score": float(scores.mean()) if matched else 0.0,
        "min_score": float(scores.min()) if matched else 0.0,
        "max_score": float(scores.max()) if matched else 0.0,
        "load": load,
    }
