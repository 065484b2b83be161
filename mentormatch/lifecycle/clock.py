"""
Clock and id generation for the Mentor Matching System.

Everything time- or id-dependent takes `clock` / `id_factory` callables
defaulting to these, so tests can pass deterministic ones.
"""

from __future__ import annotations

import time
import uuid
from typing import Callable

Clock = Callable[[], int]
IdFactory = Callable[[], str]


def now_ms() -> int:
    """Current wall time in epoch milliseconds."""
    return int(time.time() * 1000)


def new_id() -> str:
    return str(uuid.uuid4())
