from __future__ import annotations

import time
from typing import Callable, Sequence

from command_center.schemas.motivation import MotivationResult

QUOTES = (
    "The bugs fear you. Show them why.",
    "Deploy dreams, not excuses.",
    "Stay determined - even Stack Overflow sleeps sometimes.",
    "Every commit is a spell. Cast wisely.",
    "Code today like the future depends on it.",
)

ROTATION_MS = 60_000


def quote_index(epoch_ms: int, count: int) -> int:
    return (epoch_ms // ROTATION_MS) % count


def get_motivation(
    clock: Callable[[], float] = time.time,
    quotes: Sequence[str] = QUOTES,
) -> MotivationResult:
    """Quote of the current minute; same input minute, same quote."""
    epoch_ms = int(clock() * 1000)
    return MotivationResult(
        quote=quotes[quote_index(epoch_ms, len(quotes))],
        allQuotes=list(quotes),
    )
