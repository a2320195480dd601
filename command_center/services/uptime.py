from __future__ import annotations

import time
from typing import Callable

import psutil

from command_center.schemas.uptime import UptimeResult


def get_uptime(clock: Callable[[], float] = time.time) -> UptimeResult:
    now = clock()
    return UptimeResult(
        systemSeconds=round(max(0.0, now - psutil.boot_time()), 2),
        processSeconds=round(max(0.0, now - psutil.Process().create_time()), 2),
    )
