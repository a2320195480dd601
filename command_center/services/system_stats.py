from __future__ import annotations

import asyncio
import logging
import platform
from typing import Sequence

import psutil

from command_center.schemas.system import (
    CpuStats,
    DiskResult,
    DiskUsage,
    MemoryStats,
    SystemSnapshot,
)
from command_center.services.errors import DiskQueryError, contain

logger = logging.getLogger(__name__)

DISK_COMMAND = ("df", "-k", "--output=size,used", "/")


def get_cpu_stats() -> CpuStats:
    load1, load5, load15 = psutil.getloadavg()
    return CpuStats(
        load1=round(load1, 2),
        load5=round(load5, 2),
        load15=round(load15, 2),
        cores=psutil.cpu_count(logical=True) or 0,
    )


def get_memory_stats() -> MemoryStats:
    vm = psutil.virtual_memory()
    total = vm.total
    free = vm.available
    used = total - free
    return MemoryStats(
        totalBytes=total,
        usedBytes=used,
        freeBytes=free,
        usedPercentage=round(used / total * 100, 2) if total else 0.0,
    )


def parse_disk_output(stdout: str) -> DiskUsage:
    """Parse the `<size_kb> <used_kb>` pair on the last line of df output."""
    lines = [ln for ln in stdout.splitlines() if ln.strip()]
    if not lines:
        raise DiskQueryError("empty output")
    fields = lines[-1].split()
    if len(fields) != 2:
        raise DiskQueryError(f"expected 2 fields, got {len(fields)}: {lines[-1]!r}")
    try:
        size_kb, used_kb = (int(f) for f in fields)
    except ValueError:
        raise DiskQueryError(f"Invalid disk data: {lines[-1]!r}") from None
    if size_kb <= 0 or used_kb < 0:
        raise DiskQueryError(f"Invalid disk data: {lines[-1]!r}")

    total = size_kb * 1024
    used = used_kb * 1024
    return DiskUsage(
        totalBytes=total,
        usedBytes=used,
        freeBytes=total - used,
        usedPercentage=round(used / total * 100, 2),
    )


async def _query_disk(command: Sequence[str]) -> DiskUsage:
    try:
        proc = await asyncio.create_subprocess_exec(
            *command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise DiskQueryError(f"{command[0]}: {e}") from e

    try:
        stdout, stderr = await proc.communicate()
    except asyncio.CancelledError:
        # wait_for cancels us on timeout; do not leave df behind
        if proc.returncode is None:
            proc.kill()
            await proc.wait()
        raise

    logger.debug("%s exited with %s", command[0], proc.returncode)
    if proc.returncode != 0:
        msg = stderr.decode(errors="replace").strip() or f"exit status {proc.returncode}"
        raise DiskQueryError(msg)
    return parse_disk_output(stdout.decode(errors="replace"))


async def get_disk_usage(timeout: float, command: Sequence[str] = DISK_COMMAND) -> DiskResult:
    return await contain("disk", _query_disk(command), timeout)


async def get_system_snapshot(timeout: float, disk_command: Sequence[str] = DISK_COMMAND) -> SystemSnapshot:
    disk = await get_disk_usage(timeout, disk_command)
    return SystemSnapshot(
        cpu=get_cpu_stats(),
        memory=get_memory_stats(),
        disk=disk,
        platform=platform.system().lower(),
        release=platform.release(),
    )
