from __future__ import annotations

from typing import Union

from pydantic import BaseModel

from command_center.schemas.common import ErrorResult


class CpuStats(BaseModel):
    load1: float
    load5: float
    load15: float
    cores: int


class MemoryStats(BaseModel):
    totalBytes: int
    usedBytes: int
    freeBytes: int
    usedPercentage: float


class DiskUsage(BaseModel):
    totalBytes: int
    usedBytes: int
    freeBytes: int
    usedPercentage: float


DiskResult = Union[DiskUsage, ErrorResult]


class SystemSnapshot(BaseModel):
    cpu: CpuStats
    memory: MemoryStats
    disk: DiskResult
    platform: str
    release: str
