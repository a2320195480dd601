# command_center/services/errors.py
"""
Failure taxonomy for the data sources.

Adapters raise a SourceError subclass internally; `contain` is the boundary
that turns it (or a timeout) into an ErrorResult value so nothing but a
genuine bug ever leaves an adapter as an exception.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Optional, TypeVar, Union

from command_center.schemas.common import ErrorResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SourceError(Exception):
    def __init__(self, error: str, details: str = ""):
        super().__init__(error)
        self.error = error
        self.details = details

    def to_result(self) -> ErrorResult:
        return ErrorResult(error=self.error, details=self.details)


class ConfigError(SourceError):
    """Required configuration (username, coordinates) is absent."""


class RemoteAPIError(SourceError):
    def __init__(self, service: str, status: Optional[int], body: str):
        if status is None:
            error = f"{service} API unreachable"
        else:
            error = f"{service} API error: {status}"
        super().__init__(error, body)
        self.service = service
        self.status = status


class DiskQueryError(SourceError):
    def __init__(self, details: str):
        super().__init__("Unable to determine disk usage", details)


class SourceTimeoutError(SourceError):
    def __init__(self, source: str, seconds: float):
        super().__init__(f"{source} timed out", f"no answer within {seconds:g}s")
        self.source = source
        self.seconds = seconds


class InternalError(Exception):
    """Unexpected failure inside a route; rendered as HTTP 500."""


def unavailable(source: str, err: SourceError) -> ErrorResult:
    logger.warning("%s unavailable: %s (%s)", source, err.error, err.details[:200])
    return err.to_result()


async def contain(source: str, aw: Awaitable[T], timeout: float) -> Union[T, ErrorResult]:
    try:
        return await asyncio.wait_for(aw, timeout)
    except asyncio.TimeoutError:
        err: SourceError = SourceTimeoutError(source, timeout)
    except SourceError as e:
        err = e
    return unavailable(source, err)
