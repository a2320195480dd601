from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel

from command_center.schemas.common import ErrorResult


class RepoSummary(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    url: str
    # GitHub reports null for repositories that never received a push
    pushedAt: Optional[datetime] = None
    stars: int
    language: Optional[str] = None


GithubResult = Union[List[RepoSummary], ErrorResult]
