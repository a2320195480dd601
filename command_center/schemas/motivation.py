from typing import List

from pydantic import BaseModel


class MotivationResult(BaseModel):
    quote: str
    allQuotes: List[str]
