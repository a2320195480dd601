from pydantic import BaseModel, ConfigDict


class ErrorResult(BaseModel):
    """Failure shape shared by every source: never mixed with success fields."""

    model_config = ConfigDict(extra="forbid")

    error: str
    details: str = ""
