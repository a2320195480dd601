from pydantic import BaseModel


class UptimeResult(BaseModel):
    systemSeconds: float
    processSeconds: float
