from typing import Literal
from pydantic import BaseModel


class HealthIndicator(BaseModel):
    status: Literal["up", "down"]
    message: str | None = None


class HealthResponse(BaseModel):
    status: Literal["ok", "error"]
    info: dict[str, HealthIndicator] = {}
    error: dict[str, HealthIndicator] = {}
