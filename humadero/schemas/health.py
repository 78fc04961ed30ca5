from typing import Dict, Literal
from pydantic import BaseModel


class HealthReport(BaseModel):
    status: Literal["ok", "unhealthy"]
    timestamp: str
    uptime: float
    memory: Dict[str, float]
    database: Literal["connected", "disconnected", "not_configured"]
