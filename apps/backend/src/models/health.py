from pydantic import BaseModel


class HealthStatus(BaseModel):
    """Liveness payload. Field order is the serialized key order."""
    status: str = "ok"
    service: str
    time: str
