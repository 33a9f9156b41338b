from fastapi import APIRouter
from datetime import datetime, timezone
from src.config import settings
from src.models.health import HealthStatus

router = APIRouter(prefix="/api", tags=["health"])

@router.get("/health", response_model=HealthStatus)
def health_check():
    return HealthStatus(
        status="ok",
        service=settings.SERVICE_NAME,
        time=datetime.now(timezone.utc).isoformat(),
    )
