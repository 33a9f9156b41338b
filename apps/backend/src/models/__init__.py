from .health import HealthStatus

__all__ = ["HealthStatus"]
