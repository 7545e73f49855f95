"""Service layer exports."""
from storehours.services import (
    availability_service,
    conversion_service,
    filter_service,
    schedule_service,
    status_service,
    timezone_service,
)

__all__ = [
    "availability_service",
    "conversion_service",
    "filter_service",
    "schedule_service",
    "status_service",
    "timezone_service",
]
