"""Repository layer - data access abstraction."""

from src.monitor_service.repositories.base import BaseRepository
from src.monitor_service.repositories.monitor import (
    MonitorRepository,
    MonitorRepositoryProtocol,
)

__all__ = [
    "BaseRepository",
    "MonitorRepository",
    "MonitorRepositoryProtocol",
]
