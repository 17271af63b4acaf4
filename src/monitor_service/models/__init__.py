"""Model exports.

Import from here: `from src.monitor_service.models import Monitor`
"""

from src.monitor_service.models.base import generate_id, utc_now
from src.monitor_service.models.monitor import MONITOR_SCHEMA, Monitor

__all__ = [
    "MONITOR_SCHEMA",
    "Monitor",
    "generate_id",
    "utc_now",
]
