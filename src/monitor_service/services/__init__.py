from src.monitor_service.services.monitor_service import MonitorService

__all__ = ["MonitorService"]
