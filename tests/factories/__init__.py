"""Test data factories using polyfactory."""

from tests.factories.monitor import MonitorFactory

__all__ = ["MonitorFactory"]
