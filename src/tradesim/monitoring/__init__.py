"""Monitoring exports."""

from tradesim.monitoring.audit import AuditLog
from tradesim.monitoring.monitor import LogNotifier, MemoryNotifier, Monitor, Notifier
from tradesim.monitoring.status import (
    RuntimeStatus,
    build_runtime_status,
    read_runtime_status,
    write_runtime_status,
)

__all__ = [
    "AuditLog",
    "LogNotifier",
    "MemoryNotifier",
    "Monitor",
    "Notifier",
    "RuntimeStatus",
    "build_runtime_status",
    "read_runtime_status",
    "write_runtime_status",
]
