"""
Core modules that must remain transport neutral.

Keep the redis client and connection handling out of this package.
"""

from .models import SlowlogEntry, SlowlogSchema, Version
from .dedupe import SeenRegistry
from .monitor import MonitorConfig, SlowlogMonitor

__all__ = [
    "SlowlogEntry",
    "SlowlogSchema",
    "Version",
    "SeenRegistry",
    "MonitorConfig",
    "SlowlogMonitor",
]
