"""
slowlog_monitor

Polls the slow log of a running Redis server and reports every newly
observed slow command exactly once.

Core ideas
1. The server version is probed once and fixes the record schema
2. Decoders normalize raw SLOWLOG GET records into SlowlogEntry
3. Core monitor filters, dedupes and reports SlowlogEntry without knowing the wire shape
"""

__all__ = ["core", "cli", "redis_client"]
