from __future__ import annotations
import sys

import redis

from slowlog_monitor.core.errors import SlowlogMonitorError
from slowlog_monitor.core.monitor import MonitorConfig, SlowlogMonitor
from slowlog_monitor.redis_client import RedisSlowlogClient


def main() -> None:
    """
    Monitor the slow log of the local redis server.

    Example:
      python -m slowlog_monitor.cli.run_monitor

    Runs until killed. Any fatal error (connection, malformed version,
    malformed slow log record) stops the process with a message on stderr.
    """
    config = MonitorConfig()

    try:
        client = RedisSlowlogClient.from_url(config.url)
        monitor = SlowlogMonitor(client, config=config)
        monitor.run()
    except (SlowlogMonitorError, redis.exceptions.RedisError) as exc:
        print(f"fatal: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
