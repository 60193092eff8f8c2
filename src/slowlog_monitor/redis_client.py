from __future__ import annotations
from typing import Any, Dict, List

import redis


class RedisSlowlogClient:
    """
    SlowlogClient backed by redis-py.

    SLOWLOG GET is sent through execute_command with the subcommand as a
    separate argument. That bypasses redis-py's own slowlog reply parser,
    so records reach the decoder as raw nested lists.
    """

    def __init__(self, conn: redis.Redis):
        self.conn = conn

    @classmethod
    def from_url(cls, url: str) -> "RedisSlowlogClient":
        """
        Connect and PING once so an unreachable server fails at startup.
        Replies are left as bytes, the decoder owns the text conversion.
        Raises redis.exceptions.ConnectionError.
        """
        conn = redis.Redis.from_url(url)
        conn.ping()
        return cls(conn)

    def server_info(self) -> Dict[str, Any]:
        return self.conn.info("server")

    def slowlog_get(self, count: int) -> List[Any]:
        return list(self.conn.execute_command("SLOWLOG", "GET", int(count)))
