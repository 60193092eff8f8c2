"""
Canned server replies, shaped like redis-py returns them with decode_responses=True.
"""
from typing import Any, Dict, List, Optional

# 2021-06-01T12:00:00Z
TS = 1622548800

# Past year 9999, cannot be turned into a datetime.
BAD_TS = 10 ** 12


def ext(entry_id, cmd=("SET", "k", "v"), ts=TS, us=12345, addr="127.0.0.1:5555", name="worker"):
    return [entry_id, ts, us, list(cmd), addr, name]


def legacy(entry_id, cmd=("SET", "k", "v"), ts=TS, us=12345):
    return [entry_id, ts, us, list(cmd)]


class FakeSlowlogClient:
    """
    Canned server. Each slowlog_get call pops the next batch, the last
    batch is repeated once the list runs out.
    """

    def __init__(self, info: Optional[Dict[str, Any]] = None, batches: Optional[List[List[Any]]] = None):
        self.info = info if info is not None else {"redis_version": "6.2.6"}
        self.batches = list(batches or [[]])
        self.info_calls = 0
        self.slowlog_calls: List[int] = []

    def server_info(self) -> Dict[str, Any]:
        self.info_calls += 1
        return self.info

    def slowlog_get(self, count: int) -> List[Any]:
        self.slowlog_calls.append(count)
        if len(self.batches) > 1:
            return self.batches.pop(0)
        return self.batches[0]
