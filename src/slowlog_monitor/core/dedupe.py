from __future__ import annotations
from typing import Dict

from .models import SlowlogEntry


class SeenRegistry:
    """
    Remembers every slow log id reported so far.

    SLOWLOG GET returns the most recent N entries on every call, so the
    same id shows up poll after poll until the server drops it from its
    ring buffer. Ids are kept for the whole process lifetime to report
    each entry at most once.

    Important:
      Nothing is ever evicted. That is fine for monitoring sessions.
      For long running deployments, bound this by dropping ids older than
      the server side slowlog-max-len could still return.
    """

    def __init__(self):
        self._seen: Dict[int, SlowlogEntry] = {}

    def is_new(self, entry: SlowlogEntry) -> bool:
        """
        True means report the entry now, it has been registered.
        False means the id was already seen, or the timestamp is not a valid
        calendar instant. Such entries are not registered and get another
        chance on the next poll.
        """
        if entry.id in self._seen:
            return False

        if entry.started_at() is None:
            return False

        self._seen[entry.id] = entry
        return True

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._seen

    def __len__(self) -> int:
        return len(self._seen)
