from __future__ import annotations
import json
from typing import Callable

from .models import SlowlogEntry


def format_entry(entry: SlowlogEntry) -> str:
    """
    One human readable line per entry, for example:

      [2021-06-01T12:00:00Z] id=42, time=12.3[ms], cmd='["SET", "k", "v"]', address=127.0.0.1:5555, name=worker

    Entries reaching the reporter have already passed the registry, so
    started_at() is known to be valid.
    """
    started = entry.started_at()
    ts = started.strftime("%Y-%m-%dT%H:%M:%SZ") if started is not None else str(entry.timestamp)
    cmd = json.dumps(entry.command, ensure_ascii=False)
    return (
        f"[{ts}] id={entry.id}, time={entry.exec_time_ms():.1f}[ms], "
        f"cmd='{cmd}', address={entry.address}, name={entry.client_name}"
    )


class SlowlogReporter:
    """
    Writes formatted entries to an output callable, stdout by default.

    Write errors are not caught here.
    """

    def __init__(self, write: Callable[[str], None] = print):
        self._write = write
        self.emitted = 0

    def emit(self, entry: SlowlogEntry) -> None:
        self._write(format_entry(entry))
        self.emitted += 1
