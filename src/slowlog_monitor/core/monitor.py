from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from .client_base import SlowlogClient
from .decoder import decode_slowlog
from .dedupe import SeenRegistry
from .filter import DEFAULT_IGNORE_COMMANDS, IgnoreFilter
from .models import SlowlogEntry, SlowlogSchema, Version
from .probe import probe_version
from .reporter import SlowlogReporter


@dataclass(frozen=True)
class MonitorConfig:
    """
    Polling constants, passed to the monitor at construction.

    url
      Server to monitor. Only used by the CLI to build the client.

    batch_size
      How many of the most recent entries SLOWLOG GET asks for.

    interval_seconds
      Sleep between two polls.

    ignore_commands
      Command names never reported, matched case insensitively.
    """

    url: str = "redis://127.0.0.1"
    batch_size: int = 100
    interval_seconds: float = 5.0
    ignore_commands: Tuple[str, ...] = DEFAULT_IGNORE_COMMANDS


class SlowlogMonitor:
    """
    Slow log poll loop.

    States:
      startup
        Probe the server version once and fix the record schema.
        The server is assumed not to change version while we run.

      polling
        Fetch, decode, filter, dedupe, report, sleep. Forever.

    There is no exit transition. Decode errors and transport errors are
    fatal and propagate to the caller. Entries with an invalid timestamp
    are skipped silently and counted.
    """

    def __init__(
        self,
        client: SlowlogClient,
        config: Optional[MonitorConfig] = None,
        reporter: Optional[SlowlogReporter] = None,
        log: Callable[[str], None] = print,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.client = client
        self.config = config or MonitorConfig()
        self.reporter = reporter or SlowlogReporter()
        self.ignore = IgnoreFilter(self.config.ignore_commands)
        self.seen = SeenRegistry()
        self._log = log
        self._sleep = sleep

        self.version: Optional[Version] = None
        self.schema: Optional[SlowlogSchema] = None

        self._polls = 0
        self._fetched = 0
        self._ignored = 0
        self._duplicates = 0
        self._invalid_timestamps = 0

    def start(self) -> Optional[Version]:
        self.version = probe_version(self.client)
        self.schema = SlowlogSchema.for_version(self.version)

        if self.version is not None:
            self._log(f"redis version: {self.version}")
        else:
            self._log("redis version: unknown")
        return self.version

    def poll_once(self) -> List[SlowlogEntry]:
        """
        Run one polling pass and return the entries reported in it.

        Records are handled in the order the server returned them.
        Ignored commands are dropped before the registry sees them, so
        their ids are never registered.
        """
        if self.schema is None:
            self.start()

        raws = self.client.slowlog_get(self.config.batch_size)
        self._polls += 1
        self._fetched += len(raws)

        reported: List[SlowlogEntry] = []
        for raw in raws:
            entry = decode_slowlog(raw, self.schema)

            if not self.ignore.should_report(entry):
                self._ignored += 1
                continue

            if entry.id in self.seen:
                self._duplicates += 1
                continue

            if not self.seen.is_new(entry):
                self._invalid_timestamps += 1
                continue

            self.reporter.emit(entry)
            reported.append(entry)

        return reported

    def run(self) -> None:
        if self.schema is None:
            self.start()

        while True:
            self.poll_once()
            self._sleep(self.config.interval_seconds)

    def status(self) -> Dict[str, Any]:
        return {
            "version": str(self.version) if self.version is not None else None,
            "schema": self.schema.name.lower() if self.schema is not None else None,
            "polls": self._polls,
            "fetched": self._fetched,
            "ignored": self._ignored,
            "duplicates": self._duplicates,
            "invalid_timestamps": self._invalid_timestamps,
            "reported": self.reporter.emitted,
            "seen": len(self.seen),
        }
