from __future__ import annotations
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import List, Optional

from .errors import VersionParseError

_VERSION_RE = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")

# SLOWLOG GET started returning client address and name in Redis 4.0
EXTENDED_SCHEMA_MAJOR = 4


@dataclass(frozen=True)
class Version:
    """
    Server version as reported by INFO server.

    Always complete. A version string that does not split into three
    numeric parts is rejected instead of being partially filled.
    """

    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, text: str) -> "Version":
        m = _VERSION_RE.fullmatch(text)
        if m is None:
            raise VersionParseError(f"invalid redis version {text!r}")
        return cls(major=int(m.group(1)), minor=int(m.group(2)), patch=int(m.group(3)))

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


class SlowlogSchema(Enum):
    """
    Shape of one SLOWLOG GET record.

    LEGACY
      id, timestamp, duration_us, command

    EXTENDED
      id, timestamp, duration_us, command, client address, client name
    """

    LEGACY = 4
    EXTENDED = 6

    @property
    def arity(self) -> int:
        return self.value

    @classmethod
    def for_version(cls, version: Optional[Version]) -> "SlowlogSchema":
        """
        Unknown version is treated as major 0, the most conservative shape.
        """
        major = version.major if version is not None else 0
        if major >= EXTENDED_SCHEMA_MAJOR:
            return cls.EXTENDED
        return cls.LEGACY


@dataclass
class SlowlogEntry:
    """
    Normalized slow log record.

    Fields:
      id
        Server assigned id, unique for the server lifetime.

      timestamp
        Unix time in seconds when the command was processed.

      duration
        Execution time, built from the microsecond count the server reports.

      command
        Command name followed by its arguments. Never empty.

      address, client_name
        Client info, empty when the server is older than 4.0.
    """

    id: int
    timestamp: int
    duration: timedelta
    command: List[str]
    address: str = ""
    client_name: str = ""

    def name(self) -> str:
        """
        Upper cased command name, used for filtering.
        """
        return self.command[0].upper()

    def started_at(self) -> Optional[datetime]:
        """
        UTC datetime for timestamp, or None when it is not a valid calendar instant.
        """
        try:
            return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    def exec_time_ms(self) -> float:
        # Sub-second part only, whole seconds are not carried over.
        return self.duration.microseconds / 1000.0
