from __future__ import annotations
from typing import FrozenSet, Iterable

from .models import SlowlogEntry

# The monitor's own polling commands. Reporting them would feed the slow
# log with more of the monitor's own traffic on every poll.
DEFAULT_IGNORE_COMMANDS = ("SLOWLOG", "INFO")


class IgnoreFilter:
    """
    Drops entries whose command name is in the ignore set.

    Exact, case insensitive match on the first command token.
    """

    def __init__(self, commands: Iterable[str] = DEFAULT_IGNORE_COMMANDS):
        self.commands: FrozenSet[str] = frozenset(c.upper() for c in commands)

    def should_report(self, entry: SlowlogEntry) -> bool:
        return entry.name() not in self.commands
