from __future__ import annotations


class SlowlogMonitorError(Exception):
    """
    Base class for fatal monitor errors.

    Transport failures are not wrapped, they surface as redis exceptions.
    """


class VersionParseError(SlowlogMonitorError):
    """
    INFO server returned a redis_version that is not major.minor.patch.
    The record schema cannot be chosen safely, so the monitor must stop.
    """


class SlowlogDecodeError(SlowlogMonitorError):
    """
    A SLOWLOG GET record does not match the schema selected at startup.
    """
