from __future__ import annotations
from typing import Optional

from .client_base import SlowlogClient
from .models import Version

VERSION_KEY = "redis_version"


def probe_version(client: SlowlogClient) -> Optional[Version]:
    """
    Read the server version with a single INFO server round trip.

    Returns None when redis_version is missing or empty, callers treat
    that as a legacy server. A value that is present but malformed raises
    VersionParseError.
    """
    info = client.server_info()
    raw = info.get(VERSION_KEY)
    if raw is None:
        return None

    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    text = str(raw)
    if not text:
        return None

    return Version.parse(text)
