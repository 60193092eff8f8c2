from __future__ import annotations

from typing import Any, Dict, List, Protocol


class SlowlogClient(Protocol):
    """
    Required interface for the server connection used by the core.

    The core never imports the redis client directly. Anything that can
    answer these two calls can be monitored, which is also how tests feed
    the monitor canned replies.
    """

    def server_info(self) -> Dict[str, Any]:
        """
        Result of INFO server as a flat key/value dict.
        """
        ...

    def slowlog_get(self, count: int) -> List[Any]:
        """
        Raw SLOWLOG GET count reply. Records must be left unparsed,
        the decoder picks their shape from the probed server version.
        """
        ...
