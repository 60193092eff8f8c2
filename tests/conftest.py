import pytest

from slowlog_monitor.core.monitor import MonitorConfig, SlowlogMonitor
from slowlog_monitor.core.reporter import SlowlogReporter


@pytest.fixture
def lines():
    return []


@pytest.fixture
def logs():
    return []


@pytest.fixture
def make_monitor(lines, logs):
    def build(client, **config):
        return SlowlogMonitor(
            client,
            config=MonitorConfig(**config),
            reporter=SlowlogReporter(write=lines.append),
            log=logs.append,
        )
    return build
