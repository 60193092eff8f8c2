import pytest
import redis

from slowlog_monitor.cli import run_monitor
from tests.fakes import FakeSlowlogClient, ext


def use_client(monkeypatch, client):
    monkeypatch.setattr(run_monitor.RedisSlowlogClient, "from_url", staticmethod(lambda url: client))


def test_connection_failure_exits_with_message(monkeypatch, capsys):
    def refuse(url):
        raise redis.exceptions.ConnectionError(f"cannot connect to {url}")

    monkeypatch.setattr(run_monitor.RedisSlowlogClient, "from_url", staticmethod(refuse))

    with pytest.raises(SystemExit) as exc:
        run_monitor.main()

    assert exc.value.code == 1
    assert "fatal: cannot connect to redis://127.0.0.1" in capsys.readouterr().err


def test_malformed_version_exits_with_message(monkeypatch, capsys):
    use_client(monkeypatch, FakeSlowlogClient(info={"redis_version": "7.2"}))

    with pytest.raises(SystemExit) as exc:
        run_monitor.main()

    assert exc.value.code == 1
    assert "fatal: invalid redis version '7.2'" in capsys.readouterr().err


def test_binary_command_argument_exits_with_message(monkeypatch, capsys):
    # raw reply bytes, as redis-py returns them without decode_responses
    raw = [b"1", b"1622548800", b"10", [b"SET", b"k", b"\xff\x80"], b"127.0.0.1:5555", b""]
    use_client(monkeypatch, FakeSlowlogClient(batches=[[raw]]))

    with pytest.raises(SystemExit) as exc:
        run_monitor.main()

    assert exc.value.code == 1
    assert "fatal: command: invalid utf-8" in capsys.readouterr().err


def test_wrong_arity_exits_with_message(monkeypatch, capsys):
    use_client(monkeypatch, FakeSlowlogClient(batches=[[ext(1)[:4]]]))

    with pytest.raises(SystemExit) as exc:
        run_monitor.main()

    assert exc.value.code == 1
    assert "fatal: record: expected 6 fields" in capsys.readouterr().err
