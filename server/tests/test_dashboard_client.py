import asyncio
import json
import sys

import pytest
from websockets.datastructures import Headers
from websockets.exceptions import InvalidStatus
from websockets.http11 import Response

import dashboard_client
from dashboard_client import DashboardClient
from models.schemas import DashboardState, Reading
from services.summary import compute_summary
from services.websocket_manager import error_message, state_message

URL = "ws://localhost:8000/ws-dashboard"


def state_frame(running=True, *values):
    readings = tuple(Reading(timestamp=f"12:00:{i:02d}", value=v) for i, v in enumerate(values))
    return state_message(DashboardState(running=running, readings=readings, summary=compute_summary(readings)))


class FakeWebSocket:
    def __init__(self, frames):
        self.frames = list(frames)
        self.sent = []
        self.closed = False

    async def send(self, data):
        self.sent.append(data)

    async def close(self):
        self.closed = True

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for frame in self.frames:
            yield frame


def fake_connect(result):
    async def connect(url):
        if isinstance(result, Exception):
            raise result
        return result
    return connect


def test_state_message_is_rendered(capsys):
    client = DashboardClient(URL)
    client.handle_message(state_frame(True, 70.0))

    out = capsys.readouterr().out
    assert client.update_count == 1
    assert "Current: 70.0 °F" in out
    assert "Status: Streaming" in out


def test_error_message_is_printed(capsys):
    client = DashboardClient(URL)
    client.handle_message(error_message("Unknown command: reset"))

    assert "Server error: Unknown command: reset" in capsys.readouterr().out
    assert client.update_count == 0


def test_malformed_frame_does_not_crash(capsys):
    client = DashboardClient(URL)
    client.handle_message("not json")
    client.handle_message("[1, 2]")

    out = capsys.readouterr().out
    assert "Invalid message from server: not json" in out
    assert "Unexpected message from server" in out
    assert client.update_count == 0


def test_connection_refused(monkeypatch, capsys):
    monkeypatch.setattr(dashboard_client.websockets, "connect", fake_connect(ConnectionRefusedError()))
    client = DashboardClient(URL)

    assert asyncio.run(client.connect_websocket()) is False
    assert "Connection refused" in capsys.readouterr().out


def test_rejected_handshake(monkeypatch, capsys):
    response = Response(404, "Not Found", Headers(), b"")
    monkeypatch.setattr(dashboard_client.websockets, "connect", fake_connect(InvalidStatus(response)))
    client = DashboardClient(URL)

    assert asyncio.run(client.connect_websocket()) is False
    assert "HTTP Status: 404" in capsys.readouterr().out


def test_run_renders_updates_and_sends_toggle(monkeypatch, capsys):
    websocket = FakeWebSocket([state_frame(True), state_frame(False, 71.5)])
    monkeypatch.setattr(dashboard_client.websockets, "connect", fake_connect(websocket))
    client = DashboardClient(URL, toggle=True)

    asyncio.run(client.run())

    out = capsys.readouterr().out
    assert [json.loads(data) for data in websocket.sent] == [{"type": "toggle"}]
    assert client.update_count == 2
    assert "Status: Paused" in out
    assert websocket.closed is True


def test_run_stops_when_connect_fails(monkeypatch):
    monkeypatch.setattr(dashboard_client.websockets, "connect", fake_connect(ConnectionRefusedError()))
    client = DashboardClient(URL)

    asyncio.run(client.run())

    assert client.websocket is None
    assert client.update_count == 0


def test_main_rejects_non_websocket_url(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["dashboard_client.py", "--url", "http://localhost:8000/ws-dashboard"])

    with pytest.raises(SystemExit) as exc_info:
        dashboard_client.main()

    assert exc_info.value.code == 1
    assert "URL must start with ws:// or wss://" in capsys.readouterr().out
