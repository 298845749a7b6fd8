"""Shared test fixtures and configuration for the daylight-sync test suite.

This module provides reusable fixtures for common test scenarios including:
- httpx request routing with canned responses
- Logger mocking
- Fixed reference instants for solar classification
- Short-path Unix socket directories
"""

from __future__ import annotations

import logging
import shutil
import socket
import threading
import tempfile
from datetime import UTC, datetime
from pathlib import Path
from types import SimpleNamespace
from typing import Any
from unittest.mock import Mock

import httpx
import pytest

# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing.

    Returns a Mock with spec=logging.Logger to ensure only valid
    logger methods can be called.
    """
    return Mock(spec=logging.Logger)


# ============================================================================
# HTTP Fixtures
# ============================================================================


def json_response(url: str, payload: Any, status_code: int = 200) -> httpx.Response:
    """Build a real httpx.Response so raise_for_status() and json() behave."""
    return httpx.Response(status_code, json=payload, request=httpx.Request("GET", url))


@pytest.fixture
def fake_http(monkeypatch):
    """Route httpx.Client.get() to canned responses keyed by URL.

    Usage:
        fake_http.routes["https://ipinfo.io/json"] = json_response(url, {"loc": "1,2"})
        fake_http.routes[url] = httpx.ConnectError("refused")
    """
    state = SimpleNamespace(routes={}, calls=[], timeouts=[])

    class FakeClient:
        def __init__(self, *args: Any, timeout: float | None = None, **kwargs: Any) -> None:
            state.timeouts.append(timeout)

        def __enter__(self) -> FakeClient:
            return self

        def __exit__(self, *exc_info: Any) -> bool:
            return False

        def get(self, url: str, params: dict[str, Any] | None = None) -> httpx.Response:
            state.calls.append((url, params))
            outcome = state.routes[url]
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

    monkeypatch.setattr("daylight.http_client.httpx.Client", FakeClient)
    return state


# ============================================================================
# Time Fixtures
# ============================================================================


@pytest.fixture
def midsummer_noon():
    """Fixed reference instant (2025-06-21 12:00:00 UTC)."""
    return datetime(2025, 6, 21, 12, 0, 0, tzinfo=UTC)


# ============================================================================
# Socket Fixtures
# ============================================================================


@pytest.fixture
def socket_dir():
    """Short temp directory for Unix sockets (sun_path is limited to ~108 bytes)."""
    path = Path(tempfile.mkdtemp(prefix="dl", dir="/tmp"))
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def make_dead_socket(socket_dir):
    """Factory creating a bound, non-listening socket file (connect is refused).

    Usage:
        path = make_dead_socket("nvimA")  # -> <socket_dir>/nvimA/0
    """

    def _create(name: str) -> Path:
        parent = socket_dir / name
        parent.mkdir()
        path = parent / "0"
        with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
            sock.bind(str(path))
        return path

    return _create


@pytest.fixture
def make_silent_socket(socket_dir):
    """Factory creating a listening socket that accepts connections and never replies.

    Usage:
        path = make_silent_socket("nvimA")  # -> <socket_dir>/nvimA/0
    """
    servers: list[socket.socket] = []
    accepted: list[socket.socket] = []

    def _serve(server: socket.socket) -> None:
        while True:
            try:
                conn, _ = server.accept()
            except OSError:
                return
            accepted.append(conn)

    def _create(name: str) -> Path:
        parent = socket_dir / name
        parent.mkdir()
        path = parent / "0"
        server = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        server.bind(str(path))
        server.listen(8)
        servers.append(server)
        threading.Thread(target=_serve, args=(server,), daemon=True).start()
        return path

    yield _create

    for conn in accepted:
        conn.close()
    for server in servers:
        try:
            server.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass
        server.close()
