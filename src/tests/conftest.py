"""Pytest configuration and shared fixtures."""

import os
import socket
import threading
from collections.abc import Generator
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Any

import pytest

# Set test environment before importing settings
os.environ["ENV"] = "development"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["LOG_FORMAT"] = "text"

from druid_registry.config import get_settings  # noqa: E402


@pytest.fixture
def allowed_brokers() -> frozenset[str]:
    """Broker allow-list used across tests."""
    return frozenset(
        {
            "bkr123.p1.abc.com:4443",
            "broker1.cluster2.com:4080",
            "localhost:1234",
        }
    )


@pytest.fixture
def sample_cluster_data() -> dict[str, Any]:
    """Sample descriptor in the camelCase form used by edit forms."""
    return {
        "clusterId": 7,
        "clusterName": "druid-prod-east",
        "clusterDescription": "Production brokers, us-east",
        "brokerHost": "broker1.cluster2.com",
        "brokerPort": 4080,
        "brokerEndpoint": "/druid/v2/",
        "hoursOfLag": 3,
        "isSSLAuth": False,
        "principalName": "",
    }


@pytest.fixture
def clear_settings_cache() -> Generator[None, None, None]:
    """Rebuild settings from the environment for the duration of a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def unused_port() -> int:
    """A localhost port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


class _StubBrokerHandler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:  # noqa: N802
        body = b'{"version":"stub"}'
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        pass


@pytest.fixture
def stub_broker() -> Generator[tuple[str, int], None, None]:
    """Local HTTP server standing in for a Druid broker."""
    server = HTTPServer(("127.0.0.1", 0), _StubBrokerHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server.server_address[0], server.server_address[1]
    finally:
        server.shutdown()
        server.server_close()


# =============================================================================
# Markers
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line(
        "markers", "integration: Integration tests (require external services)"
    )
    config.addinivalue_line("markers", "slow: Slow tests")
