"""Shared test fixtures for the API server."""

import threading
from http.server import ThreadingHTTPServer

import pytest

from server import app, create_server


@pytest.fixture
def client():
    app.config.update(TESTING=True)
    with app.test_client() as client:
        yield client


@pytest.fixture
def live_server():
    """Serve the Flask app on an ephemeral port; yields the base URL."""
    server = create_server('127.0.0.1', 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_port}"
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


@pytest.fixture
def serve_handler():
    """Factory running serverless ``handler`` classes under http.server; returns base URLs."""
    running = []

    def serve(handler_cls):
        httpd = ThreadingHTTPServer(('127.0.0.1', 0), handler_cls)
        thread = threading.Thread(target=httpd.serve_forever, daemon=True)
        thread.start()
        running.append((httpd, thread))
        return f"http://127.0.0.1:{httpd.server_address[1]}"

    yield serve

    for httpd, thread in running:
        httpd.shutdown()
        httpd.server_close()
        thread.join(timeout=5)
