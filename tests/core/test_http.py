"""
Tests for the retrying HTTP session used by the TMDB client.
"""

import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from app.api.config import Settings
from app.core.tmdb.client import TMDBClient
from app.utils.http import RETRY_STATUSES, create_session


@pytest.fixture
def flaky_server():
    """Local server answering 503 twice, then 200 with one search result."""
    statuses = [503, 503, 200]
    hits = []

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):
            hits.append(self.path)
            status = statuses[min(len(hits), len(statuses)) - 1]
            body = json.dumps({"results": [{"id": 1}]} if status == 200 else {}).encode()
            self.send_response(status)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format, *args):
            pass

    server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}", hits
    server.shutdown()
    server.server_close()


class TestCreateSession:
    """Retry policy and default headers."""

    def test_retry_policy(self):
        session = create_session(max_retries=3, backoff_factor=0.25)
        for prefix in ("https://", "http://"):
            retry = session.get_adapter(prefix + "api.themoviedb.org").max_retries
            assert retry.total == 3
            assert retry.backoff_factor == 0.25
            assert set(retry.status_forcelist) == {429, 500, 502, 503, 504}
            assert set(retry.allowed_methods) == {"GET"}

    def test_retry_statuses(self):
        assert 429 in RETRY_STATUSES
        assert 404 not in RETRY_STATUSES

    def test_default_headers(self):
        session = create_session(user_agent="FilmFinder/test")
        assert session.headers["Accept"] == "application/json"
        assert session.headers["User-Agent"] == "FilmFinder/test"

    def test_transient_statuses_retried(self, flaky_server):
        base_url, hits = flaky_server
        settings = Settings(tmdb_api_key="k", tmdb_base_url=base_url, upstream_timeout=5)
        client = TMDBClient(settings, session=create_session(max_retries=2, backoff_factor=0))
        assert client.search_movie("Inception") == [{"id": 1}]
        assert len(hits) == 3
