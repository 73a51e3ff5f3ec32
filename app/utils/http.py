"""
HTTP session helpers for upstream API clients.
"""

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

RETRY_STATUSES = (429, 500, 502, 503, 504)


def create_session(
    max_retries: int = 2,
    backoff_factor: float = 0.5,
    user_agent: str = "FilmFinder/1.0",
) -> requests.Session:
    """
    Create a requests session that retries transient GET failures.

    Args:
        max_retries: Retry budget per request (connection errors and RETRY_STATUSES)
        backoff_factor: urllib3 exponential backoff factor
        user_agent: User-Agent header sent with every request

    Returns:
        requests.Session: Session with retrying adapters mounted for http/https
    """
    retry = Retry(
        total=max_retries,
        backoff_factor=backoff_factor,
        status_forcelist=RETRY_STATUSES,
        allowed_methods=frozenset(["GET"]),
        raise_on_status=False,
        respect_retry_after_header=True,
    )
    adapter = HTTPAdapter(max_retries=retry)

    session = requests.Session()
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update({"Accept": "application/json", "User-Agent": user_agent})
    return session
