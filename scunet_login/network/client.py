"""
HTTP client configuration for gateway communication.

Provides session setup with connect-retry logic and keep-alive configuration.
"""

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import CONNECT_RETRIES, USER_AGENT


def build_session() -> requests.Session:
    """
    Return a requests.Session with connect retries and keep-alive pre-configured.

    Only connection establishment is retried.  A 5xx from the gateway must
    reach the prober unchanged, and a POST must never be replayed.

    Returns:
        Configured requests.Session instance
    """
    session = requests.Session()
    retry = Retry(
        total=CONNECT_RETRIES,
        connect=CONNECT_RETRIES,
        read=0,
        status=0,
        backoff_factor=0.5,
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    # probe, login and info polling share one connection to the gateway
    session.headers["User-Agent"] = USER_AGENT
    session.headers["Connection"] = "keep-alive"
    return session
