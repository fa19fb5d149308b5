"""
Shared HTTP session.

Provides a pre-configured ``requests.Session`` whose connection pool is
reused by every client in the process. Requests are not retried unless a
``urllib3`` ``Retry`` is passed to ``create_session``; the Open-Meteo API is
free and unauthenticated, and failed calls are reported to the caller as an
absent result.

Usage::

    from open_meteo_client.services.http import session

    resp = session.get("https://api.open-meteo.com/v1/forecast?latitude=52.52&longitude=13.41")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from open_meteo_client.config import get_settings

#: No retries: a failed request surfaces immediately.
NO_RETRY = Retry(total=0, raise_on_status=False)

DEFAULT_TIMEOUT = 30  # seconds


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str | None = None,
) -> requests.Session:
    """
    Build a ``requests.Session`` with a pooled adapter mounted.

    Args:
        retry: Retry strategy (defaults to ``NO_RETRY``).
        timeout: Default timeout applied to every request.
        user_agent: ``User-Agent`` header (defaults to the configured one).
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or NO_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["Accept"] = "application/json"
    s.headers["User-Agent"] = user_agent or get_settings().user_agent

    # Wrap send to inject a default timeout so callers don't need to
    # remember to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session — import and use directly.
session: requests.Session = create_session(timeout=get_settings().request_timeout)
