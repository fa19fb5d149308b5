"""
GET-and-decode over the shared HTTP session.

``HttpTransport`` turns every failure into one of the package's error types:
``TransportError`` for network problems and non-2xx responses, ``DecodeError``
for bodies that are not JSON or do not fit the response model. The async
methods run the blocking ``requests`` call on a worker thread, so independent
queries can overlap while sharing one connection pool.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from open_meteo_client.exceptions import DecodeError, TransportError
from open_meteo_client.services import http

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class HttpTransport:
    """Fetch JSON documents from the Open-Meteo endpoints."""

    def __init__(self, session: requests.Session | None = None) -> None:
        self.session = session if session is not None else http.session

    def get_json(self, url: str) -> Any:
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url)
            resp.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise TransportError(str(e), url=url, status_code=status) from e
        except requests.RequestException as e:
            raise TransportError(str(e), url=url) from e

        try:
            return resp.json()
        except ValueError as e:
            raise DecodeError(f"Response is not valid JSON: {e}", url=url) from e

    def fetch_model(self, url: str, model: type[M]) -> M:
        """GET ``url`` and validate the body as ``model``."""
        data = self.get_json(url)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise DecodeError(
                f"Response does not match {model.__name__}: {e.error_count()} error(s)", url=url
            ) from e

    async def fetch_model_async(self, url: str, model: type[M]) -> M:
        return await asyncio.to_thread(self.fetch_model, url, model)
