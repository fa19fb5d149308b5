"""Outcome of a single API query."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, cast

from open_meteo_client.exceptions import OpenMeteoError

T = TypeVar("T")


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """
    Either a decoded response or the error that prevented it.

    The ``query*`` methods of the client only hand back ``value`` (``None`` on
    failure); the ``fetch*`` methods return the whole result so callers can
    tell a missing location from a network failure.
    """

    value: T | None = None
    error: OpenMeteoError | None = None

    @classmethod
    def success(cls, value: T) -> QueryResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: OpenMeteoError) -> QueryResult[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the recorded error."""
        if self.error is not None:
            raise self.error
        return cast("T", self.value)
