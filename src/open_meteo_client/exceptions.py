"""Error types raised or reported by the client."""

from __future__ import annotations


class OpenMeteoError(Exception):
    """Base class for every error this package defines."""


class TransportError(OpenMeteoError):
    """The request failed on the network or returned a non-2xx status."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DecodeError(OpenMeteoError):
    """The response body was not JSON, or did not match the expected schema."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class LocationNotFoundError(OpenMeteoError):
    """A geocoding search returned no locations."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No location found for {name!r}")
        self.name = name


class UnknownParameterError(OpenMeteoError, ValueError):
    """A name that is not a member of the parameter vocabulary."""

    def __init__(self, value: object, vocabulary: str) -> None:
        super().__init__(f"{value!r} is not a valid {vocabulary} parameter")
        self.value = value
        self.vocabulary = vocabulary
