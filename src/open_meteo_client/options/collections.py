"""
Ordered, duplicate-free parameter selections.

An ``OptionCollection`` holds members of exactly one vocabulary enum. Adding a
member that is already present is a silent no-op, so the collection behaves
like an insertion-ordered set that also supports positional access::

    hourly = HourlyOptions()
    hourly.add(HourlyParameter.CLOUDCOVER)
    hourly.add("windspeed_10m")
    hourly.add("cloudcover")          # already there, ignored
    hourly.names()                    # ['cloudcover', 'windspeed_10m']

Members may be given as enum values or by wire name. A name outside the
vocabulary raises ``UnknownParameterError``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import StrEnum
from typing import ClassVar, Generic, Self, TypeVar, cast

from open_meteo_client.exceptions import UnknownParameterError
from open_meteo_client.options.parameters import (
    AirQualityHourlyParameter,
    CurrentParameter,
    DailyParameter,
    HourlyParameter,
    Minutely15Parameter,
    ModelsParameter,
)

P = TypeVar("P", bound=StrEnum)


class OptionCollection(Generic[P]):
    """Insertion-ordered set of vocabulary members."""

    parameter_type: ClassVar[type[StrEnum]]
    vocabulary: ClassVar[str]

    def __init__(self, parameters: Iterable[P | str] = ()) -> None:
        self._parameters: dict[P, None] = {}
        self.extend(parameters)

    @classmethod
    def all(cls) -> Self:
        """New collection holding every member, in declaration order."""
        return cls(cast("Iterable[P]", cls.parameter_type))

    def _coerce(self, value: P | str) -> P:
        try:
            return cast("P", self.parameter_type(value))
        except (ValueError, TypeError):
            raise UnknownParameterError(value, self.vocabulary) from None

    def add(self, value: P | str) -> None:
        """Append ``value`` unless it is already present."""
        member = self._coerce(value)
        if member not in self._parameters:
            self._parameters[member] = None

    def extend(self, values: Iterable[P | str]) -> None:
        for value in values:
            self.add(value)

    def remove(self, value: P | str) -> bool:
        """Remove ``value``; return whether it was present."""
        member = self._coerce(value)
        if member not in self._parameters:
            return False
        del self._parameters[member]
        return True

    def contains(self, value: object) -> bool:
        return value in self

    def clear(self) -> None:
        self._parameters.clear()

    def names(self) -> list[str]:
        """Wire names in iteration order."""
        return [member.value for member in self._parameters]

    def copy(self) -> Self:
        return type(self)(self._parameters)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, str):
            return False
        try:
            return self._coerce(value) in self._parameters
        except UnknownParameterError:
            return False

    def __getitem__(self, index: int) -> P:
        return list(self._parameters)[index]

    def __setitem__(self, index: int, value: P | str) -> None:
        items = list(self._parameters)
        current = items[index]
        member = self._coerce(value)
        if member == current:
            return
        if member in self._parameters:
            raise ValueError(
                f"{member.value!r} is already selected at position {items.index(member)}"
            )
        items[index] = member
        self._parameters = dict.fromkeys(items)

    def __iter__(self) -> Iterator[P]:
        return iter(list(self._parameters))

    def __len__(self) -> int:
        return len(self._parameters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionCollection):
            return NotImplemented
        return self.parameter_type is other.parameter_type and list(self) == list(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.names()!r})"


class CurrentOptions(OptionCollection[CurrentParameter]):
    parameter_type = CurrentParameter
    vocabulary = "current"


class HourlyOptions(OptionCollection[HourlyParameter]):
    parameter_type = HourlyParameter
    vocabulary = "hourly"


class DailyOptions(OptionCollection[DailyParameter]):
    parameter_type = DailyParameter
    vocabulary = "daily"


class Minutely15Options(OptionCollection[Minutely15Parameter]):
    parameter_type = Minutely15Parameter
    vocabulary = "minutely_15"


class ModelsOptions(OptionCollection[ModelsParameter]):
    parameter_type = ModelsParameter
    vocabulary = "models"


class AirQualityHourlyOptions(OptionCollection[AirQualityHourlyParameter]):
    parameter_type = AirQualityHourlyParameter
    vocabulary = "air quality hourly"
