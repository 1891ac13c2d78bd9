"""Period units and their classification.

Units come in two classes: calendar units (years, quarters, months, weeks)
whose length depends on where they fall in the calendar, and fixed-duration
units (days down to nanoseconds) that are a constant number of nanoseconds.

A selector is either a typed ``Period`` such as ``Month(2)``, or a unit
name (``"months"`` or ``TimeUnit.MONTHS``) combined with a separate stride.
Both resolve to the same ``ResolvedUnit``.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from tsframe.core.errors import EArgument, EDomain


class UnitClass(StrEnum):
    CALENDAR = "calendar"
    FIXED = "fixed"


class TimeUnit(StrEnum):
    """Recognized period units, valued by their plural lower-case name."""

    YEARS = "years"
    QUARTERS = "quarters"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"
    NANOSECONDS = "nanoseconds"

    @property
    def unit_class(self) -> UnitClass:
        if self in CALENDAR_UNITS:
            return UnitClass.CALENDAR
        return UnitClass.FIXED

    @property
    def nanos(self) -> int:
        """Length of one unit in nanoseconds (fixed-duration units only)."""
        try:
            return UNIT_NANOS[self]
        except KeyError:
            raise EArgument(
                f"'{self.value}' is a calendar unit and has no fixed length",
                context={"unit": self.value},
            ) from None


CALENDAR_UNITS = frozenset(
    {TimeUnit.YEARS, TimeUnit.QUARTERS, TimeUnit.MONTHS, TimeUnit.WEEKS}
)

UNIT_NANOS: dict[TimeUnit, int] = {
    TimeUnit.DAYS: 86_400 * 10**9,
    TimeUnit.HOURS: 3_600 * 10**9,
    TimeUnit.MINUTES: 60 * 10**9,
    TimeUnit.SECONDS: 10**9,
    TimeUnit.MILLISECONDS: 10**6,
    TimeUnit.MICROSECONDS: 10**3,
    TimeUnit.NANOSECONDS: 1,
}


def check_positive(value: int, what: str = "k") -> int:
    """Return ``value`` if it is a positive integer, else raise EDomain."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise EDomain(
            f"`{what}` must be an integer, got {type(value).__name__}",
            context={what: value},
        )
    if value <= 0:
        raise EDomain(f"`{what}` must be greater than 0, got {value}", context={what: value})
    return int(value)


@dataclass(frozen=True)
class Period:
    """A unit with a positive multiplier, e.g. ``Hour(2)``.

    Use the concrete subclasses; ``Period`` itself has no unit.
    """

    n: int = 1

    unit: ClassVar[TimeUnit]

    def __post_init__(self) -> None:
        check_positive(self.n, "n")

    @property
    def unit_class(self) -> UnitClass:
        return self.unit.unit_class

    @property
    def nanos(self) -> int:
        return self.unit.nanos * self.n

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.n})"


class Year(Period):
    unit = TimeUnit.YEARS


class Quarter(Period):
    unit = TimeUnit.QUARTERS


class Month(Period):
    unit = TimeUnit.MONTHS


class Week(Period):
    unit = TimeUnit.WEEKS


class Day(Period):
    unit = TimeUnit.DAYS


class Hour(Period):
    unit = TimeUnit.HOURS


class Minute(Period):
    unit = TimeUnit.MINUTES


class Second(Period):
    unit = TimeUnit.SECONDS


class Millisecond(Period):
    unit = TimeUnit.MILLISECONDS


class Microsecond(Period):
    unit = TimeUnit.MICROSECONDS


class Nanosecond(Period):
    unit = TimeUnit.NANOSECONDS


PERIOD_TYPES: dict[TimeUnit, type[Period]] = {
    cls.unit: cls
    for cls in (
        Year,
        Quarter,
        Month,
        Week,
        Day,
        Hour,
        Minute,
        Second,
        Millisecond,
        Microsecond,
        Nanosecond,
    )
}


@dataclass(frozen=True)
class ResolvedUnit:
    """Bucketing instruction: which unit, which class, and the stride."""

    unit: TimeUnit
    stride: int

    @property
    def unit_class(self) -> UnitClass:
        return self.unit.unit_class

    def as_period(self) -> Period:
        return PERIOD_TYPES[self.unit](self.stride)


def resolve_unit_name(name: str | TimeUnit) -> TimeUnit:
    """Map a unit name (case-sensitive, plural) or TimeUnit to a TimeUnit."""
    if isinstance(name, TimeUnit):
        return name
    if isinstance(name, str):
        try:
            return TimeUnit(name)
        except ValueError:
            pass
    raise EArgument(
        f"Unrecognized unit name: {name!r}",
        context={"unit": name, "allowed": [u.value for u in TimeUnit]},
    )


def classify(on: Period | str | TimeUnit, k: int = 1) -> ResolvedUnit:
    """Resolve a typed period, or a unit name plus stride, to a ResolvedUnit.

    A typed period carries its own multiplier and ``k`` is ignored.

    Raises:
        EDomain: If ``k`` is not a positive integer
        EArgument: If ``on`` is not a recognized unit
    """
    if isinstance(on, Period):
        return ResolvedUnit(unit=on.unit, stride=on.n)
    stride = check_positive(k, "k")
    return ResolvedUnit(unit=resolve_unit_name(on), stride=stride)


__all__ = [
    "UnitClass",
    "TimeUnit",
    "CALENDAR_UNITS",
    "UNIT_NANOS",
    "Period",
    "Year",
    "Quarter",
    "Month",
    "Week",
    "Day",
    "Hour",
    "Minute",
    "Second",
    "Millisecond",
    "Microsecond",
    "Nanosecond",
    "PERIOD_TYPES",
    "ResolvedUnit",
    "check_positive",
    "classify",
    "resolve_unit_name",
]
