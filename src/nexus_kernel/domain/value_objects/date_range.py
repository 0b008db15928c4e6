"""Date range value object."""
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Union

from nexus_kernel.domain.base_value_object import BaseValueObject
from nexus_kernel.exceptions import InvalidValueError

Moment = Union[date, datetime]


class DateRange(BaseValueObject):
    """
    Closed interval [start, end] of dates or datetimes.

    Both bounds must be the same kind (two dates, or two datetimes with the
    same awareness).
    """

    def __init__(self, start: Moment, end: Moment) -> None:
        if not isinstance(start, date) or not isinstance(end, date):
            raise InvalidValueError("date range bounds must be dates or datetimes")
        if isinstance(start, datetime) != isinstance(end, datetime):
            raise InvalidValueError("date range bounds must both be dates or both be datetimes")
        try:
            reversed_bounds = start > end
        except TypeError:
            raise InvalidValueError("cannot mix timezone-aware and naive datetimes")
        if reversed_bounds:
            raise InvalidValueError("start date cannot be after end date")
        self.start = start
        self.end = end
        self._finalize_init()

    def __str__(self) -> str:
        return f"{self.start:%Y-%m-%d} to {self.end:%Y-%m-%d}"

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def duration_in_days(self) -> int:
        return self.duration.days

    @property
    def duration_in_months(self) -> int:
        """Calendar month difference, ignoring days."""
        return (self.end.year - self.start.year) * 12 + (self.end.month - self.start.month)

    def contains(self, moment: Moment) -> bool:
        """
        Inclusive on both ends.

        Raises:
            InvalidValueError: If moment is not the same kind as the bounds
        """
        self._require_same_kind(moment)
        return self.start <= moment <= self.end

    def overlaps(self, other: DateRange) -> bool:
        """
        True when the ranges share more than a single boundary instant.

        Raises:
            InvalidValueError: If other's bounds are not the same kind as these
        """
        if not isinstance(other, DateRange):
            raise InvalidValueError("can only compare a date range with another date range")
        self._require_same_kind(other.start)
        return self.start < other.end and self.end > other.start

    def _require_same_kind(self, moment: object) -> None:
        if not isinstance(moment, date) or isinstance(moment, datetime) != isinstance(self.start, datetime):
            raise InvalidValueError(
                "cannot compare a date range with a different kind of moment",
                details={"range": str(self), "moment": repr(moment)},
            )
        if isinstance(moment, datetime) and (moment.utcoffset() is None) != (self.start.utcoffset() is None):
            raise InvalidValueError("cannot mix timezone-aware and naive datetimes")
