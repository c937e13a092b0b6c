"""The epoch module provides the ``Epoch`` class for representing instants in time.

An Epoch stores an integer Modified Julian Day number, the seconds within
that day, and the time scale the pair is expressed in.  The split
representation keeps sub-microsecond resolution over centuries, which
the Earth rotation angle needs (one microsecond of UT1 is about 0.5
microarcseconds of rotation).

Epochs are immutable: arithmetic and scale conversion return new
instances.  Differences between epochs are returned in days, the unit
used by the EOP tables and the interpolation windows.
"""

from __future__ import annotations

import enum
import math
import re

from .constants import DJC, JD_MJD_OFFSET, MJD2000, SECONDS_PER_DAY, TT_TAI
from .time import caldate_to_mjd, jd_to_caldate, leap_seconds_from_tai, leap_seconds_tai_utc

# Valid ISO 8601 epoch string patterns
_EPOCH_PATTERNS = [
    # YYYY-MM-DD
    re.compile(r'^(\d{4})-(\d{2})-(\d{2})$'),
    # YYYY-MM-DDTHH:MM:SSZ
    re.compile(r'^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})Z?$'),
    # YYYY-MM-DDTHH:MM:SS.fffZ
    re.compile(r'^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})\.(\d+)Z?$'),
]


class TimeScale(enum.Enum):
    """Time scale of an :class:`Epoch`.

    Attributes:
        UTC: Coordinated Universal Time.
        TAI: International Atomic Time.
        TT: Terrestrial Time (TAI + 32.184 s).
        UT1: Universal Time, requires UT1-TAI to reach from the others.
    """

    UTC = "UTC"
    TAI = "TAI"
    TT = "TT"
    UT1 = "UT1"


class Epoch:
    """Represents a single instant in time in a stated time scale.

    The internal representation uses three private components:
        ``_day`` (int MJD), ``_seconds`` (float, in ``[0, 86400)``),
        ``_scale`` (:class:`TimeScale`).

    Constructors:
        Epoch(2018, 1, 1)
        Epoch(2018, 1, 1, 12, 0, 0.0, scale=TimeScale.TT)
        Epoch("2018-01-01T12:00:00Z")
        Epoch(other_epoch)
        Epoch.from_mjd(58119.5, TimeScale.TT)
    """

    __slots__ = ('_day', '_seconds', '_scale')

    def __init__(self, *args: int | float | str | Epoch,
                 scale: TimeScale = TimeScale.UTC) -> None:
        """Initialize Epoch. Supports multiple constructor forms.

        Args:
            *args: Either (year, month, day[, hour, minute, second]),
                a string in ISO 8601 format, or another Epoch instance.
            scale: Time scale of the given date. Ignored when copying
                another Epoch. Default: ``TimeScale.UTC``
        """
        self._scale = scale

        if len(args) == 1:
            if isinstance(args[0], str):
                self._init_string(args[0])
            elif isinstance(args[0], Epoch):
                self._day = args[0]._day
                self._seconds = args[0]._seconds
                self._scale = args[0]._scale
            else:
                raise ValueError(f"Cannot construct Epoch from {type(args[0])}")
        elif 3 <= len(args) <= 6:
            self._init_date(*args)
        else:
            raise ValueError(
                "Epoch requires date components (3-6 args), a string, or an Epoch"
            )

    @classmethod
    def from_day_seconds(cls, day: int, seconds: float,
                         scale: TimeScale = TimeScale.UTC) -> Epoch:
        """Create an Epoch from an MJD day number and seconds of day.

        ``seconds`` may lie outside ``[0, 86400)``; the day number is
        adjusted accordingly.

        Args:
            day: Integer Modified Julian Day.
            seconds: Seconds since the start of ``day``.
            scale: Time scale. Default: ``TimeScale.UTC``

        Returns:
            Epoch: New Epoch instance.
        """
        obj = object.__new__(cls)
        offset = math.floor(seconds / SECONDS_PER_DAY)
        obj._day = int(day) + int(offset)
        obj._seconds = float(seconds) - offset * SECONDS_PER_DAY
        obj._scale = scale
        return obj

    @classmethod
    def from_mjd(cls, mjd: float, scale: TimeScale = TimeScale.UTC) -> Epoch:
        """Create an Epoch from a (fractional) Modified Julian Date.

        Args:
            mjd: Modified Julian Date.
            scale: Time scale. Default: ``TimeScale.UTC``

        Returns:
            Epoch: New Epoch instance.
        """
        day = math.floor(mjd)
        return cls.from_day_seconds(day, (mjd - day) * SECONDS_PER_DAY, scale)

    def _init_date(self, year, month, day, hour=0, minute=0, second=0.0):
        mjd_day = int(round(float(caldate_to_mjd(year, month, day))))
        seconds = hour * 3600.0 + minute * 60.0 + second
        offset = math.floor(seconds / SECONDS_PER_DAY)
        self._day = mjd_day + offset
        self._seconds = seconds - offset * SECONDS_PER_DAY

    def _init_string(self, string):
        for pattern in _EPOCH_PATTERNS:
            m = pattern.match(string)
            if m:
                groups = m.groups()
                year = int(groups[0])
                month = int(groups[1])
                day = int(groups[2])

                hour = 0
                minute = 0
                second = 0.0

                if len(groups) >= 6:
                    hour = int(groups[3])
                    minute = int(groups[4])
                    second = float(groups[5])

                if len(groups) == 7:
                    second += float(f"0.{groups[6]}")

                self._init_date(year, month, day, hour, minute, second)
                return

        raise ValueError(
            f'Invalid Epoch string: "{string}" is not ISO 8601 compliant'
        )

    # Accessors

    @property
    def day(self) -> int:
        """Integer Modified Julian Day."""
        return self._day

    @property
    def seconds(self) -> float:
        """Seconds within the day, in ``[0, 86400)``."""
        return self._seconds

    @property
    def scale(self) -> TimeScale:
        """Time scale of this epoch."""
        return self._scale

    def mjd(self) -> float:
        """Return the Modified Julian Date as a single float.

        Returns:
            float: Modified Julian Date (about 1e-10 day resolution).
        """
        return self._day + self._seconds / SECONDS_PER_DAY

    def jd_split(self) -> tuple[float, float]:
        """Return the Julian Date as a two-part sum.

        The first part carries the day boundary and the second the day
        fraction, so ``jd1 + jd2`` is the Julian Date without losing the
        sub-day resolution.

        Returns:
            tuple[float, float]: ``(JD_MJD_OFFSET + day, seconds / 86400)``.
        """
        return JD_MJD_OFFSET + self._day, self._seconds / SECONDS_PER_DAY

    def julian_centuries(self) -> float:
        """Return Julian centuries elapsed since J2000.0 in this epoch's scale.

        Returns:
            float: ``(MJD - 51544.5) / 36525``.
        """
        return ((self._day - MJD2000) + self._seconds / SECONDS_PER_DAY) / DJC

    # Arithmetic operators

    def __add__(self, days: float) -> Epoch:
        """Return a new Epoch advanced by ``days``.

        Args:
            days (float): Days to add (may be negative).

        Returns:
            Epoch: New Epoch in the same scale.
        """
        whole = math.floor(days)
        return Epoch.from_day_seconds(
            self._day + int(whole),
            self._seconds + (days - whole) * SECONDS_PER_DAY,
            self._scale,
        )

    def __sub__(self, other: Epoch | float) -> Epoch | float:
        """Subtract days or compute the difference between Epochs.

        Args:
            other: If Epoch (same scale), returns the elapsed time in days.
                If numeric, returns a new Epoch moved back by that many days.

        Returns:
            float or Epoch: Time difference in days, or new Epoch.

        Raises:
            ValueError: If the two epochs are in different time scales.
        """
        if isinstance(other, Epoch):
            if other._scale is not self._scale:
                raise ValueError(
                    f"Cannot subtract a {other._scale.value} epoch from a "
                    f"{self._scale.value} epoch"
                )
            return ((self._day - other._day)
                    + (self._seconds - other._seconds) / SECONDS_PER_DAY)
        return self.__add__(-float(other))

    # Comparison operators

    def _key(self, other: Epoch) -> tuple[tuple[int, float], tuple[int, float]]:
        if other._scale is not self._scale:
            raise ValueError("Cannot compare epochs in different time scales")
        return (self._day, self._seconds), (other._day, other._seconds)

    def __eq__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        return (self._scale is other._scale and self._day == other._day
                and self._seconds == other._seconds)

    def __lt__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        a, b = self._key(other)
        return a < b

    def __le__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        a, b = self._key(other)
        return a <= b

    def __gt__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        a, b = self._key(other)
        return a > b

    def __ge__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        a, b = self._key(other)
        return a >= b

    def __hash__(self):
        return hash((self._day, self._seconds, self._scale))

    # Time scales

    def to_scale(self, scale: TimeScale, ut1_minus_tai: float | None = None) -> Epoch:
        """Convert to another time scale.

        Conversions pass through TAI.  UTC uses the leap-second table;
        UT1 needs the UT1-TAI offset, which only an EOP table can supply.

        Args:
            scale: Target time scale.
            ut1_minus_tai: UT1-TAI in seconds. Required when either side of
                the conversion is UT1.

        Returns:
            Epoch: The same instant expressed in ``scale``.

        Raises:
            ValueError: If UT1 is involved and ``ut1_minus_tai`` is missing.
        """
        if scale is self._scale:
            return self

        # To TAI
        if self._scale is TimeScale.TAI:
            tai_seconds = self._seconds
        elif self._scale is TimeScale.TT:
            tai_seconds = self._seconds - TT_TAI
        elif self._scale is TimeScale.UTC:
            tai_seconds = self._seconds + float(leap_seconds_tai_utc(self.mjd()))
        else:
            if ut1_minus_tai is None:
                raise ValueError("UT1-TAI is required to convert from UT1")
            tai_seconds = self._seconds - ut1_minus_tai
        tai = Epoch.from_day_seconds(self._day, tai_seconds, TimeScale.TAI)

        # From TAI
        if scale is TimeScale.TAI:
            return tai
        if scale is TimeScale.TT:
            return Epoch.from_day_seconds(tai._day, tai._seconds + TT_TAI, scale)
        if scale is TimeScale.UTC:
            tai_utc = float(leap_seconds_from_tai(tai.mjd()))
            return Epoch.from_day_seconds(tai._day, tai._seconds - tai_utc, scale)
        if ut1_minus_tai is None:
            raise ValueError("UT1-TAI is required to convert to UT1")
        return Epoch.from_day_seconds(tai._day, tai._seconds + ut1_minus_tai, scale)

    # Calendar

    def caldate(self) -> tuple[int, int, int, int, int, float]:
        """Return the calendar date components in this epoch's scale.

        Returns:
            tuple: (year, month, day, hour, minute, second) where second
                includes fractional part.
        """
        year, month, day, _, _, _ = jd_to_caldate(JD_MJD_OFFSET + self._day)
        hour = int(self._seconds // 3600)
        minute = int((self._seconds - hour * 3600) // 60)
        second = self._seconds - hour * 3600 - minute * 60
        return int(year), int(month), int(day), hour, minute, second

    # String representations

    def __str__(self):
        year, month, day, hour, minute, second = self.caldate()
        return (f'{year:04d}-{month:02d}-{day:02d}T'
                f'{hour:02d}:{minute:02d}:{second:06.3f} {self._scale.value}')

    def __repr__(self):
        return (f'Epoch(_day={self._day}, _seconds={self._seconds!r}, '
                f'_scale={self._scale.value})')
