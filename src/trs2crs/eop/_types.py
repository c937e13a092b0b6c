"""Type definitions for Earth Orientation Parameter (EOP) tables.

Provides the core data types for EOP storage and lookup:

- :class:`EOPRecord`: One tabulated (or interpolated) set of parameters.
- :class:`EOPTable`: Integer-day keyed table of records plus the metadata
  the corrector needs (spacing, UT1 flavour, pole-offset kind).
- :class:`UT1Mode` and :class:`OffsetKind`: Table metadata enums.

Records are plain Python floats; the table is a lookup structure, not a
JAX pytree, because the corrector runs on the host.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from typing import NamedTuple


class UT1Mode(enum.Enum):
    """Flavour of the tabulated UT1.

    Attributes:
        UT1R: Zonal tides removed. The corrector restores the zonal
            effect and interpolates with the diurnal tides removed.
        UT1: Already the full UT1. Applied as tabulated.
    """

    UT1R = "ut1r"
    UT1 = "ut1"


class OffsetKind(enum.Enum):
    """Meaning of the two celestial pole offset columns.

    Attributes:
        CIP: Offsets ``(dX, dY)`` of the CIP coordinates.
        NUTATION: Offsets ``(ddpsi, ddeps)`` of the nutation angles,
            converted to ``(dX, dY)`` before use.
    """

    CIP = "cip"
    NUTATION = "nutation"


class EOPRecord(NamedTuple):
    """Earth orientation parameters at one epoch.

    Attributes:
        xp: Polar motion x-component [rad].
        yp: Polar motion y-component [rad].
        ut1_minus_tai: UT1-TAI [s].
        dpsi_bias: First celestial pole offset [rad], ``dX`` or ``ddpsi``
            depending on the table's :class:`OffsetKind`.
        deps_bias: Second celestial pole offset [rad], ``dY`` or ``ddeps``.
    """

    xp: float
    yp: float
    ut1_minus_tai: float
    dpsi_bias: float = 0.0
    deps_bias: float = 0.0


class EOPTable:
    """Earth orientation parameters keyed by integer MJD (UTC).

    Args:
        records: Mapping from integer MJD to record.
        interval_days: Spacing of the table [days]. Default: ``1.0``
        ut1_mode: Flavour of the tabulated UT1. Default: ``UT1Mode.UT1``
        offset_kind: Meaning of the pole offset columns.
            Default: ``OffsetKind.CIP``

    Raises:
        ValueError: If ``records`` is empty or ``interval_days`` is not
            positive.

    Examples:
        ```python
        from trs2crs.eop import EOPRecord, EOPTable

        table = EOPTable({58849: EOPRecord(1e-6, 1.5e-6, -37.18),
                          58850: EOPRecord(1e-6, 1.5e-6, -37.18)})
        table.lookup(58849)
        ```
    """

    def __init__(self, records: Mapping[int, EOPRecord], interval_days: float = 1.0,
                 ut1_mode: UT1Mode = UT1Mode.UT1,
                 offset_kind: OffsetKind = OffsetKind.CIP) -> None:
        if not records:
            raise ValueError("EOP table needs at least one record")
        if not interval_days > 0.0:
            raise ValueError(f"EOP interval must be positive, got {interval_days}")
        self._records = {int(day): EOPRecord(*rec) for day, rec in records.items()}
        self._interval_days = float(interval_days)
        self._ut1_mode = ut1_mode
        self._offset_kind = offset_kind
        self._mjd_min = min(self._records)
        self._mjd_max = max(self._records)

    @classmethod
    def from_records(cls, mjd: Iterable[float], xp: Iterable[float], yp: Iterable[float],
                     ut1_minus_tai: Iterable[float], dpsi_bias: Iterable[float] | None = None,
                     deps_bias: Iterable[float] | None = None, **kwargs) -> EOPTable:
        """Build a table from parallel columns.

        Args:
            mjd: Integer-valued MJDs (UTC).
            xp: Polar motion x [rad].
            yp: Polar motion y [rad].
            ut1_minus_tai: UT1-TAI [s].
            dpsi_bias: First pole offset [rad]. Default: zeros.
            deps_bias: Second pole offset [rad]. Default: zeros.
            **kwargs: Passed to :class:`EOPTable`.

        Returns:
            EOPTable: The new table.

        Raises:
            ValueError: If the columns differ in length.
        """
        columns = [list(mjd), list(xp), list(yp), list(ut1_minus_tai)]
        n = len(columns[0])
        columns.append(list(dpsi_bias) if dpsi_bias is not None else [0.0] * n)
        columns.append(list(deps_bias) if deps_bias is not None else [0.0] * n)
        if any(len(col) != n for col in columns):
            raise ValueError("EOP columns must all have the same length")
        records = {
            int(round(day)): EOPRecord(float(a), float(b), float(c), float(d), float(e))
            for day, a, b, c, d, e in zip(*columns)
        }
        return cls(records, **kwargs)

    def lookup(self, day: int) -> EOPRecord | None:
        """Return the record at an integer MJD, or ``None`` if absent.

        Args:
            day: Integer MJD (UTC).

        Returns:
            EOPRecord | None: The record, or ``None``.
        """
        return self._records.get(int(day))

    @property
    def interval_days(self) -> float:
        """Spacing of the table [days]."""
        return self._interval_days

    @property
    def ut1_mode(self) -> UT1Mode:
        """Flavour of the tabulated UT1."""
        return self._ut1_mode

    @property
    def offset_kind(self) -> OffsetKind:
        """Meaning of the pole offset columns."""
        return self._offset_kind

    @property
    def mjd_min(self) -> int:
        """First MJD of the table."""
        return self._mjd_min

    @property
    def mjd_max(self) -> int:
        """Last MJD of the table."""
        return self._mjd_max

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, day: object) -> bool:
        return isinstance(day, int) and day in self._records

    def __repr__(self) -> str:
        return (f"EOPTable(mjd_min={self._mjd_min}, mjd_max={self._mjd_max}, "
                f"n={len(self)}, ut1_mode={self._ut1_mode.value}, "
                f"offset_kind={self._offset_kind.value})")


class StaticEOPTable(EOPTable):
    """Table returning the same record for every day in a range.

    Args:
        record: The record returned for every day.
        mjd_min: First valid MJD. Default: ``0``
        mjd_max: Last valid MJD. Default: ``99999``
        **kwargs: Passed to :class:`EOPTable`.
    """

    def __init__(self, record: EOPRecord, mjd_min: int = 0, mjd_max: int = 99999, **kwargs) -> None:
        super().__init__({int(mjd_min): record, int(mjd_max): record}, **kwargs)
        self._record = EOPRecord(*record)

    def lookup(self, day: int) -> EOPRecord | None:
        if self._mjd_min <= int(day) <= self._mjd_max:
            return self._record
        return None

    def __len__(self) -> int:
        return self._mjd_max - self._mjd_min + 1

    def __contains__(self, day: object) -> bool:
        return isinstance(day, int) and self._mjd_min <= day <= self._mjd_max
