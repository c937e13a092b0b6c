"""Exception and warning types raised by trs2crs.

All errors derive from :class:`ValueError` so callers that already guard
bad inputs with ``except ValueError`` keep working.
"""

from __future__ import annotations


class DataGapError(ValueError):
    """Requested epoch is not covered by the loaded EOP table.

    Raised when either bracketing integer-day record is missing, including
    epochs before the first or after the last table entry.

    Attributes:
        day: The integer MJD (UTC) that could not be found, or ``None``.
    """

    def __init__(self, message: str, day: int | None = None) -> None:
        super().__init__(message)
        self.day = day


class ConfigurationError(ValueError):
    """Invalid construction-time configuration.

    Raised for non-positive cache steps, unsupported model variants, and
    evaluators built for different model variants being combined.
    """


class NumericDomainWarning(RuntimeWarning):
    """A CIP coordinate mapping left its valid numeric domain.

    Emitted (never raised) when ``X**2 + Y**2 >= 1`` or the CIP lies so
    far from the GCRS pole that ``Z = sqrt(1 - X**2 - Y**2)`` is close to
    zero and the declination derivatives become very large.
    """
