import jax.numpy as jnp
import pytest

from trs2crs.time import (
    caldate_to_mjd,
    jd_to_caldate,
    leap_seconds_from_tai,
    leap_seconds_tai_utc,
    mjd_to_caldate,
)


def test_caldate_to_mjd():
    assert caldate_to_mjd(2000, 1, 1, 12, 0, 0) == pytest.approx(51544.5, abs=1e-9)


def test_caldate_to_mjd_midnight():
    assert caldate_to_mjd(2007, 4, 5) == pytest.approx(54195.0, abs=1e-9)


def test_jd_to_caldate_j2000():
    year, month, day, hour, minute, second = jd_to_caldate(2451545.0)
    assert year == 2000
    assert month == 1
    assert day == 1
    assert hour == 12
    assert minute == 0
    assert second == pytest.approx(0.0, abs=1e-6)


def test_mjd_to_caldate():
    year, month, day, hour, minute, second = mjd_to_caldate(60249.25)
    assert (int(year), int(month), int(day)) == (2023, 11, 1)
    assert hour == 6
    assert minute == 0


def test_leap_seconds_before_table():
    assert float(leap_seconds_tai_utc(40000.0)) == 10.0


def test_leap_seconds_at_step():
    assert float(leap_seconds_tai_utc(53735.999)) == 32.0
    assert float(leap_seconds_tai_utc(53736.0)) == 33.0


def test_leap_seconds_after_table():
    assert float(leap_seconds_tai_utc(60000.0)) == 37.0


def test_leap_seconds_vectorized():
    values = leap_seconds_tai_utc(jnp.array([51179.0, 54832.0, 57754.0]))
    assert jnp.allclose(values, jnp.array([32.0, 34.0, 37.0]))


def test_leap_seconds_from_tai_after_step():
    # 2017-01-01T00:00:37.5 TAI is 00:00:00.5 UTC
    mjd_tai = 57754.0 + 37.5 / 86400.0
    assert float(leap_seconds_from_tai(mjd_tai)) == 37.0


def test_leap_seconds_from_tai_before_step():
    # 2017-01-01T00:00:35.5 TAI is 2016-12-31T23:59:59.5 UTC
    mjd_tai = 57754.0 + 35.5 / 86400.0
    assert float(leap_seconds_from_tai(mjd_tai)) == 36.0
