import pytest

from trs2crs.epoch import Epoch, TimeScale

# ──────────────────────────────────────────────
# Construction
# ──────────────────────────────────────────────


class TestEpochConstruction:
    def test_epoch_from_date(self):
        epc = Epoch(2018, 1, 1)
        assert epc.day == 58119
        assert epc.seconds == 0.0
        assert epc.scale is TimeScale.UTC

    def test_epoch_from_date_with_time(self):
        epc = Epoch(2024, 3, 15, 6, 30, 45.0, scale=TimeScale.TT)
        assert epc.seconds == pytest.approx(6 * 3600 + 30 * 60 + 45.0)
        assert epc.scale is TimeScale.TT

    def test_epoch_from_string(self):
        epc = Epoch("2018-01-01T12:00:00Z")
        assert epc.day == 58119
        assert epc.seconds == pytest.approx(43200.0)

    def test_epoch_from_string_fractional(self):
        epc = Epoch("2018-01-01T00:00:01.25Z")
        assert epc.seconds == pytest.approx(1.25)

    def test_epoch_from_date_only_string(self):
        assert Epoch("2018-01-01") == Epoch(2018, 1, 1)

    def test_invalid_string_raises(self):
        with pytest.raises(ValueError, match="ISO 8601"):
            Epoch("01/01/2018")

    def test_bad_argument_count_raises(self):
        with pytest.raises(ValueError):
            Epoch(2018, 1)

    def test_copy(self):
        epc = Epoch(2018, 1, 1, scale=TimeScale.TAI)
        copy = Epoch(epc)
        assert copy == epc
        assert copy.scale is TimeScale.TAI

    def test_from_mjd(self):
        epc = Epoch.from_mjd(58119.5, TimeScale.TT)
        assert epc.day == 58119
        assert epc.seconds == pytest.approx(43200.0)
        assert epc.scale is TimeScale.TT

    def test_from_day_seconds_normalizes(self):
        epc = Epoch.from_day_seconds(58119, -3600.0)
        assert epc.day == 58118
        assert epc.seconds == pytest.approx(82800.0)

    def test_from_day_seconds_overflow(self):
        epc = Epoch.from_day_seconds(58119, 90000.0)
        assert epc.day == 58120
        assert epc.seconds == pytest.approx(3600.0)


# ──────────────────────────────────────────────
# Derived quantities
# ──────────────────────────────────────────────


class TestEpochDerived:
    def test_mjd(self):
        assert Epoch(2000, 1, 1, 12).mjd() == pytest.approx(51544.5)

    def test_jd_split(self):
        jd1, jd2 = Epoch(2000, 1, 1, 18).jd_split()
        assert jd1 == 2451544.5
        assert jd2 == pytest.approx(0.75)

    def test_julian_centuries_j2000(self):
        assert Epoch(2000, 1, 1, 12, scale=TimeScale.TT).julian_centuries() == 0.0

    def test_julian_centuries_one_century(self):
        epc = Epoch.from_mjd(51544.5 + 36525.0, TimeScale.TT)
        assert epc.julian_centuries() == pytest.approx(1.0, abs=1e-15)

    def test_caldate(self):
        year, month, day, hour, minute, second = Epoch(2024, 3, 15, 6, 30, 45.5).caldate()
        assert (year, month, day, hour, minute) == (2024, 3, 15, 6, 30)
        assert second == pytest.approx(45.5)

    def test_str(self):
        assert str(Epoch(2018, 1, 1, 12)) == "2018-01-01T12:00:00.000 UTC"


# ──────────────────────────────────────────────
# Arithmetic and comparison
# ──────────────────────────────────────────────


class TestEpochArithmetic:
    def test_add_days(self):
        epc = Epoch(2018, 1, 1) + 1.5
        assert epc.day == 58120
        assert epc.seconds == pytest.approx(43200.0)

    def test_subtract_days(self):
        epc = Epoch(2018, 1, 1) - 0.25
        assert epc.day == 58118
        assert epc.seconds == pytest.approx(64800.0)

    def test_difference_in_days(self):
        assert Epoch(2018, 1, 2, 6) - Epoch(2018, 1, 1) == pytest.approx(1.25)

    def test_difference_keeps_sub_microsecond(self):
        a = Epoch.from_day_seconds(60000, 10.0)
        b = Epoch.from_day_seconds(60000, 10.0 + 1.0e-7)
        assert (b - a) * 86400.0 == pytest.approx(1.0e-7, rel=1e-6)

    def test_difference_across_scales_raises(self):
        with pytest.raises(ValueError, match="subtract"):
            Epoch(2018, 1, 1) - Epoch(2018, 1, 1, scale=TimeScale.TT)

    def test_ordering(self):
        a = Epoch(2018, 1, 1)
        b = a + 1.0e-6
        assert a < b
        assert b > a
        assert a <= a
        assert b >= a

    def test_compare_across_scales_raises(self):
        with pytest.raises(ValueError):
            _ = Epoch(2018, 1, 1) < Epoch(2018, 1, 1, scale=TimeScale.TT)

    def test_equality_includes_scale(self):
        assert Epoch(2018, 1, 1) != Epoch(2018, 1, 1, scale=TimeScale.TAI)

    def test_hashable(self):
        assert len({Epoch(2018, 1, 1), Epoch(2018, 1, 1), Epoch(2018, 1, 2)}) == 2


# ──────────────────────────────────────────────
# Time scales
# ──────────────────────────────────────────────


class TestEpochTimeScales:
    def test_utc_to_tai(self):
        tai = Epoch(2020, 1, 1).to_scale(TimeScale.TAI)
        assert tai.day == 58849
        assert tai.seconds == pytest.approx(37.0)

    def test_utc_to_tt(self):
        tt = Epoch(2020, 1, 1).to_scale(TimeScale.TT)
        assert tt.seconds == pytest.approx(69.184)
        assert tt.scale is TimeScale.TT

    def test_tt_to_utc_roundtrip(self):
        utc = Epoch(2007, 4, 5, 12)
        back = utc.to_scale(TimeScale.TT).to_scale(TimeScale.UTC)
        assert back - utc == pytest.approx(0.0, abs=1e-12)

    def test_same_scale_returns_self(self):
        epc = Epoch(2020, 1, 1)
        assert epc.to_scale(TimeScale.UTC) is epc

    def test_to_ut1(self):
        ut1 = Epoch(2007, 4, 5, 12).to_scale(TimeScale.UT1, -0.072073685 - 33.0)
        assert ut1.seconds == pytest.approx(43200.0 - 0.072073685, abs=1e-9)
        assert ut1.scale is TimeScale.UT1

    def test_from_ut1(self):
        ut1 = Epoch.from_day_seconds(54195, 43200.0, TimeScale.UT1)
        tai = ut1.to_scale(TimeScale.TAI, -33.5)
        assert tai.seconds == pytest.approx(43233.5)

    def test_ut1_requires_offset(self):
        with pytest.raises(ValueError, match="UT1-TAI"):
            Epoch(2020, 1, 1).to_scale(TimeScale.UT1)

    def test_from_ut1_requires_offset(self):
        ut1 = Epoch.from_day_seconds(54195, 0.0, TimeScale.UT1)
        with pytest.raises(ValueError, match="UT1-TAI"):
            ut1.to_scale(TimeScale.UTC)

    def test_leap_second_boundary(self):
        # Last second of 2016 carries 36 s, the first of 2017 carries 37 s
        before = Epoch(2016, 12, 31, 23, 59, 59.0).to_scale(TimeScale.TAI)
        after = Epoch(2017, 1, 1).to_scale(TimeScale.TAI)
        assert (after - before) * 86400.0 == pytest.approx(2.0, abs=1e-6)
