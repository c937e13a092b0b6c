"""Tests for EOP tables, file parsers and the EOP corrector."""

from __future__ import annotations

from pathlib import Path

import polars as pl
import pytest

from conftest import FINALS_LINES
from trs2crs.constants import AS2RAD, MAS2RAD
from trs2crs.epoch import Epoch, TimeScale
from trs2crs.eop import (
    EOPCorrector,
    EOPRecord,
    EOPTable,
    OffsetKind,
    StaticEOPTable,
    UT1Mode,
    load_eop_from_csv,
    load_eop_from_file,
    static_eop,
)
from trs2crs.eop._parsers import parse_csv_file, parse_standard_file, parse_standard_line
from trs2crs.errors import ConfigurationError, DataGapError
from trs2crs.tides import diurnal_correction, zonal_correction
from trs2crs.windowed_cache import CacheState


def _bracket_diurnal(day: int) -> tuple[float, float, float]:
    return diurnal_correction(Epoch.from_day_seconds(day, 0.0, TimeScale.UTC))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def two_day_table() -> EOPTable:
    """Two consecutive days with distinct values in every column."""
    return EOPTable(
        {
            58849: EOPRecord(1.0e-6, 2.0e-6, -37.10, 1.0e-9, -2.0e-9),
            58850: EOPRecord(3.0e-6, 1.0e-6, -37.20, 3.0e-9, -4.0e-9),
        }
    )


@pytest.fixture
def csv_path(tmp_path: Path) -> Path:
    """IERS-style semicolon CSV with one incomplete row and one missing offset."""
    df = pl.DataFrame(
        {
            "MJD": [60250.0, 60249.0, 60251.0, 60252.0],
            "x_pole": [0.276230, 0.274620, 0.2778, None],
            "y_pole": [0.268020, 0.268283, 0.2677, 0.2675],
            "UT1-UTC": [0.0116742, 0.0113205, 0.0119, 0.0121],
            "dX": [0.299, 0.293, None, 0.1],
            "dY": [-0.044, -0.045, -0.05, 0.1],
        }
    )
    path = tmp_path / "eop.csv"
    df.write_csv(path, separator=";")
    return path


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


class TestEOPTable:
    """Tests for EOPTable and StaticEOPTable."""

    def test_lookup(self, two_day_table: EOPTable) -> None:
        assert two_day_table.lookup(58849).ut1_minus_tai == -37.10
        assert two_day_table.lookup(58851) is None

    def test_metadata(self, two_day_table: EOPTable) -> None:
        assert two_day_table.mjd_min == 58849
        assert two_day_table.mjd_max == 58850
        assert len(two_day_table) == 2
        assert two_day_table.interval_days == 1.0
        assert two_day_table.ut1_mode is UT1Mode.UT1
        assert two_day_table.offset_kind is OffsetKind.CIP
        assert 58849 in two_day_table
        assert 58851 not in two_day_table

    def test_repr(self, two_day_table: EOPTable) -> None:
        assert "mjd_min=58849" in repr(two_day_table)

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError, match="at least one"):
            EOPTable({})

    def test_bad_interval_raises(self) -> None:
        with pytest.raises(ValueError, match="interval"):
            EOPTable({1: EOPRecord(0.0, 0.0, 0.0)}, interval_days=0.0)

    def test_from_records(self) -> None:
        table = EOPTable.from_records([1.0, 2.0], [0.1, 0.2], [0.3, 0.4], [-1.0, -2.0])
        assert table.lookup(2) == EOPRecord(0.2, 0.4, -2.0, 0.0, 0.0)

    def test_from_records_length_mismatch(self) -> None:
        with pytest.raises(ValueError, match="same length"):
            EOPTable.from_records([1, 2], [0.1], [0.3, 0.4], [-1.0, -2.0])

    def test_static_table(self) -> None:
        table = static_eop(xp=1e-6, ut1_minus_tai=-36.9, mjd_min=100, mjd_max=200)
        assert isinstance(table, StaticEOPTable)
        assert table.lookup(150).xp == 1e-6
        assert table.lookup(99) is None
        assert table.lookup(201) is None
        assert len(table) == 101
        assert 150 in table

    def test_static_table_metadata(self) -> None:
        table = static_eop(ut1_mode=UT1Mode.UT1R, offset_kind=OffsetKind.NUTATION)
        assert table.ut1_mode is UT1Mode.UT1R
        assert table.offset_kind is OffsetKind.NUTATION


# ---------------------------------------------------------------------------
# Standard format parser
# ---------------------------------------------------------------------------


class TestParseStandardLine:
    """Tests for the IERS standard format line parser."""

    def test_parse_full_line(self) -> None:
        mjd, pm_x, pm_y, ut1_utc, dX, dY = parse_standard_line(FINALS_LINES[0])
        assert mjd == 60249
        assert pm_x == pytest.approx(0.274620 * AS2RAD, rel=1e-10)
        assert pm_y == pytest.approx(0.268283 * AS2RAD, rel=1e-10)
        assert ut1_utc == pytest.approx(0.0113205, rel=1e-10)
        assert dX == pytest.approx(0.293 * MAS2RAD, rel=1e-10)
        assert dY == pytest.approx(-0.045 * MAS2RAD, rel=1e-10)

    def test_missing_offsets_are_zero(self) -> None:
        result = parse_standard_line(FINALS_LINES[2])
        assert result is not None
        assert result[0] == 60672
        assert result[4] == 0.0
        assert result[5] == 0.0

    def test_short_line_pads(self) -> None:
        line = FINALS_LINES[2].rstrip()
        assert len(line) < 187
        assert parse_standard_line(line) is not None

    def test_only_mjd_returns_none(self) -> None:
        assert parse_standard_line("241229 60673.00" + " " * 171) is None

    def test_too_long_returns_none(self) -> None:
        assert parse_standard_line(FINALS_LINES[0] + "EXTRA") is None

    def test_empty_returns_none(self) -> None:
        assert parse_standard_line("") is None


class TestParseStandardFile:
    """Tests for parse_standard_file and load_eop_from_file."""

    def test_parse_file(self, finals_path: Path) -> None:
        mjd, pm_x, pm_y, ut1_tai, dX, dY = parse_standard_file(finals_path)
        assert mjd == [60249, 60250, 60672]
        # UT1-UTC converted with 37 leap seconds
        assert ut1_tai[0] == pytest.approx(0.0113205 - 37.0, rel=1e-12)

    def test_no_valid_lines_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "junk.txt"
        path.write_text("not eop data\n")
        with pytest.raises(ValueError, match="No valid EOP data"):
            parse_standard_file(path)

    def test_load_from_file(self, finals_path: Path) -> None:
        table = load_eop_from_file(finals_path)
        assert table.mjd_min == 60249
        assert table.mjd_max == 60672
        assert table.ut1_mode is UT1Mode.UT1
        assert table.lookup(60250).dpsi_bias == pytest.approx(0.299 * MAS2RAD)

    def test_load_with_mode(self, finals_path: Path) -> None:
        table = load_eop_from_file(finals_path, ut1_mode=UT1Mode.UT1R)
        assert table.ut1_mode is UT1Mode.UT1R

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_eop_from_file(tmp_path / "absent.txt")


# ---------------------------------------------------------------------------
# CSV parser
# ---------------------------------------------------------------------------


class TestParseCSV:
    """Tests for the semicolon-separated CSV loader."""

    def test_sorted_and_filtered(self, csv_path: Path) -> None:
        mjd, pm_x, _, ut1_tai, dX, _ = parse_csv_file(csv_path)
        assert mjd == [60249, 60250, 60251]
        assert pm_x[0] == pytest.approx(0.274620 * AS2RAD)
        assert ut1_tai[1] == pytest.approx(0.0116742 - 37.0)
        assert dX[0] == pytest.approx(0.293 * MAS2RAD)

    def test_missing_offset_is_zero(self, csv_path: Path) -> None:
        _, _, _, _, dX, dY = parse_csv_file(csv_path)
        assert dX[2] == 0.0
        assert dY[2] == pytest.approx(-0.05 * MAS2RAD)

    def test_renamed_columns(self, tmp_path: Path) -> None:
        path = tmp_path / "c04.csv"
        pl.DataFrame(
            {"MJD": [60249.0], "x_pole": [0.27], "y_pole": [0.26], "UT1-UTC": [0.01],
             "dPsi": [-0.1], "dEpsilon": [0.05]}
        ).write_csv(path, separator=";")
        table = load_eop_from_csv(path, offset_kind=OffsetKind.NUTATION,
                                  dx_column="dPsi", dy_column="dEpsilon")
        record = table.lookup(60249)
        assert table.offset_kind is OffsetKind.NUTATION
        assert record.dpsi_bias == pytest.approx(-0.1 * MAS2RAD)
        assert record.deps_bias == pytest.approx(0.05 * MAS2RAD)

    def test_offset_columns_optional(self, tmp_path: Path) -> None:
        path = tmp_path / "no_offsets.csv"
        pl.DataFrame(
            {"MJD": [60249.0], "x_pole": [0.27], "y_pole": [0.26], "UT1-UTC": [0.01]}
        ).write_csv(path, separator=";")
        _, _, _, _, dX, dY = parse_csv_file(path)
        assert dX == [0.0]
        assert dY == [0.0]

    def test_missing_required_column_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.csv"
        pl.DataFrame({"MJD": [60249.0], "x_pole": [0.27]}).write_csv(path, separator=";")
        with pytest.raises(ValueError, match="missing columns"):
            parse_csv_file(path)

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_eop_from_csv(tmp_path / "absent.csv")


# ---------------------------------------------------------------------------
# Corrector
# ---------------------------------------------------------------------------


class TestEOPCorrector:
    """Tests for EOPCorrector."""

    def test_brackets(self, two_day_table: EOPTable) -> None:
        corrector = EOPCorrector(two_day_table)
        day0, day1, alpha = corrector.brackets(Epoch.from_day_seconds(58849, 21600.0))
        assert (day0, day1) == (58849, 58850)
        assert alpha == pytest.approx(0.25)

    def test_brackets_from_tt(self, two_day_table: EOPTable) -> None:
        """Non-UTC epochs are bracketed on their UTC date."""
        corrector = EOPCorrector(two_day_table)
        tt = Epoch.from_day_seconds(58849, 60.0, TimeScale.UTC).to_scale(TimeScale.TT)
        day0, _, alpha = corrector.brackets(tt)
        assert day0 == 58849
        assert alpha == pytest.approx(60.0 / 86400.0, abs=1e-12)

    def test_brackets_coarse_interval(self) -> None:
        table = EOPTable({100: EOPRecord(0, 0, 0), 105: EOPRecord(0, 0, 0)}, interval_days=5.0)
        day0, day1, alpha = EOPCorrector(table).brackets(Epoch.from_mjd(102.5))
        assert (day0, day1) == (100, 105)
        assert alpha == pytest.approx(0.5)

    def test_linear_interpolation(self, two_day_table: EOPTable) -> None:
        corrector = EOPCorrector(two_day_table)
        record = corrector.corrected_eop(Epoch.from_day_seconds(58849, 43200.0))
        assert record.xp == pytest.approx(2.0e-6)
        assert record.yp == pytest.approx(1.5e-6)
        assert record.ut1_minus_tai == pytest.approx(-37.15)
        assert record.dpsi_bias == pytest.approx(2.0e-9)
        assert record.deps_bias == pytest.approx(-3.0e-9)

    def test_exact_day(self, two_day_table: EOPTable) -> None:
        corrector = EOPCorrector(two_day_table)
        record = corrector.corrected_eop(Epoch.from_day_seconds(58849, 0.0))
        assert record == pytest.approx(two_day_table.lookup(58849))

    def test_last_table_day(self, two_day_table: EOPTable) -> None:
        """An epoch on the final tabulated day needs no later record."""
        corrector = EOPCorrector(two_day_table)
        epoch = Epoch.from_day_seconds(two_day_table.mjd_max, 0.0)
        assert corrector.corrected_eop(epoch) == pytest.approx(two_day_table.lookup(58850))

    def test_last_table_day_tide_free(self) -> None:
        table = static_eop(ut1_minus_tai=-37.0, mjd_min=58999, mjd_max=59001,
                           ut1_mode=UT1Mode.UT1R)
        epoch = Epoch.from_day_seconds(table.mjd_max, 0.0)
        record = EOPCorrector(table).corrected_eop(epoch)
        assert record.ut1_minus_tai == pytest.approx(-37.0 + zonal_correction(epoch)[0], abs=5e-6)

    def test_gap_after_table(self, two_day_table: EOPTable) -> None:
        corrector = EOPCorrector(two_day_table)
        with pytest.raises(DataGapError) as excinfo:
            corrector.corrected_eop(Epoch.from_day_seconds(58850, 3600.0))
        assert excinfo.value.day == 58851

    def test_gap_before_table(self, two_day_table: EOPTable) -> None:
        corrector = EOPCorrector(two_day_table)
        with pytest.raises(DataGapError) as excinfo:
            corrector.corrected_eop(Epoch.from_day_seconds(58848, 3600.0))
        assert excinfo.value.day == 58848

    def test_gap_inside_table(self) -> None:
        table = EOPTable({1: EOPRecord(0, 0, 0), 3: EOPRecord(0, 0, 0)})
        with pytest.raises(DataGapError, match="MJD 2"):
            EOPCorrector(table).corrected_eop(Epoch.from_mjd(1.5))

    def test_data_gap_is_value_error(self, two_day_table: EOPTable) -> None:
        with pytest.raises(ValueError):
            EOPCorrector(two_day_table).corrected_eop(Epoch(2030, 1, 1))

    def test_ut1_epoch_rejected(self, two_day_table: EOPTable) -> None:
        ut1 = Epoch.from_day_seconds(58849, 0.0, TimeScale.UT1)
        with pytest.raises(ValueError, match="UT1-TAI"):
            EOPCorrector(two_day_table).corrected_eop(ut1)

    def test_ut1_mode_leaves_caches_unused(self, two_day_table: EOPTable) -> None:
        corrector = EOPCorrector(two_day_table)
        corrector.corrected_eop(Epoch.from_day_seconds(58849, 43200.0))
        assert corrector.diurnal_cache.state is CacheState.UNINITIALIZED
        assert corrector.zonal_cache.state is CacheState.UNINITIALIZED

    def test_cache_configuration(self) -> None:
        corrector = EOPCorrector(static_eop(), diurnal_half_step=0.02, zonal_half_step=0.1)
        assert corrector.diurnal_cache.n_points == 2
        assert corrector.diurnal_cache.half_step == 0.02
        assert corrector.zonal_cache.n_points == 3
        assert corrector.zonal_cache.half_step == 0.1

    def test_bad_half_step(self) -> None:
        with pytest.raises(ConfigurationError):
            EOPCorrector(static_eop(), diurnal_half_step=0.0)


class TestUT1RCorrection:
    """Tidal restoration for tables with the zonal and diurnal effects removed."""

    def test_restores_zonal_tide(self) -> None:
        """At a table day the diurnal terms cancel and the zonal effect remains."""
        table = static_eop(xp=1e-6, yp=2e-6, ut1_minus_tai=-37.0, ut1_mode=UT1Mode.UT1R)
        epoch = Epoch.from_day_seconds(58849, 0.0)
        record = EOPCorrector(table).corrected_eop(epoch)
        zonal_ut1 = zonal_correction(epoch)[0]
        assert record.ut1_minus_tai == pytest.approx(-37.0 + zonal_ut1, abs=5e-6)
        assert record.xp == pytest.approx(1e-6, abs=1e-10)
        assert record.yp == pytest.approx(2e-6, abs=1e-10)

    def test_restores_diurnal_terms(self) -> None:
        """Between table days the diurnal effect at the epoch is added back."""
        table = static_eop(xp=1e-6, yp=2e-6, ut1_minus_tai=-37.0, ut1_mode=UT1Mode.UT1R)
        epoch = Epoch.from_day_seconds(58849, 30000.0)
        record = EOPCorrector(table).corrected_eop(epoch)
        alpha = 30000.0 / 86400.0
        b0 = _bracket_diurnal(58849)
        b1 = _bracket_diurnal(58850)
        dxp, dyp, dut1 = diurnal_correction(epoch)
        expected_xp = 1e-6 - (b0[0] + alpha * (b1[0] - b0[0])) + dxp
        expected_ut1 = (-37.0 - (b0[2] + alpha * (b1[2] - b0[2])) + dut1
                        + zonal_correction(epoch)[0])
        assert record.xp == pytest.approx(expected_xp, abs=1e-10)
        assert record.ut1_minus_tai == pytest.approx(expected_ut1, abs=5e-6)

    def test_bracket_values_are_per_corrector(self) -> None:
        """Each corrector memoises its own bracket-day diurnal values."""
        table = static_eop(ut1_mode=UT1Mode.UT1R)
        first, second = EOPCorrector(table), EOPCorrector(table)
        first.corrected_eop(Epoch.from_day_seconds(58849, 30000.0))
        assert first._bracket_diurnal.cache_info().currsize == 2
        assert second._bracket_diurnal.cache_info().currsize == 0

    def test_uses_both_caches(self) -> None:
        table = static_eop(ut1_mode=UT1Mode.UT1R)
        corrector = EOPCorrector(table)
        corrector.corrected_eop(Epoch(2020, 1, 1, 6))
        assert corrector.diurnal_cache.state is CacheState.READY
        assert corrector.zonal_cache.state is CacheState.READY

    def test_zonal_rates(self) -> None:
        corrector = EOPCorrector(static_eop(ut1_mode=UT1Mode.UT1R))
        epoch = Epoch(2020, 1, 1, 6)
        dlod, domega = corrector.zonal_rates(epoch)
        _, direct_lod, direct_omega = zonal_correction(epoch)
        assert dlod == pytest.approx(direct_lod, abs=1e-8)
        assert domega == pytest.approx(direct_omega, abs=1e-16)
