"""Tests for bracket tables and the schedule provider."""

from decimal import Decimal

import pytest

from fedtax.engines.brackets import FEDERAL_BRACKETS, FEDERAL_STANDARD_DEDUCTION, SUPPORTED_TAX_YEARS
from fedtax.engines.schedule import ScheduleProvider, coerce_filing_status
from fedtax.exceptions import UnsupportedPeriodError, UnsupportedScheduleError
from fedtax.models.enums import FilingStatus

ALL_STATUSES = [FilingStatus.SINGLE, FilingStatus.MFJ]


class TestFederalBracketTables:
    def test_all_years_and_statuses_present(self):
        for year in SUPPORTED_TAX_YEARS:
            for status in ALL_STATUSES:
                assert status in FEDERAL_BRACKETS[year], f"Missing {year}/{status}"
                assert status in FEDERAL_STANDARD_DEDUCTION[year], f"Missing {year}/{status}"

    def test_bracket_monotonicity(self):
        for year in SUPPORTED_TAX_YEARS:
            for status in ALL_STATUSES:
                prev = Decimal("0")
                for upper, rate in FEDERAL_BRACKETS[year][status]:
                    if upper is not None:
                        assert upper > prev, f"Non-monotonic bracket for {year}/{status}"
                        prev = upper

    def test_top_bracket_is_unbounded(self):
        for year in SUPPORTED_TAX_YEARS:
            for status in ALL_STATUSES:
                assert FEDERAL_BRACKETS[year][status][-1] == (None, Decimal("0.37"))

    def test_2025_known_values(self):
        assert FEDERAL_BRACKETS[2025][FilingStatus.SINGLE][0] == (Decimal("11600"), Decimal("0.10"))
        assert FEDERAL_STANDARD_DEDUCTION[2025][FilingStatus.SINGLE] == Decimal("15000")
        assert FEDERAL_STANDARD_DEDUCTION[2025][FilingStatus.MFJ] == Decimal("30000")


class TestScheduleProvider:
    def test_bands_are_contiguous_from_zero(self, schedule):
        bands = schedule.get_brackets(2025, FilingStatus.MFJ)
        assert bands[0].lower_bound == Decimal("0")
        for prev, band in zip(bands, bands[1:]):
            assert band.lower_bound == prev.upper_bound
        assert bands[-1].upper_bound is None
        assert bands[-1].lower_bound == Decimal("731200")

    def test_deduction_lookup(self, schedule):
        assert schedule.get_deduction(2026, FilingStatus.SINGLE) == Decimal("15400")

    def test_accepts_status_aliases(self, schedule):
        assert schedule.get_deduction(2025, "single") == Decimal("15000")
        assert schedule.get_deduction(2025, "mfj") == Decimal("30000")
        assert schedule.get_deduction(2025, "married filing jointly") == Decimal("30000")

    def test_unsupported_year(self, schedule):
        with pytest.raises(UnsupportedPeriodError) as exc_info:
            schedule.get_brackets(2019, FilingStatus.SINGLE)
        assert exc_info.value.tax_year == 2019
        assert "2025" in str(exc_info.value)

    def test_unsupported_status(self, schedule):
        with pytest.raises(UnsupportedPeriodError):
            schedule.get_deduction(2025, "HEAD_OF_HOUSEHOLD")

    def test_period_error_is_schedule_error(self, schedule):
        with pytest.raises(UnsupportedScheduleError):
            schedule.get_deduction(2030, FilingStatus.SINGLE)

    def test_supported_years(self, schedule):
        assert schedule.supported_years == [2025, 2026]
        assert schedule.is_supported(2026, "MFJ")
        assert not schedule.is_supported(2024, "MFJ")
        assert not schedule.is_supported(2025, "HOH")

    def test_injected_tables(self):
        provider = ScheduleProvider(
            brackets={2030: {FilingStatus.SINGLE: [(Decimal("1000"), Decimal("0.5")), (None, Decimal("1"))]}},
            deductions={2030: {FilingStatus.SINGLE: Decimal("100")}},
        )
        bands = provider.get_brackets(2030, FilingStatus.SINGLE)
        assert [b.lower_bound for b in bands] == [Decimal("0"), Decimal("1000")]
        assert provider.get_deduction(2030, FilingStatus.SINGLE) == Decimal("100")
        with pytest.raises(UnsupportedPeriodError):
            provider.get_deduction(2030, FilingStatus.MFJ)


class TestCoerceFilingStatus:
    def test_enum_passthrough(self):
        assert coerce_filing_status(FilingStatus.MFJ) is FilingStatus.MFJ

    def test_value_strings(self):
        assert coerce_filing_status("MARRIED_FILING_JOINTLY") is FilingStatus.MFJ
        assert coerce_filing_status(" Single ") is FilingStatus.SINGLE

    def test_rejects_other_statuses(self):
        with pytest.raises(ValueError):
            coerce_filing_status("MFS")
