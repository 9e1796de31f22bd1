"""Shared test fixtures for fedtax."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from fedtax.engines.estimator import TaxEstimator
from fedtax.engines.schedule import ScheduleProvider
from fedtax.models.enums import FilingStatus, PayFrequency
from fedtax.models.income_entries import AnnualEntry, PeriodicEntry

FIXED_NOW = datetime(2025, 6, 1, 12, 0, 0)


@pytest.fixture
def schedule() -> ScheduleProvider:
    return ScheduleProvider()


@pytest.fixture
def single_2025_bands(schedule):
    return schedule.get_brackets(2025, FilingStatus.SINGLE)


@pytest.fixture
def estimator() -> TaxEstimator:
    return TaxEstimator(clock=lambda: FIXED_NOW)


@pytest.fixture
def sample_w2() -> AnnualEntry:
    return AnnualEntry(
        id="w2-acme",
        employer_label="Acme Corp",
        gross_wages=Decimal("60000"),
        federal_withheld=Decimal("6000"),
    )


@pytest.fixture
def sample_paystub() -> PeriodicEntry:
    return PeriodicEntry(
        id="stub-globex",
        employer_label="Globex",
        pay_frequency=PayFrequency.BIWEEKLY,
        pay_date=date(2025, 6, 13),
        ytd_taxable_wages=Decimal("20000"),
        ytd_federal_withheld=Decimal("2400"),
        current_taxable_wages=Decimal("2000"),
        current_federal_withheld=Decimal("240"),
    )
