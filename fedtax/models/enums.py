"""Enumerations for fedtax."""

from enum import StrEnum


class FilingStatus(StrEnum):
    SINGLE = "SINGLE"
    MFJ = "MARRIED_FILING_JOINTLY"

    @property
    def display_name(self) -> str:
        return "Single" if self is FilingStatus.SINGLE else "Married Filing Jointly"


class PayFrequency(StrEnum):
    WEEKLY = "WEEKLY"
    BIWEEKLY = "BIWEEKLY"
    SEMIMONTHLY = "SEMIMONTHLY"
    MONTHLY = "MONTHLY"

    @property
    def periods_per_year(self) -> int:
        return _PERIODS_PER_YEAR[self]


_PERIODS_PER_YEAR = {
    PayFrequency.WEEKLY: 52,
    PayFrequency.BIWEEKLY: 26,
    PayFrequency.SEMIMONTHLY: 24,
    PayFrequency.MONTHLY: 12,
}


class EntryKind(StrEnum):
    ANNUAL = "ANNUAL"  # W-2
    PERIODIC = "PERIODIC"  # paystub


class WageSource(StrEnum):
    YEAR_TO_DATE = "YEAR_TO_DATE"
    CURRENT_PERIOD = "CURRENT_PERIOD"


class ProjectionMethod(StrEnum):
    MANUAL = "MANUAL"
    PAY_FREQUENCY = "PAY_FREQUENCY"
