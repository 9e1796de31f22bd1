"""Data models for fedtax."""

from fedtax.models.enums import (
    EntryKind,
    FilingStatus,
    PayFrequency,
    ProjectionMethod,
    WageSource,
)
from fedtax.models.income_entries import AnnualEntry, IncomeEntry, PeriodicEntry
from fedtax.models.reports import (
    AggregateTotals,
    BracketBand,
    BracketContribution,
    DuplicateMatch,
    DuplicateReport,
    EstimateResult,
    ProjectedEstimate,
    ProjectionResult,
    ValidationResult,
)

__all__ = [
    "AggregateTotals",
    "AnnualEntry",
    "BracketBand",
    "BracketContribution",
    "DuplicateMatch",
    "DuplicateReport",
    "EntryKind",
    "EstimateResult",
    "FilingStatus",
    "IncomeEntry",
    "PayFrequency",
    "PeriodicEntry",
    "ProjectedEstimate",
    "ProjectionMethod",
    "ProjectionResult",
    "ValidationResult",
    "WageSource",
]
