"""Computation result models."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from fedtax.models.enums import FilingStatus, ProjectionMethod


class BracketBand(BaseModel):
    model_config = ConfigDict(frozen=True)

    rate: Decimal
    lower_bound: Decimal
    upper_bound: Decimal | None = None  # None for the top bracket

    @property
    def is_unbounded(self) -> bool:
        return self.upper_bound is None

    @property
    def width(self) -> Decimal | None:
        if self.upper_bound is None:
            return None
        return self.upper_bound - self.lower_bound


class BracketContribution(BaseModel):
    model_config = ConfigDict(frozen=True)

    rate: Decimal
    lower_bound: Decimal
    upper_bound: Decimal | None
    income_in_band: Decimal
    tax_from_band: Decimal
    unrounded_tax: Decimal


class AggregateTotals(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_wages: Decimal = Decimal("0")
    total_withheld: Decimal = Decimal("0")


class EstimateResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    tax_year: int
    filing_status: FilingStatus
    total_wages: Decimal
    total_withheld: Decimal
    deduction_applied: Decimal
    taxable_income: Decimal
    tax_liability: Decimal
    net_due_or_refund: Decimal  # positive = owed, negative = refund
    is_refund: bool
    refund_amount: Decimal
    amount_due: Decimal
    bracket_contributions: list[BracketContribution] = Field(default_factory=list)
    computed_at: datetime
    warnings: list[str] = Field(default_factory=list)

    @property
    def effective_rate(self) -> Decimal:
        """Liability as a fraction of total wages (0 when there are no wages)."""
        if self.total_wages <= 0:
            return Decimal("0")
        return self.tax_liability / self.total_wages

    @property
    def marginal_rate(self) -> Decimal:
        """Rate of the highest band that received income."""
        if not self.bracket_contributions:
            return Decimal("0")
        return self.bracket_contributions[-1].rate


class ProjectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    projected_wages: Decimal
    projected_withheld: Decimal
    remaining_periods: int
    method: ProjectionMethod


class ProjectedEstimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    ytd_estimate: EstimateResult
    projected_estimate: EstimateResult
    projected_total_wages: Decimal
    projected_total_withheld: Decimal
    projections: dict[str, ProjectionResult] = Field(default_factory=dict)


class ValidationResult(BaseModel):
    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    field: str | None = None


class DuplicateMatch(BaseModel):
    annual_entry_id: str
    periodic_entry_id: str
    annual_label: str
    periodic_label: str
    similarity: float


class DuplicateReport(BaseModel):
    matches: list[DuplicateMatch] = Field(default_factory=list)
    warning_message: str | None = None

    @property
    def has_potential_duplicates(self) -> bool:
        return bool(self.matches)
