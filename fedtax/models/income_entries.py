"""Income entry models (W-2 annual summaries and paystubs)."""

from datetime import date
from decimal import Decimal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from fedtax.models.enums import EntryKind, PayFrequency, WageSource

ZERO = Decimal("0")


def _new_id() -> str:
    return str(uuid4())


def _resolve_source(ytd: Decimal | None, current: Decimal | None) -> WageSource | None:
    if ytd is not None:
        return WageSource.YEAR_TO_DATE
    if current is not None:
        return WageSource.CURRENT_PERIOD
    return None


class AnnualEntry(BaseModel):
    """W-2 wage and tax statement."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    employer_label: str | None = None
    gross_wages: Decimal = Field(default=ZERO, ge=0)  # Box 1
    federal_withheld: Decimal = Field(default=ZERO, ge=0)  # Box 2
    social_security_wages: Decimal | None = None  # Box 3
    medicare_wages: Decimal | None = None  # Box 5
    retirement_contributions: Decimal | None = None

    @property
    def kind(self) -> EntryKind:
        return EntryKind.ANNUAL

    @property
    def contributed_wages(self) -> Decimal:
        return self.gross_wages

    @property
    def contributed_withheld(self) -> Decimal:
        return self.federal_withheld


class PeriodicEntry(BaseModel):
    """Paystub record.

    The wage and withholding sources are resolved once when the model is
    built: year-to-date figures are preferred, current-period figures are the
    fallback, and ``None`` means neither was supplied. Entries are frozen so
    the sources cannot drift from the figures they were resolved from.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    employer_label: str | None = None
    pay_frequency: PayFrequency | None = None
    pay_date: date | None = None
    ytd_taxable_wages: Decimal | None = Field(default=None, ge=0)
    ytd_federal_withheld: Decimal | None = Field(default=None, ge=0)
    current_taxable_wages: Decimal | None = Field(default=None, ge=0)
    current_federal_withheld: Decimal | None = Field(default=None, ge=0)
    ytd_pre_tax_deductions: Decimal | None = None
    current_gross_wages: Decimal | None = None
    still_employed: bool | None = None
    remaining_pay_periods: int | None = None

    wage_source: WageSource | None = None
    withheld_source: WageSource | None = None

    @field_validator("pay_frequency", mode="before")
    @classmethod
    def _normalize_frequency(cls, value):
        if isinstance(value, str):
            return value.strip().upper().replace("-", "").replace("_", "")
        return value

    @model_validator(mode="before")
    @classmethod
    def _resolve_sources(cls, data):
        if not isinstance(data, dict):
            return data
        return {
            **data,
            "wage_source": _resolve_source(
                data.get("ytd_taxable_wages"), data.get("current_taxable_wages")
            ),
            "withheld_source": _resolve_source(
                data.get("ytd_federal_withheld"), data.get("current_federal_withheld")
            ),
        }

    @property
    def kind(self) -> EntryKind:
        return EntryKind.PERIODIC

    @property
    def is_usable(self) -> bool:
        return self.wage_source is not None and self.withheld_source is not None

    @property
    def contributed_wages(self) -> Decimal:
        if self.wage_source is WageSource.YEAR_TO_DATE:
            return self.ytd_taxable_wages
        if self.wage_source is WageSource.CURRENT_PERIOD:
            return self.current_taxable_wages
        return ZERO

    @property
    def contributed_withheld(self) -> Decimal:
        if self.withheld_source is WageSource.YEAR_TO_DATE:
            return self.ytd_federal_withheld
        if self.withheld_source is WageSource.CURRENT_PERIOD:
            return self.current_federal_withheld
        return ZERO


IncomeEntry = AnnualEntry | PeriodicEntry
