"""Year-end projection from a partial-year paystub."""

import calendar
import logging
from datetime import date
from decimal import Decimal

from fedtax.engines.calculator import round_to_dollar
from fedtax.exceptions import InvalidEntryError
from fedtax.models.enums import PayFrequency, ProjectionMethod
from fedtax.models.income_entries import PeriodicEntry
from fedtax.models.reports import ProjectionResult

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def paychecks_remaining(pay_date: date, frequency: PayFrequency) -> int:
    """Count paychecks after ``pay_date`` up to December 31 of the same year.

    Semimonthly payroll runs on the 15th and the last day of the month;
    monthly payroll runs once a month.
    """
    year_end = date(pay_date.year, 12, 31)

    if frequency in (PayFrequency.WEEKLY, PayFrequency.BIWEEKLY):
        step = 7 if frequency is PayFrequency.WEEKLY else 14
        return (year_end - pay_date).days // step

    months_left = 12 - pay_date.month
    if frequency is PayFrequency.MONTHLY:
        return months_left

    last_day = calendar.monthrange(pay_date.year, pay_date.month)[1]
    if pay_date.day < 15:
        this_month = 2
    elif pay_date.day < last_day:
        this_month = 1
    else:
        this_month = 0
    return this_month + 2 * months_left


class ProjectionCalculator:
    """Extrapolates year-to-date paystub figures to a full year."""

    def project_year_end(
        self,
        entry: PeriodicEntry,
        remaining_periods: int,
        method: ProjectionMethod = ProjectionMethod.MANUAL,
    ) -> ProjectionResult:
        """Project wages and withholding assuming the current paycheck repeats.

        Missing figures count as zero, so a projection may be all zero; the
        caller decides whether that is meaningful.
        """
        if remaining_periods < 0:
            raise InvalidEntryError(
                entry.id, "remaining_periods", f"must not be negative (got {remaining_periods})"
            )

        ytd_wages = entry.ytd_taxable_wages or ZERO
        ytd_withheld = entry.ytd_federal_withheld or ZERO
        current_wages = entry.current_taxable_wages or ZERO
        current_withheld = entry.current_federal_withheld or ZERO

        projected_wages = ytd_wages + current_wages * remaining_periods
        projected_withheld = ytd_withheld + current_withheld * remaining_periods
        logger.debug(
            "Projected paystub %s over %d period(s): wages %s, withheld %s",
            entry.id, remaining_periods, projected_wages, projected_withheld,
        )

        return ProjectionResult(
            projected_wages=round_to_dollar(projected_wages),
            projected_withheld=round_to_dollar(projected_withheld),
            remaining_periods=remaining_periods,
            method=method,
        )

    def remaining_periods_for(self, entry: PeriodicEntry) -> tuple[int, ProjectionMethod]:
        """Resolve how many paychecks remain for ``entry`` and how that was decided."""
        if entry.remaining_pay_periods is not None:
            return entry.remaining_pay_periods, ProjectionMethod.MANUAL
        if entry.still_employed is False:
            return 0, ProjectionMethod.MANUAL
        if entry.pay_frequency is not None and entry.pay_date is not None:
            return paychecks_remaining(entry.pay_date, entry.pay_frequency), ProjectionMethod.PAY_FREQUENCY
        raise InvalidEntryError(
            entry.id,
            "remaining_pay_periods",
            "provide remaining pay periods, or both pay frequency and pay date",
        )

    def project_entry(self, entry: PeriodicEntry) -> ProjectionResult:
        """Project ``entry`` using its own remaining-period information."""
        remaining, method = self.remaining_periods_for(entry)
        return self.project_year_end(entry, remaining, method)
