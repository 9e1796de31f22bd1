"""Tax-due estimation engine.

Composes the aggregation, schedule lookup and progressive tax engines into a
single federal estimate:
  - W-2 and paystub aggregation with same-employer paystub collapse
  - Standard deduction with taxable income floored at zero
  - Progressive ordinary income tax with a per-bracket breakdown
  - Refund / amount-due split against federal withholding
  - Optional year-end projection of paystub income
"""

import logging
from collections.abc import Callable, Iterable
from datetime import datetime
from decimal import Decimal

from fedtax.engines.aggregator import EntryAggregator
from fedtax.engines.calculator import ProgressiveTaxCalculator, round_to_dollar
from fedtax.engines.duplicates import DuplicateDetector
from fedtax.engines.projection import ProjectionCalculator
from fedtax.engines.schedule import ScheduleProvider, coerce_filing_status
from fedtax.models.enums import FilingStatus
from fedtax.models.income_entries import AnnualEntry, PeriodicEntry
from fedtax.models.reports import AggregateTotals, EstimateResult, ProjectedEstimate

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class TaxEstimator:
    """Estimates federal tax liability and the resulting refund or balance due."""

    def __init__(
        self,
        schedule: ScheduleProvider | None = None,
        aggregator: EntryAggregator | None = None,
        calculator: ProgressiveTaxCalculator | None = None,
        projector: ProjectionCalculator | None = None,
        duplicate_detector: DuplicateDetector | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.schedule = schedule or ScheduleProvider()
        self.aggregator = aggregator or EntryAggregator()
        self.calculator = calculator or ProgressiveTaxCalculator()
        self.projector = projector or ProjectionCalculator()
        self.duplicate_detector = duplicate_detector or DuplicateDetector()
        self.clock = clock
        self.warnings: list[str] = []

    def compose_estimate(
        self,
        tax_year: int,
        filing_status: FilingStatus | str,
        annual_entries: Iterable[AnnualEntry] | None = None,
        periodic_entries: Iterable[PeriodicEntry] | None = None,
    ) -> EstimateResult:
        """Compute the estimate for a set of W-2 and paystub entries.

        Raises UnsupportedPeriodError when the year / filing status pair has
        no schedule. Warnings are collected per call and returned on the
        result; ``self.warnings`` mirrors the most recent call.
        """
        annual = list(annual_entries or [])
        periodic = list(periodic_entries or [])

        warnings = self._collect_entry_warnings(annual, periodic)
        totals = self.aggregator.aggregate(annual, periodic)
        return self.estimate_from_totals(tax_year, filing_status, totals, warnings)

    def estimate_from_totals(
        self,
        tax_year: int,
        filing_status: FilingStatus | str,
        totals: AggregateTotals,
        warnings: list[str] | None = None,
    ) -> EstimateResult:
        """Compute the estimate from already aggregated wages and withholding."""
        deduction = self.schedule.get_deduction(tax_year, filing_status)
        bands = self.schedule.get_brackets(tax_year, filing_status)
        status = coerce_filing_status(filing_status)

        taxable_income = max(totals.total_wages - deduction, ZERO)
        liability, contributions = self.calculator.compute_liability(taxable_income, bands)

        # Positive = amount due, negative = refund
        net = liability - totals.total_withheld
        is_refund = net < ZERO
        refund_amount = -net if is_refund else ZERO
        amount_due = ZERO if is_refund else net

        logger.debug(
            "Estimate %s/%s: wages %s, deduction %s, taxable %s, liability %s, net %s",
            tax_year, status, totals.total_wages, deduction, taxable_income, liability, net,
        )

        warnings = list(warnings or [])
        self.warnings = warnings
        return EstimateResult(
            tax_year=tax_year,
            filing_status=status,
            total_wages=round_to_dollar(totals.total_wages),
            total_withheld=round_to_dollar(totals.total_withheld),
            deduction_applied=round_to_dollar(deduction),
            taxable_income=round_to_dollar(taxable_income),
            tax_liability=liability,
            net_due_or_refund=round_to_dollar(net),
            is_refund=is_refund,
            refund_amount=round_to_dollar(refund_amount),
            amount_due=round_to_dollar(amount_due),
            bracket_contributions=contributions,
            computed_at=self.clock(),
            warnings=list(warnings),
        )

    def compose_projected_estimate(
        self,
        tax_year: int,
        filing_status: FilingStatus | str,
        annual_entries: Iterable[AnnualEntry] | None = None,
        periodic_entries: Iterable[PeriodicEntry] | None = None,
    ) -> ProjectedEstimate:
        """Compute both the year-to-date estimate and a projected year-end estimate.

        Each employer's authoritative paystub is projected over its remaining
        pay periods. W-2 entries are already full-year and are used as-is.
        """
        annual = list(annual_entries or [])
        periodic = list(periodic_entries or [])

        ytd_estimate = self.compose_estimate(tax_year, filing_status, annual, periodic)

        projections = {}
        projected_wages = ZERO
        projected_withheld = ZERO
        for label, (selected, _) in self.aggregator.group_periodic_entries(periodic).items():
            projection = self.projector.project_entry(selected)
            projections[label] = projection
            projected_wages += projection.projected_wages
            projected_withheld += projection.projected_withheld

        annual_wages, annual_withheld = self.aggregator.sum_annual(annual)
        totals = AggregateTotals(
            total_wages=round_to_dollar(annual_wages + projected_wages),
            total_withheld=round_to_dollar(annual_withheld + projected_withheld),
        )

        projected_estimate = self.estimate_from_totals(
            tax_year, filing_status, totals, ytd_estimate.warnings
        )

        return ProjectedEstimate(
            ytd_estimate=ytd_estimate,
            projected_estimate=projected_estimate,
            projected_total_wages=totals.total_wages,
            projected_total_withheld=totals.total_withheld,
            projections=projections,
        )

    # ------------------------------------------------------------------
    # Warnings
    # ------------------------------------------------------------------

    def _collect_entry_warnings(
        self, annual: list[AnnualEntry], periodic: list[PeriodicEntry]
    ) -> list[str]:
        warnings = []
        for stub in periodic:
            if not stub.is_usable:
                warnings.append(
                    f"Paystub {stub.id} is missing wages or withholding; "
                    f"missing figures are counted as $0."
                )

        for label, (selected, discarded) in self.aggregator.group_periodic_entries(periodic).items():
            if discarded:
                warnings.append(
                    f"{len(discarded) + 1} paystubs share employer '{label}'. "
                    f"Only the most recent one ({selected.id}) is counted because "
                    f"year-to-date figures are cumulative."
                )

        report = self.duplicate_detector.detect(annual, periodic)
        if report.has_potential_duplicates:
            warnings.append(report.warning_message)
        return warnings
