"""Entry aggregation engine.

Reduces W-2 and paystub entries into total wages and total federal
withholding. W-2s are additive. Paystubs are cumulative per employer, so only
the most recent (or highest year-to-date) paystub of each employer counts.
"""

import logging
from collections.abc import Iterable
from decimal import Decimal

from fedtax.engines.calculator import round_to_dollar
from fedtax.models.income_entries import AnnualEntry, PeriodicEntry
from fedtax.models.reports import AggregateTotals

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
UNLABELED = "unlabeled"


def normalize_employer_label(label: str | None) -> str:
    """Trim and case-fold an employer label; blank labels share one group.

    Distinct employers without labels therefore collapse together.
    """
    if label is None or not label.strip():
        return UNLABELED
    return label.strip().casefold()


def _rank_paystubs(stubs: list[PeriodicEntry]) -> list[PeriodicEntry]:
    """Order one employer's paystubs, authoritative first.

    Pay date decides only when every paystub in the group has one; otherwise
    the group is ranked by YTD wages alone.
    """
    if all(stub.pay_date is not None for stub in stubs):
        return sorted(
            stubs,
            key=lambda stub: (stub.pay_date, stub.ytd_taxable_wages or ZERO),
            reverse=True,
        )
    return sorted(stubs, key=lambda stub: stub.ytd_taxable_wages or ZERO, reverse=True)


class EntryAggregator:
    """Aggregates income entries into an AggregateTotals value."""

    def aggregate(
        self,
        annual_entries: Iterable[AnnualEntry] | None,
        periodic_entries: Iterable[PeriodicEntry] | None,
    ) -> AggregateTotals:
        annual_wages, annual_withheld = self.sum_annual(annual_entries)
        periodic_wages, periodic_withheld = self.sum_periodic(periodic_entries)

        return AggregateTotals(
            total_wages=round_to_dollar(annual_wages + periodic_wages),
            total_withheld=round_to_dollar(annual_withheld + periodic_withheld),
        )

    def sum_annual(self, annual_entries: Iterable[AnnualEntry] | None) -> tuple[Decimal, Decimal]:
        """Rounded (wages, withheld) over all W-2 entries."""
        wages = ZERO
        withheld = ZERO
        for entry in annual_entries or []:
            wages += entry.contributed_wages
            withheld += entry.contributed_withheld
        return round_to_dollar(wages), round_to_dollar(withheld)

    def sum_periodic(
        self, periodic_entries: Iterable[PeriodicEntry] | None
    ) -> tuple[Decimal, Decimal]:
        """Rounded (wages, withheld) over the authoritative paystub of each employer."""
        wages = ZERO
        withheld = ZERO
        for selected, _ in self.group_periodic_entries(periodic_entries).values():
            wages += selected.contributed_wages
            withheld += selected.contributed_withheld
        return round_to_dollar(wages), round_to_dollar(withheld)

    def group_periodic_entries(
        self, periodic_entries: Iterable[PeriodicEntry] | None
    ) -> dict[str, tuple[PeriodicEntry, list[PeriodicEntry]]]:
        """Group paystubs by employer label.

        Returns ``{label: (selected, discarded)}`` where ``selected`` is the
        paystub that represents the employer and ``discarded`` holds the rest
        of the group, in ranking order.
        """
        groups: dict[str, list[PeriodicEntry]] = {}
        for entry in periodic_entries or []:
            groups.setdefault(normalize_employer_label(entry.employer_label), []).append(entry)

        result = {}
        for label, stubs in groups.items():
            ranked = _rank_paystubs(stubs)
            result[label] = (ranked[0], ranked[1:])
            if len(ranked) > 1:
                logger.info(
                    "Employer '%s': using paystub %s, ignoring %d earlier paystub(s)",
                    label, ranked[0].id, len(ranked) - 1,
                )
        return result
