"""Progressive tax calculator.

Applies a marginal-rate bracket schedule to taxable income. Band taxes are
accumulated unrounded; liability and per-band figures are rounded to whole
dollars only when reported.
"""

import logging
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from fedtax.exceptions import UnsupportedScheduleError
from fedtax.models.reports import BracketBand, BracketContribution

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
ONE = Decimal("1")


def round_to_dollar(amount: Decimal) -> Decimal:
    """Round to the nearest whole dollar, halves away from zero."""
    return Decimal(amount).quantize(ONE, rounding=ROUND_HALF_UP)


def validate_schedule(bands: Sequence[BracketBand]) -> None:
    """Raise UnsupportedScheduleError unless bands form a valid progressive schedule."""
    if not bands:
        raise UnsupportedScheduleError("bracket schedule is empty")

    if bands[0].lower_bound != ZERO:
        raise UnsupportedScheduleError(
            f"first band must start at 0, not {bands[0].lower_bound}"
        )

    for index, band in enumerate(bands):
        if not ZERO < band.rate <= ONE:
            raise UnsupportedScheduleError(f"band {index} has rate {band.rate} outside (0, 1]")
        is_last = index == len(bands) - 1
        if band.upper_bound is None:
            if not is_last:
                raise UnsupportedScheduleError(f"unbounded band {index} is not the last band")
            continue
        if is_last:
            raise UnsupportedScheduleError("last band must be unbounded")
        if band.upper_bound <= band.lower_bound:
            raise UnsupportedScheduleError(
                f"band {index} upper bound {band.upper_bound} is not above "
                f"lower bound {band.lower_bound}"
            )
        following = bands[index + 1]
        if following.lower_bound != band.upper_bound:
            raise UnsupportedScheduleError(
                f"bands {index} and {index + 1} are not contiguous "
                f"({band.upper_bound} != {following.lower_bound})"
            )


class ProgressiveTaxCalculator:
    """Computes liability and a per-band breakdown for taxable income."""

    def compute_liability(
        self, taxable_income: Decimal, bands: Sequence[BracketBand]
    ) -> tuple[Decimal, list[BracketContribution]]:
        """Return (liability, contributions) for ``taxable_income``.

        Only bands that receive income appear in the contributions, in
        ascending order. Zero or negative income owes nothing.
        """
        validate_schedule(bands)

        if taxable_income <= ZERO:
            return ZERO, []

        total_tax = ZERO
        contributions: list[BracketContribution] = []

        for band in bands:
            if taxable_income <= band.lower_bound:
                break

            reached = taxable_income - band.lower_bound
            if band.upper_bound is None:
                income_in_band = reached
            else:
                income_in_band = min(band.width, reached)

            tax_from_band = income_in_band * band.rate
            total_tax += tax_from_band

            contributions.append(
                BracketContribution(
                    rate=band.rate,
                    lower_bound=band.lower_bound,
                    upper_bound=band.upper_bound,
                    income_in_band=round_to_dollar(income_in_band),
                    tax_from_band=round_to_dollar(tax_from_band),
                    unrounded_tax=tax_from_band,
                )
            )

        liability = round_to_dollar(total_tax)
        logger.debug(
            "Liability %s on taxable income %s across %d band(s)",
            liability, taxable_income, len(contributions),
        )
        return liability, contributions
