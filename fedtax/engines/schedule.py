"""Bracket schedule provider.

Serves standard deductions and bracket bands for a (tax year, filing status)
pair from the tables in ``fedtax.engines.brackets``, or from tables injected by
the caller.
"""

import logging
from decimal import Decimal

from fedtax.engines.brackets import FEDERAL_BRACKETS, FEDERAL_STANDARD_DEDUCTION
from fedtax.exceptions import UnsupportedPeriodError
from fedtax.models.enums import FilingStatus
from fedtax.models.reports import BracketBand

logger = logging.getLogger(__name__)

_STATUS_ALIASES = {
    "SINGLE": FilingStatus.SINGLE,
    "MFJ": FilingStatus.MFJ,
    "MARRIED_FILING_JOINTLY": FilingStatus.MFJ,
    "JOINT": FilingStatus.MFJ,
}


def coerce_filing_status(value: FilingStatus | str) -> FilingStatus:
    """Map a filing status or one of its aliases to ``FilingStatus``.

    Raises ValueError for anything outside the two supported statuses.
    """
    if isinstance(value, FilingStatus):
        return value
    key = str(value).strip().upper().replace(" ", "_").replace("-", "_")
    try:
        return _STATUS_ALIASES[key]
    except KeyError:
        raise ValueError(f"Unsupported filing status: {value!r}") from None


class ScheduleProvider:
    """Looks up deductions and bracket bands by tax year and filing status."""

    def __init__(
        self,
        brackets: dict[int, dict[FilingStatus, list[tuple[Decimal | None, Decimal]]]] | None = None,
        deductions: dict[int, dict[FilingStatus, Decimal]] | None = None,
    ) -> None:
        self._brackets = FEDERAL_BRACKETS if brackets is None else brackets
        self._deductions = FEDERAL_STANDARD_DEDUCTION if deductions is None else deductions

    @property
    def supported_years(self) -> list[int]:
        return sorted(set(self._brackets) & set(self._deductions))

    def is_supported(self, tax_year: int, filing_status: FilingStatus | str) -> bool:
        try:
            status = coerce_filing_status(filing_status)
        except ValueError:
            return False
        return (
            status in self._brackets.get(tax_year, {})
            and status in self._deductions.get(tax_year, {})
        )

    def get_deduction(self, tax_year: int, filing_status: FilingStatus | str) -> Decimal:
        status = self._status(tax_year, filing_status)
        try:
            return self._deductions[tax_year][status]
        except KeyError:
            raise UnsupportedPeriodError(tax_year, status, self.supported_years) from None

    def get_brackets(self, tax_year: int, filing_status: FilingStatus | str) -> list[BracketBand]:
        """Return bracket bands in ascending order with explicit lower bounds."""
        status = self._status(tax_year, filing_status)
        try:
            table = self._brackets[tax_year][status]
        except KeyError:
            raise UnsupportedPeriodError(tax_year, status, self.supported_years) from None

        bands = []
        lower = Decimal("0")
        for upper_bound, rate in table:
            bands.append(BracketBand(rate=rate, lower_bound=lower, upper_bound=upper_bound))
            if upper_bound is not None:
                lower = upper_bound
        logger.debug("Loaded %d bracket bands for %s/%s", len(bands), tax_year, status)
        return bands

    def _status(self, tax_year: int, filing_status: FilingStatus | str) -> FilingStatus:
        try:
            return coerce_filing_status(filing_status)
        except ValueError:
            raise UnsupportedPeriodError(tax_year, filing_status, self.supported_years) from None
