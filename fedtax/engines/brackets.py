"""Tax bracket configuration.

Federal ordinary income brackets and standard deductions.
Keyed by tax year and filing status. Never hardcode brackets in computation functions.

2026 values are inflation-adjusted projections until the IRS publishes the
official tables.
"""

from decimal import Decimal

from fedtax.models.enums import FilingStatus

SUPPORTED_TAX_YEARS: list[int] = [2025, 2026]

# ---------------------------------------------------------------------------
# Federal ordinary income brackets: {year: {filing_status: [(upper_bound, rate), ...]}}
# Upper bound is Decimal or None for the top bracket.
# ---------------------------------------------------------------------------
FEDERAL_BRACKETS: dict[int, dict[FilingStatus, list[tuple[Decimal | None, Decimal]]]] = {
    2025: {
        FilingStatus.SINGLE: [
            (Decimal("11600"), Decimal("0.10")),
            (Decimal("47150"), Decimal("0.12")),
            (Decimal("100525"), Decimal("0.22")),
            (Decimal("191950"), Decimal("0.24")),
            (Decimal("243725"), Decimal("0.32")),
            (Decimal("609350"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.MFJ: [
            (Decimal("23200"), Decimal("0.10")),
            (Decimal("94300"), Decimal("0.12")),
            (Decimal("201050"), Decimal("0.22")),
            (Decimal("383900"), Decimal("0.24")),
            (Decimal("487450"), Decimal("0.32")),
            (Decimal("731200"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
    },
    2026: {
        FilingStatus.SINGLE: [
            (Decimal("11900"), Decimal("0.10")),
            (Decimal("48350"), Decimal("0.12")),
            (Decimal("103050"), Decimal("0.22")),
            (Decimal("196750"), Decimal("0.24")),
            (Decimal("249825"), Decimal("0.32")),
            (Decimal("624600"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.MFJ: [
            (Decimal("23800"), Decimal("0.10")),
            (Decimal("96700"), Decimal("0.12")),
            (Decimal("206100"), Decimal("0.22")),
            (Decimal("393500"), Decimal("0.24")),
            (Decimal("499650"), Decimal("0.32")),
            (Decimal("749500"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
    },
}

# ---------------------------------------------------------------------------
# Federal standard deduction
# ---------------------------------------------------------------------------
FEDERAL_STANDARD_DEDUCTION: dict[int, dict[FilingStatus, Decimal]] = {
    2025: {
        FilingStatus.SINGLE: Decimal("15000"),
        FilingStatus.MFJ: Decimal("30000"),
    },
    2026: {
        FilingStatus.SINGLE: Decimal("15400"),
        FilingStatus.MFJ: Decimal("30800"),
    },
}

# ---------------------------------------------------------------------------
# Input sanity limits (soft warnings, never errors)
# ---------------------------------------------------------------------------
MAX_REASONABLE_WAGES = Decimal("10000000")
MAX_REASONABLE_WITHHOLDING_RATE = Decimal("0.50")

# ---------------------------------------------------------------------------
# Presentation text
# ---------------------------------------------------------------------------
DISCLAIMER = (
    "This is an informational estimate only, not tax advice. Results are based on "
    "the Standard Deduction and basic federal tax calculations. For complete tax "
    "preparation, consult a tax professional or use official IRS resources."
)

ASSUMPTIONS: list[str] = [
    "Uses Standard Deduction (no itemization)",
    "Federal income tax only (no state/local)",
    "Single or Married Filing Jointly status only",
    "Does not include tax credits or complex adjustments",
]
