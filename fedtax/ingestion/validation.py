"""Field-level validation of raw entry data and scope eligibility checks.

Errors block an entry; warnings are advisory. Runs before entries are turned
into models so that users get every problem with an entry at once.
"""

from datetime import date
from decimal import Decimal, InvalidOperation

from fedtax.engines.brackets import MAX_REASONABLE_WAGES, MAX_REASONABLE_WITHHOLDING_RATE
from fedtax.engines.schedule import ScheduleProvider, coerce_filing_status
from fedtax.exceptions import InvalidEntryError
from fedtax.models.enums import PayFrequency
from fedtax.models.reports import ValidationResult

_OUT_OF_SCOPE_STATUSES = {
    "HEAD_OF_HOUSEHOLD": "Head of Household",
    "HOH": "Head of Household",
    "MARRIED_FILING_SEPARATELY": "Married Filing Separately",
    "MFS": "Married Filing Separately",
    "QUALIFYING_WIDOW": "Qualifying Widow(er)",
    "QUALIFYING_WIDOWER": "Qualifying Widow(er)",
}


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _to_decimal(value) -> Decimal | None:
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None


def _check_amount(data: dict, key: str, label: str, errors: list[str]) -> Decimal | None:
    """Parse an optional amount, recording an error if it is unusable."""
    if _is_blank(data.get(key)):
        return None
    amount = _to_decimal(data[key])
    if amount is None or not amount.is_finite():
        errors.append(f"{label} must be a valid number")
        return None
    if amount < 0:
        errors.append(f"{label} cannot be negative")
        return None
    return amount


def validate_annual_entry(data: dict) -> ValidationResult:
    """Validate a raw W-2 entry."""
    errors: list[str] = []
    warnings: list[str] = []

    if _is_blank(data.get("gross_wages")):
        errors.append("Box 1 (Wages) is required")
    if _is_blank(data.get("federal_withheld")):
        errors.append("Box 2 (Federal income tax withheld) is required")

    wages = _check_amount(data, "gross_wages", "Box 1 (Wages)", errors)
    withheld = _check_amount(data, "federal_withheld", "Box 2 (Federal income tax withheld)", errors)

    if wages is not None and wages > MAX_REASONABLE_WAGES:
        warnings.append(f"Box 1 (Wages) is unusually high: ${wages:,.0f}. Please verify.")
    if wages and withheld is not None:
        rate = withheld / wages
        if rate > MAX_REASONABLE_WITHHOLDING_RATE:
            warnings.append(
                f"Federal withholding ({rate * 100:.0f}%) seems high relative to wages. Please verify."
            )
        if withheld > wages:
            warnings.append("Federal withholding exceeds wages. This is unusual but possible.")

    for key, label in (
        ("social_security_wages", "Box 3 (Social Security wages)"),
        ("medicare_wages", "Box 5 (Medicare wages)"),
    ):
        informational: list[str] = []
        _check_amount(data, key, label, informational)
        if informational:
            warnings.append(f"{label} must be a positive number if provided")

    return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings, field="w2")


def validate_periodic_entry(data: dict) -> ValidationResult:
    """Validate a raw paystub entry."""
    errors: list[str] = []
    warnings: list[str] = []

    if _is_blank(data.get("ytd_taxable_wages")) and _is_blank(data.get("current_taxable_wages")):
        errors.append("Either YTD taxable wages or current period wages is required")
    if _is_blank(data.get("ytd_federal_withheld")) and _is_blank(data.get("current_federal_withheld")):
        errors.append("Either YTD federal tax withheld or current period withheld is required")

    ytd_wages = _check_amount(data, "ytd_taxable_wages", "YTD taxable wages", errors)
    ytd_withheld = _check_amount(data, "ytd_federal_withheld", "YTD federal tax withheld", errors)
    _check_amount(data, "current_taxable_wages", "Current period wages", errors)
    _check_amount(data, "current_federal_withheld", "Current period federal withheld", errors)

    if ytd_wages is not None and ytd_wages > MAX_REASONABLE_WAGES:
        warnings.append(f"YTD taxable wages is unusually high: ${ytd_wages:,.0f}. Please verify.")
    if ytd_wages and ytd_withheld is not None:
        rate = ytd_withheld / ytd_wages
        if rate > MAX_REASONABLE_WITHHOLDING_RATE:
            warnings.append(f"YTD federal withholding ({rate * 100:.0f}%) seems high. Please verify.")

    pay_date = data.get("pay_date")
    if not _is_blank(pay_date) and not isinstance(pay_date, date):
        try:
            date.fromisoformat(str(pay_date))
        except ValueError:
            warnings.append("Pay date is not a valid date")

    frequency = None
    if not _is_blank(data.get("pay_frequency")):
        frequency = parse_pay_frequency(data["pay_frequency"])
        if frequency is None:
            warnings.append("Pay frequency must be weekly, biweekly, semimonthly, or monthly")

    remaining = data.get("remaining_pay_periods")
    if not _is_blank(remaining):
        try:
            remaining = int(remaining)
        except (TypeError, ValueError):
            errors.append("Remaining pay periods must be a whole number")
        else:
            if remaining < 0:
                errors.append("Remaining pay periods cannot be negative")
            elif frequency is not None and remaining > frequency.periods_per_year:
                warnings.append(
                    f"Remaining pay periods ({remaining}) exceeds the "
                    f"{frequency.periods_per_year} {frequency.value.lower()} paychecks in a year. "
                    "Please verify."
                )

    return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings, field="paystub")


def parse_pay_frequency(value) -> PayFrequency | None:
    if isinstance(value, PayFrequency):
        return value
    key = str(value).strip().upper().replace("-", "").replace("_", "").replace(" ", "")
    try:
        return PayFrequency(key)
    except ValueError:
        return None


def validate_tax_year(tax_year, schedule: ScheduleProvider | None = None) -> ValidationResult:
    schedule = schedule or ScheduleProvider()
    supported = schedule.supported_years
    if tax_year in supported:
        return ValidationResult(is_valid=True, field="tax_year")
    return ValidationResult(
        is_valid=False,
        errors=[
            f"Tax year {tax_year} is not currently supported. "
            f"Supported years: {', '.join(str(y) for y in supported)}."
        ],
        field="tax_year",
    )


def validate_filing_status(filing_status) -> ValidationResult:
    if _is_blank(filing_status):
        return ValidationResult(is_valid=False, errors=["Filing status is required"], field="filing_status")
    try:
        coerce_filing_status(filing_status)
        return ValidationResult(is_valid=True, field="filing_status")
    except ValueError:
        pass

    key = str(filing_status).strip().upper().replace(" ", "_").replace("-", "_")
    out_of_scope = _OUT_OF_SCOPE_STATUSES.get(key)
    if out_of_scope:
        message = (
            f"{out_of_scope} filing status is not supported. "
            "Only Single and Married Filing Jointly are supported."
        )
    else:
        message = f"Unknown filing status '{filing_status}'. Please select Single or Married Filing Jointly."
    return ValidationResult(is_valid=False, errors=[message], field="filing_status")


def require_valid(result: ValidationResult, entry_id: str | None = None) -> None:
    """Raise InvalidEntryError carrying every error in ``result``."""
    if not result.is_valid:
        raise InvalidEntryError(entry_id, result.field or "entry", "; ".join(result.errors))
