"""Custom exceptions for fedtax."""

from fedtax.models.enums import FilingStatus


class TaxComputationError(Exception):
    """Base exception for tax computation errors."""


class UnsupportedScheduleError(TaxComputationError):
    """Raised when a bracket schedule cannot be used for computation."""

    def __init__(self, message: str):
        super().__init__(f"Unsupported schedule: {message}")


class UnsupportedPeriodError(UnsupportedScheduleError):
    """Raised when no schedule exists for a tax year / filing status pair."""

    def __init__(self, tax_year: int, filing_status: FilingStatus | str, supported_years: list[int] | None = None):
        self.tax_year = tax_year
        self.filing_status = filing_status
        self.supported_years = supported_years or []
        message = f"no schedule for tax year {tax_year} / filing status '{filing_status}'"
        if self.supported_years:
            message += f" (supported years: {', '.join(str(y) for y in self.supported_years)})"
        super().__init__(message)


class InvalidEntryError(TaxComputationError):
    """Raised when an income entry or projection input is unusable."""

    def __init__(self, entry_id: str | None, field: str, message: str):
        self.entry_id = entry_id
        self.field = field
        label = f"entry {entry_id}" if entry_id else "entry"
        super().__init__(f"Invalid {label} field '{field}': {message}")


class EntryImportError(TaxComputationError):
    """Raised when an entry file cannot be read."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Import error from {source}: {message}")
