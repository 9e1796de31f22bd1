"""Base adapter interface for entry ingestion."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from fedtax.models.enums import FilingStatus
from fedtax.models.income_entries import AnnualEntry, PeriodicEntry


@dataclass
class ImportResult:
    """Bundles the output from an adapter's parse method."""

    annual_entries: list[AnnualEntry] = field(default_factory=list)
    periodic_entries: list[PeriodicEntry] = field(default_factory=list)
    tax_year: int | None = None
    filing_status: FilingStatus | None = None
    warnings: list[str] = field(default_factory=list)


class BaseAdapter(ABC):
    """Abstract base class for all ingestion adapters."""

    @abstractmethod
    def parse(self, file_path: Path) -> ImportResult:
        """Parse a file and return an ImportResult with typed entries."""
        ...

    @abstractmethod
    def validate(self, data: ImportResult) -> list[str]:
        """Validate parsed data. Returns a list of warning messages."""
        ...
