"""Manual entry adapter for JSON files of W-2 and paystub entries.

Accepted shapes::

    {"tax_year": 2025, "filing_status": "single",
     "w2": [{...}], "paystubs": [{...}]}

or a bare list of entries, each classified by its keys.
"""

import json
import logging
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from fedtax.engines.duplicates import DuplicateDetector
from fedtax.engines.schedule import coerce_filing_status
from fedtax.exceptions import EntryImportError, InvalidEntryError
from fedtax.ingestion.base import BaseAdapter, ImportResult
from fedtax.ingestion.validation import (
    parse_pay_frequency,
    require_valid,
    validate_annual_entry,
    validate_periodic_entry,
)
from fedtax.models.enums import EntryKind
from fedtax.models.income_entries import AnnualEntry, PeriodicEntry

logger = logging.getLogger(__name__)

_ALIASES = {
    "box1_wages": "gross_wages",
    "box2_federal_withheld": "federal_withheld",
    "box3_ss_wages": "social_security_wages",
    "box5_medicare_wages": "medicare_wages",
    "employer_name": "employer_label",
    "label": "employer_label",
    "ytd_fed_withheld": "ytd_federal_withheld",
    "current_fed_withheld": "current_federal_withheld",
    "is_still_employed": "still_employed",
    "projected_paychecks_remaining": "remaining_pay_periods",
}

_ANNUAL_KEYS = {"gross_wages", "federal_withheld"}
_PERIODIC_KEYS = {
    "ytd_taxable_wages",
    "ytd_federal_withheld",
    "current_taxable_wages",
    "current_federal_withheld",
}


class ManualAdapter(BaseAdapter):
    """Imports JSON entry files into typed W-2 and paystub entries."""

    def __init__(self, duplicate_detector: DuplicateDetector | None = None) -> None:
        self.duplicate_detector = duplicate_detector or DuplicateDetector()

    def parse(self, file_path: Path) -> ImportResult:
        """Read a JSON entry file and return typed entries.

        Raises EntryImportError for unreadable files and InvalidEntryError for
        entries that fail validation.
        """
        if not file_path.exists():
            raise EntryImportError(str(file_path), "file not found")
        try:
            text = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise EntryImportError(str(file_path), "file is not UTF-8 text") from exc
        except OSError as exc:
            raise EntryImportError(str(file_path), f"cannot read file ({exc.strerror or exc})") from exc
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise EntryImportError(str(file_path), f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc

        return self.parse_data(raw, source=str(file_path))

    def parse_data(self, raw: dict | list, source: str = "<data>") -> ImportResult:
        result = ImportResult()

        if isinstance(raw, list):
            records = [(None, record) for record in raw]
        elif isinstance(raw, dict):
            records = [(EntryKind.ANNUAL, r) for r in raw.get("w2") or []]
            records += [(EntryKind.PERIODIC, r) for r in raw.get("paystubs") or []]
            if raw.get("tax_year") is not None:
                try:
                    result.tax_year = int(raw["tax_year"])
                except (TypeError, ValueError):
                    raise EntryImportError(source, f"invalid tax_year {raw['tax_year']!r}") from None
            if raw.get("filing_status"):
                try:
                    result.filing_status = coerce_filing_status(raw["filing_status"])
                except ValueError as exc:
                    raise EntryImportError(source, str(exc)) from None
        else:
            raise EntryImportError(source, "expected a JSON object or list of entries")

        for index, (kind, record) in enumerate(records):
            if not isinstance(record, dict):
                raise EntryImportError(source, f"entry {index} is not an object")
            data = _normalize_keys(record)
            kind = kind or _detect_kind(data, source, index)
            entry_id = str(data.get("id") or f"{kind.value.lower()}-{index + 1}")
            data["id"] = entry_id

            if kind is EntryKind.ANNUAL:
                result.annual_entries.append(self._parse_annual(data, result))
            else:
                result.periodic_entries.append(self._parse_periodic(data, result))

        logger.info(
            "Imported %d W-2 and %d paystub entries from %s",
            len(result.annual_entries), len(result.periodic_entries), source,
        )
        return result

    def validate(self, data: ImportResult) -> list[str]:
        """Return advisory warnings for an imported entry set."""
        warnings = list(data.warnings)
        if not data.annual_entries and not data.periodic_entries:
            warnings.append("No W-2 or paystub entries found.")
        report = self.duplicate_detector.detect(data.annual_entries, data.periodic_entries)
        if report.has_potential_duplicates:
            warnings.append(report.warning_message)
        return warnings

    # --- Parsers ---

    def _parse_annual(self, data: dict, result: ImportResult) -> AnnualEntry:
        validation = validate_annual_entry(data)
        require_valid(validation, data["id"])
        result.warnings.extend(f"{data['id']}: {w}" for w in validation.warnings)
        return _build(AnnualEntry, _drop_blank(data))

    def _parse_periodic(self, data: dict, result: ImportResult) -> PeriodicEntry:
        validation = validate_periodic_entry(data)
        require_valid(validation, data["id"])
        result.warnings.extend(f"{data['id']}: {w}" for w in validation.warnings)

        data = _drop_blank(data)
        if "pay_frequency" in data:
            data["pay_frequency"] = parse_pay_frequency(data["pay_frequency"])
        if "pay_date" in data and not isinstance(data["pay_date"], date):
            try:
                data["pay_date"] = date.fromisoformat(str(data["pay_date"]))
            except ValueError:
                data["pay_date"] = None
        return _build(PeriodicEntry, data)


def _normalize_keys(record: dict) -> dict:
    return {_ALIASES.get(key, key): value for key, value in record.items()}


def _drop_blank(data: dict) -> dict:
    return {
        key: value for key, value in data.items()
        if value is not None and not (isinstance(value, str) and not value.strip())
    }


def _detect_kind(data: dict, source: str, index: int) -> EntryKind:
    keys = set(data)
    if keys & _ANNUAL_KEYS:
        return EntryKind.ANNUAL
    if keys & _PERIODIC_KEYS:
        return EntryKind.PERIODIC
    raise EntryImportError(source, f"cannot detect entry type of entry {index} from keys: {sorted(keys)}")


def _build(model, data: dict):
    try:
        return model(**data)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "entry"
        raise InvalidEntryError(data.get("id"), field, first["msg"]) from exc
