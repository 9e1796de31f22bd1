"""Entry ingestion adapters and input validation."""

from fedtax.ingestion.base import BaseAdapter, ImportResult
from fedtax.ingestion.manual import ManualAdapter

__all__ = ["BaseAdapter", "ImportResult", "ManualAdapter"]
