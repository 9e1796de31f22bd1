"""Report generation for fedtax."""

from fedtax.reports.estimate_summary import EstimateSummaryGenerator

__all__ = ["EstimateSummaryGenerator"]
