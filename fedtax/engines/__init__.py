"""Tax computation engines."""

from fedtax.engines.aggregator import EntryAggregator
from fedtax.engines.calculator import ProgressiveTaxCalculator
from fedtax.engines.duplicates import DuplicateDetector
from fedtax.engines.estimator import TaxEstimator
from fedtax.engines.projection import ProjectionCalculator
from fedtax.engines.schedule import ScheduleProvider

__all__ = [
    "DuplicateDetector",
    "EntryAggregator",
    "ProgressiveTaxCalculator",
    "ProjectionCalculator",
    "ScheduleProvider",
    "TaxEstimator",
]
