"""Detection of W-2 and paystub entries that may describe the same employer.

Advisory only: matches produce a warning and never change aggregation.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from fedtax.models.income_entries import AnnualEntry, PeriodicEntry
from fedtax.models.reports import DuplicateMatch, DuplicateReport

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.6


class SimilarityStrategy(ABC):
    """Scores how alike two normalized employer labels are, from 0 to 1."""

    @abstractmethod
    def score(self, first: str, second: str) -> float:
        ...


class LabelOverlapSimilarity(SimilarityStrategy):
    """Substring containment, falling back to shared-word overlap."""

    CONTAINMENT_SCORE = 0.8
    MIN_WORD_LENGTH = 3

    def score(self, first: str, second: str) -> float:
        if not first or not second:
            return 0.0
        if first in second or second in first:
            return self.CONTAINMENT_SCORE

        words_first = first.split()
        words_second = second.split()
        common = sum(
            1 for word in words_first
            if word in words_second and len(word) >= self.MIN_WORD_LENGTH
        )
        longest = max(len(words_first), len(words_second))
        return common / longest if longest else 0.0


class DuplicateDetector:
    """Compares every labelled W-2 against every labelled paystub."""

    def __init__(
        self,
        strategy: SimilarityStrategy | None = None,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> None:
        self.strategy = strategy or LabelOverlapSimilarity()
        self.threshold = threshold

    def detect(
        self,
        annual_entries: Iterable[AnnualEntry] | None,
        periodic_entries: Iterable[PeriodicEntry] | None,
    ) -> DuplicateReport:
        annual = [e for e in annual_entries or [] if _label(e)]
        periodic = [e for e in periodic_entries or [] if _label(e)]

        matches = []
        for w2 in annual:
            for stub in periodic:
                similarity = self.strategy.score(_label(w2), _label(stub))
                if similarity > self.threshold:
                    matches.append(
                        DuplicateMatch(
                            annual_entry_id=w2.id,
                            periodic_entry_id=stub.id,
                            annual_label=w2.employer_label,
                            periodic_label=stub.employer_label,
                            similarity=similarity,
                        )
                    )

        if not matches:
            return DuplicateReport()

        names = ", ".join(dict.fromkeys(m.annual_label for m in matches))
        logger.warning("Potential W-2/paystub duplicates for: %s", names)
        return DuplicateReport(
            matches=matches,
            warning_message=(
                f'Potential duplicate detected: You have both W-2 and paystub entries for "{names}". '
                "Make sure you're not double-counting income from the same employer."
            ),
        )


def _label(entry: AnnualEntry | PeriodicEntry) -> str:
    return (entry.employer_label or "").strip().lower()
