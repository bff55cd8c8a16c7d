"""Per-category trial counts."""
import logging
from collections import Counter
from typing import Dict, Iterable, List, Mapping, Optional

from hand_odds.core.hand import Hand
from hand_odds.evaluation.categories import Category

logger = logging.getLogger(__name__)


class Tally:
    """
    Count of trials per hand category.

    A tally belongs to one worker while trials run and is only read once the
    worker is done, when it is merged into the run total. Optionally keeps the
    first ``sample_limit`` hands seen in each category.

    Attributes:
        counts: Trials recorded per category
        samples: Example hands per category, at most ``sample_limit`` each
        sample_limit: Maximum number of example hands kept per category
    """

    def __init__(self, counts: Optional[Mapping[Category, int]] = None, sample_limit: int = 0):
        if sample_limit < 0:
            raise ValueError(f"sample_limit must be >= 0, got {sample_limit}")
        self.counts: Counter = Counter()
        self.samples: Dict[Category, List[Hand]] = {}
        self.sample_limit = sample_limit
        if counts:
            for category, count in counts.items():
                self.add(Category(category), count)

    def add(self, category: Category, count: int = 1) -> None:
        """Add ``count`` trials to ``category``."""
        if count < 0:
            raise ValueError(f"Counts cannot be negative: {category.value}={count}")
        if count:
            self.counts[category] += count

    def record(self, category: Category, hand: Optional[Hand] = None) -> None:
        """Record one classified hand."""
        self.counts[category] += 1
        if hand is not None and self.sample_limit:
            kept = self.samples.setdefault(category, [])
            if len(kept) < self.sample_limit:
                kept.append(hand)

    def merge(self, other: 'Tally') -> 'Tally':
        """
        Fold another tally into this one.

        Counts are summed per category. Example hands are appended up to this
        tally's ``sample_limit``.

        Returns:
            self, to allow chaining
        """
        return self.merge_counts(other).merge_samples(other)

    def merge_counts(self, other: 'Tally') -> 'Tally':
        """Sum another tally's counts into this one, leaving samples alone."""
        self.counts.update(other.counts)
        return self

    def merge_samples(self, other: 'Tally') -> 'Tally':
        """Append another tally's example hands up to ``sample_limit``."""
        if self.sample_limit:
            for category, hands in other.samples.items():
                kept = self.samples.setdefault(category, [])
                room = self.sample_limit - len(kept)
                if room > 0:
                    kept.extend(hands[:room])
        return self

    @classmethod
    def merged(cls, tallies: Iterable['Tally'], sample_limit: int = 0) -> 'Tally':
        """Build a new tally holding the sum of ``tallies``."""
        total = cls(sample_limit=sample_limit)
        for tally in tallies:
            total.merge(tally)
        return total

    def __getitem__(self, category: Category) -> int:
        return self.counts.get(category, 0)

    @property
    def total(self) -> int:
        """Number of trials recorded across all categories."""
        return sum(self.counts.values())

    def percentage(self, category: Category) -> float:
        """Share of trials in ``category``, 0-100. Zero for an empty tally."""
        total = self.total
        if not total:
            return 0.0
        return self[category] * 100 / total

    def as_dict(self) -> Dict[Category, int]:
        """Non-zero counts keyed by category."""
        return {category: count for category, count in self.counts.items() if count}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tally):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        body = ', '.join(f"{c.value}={n}" for c, n in sorted(
            self.as_dict().items(), key=lambda item: item[0].priority))
        return f"Tally({body})"
