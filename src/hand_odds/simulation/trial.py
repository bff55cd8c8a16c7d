"""Single trial: deal a fresh seven card hand and classify it."""
import logging
import random
from typing import Optional, Tuple

from hand_odds.core.deck import deal_hand, new_shuffled_deck
from hand_odds.core.hand import Hand
from hand_odds.evaluation.categories import Category
from hand_odds.evaluation.classifier import classify
from hand_odds.simulation.tally import Tally

logger = logging.getLogger(__name__)


class TrialEngine:
    """
    Deals and classifies independent random hands.

    Every engine owns its own random generator, so engines running in
    different workers never share state or draw correlated hands.

    Attributes:
        rng: Private random generator
        sample_limit: Example hands to keep per category in returned tallies
    """

    def __init__(self, seed: Optional[int] = None, sample_limit: int = 0):
        """
        Initialize the engine.

        Args:
            seed: Seed for the private generator; fresh OS entropy when None
            sample_limit: Example hands to keep per category
        """
        self.rng = random.Random(seed)
        self.sample_limit = sample_limit

    def run_trial(self) -> Tuple[Hand, Category]:
        """Deal one hand from a freshly shuffled deck and classify it."""
        hand = deal_hand(new_shuffled_deck(self.rng))
        return hand, classify(hand)

    def run_batch(self, trials: int) -> Tally:
        """
        Run ``trials`` trials into a new private tally.

        Args:
            trials: Number of hands to deal

        Returns:
            Tally with exactly ``trials`` recorded hands
        """
        if trials < 0:
            raise ValueError(f"trials must be >= 0, got {trials}")
        tally = Tally(sample_limit=self.sample_limit)
        for _ in range(trials):
            hand, category = self.run_trial()
            tally.record(category, hand)
        return tally
