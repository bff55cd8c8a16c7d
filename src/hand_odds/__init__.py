"""Monte Carlo estimates of seven card poker hand categories."""

from hand_odds.core.card import Card, Rank, Suit
from hand_odds.core.deck import Deck, InvalidDeckError, deal_hand, new_shuffled_deck
from hand_odds.core.hand import Hand, InvalidHandError
from hand_odds.evaluation.categories import Category
from hand_odds.evaluation.classifier import classify
from hand_odds.simulation.aggregator import (
    SimulationError,
    SimulationResult,
    WorkerError,
    partition_trials,
    run_simulation,
)
from hand_odds.simulation.tally import Tally
from hand_odds.simulation.trial import TrialEngine

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Deck",
    "InvalidDeckError",
    "deal_hand",
    "new_shuffled_deck",
    "Hand",
    "InvalidHandError",
    "Category",
    "classify",
    "SimulationError",
    "SimulationResult",
    "WorkerError",
    "partition_trials",
    "run_simulation",
    "Tally",
    "TrialEngine",
]
