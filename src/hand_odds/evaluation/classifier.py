"""
Seven card hand classification.

A hand is reduced to a :class:`HandProfile` (rank frequencies and the ranks
held in each suit) and the category predicates are applied to the profile in
strict priority order. The first predicate that matches decides the category.

Each predicate only answers whether its pattern is present somewhere in the
seven cards; it does not pick the best five cards or compare kickers. Patterns
nest (every full house also contains a pair), which is why evaluation order
matters and is spelled out in ``CATEGORY_PREDICATES``.
"""
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Iterable, Union

from hand_odds.core.card import Card, Rank, Suit
from hand_odds.core.hand import Hand
from hand_odds.evaluation.categories import CATEGORY_PRIORITY, Category

logger = logging.getLogger(__name__)

STRAIGHT_LENGTH = 5
FLUSH_LENGTH = 5
ROYAL_RANKS = frozenset({Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE})

# Value the ace takes when it plays low in A-2-3-4-5.
LOW_ACE = 1


@dataclass(frozen=True)
class HandProfile:
    """
    Summary of a hand used by the category predicates.

    Attributes:
        rank_counts: Number of cards held of each rank
        group_sizes: The rank counts sorted largest first, e.g. (3, 2, 1, 1)
        suit_ranks: Ranks held in each suit present in the hand
    """
    rank_counts: dict[Rank, int]
    group_sizes: tuple[int, ...]
    suit_ranks: dict[Suit, frozenset]

    @classmethod
    def of(cls, cards: Iterable[Card]) -> 'HandProfile':
        rank_counts = Counter()
        suit_ranks: dict[Suit, set] = {}
        for card in cards:
            rank_counts[card.rank] += 1
            suit_ranks.setdefault(card.suit, set()).add(card.rank)
        return cls(
            rank_counts=dict(rank_counts),
            group_sizes=tuple(sorted(rank_counts.values(), reverse=True)),
            suit_ranks={suit: frozenset(ranks) for suit, ranks in suit_ranks.items()},
        )

    def flush_suits(self) -> list[frozenset]:
        """Rank sets of every suit holding at least five cards."""
        return [ranks for ranks in self.suit_ranks.values() if len(ranks) >= FLUSH_LENGTH]


def has_run(ranks: Iterable[int], length: int = STRAIGHT_LENGTH) -> bool:
    """True when ``ranks`` contain ``length`` consecutive values (ace high or low)."""
    values = set(int(r) for r in ranks)
    if Rank.ACE in values:
        values.add(LOW_ACE)
    if len(values) < length:
        return False

    ordered = sorted(values)
    run = 1
    for previous, current in zip(ordered, ordered[1:]):
        run = run + 1 if current == previous + 1 else 1
        if run >= length:
            return True
    return False


def is_royal_flush(profile: HandProfile) -> bool:
    return any(ROYAL_RANKS <= ranks for ranks in profile.flush_suits())


def is_straight_flush(profile: HandProfile) -> bool:
    return any(has_run(ranks) for ranks in profile.flush_suits())


def is_four_of_a_kind(profile: HandProfile) -> bool:
    return profile.group_sizes[0] >= 4


def is_full_house(profile: HandProfile) -> bool:
    # A second set of trips also fills the house.
    sizes = profile.group_sizes
    return sizes[0] >= 3 and len(sizes) > 1 and sizes[1] >= 2


def is_flush(profile: HandProfile) -> bool:
    return bool(profile.flush_suits())


def is_straight(profile: HandProfile) -> bool:
    return has_run(profile.rank_counts)


def is_three_of_a_kind(profile: HandProfile) -> bool:
    return profile.group_sizes[0] >= 3


def is_two_pair(profile: HandProfile) -> bool:
    return sum(1 for size in profile.group_sizes if size >= 2) >= 2


def is_pair(profile: HandProfile) -> bool:
    return profile.group_sizes[0] >= 2


Predicate = Callable[[HandProfile], bool]

PREDICATES: dict[Category, Predicate] = {
    Category.ROYAL_FLUSH: is_royal_flush,
    Category.STRAIGHT_FLUSH: is_straight_flush,
    Category.FOUR_OF_A_KIND: is_four_of_a_kind,
    Category.FULL_HOUSE: is_full_house,
    Category.FLUSH: is_flush,
    Category.STRAIGHT: is_straight,
    Category.THREE_OF_A_KIND: is_three_of_a_kind,
    Category.TWO_PAIR: is_two_pair,
    Category.PAIR: is_pair,
}

# Evaluation order comes from CATEGORY_PRIORITY, strongest first.
# HIGH_CARD has no predicate and is the fallback.
CATEGORY_PREDICATES: tuple[tuple[Category, Predicate], ...] = tuple(
    sorted(PREDICATES.items(), key=lambda item: CATEGORY_PRIORITY[item[0]])
)


def _as_hand(hand: Union[Hand, Iterable[Card]]) -> Hand:
    return hand if isinstance(hand, Hand) else Hand(hand)


def classify(hand: Union[Hand, Iterable[Card]]) -> Category:
    """
    Classify a seven card hand into exactly one category.

    Args:
        hand: A Hand, or any iterable of seven distinct cards

    Returns:
        The highest priority category whose pattern the hand contains

    Raises:
        InvalidHandError: If a plain iterable is not seven distinct cards
    """
    profile = HandProfile.of(_as_hand(hand))
    for category, predicate in CATEGORY_PREDICATES:
        if predicate(profile):
            return category
    return Category.HIGH_CARD


def matching_categories(hand: Union[Hand, Iterable[Card]]) -> list[Category]:
    """
    Every category whose pattern appears in the hand, strongest first.

    Always ends with HIGH_CARD. ``classify`` returns the first element.
    """
    profile = HandProfile.of(_as_hand(hand))
    matches = [category for category, predicate in CATEGORY_PREDICATES if predicate(profile)]
    matches.append(Category.HIGH_CARD)
    return matches
