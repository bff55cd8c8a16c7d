"""Deck implementation."""
import logging
import random
from typing import List, Optional

from .card import Card, Rank, Suit
from .hand import HAND_SIZE, Hand

logger = logging.getLogger(__name__)

DECK_SIZE = 52


class InvalidDeckError(RuntimeError):
    """A deck that is not exactly one of each of the 52 cards."""


class Deck:
    """
    A standard 52 card deck.

    Attributes:
        cards: List of cards in the deck, top of the deck first
    """

    def __init__(self, cards: Optional[List[Card]] = None):
        """
        Initialize a new deck.

        Args:
            cards: Explicit card order; a fresh ordered deck when omitted

        Raises:
            InvalidDeckError: If explicit cards do not form a full deck
        """
        if cards is None:
            self.cards: List[Card] = []
            self._initialize_deck()
        else:
            self.cards = list(cards)
            self.validate()

    def _initialize_deck(self) -> None:
        """Create a fresh deck of cards."""
        for suit in Suit:
            for rank in Rank:
                self.cards.append(Card(rank=rank, suit=suit))

    def validate(self) -> None:
        """
        Check the deck holds each rank and suit pair exactly once.

        Raises:
            InvalidDeckError: If the deck is malformed
        """
        if len(self.cards) != DECK_SIZE:
            raise InvalidDeckError(f"Deck has {len(self.cards)} cards, expected {DECK_SIZE}")
        if len(set(self.cards)) != DECK_SIZE:
            raise InvalidDeckError("Deck contains duplicate cards")

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """
        Shuffle the deck in place.

        Args:
            rng: Random generator to draw from; the module generator if omitted
        """
        (rng or random).shuffle(self.cards)

    def deal_cards(self, count: int) -> List[Card]:
        """
        Deal cards from the top of the deck without removing them.

        Args:
            count: Number of cards to deal

        Returns:
            The first ``count`` cards of the current order
        """
        if count > len(self.cards):
            raise ValueError(f"Cannot deal {count} cards from a deck of {len(self.cards)}")
        return self.cards[:count]

    def get_cards(self) -> List[Card]:
        """Get all cards in the deck."""
        return self.cards.copy()

    @property
    def size(self) -> int:
        """Number of cards in the deck."""
        return len(self.cards)


def new_shuffled_deck(rng: Optional[random.Random] = None) -> Deck:
    """Build a full deck in a uniformly random order."""
    deck = Deck()
    deck.shuffle(rng)
    return deck


def deal_hand(deck: Deck) -> Hand:
    """Deal the first seven cards of ``deck`` as a hand; the rest go unused."""
    return Hand(deck.deal_cards(HAND_SIZE))
