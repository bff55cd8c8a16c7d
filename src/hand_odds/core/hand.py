"""Seven card hand implementation."""

import logging
from collections import Counter
from typing import Iterable

from .card import Card

logger = logging.getLogger(__name__)

HAND_SIZE = 7


class InvalidHandError(ValueError):
    """Raised when a hand does not hold exactly seven distinct cards."""


class Hand:
    """
    An unordered set of seven cards drawn from a single deck.

    Card order is kept for display but ignored for equality and hashing.

    Attributes:
        cards: Tuple of the seven cards, in the order they were dealt
    """

    __slots__ = ('cards', '_key')

    def __init__(self, cards: Iterable[Card]):
        """
        Initialize a hand.

        Args:
            cards: Exactly seven distinct cards

        Raises:
            InvalidHandError: If the size is wrong or a card repeats
        """
        cards = tuple(cards)
        if len(cards) != HAND_SIZE:
            raise InvalidHandError(f"A hand needs exactly {HAND_SIZE} cards, got {len(cards)}")
        key = frozenset(cards)
        if len(key) != HAND_SIZE:
            dupes = [str(c) for c, n in Counter(cards).items() if n > 1]
            raise InvalidHandError(f"Duplicate cards in hand: {', '.join(dupes)}")
        self.cards = cards
        self._key = key

    def __reduce__(self):
        return (self.__class__, (self.cards,))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __iter__(self):
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    @classmethod
    def from_string(cls, hand_str: str) -> 'Hand':
        """
        Create a Hand from a string representation.

        Args:
            hand_str: Concatenated two character cards (e.g. "AsKsQsJsTs2h3d"),
                      optionally separated by spaces ("As Ks Qs ...").

        Returns:
            Hand instance with the parsed cards

        Raises:
            ValueError: If the string format is invalid
        """
        if ' ' in hand_str.strip():
            card_strings = hand_str.split()
        else:
            if len(hand_str) % 2 != 0:
                raise ValueError(f"Invalid hand string length: {hand_str} (must be multiple of 2)")
            card_strings = [hand_str[i: i + 2] for i in range(0, len(hand_str), 2)]

        cards = []
        for i, card_str in enumerate(card_strings):
            try:
                cards.append(Card.from_string(card_str))
            except ValueError as e:
                raise ValueError(f"Invalid card at position {i + 1} in hand string '{hand_str}': {e}")

        logger.debug(f"Created hand from string '{hand_str}': {[str(c) for c in cards]}")
        return cls(cards)

    def __str__(self) -> str:
        return ' '.join(str(card) for card in self.cards)

    def pretty(self) -> str:
        """Cards with suit symbols, highest rank first."""
        ordered = sorted(self.cards, key=lambda c: (c.rank, c.suit.value), reverse=True)
        return ' '.join(card.pretty() for card in ordered)

    def __repr__(self) -> str:
        return f"Hand('{self}')"
