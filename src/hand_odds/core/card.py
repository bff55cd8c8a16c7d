"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum, IntEnum


class Suit(Enum):
    """Card suits."""
    CLUBS = 'c'
    DIAMONDS = 'd'
    HEARTS = 'h'
    SPADES = 's'

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Unicode suit symbol, e.g. '♠'."""
        return SUIT_SYMBOLS[self]


class Rank(IntEnum):
    """Card ranks, valued 2-14 (Jack through Ace are 11-14)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        return RANK_CHARS[self]


SUIT_SYMBOLS = {
    Suit.CLUBS: '♣',
    Suit.DIAMONDS: '♦',
    Suit.HEARTS: '♥',
    Suit.SPADES: '♠',
}

RANK_CHARS = {
    Rank.TWO: '2',
    Rank.THREE: '3',
    Rank.FOUR: '4',
    Rank.FIVE: '5',
    Rank.SIX: '6',
    Rank.SEVEN: '7',
    Rank.EIGHT: '8',
    Rank.NINE: '9',
    Rank.TEN: 'T',
    Rank.JACK: 'J',
    Rank.QUEEN: 'Q',
    Rank.KING: 'K',
    Rank.ACE: 'A',
}

_RANK_LOOKUP = {char: rank for rank, char in RANK_CHARS.items()}
_RANK_LOOKUP['10'] = Rank.TEN
_SUIT_LOOKUP = {suit.value: suit for suit in Suit}
_SUIT_LOOKUP.update({symbol: suit for suit, symbol in SUIT_SYMBOLS.items()})


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Cards are immutable values; two cards are equal when rank and suit match.

    Attributes:
        rank: Card rank (2-14)
        suit: Card suit (clubs, diamonds, hearts, spades)
    """
    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        # Accept plain ints for the rank and normalise them to Rank.
        if not isinstance(self.rank, Rank):
            try:
                object.__setattr__(self, 'rank', Rank(self.rank))
            except ValueError:
                raise ValueError(f"Invalid rank: {self.rank!r}")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit!r}")

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        return f"{self.rank}{self.suit}"

    def pretty(self) -> str:
        """String representation with the suit symbol, e.g. 'A♠'."""
        return f"{self.rank}{self.suit.symbol}"

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'As' for Ace of spades. '10' is accepted
                      for the ten and suit symbols ('♠') for the suit letter.

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        if len(card_str) not in (2, 3):
            raise ValueError(f"Invalid card string: {card_str}")

        rank_str, suit_str = card_str[:-1], card_str[-1]
        rank = _RANK_LOOKUP.get(rank_str.upper())
        suit = _SUIT_LOOKUP.get(suit_str.lower())
        if rank is None or suit is None:
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(rank=rank, suit=suit)
