"""Hand categories and their ranking."""
from enum import Enum
from math import comb


class Category(str, Enum):
    """The ten standard poker hand categories."""
    ROYAL_FLUSH = 'royal_flush'
    STRAIGHT_FLUSH = 'straight_flush'
    FOUR_OF_A_KIND = 'four_of_a_kind'
    FULL_HOUSE = 'full_house'
    FLUSH = 'flush'
    STRAIGHT = 'straight'
    THREE_OF_A_KIND = 'three_of_a_kind'
    TWO_PAIR = 'two_pair'
    PAIR = 'pair'
    HIGH_CARD = 'high_card'

    @property
    def priority(self) -> int:
        """Position in CATEGORY_PRIORITY; 1 is the strongest category."""
        return CATEGORY_PRIORITY[self]

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]

    def beats(self, other: 'Category') -> bool:
        """True when this category ranks strictly above ``other``."""
        return self.priority < other.priority

    @classmethod
    def ranked(cls) -> list['Category']:
        """All categories, strongest first."""
        return sorted(cls, key=lambda c: CATEGORY_PRIORITY[c])


# Lower number wins. This table is the ordering contract; declaration order
# of the enum members is not used anywhere.
CATEGORY_PRIORITY = {
    Category.ROYAL_FLUSH: 1,
    Category.STRAIGHT_FLUSH: 2,
    Category.FOUR_OF_A_KIND: 3,
    Category.FULL_HOUSE: 4,
    Category.FLUSH: 5,
    Category.STRAIGHT: 6,
    Category.THREE_OF_A_KIND: 7,
    Category.TWO_PAIR: 8,
    Category.PAIR: 9,
    Category.HIGH_CARD: 10,
}

DISPLAY_NAMES = {
    Category.ROYAL_FLUSH: 'Royal Flush',
    Category.STRAIGHT_FLUSH: 'Straight Flush',
    Category.FOUR_OF_A_KIND: 'Four of a Kind',
    Category.FULL_HOUSE: 'Full House',
    Category.FLUSH: 'Flush',
    Category.STRAIGHT: 'Straight',
    Category.THREE_OF_A_KIND: 'Three of a Kind',
    Category.TWO_PAIR: 'Two Pair',
    Category.PAIR: 'Pair',
    Category.HIGH_CARD: 'High Card',
}

# Number of 7-card hands (out of C(52, 7)) whose best five cards fall in each
# category, with the ace playing high or low in straights.
TOTAL_SEVEN_CARD_HANDS = comb(52, 7)

SEVEN_CARD_COMBINATIONS = {
    Category.ROYAL_FLUSH: 4_324,
    Category.STRAIGHT_FLUSH: 37_260,
    Category.FOUR_OF_A_KIND: 224_848,
    Category.FULL_HOUSE: 3_473_184,
    Category.FLUSH: 4_047_644,
    Category.STRAIGHT: 6_180_020,
    Category.THREE_OF_A_KIND: 6_461_620,
    Category.TWO_PAIR: 31_433_400,
    Category.PAIR: 58_627_800,
    Category.HIGH_CARD: 23_294_460,
}


def expected_probability(category: Category) -> float:
    """Exact probability that a random 7-card hand falls in ``category``."""
    return SEVEN_CARD_COMBINATIONS[category] / TOTAL_SEVEN_CARD_HANDS
