"""Tests for seven card hand implementation."""
import pickle
import random

import pytest
from hand_odds.core.card import Card, Rank, Suit
from hand_odds.core.hand import Hand, InvalidHandError


@pytest.fixture
def sample_cards():
    """Seven distinct cards."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.KING, Suit.HEARTS),
        Card(Rank.QUEEN, Suit.DIAMONDS),
        Card(Rank.JACK, Suit.CLUBS),
        Card(Rank.NINE, Suit.SPADES),
        Card(Rank.FIVE, Suit.HEARTS),
        Card(Rank.TWO, Suit.DIAMONDS),
    ]


def test_hand_initialization(sample_cards):
    hand = Hand(sample_cards)
    assert len(hand) == 7
    assert list(hand) == sample_cards


@pytest.mark.parametrize("count", [0, 5, 6, 8])
def test_hand_requires_seven_cards(count):
    cards = [Card(rank, Suit.CLUBS) for rank in list(Rank)[:count]]
    with pytest.raises(InvalidHandError):
        Hand(cards)


def test_hand_rejects_duplicates(sample_cards):
    cards = sample_cards[:6] + [sample_cards[0]]
    with pytest.raises(InvalidHandError, match="As"):
        Hand(cards)


def test_invalid_hand_error_is_value_error():
    assert issubclass(InvalidHandError, ValueError)


def test_hand_equality_ignores_order(sample_cards):
    shuffled = sample_cards.copy()
    random.Random(5).shuffle(shuffled)

    assert Hand(sample_cards) == Hand(shuffled)
    assert hash(Hand(sample_cards)) == hash(Hand(shuffled))


def test_hand_from_string():
    hand = Hand.from_string("AsKsQsJsTs2h3d")
    assert hand == Hand([
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.KING, Suit.SPADES),
        Card(Rank.QUEEN, Suit.SPADES),
        Card(Rank.JACK, Suit.SPADES),
        Card(Rank.TEN, Suit.SPADES),
        Card(Rank.TWO, Suit.HEARTS),
        Card(Rank.THREE, Suit.DIAMONDS),
    ])


def test_hand_from_string_with_spaces():
    assert Hand.from_string("As Ks Qs Js 10s 2h 3d") == Hand.from_string("AsKsQsJsTs2h3d")


@pytest.mark.parametrize("hand_str", [
    "AsKsQsJsTs2h3",    # odd length
    "AsKsQsJsTs2hXd",   # bad card
    "AsKsQsJsTs2h",     # six cards
])
def test_hand_from_string_invalid(hand_str):
    with pytest.raises(ValueError):
        Hand.from_string(hand_str)


def test_hand_string_forms(sample_cards):
    hand = Hand(sample_cards)
    assert str(hand) == "As Kh Qd Jc 9s 5h 2d"
    assert hand.pretty() == "A♠ K♥ Q♦ J♣ 9♠ 5♥ 2♦"
    assert repr(hand) == "Hand('As Kh Qd Jc 9s 5h 2d')"


def test_hand_pickles(sample_cards):
    hand = Hand(sample_cards)
    restored = pickle.loads(pickle.dumps(hand))
    assert restored == hand
    assert restored.cards == hand.cards
