"""Tests for the trial engine."""
import pytest
from hand_odds.core.hand import Hand
from hand_odds.evaluation.categories import Category
from hand_odds.evaluation.classifier import classify
from hand_odds.simulation.trial import TrialEngine


def test_run_trial_deals_and_classifies():
    engine = TrialEngine(seed=1)
    hand, category = engine.run_trial()

    assert isinstance(hand, Hand)
    assert len(hand) == 7
    assert category == classify(hand)


def test_batch_counts_every_trial():
    tally = TrialEngine(seed=2).run_batch(500)
    assert tally.total == 500
    assert set(tally.as_dict()) <= set(Category)


def test_zero_trials():
    assert TrialEngine(seed=3).run_batch(0).total == 0


def test_negative_trials():
    with pytest.raises(ValueError):
        TrialEngine(seed=3).run_batch(-1)


def test_same_seed_same_results():
    assert TrialEngine(seed=42).run_batch(300) == TrialEngine(seed=42).run_batch(300)


def test_engines_do_not_share_state():
    """Interleaving two engines does not change what either one deals."""
    solo = TrialEngine(seed=10)
    expected = [solo.run_trial()[0] for _ in range(20)]

    first = TrialEngine(seed=10)
    other = TrialEngine(seed=11)
    dealt = []
    for _ in range(20):
        dealt.append(first.run_trial()[0])
        other.run_trial()

    assert dealt == expected


def test_batch_keeps_samples():
    tally = TrialEngine(seed=5, sample_limit=3).run_batch(200)
    for category, hands in tally.samples.items():
        assert 1 <= len(hands) <= 3
        assert all(classify(hand) == category for hand in hands)
    assert tally.samples
