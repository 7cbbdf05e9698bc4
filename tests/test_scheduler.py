import itertools

import pytest

from pairwise_ranker import Pair, PairwiseRanker


def test_next_match_has_both_items():
    ranker = PairwiseRanker(["A", "B", "C"])
    match = ranker.get_next_match()
    assert isinstance(match, Pair)
    assert match.item_a in {"A", "B", "C"}
    assert match.item_b in {"A", "B", "C"}
    assert match.item_a != match.item_b


def test_fresh_session_follows_enumeration_order():
    ranker = PairwiseRanker(["A", "B", "C", "D"])
    assert ranker.get_next_matches() == [
        Pair("A", "B"),
        Pair("A", "C"),
        Pair("A", "D"),
        Pair("B", "C"),
        Pair("B", "D"),
        Pair("C", "D"),
    ]


def test_prefers_unplayed_close_items():
    ranker = PairwiseRanker(["A", "B", "C", "D"])
    ranker.submit_comparison("A", "B")
    assert ranker.get_next_match() == Pair("C", "D")


def test_ties_keep_universe_order_and_orientation():
    ranker = PairwiseRanker(["A", "B", "C"])
    ranker.submit_comparison("B", "A")
    # (A, C) and (B, C) score identically
    assert ranker.get_next_matches(5) == [Pair("A", "C"), Pair("B", "C")]


def test_limits_and_excludes_compared_pairs():
    items = ["a", "b", "c", "d", "e"]
    ranker = PairwiseRanker(items)
    assert len(ranker.get_next_matches(3)) == 3
    assert len(ranker.get_next_matches()) == 10
    assert len(ranker.get_next_matches(50)) == 10
    assert ranker.get_next_matches(0) == []

    ranker.submit_comparison("a", "b")
    ranker.submit_comparison("d", "c")
    matches = ranker.get_next_matches(50)
    assert len(matches) == 8
    for pair in matches:
        assert not ranker.is_compared(*pair)


def test_empty_once_complete():
    ranker = PairwiseRanker(["A", "B", "C"])
    for a, b in itertools.combinations(["A", "B", "C"], 2):
        assert ranker.get_next_match() is not None
        ranker.submit_comparison(a, b)
    assert ranker.is_session_complete()
    assert ranker.get_next_matches() == []
    assert ranker.get_next_match() is None


def test_driving_the_session_with_the_scheduler_terminates():
    items = list("abcdef")
    strength = {item: i for i, item in enumerate(items)}
    ranker = PairwiseRanker(items)
    steps = 0
    while not ranker.is_session_complete():
        pair = ranker.get_next_match()
        winner, loser = sorted(pair, key=strength.get, reverse=True)
        ranker.submit_comparison(winner, loser)
        steps += 1
    assert steps == ranker.total_pairs
    assert ranker.get_item("f").score > 1200
    assert ranker.get_item("a").score < 1200


def test_low_comparison_weight_does_not_change_order():
    items = ["A", "B", "C", "D"]
    plain = PairwiseRanker(items, low_comparison_weight=0.0)
    heavy = PairwiseRanker(items, low_comparison_weight=5.0)
    for ranker in (plain, heavy):
        ranker.submit_comparison("A", "B")
        ranker.submit_comparison("C", "A")
    assert plain.get_next_matches() == heavy.get_next_matches()


@pytest.mark.parametrize("weights", [(0.0, 1.0, 0.0), (0.0, 0.0, 1.0)])
def test_single_weight_sessions_still_schedule(weights):
    low, conf, prox = weights
    ranker = PairwiseRanker(
        ["A", "B", "C", "D"],
        low_comparison_weight=low,
        confidence_weight=conf,
        proximity_weight=prox,
    )
    ranker.submit_comparison("A", "B")
    assert ranker.get_next_match() == Pair("C", "D")


def test_default_returns_ten_pairs():
    ranker = PairwiseRanker(list("abcdef"))
    assert ranker.total_pairs == 15
    matches = ranker.get_next_matches()
    assert len(matches) == 10
    assert matches == ranker.get_next_matches(10)
    assert len(ranker.get_next_matches(15)) == 15
