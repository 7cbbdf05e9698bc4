"""Pure rating helpers used by :class:`pairwise_ranker.ranker.PairwiseRanker`.

The functions here hold no session state so they can be tested and reused
on their own: the logistic expectation behind the rating update, the
saturating confidence curve, min-max normalisation of raw ratings and the
canonical key used to identify an unordered pair.
"""

from __future__ import annotations

from typing import Dict, Hashable, Mapping, Tuple

import numpy as np

INITIAL_RATING = 1200.0
ELO_SCALE = 400.0


def expected_score(rating: float, opponent_rating: float) -> float:
    """Probability that ``rating`` beats ``opponent_rating`` under the Elo model."""

    return 1.0 / (1.0 + 10 ** ((opponent_rating - rating) / ELO_SCALE))


def elo_update(
    winner_rating: float, loser_rating: float, k_factor: float
) -> Tuple[float, float]:
    """Return the new ``(winner, loser)`` ratings after a decisive result."""

    winner_expected = expected_score(winner_rating, loser_rating)
    loser_expected = 1.0 - winner_expected
    return (
        winner_rating + k_factor * (1.0 - winner_expected),
        loser_rating + k_factor * (0.0 - loser_expected),
    )


def confidence_from_comparisons(comparisons: int) -> float:
    """Saturating confidence: 0 with no comparisons, approaching 1."""

    return 1.0 - 1.0 / (1.0 + comparisons)


def min_max_normalise(ratings: Mapping[str, float]) -> Dict[str, float]:
    """Scale ratings onto ``[0, 1]``.

    Every value maps to ``0.5`` when all ratings are equal so callers never
    divide by a zero range.  Input order is preserved in the result.
    """

    if not ratings:
        return {}
    keys = list(ratings)
    values = np.fromiter((ratings[k] for k in keys), dtype=float, count=len(keys))
    low = float(values.min())
    spread = float(values.max()) - low
    if spread <= 0:
        return {k: 0.5 for k in keys}
    scaled = (values - low) / spread
    return {k: float(v) for k, v in zip(keys, scaled)}


def pair_key(a: Hashable, b: Hashable) -> Tuple[Hashable, Hashable]:
    """Order-independent key for the unordered pair ``{a, b}``."""

    return tuple(sorted((a, b)))  # type: ignore[return-value]
