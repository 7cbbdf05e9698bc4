"""Utility helpers for pairwise_ranker."""

from .logging import get_logger, set_log_level
from .scoring import (
    INITIAL_RATING,
    confidence_from_comparisons,
    elo_update,
    expected_score,
    min_max_normalise,
    pair_key,
)

__all__ = [
    "get_logger",
    "set_log_level",
    "INITIAL_RATING",
    "confidence_from_comparisons",
    "elo_update",
    "expected_score",
    "min_max_normalise",
    "pair_key",
]
