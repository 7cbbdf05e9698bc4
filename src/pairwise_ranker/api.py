"""High level helpers that wrap :class:`~pairwise_ranker.ranker.PairwiseRanker`."""

from __future__ import annotations

import os
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from .ranker import Pair, PairwiseRanker, RankerConfig
from .utils.logging import get_logger

logger = get_logger(__name__)

Outcome = Tuple[str, str]


def _replay(
    items: Sequence[str],
    outcomes: Iterable[Outcome],
    cfg: Optional[RankerConfig],
    config: Dict[str, Any],
) -> PairwiseRanker:
    ranker = PairwiseRanker(items, cfg, **config)
    count = 0
    for winner, loser in outcomes:
        ranker.submit_comparison(winner, loser)
        count += 1
    logger.debug("Replayed %d outcomes (%d accepted)", count, len(ranker.history))
    return ranker


def rank(
    items: Sequence[str],
    outcomes: Iterable[Outcome] = (),
    *,
    cfg: Optional[RankerConfig] = None,
    **config: Any,
) -> pd.DataFrame:
    """Rank ``items`` from recorded ``(winner, loser)`` outcomes.

    Returns the rankings table produced by
    :meth:`PairwiseRanker.rankings_df`.  Keyword arguments are
    :class:`RankerConfig` overrides.

    Example
    -------
    >>> rank(["a", "b", "c"], [("a", "b"), ("b", "c")])  # doctest: +SKIP
    """

    return _replay(items, outcomes, cfg, config).rankings_df()


def suggest(
    items: Sequence[str],
    outcomes: Iterable[Outcome] = (),
    n: int = 10,
    *,
    cfg: Optional[RankerConfig] = None,
    **config: Any,
) -> List[Pair]:
    """Return the next ``n`` pairs worth comparing after replaying ``outcomes``."""

    return _replay(items, outcomes, cfg, config).get_next_matches(n)


def load_outcomes(
    path: str,
    *,
    winner_column: str = "winner",
    loser_column: str = "loser",
) -> List[Outcome]:
    """Read recorded outcomes from a CSV or Excel file.

    Rows with a missing winner or loser are skipped.  Values are read as
    strings so identifiers such as ``"007"`` survive unchanged.
    """

    ext = os.path.splitext(path)[1].lower()
    if ext in {".xlsx", ".xls"}:
        df = pd.read_excel(path, dtype=str)
    else:
        df = pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[""])
    for col in (winner_column, loser_column):
        if col not in df.columns:
            raise ValueError(f"Column '{col}' not found in {path}")
    pairs = df[[winner_column, loser_column]].dropna()
    skipped = len(df) - len(pairs)
    if skipped:
        logger.warning("Skipped %d incomplete outcome rows in %s", skipped, path)
    return [(str(w), str(l)) for w, l in pairs.itertuples(index=False, name=None)]
