"""
ranker.py
~~~~~~~~~

Session-based engine for ranking a fixed set of items from pairwise
judgements.  A :class:`PairwiseRanker` keeps an Elo style rating per item,
enumerates every unordered pair once at start up and asks the host to
compare whichever uncompared pair is currently most informative.  The host
feeds the winner back through :meth:`PairwiseRanker.submit_comparison` and
reads results with :meth:`PairwiseRanker.get_rankings`.

The engine performs no I/O and keeps no locks.  Hosts that share one
session between threads must serialise access themselves.
"""

from __future__ import annotations

import copy
import math
import warnings
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Set, Tuple

import pandas as pd

from .errors import DuplicateItemsWarning, InvalidInput, SameItem, UnknownItem
from .utils.logging import get_logger
from .utils.scoring import (
    INITIAL_RATING,
    confidence_from_comparisons,
    elo_update,
    min_max_normalise,
    pair_key,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class RankerConfig:
    """Tuning knobs for :class:`PairwiseRanker`.

    Parameters
    ----------
    confidence_threshold:
        The session is complete once every item's confidence reaches this
        value, even if some pairs were never compared.
    low_comparison_weight:
        Flat contribution added to every uncompared candidate pair.
    confidence_weight:
        Weight of ``1 - mean(confidence)`` when scoring a candidate pair, so
        pairs of rarely compared items are preferred.
    proximity_weight:
        Weight of ``1 / (1 + |normalised score gap|)``, so closely matched
        items are preferred.
    k_factor:
        Maximum rating change from a single comparison.
    """

    confidence_threshold: float = 0.9
    low_comparison_weight: float = 0.5
    confidence_weight: float = 0.3
    proximity_weight: float = 0.2
    k_factor: float = 32.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence_threshold <= 1.0:
            raise InvalidInput("confidence_threshold must be between 0 and 1")
        for name in ("low_comparison_weight", "confidence_weight", "proximity_weight"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise InvalidInput(f"{name} must be a finite, non-negative number")
        if not math.isfinite(self.k_factor) or self.k_factor <= 0:
            raise InvalidInput("k_factor must be a finite, positive number")


@dataclass
class ItemRecord:
    """Rating state for one item.  ``confidence`` derives from ``comparisons``."""

    item: str
    score: float = INITIAL_RATING
    comparisons: int = 0

    @property
    def confidence(self) -> float:
        return confidence_from_comparisons(self.comparisons)


class Pair(NamedTuple):
    """Two distinct items proposed for comparison."""

    item_a: str
    item_b: str


@dataclass
class RankingResult:
    item: str
    score: float
    rank: int
    confidence: float


class PairwiseRanker:
    """Rank items by repeatedly comparing two of them.

    Parameters
    ----------
    items:
        Identifiers to rank.  Duplicates are dropped (first occurrence wins)
        and reported through a :class:`DuplicateItemsWarning`.  At least two
        distinct identifiers are required; a bare string is rejected rather
        than split into characters.  The warning goes through :mod:`warnings`,
        so the default filter shows it once per call site.
    cfg:
        Optional :class:`RankerConfig`.  Defaults are used when omitted.
    **overrides:
        Individual :class:`RankerConfig` fields applied on top of ``cfg``,
        e.g. ``PairwiseRanker(items, confidence_threshold=0.5)``.
    """

    def __init__(
        self,
        items: Iterable[str],
        cfg: Optional[RankerConfig] = None,
        **overrides: Any,
    ) -> None:
        if isinstance(items, str):
            raise InvalidInput("items must be a sequence of identifiers, not a single string")
        raw = list(items) if items is not None else []
        unique = list(dict.fromkeys(raw))
        if len(unique) < 2:
            raise InvalidInput("PairwiseRanker requires at least two items.")
        config_fields = {f.name for f in fields(RankerConfig)}
        unexpected = sorted(set(overrides) - config_fields)
        if unexpected:
            raise TypeError(f"Unexpected configuration option(s): {', '.join(unexpected)}")
        self._cfg = replace(cfg or RankerConfig(), **overrides)
        if len(unique) != len(raw):
            warnings.warn(
                "Duplicate items were provided. Duplicates have been removed.",
                DuplicateItemsWarning,
                stacklevel=2,
            )
        self._initial_items: Tuple[str, ...] = tuple(unique)
        self.reset()
        logger.debug(
            "Created ranking session with %d items and %d pairs",
            len(self._initial_items),
            len(self._pairs),
        )

    # ------------------------------------------------------------------
    # Session state
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Discard every comparison and start the session over."""

        self._records: Dict[str, ItemRecord] = {
            item: ItemRecord(item=item) for item in self._initial_items
        }
        self._pairs: List[Pair] = []
        for i, a in enumerate(self._initial_items):
            for b in self._initial_items[i + 1 :]:
                self._pairs.append(Pair(a, b))
        self._compared: Set[Tuple[str, str]] = set()
        self._history: List[Tuple[str, str]] = []
        logger.debug("Session reset")

    @property
    def config(self) -> RankerConfig:
        return self._cfg

    @property
    def items(self) -> List[str]:
        return list(self._initial_items)

    @property
    def history(self) -> List[Tuple[str, str]]:
        """Accepted ``(winner, loser)`` outcomes in submission order."""
        return list(self._history)

    @property
    def total_pairs(self) -> int:
        return len(self._pairs)

    @property
    def remaining_pairs(self) -> int:
        return len(self._pairs) - len(self._compared)

    def get_item(self, item: str) -> ItemRecord:
        """Return a snapshot of the rating record for ``item``."""

        if item not in self._records:
            raise UnknownItem(item)
        return copy.copy(self._records[item])

    def is_compared(self, a: str, b: str) -> bool:
        return pair_key(a, b) in self._compared

    # ------------------------------------------------------------------
    # Rating updates
    # ------------------------------------------------------------------
    def submit_comparison(self, winner: str, loser: str) -> None:
        """Record that ``winner`` beat ``loser``.

        Only the first judgement for a pair counts; submitting the same pair
        again (in either orientation) leaves the session untouched.
        """

        for item in (winner, loser):
            if item not in self._records:
                raise UnknownItem(item)
        if winner == loser:
            raise SameItem(winner)

        key = pair_key(winner, loser)
        if key in self._compared:
            logger.debug("Ignoring repeated comparison %r vs %r", winner, loser)
            return

        was_complete = self.is_session_complete()
        winner_rec = self._records[winner]
        loser_rec = self._records[loser]
        winner_rec.score, loser_rec.score = elo_update(
            winner_rec.score, loser_rec.score, self._cfg.k_factor
        )
        self._compared.add(key)
        self._history.append((winner, loser))
        winner_rec.comparisons += 1
        loser_rec.comparisons += 1
        logger.debug(
            "%r beat %r; ratings now %.2f / %.2f",
            winner,
            loser,
            winner_rec.score,
            loser_rec.score,
        )
        if not was_complete and self.is_session_complete():
            logger.info(
                "Ranking session complete after %d comparisons", len(self._compared)
            )

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------
    def _normalised_scores(self) -> Dict[str, float]:
        return min_max_normalise({k: r.score for k, r in self._records.items()})

    def get_rankings(self) -> List[RankingResult]:
        """Return every item ordered by normalised score, best first.

        Items with equal scores keep the order in which they were first
        supplied to the session.
        """

        normalised = self._normalised_scores()
        results = [
            RankingResult(
                item=item,
                score=normalised[item],
                rank=0,
                confidence=rec.confidence,
            )
            for item, rec in self._records.items()
        ]
        results.sort(key=lambda r: r.score, reverse=True)
        for idx, result in enumerate(results, start=1):
            result.rank = idx
        return results

    def rankings_df(self) -> pd.DataFrame:
        """Return :meth:`get_rankings` as a DataFrame with raw ratings attached."""

        rows = []
        for result in self.get_rankings():
            rec = self._records[result.item]
            rows.append(
                {
                    "item": result.item,
                    "score": result.score,
                    "rank": result.rank,
                    "confidence": result.confidence,
                    "raw_score": rec.score,
                    "comparisons": rec.comparisons,
                }
            )
        return pd.DataFrame(
            rows,
            columns=["item", "score", "rank", "confidence", "raw_score", "comparisons"],
        )

    def is_session_complete(self) -> bool:
        """True once every pair is compared or every item is confident enough."""

        if len(self._compared) == len(self._pairs):
            return True
        threshold = self._cfg.confidence_threshold
        return all(rec.confidence >= threshold for rec in self._records.values())

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------
    def _pair_score(self, pair: Pair, normalised: Dict[str, float]) -> float:
        cfg = self._cfg
        a = self._records[pair.item_a]
        b = self._records[pair.item_b]
        # every candidate is uncompared, so this term is the same for all of them
        comparison_term = cfg.low_comparison_weight
        avg_confidence = (a.confidence + b.confidence) / 2
        confidence_term = cfg.confidence_weight * (1 - avg_confidence)
        gap = abs(normalised[pair.item_a] - normalised[pair.item_b])
        proximity_term = cfg.proximity_weight * (1 / (1 + gap))
        return comparison_term + confidence_term + proximity_term

    def get_next_matches(self, n: int = 10) -> List[Pair]:
        """Return up to ``n`` uncompared pairs, most informative first.

        Pairs with equal scores keep the order in which the pair universe
        was enumerated.  Nothing is returned once the session is complete.
        """

        if n <= 0 or self.is_session_complete():
            return []
        candidates = [p for p in self._pairs if pair_key(*p) not in self._compared]
        if not candidates:
            return []
        normalised = self._normalised_scores()
        scored = [(self._pair_score(p, normalised), p) for p in candidates]
        scored.sort(key=lambda item: item[0], reverse=True)
        return [pair for _, pair in scored[:n]]

    def get_next_match(self) -> Optional[Pair]:
        """Return the single most useful pair, or ``None`` when finished."""

        matches = self.get_next_matches(1)
        return matches[0] if matches else None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(items={len(self._initial_items)}, "
            f"compared={len(self._compared)}/{len(self._pairs)})"
        )
