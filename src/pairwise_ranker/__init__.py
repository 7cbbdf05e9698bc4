"""pairwise_ranker: rank items from one-on-one judgements."""

from importlib.metadata import PackageNotFoundError, version as _v

from .errors import (
    DuplicateItemsWarning,
    InvalidInput,
    PairwiseRankerError,
    SameItem,
    UnknownItem,
)
from .ranker import ItemRecord, Pair, PairwiseRanker, RankerConfig, RankingResult
from .api import load_outcomes, rank, suggest
from .utils import get_logger, set_log_level

try:
    __version__ = _v("pairwise-ranker")
except PackageNotFoundError:  # pragma: no cover - package not installed
    from ._version import __version__

__all__ = [
    "PairwiseRanker",
    "RankerConfig",
    "ItemRecord",
    "Pair",
    "RankingResult",
    "PairwiseRankerError",
    "InvalidInput",
    "UnknownItem",
    "SameItem",
    "DuplicateItemsWarning",
    "rank",
    "suggest",
    "load_outcomes",
    "get_logger",
    "set_log_level",
]
