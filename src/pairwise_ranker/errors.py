"""Exceptions and warnings raised by :mod:`pairwise_ranker`."""

from __future__ import annotations

from typing import Any


class PairwiseRankerError(ValueError):
    """Base class for errors raised by a ranking session."""


class InvalidInput(PairwiseRankerError):
    """Raised when a session cannot be built from the supplied items or config."""


class UnknownItem(PairwiseRankerError):
    """Raised when a comparison names an item that is not part of the session."""

    def __init__(self, item: Any) -> None:
        super().__init__(f"Unknown item submitted in comparison: {item!r}")
        self.item = item


class SameItem(PairwiseRankerError):
    """Raised when an item is compared against itself."""

    def __init__(self, item: Any) -> None:
        super().__init__(f"Winner and loser cannot be the same item: {item!r}")
        self.item = item


class DuplicateItemsWarning(UserWarning):
    """Emitted when duplicate identifiers are collapsed at construction."""
