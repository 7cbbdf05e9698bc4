"""Plotting helpers for ranking sessions."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Tuple, Union

import matplotlib.pyplot as plt
import pandas as pd

if TYPE_CHECKING:  # pragma: no cover
    from ..ranker import PairwiseRanker


def plot_rankings(
    rankings: Union["PairwiseRanker", pd.DataFrame],
    *,
    top_n: Optional[int] = None,
    title: str = "Rankings",
    color: str = "#b22222",
    min_alpha: float = 0.25,
    figsize: Optional[Tuple[float, float]] = None,
    dpi: int = 100,
    save_path: Optional[Union[str, Path]] = None,
) -> plt.Axes:
    """Draw a horizontal bar chart of normalised scores, best item on top.

    Parameters
    ----------
    rankings:
        A :class:`~pairwise_ranker.ranker.PairwiseRanker` or a DataFrame
        shaped like :meth:`PairwiseRanker.rankings_df` (``item``, ``score``,
        ``rank`` and ``confidence`` columns).
    top_n:
        Only plot the ``top_n`` best ranked items.
    min_alpha:
        Opacity used for a bar with zero confidence.  Bars become more opaque
        as confidence grows.
    save_path:
        When given, the figure is written to this path.
    """

    df = rankings if isinstance(rankings, pd.DataFrame) else rankings.rankings_df()
    missing = {"item", "score", "rank", "confidence"} - set(df.columns)
    if missing:
        raise ValueError(f"rankings is missing column(s): {', '.join(sorted(missing))}")
    df = df.sort_values("rank", kind="stable")
    if top_n is not None:
        df = df.head(top_n)
    height = max(2.0, 0.4 * len(df) + 1.0)
    fig, ax = plt.subplots(figsize=figsize or (8.0, height), dpi=dpi)
    positions = list(range(len(df)))
    bars = ax.barh(positions, df["score"].tolist(), color=color)
    for bar, conf in zip(bars, df["confidence"].tolist()):
        bar.set_alpha(min_alpha + (1.0 - min_alpha) * float(conf))
    ax.set_yticks(positions)
    ax.set_yticklabels(df["item"].astype(str).tolist())
    ax.invert_yaxis()
    ax.set_xlim(0, 1.05)
    ax.set_xlabel("Normalised score")
    ax.set_title(title)
    fig.tight_layout()
    if save_path is not None:
        fig.savefig(save_path)
    return ax
