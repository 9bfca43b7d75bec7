"""Empirical frequency reports for a sampler.

Draws a batch of samples and lines the observed frequencies up against the
fractions implied by the sampler's table, as a pandas DataFrame. The frame
can be plotted with ``plot_frequencies`` to eyeball convergence.
"""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

import pandas as pd

from randstat.sampler import SLOT_COUNT, RandStat

logger = logging.getLogger(__name__)

__all__ = [
    "frequency_table",
    "max_deviation",
    "plot_frequencies",
]

VALUE = "value"
SLOTS = "slots"
EXPECTED = "expected"
COUNT = "count"
OBSERVED = "observed"


def frequency_table(sampler: RandStat, n: int) -> pd.DataFrame:
    """Sample ``n`` values and tabulate expected vs observed frequencies.

    Args:
        sampler: The sampler to draw from.
        n: Number of samples. Must be > 0.

    Returns:
        DataFrame with one row per value present in the table, sorted by
        value, with columns ``value``, ``slots``, ``expected`` (slots / 100),
        ``count`` and ``observed`` (count / n).

    Raises:
        ValueError: If n <= 0.
    """
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")

    slots = sampler.slot_counts()
    counts = Counter(sampler.sample_n(n))

    rows = [
        {
            VALUE: value,
            SLOTS: slots.get(value, 0),
            EXPECTED: slots.get(value, 0) / SLOT_COUNT,
            COUNT: counts.get(value, 0),
            OBSERVED: counts.get(value, 0) / n,
        }
        for value in sorted(set(slots) | set(counts))
    ]
    frame = pd.DataFrame(rows, columns=[VALUE, SLOTS, EXPECTED, COUNT, OBSERVED])

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "frequency_table: %d samples over %d distinct values, max deviation %.4f",
            n,
            len(frame),
            max_deviation(frame),
        )
    return frame


def max_deviation(frame: pd.DataFrame) -> float:
    """Largest absolute gap between observed and expected frequency."""
    if frame.empty:
        return 0.0
    return float((frame[OBSERVED] - frame[EXPECTED]).abs().max())


def plot_frequencies(
    frame: pd.DataFrame,
    path: str | Path,
    title: str | None = None,
) -> Path:
    """Write a grouped bar chart of expected vs observed frequencies.

    Args:
        frame: Output of ``frequency_table``.
        path: Destination image file. Parent directories are created.
        title: Optional chart title.

    Returns:
        The path written.
    """
    from matplotlib.figure import Figure

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    labels = [f"0x{value:02X}" for value in frame[VALUE]]
    positions = range(len(labels))
    width = 0.4

    fig = Figure(figsize=(max(6, len(labels) * 0.8), 4))
    ax = fig.subplots()
    ax.bar([p - width / 2 for p in positions], frame[EXPECTED], width, label="expected")
    ax.bar([p + width / 2 for p in positions], frame[OBSERVED], width, label="observed")
    ax.set_xticks(list(positions))
    ax.set_xticklabels(labels)
    ax.set_xlabel("status value")
    ax.set_ylabel("frequency")
    ax.set_title(title or f"{int(frame[COUNT].sum())} samples")
    ax.legend()
    fig.tight_layout()
    fig.savefig(path, dpi=100)

    logger.info("Wrote frequency plot to %s", path)
    return path
