"""Weighted status sampler over a fixed 100-slot table.

``RandStat`` turns a list of integer percentages into a table of 100 status
bytes. Each sample picks a slot uniformly at random and returns its value,
so a value holding N slots comes back with probability N/100. Typical use is
simulating unreliable conditions such as message loss or corruption.

Example:
    OK, LOST, CORRUPT = 0, 1, 2
    link = RandStat([StatInit(5, LOST), StatInit(1, CORRUPT)])

    for status in link.sample_n(1000):
        ...  # ~94% OK, ~5% LOST, ~1% CORRUPT
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from randstat.errors import RandStatOverflowError
from randstat.logging_config import FIELDS_ATTR
from randstat.random_source import GlobalRandomSource, RandomSource

logger = logging.getLogger(__name__)

__all__ = [
    "SLOT_COUNT",
    "RandStat",
    "StatInit",
]

SLOT_COUNT = 100
MAX_VALUE = 0xFF


@dataclass(frozen=True)
class StatInit:
    """One run of consecutive slots set to a single value.

    Attributes:
        percentage: Number of slots to claim (each slot is 1%).
        value: Status byte written into those slots, 0..255.
    """

    percentage: int
    value: int

    def __post_init__(self) -> None:
        for name in ("percentage", "value"):
            field_value = getattr(self, name)
            if isinstance(field_value, bool) or not isinstance(field_value, int):
                raise TypeError(f"{name} must be an int, got {type(field_value).__name__}")
        if self.percentage < 0:
            raise ValueError(f"percentage must be non-negative, got {self.percentage}")
        if not 0 <= self.value <= MAX_VALUE:
            raise ValueError(f"value must be in [0, {MAX_VALUE}], got {self.value}")


def _as_entry(entry: StatInit | tuple[int, int]) -> StatInit:
    if isinstance(entry, StatInit):
        return entry
    percentage, value = entry
    return StatInit(percentage, value)


def _build_table(entries: Iterable[StatInit | tuple[int, int]]) -> bytes:
    """Fill a fresh table from entries in order.

    Raises:
        RandStatOverflowError: If the entries claim more than SLOT_COUNT slots.
            The partially filled buffer is dropped with the exception.
    """
    cells = bytearray(SLOT_COUNT)
    cursor = 0
    for position, entry in enumerate(map(_as_entry, entries)):
        end = cursor + entry.percentage
        if end > SLOT_COUNT:
            logger.warning(
                "RandStat overflow: entry %d needs %d slots, %d left",
                position,
                entry.percentage,
                SLOT_COUNT - cursor,
                extra={
                    FIELDS_ATTR: {
                        "event": "overflow",
                        "entry": position,
                        "percentage": entry.percentage,
                        "value": int(entry.value),
                        "cursor": cursor,
                        "slots": SLOT_COUNT,
                    }
                },
            )
            raise RandStatOverflowError()
        cells[cursor:end] = bytes((entry.value,)) * entry.percentage
        cursor = end
    return bytes(cells)


class RandStat:
    """Infinite stream of status bytes drawn from a percentage table.

    The table is built once at construction and never changes afterwards,
    so concurrent calls to ``sample()`` are safe whenever the random source
    is.

    Args:
        entries: ``StatInit`` entries (or ``(percentage, value)`` pairs)
            consumed in order. Slots left over stay 0. Defaults to no
            entries, which gives an all-zero table.
        random_source: Source of slot indices. Defaults to the process-wide
            ``random`` generator.

    Raises:
        RandStatOverflowError: If the percentages sum to more than 100.
    """

    def __init__(
        self,
        entries: Iterable[StatInit | tuple[int, int]] = (),
        random_source: RandomSource | None = None,
    ):
        self._cells = _build_table(entries)
        self._random_source = random_source if random_source is not None else GlobalRandomSource()

        if logger.isEnabledFor(logging.DEBUG):
            counts = dict(sorted(self.slot_counts().items()))
            logger.debug(
                "RandStat created: %d distinct values",
                len(counts),
                extra={
                    FIELDS_ATTR: {
                        "event": "created",
                        "slot_counts": counts,
                        "source": repr(self._random_source),
                    }
                },
            )

    @classmethod
    def from_percentages(
        cls,
        percentages: Mapping[int, int],
        random_source: RandomSource | None = None,
    ) -> RandStat:
        """Build from a ``{value: percentage}`` mapping, in insertion order."""
        return cls(
            [StatInit(percentage, value) for value, percentage in percentages.items()],
            random_source=random_source,
        )

    @property
    def table(self) -> bytes:
        """The 100 slot values."""
        return self._cells

    @property
    def random_source(self) -> RandomSource:
        return self._random_source

    def sample(self) -> int:
        """Return the value of one uniformly chosen slot."""
        return self._cells[self._random_source.uniform_index(SLOT_COUNT)]

    def sample_n(self, n: int) -> list[int]:
        """Return ``n`` independent samples.

        Raises:
            ValueError: If n is negative.
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        return [self.sample() for _ in range(n)]

    def slot_counts(self) -> dict[int, int]:
        """Map each value in the table to the number of slots holding it."""
        return dict(Counter(self._cells))

    def probability(self, value: int) -> float:
        """Probability that a single sample returns ``value``."""
        return self.slot_counts().get(value, 0) / SLOT_COUNT

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.sample()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RandStat):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"RandStat({dict(sorted(self.slot_counts().items()))})"
