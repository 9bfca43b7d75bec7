"""Exceptions raised by randstat."""

from __future__ import annotations


class RandStatOverflowError(OverflowError):
    """Raised when entries claim more than the table's 100 slots.

    Carries no payload beyond its type. The caller is expected to adjust
    the entry list and construct again.
    """

    def __init__(self) -> None:
        super().__init__("RandStat overflow")
