"""Coin toss driven by a 50/50 status table.

Half of the slots hold HEADS; the other half are left at the default 0,
which maps to TAILS. Prints 100 tosses followed by the observed split.

Run with RANDSTAT_LOGGING=DEBUG to see the sampler's table being built.
"""

from __future__ import annotations

import argparse
from enum import IntEnum

import randstat
from randstat import RandStat, SeededRandomSource, StatInit
from randstat.analysis import frequency_table


class Coin(IntEnum):
    TAILS = 0
    HEADS = 1

    @classmethod
    def from_status(cls, status: int) -> Coin:
        try:
            return cls(status)
        except ValueError:
            raise ValueError(f"unknown Coin {status}") from None


def positive_int(text: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def make_coin(seed: int | None = None) -> RandStat:
    return RandStat(
        [StatInit(percentage=50, value=Coin.HEADS)],
        random_source=SeededRandomSource(seed),
    )


def toss(n: int, seed: int | None = None) -> list[Coin]:
    """Toss a fair coin ``n`` times."""
    return [Coin.from_status(status) for status in make_coin(seed).sample_n(n)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Toss a coin built from a 50/50 status table.")
    parser.add_argument("--tosses", type=positive_int, default=100)
    parser.add_argument("--seed", type=int, default=None)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    randstat.configure_from_env()

    for result in toss(args.tosses, args.seed):
        print(result.name)

    print()
    print(frequency_table(make_coin(args.seed), args.tosses * 100).to_string(index=False))


if __name__ == "__main__":
    main()
