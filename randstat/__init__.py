"""Weighted random status bytes for simulating unreliable conditions."""

import logging

from randstat.errors import RandStatOverflowError
from randstat.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    set_level,
)
from randstat.random_source import GlobalRandomSource, RandomSource, SeededRandomSource
from randstat.sampler import SLOT_COUNT, RandStat, StatInit

# Silent unless the application opts in via logging_config.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "SLOT_COUNT",
    "GlobalRandomSource",
    "RandStat",
    "RandStatOverflowError",
    "RandomSource",
    "SeededRandomSource",
    "StatInit",
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "set_level",
]
