"""
Shared pytest fixtures for randstat tests.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

import pytest


class ScriptedRandomSource:
    """Returns a fixed sequence of indices, cycling when exhausted."""

    def __init__(self, indices: Iterable[int]):
        self._indices = list(indices)
        self._position = 0
        self.bounds: list[int] = []

    def uniform_index(self, bound: int) -> int:
        self.bounds.append(bound)
        index = self._indices[self._position % len(self._indices)]
        self._position += 1
        return index


@pytest.fixture
def scripted_source():
    """Factory for ScriptedRandomSource instances."""
    return ScriptedRandomSource


@pytest.fixture(scope="session")
def test_output_root() -> Path:
    """
    Returns the root test_output directory. Created once per test session.
    Files here persist after tests complete for easy access.
    """
    output_dir = Path(__file__).parent.parent / "test_output"
    output_dir.mkdir(exist_ok=True)
    return output_dir


@pytest.fixture
def test_output_dir(request, test_output_root) -> Path:
    """
    Returns a directory for the current test to write output files.
    Directory structure: test_output/<module_name>/<test_name>/
    """
    module_name = request.module.__name__.split(".")[-1]
    test_dir = test_output_root / module_name / request.node.name
    test_dir.mkdir(parents=True, exist_ok=True)
    return test_dir


@pytest.fixture(autouse=True)
def reset_randstat_logging():
    """Give every test a clean randstat logger: only a NullHandler, level NOTSET."""
    logger = logging.getLogger("randstat")

    def reset():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    reset()
    yield
    reset()
