"""
Chinchillo - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from itertools import combinations_with_replacement
from typing import Callable, Sequence

import pytest

from chinchillo.config import get_settings


class ScriptedRoller:
    """Roller that returns pre-set dice in order and counts what it handed out."""

    def __init__(self, rolls: Sequence[Sequence[int]]) -> None:
        self._rolls = [tuple(roll) for roll in rolls]
        self.calls = 0

    def __call__(self) -> tuple[int, ...]:
        if self.calls >= len(self._rolls):
            raise AssertionError(f"Roller exhausted after {self.calls} rolls.")
        roll = self._rolls[self.calls]
        self.calls += 1
        return roll

    @property
    def remaining(self) -> int:
        return len(self._rolls) - self.calls


@pytest.fixture
def scripted_roller() -> Callable[..., ScriptedRoller]:
    """Factory: ``scripted_roller((1, 3, 5), (2, 2, 5))``."""
    def make(*rolls: Sequence[int]) -> ScriptedRoller:
        return ScriptedRoller(rolls)
    return make


@pytest.fixture
def all_sorted_triples() -> list[tuple[int, int, int]]:
    """Every sorted three-die roll (56 of them)."""
    return list(combinations_with_replacement(range(1, 7), 3))


# =============================================================================
# HAND TEST DATA
# =============================================================================

@pytest.fixture
def no_hand_rolls() -> list[tuple[int, ...]]:
    """All-distinct rolls that are neither 1-2-3 nor 4-5-6."""
    return [
        (1, 2, 4),
        (1, 3, 5),
        (1, 4, 6),
        (2, 3, 5),
        (2, 4, 6),
        (3, 4, 6),
    ]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Each test starts without a cached Settings instance."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
