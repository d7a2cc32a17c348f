"""
Chinchillo Game Engine.

Pure Python game logic with zero transport dependencies.
Handles dice rolling, hand classification, rerolls and match narration.
"""

from chinchillo.engine.base import (
    Hand,
    MatchResult,
    RerollResult,
    RollAttempt,
    RollOutcome,
    Side,
    Winner,
)
from chinchillo.engine.chinchillo import ChinchilloEngine

__all__ = [
    # Data Classes
    "RollOutcome",
    "RollAttempt",
    "RerollResult",
    "MatchResult",
    # Enums
    "Hand",
    "Side",
    "Winner",
    # Engines
    "ChinchilloEngine",
]
