"""
Chinchillo - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. All classes are immutable (frozen dataclasses or enums) so a
match result can be handed to any caller without defensive copying.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum


DICE_PER_ROLL = 3
DIE_FACES = 6


class Hand(Enum):
    """
    Named hand (role) a three-die roll falls into.

    Members are declared strongest first. Each member carries a display
    label, its Japanese name and a payout multiplier.
    """
    PINZORO = ("Pinzoro", "ピンゾロ", 5)    # 1-1-1
    ARASHI = ("Arashi", "アラシ", 3)        # triple, not 1s
    SHIGORO = ("Shigoro", "シゴロ", 2)      # 4-5-6
    NORMAL = ("Pair", "通常役", 1)          # exactly two equal
    NOTHING = ("No-Hand", "役なし", -1)
    HIFUMI = ("Hifumi", "ヒフミ", -2)       # 1-2-3

    def __init__(self, label: str, japanese_name: str, multiplier: int) -> None:
        self.label = label
        self.japanese_name = japanese_name
        self.multiplier = multiplier

    @property
    def allows_reroll(self) -> bool:
        """Only a roll with no hand may be thrown again."""
        return self is Hand.NOTHING


class Winner(IntEnum):
    """Outcome of a match, numbered the way the tool surface reports it."""
    TIE = 0
    USER = 1
    COMPUTER = 2


class Side(Enum):
    """The two players of a match."""
    USER = "Your"
    COMPUTER = "Computer's"

    @property
    def possessive(self) -> str:
        return self.value


@dataclass(frozen=True)
class RollOutcome:
    """
    A classified three-die roll.

    Attributes:
        dice: Die values, sorted ascending
        hand: The hand the dice form
        unmatched_value: For a Pair, the value of the die outside the pair
    """
    dice: tuple[int, ...]
    hand: Hand
    unmatched_value: int | None = None

    def __post_init__(self) -> None:
        """Validate the dice form a sorted three-die roll."""
        if len(self.dice) != DICE_PER_ROLL:
            raise ValueError(
                f"A roll must have exactly {DICE_PER_ROLL} dice, got {len(self.dice)}."
            )
        for value in self.dice:
            if not (1 <= value <= DIE_FACES):
                raise ValueError(
                    f"Invalid die value {value}. Must be between 1 and {DIE_FACES}."
                )
        if list(self.dice) != sorted(self.dice):
            raise ValueError(f"Dice must be sorted ascending, got {self.dice}.")

    @property
    def multiplier(self) -> int:
        return self.hand.multiplier

    @property
    def dice_text(self) -> str:
        """Dice joined with dashes, e.g. ``2-2-5``."""
        return "-".join(str(value) for value in self.dice)


@dataclass(frozen=True)
class RollAttempt:
    """One entry of a side's roll history."""
    attempt: int
    dice: tuple[int, ...]
    hand: Hand

    @property
    def dice_text(self) -> str:
        return "-".join(str(value) for value in self.dice)


@dataclass(frozen=True)
class RerollResult:
    """
    Final outcome of one side's turn plus every roll it took.

    Attributes:
        best_result: The last roll, which is the one that counts
        history: All rolls in order, one entry per throw
    """
    best_result: RollOutcome
    history: tuple[RollAttempt, ...]

    @property
    def roll_count(self) -> int:
        return len(self.history)


@dataclass(frozen=True)
class MatchResult:
    """
    Complete result of one match between the user and the computer.

    Attributes:
        user_first: Whether the user's turn is narrated first (cosmetic)
        user_result: The user's final roll
        computer_result: The computer's final roll
        winner: Who won, or TIE
        description: Human-readable narration of the whole match
        user_history: Every roll the user took
        computer_history: Every roll the computer took
    """
    user_first: bool
    user_result: RollOutcome
    computer_result: RollOutcome
    winner: Winner
    description: str
    user_history: tuple[RollAttempt, ...]
    computer_history: tuple[RollAttempt, ...]

    def __str__(self) -> str:
        return self.description
