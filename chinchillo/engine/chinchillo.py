"""
Chinchillo - Chinchiro Engine

This module implements the rules of Chinchiro, a three-dice gambling game
played here between the user and the computer. All methods are stateless
class methods; the only outside input is randomness, which can be injected.

Hands (strongest first):
    - Pinzoro (1-1-1): 5x
    - Arashi (any other triple): 3x
    - Shigoro (4-5-6): 2x
    - Pair (two equal dice): 1x, the odd die is the point
    - No-Hand (anything else): -1x, may be rolled again
    - Hifumi (1-2-3): -2x

Each side rolls up to a shared cap, stopping at the first roll that is
not No-Hand. Higher multiplier wins; two Arashi compare the triple's face,
two Pairs compare their points.
"""

import logging
import random
from functools import partial
from typing import Callable, Sequence

from chinchillo.engine.base import (
    DICE_PER_ROLL,
    DIE_FACES,
    Hand,
    MatchResult,
    RerollResult,
    RollAttempt,
    RollOutcome,
    Winner,
)
from chinchillo.engine.narration import render_match
from chinchillo.engine.validators import validate_dice_values, validate_roll_count

logger = logging.getLogger(__name__)

# Produces one three-die roll
Roller = Callable[[], Sequence[int]]


class ChinchilloEngine:
    """
    Stateless engine for Chinchiro.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    # Constants
    NUM_DICE = DICE_PER_ROLL
    NUM_FACES = DIE_FACES

    # Fixed patterns
    PINZORO_DICE = (1, 1, 1)
    SHIGORO_DICE = (4, 5, 6)
    HIFUMI_DICE = (1, 2, 3)

    @classmethod
    def roll_dice(cls, rng: random.Random | None = None) -> tuple[int, ...]:
        """
        Roll three D6 dice.

        Args:
            rng: Random source to draw from (default: the global one)

        Returns:
            Three values in 1-6, sorted ascending
        """
        source = rng if rng is not None else random
        return tuple(sorted(source.randint(1, cls.NUM_FACES) for _ in range(cls.NUM_DICE)))

    @classmethod
    def classify(cls, dice: Sequence[int]) -> RollOutcome:
        """
        Determine the hand formed by a three-die roll.

        Order of checks matters: Pinzoro is a triple too, so it is tested
        before Arashi, and pairs are only considered once every fixed
        pattern has been ruled out.

        Args:
            dice: Three die values (sorted here if they are not already)

        Returns:
            RollOutcome with the hand and, for a Pair, its point
        """
        values = validate_dice_values(dice, count=cls.NUM_DICE, faces=cls.NUM_FACES)
        low, mid, high = values

        if values == cls.PINZORO_DICE:
            return RollOutcome(dice=values, hand=Hand.PINZORO)

        if low == mid == high:
            return RollOutcome(dice=values, hand=Hand.ARASHI)

        if values == cls.SHIGORO_DICE:
            return RollOutcome(dice=values, hand=Hand.SHIGORO)

        if values == cls.HIFUMI_DICE:
            return RollOutcome(dice=values, hand=Hand.HIFUMI)

        if low == mid or mid == high:
            unmatched = high if low == mid else low
            return RollOutcome(dice=values, hand=Hand.NORMAL, unmatched_value=unmatched)

        return RollOutcome(dice=values, hand=Hand.NOTHING)

    @classmethod
    def roll_with_rerolls(
        cls,
        max_attempts: int,
        roller: Roller | None = None
    ) -> RerollResult:
        """
        Roll for one side, rerolling only while the result is No-Hand.

        The first roll always happens. Any hand other than No-Hand locks
        in immediately, even with attempts left.

        Args:
            max_attempts: Most rolls the side may take
            roller: Produces one roll (default: roll_dice)

        Returns:
            RerollResult with the last roll and the full history
        """
        roll = roller if roller is not None else cls.roll_dice

        attempt = 1
        result = cls.classify(roll())
        logger.debug("Roll %d: %s -> %s", attempt, result.dice_text, result.hand.label)
        history = [RollAttempt(attempt=attempt, dice=result.dice, hand=result.hand)]

        while attempt < max_attempts and result.hand.allows_reroll:
            attempt += 1
            result = cls.classify(roll())
            logger.debug("Roll %d: %s -> %s", attempt, result.dice_text, result.hand.label)
            history.append(RollAttempt(attempt=attempt, dice=result.dice, hand=result.hand))

        return RerollResult(best_result=result, history=tuple(history))

    @classmethod
    def judge_winner(cls, user: RollOutcome, computer: RollOutcome) -> Winner:
        """
        Compare two final rolls.

        Args:
            user: The user's final roll
            computer: The computer's final roll

        Returns:
            Winner.USER, Winner.COMPUTER, or Winner.TIE
        """
        if user.multiplier > computer.multiplier:
            return Winner.USER
        if user.multiplier < computer.multiplier:
            return Winner.COMPUTER

        if user.hand is Hand.ARASHI and computer.hand is Hand.ARASHI:
            # All three dice of an Arashi share one face
            return cls._compare_values(user.dice[0], computer.dice[0])

        if user.hand is Hand.NORMAL and computer.hand is Hand.NORMAL:
            if user.unmatched_value and computer.unmatched_value:
                return cls._compare_values(user.unmatched_value, computer.unmatched_value)

        return Winner.TIE

    @classmethod
    def _compare_values(cls, user_value: int, computer_value: int) -> Winner:
        if user_value > computer_value:
            return Winner.USER
        if user_value < computer_value:
            return Winner.COMPUTER
        return Winner.TIE

    @classmethod
    def flip_coin(cls, rng: random.Random | None = None) -> bool:
        """Decide whether the user goes first. Affects narration order only."""
        source = rng if rng is not None else random
        return source.random() < 0.5

    @classmethod
    def play(
        cls,
        roll_count: int,
        roller: Roller | None = None,
        user_first: bool | None = None,
        rng: random.Random | None = None
    ) -> MatchResult:
        """
        Play one full match between the user and the computer.

        Both sides share the same roll cap. The user's rolls are always
        drawn before the computer's, whatever the narration order.

        Args:
            roll_count: Most rolls each side may take (at least 1)
            roller: Produces one roll (for testing)
            user_first: Narration order (None = coin flip)
            rng: Random source for dice and coin flip (None = global)

        Returns:
            MatchResult with both sides' rolls, the winner and narration

        Raises:
            ValueError: If roll_count is not an integer of at least 1
        """
        roll_count = validate_roll_count(roll_count)

        if roller is None:
            roller = partial(cls.roll_dice, rng)

        if user_first is None:
            user_first = cls.flip_coin(rng)

        user_roll = cls.roll_with_rerolls(roll_count, roller)
        computer_roll = cls.roll_with_rerolls(roll_count, roller)

        user_result = user_roll.best_result
        computer_result = computer_roll.best_result
        winner = cls.judge_winner(user_result, computer_result)

        logger.info(
            "Match finished: user %s (%s) vs computer %s (%s) -> %s",
            user_result.hand.label,
            user_result.dice_text,
            computer_result.hand.label,
            computer_result.dice_text,
            winner.name,
        )

        description = render_match(
            user_first=user_first,
            user_result=user_result,
            computer_result=computer_result,
            winner=winner,
            user_history=user_roll.history,
            computer_history=computer_roll.history,
        )

        return MatchResult(
            user_first=user_first,
            user_result=user_result,
            computer_result=computer_result,
            winner=winner,
            description=description,
            user_history=user_roll.history,
            computer_history=computer_roll.history,
        )
