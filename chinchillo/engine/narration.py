"""
Chinchillo - Match Narration

Renders the play-by-play text returned to the caller: each side's rolls in
turn order, both final hands, and the outcome line.
"""

from typing import Sequence

from chinchillo.engine.base import Hand, RollAttempt, RollOutcome, Side, Winner


HEADER = "🎲 Chinchillo match start! 🎲"
RESULTS_HEADER = "==== Results ===="

USER_WINS = "🎉 You win!"
COMPUTER_WINS = "😢 The computer wins."
DRAW = "🤝 It's a draw."


def format_multiplier(multiplier: int) -> str:
    """Payout multiplier with an explicit plus sign when positive."""
    sign = "+" if multiplier > 0 else ""
    return f"({sign}{multiplier}x)"


def render_turn(side: Side, history: Sequence[RollAttempt]) -> list[str]:
    """One header line plus one line per roll the side took."""
    lines = [f"==== {side.possessive} turn ===="]
    last = len(history) - 1
    for index, roll in enumerate(history):
        line = f"Roll {roll.attempt}: {roll.dice_text} ... {roll.hand.label}"
        if index < last:
            line += " ... rolling again!"
        else:
            line += " locked in!"
        lines.append(line)
    return lines


def render_hand(side: Side, outcome: RollOutcome) -> str:
    line = f"{side.possessive} hand: {outcome.hand.label} ({outcome.dice_text})"
    # Only a pair has a point, and a falsy one is never shown
    if outcome.hand is Hand.NORMAL and outcome.unmatched_value:
        line += f" (point: {outcome.unmatched_value})"
    return line


def render_outcome(
    winner: Winner,
    user_result: RollOutcome,
    computer_result: RollOutcome
) -> str:
    if winner is Winner.USER:
        return f"{USER_WINS} {format_multiplier(user_result.multiplier)}"
    if winner is Winner.COMPUTER:
        return f"{COMPUTER_WINS} {format_multiplier(computer_result.multiplier)}"
    return DRAW


def render_match(
    user_first: bool,
    user_result: RollOutcome,
    computer_result: RollOutcome,
    winner: Winner,
    user_history: Sequence[RollAttempt],
    computer_history: Sequence[RollAttempt]
) -> str:
    """
    Render the full narration for a finished match.

    Turns are listed in the order decided by the coin flip; the results
    section always lists the user first.

    Args:
        user_first: Whether the user's turn is narrated first
        user_result: The user's final roll
        computer_result: The computer's final roll
        winner: Match outcome
        user_history: Every roll the user took
        computer_history: Every roll the computer took

    Returns:
        Multi-line narration text
    """
    turns = [(Side.USER, user_history), (Side.COMPUTER, computer_history)]
    if not user_first:
        turns.reverse()

    lines = [HEADER, ""]
    for side, history in turns:
        lines.extend(render_turn(side, history))
        lines.append("")

    lines.append(RESULTS_HEADER)
    lines.append(render_hand(Side.USER, user_result))
    lines.append(render_hand(Side.COMPUTER, computer_result))
    lines.append("")
    lines.append(render_outcome(winner, user_result, computer_result))

    return "\n".join(lines)
