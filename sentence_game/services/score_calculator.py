"""
Score Calculator

Scoring arithmetic for letter guesses with a compounding streak multiplier.
"""

import math

from ..config.game_settings import (
    BASE_MULTIPLIER, BASE_POINTS_PER_LETTER, INCORRECT_GUESS_PENALTY, MULTIPLIER_GROWTH
)
from ..models.game import ScoreResult


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives (22.5 -> 23)."""
    return int(math.floor(value + 0.5))


class ScoreCalculator:
    """
    Tracks the running score, the streak of consecutive correct guesses and
    the multiplier that applies to the next correct guess.

    Knows nothing about letters or sentences, only counts. Inputs are assumed
    to be validated by the caller; nothing here raises.
    """

    def __init__(self):
        self.current_score = 0
        self.next_multiplier = BASE_MULTIPLIER
        self.consecutive_correct = 0

    def calculate_points(self, letter_instances: int, is_correct: bool) -> ScoreResult:
        """
        Score one guess and update the streak.

        A correct guess earns 10 points per instance times the multiplier built
        up by earlier consecutive correct guesses, then grows the multiplier by
        1.5x. An incorrect guess costs 10 points and resets the streak. The
        running total never drops below zero.

        Args:
            letter_instances: Occurrences of the guessed letter in the sentence
            is_correct: Whether the letter occurs in the sentence

        Returns:
            ScoreResult describing this guess
        """
        if is_correct:
            multiplier_used = self.next_multiplier
            points_earned = round_half_up(BASE_POINTS_PER_LETTER * letter_instances * multiplier_used)

            # Streak advances on correctness alone, even with zero instances
            self.consecutive_correct += 1
            self.next_multiplier = self.next_multiplier * MULTIPLIER_GROWTH
        else:
            multiplier_used = BASE_MULTIPLIER
            points_earned = -INCORRECT_GUESS_PENALTY
            self.reset_streak()

        self.current_score = max(0, self.current_score + points_earned)

        return ScoreResult(
            points_earned=points_earned,
            new_total=self.current_score,
            multiplier_used=multiplier_used,
            letter_instances=letter_instances,
            is_correct=is_correct
        )

    def reset_streak(self) -> None:
        """Drop the multiplier back to 1.0 without touching the score."""
        self.next_multiplier = BASE_MULTIPLIER
        self.consecutive_correct = 0

    def get_current_multiplier(self) -> float:
        return self.next_multiplier

    def get_current_score(self) -> int:
        return self.current_score

    def get_consecutive_correct(self) -> int:
        return self.consecutive_correct

    def set_score(self, score: int) -> None:
        self.current_score = max(0, score)

    def initialize_state(self, score: int = 0, consecutive_correct: int = 0,
                         multiplier: float = BASE_MULTIPLIER) -> None:
        """
        Start fresh or restore a saved session.

        Each value is floored to its minimum so a corrupted snapshot cannot
        produce a negative score, a negative streak or a multiplier below 1.0.
        """
        self.current_score = max(0, score)
        self.consecutive_correct = max(0, consecutive_correct)
        self.next_multiplier = max(BASE_MULTIPLIER, multiplier)
