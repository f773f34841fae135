"""
Game Data Models

Contains all game-related data structures.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Set


@dataclass
class ScoreResult:
    """Outcome of scoring a single guess."""
    points_earned: int
    new_total: int
    multiplier_used: float  # Multiplier applied to this guess, not the next one
    letter_instances: int
    is_correct: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class GuessResult:
    """Everything a consumer needs to render the outcome of one guess."""
    letter: str
    is_correct: bool
    letter_instances: int
    score_result: ScoreResult
    game_complete: bool
    display_sentence: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class GameState:
    """Snapshot of one game session."""
    current_sentence: str = ''
    revealed_letters: Set[str] = field(default_factory=set)
    guessed_letters: Set[str] = field(default_factory=set)
    score: int = 0
    streak_multiplier: float = 1.0  # Applies to the next correct guess
    consecutive_correct: int = 0
    is_complete: bool = False
    game_date: str = ''

    def to_dict(self, include_sentence: bool = True) -> Dict[str, Any]:
        """
        Convert the snapshot into a JSON-compatible dict.

        Letter sets are emitted as sorted lists so equal states serialize
        identically.

        Args:
            include_sentence: Whether to include the full target sentence

        Returns:
            Dict with the snapshot fields
        """
        data = {
            'revealed_letters': sorted(self.revealed_letters),
            'guessed_letters': sorted(self.guessed_letters),
            'score': self.score,
            'streak_multiplier': self.streak_multiplier,
            'consecutive_correct': self.consecutive_correct,
            'is_complete': self.is_complete,
            'game_date': self.game_date,
        }
        if include_sentence:
            data['current_sentence'] = self.current_sentence
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GameState':
        """
        Build a snapshot from a dict produced by to_dict().

        Raises:
            KeyError: If game_date is missing
            TypeError, ValueError: If a field has the wrong type
        """
        return cls(
            current_sentence=str(data.get('current_sentence', '')),
            revealed_letters={str(letter) for letter in data.get('revealed_letters', [])},
            guessed_letters={str(letter) for letter in data.get('guessed_letters', [])},
            score=int(data.get('score', 0)),
            streak_multiplier=float(data.get('streak_multiplier', 1.0)),
            consecutive_correct=int(data.get('consecutive_correct', 0)),
            is_complete=bool(data.get('is_complete', False)),
            game_date=str(data['game_date']),
        )
