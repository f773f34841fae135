"""
Game Engine

Central game state management and rule enforcement for one session. Combines
the ScoreCalculator and the SentenceManager behind a single guess operation.
"""

from typing import Optional, Set

from ..config.game_settings import ALPHABET
from ..exceptions import DuplicateGuessError, GameCompleteError, InvalidInputError
from ..models.game import GameState, GuessResult
from ..utils.helpers import get_today_date_string
from ..utils.validation import is_valid_letter, normalize_letter
from .score_calculator import ScoreCalculator
from .sentence_manager import SentenceManager
from .sentence_service import SentenceSource

STATUS_UNINITIALIZED = 'uninitialized'
STATUS_ACTIVE = 'active'
STATUS_COMPLETE = 'complete'


class GameEngine:
    """
    Owns exactly one session: Uninitialized -> Active -> Complete.

    This class handles:
    - Letter validation and deduplication of guesses
    - Locking out guesses once the sentence is fully revealed
    - Routing every guess through sentence revelation and scoring
    - Snapshotting and restoring the whole session

    The completion flag is cached when completion happens, so is_complete()
    is a cheap query and the lockout does not depend on re-checking the
    sentence.
    """

    def __init__(self, sentence_source: SentenceSource):
        self.score_calculator = ScoreCalculator()
        self.sentence_manager = SentenceManager(sentence_source)
        self.guessed_letters: Set[str] = set()
        self.game_date = ''
        self.is_game_complete = False

    @property
    def status(self) -> str:
        if self.is_game_complete:
            return STATUS_COMPLETE
        if not self.sentence_manager.get_original_sentence():
            return STATUS_UNINITIALIZED
        return STATUS_ACTIVE

    async def initialize_game(self, date: Optional[str] = None) -> None:
        """
        Start a fresh session for a date (today in UTC when omitted).

        Raises:
            SentenceLoadError: If the day's sentence cannot be loaded
        """
        self.game_date = date or get_today_date_string()

        self.score_calculator.initialize_state()
        self.sentence_manager.reset()
        self.guessed_letters.clear()
        self.is_game_complete = False

        await self.sentence_manager.load_daily_sentence(self.game_date)

    def process_guess(self, letter: str) -> GuessResult:
        """
        Apply one letter guess to the session.

        Args:
            letter: A single alphabetic character, either case

        Returns:
            GuessResult with correctness, instance count, score details,
            completion flag and the updated display sentence

        Raises:
            InvalidInputError: If letter is not exactly one alphabetic character
            GameCompleteError: If the sentence is already fully revealed
            DuplicateGuessError: If the letter was guessed before
        """
        if not is_valid_letter(letter):
            raise InvalidInputError("Invalid letter provided")

        if self.is_game_complete:
            raise GameCompleteError()

        normalized_letter = normalize_letter(letter)

        if normalized_letter in self.guessed_letters:
            raise DuplicateGuessError(normalized_letter)

        self.guessed_letters.add(normalized_letter)

        is_correct = self.sentence_manager.is_letter_in_sentence(normalized_letter)
        letter_instances = self.sentence_manager.reveal_letter(normalized_letter) if is_correct else 0

        score_result = self.score_calculator.calculate_points(letter_instances, is_correct)

        self.is_game_complete = self.sentence_manager.is_complete()

        return GuessResult(
            letter=normalized_letter,
            is_correct=is_correct,
            letter_instances=letter_instances,
            score_result=score_result,
            game_complete=self.is_game_complete,
            display_sentence=self.sentence_manager.get_display_sentence()
        )

    def get_game_state(self) -> GameState:
        return GameState(
            current_sentence=self.sentence_manager.get_original_sentence(),
            revealed_letters=self.sentence_manager.get_revealed_letters(),
            guessed_letters=set(self.guessed_letters),
            score=self.score_calculator.get_current_score(),
            streak_multiplier=self.score_calculator.get_current_multiplier(),
            consecutive_correct=self.score_calculator.get_consecutive_correct(),
            is_complete=self.is_game_complete,
            game_date=self.game_date
        )

    async def restore_game_state(self, game_state: GameState) -> None:
        """
        Rebuild a session from a snapshot taken with get_game_state().

        The sentence is reloaded for the snapshot's date and the revealed
        letters are replayed; letters the sentence does not contain are
        skipped. The completion flag is taken from the snapshot as-is, so a
        finished session comes back finished.

        Raises:
            SentenceLoadError: If the sentence for the snapshot date cannot be loaded
        """
        await self.sentence_manager.load_daily_sentence(game_state.game_date)
        self.game_date = game_state.game_date

        for letter in game_state.revealed_letters:
            if self.sentence_manager.is_letter_in_sentence(letter):
                self.sentence_manager.reveal_letter(letter)

        self.score_calculator.initialize_state(
            game_state.score,
            game_state.consecutive_correct,
            game_state.streak_multiplier
        )

        self.guessed_letters = set(game_state.guessed_letters)
        self.is_game_complete = game_state.is_complete

    def reset(self) -> None:
        """Return to Uninitialized without loading a sentence."""
        self.score_calculator.initialize_state()
        self.sentence_manager.reset()
        self.guessed_letters.clear()
        self.is_game_complete = False
        self.game_date = ''

    def is_complete(self) -> bool:
        return self.is_game_complete

    def get_current_score(self) -> int:
        return self.score_calculator.get_current_score()

    def get_display_sentence(self) -> str:
        return self.sentence_manager.get_display_sentence()

    def get_guessed_letters(self) -> Set[str]:
        return set(self.guessed_letters)

    def get_current_multiplier(self) -> float:
        return self.score_calculator.get_current_multiplier()

    def get_consecutive_correct(self) -> int:
        return self.score_calculator.get_consecutive_correct()

    def get_game_date(self) -> str:
        return self.game_date

    def get_difficulty(self) -> str:
        return self.sentence_manager.get_difficulty()

    def has_been_guessed(self, letter: str) -> bool:
        if not is_valid_letter(letter):
            return False
        return letter.upper() in self.guessed_letters

    def get_remaining_letters(self) -> Set[str]:
        return set(ALPHABET) - self.guessed_letters
