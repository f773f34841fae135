"""
Sentence Manager

Owns the day's hidden sentence and the set of letters revealed so far.
"""

from typing import Set

from ..config.game_settings import ALPHABET
from ..exceptions import InvalidInputError, SentenceLoadError
from ..models.sentence import SentencePayload
from ..utils.validation import is_valid_letter, is_valid_sentence, normalize_letter
from .sentence_service import SentenceSource


class SentenceManager:
    """
    Content-addressed revelation store for a single sentence.

    Tracks which letters have been revealed and renders the partially
    blanked sentence. Whether a letter has already been *attempted* is not
    its concern; that belongs to the game engine.
    """

    def __init__(self, sentence_source: SentenceSource):
        self.sentence_source = sentence_source
        self.current_sentence = ''
        self.normalized_sentence = ''
        self.difficulty = ''
        self.revealed_letters: Set[str] = set()

    async def load_daily_sentence(self, date: str) -> str:
        """
        Fetch and install the sentence for a date.

        Args:
            date: Game date in YYYY-MM-DD format

        Returns:
            str: The trimmed sentence

        Raises:
            SentenceLoadError: If the source fails or returns an unusable sentence
        """
        payload = await self.sentence_source.get_sentence(date)

        if not isinstance(payload, SentencePayload) or not is_valid_sentence(payload.sentence):
            raise SentenceLoadError(f"Received invalid sentence for {date}")

        self.current_sentence = payload.sentence.strip()
        self.normalized_sentence = self.current_sentence.upper()
        self.difficulty = payload.difficulty
        self.revealed_letters.clear()

        return self.current_sentence

    def is_letter_in_sentence(self, letter: str) -> bool:
        """Case-insensitive membership test; False for bad input or no sentence."""
        if not is_valid_letter(letter) or not self.current_sentence:
            return False
        return letter.upper() in self.normalized_sentence

    def reveal_letter(self, letter: str) -> int:
        """
        Mark a letter as revealed and count its occurrences.

        The letter is recorded even when it does not occur; the count is then 0.

        Raises:
            InvalidInputError: If the letter is malformed or no sentence is loaded
        """
        if not is_valid_letter(letter):
            raise InvalidInputError("Invalid letter provided")

        if not self.current_sentence:
            raise InvalidInputError("No sentence loaded")

        normalized_letter = normalize_letter(letter)
        self.revealed_letters.add(normalized_letter)

        return self.normalized_sentence.count(normalized_letter)

    def get_display_sentence(self) -> str:
        """
        Render the sentence with unrevealed letters replaced by underscores.

        Spaces, punctuation, digits and revealed letters keep their original
        characters, so the result is always as long as the sentence.
        """
        return ''.join(
            '_' if char.upper() in ALPHABET and char.upper() not in self.revealed_letters else char
            for char in self.current_sentence
        )

    def is_complete(self) -> bool:
        """True once every letter of the sentence has been revealed."""
        if not self.current_sentence:
            return False
        return self.get_unique_letters() <= self.revealed_letters

    def get_unique_letters(self) -> Set[str]:
        return {char for char in self.normalized_sentence if char in ALPHABET}

    def get_original_sentence(self) -> str:
        return self.current_sentence

    def get_revealed_letters(self) -> Set[str]:
        return set(self.revealed_letters)

    def get_difficulty(self) -> str:
        return self.difficulty

    def reset(self) -> None:
        self.current_sentence = ''
        self.normalized_sentence = ''
        self.difficulty = ''
        self.revealed_letters.clear()
