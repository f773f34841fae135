"""
Game Exceptions

Error taxonomy shared by the game core and the services around it.
"""


class GameError(Exception):
    """Base class for every error raised by the game."""


class InvalidInputError(GameError, ValueError):
    """A malformed letter, or a mutating call made before a sentence is loaded."""


class GameProtocolError(GameError):
    """The caller misused the session state machine."""


class DuplicateGuessError(GameProtocolError):
    """The letter has already been guessed in this session."""

    def __init__(self, letter: str):
        super().__init__(f"Letter '{letter}' has already been guessed")
        self.letter = letter


class GameCompleteError(GameProtocolError):
    """The sentence is fully revealed; no further guesses are accepted."""

    def __init__(self):
        super().__init__("Game is already complete")


class SentenceLoadError(GameError):
    """The sentence source failed or returned an unusable sentence."""


class SentenceNotFoundError(SentenceLoadError):
    """The sentence source has no sentence for the requested date."""

    def __init__(self, date: str):
        super().__init__(f"No sentence available for {date}")
        self.date = date


class SessionNotFoundError(GameError):
    """No server-side game session exists for the given id."""

    def __init__(self, session_id: str):
        super().__init__("Game session not found")
        self.session_id = session_id


class InvalidSessionTokenError(GameError):
    """A saved-game token failed verification or carries a malformed snapshot."""
