"""
Unit Tests for input validation and the bundled sentence schedule.
"""

from datetime import date

import pytest

from sentence_game.config.game_settings import (
    SENTENCE_SCHEDULE, get_sentence_statistics, validate_sentence_schedule_integrity
)
from sentence_game.utils.validation import (
    check_game_date_window, is_valid_game_date, is_valid_letter, is_valid_score, is_valid_sentence,
    normalize_letter, sanitize_player_name
)

TODAY = date(2026, 10, 19)


class TestLetters:
    """Single-letter validation."""

    @pytest.mark.parametrize("value", ['a', 'Z', 'm'])
    def test_valid_letters(self, value):
        assert is_valid_letter(value) is True

    @pytest.mark.parametrize("value", ['', 'ab', '1', '-', ' ', 'ß', None, 3, ['a']])
    def test_invalid_letters(self, value):
        assert is_valid_letter(value) is False

    def test_normalize_uppercases(self):
        assert normalize_letter('q') == 'Q'

    def test_normalize_rejects_bad_input(self):
        with pytest.raises(ValueError):
            normalize_letter('7')


class TestSentences:
    """Sentence shape rules."""

    @pytest.mark.parametrize("value", [
        "Hello World!",
        "Don't count your chickens before they hatch.",
        "  Padded sentence with spaces  ",
        "Is it 3 o'clock (yet)?",
    ])
    def test_valid_sentences(self, value):
        assert is_valid_sentence(value) is True

    @pytest.mark.parametrize("value", [
        "Too short",
        "          ",
        "1234567890",
        "Semi; colons are not allowed",
        "a" * 201,
        None,
    ])
    def test_invalid_sentences(self, value):
        assert is_valid_sentence(value) is False


class TestDatesAndScores:
    """Game dates, scores and player names."""

    @pytest.mark.parametrize("value,expected", [
        ('2026-10-19', True),
        ('2024-02-29', True),
        ('2023-02-29', False),
        ('2026-13-01', False),
        ('26-10-19', False),
        ('2026/10/19', False),
        (None, False),
    ])
    def test_game_dates(self, value, expected):
        assert is_valid_game_date(value) is expected

    @pytest.mark.parametrize("value,expected", [
        (0, True),
        (1000, True),
        (1000000, True),
        (1000001, False),
        (-1, False),
        (12.5, False),
        ('100', False),
        (True, False),
    ])
    def test_scores(self, value, expected):
        assert is_valid_score(value, 1000000) is expected

    def test_sanitize_strips_markup_characters(self):
        assert sanitize_player_name('  <Alice> & "Bob"  ', 50) == 'Alice  Bob'

    def test_sanitize_truncates(self):
        assert sanitize_player_name('x' * 80, 50) == 'x' * 50

    def test_sanitize_non_string(self):
        assert sanitize_player_name(42, 50) == ''


class TestDateWindow:
    """Which dates may be played or fetched."""

    def test_today_is_allowed(self):
        assert check_game_date_window('2026-10-19', TODAY, 365) is None

    def test_recent_past_is_allowed(self):
        assert check_game_date_window('2025-10-19', TODAY, 365) is None

    def test_malformed_date(self):
        assert check_game_date_window('19-10-2026', TODAY, 365) == ('Date must be in YYYY-MM-DD format', 400)

    def test_impossible_date(self):
        assert check_game_date_window('2026-02-30', TODAY, 365) == ('Invalid date provided', 400)

    def test_future_date(self):
        assert check_game_date_window('2026-10-20', TODAY, 365) == ('Cannot access future sentences', 403)

    def test_too_old(self):
        assert check_game_date_window('2025-10-18', TODAY, 365) == ('Date too far in the past', 400)


class TestSentenceSchedule:
    """The bundled sentences.json schedule."""

    def test_bundled_schedule_is_valid(self):
        assert validate_sentence_schedule_integrity() is True

    def test_schedule_is_sorted_by_date(self):
        dates = [entry['date'] for entry in SENTENCE_SCHEDULE]
        assert dates == sorted(dates)

    def test_duplicate_dates_are_rejected(self):
        entry = {'date': '2026-10-01', 'sentence': 'Hello World!', 'difficulty': 'easy'}

        with pytest.raises(ValueError, match="Duplicate dates"):
            validate_sentence_schedule_integrity([entry, dict(entry)])

    def test_unknown_difficulty_is_rejected(self):
        entry = {'date': '2026-10-01', 'sentence': 'Hello World!', 'difficulty': 'extreme'}

        with pytest.raises(ValueError, match="unknown difficulty"):
            validate_sentence_schedule_integrity([entry])

    def test_empty_schedule_is_rejected(self):
        with pytest.raises(ValueError):
            validate_sentence_schedule_integrity([])

    def test_statistics(self):
        stats = get_sentence_statistics([
            {'date': '2026-10-01', 'sentence': 'Hello World!', 'difficulty': 'easy'},
            {'date': '2026-10-02', 'sentence': 'Good morning', 'difficulty': 'medium'},
        ])

        assert stats['total_sentences'] == 2
        assert stats['difficulty_counts'] == {'easy': 1, 'medium': 1}

    def test_statistics_for_empty_schedule(self):
        assert get_sentence_statistics([]) == {"error": "Sentence schedule is empty"}
