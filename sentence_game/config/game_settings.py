"""
Game Configuration Constants Module

This module defines the scoring rules, sentence rules and the daily sentence
schedule. All game parameters are centralized here to enable easy modification.
"""

import json
import os
import re
from typing import Dict, List, Final

# Scoring rules
BASE_POINTS_PER_LETTER: Final[int] = 10
"""
Points awarded for each instance of a correctly guessed letter, before the
streak multiplier is applied.
"""

INCORRECT_GUESS_PENALTY: Final[int] = 10
"""Points deducted for a letter that does not occur in the sentence."""

MULTIPLIER_GROWTH: Final[float] = 1.5
"""Factor the streak multiplier grows by after every correct guess."""

BASE_MULTIPLIER: Final[float] = 1.0

# Sentence rules
MIN_SENTENCE_LENGTH: Final[int] = 10
MAX_SENTENCE_LENGTH: Final[int] = 200
SENTENCE_ALLOWED_PATTERN: Final[str] = r"[A-Za-z0-9\s\-.,!?'\"()]+"
LETTER_PATTERN: Final[str] = r"[A-Za-z]"
DATE_PATTERN: Final[str] = r"\d{4}-\d{2}-\d{2}"

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

DIFFICULTIES: Final[tuple] = ("easy", "medium", "hard")
DEFAULT_DIFFICULTY: Final[str] = "medium"


def _load_sentence_schedule() -> List[Dict[str, str]]:
    """
    Load the dated sentence schedule from sentences.json.

    Returns:
        List[Dict[str, str]]: Entries with 'date', 'sentence' and 'difficulty'
        keys, ordered by date

    Raises:
        FileNotFoundError: If sentences.json file is not found
        json.JSONDecodeError: If JSON file is malformed
        ValueError: If an entry is missing fields or has a malformed date
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'sentences.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            schedule = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Sentence schedule file not found: {json_file_path}")

    if not isinstance(schedule, list):
        raise ValueError("JSON file must contain an array of sentence entries")

    entries = []
    for index, entry in enumerate(schedule):
        if not isinstance(entry, dict) or 'date' not in entry or 'sentence' not in entry:
            raise ValueError(f"Entry at index {index} must have 'date' and 'sentence' fields")
        if not re.fullmatch(DATE_PATTERN, entry['date']):
            raise ValueError(f"Entry at index {index} has malformed date '{entry['date']}'")
        entries.append({
            'date': entry['date'],
            'sentence': entry['sentence'].strip(),
            'difficulty': entry.get('difficulty', DEFAULT_DIFFICULTY),
        })

    return sorted(entries, key=lambda e: e['date'])


# Daily sentences loaded from JSON file
SENTENCE_SCHEDULE: Final[List[Dict[str, str]]] = _load_sentence_schedule()


def validate_sentence_schedule_integrity(schedule: List[Dict[str, str]] = None) -> bool:
    """
    Validates the integrity and consistency of the sentence schedule.

    This function performs validation to ensure:
    1. Shape validation: every sentence passes the game's sentence rules
    2. Difficulty validation: difficulty is one of easy/medium/hard
    3. Uniqueness validation: no date is scheduled twice

    Returns:
        bool: True if the schedule passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    from ..utils.validation import is_valid_sentence

    if schedule is None:
        schedule = SENTENCE_SCHEDULE

    if not schedule:
        raise ValueError("Sentence schedule cannot be empty")

    for index, entry in enumerate(schedule):
        if not is_valid_sentence(entry['sentence']):
            raise ValueError(f"Sentence at index {index} '{entry['sentence']}' breaks the sentence rules")

        if entry['difficulty'] not in DIFFICULTIES:
            raise ValueError(f"Sentence at index {index} has unknown difficulty '{entry['difficulty']}'")

    dates = [entry['date'] for entry in schedule]
    if len(dates) != len(set(dates)):
        duplicates = sorted({date for date in dates if dates.count(date) > 1})
        raise ValueError(f"Duplicate dates found in sentence schedule: {duplicates}")

    return True


def get_sentence_statistics(schedule: List[Dict[str, str]] = None) -> dict:
    """
    Analyzes the sentence schedule and returns statistics for game balancing.

    Returns:
        dict: Statistical analysis including:
            - total_sentences: Number of scheduled sentences
            - avg_length: Average sentence length in characters
            - avg_unique_letters: Average number of distinct letters to find
            - difficulty_counts: Number of sentences per difficulty
    """
    if schedule is None:
        schedule = SENTENCE_SCHEDULE

    if not schedule:
        return {"error": "Sentence schedule is empty"}

    difficulty_counts = {}
    for entry in schedule:
        difficulty_counts[entry['difficulty']] = difficulty_counts.get(entry['difficulty'], 0) + 1

    unique_letter_counts = [
        len({char for char in entry['sentence'].upper() if char in ALPHABET})
        for entry in schedule
    ]

    return {
        "total_sentences": len(schedule),
        "avg_length": round(sum(len(entry['sentence']) for entry in schedule) / len(schedule), 2),
        "avg_unique_letters": round(sum(unique_letter_counts) / len(schedule), 2),
        "difficulty_counts": difficulty_counts,
        "first_date": schedule[0]['date'],
        "last_date": schedule[-1]['date'],
    }
