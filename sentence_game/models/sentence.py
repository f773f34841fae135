"""
Sentence Data Models

Contains the payload exchanged with sentence sources.
"""

from dataclasses import dataclass


@dataclass
class SentencePayload:
    """A day's sentence as returned by a sentence source."""
    sentence: str
    difficulty: str = 'medium'
    date: str = ''
