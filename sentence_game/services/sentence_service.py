"""
Sentence Service

Sources that supply the sentence for a given date. The game engine only
depends on the SentenceSource protocol; the concrete sources here serve the
bundled schedule or a MongoDB collection.
"""

import asyncio
from datetime import datetime
from typing import Dict, List, Optional, Protocol

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from ..config.game_settings import DEFAULT_DIFFICULTY, SENTENCE_SCHEDULE
from ..exceptions import SentenceLoadError, SentenceNotFoundError
from ..models.sentence import SentencePayload
from ..utils.game_logger import game_logger


class SentenceSource(Protocol):
    """Anything that can asynchronously produce the sentence for a date."""

    async def get_sentence(self, date: str) -> SentencePayload:
        """
        Raises:
            SentenceLoadError: If no usable sentence can be produced
        """
        ...


class FileSentenceSource:
    """
    Serves sentences from a dated schedule.

    An exact date match wins. Any other date is mapped onto the schedule by
    its day offset from the first scheduled date, so every date gets a stable
    sentence and the schedule simply repeats.
    """

    def __init__(self, schedule: Optional[List[Dict[str, str]]] = None):
        entries = SENTENCE_SCHEDULE if schedule is None else schedule
        self.schedule = sorted(entries, key=lambda e: e['date'])
        self.by_date = {entry['date']: entry for entry in self.schedule}

    async def get_sentence(self, date: str) -> SentencePayload:
        if not self.schedule:
            raise SentenceNotFoundError(date)

        entry = self.by_date.get(date)
        if entry is None:
            try:
                requested = datetime.strptime(date, '%Y-%m-%d').date()
            except (TypeError, ValueError):
                raise SentenceNotFoundError(date)
            first = datetime.strptime(self.schedule[0]['date'], '%Y-%m-%d').date()
            entry = self.schedule[(requested - first).days % len(self.schedule)]

        return SentencePayload(
            sentence=entry['sentence'],
            difficulty=entry.get('difficulty', DEFAULT_DIFFICULTY),
            date=date
        )


class MongoSentenceSource:
    """Serves sentences stored one document per date in a MongoDB collection."""

    def __init__(self, collection: Collection):
        self.collection = collection

    def _find(self, date: str) -> Optional[dict]:
        return self.collection.find_one({"date": date}, {"_id": 0})

    async def get_sentence(self, date: str) -> SentencePayload:
        try:
            # pymongo blocks, keep the event loop free
            document = await asyncio.to_thread(self._find, date)
        except PyMongoError as e:
            game_logger.logger.error(f"Sentence lookup failed for {date}: {e}")
            raise SentenceLoadError(f"Failed to retrieve sentence for {date}") from e

        if not document or not document.get("sentence"):
            raise SentenceNotFoundError(date)

        return SentencePayload(
            sentence=document["sentence"],
            difficulty=document.get("difficulty") or DEFAULT_DIFFICULTY,
            date=date
        )


# Global source instance
_sentence_source = None


def get_sentence_source() -> Optional[SentenceSource]:
    """Get the global sentence source instance."""
    return _sentence_source


def initialize_sentence_source(kind: str = 'file', collection: Optional[Collection] = None) -> SentenceSource:
    """
    Initialize the global sentence source.

    Args:
        kind: "file" for the bundled schedule, "mongo" for a database collection
        collection: The sentences collection, required when kind is "mongo"

    Raises:
        ValueError: If kind is unknown or a mongo source has no collection
    """
    global _sentence_source
    if kind == 'file':
        _sentence_source = FileSentenceSource()
    elif kind == 'mongo':
        if collection is None:
            raise ValueError("A sentences collection is required for the mongo sentence source")
        _sentence_source = MongoSentenceSource(collection)
    else:
        raise ValueError(f"Unknown sentence source '{kind}'")
    return _sentence_source
