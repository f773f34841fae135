"""
Load the bundled sentence schedule into MongoDB.

Upserts one document per date into the `sentences` collection used when the
server runs with SENTENCE_SOURCE=mongo.

Usage:
    # Preview what would be written
    python populate_sentences.py

    # Write to the configured database
    python populate_sentences.py --commit

    # Write a different schedule file
    python populate_sentences.py --file my_sentences.json --commit
"""

import json
import sys
from pathlib import Path

from pymongo import ASCENDING, UpdateOne
from pymongo.errors import PyMongoError
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from sentence_game.config import Config
from sentence_game.config.game_settings import DEFAULT_DIFFICULTY, SENTENCE_SCHEDULE
from sentence_game.utils.validation import is_valid_game_date, is_valid_sentence


def load_schedule(path=None):
    """Read a schedule file, or fall back to the bundled schedule."""
    if path is None:
        return list(SENTENCE_SCHEDULE)
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def build_operations(schedule):
    """
    Turn schedule entries into upserts keyed by date.

    Returns:
        Tuple of (operations, rejected entries)
    """
    operations = []
    rejected = []
    for entry in schedule:
        game_date = entry.get('date')
        sentence = entry.get('sentence')
        if not is_valid_game_date(game_date) or not is_valid_sentence(sentence):
            rejected.append(entry)
            continue
        operations.append(UpdateOne(
            {"date": game_date},
            {"$set": {
                "date": game_date,
                "sentence": sentence.strip(),
                "difficulty": entry.get('difficulty') or DEFAULT_DIFFICULTY
            }},
            upsert=True
        ))
    return operations, rejected


def populate(mongo_uri, database_name, schedule, commit=False):
    """Write the schedule, or only report it when commit is False."""
    operations, rejected = build_operations(schedule)

    for entry in rejected:
        print(f"✗ Skipping invalid entry: {entry}")

    if not commit:
        print("=" * 60)
        print("DRY RUN MODE - No changes will be written")
        print("Use --commit flag to apply changes")
        print("=" * 60)
        print(f"{len(operations)} sentences would be upserted into {database_name}.sentences")
        return 0

    client = MongoClient(mongo_uri, server_api=ServerApi('1'))
    try:
        collection = client[database_name].sentences
        collection.create_index([("date", ASCENDING)], unique=True)
        if operations:
            result = collection.bulk_write(operations, ordered=False)
            print(f"✓ Upserted {result.upserted_count} new, updated {result.modified_count} existing sentences")
        else:
            print("Nothing to write")
    finally:
        client.close()

    return 0


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Load the daily sentence schedule into MongoDB"
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Schedule JSON file (default: bundled sentence_game/config/sentences.json)"
    )
    parser.add_argument(
        "--mongo-uri",
        default=Config.MONGO_URI,
        help="MongoDB connection string (default: MONGO_URI from the environment)"
    )
    parser.add_argument(
        "--db-name",
        default=Config.MONGO_DB_NAME,
        help=f"Database name (default: {Config.MONGO_DB_NAME})"
    )
    parser.add_argument(
        "--commit",
        action="store_true",
        help="Write changes (default is dry run)"
    )

    args = parser.parse_args()

    if args.commit and not args.mongo_uri:
        print("✗ MongoDB URI not configured, pass --mongo-uri or set MONGO_URI")
        sys.exit(1)

    try:
        schedule = load_schedule(args.file)
    except (OSError, ValueError) as e:
        print(f"✗ Failed to read schedule: {e}")
        sys.exit(1)

    try:
        sys.exit(populate(args.mongo_uri, args.db_name, schedule, commit=args.commit))
    except PyMongoError as e:
        print(f"✗ MongoDB error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
