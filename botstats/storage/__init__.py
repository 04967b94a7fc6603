"""Storage layer for BotStats - SQLite-backed bots and stat readings"""

from botstats.storage.sqlite_store import SQLiteStore
from botstats.storage.models import Bot, Sample, Point, Series

__all__ = [
    "SQLiteStore",
    "Bot",
    "Sample",
    "Point",
    "Series",
]
