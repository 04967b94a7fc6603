"""
SQLite storage implementation for BotStats
Holds registered bots and their periodic stat readings
"""

import sqlite3
import time
from contextlib import contextmanager
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from botstats.core.exceptions import DuplicateBot, MalformedSample
from botstats.core.stats import StatName, validate_stat_name
from botstats.storage.models import Bot, Sample
from botstats.utils.logger import get_logger


logger = get_logger(__name__)


SCHEMA = """
CREATE TABLE IF NOT EXISTS bots (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL UNIQUE
);

CREATE TABLE IF NOT EXISTS stats (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    bot_id INTEGER NOT NULL REFERENCES bots(id) ON DELETE CASCADE,
    created_at TEXT NOT NULL,
    active_members INTEGER NOT NULL DEFAULT 0,
    total_members INTEGER NOT NULL DEFAULT 0,
    members_online INTEGER NOT NULL DEFAULT 0,
    guests_online INTEGER NOT NULL DEFAULT 0,
    total_online INTEGER NOT NULL DEFAULT 0,
    total_threads INTEGER NOT NULL DEFAULT 0,
    total_posts INTEGER NOT NULL DEFAULT 0
);

CREATE INDEX IF NOT EXISTS idx_stats_bot_created ON stats(bot_id, created_at);
"""

# Every stat column is fetched; the requested one is picked by key afterwards
SELECT_SAMPLES = """
    SELECT created_at, active_members, total_members, members_online,
           guests_online, total_online, total_threads, total_posts
    FROM stats
    WHERE bot_id = ?
    ORDER BY created_at, id
"""

INSERT_STATS = """
    INSERT INTO stats (
        bot_id, created_at, active_members, total_members, members_online,
        guests_online, total_online, total_threads, total_posts
    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
"""


def format_timestamp(value: datetime) -> str:
    """Render a datetime as stored UTC text; naive values are taken as UTC"""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    # isoformat zero-pads the year, so text order matches time order
    return value.isoformat(sep=" ", timespec="seconds")


def parse_timestamp(value: str) -> datetime:
    """Parse stored UTC text back into a naive datetime"""
    return datetime.fromisoformat(value)


class SQLiteStore:
    """SQLite-based storage for bots and their stats"""

    def __init__(self, db_path: Union[str, Path]):
        """
        Initialize SQLite storage

        Args:
            db_path: Path to SQLite database file, created if missing
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_database()

    def _init_database(self):
        """Create tables and indexes if they do not exist yet"""
        with self._connection() as conn:
            conn.executescript(SCHEMA)
            conn.commit()
        logger.debug(f"Database schema ensured at {self.db_path}")

    @contextmanager
    def _connection(self):
        """Context manager for database connections"""
        max_retries = 5
        retry_delay = 0.1

        for attempt in range(max_retries):
            try:
                conn = sqlite3.connect(self.db_path, timeout=30.0)
            except sqlite3.OperationalError as e:
                if "unable to open database file" in str(e) and attempt < max_retries - 1:
                    logger.debug(f"Database connection attempt {attempt + 1} failed, retrying...")
                    time.sleep(retry_delay)
                    retry_delay *= 2
                    continue
                raise

            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA foreign_keys=ON")
            try:
                yield conn
            finally:
                conn.close()
            return

    # Bot Operations
    def insert_bot(self, name: str) -> Bot:
        """
        Register a bot under a unique display name

        Raises:
            DuplicateBot: If the name is already taken
        """
        with self._connection() as conn:
            try:
                cursor = conn.execute("INSERT INTO bots (name) VALUES (?)", (name,))
            except sqlite3.IntegrityError as e:
                raise DuplicateBot(name) from e
            conn.commit()
            bot = Bot(id=cursor.lastrowid, name=name)

        logger.info(f"Registered bot {name!r} with id {bot.id}")
        return bot

    def get_bot(self, bot_id: int) -> Optional[Bot]:
        """Look up a bot by id"""
        with self._connection() as conn:
            row = conn.execute(
                "SELECT id, name FROM bots WHERE id = ?", (bot_id,)
            ).fetchone()
        return Bot(id=row["id"], name=row["name"]) if row else None

    def get_bot_by_name(self, name: str) -> Optional[Bot]:
        """Look up a bot by display name"""
        with self._connection() as conn:
            row = conn.execute(
                "SELECT id, name FROM bots WHERE name = ?", (name,)
            ).fetchone()
        return Bot(id=row["id"], name=row["name"]) if row else None

    def list_bots(self) -> List[Bot]:
        """All registered bots, ordered by id"""
        with self._connection() as conn:
            rows = conn.execute("SELECT id, name FROM bots ORDER BY id").fetchall()
        return [Bot(id=row["id"], name=row["name"]) for row in rows]

    # Stats Operations
    def insert_stats(
        self, bot_id: int, created_at: Optional[datetime] = None, **values: int
    ) -> int:
        """
        Insert one stats row for a bot

        Args:
            bot_id: Owning bot id
            created_at: Reading time (defaults to now, UTC)
            **values: Stat readings keyed by stat name; missing stats are stored as 0

        Returns:
            Row id of the inserted record

        Raises:
            InvalidStatName: If a keyword is not a known stat name
        """
        readings = {validate_stat_name(name): int(value) for name, value in values.items()}
        if created_at is None:
            created_at = datetime.now(timezone.utc)

        with self._connection() as conn:
            cursor = conn.execute(
                INSERT_STATS,
                (
                    bot_id,
                    format_timestamp(created_at),
                    *(readings.get(stat, 0) for stat in StatName),
                ),
            )
            conn.commit()
            row_id = cursor.lastrowid or 0

        logger.debug(f"Inserted stats row {row_id} for bot {bot_id}")
        return row_id

    def get_samples(self, bot_id: int, stat_name: Union[StatName, str]) -> List[Sample]:
        """
        Fetch one stat's readings for a bot, ordered by creation time

        Args:
            bot_id: Owning bot id
            stat_name: Stat to read

        Returns:
            List of Sample, oldest first

        Raises:
            InvalidStatName: If stat_name is not a known stat
            MalformedSample: If a stored row has a missing or unparsable field
        """
        stat = validate_stat_name(stat_name)

        with self._connection() as conn:
            rows = conn.execute(SELECT_SAMPLES, (bot_id,)).fetchall()

        return [self._row_to_sample(row, stat) for row in rows]

    @staticmethod
    def _row_to_sample(row: sqlite3.Row, stat: StatName) -> Sample:
        """Build a Sample from a fetched row, selecting the stat's column"""
        created_at = row["created_at"]
        value = row[stat.column]

        if created_at is None or value is None:
            raise MalformedSample(f"Row is missing created_at or {stat.value}")
        if isinstance(value, bool) or not isinstance(value, int):
            raise MalformedSample(f"Non-integer {stat.value} value: {value!r}")
        try:
            timestamp = parse_timestamp(created_at)
        except (TypeError, ValueError) as e:
            raise MalformedSample(f"Unparsable created_at {created_at!r}: {e}") from e

        return Sample(created_at=timestamp, value=value)

    # Maintenance Operations
    def cleanup_old_data(self, retention_days: int) -> int:
        """
        Delete stats rows older than the retention period

        Args:
            retention_days: Number of days to retain data

        Returns:
            Number of deleted rows
        """
        cutoff = datetime.now(timezone.utc) - timedelta(days=retention_days)

        with self._connection() as conn:
            cursor = conn.execute(
                "DELETE FROM stats WHERE created_at < ?", (format_timestamp(cutoff),)
            )
            deleted = cursor.rowcount
            conn.commit()

        logger.info(f"Cleaned up {deleted} stats rows older than {retention_days} days")
        return deleted

    def get_stats(self) -> Dict[str, Any]:
        """Get database statistics"""
        with self._connection() as conn:
            stats = {}
            for table, query in (
                ("bots", "SELECT COUNT(*) AS count FROM bots"),
                ("stats", "SELECT COUNT(*) AS count FROM stats"),
            ):
                stats[table] = conn.execute(query).fetchone()["count"]

        size = self.db_path.stat().st_size
        stats["database_size_mb"] = round(size / (1024 * 1024), 2)
        return stats
