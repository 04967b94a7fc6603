"""
Series aggregation for bot stats
Turns raw stat samples into the hourly and daily series used for charting
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Sequence, Union

from botstats.core.exceptions import BotNotFound, MalformedSample
from botstats.core.stats import StatName, validate_stat_name
from botstats.storage.models import Bot, Point, Sample, Series
from botstats.utils.logger import get_logger


logger = get_logger(__name__)


MILLISECONDS_IN_AN_HOUR = 60 * 60 * 1000

MILLISECONDS_IN_A_DAY = 24 * MILLISECONDS_IN_AN_HOUR

# Milliseconds between the proleptic Gregorian day 0 (date.toordinal() == 0)
# and 1970-01-01 00:00:00 UTC
MILLISECONDS_OFFSET = datetime(1970, 1, 1).toordinal() * MILLISECONDS_IN_A_DAY


class SeriesAggregator:
    """Builds daily and hourly series for a bot's stat"""

    def __init__(self, store=None):
        """
        Initialize aggregator

        Args:
            store: Storage object providing get_samples(bot_id, stat_name) and
                get_bot_by_name(name); only needed by get_series_data
        """
        self.store = store

    @staticmethod
    def to_epoch_ms(created_at: datetime) -> int:
        """
        Convert a calendar timestamp to milliseconds since the UNIX epoch

        Only the hour is kept; minutes and seconds are dropped. Naive values
        are treated as UTC.

        Raises:
            MalformedSample: If created_at is not a datetime
        """
        if not isinstance(created_at, datetime):
            raise MalformedSample(f"Expected a datetime, got {created_at!r}")
        if created_at.tzinfo is not None:
            created_at = created_at.astimezone(timezone.utc)

        hours = created_at.toordinal() * 24 + created_at.hour
        return hours * MILLISECONDS_IN_AN_HOUR - MILLISECONDS_OFFSET

    @staticmethod
    def day_start(time_ms: int) -> int:
        """Start of the UTC day containing time_ms"""
        return time_ms - (time_ms % MILLISECONDS_IN_A_DAY)

    def project_hourly(self, samples: Iterable[Sample]) -> List[Point]:
        """One point per sample, in input order"""
        points = []
        for sample in samples:
            value = sample.value
            if value is None or isinstance(value, bool):
                raise MalformedSample(f"Non-numeric sample value: {value!r}")
            try:
                value = int(value)
            except (TypeError, ValueError) as e:
                raise MalformedSample(f"Non-numeric sample value: {value!r}") from e
            points.append(Point(self.to_epoch_ms(sample.created_at), value))
        return points

    def reduce_daily(self, points: Sequence[Point]) -> List[Point]:
        """
        Reduce hourly points to one point per UTC day

        Each day keeps its start-of-day timestamp and the largest value seen
        that day. Days appear in first-seen order. The running maximum starts
        at 0, so a day of only negative readings reports 0.
        """
        days: Dict[int, int] = {}
        for point in points:
            key = self.day_start(point.time_ms)
            current = days.get(key, 0)
            if current < point.value:
                current = point.value
            days[key] = current

        return [Point(key, value) for key, value in days.items()]

    def build_series(self, name: str, samples: Iterable[Sample]) -> List[Series]:
        """
        Run the full transform over an already-fetched batch

        Returns:
            [daily, hourly], both named after the bot
        """
        hourly = self.project_hourly(samples)
        daily = self.reduce_daily(hourly)

        logger.debug(
            f"Built series for {name!r}: {len(hourly)} hourly, {len(daily)} daily points"
        )
        return [Series(name, tuple(daily)), Series(name, tuple(hourly))]

    def get_series_data(
        self, bot: Union[Bot, str], stat_name: Union[StatName, str]
    ) -> List[Dict[str, Any]]:
        """
        Get a bot's stat data in the shape the charting front end expects

        Args:
            bot: Bot instance, or a bot name to look up in the store
            stat_name: Stat to report on

        Returns:
            [{"name": ..., "data": [[t, v], ...]}, ...], daily first, hourly second

        Raises:
            InvalidStatName: If stat_name is not a known stat (nothing is queried)
            BotNotFound: If bot is a name no bot is registered under
            MalformedSample: If the store returns a broken row
        """
        stat = validate_stat_name(stat_name)

        if self.store is None:
            raise RuntimeError("SeriesAggregator has no store to fetch samples from")

        if not isinstance(bot, Bot):
            found = self.store.get_bot_by_name(bot)
            if found is None:
                raise BotNotFound(bot)
            bot = found

        samples = self.store.get_samples(bot.id, stat)
        logger.info(f"Fetched {len(samples)} {stat.value} samples for bot {bot.name!r}")

        return [series.to_dict() for series in self.build_series(bot.name, samples)]
