"""Core functionality for BotStats - config, stat names, aggregation"""

from botstats.core.config import Config
from botstats.core.stats import StatName, stat_names, validate_stat_name
from botstats.core.exceptions import (
    BotStatsError,
    InvalidStatName,
    MalformedSample,
    BotNotFound,
    DuplicateBot,
)
from botstats.core.aggregator import SeriesAggregator

__all__ = [
    "Config",
    "StatName",
    "stat_names",
    "validate_stat_name",
    "BotStatsError",
    "InvalidStatName",
    "MalformedSample",
    "BotNotFound",
    "DuplicateBot",
    "SeriesAggregator",
]
