"""
BotStats - hourly and daily stat series for monitored bots

Reads periodic stat samples recorded for each bot and reshapes them into
the daily and hourly series a charting front end plots.
"""

from botstats.core.config import Config
from botstats.core.aggregator import SeriesAggregator
from botstats.core.stats import StatName
from botstats.storage.sqlite_store import SQLiteStore

__version__ = "0.1.0"

__all__ = ["Config", "SeriesAggregator", "StatName", "SQLiteStore"]
