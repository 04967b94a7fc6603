"""
JSON exporter for bot stat series
"""

import json
from typing import Any, Dict, Union

from botstats.core.aggregator import SeriesAggregator
from botstats.core.stats import StatName, validate_stat_name
from botstats.storage.models import Bot
from botstats.utils.logger import get_logger


logger = get_logger(__name__)


class JSONExporter:
    """Export chart series to JSON files"""

    def __init__(self, aggregator: SeriesAggregator, indent: int = 2):
        """
        Initialize JSON exporter

        Args:
            aggregator: SeriesAggregator with a store attached
            indent: Indentation passed to json.dump
        """
        self.aggregator = aggregator
        self.indent = indent

    def build_payload(
        self, bot: Union[Bot, str], stat_name: Union[StatName, str]
    ) -> Dict[str, Any]:
        """Series for a bot's stat plus a little metadata"""
        stat = validate_stat_name(stat_name)
        daily, hourly = self.aggregator.get_series_data(bot, stat)

        return {
            "bot": daily["name"],
            "stat": stat.value,
            "daily_count": len(daily["data"]),
            "hourly_count": len(hourly["data"]),
            "series": [daily, hourly],
        }

    def export_series(
        self, output_path: str, bot: Union[Bot, str], stat_name: Union[StatName, str]
    ) -> Dict[str, Any]:
        """
        Export a bot's daily and hourly series to JSON

        Args:
            output_path: Output file path
            bot: Bot instance or registered bot name
            stat_name: Stat to export

        Returns:
            The payload that was written
        """
        logger.info(f"Exporting {stat_name} series to {output_path}")

        payload = self.build_payload(bot, stat_name)
        if not payload["hourly_count"]:
            logger.warning(f"No samples found for {payload['bot']!r}, writing empty series")

        with open(output_path, "w") as f:
            json.dump(payload, f, indent=self.indent)

        logger.info(
            f"Exported {payload['hourly_count']} hourly and "
            f"{payload['daily_count']} daily points to {output_path}"
        )
        return payload
