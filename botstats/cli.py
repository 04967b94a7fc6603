"""
Command-line interface for BotStats
"""

import argparse
import json
import logging
import sys
from datetime import datetime

from botstats.core.aggregator import SeriesAggregator
from botstats.core.config import Config
from botstats.core.exceptions import BotNotFound, BotStatsError
from botstats.core.stats import StatName, stat_names
from botstats.exporters.json_exporter import JSONExporter
from botstats.storage.sqlite_store import SQLiteStore


def setup_logging(config: Config):
    """Setup logging configuration"""
    from botstats.utils.logger import initialize_logging

    log_config = config.get_logging_config()
    initialize_logging(log_config.get('log_dir'))

    # Console output for CLI use, on top of the daily log file
    level = getattr(logging, str(log_config.get('level', 'INFO')).upper(), logging.INFO)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)


def _open_store(config: Config) -> SQLiteStore:
    return SQLiteStore(config.get_database_config()['path'])


def cmd_add_bot(args):
    """Register a new bot"""
    config = Config(args.config)
    setup_logging(config)

    store = _open_store(config)
    bot = store.insert_bot(args.name)
    print(f"Registered bot {bot.name!r} (id {bot.id})")


def cmd_record(args):
    """Record one stats reading for a bot"""
    config = Config(args.config)
    setup_logging(config)

    store = _open_store(config)
    bot = store.get_bot_by_name(args.bot)
    if bot is None:
        raise BotNotFound(args.bot)

    values = {
        stat.value: getattr(args, stat.value)
        for stat in StatName
        if getattr(args, stat.value) is not None
    }
    created_at = None
    if args.at:
        try:
            created_at = datetime.fromisoformat(args.at)
        except ValueError:
            raise BotStatsError(
                f"Invalid --at timestamp {args.at!r}, expected ISO 8601 such as 2021-01-01T12:00:00"
            ) from None

    row_id = store.insert_stats(bot.id, created_at, **values)
    print(f"Recorded stats row {row_id} for {bot.name!r}")


def cmd_series(args):
    """Print or export the daily and hourly series of a stat"""
    config = Config(args.config)
    setup_logging(config)

    logger = logging.getLogger(__name__)

    store = _open_store(config)
    aggregator = SeriesAggregator(store)
    indent = config.get('export.indent', 2)

    if args.output:
        exporter = JSONExporter(aggregator, indent=indent)
        payload = exporter.export_series(args.output, args.bot, args.stat)
        logger.info(f"Series exported to {args.output}")
        print(
            f"Exported {payload['daily_count']} daily and "
            f"{payload['hourly_count']} hourly points to {args.output}"
        )
    else:
        print(json.dumps(aggregator.get_series_data(args.bot, args.stat), indent=indent))


def cmd_stats(args):
    """List valid stat names"""
    for name in stat_names():
        print(name)


def cmd_status(args):
    """Show database statistics"""
    config = Config(args.config)

    db_config = config.get_database_config()
    store = _open_store(config)
    stats = store.get_stats()

    print("\n" + "=" * 60)
    print("BOTSTATS STATUS")
    print("=" * 60)
    print(f"Database Path:           {db_config['path']}")
    print(f"Database Size:           {stats['database_size_mb']} MB")
    print(f"Bots:                    {stats['bots']:,}")
    print(f"Stats Rows:              {stats['stats']:,}")
    print("=" * 60 + "\n")


def cmd_cleanup(args):
    """Delete stats rows older than the retention period"""
    config = Config(args.config)
    setup_logging(config)

    days = args.days if args.days is not None else config.get('database.retention_days', 365)
    deleted = _open_store(config).cleanup_old_data(days)
    print(f"Deleted {deleted} stats rows older than {days} days")


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with all subcommands"""
    parser = argparse.ArgumentParser(
        description='BotStats - hourly and daily stat series for monitored bots',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '-c', '--config',
        help='Path to configuration file',
        default=None
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    add_bot_parser = subparsers.add_parser('add-bot', help='Register a bot')
    add_bot_parser.add_argument('name', help='Bot display name')
    add_bot_parser.set_defaults(func=cmd_add_bot)

    record_parser = subparsers.add_parser('record', help='Record a stats reading')
    record_parser.add_argument('bot', help='Bot name')
    record_parser.add_argument('--at',
                               help='Reading time as ISO 8601, UTC (default: now)')
    for stat in StatName:
        record_parser.add_argument(f"--{stat.value.replace('_', '-')}",
                                   dest=stat.value, type=int,
                                   help=f'{stat.value} reading')
    record_parser.set_defaults(func=cmd_record)

    series_parser = subparsers.add_parser('series', help='Show daily and hourly series')
    series_parser.add_argument('bot', help='Bot name')
    series_parser.add_argument('stat', help='Stat name (see "stats")')
    series_parser.add_argument('-o', '--output',
                               help='Write the series to a JSON file')
    series_parser.set_defaults(func=cmd_series)

    stats_parser = subparsers.add_parser('stats', help='List stat names')
    stats_parser.set_defaults(func=cmd_stats)

    status_parser = subparsers.add_parser('status', help='Show database status')
    status_parser.set_defaults(func=cmd_status)

    cleanup_parser = subparsers.add_parser('cleanup', help='Delete old stats rows')
    cleanup_parser.add_argument('--days', type=int,
                                help='Retention in days (default: from config)')
    cleanup_parser.set_defaults(func=cmd_cleanup)

    return parser


def main(argv=None):
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except BotStatsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    main()
