"""
Exception types raised by BotStats
"""


class BotStatsError(Exception):
    """Base class for all BotStats errors"""


class InvalidStatName(BotStatsError, ValueError):
    """Requested stat is not one of the known StatName values"""

    def __init__(self, stat_name):
        self.stat_name = stat_name
        super().__init__(f"Invalid stat name: {stat_name!r}")


class MalformedSample(BotStatsError, ValueError):
    """A stored row has a missing or non-numeric value or timestamp"""


class BotNotFound(BotStatsError, LookupError):
    """No bot is registered under the given name or id"""

    def __init__(self, bot):
        self.bot = bot
        super().__init__(f"Bot not found: {bot!r}")


class DuplicateBot(BotStatsError, ValueError):
    """A bot is already registered under the given name"""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Bot already exists: {name!r}")
