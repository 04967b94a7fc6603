"""
Closed set of stat types a bot can report, and request validation
"""

from enum import Enum
from typing import List, Union

from botstats.core.exceptions import InvalidStatName


class StatName(str, Enum):
    """Stat types recorded for every bot, one column each in the stats table"""

    ACTIVE_MEMBERS = "active_members"
    TOTAL_MEMBERS = "total_members"
    MEMBERS_ONLINE = "members_online"
    GUESTS_ONLINE = "guests_online"
    TOTAL_ONLINE = "total_online"
    TOTAL_THREADS = "total_threads"
    TOTAL_POSTS = "total_posts"

    @property
    def column(self) -> str:
        """Row key holding this stat in fetched storage rows"""
        return self.value


def stat_names() -> List[str]:
    """All valid stat names, in declaration order"""
    return [stat.value for stat in StatName]


def validate_stat_name(stat_name: Union[StatName, str]) -> StatName:
    """
    Resolve a requested stat name against the allow-list

    Must be called before any storage access for the request.

    Args:
        stat_name: StatName member or its string value

    Returns:
        The matching StatName

    Raises:
        InvalidStatName: If the name is not one of the known stats
    """
    if isinstance(stat_name, StatName):
        return stat_name
    if not isinstance(stat_name, str):
        raise InvalidStatName(stat_name)
    try:
        return StatName(stat_name)
    except ValueError:
        raise InvalidStatName(stat_name) from None
