"""
Data models for bots, raw stat samples and chart series
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, NamedTuple, Tuple


@dataclass(frozen=True)
class Bot:
    """A monitored bot"""

    id: int
    name: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return asdict(self)


@dataclass(frozen=True)
class Sample:
    """One raw reading of a single stat, as stored (UTC, second precision)"""

    created_at: datetime
    value: int


class Point(NamedTuple):
    """A plotted coordinate: milliseconds since the UNIX epoch and a reading"""

    time_ms: int
    value: int

    def to_list(self) -> List[int]:
        """Two-element pair, the shape charting libraries expect"""
        return [self.time_ms, self.value]


@dataclass(frozen=True)
class Series:
    """A named, ordered sequence of points"""

    name: str
    data: Tuple[Point, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the {"name", "data": [[t, v], ...]} payload"""
        return {
            "name": self.name,
            "data": [point.to_list() for point in self.data],
        }
