from dataclasses import dataclass, field
from datetime import timedelta

from typing_extensions import override

from timeduration.scanner import DEFAULT_MODE, ParseMode, parse
from timeduration.util import DAY, HOUR, MINUTE


@dataclass(frozen=True, order=True)
class Duration:
    """Immutable span of whole seconds with day/hour/minute/second components.

    Every constructor funnels into ``Duration(total_seconds)``; the components
    are derived once in ``__post_init__``. Equality, ordering and hashing use
    ``total_seconds`` only.
    """

    total_seconds: int = 0
    days: int = field(init=False, compare=False, repr=False)
    hours: int = field(init=False, compare=False, repr=False)
    minutes: int = field(init=False, compare=False, repr=False)
    seconds: int = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        days, remainder = divmod(self.total_seconds, DAY)
        hours, remainder = divmod(remainder, HOUR)
        minutes, seconds = divmod(remainder, MINUTE)
        object.__setattr__(self, "days", days)
        object.__setattr__(self, "hours", hours)
        object.__setattr__(self, "minutes", minutes)
        object.__setattr__(self, "seconds", seconds)

    @classmethod
    def of(
        cls, seconds: int = 0, minutes: int = 0, hours: int = 0, days: int = 0
    ) -> "Duration":
        """Build from explicit components; they need not be normalized."""
        return cls(seconds + minutes * MINUTE + hours * HOUR + days * DAY)

    @classmethod
    def parse(cls, source: str, *, mode: ParseMode = DEFAULT_MODE) -> "Duration":
        """Build from a duration string such as ``"2h 30m 15s"``."""
        return cls(parse(source, mode=mode))

    @classmethod
    def from_seconds(cls, total_seconds: int) -> "Duration":
        return cls(total_seconds)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        """Build from a timedelta, dropping fractional seconds."""
        if not isinstance(delta, timedelta):
            raise TypeError(
                f"Duration.from_timedelta() expects a datetime.timedelta.\n"
                f"Got {type(delta).__name__!r}: {delta!r}\n"
                f"Hint: Use Duration(n) for a number of seconds"
            )
        # Integer division keeps large values exact, truncating toward zero
        whole = abs(delta) // timedelta(seconds=1)
        return cls(-whole if delta < timedelta(0) else whole)

    @property
    def duration(self) -> timedelta:
        """Total duration as a timedelta."""
        return timedelta(seconds=self.total_seconds)

    def is_zero(self) -> bool:
        return self.total_seconds == 0

    def to_string(self) -> str:
        """Render as ``"1d 2h 3m 4s"``.

        Zero components are left out, except that a zero duration renders as
        ``"0s"``. Every non-seconds token keeps its trailing space, so a
        duration without seconds ends in one (60 renders as ``"1m "``).
        """
        result = ""
        if self.days > 0:
            result += f"{self.days}d "
        if self.hours > 0:
            result += f"{self.hours}h "
        if self.minutes > 0:
            result += f"{self.minutes}m "
        if self.seconds > 0 or not result:
            result += f"{self.seconds}s"
        return result

    def as_sql_interval(self) -> str:
        """Render as ``"interval <total_seconds> second"``."""
        return f"interval {self.total_seconds} second"

    @override
    def __str__(self) -> str:
        return self.to_string()
