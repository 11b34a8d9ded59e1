"""Utility constants for timeduration.

Time unit constants represent durations in seconds.
Months and years are fixed-length approximations (28 and 365 days).
"""

from types import MappingProxyType

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
MONTH = 2419200
YEAR = 31536000

# Unit literal -> seconds per unit, shared read-only by every parse
UNITS: MappingProxyType[str, int] = MappingProxyType(
    {
        "s": SECOND,
        "seconds": SECOND,
        "m": MINUTE,
        "minutes": MINUTE,
        "h": HOUR,
        "hours": HOUR,
        "d": DAY,
        "days": DAY,
        "mo": MONTH,
        "months": MONTH,
        "y": YEAR,
        "years": YEAR,
    }
)

# Multiplier credited to a quantity written without a unit ("90" is 90 minutes)
BARE_MULTIPLIER = MINUTE
