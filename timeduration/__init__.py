from importlib.resources import files

from .duration import Duration
from .errors import DurationParseError, NumberFormatError, UnknownUnitError
from .scanner import DEFAULT_MODE, ParseMode, Scanner, Token, parse
from .util import DAY, HOUR, MINUTE, MONTH, SECOND, UNITS, YEAR

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
}

__all__ = [
    "Duration",
    "Scanner",
    "Token",
    "ParseMode",
    "parse",
    "DEFAULT_MODE",
    "DurationParseError",
    "NumberFormatError",
    "UnknownUnitError",
    "UNITS",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "MONTH",
    "YEAR",
    "docs",
]
