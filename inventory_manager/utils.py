import math
import re
from datetime import datetime
from typing import Optional

from . import settings

CANCEL_WORDS = ("cancel", "c")

INT_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


def get_current_timestamp() -> str:
    """Returns the local time as 'YYYY-MM-DD HH:MM:SS', the format stored with each sale."""
    return datetime.now().strftime(settings.DATE_FORMAT)


def get_date_suffix_for_filename() -> str:
    """Returns the current date as a YYYY-MM-DD string for filenames."""
    return datetime.now().strftime("%Y-%m-%d")


def sanitize_text(value: str) -> str:
    """
    Replaces the CSV delimiter and line breaks with spaces.
    The persisted files are split on commas with no quoting, so these characters
    would otherwise shift every field after them.
    """
    return value.replace(",", " ").replace("\r", " ").replace("\n", " ")


def is_cancel(text: str) -> bool:
    return text.strip().lower() in CANCEL_WORDS


def parse_int(text: str) -> Optional[int]:
    """
    Strict integer parse: the whole trimmed string must be ASCII digits with an
    optional sign. Underscores and non-ASCII digits, which int() accepts, are refused.
    """
    candidate = text.strip()
    if not INT_PATTERN.fullmatch(candidate):
        return None
    return int(candidate)


def parse_float(text: str) -> Optional[float]:
    """Strict decimal parse. nan, inf and values that overflow to inf are refused."""
    candidate = text.strip()
    if not FLOAT_PATTERN.fullmatch(candidate):
        return None
    value = float(candidate)
    return value if math.isfinite(value) else None
