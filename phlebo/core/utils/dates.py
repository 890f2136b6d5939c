"""
Date formatting and parsing with CLDR / date-fns style patterns.

Region profiles describe dates with patterns such as "dd/MM/yyyy" or
"dd MMMM yyyy" (the notation used by the web front end). This module renders
and parses those patterns directly, so the same pattern string drives both
directions.

Supported tokens:
    yyyy yy          year (4 digits / 2 digits)
    MMMM MMM MM M    month (name / short name / 2 digits / number)
    dd d             day of month
    EEEE EEE         weekday name (formatting only, ignored when parsing)
    HH H hh h        hour (24h / 12h)
    mm m ss s        minute, second
    a                AM/PM marker
    'text'           quoted literal ('' for a single quote)

Usage:
    from phlebo.core.utils.dates import format_pattern, parse_pattern, coerce_datetime

    format_pattern(datetime(2024, 3, 5), "dd/MM/yyyy")   # "05/03/2024"
    parse_pattern("05/03/2024", "dd/MM/yyyy")            # datetime(2024, 3, 5, 0, 0)
"""

import re
from datetime import date, datetime, time, timezone
from functools import lru_cache
from numbers import Real
from typing import List, Optional, Tuple, Union

from dateutil import parser as dateutil_parser

from phlebo.core.errors import DateParseError, InvalidArgumentError

DateInput = Union[datetime, date, str, int, float]

MONTHS = (
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
)
WEEKDAYS = (
    'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday',
)

# Longest tokens first so "MMMM" wins over "MM"
TOKEN_PATTERN = re.compile(
    r"'(?:[^']|'')*'|yyyy|yy|MMMM|MMM|MM|M|dd|d|EEEE|EEE|HH|H|hh|h|mm|m|ss|s|a"
)

# Regex fragment and field name for each parseable token
PARSE_FIELDS = {
    'yyyy': (r'\d{4}', 'year'),
    'yy': (r'\d{2}', 'year2'),
    'MMMM': ('|'.join(MONTHS), 'month_name'),
    'MMM': ('|'.join(m[:3] for m in MONTHS), 'month_abbr'),
    'MM': (r'\d{2}', 'month'),
    'M': (r'\d{1,2}', 'month'),
    'dd': (r'\d{2}', 'day'),
    'd': (r'\d{1,2}', 'day'),
    'EEEE': ('|'.join(WEEKDAYS), None),
    'EEE': ('|'.join(w[:3] for w in WEEKDAYS), None),
    'HH': (r'\d{2}', 'hour'),
    'H': (r'\d{1,2}', 'hour'),
    'hh': (r'\d{2}', 'hour12'),
    'h': (r'\d{1,2}', 'hour12'),
    'mm': (r'\d{2}', 'minute'),
    'm': (r'\d{1,2}', 'minute'),
    'ss': (r'\d{2}', 'second'),
    's': (r'\d{1,2}', 'second'),
    'a': ('AM|PM', 'meridiem'),
}


def _tokenize(pattern: str) -> List[Tuple[bool, str]]:
    """Split a pattern into (is_token, text) pieces; literals are unquoted."""
    pieces = []
    pos = 0
    for match in TOKEN_PATTERN.finditer(pattern):
        if match.start() > pos:
            pieces.append((False, pattern[pos:match.start()]))
        text = match.group(0)
        if text.startswith("'"):
            pieces.append((False, text[1:-1].replace("''", "'") or "'"))
        else:
            pieces.append((True, text))
        pos = match.end()
    if pos < len(pattern):
        pieces.append((False, pattern[pos:]))
    return pieces


def coerce_datetime(value: DateInput) -> datetime:
    """
    Coerce a date-like value to a datetime.

    Numbers are epoch milliseconds (UTC), strings are ISO 8601 or anything
    dateutil understands, plain dates become midnight.

    Raises:
        DateParseError: If a string cannot be interpreted as a date
        InvalidArgumentError: If the value has an unsupported type
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, bool):
        raise InvalidArgumentError("date must be a datetime, date, string or timestamp")
    if isinstance(value, Real):
        try:
            return datetime.fromtimestamp(float(value) / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidArgumentError(f"timestamp out of range: {value}") from e
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise DateParseError("Empty date string", text=value)
        try:
            return dateutil_parser.isoparse(text)
        except ValueError:
            pass
        try:
            return dateutil_parser.parse(text)
        except (ValueError, OverflowError) as e:
            raise DateParseError("Unrecognised date string", text=value) from e

    raise InvalidArgumentError(
        f"date must be a datetime, date, string or timestamp, got {type(value).__name__}"
    )


def _render_token(token: str, value: datetime) -> str:
    hour12 = value.hour % 12 or 12
    renderers = {
        'yyyy': lambda: f"{value.year:04d}",
        'yy': lambda: f"{value.year % 100:02d}",
        'MMMM': lambda: MONTHS[value.month - 1],
        'MMM': lambda: MONTHS[value.month - 1][:3],
        'MM': lambda: f"{value.month:02d}",
        'M': lambda: str(value.month),
        'dd': lambda: f"{value.day:02d}",
        'd': lambda: str(value.day),
        'EEEE': lambda: WEEKDAYS[value.weekday()],
        'EEE': lambda: WEEKDAYS[value.weekday()][:3],
        'HH': lambda: f"{value.hour:02d}",
        'H': lambda: str(value.hour),
        'hh': lambda: f"{hour12:02d}",
        'h': lambda: str(hour12),
        'mm': lambda: f"{value.minute:02d}",
        'm': lambda: str(value.minute),
        'ss': lambda: f"{value.second:02d}",
        's': lambda: str(value.second),
        'a': lambda: 'AM' if value.hour < 12 else 'PM',
    }
    return renderers[token]()


def format_pattern(value: DateInput, pattern: str) -> str:
    """
    Render a date-like value with a date-fns style pattern.

    Example:
        >>> format_pattern(datetime(2024, 3, 5, 14, 7), "dd MMMM yyyy HH:mm")
        "05 March 2024 14:07"
    """
    dt = coerce_datetime(value)
    return ''.join(
        _render_token(text, dt) if is_token else text
        for is_token, text in _tokenize(pattern)
    )


@lru_cache(maxsize=64)
def _compile_pattern(pattern: str) -> re.Pattern:
    """Build an anchored regex with one named group per pattern field."""
    parts = []
    seen = set()
    for is_token, text in _tokenize(pattern):
        if not is_token:
            parts.append(re.escape(text))
            continue
        fragment, field_name = PARSE_FIELDS[text]
        if field_name is None or field_name in seen:
            parts.append(f"(?:{fragment})")
        else:
            parts.append(f"(?P<{field_name}>{fragment})")
            seen.add(field_name)
    return re.compile('^' + ''.join(parts) + '$', re.IGNORECASE)


def _month_index(name: str, names) -> int:
    lowered = name.lower()
    for i, candidate in enumerate(names):
        if candidate.lower() == lowered:
            return i + 1
    raise ValueError(f"unknown month {name}")


def parse_pattern(
    text: str,
    pattern: str,
    reference: Optional[datetime] = None
) -> datetime:
    """
    Parse text produced by `format_pattern` back into a datetime.

    Fields the pattern does not carry are taken from `reference`; the time of
    day defaults to midnight. Two-digit years map 69-99 to the 1900s and
    00-68 to the 2000s.

    Args:
        text: Text to parse
        pattern: Pattern the text is expected to follow
        reference: Source of missing date fields (default: today)

    Returns:
        Naive datetime

    Raises:
        DateParseError: If text does not match the pattern or names an
            impossible date
    """
    if not isinstance(text, str) or not text.strip():
        raise DateParseError("Empty date string", text=str(text or ''), pattern=pattern)

    match = _compile_pattern(pattern).match(text.strip())
    if not match:
        raise DateParseError("Date does not match pattern", text=text, pattern=pattern)

    fields = match.groupdict()
    ref = reference or datetime.combine(date.today(), time.min)

    try:
        year = ref.year
        if fields.get('year'):
            year = int(fields['year'])
        elif fields.get('year2'):
            short = int(fields['year2'])
            year = (1900 if short >= 69 else 2000) + short

        month = ref.month
        if fields.get('month_name'):
            month = _month_index(fields['month_name'], MONTHS)
        elif fields.get('month_abbr'):
            month = _month_index(fields['month_abbr'], [m[:3] for m in MONTHS])
        elif fields.get('month'):
            month = int(fields['month'])

        day = int(fields['day']) if fields.get('day') else ref.day

        hour = 0
        if fields.get('hour'):
            hour = int(fields['hour'])
        elif fields.get('hour12'):
            hour = int(fields['hour12']) % 12
            if (fields.get('meridiem') or 'AM').upper() == 'PM':
                hour += 12

        minute = int(fields['minute']) if fields.get('minute') else 0
        second = int(fields['second']) if fields.get('second') else 0

        return datetime(year, month, day, hour, minute, second)
    except ValueError as e:
        raise DateParseError("Invalid date", text=text, pattern=pattern) from e
