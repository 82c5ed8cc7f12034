import re
import datetime as _dt
from enum import IntFlag
from functools import total_ordering

import pandas as pd

from tagparser.tools.error import ConversionError

################################################################################
## Tick constants (1 tick = 100 ns)
################################################################################
TICKS_PER_MICROSECOND = 10
TICKS_PER_MILLISECOND = 10_000
TICKS_PER_SECOND      = 10_000_000
TICKS_PER_MINUTE      = 60 * TICKS_PER_SECOND
TICKS_PER_HOUR        = 60 * TICKS_PER_MINUTE
TICKS_PER_DAY         = 24 * TICKS_PER_HOUR

# ticks between 0001-01-01 and 1970-01-01
UNIX_EPOCH_TICKS = 621355968000000000

_EPOCH = _dt.datetime(1, 1, 1)

_ISO_PATTERN = re.compile(
    r'^(?P<year>\d{4})'
    r'(?:-(?P<month>\d{2})'
    r'(?:-(?P<day>\d{2})'
    r'(?:[T ](?P<hour>\d{2})'
    r'(?::(?P<minute>\d{2})'
    r'(?::(?P<second>\d{2})'
    r'(?:\.(?P<fraction>\d{1,9}))?)?)?)?)?)?'
    r'(?P<zone>Z|[+-]\d{2}(?::?\d{2})?)?$'
)


def _normalize_iso(m: re.Match) -> str:
    """Expands a partial ISO-8601 match to the complete form understood by pandas."""
    text = (f"{m.group('year')}-{m.group('month') or '01'}-{m.group('day') or '01'}"
            f"T{m.group('hour') or '00'}:{m.group('minute') or '00'}:{m.group('second') or '00'}")
    if m.group('fraction'):
        text += '.' + m.group('fraction')
    zone = m.group('zone')
    if zone and zone != 'Z':
        digits = zone[1:].replace(':', '')
        text += f'{zone[0]}{digits[:2]}:{digits[2:] or "00"}'
    elif zone:
        text += '+00:00'
    return text


def _format_fraction(ticks: int) -> str:
    if not ticks:
        return ''
    return '.' + f'{ticks:07d}'.rstrip('0')


@total_ordering
class TimeSpan:
    """Signed duration stored as 100-ns ticks."""

    __slots__ = ('ticks',)

    def __init__(self, ticks: int = 0):
        self.ticks = int(ticks)

    @classmethod
    def from_seconds(cls, seconds: float) -> 'TimeSpan':
        return cls(round(seconds * TICKS_PER_SECOND))

    @classmethod
    def from_milliseconds(cls, milliseconds: float) -> 'TimeSpan':
        return cls(round(milliseconds * TICKS_PER_MILLISECOND))

    @classmethod
    def from_minutes(cls, minutes: float) -> 'TimeSpan':
        return cls(round(minutes * TICKS_PER_MINUTE))

    @classmethod
    def from_hours(cls, hours: float) -> 'TimeSpan':
        return cls(round(hours * TICKS_PER_HOUR))

    @classmethod
    def from_days(cls, days: float) -> 'TimeSpan':
        return cls(round(days * TICKS_PER_DAY))

    @classmethod
    def from_string(cls, text: str) -> 'TimeSpan':
        """Parses ``[-][[[days:]hours:]minutes:]seconds[.fraction]``."""
        text = text.strip()
        if not text:
            return cls()
        negative = text.startswith('-')
        if negative:
            text = text[1:]
        parts = text.split(':')
        if len(parts) > 4:
            raise ConversionError(f"'{text}' has too many components for a time span")
        factors = (TICKS_PER_SECOND, TICKS_PER_MINUTE, TICKS_PER_HOUR, TICKS_PER_DAY)
        ticks = 0
        try:
            for factor, part in zip(factors, reversed(parts)):
                ticks += round(float(part) * factor) if factor == TICKS_PER_SECOND else int(part) * factor
        except ValueError as e:
            raise ConversionError(f"'{text}' is not a valid time span") from e
        return cls(-ticks if negative else ticks)

    @property
    def total_ticks(self) -> int:
        return self.ticks

    @property
    def total_seconds(self) -> float:
        return self.ticks / TICKS_PER_SECOND

    @property
    def total_milliseconds(self) -> float:
        return self.ticks / TICKS_PER_MILLISECOND

    @property
    def days(self) -> int:
        return abs(self.ticks) // TICKS_PER_DAY

    @property
    def hours(self) -> int:
        return abs(self.ticks) // TICKS_PER_HOUR % 24

    @property
    def minutes(self) -> int:
        return abs(self.ticks) // TICKS_PER_MINUTE % 60

    @property
    def seconds(self) -> int:
        return abs(self.ticks) // TICKS_PER_SECOND % 60

    @property
    def milliseconds(self) -> int:
        return abs(self.ticks) // TICKS_PER_MILLISECOND % 1000

    def is_null(self) -> bool:
        return self.ticks == 0

    def is_negative(self) -> bool:
        return self.ticks < 0

    def to_string(self) -> str:
        ticks = abs(self.ticks)
        hours = ticks // TICKS_PER_HOUR
        text = f'{hours:02d}:{self.minutes:02d}:{self.seconds:02d}{_format_fraction(ticks % TICKS_PER_SECOND)}'
        return '-' + text if self.ticks < 0 else text

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f'TimeSpan({self.ticks})'

    def __eq__(self, other):
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.ticks == other.ticks

    def __lt__(self, other):
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.ticks < other.ticks

    def __hash__(self):
        return hash(('TimeSpan', self.ticks))

    def __add__(self, other):
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(self.ticks + other.ticks)

    def __sub__(self, other):
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(self.ticks - other.ticks)

    def __neg__(self):
        return TimeSpan(-self.ticks)


@total_ordering
class DateTime:
    """Point in time stored as 100-ns ticks since 0001-01-01T00:00:00."""

    __slots__ = ('ticks',)

    def __init__(self, ticks: int = 0):
        self.ticks = int(ticks)

    @classmethod
    def from_date(cls, year: int, month: int, day: int) -> 'DateTime':
        return cls.from_date_and_time(year, month, day)

    @classmethod
    def from_date_and_time(cls, year: int, month: int = 1, day: int = 1,
                           hour: int = 0, minute: int = 0, second: int = 0, millisecond: float = 0) -> 'DateTime':
        try:
            moment = _dt.datetime(year, month, day, hour, minute, second)
        except ValueError as e:
            raise ConversionError(f"invalid date/time: {e}") from e
        return cls.from_datetime(moment) + TimeSpan.from_milliseconds(millisecond)

    @classmethod
    def from_datetime(cls, moment: _dt.datetime) -> 'DateTime':
        if moment.tzinfo is not None:
            moment = moment.astimezone(_dt.timezone.utc).replace(tzinfo=None)
        delta = moment - _EPOCH
        return cls((delta.days * 86400 + delta.seconds) * TICKS_PER_SECOND + delta.microseconds * TICKS_PER_MICROSECOND)

    @classmethod
    def from_unix_timestamp(cls, seconds: float) -> 'DateTime':
        return cls(UNIX_EPOCH_TICKS + round(seconds * TICKS_PER_SECOND))

    @classmethod
    def from_timestamp(cls, timestamp: pd.Timestamp) -> 'DateTime':
        try:
            if timestamp.tzinfo is not None:
                timestamp = timestamp.tz_convert('UTC').tz_localize(None)
            moment = timestamp.to_pydatetime(warn=False)
        except (ValueError, OverflowError) as e:
            raise ConversionError(f"{timestamp} is not a representable date/time: {e}") from e
        # ticks from the components; the nanosecond value is out of range outside 1677-2262
        return cls.from_datetime(moment) + TimeSpan(timestamp.nanosecond // 100)

    @classmethod
    def from_iso_string(cls, text: str) -> 'DateTime':
        """Parses an ISO-8601 date/time, converting a present zone designator to GMT."""
        text = text.strip()
        m = _ISO_PATTERN.match(text)
        if not m:
            raise ConversionError(f"'{text}' is not an ISO-8601 date/time")
        try:
            timestamp = pd.Timestamp(_normalize_iso(m))
        except (ValueError, OverflowError) as e:
            raise ConversionError(f"'{text}' is not a representable date/time: {e}") from e
        return cls.from_timestamp(timestamp)

    @classmethod
    def gmt_now(cls) -> 'DateTime':
        return cls.from_datetime(_dt.datetime.now(_dt.timezone.utc))

    def to_datetime(self) -> _dt.datetime:
        return _EPOCH + _dt.timedelta(microseconds=self.ticks // TICKS_PER_MICROSECOND)

    @property
    def year(self) -> int:
        return self.to_datetime().year

    @property
    def month(self) -> int:
        return self.to_datetime().month

    @property
    def day(self) -> int:
        return self.to_datetime().day

    @property
    def hour(self) -> int:
        return self.ticks // TICKS_PER_HOUR % 24

    @property
    def minute(self) -> int:
        return self.ticks // TICKS_PER_MINUTE % 60

    @property
    def second(self) -> int:
        return self.ticks // TICKS_PER_SECOND % 60

    @property
    def millisecond(self) -> int:
        return self.ticks // TICKS_PER_MILLISECOND % 1000

    @property
    def time_of_day(self) -> TimeSpan:
        return TimeSpan(self.ticks % TICKS_PER_DAY)

    def is_null(self) -> bool:
        return self.ticks == 0

    def to_iso_string(self, omit_default_components: bool = False) -> str:
        date = self.to_datetime()
        text = f'{date.year:04d}-{date.month:02d}-{date.day:02d}'
        time_of_day = self.ticks % TICKS_PER_DAY
        if omit_default_components and not time_of_day:
            return text
        return text + (f'T{self.hour:02d}:{self.minute:02d}:{self.second:02d}'
                       f'{_format_fraction(time_of_day % TICKS_PER_SECOND)}')

    def __str__(self):
        return self.to_iso_string(True)

    def __repr__(self):
        return f'DateTime({self.ticks})'

    def __eq__(self, other):
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.ticks == other.ticks

    def __lt__(self, other):
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.ticks < other.ticks

    def __hash__(self):
        return hash(('DateTime', self.ticks))

    def __add__(self, other):
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return DateTime(self.ticks + other.ticks)

    def __sub__(self, other):
        if isinstance(other, TimeSpan):
            return DateTime(self.ticks - other.ticks)
        if isinstance(other, DateTime):
            return TimeSpan(self.ticks - other.ticks)
        return NotImplemented


class DateTimeParts(IntFlag):
    NONE         = 0
    YEAR         = 1 << 0
    MONTH        = 1 << 1
    DAY          = 1 << 2
    HOUR         = 1 << 3
    MINUTE       = 1 << 4
    SECOND       = 1 << 5
    SUB_SECOND   = 1 << 6
    DELTA_HOUR   = 1 << 7
    DELTA_MINUTE = 1 << 8
    DATE         = YEAR | MONTH | DAY
    TIME         = HOUR | MINUTE | SECOND | SUB_SECOND
    DATE_TIME    = DATE | TIME
    TIME_ZONE    = DELTA_HOUR | DELTA_MINUTE


class DateTimeExpression:
    """A date/time which may lack trailing components, plus an optional zone offset."""

    def __init__(self, value: DateTime = None, delta: TimeSpan = None, parts: DateTimeParts = DateTimeParts.NONE):
        self.value = value if value is not None else DateTime()
        self.delta = delta if delta is not None else TimeSpan()
        self.parts = DateTimeParts(parts)

    @classmethod
    def from_iso_string(cls, text: str) -> 'DateTimeExpression':
        text = text.strip()
        m = _ISO_PATTERN.match(text)
        if not m:
            raise ConversionError(f"'{text}' is not an ISO-8601 date/time expression")
        parts = DateTimeParts.NONE
        for name, flag in (('year', DateTimeParts.YEAR), ('month', DateTimeParts.MONTH),
                           ('day', DateTimeParts.DAY), ('hour', DateTimeParts.HOUR),
                           ('minute', DateTimeParts.MINUTE), ('second', DateTimeParts.SECOND),
                           ('fraction', DateTimeParts.SUB_SECOND)):
            if m.group(name) is not None:
                parts |= flag

        delta = TimeSpan()
        zone = m.group('zone')
        if zone:
            parts |= DateTimeParts.DELTA_HOUR
            if zone != 'Z':
                digits = zone[1:].replace(':', '')
                delta = TimeSpan.from_hours(int(digits[:2]))
                if len(digits) > 2:
                    parts |= DateTimeParts.DELTA_MINUTE
                    delta += TimeSpan.from_minutes(int(digits[2:]))
                if zone[0] == '-':
                    delta = -delta

        # local value; the zone offset is kept separately in delta
        local = text[:m.start('zone')] if zone else text
        return cls(DateTime.from_iso_string(local), delta, parts)

    def gmt(self) -> DateTime:
        return self.value - self.delta

    def to_iso_string(self) -> str:
        if not self.parts:
            return ''
        v = self.value
        text = f'{v.year:04d}'
        if self.parts & DateTimeParts.MONTH:
            text += f'-{v.month:02d}'
        if self.parts & DateTimeParts.DAY:
            text += f'-{v.day:02d}'
        if self.parts & DateTimeParts.HOUR:
            text += f'T{v.hour:02d}'
        if self.parts & DateTimeParts.MINUTE:
            text += f':{v.minute:02d}'
        if self.parts & DateTimeParts.SECOND:
            text += f':{v.second:02d}'
        if self.parts & DateTimeParts.SUB_SECOND:
            text += _format_fraction(v.ticks % TICKS_PER_SECOND) or '.0'
        if self.parts & DateTimeParts.DELTA_HOUR:
            if self.delta.is_null() and not self.parts & DateTimeParts.DELTA_MINUTE:
                text += 'Z'
            else:
                sign = '-' if self.delta.is_negative() else '+'
                text += f'{sign}{self.delta.days * 24 + self.delta.hours:02d}'
                if self.parts & DateTimeParts.DELTA_MINUTE:
                    text += f':{self.delta.minutes:02d}'
        return text

    def __str__(self):
        return self.to_iso_string()

    def __repr__(self):
        return f'DateTimeExpression({self.value!r}, {self.delta!r}, {self.parts!r})'

    def __eq__(self, other):
        if not isinstance(other, DateTimeExpression):
            return NotImplemented
        return self.value == other.value and self.delta == other.delta and self.parts == other.parts

    def __hash__(self):
        return hash((self.value, self.delta, int(self.parts)))
