import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Iterator, Optional

from tagparser.chrono import DateTime

logger = logging.getLogger(__name__)


class DiagLevel(IntEnum):
    NONE        = 0  # no message present; not used for constructing messages
    DEBUG       = 1
    INFORMATION = 2
    WARNING     = 3
    CRITICAL    = 4
    FATAL       = 5


WORST_DIAG_LEVEL = DiagLevel.FATAL

_LOGGING_LEVELS = {
    DiagLevel.DEBUG: logging.DEBUG,
    DiagLevel.INFORMATION: logging.INFO,
    DiagLevel.WARNING: logging.WARNING,
    DiagLevel.CRITICAL: logging.ERROR,
    DiagLevel.FATAL: logging.CRITICAL,
}


def diag_level_name(level: DiagLevel) -> str:
    if level == DiagLevel.NONE:
        return ''
    return DiagLevel(level).name.lower()


def worse_level(lhs: DiagLevel, rhs: DiagLevel) -> DiagLevel:
    """Monotonic maximum of two levels, the ``|=`` of the level lattice."""
    return lhs if lhs >= rhs else rhs


@dataclass(frozen=True)
class DiagMessage:
    level: DiagLevel
    message: str
    context: str
    creation_time: DateTime = field(default_factory=DateTime.gmt_now, compare=False)

    @property
    def level_name(self) -> str:
        return diag_level_name(self.level)

    @staticmethod
    def format_list(values: Iterable[str]) -> str:
        """Quotes the values and joins them like '"a", "b" and "c"'."""
        values = list(values)
        quoted = [f'"{value}"' for value in values]
        if len(quoted) < 2:
            return ''.join(quoted)
        return ', '.join(quoted[:-1]) + ' and ' + quoted[-1]


class Diagnostics:
    """Append-only, ordered collection of DiagMessage.

    Every message is forwarded to the module logger when it is added.
    Messages can be read by index and iteration but not replaced or removed.
    """

    def __init__(self, messages: Iterable[DiagMessage] = ()):
        self._messages = []
        self.extend(messages)

    def add(self, level: DiagLevel, message: str, context: str) -> DiagMessage:
        msg = DiagMessage(DiagLevel(level), message, context)
        self.append(msg)
        return msg

    def append(self, msg: DiagMessage) -> None:
        logger.log(_LOGGING_LEVELS.get(msg.level, logging.NOTSET), "%s: %s", msg.context, msg.message)
        self._messages.append(msg)

    def extend(self, messages: Iterable[DiagMessage]) -> None:
        for msg in messages:
            self.append(msg)

    def __iadd__(self, messages: Iterable[DiagMessage]) -> 'Diagnostics':
        self.extend(messages)
        return self

    def __iter__(self) -> Iterator[DiagMessage]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __getitem__(self, index):
        return self._messages[index]

    def __repr__(self):
        return f'Diagnostics({self._messages!r})'

    def has(self, level: DiagLevel) -> bool:
        """Returns whether at least one message is at least as severe as level."""
        return any(msg.level >= level for msg in self)

    def level(self) -> DiagLevel:
        level = DiagLevel.NONE
        for msg in self:
            level = worse_level(level, msg.level)
            if level >= WORST_DIAG_LEVEL:
                break
        return level

    def worst_level(self) -> Optional[DiagLevel]:
        if not self:
            return None
        return self.level()
