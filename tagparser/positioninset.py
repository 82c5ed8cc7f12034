from tagparser.tools.error import ConversionError


def _to_int(text: str) -> int:
    text = text.strip()
    if not text:
        return 0
    try:
        return int(text, 10)
    except ValueError as e:
        raise ConversionError(f"'{text}' is not a valid number") from e


class PositionInSet:
    """Position of an element within a set, e.g. track 3 of 12.

    Either value may be zero, meaning it is unknown.
    """

    __slots__ = ('_position', '_total')

    def __init__(self, position: int = 0, total: int = 0):
        self._position = int(position)
        self._total = int(total)

    @classmethod
    def from_string(cls, text: str) -> 'PositionInSet':
        separator = text.find('/')
        if separator < 0 or separator == len(text) - 1:
            return cls(_to_int(text.rstrip('/')))
        if separator == 0:
            return cls(0, _to_int(text[1:]))
        return cls(_to_int(text[:separator]), _to_int(text[separator + 1:]))

    @property
    def position(self) -> int:
        return self._position

    @property
    def total(self) -> int:
        return self._total

    def is_null(self) -> bool:
        return self._position == 0 and self._total == 0

    def __str__(self):
        text = str(self._position) if self._position else ''
        if self._total:
            text += f'/{self._total}'
        return text

    def __repr__(self):
        return f'PositionInSet({self._position}, {self._total})'

    def __eq__(self, other):
        if not isinstance(other, PositionInSet):
            return NotImplemented
        return self._position == other._position and self._total == other._total

    def __hash__(self):
        return hash((self._position, self._total))
