import logging
from enum import Enum, IntFlag
from typing import Optional, Union

from tagparser import id3genres
from tagparser.chrono import DateTime, DateTimeExpression, DateTimeParts, TimeSpan
from tagparser.popularity import Popularity, PopularityScale
from tagparser.positioninset import PositionInSet
from tagparser.tools.error import ConversionError

logger = logging.getLogger(__name__)

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
UINT64_MAX = (1 << 64) - 1


class TagTextEncoding(Enum):
    LATIN1              = 0
    UTF8                = 1
    UTF16_LITTLE_ENDIAN = 2
    UTF16_BIG_ENDIAN    = 3
    UNSPECIFIED         = 4


class TagDataType(Enum):
    TEXT                 = 0
    INTEGER              = 1
    POSITION_IN_SET      = 2
    STANDARD_GENRE_INDEX = 3
    TIME_SPAN            = 4
    DATE_TIME            = 5
    PICTURE              = 6
    BINARY               = 7
    UNDEFINED            = 8
    POPULARITY           = 9
    UNSIGNED_INTEGER     = 10
    DATE_TIME_EXPRESSION = 11


class TagValueComparisonFlags(IntFlag):
    NONE             = 0
    CASE_INSENSITIVE = 1 << 0
    IGNORE_META_DATA = 1 << 1


################################################################################
## Encoding parameters
################################################################################
CODEC_NAMES = {
    TagTextEncoding.LATIN1: 'latin-1',
    TagTextEncoding.UTF8: 'utf-8',
    TagTextEncoding.UTF16_LITTLE_ENDIAN: 'utf-16-le',
    TagTextEncoding.UTF16_BIG_ENDIAN: 'utf-16-be',
}

BYTE_ORDER_MARKS = {
    TagTextEncoding.UTF8: b'\xef\xbb\xbf',
    TagTextEncoding.UTF16_LITTLE_ENDIAN: b'\xff\xfe',
    TagTextEncoding.UTF16_BIG_ENDIAN: b'\xfe\xff',
}

_DATA_TYPE_NAMES = {
    TagDataType.TEXT: "text",
    TagDataType.INTEGER: "integer",
    TagDataType.POSITION_IN_SET: "position in set",
    TagDataType.STANDARD_GENRE_INDEX: "genre index",
    TagDataType.TIME_SPAN: "time span",
    TagDataType.DATE_TIME: "date time",
    TagDataType.PICTURE: "picture",
    TagDataType.BINARY: "binary",
    TagDataType.POPULARITY: "popularity",
    TagDataType.UNSIGNED_INTEGER: "unsigned integer",
    TagDataType.DATE_TIME_EXPRESSION: "date time expression",
}

_RAW_TYPES = (TagDataType.TEXT, TagDataType.PICTURE, TagDataType.BINARY, TagDataType.UNDEFINED)

# types which never compare equal to a value of another type
_NOT_CROSS_COMPARABLE = (TagDataType.TIME_SPAN, TagDataType.DATE_TIME, TagDataType.PICTURE,
                         TagDataType.BINARY, TagDataType.UNDEFINED)


def tag_data_type_string(data_type: TagDataType) -> str:
    return _DATA_TYPE_NAMES.get(data_type, "undefined")


def character_size(encoding: TagTextEncoding) -> int:
    if encoding in (TagTextEncoding.LATIN1, TagTextEncoding.UTF8):
        return 1
    if encoding in (TagTextEncoding.UTF16_LITTLE_ENDIAN, TagTextEncoding.UTF16_BIG_ENDIAN):
        return 2
    return 0


def strip_bom(data: bytes, encoding: TagTextEncoding) -> bytes:
    bom = BYTE_ORDER_MARKS.get(encoding)
    if bom and data.startswith(bom):
        return data[len(bom):]
    return data


def decode_text(data: bytes, encoding: TagTextEncoding) -> str:
    codec = CODEC_NAMES.get(encoding, 'utf-8')
    try:
        return data.decode(codec)
    except UnicodeDecodeError as e:
        raise ConversionError(f"unable to decode text as {codec}: {e}") from e


def encode_text(text: str, encoding: TagTextEncoding) -> bytes:
    codec = CODEC_NAMES.get(encoding, 'utf-8')
    try:
        return text.encode(codec)
    except UnicodeEncodeError as e:
        raise ConversionError(f"unable to encode text as {codec}: {e}") from e


def _compare_text(text1: str, text2: str, ignore_case: bool) -> bool:
    if ignore_case:
        return text1.casefold() == text2.casefold()
    return text1 == text2


def _compare_popularity(p1: Popularity, p2: Popularity) -> bool:
    # ratings are only rescaled between two known, different scales
    if p1.scale == p2.scale or PopularityScale.UNSPECIFIED in (p1.scale, p2.scale):
        return (p1.user, p1.rating, p1.play_counter) == (p2.user, p2.rating, p2.play_counter)
    return p1.scaled(PopularityScale.GENERIC) == p2.scaled(PopularityScale.GENERIC)


class TagValue:
    """Variant holding the value of a tag field plus its meta data.

    Text, picture, binary and undefined values are kept as raw bytes. All
    other types are kept as their Python value (int, PositionInSet, TimeSpan,
    DateTime, DateTimeExpression, Popularity). A failing conversion raises
    ConversionError and leaves the value untouched.
    """

    def __init__(self, value=None, data_type: Optional[TagDataType] = None,
                 encoding: Optional[TagTextEncoding] = None,
                 convert_to: TagTextEncoding = TagTextEncoding.UNSPECIFIED):
        self._data = None
        self._type = TagDataType.UNDEFINED
        self._encoding = TagTextEncoding.LATIN1
        self.description = ''
        self.description_encoding = TagTextEncoding.LATIN1
        self.mime_type = ''
        self.language = ''
        self.readonly = False

        if value is None:
            if data_type is not None:
                self._type = data_type
        elif isinstance(value, str):
            self.assign_text(value, encoding or TagTextEncoding.UTF8, convert_to)
        elif isinstance(value, (bytes, bytearray, memoryview)):
            if data_type == TagDataType.TEXT:
                self.assign_text(bytes(value), encoding or TagTextEncoding.LATIN1, convert_to)
            else:
                self.assign_data(value, data_type or TagDataType.UNDEFINED, encoding or TagTextEncoding.LATIN1)
        elif isinstance(value, bool):
            raise TypeError("a tag value can not be constructed from a bool")
        elif isinstance(value, int):
            if data_type == TagDataType.UNSIGNED_INTEGER:
                self.assign_unsigned_integer(value)
            elif data_type == TagDataType.STANDARD_GENRE_INDEX:
                self.assign_standard_genre_index(value)
            else:
                self.assign_integer(value)
        elif isinstance(value, PositionInSet):
            self.assign_position(value)
        elif isinstance(value, TimeSpan):
            self.assign_time_span(value)
        elif isinstance(value, DateTime):
            self.assign_date_time(value)
        elif isinstance(value, DateTimeExpression):
            self.assign_date_time_expression(value)
        elif isinstance(value, Popularity):
            self.assign_popularity(value)
        else:
            raise TypeError(f"a tag value can not be constructed from {type(value).__name__}")

    @classmethod
    def empty(cls) -> 'TagValue':
        return cls()

    ################################################################################
    ## Properties
    ################################################################################
    @property
    def type(self) -> TagDataType:
        return self._type

    @property
    def data_encoding(self) -> TagTextEncoding:
        return self._encoding

    @property
    def data(self) -> Optional[bytes]:
        """Raw bytes of text, picture, binary and undefined values."""
        return self._data if self._type in _RAW_TYPES else None

    def data_size(self) -> int:
        if self._data is None:
            return 0
        if isinstance(self._data, bytes):
            return len(self._data)
        return 1

    def is_empty(self) -> bool:
        return self._data is None or (isinstance(self._data, bytes) and not self._data)

    def is_labeled_as_readonly(self) -> bool:
        return self.readonly

    def set_description(self, value: str, encoding: TagTextEncoding = TagTextEncoding.LATIN1) -> None:
        self.description = value
        self.description_encoding = encoding

    ################################################################################
    ## Assignment
    ################################################################################
    def clear_data(self) -> None:
        self._data = None

    def clear_metadata(self) -> None:
        self.description = ''
        self.mime_type = ''
        self.language = ''
        self.readonly = False
        self._encoding = TagTextEncoding.LATIN1
        self.description_encoding = TagTextEncoding.LATIN1
        self._type = TagDataType.UNDEFINED

    def clear_data_and_metadata(self) -> None:
        self.clear_data()
        self.clear_metadata()

    def assign_text(self, text: Union[str, bytes], text_encoding: TagTextEncoding = TagTextEncoding.LATIN1,
                    convert_to: TagTextEncoding = TagTextEncoding.UNSPECIFIED) -> None:
        """Assigns text; a str is encoded, bytes are taken as encoded in text_encoding.

        A leading byte order mark matching text_encoding is stripped.
        """
        target = text_encoding if convert_to == TagTextEncoding.UNSPECIFIED else convert_to
        if isinstance(text, str):
            data = encode_text(text, target)
        else:
            data = strip_bom(bytes(text), text_encoding)
            if target != text_encoding and data:
                data = encode_text(decode_text(data, text_encoding), target)
        self._type = TagDataType.TEXT
        self._encoding = target
        self._data = data or None

    def assign_integer(self, value: int) -> None:
        if not INT32_MIN <= value <= INT32_MAX:
            raise ConversionError(f"{value} does not fit into a signed 32-bit integer")
        self._set(TagDataType.INTEGER, int(value))

    def assign_unsigned_integer(self, value: int) -> None:
        if not 0 <= value <= UINT64_MAX:
            raise ConversionError(f"{value} does not fit into an unsigned 64-bit integer")
        self._set(TagDataType.UNSIGNED_INTEGER, int(value))

    def assign_standard_genre_index(self, index: int) -> None:
        if not id3genres.is_empty_genre(index) and not id3genres.is_index_supported(index):
            raise ConversionError(f"{index} is not a valid standard genre index")
        self._set(TagDataType.STANDARD_GENRE_INDEX, int(index))

    def assign_position(self, value: PositionInSet) -> None:
        self._set(TagDataType.POSITION_IN_SET, None if value.is_null() else value)

    def assign_time_span(self, value: TimeSpan) -> None:
        self._set(TagDataType.TIME_SPAN, value)

    def assign_date_time(self, value: DateTime) -> None:
        self._set(TagDataType.DATE_TIME, value)

    def assign_date_time_expression(self, value: DateTimeExpression) -> None:
        self._set(TagDataType.DATE_TIME_EXPRESSION, value)

    def assign_popularity(self, value: Popularity) -> None:
        self._set(TagDataType.POPULARITY, None if value.is_empty() else value)

    def assign_data(self, data, data_type: TagDataType = TagDataType.BINARY,
                    encoding: TagTextEncoding = TagTextEncoding.LATIN1) -> None:
        data = bytes(data)
        if data_type == TagDataType.TEXT:
            data = strip_bom(data, encoding)
        self._type = data_type
        self._encoding = encoding
        self._data = data or None

    def _set(self, data_type: TagDataType, value) -> None:
        self._type = data_type
        self._encoding = TagTextEncoding.LATIN1
        self._data = value

    ################################################################################
    ## Encoding conversion
    ################################################################################
    def convert_data_encoding(self, encoding: TagTextEncoding) -> None:
        if self._encoding == encoding:
            return
        if self._type == TagDataType.TEXT and self._data and encoding != TagTextEncoding.UNSPECIFIED:
            self._data = encode_text(decode_text(self._data, self._encoding), encoding)
        self._encoding = encoding

    def convert_description_encoding(self, encoding: TagTextEncoding) -> None:
        # descriptions are kept decoded; only the designated encoding changes
        self.description_encoding = encoding

    ################################################################################
    ## Conversion
    ################################################################################
    def _text(self) -> str:
        return decode_text(self._data, self._encoding)

    def _cannot_convert(self, target: str) -> ConversionError:
        return ConversionError(f"Can not convert {tag_data_type_string(self._type)} to {target}.")

    def to_string(self, encoding: Optional[TagTextEncoding] = None) -> Union[str, bytes]:
        """Returns the value as text; with ``encoding`` the text is returned encoded."""
        text = self._to_text()
        if encoding is None:
            return text
        return encode_text(text, encoding)

    def _to_text(self) -> str:
        if self.is_empty():
            return ''
        t = self._type
        if t == TagDataType.TEXT:
            return self._text()
        if t in (TagDataType.INTEGER, TagDataType.UNSIGNED_INTEGER):
            return str(self._data)
        if t == TagDataType.POSITION_IN_SET:
            return str(self._data)
        if t == TagDataType.STANDARD_GENRE_INDEX:
            if id3genres.is_empty_genre(self._data):
                return ''
            name = id3genres.string_from_index(self._data)
            if name is None:
                raise ConversionError("No string representation for the assigned standard genre index available.")
            return name
        if t == TagDataType.TIME_SPAN:
            return self._data.to_string()
        if t == TagDataType.DATE_TIME:
            return self._data.to_iso_string(omit_default_components=True)
        if t == TagDataType.DATE_TIME_EXPRESSION:
            return self._data.to_iso_string()
        if t == TagDataType.POPULARITY:
            return self._data.to_string()
        raise self._cannot_convert("string")

    def to_integer(self) -> int:
        if self.is_empty():
            return 0
        t = self._type
        if t == TagDataType.TEXT:
            text = self._text().strip()
            try:
                value = int(text, 10)
            except ValueError:
                raise ConversionError(f"'{text}' is not a valid integer") from None
        elif t == TagDataType.POSITION_IN_SET:
            value = self._data.position
        elif t in (TagDataType.INTEGER, TagDataType.UNSIGNED_INTEGER, TagDataType.STANDARD_GENRE_INDEX):
            value = self._data
        else:
            raise self._cannot_convert("integer")
        if not INT32_MIN <= value <= INT32_MAX:
            raise ConversionError(f"{value} does not fit into a signed 32-bit integer")
        return value

    def to_unsigned_integer(self) -> int:
        if self.is_empty():
            return 0
        if self._type == TagDataType.UNSIGNED_INTEGER:
            return self._data
        if self._type == TagDataType.TEXT:
            text = self._text().strip()
            try:
                value = int(text, 10)
            except ValueError:
                raise ConversionError(f"'{text}' is not a valid unsigned integer") from None
        elif self._type in (TagDataType.INTEGER, TagDataType.STANDARD_GENRE_INDEX):
            value = self._data
        else:
            raise self._cannot_convert("unsigned integer")
        if not 0 <= value <= UINT64_MAX:
            raise ConversionError(f"{value} does not fit into an unsigned 64-bit integer")
        return value

    def to_standard_genre_index(self) -> int:
        if self.is_empty():
            return id3genres.EMPTY_GENRE_INDEX
        t = self._type
        if t == TagDataType.TEXT:
            try:
                index = self.to_integer()
            except ConversionError:
                index = id3genres.index_from_string(self._text())
        elif t in (TagDataType.STANDARD_GENRE_INDEX, TagDataType.INTEGER, TagDataType.UNSIGNED_INTEGER):
            index = self._data
        else:
            raise self._cannot_convert("genre index")
        if not id3genres.is_empty_genre(index) and not id3genres.is_index_supported(index):
            raise ConversionError("The assigned number is not a valid standard genre index.")
        return index

    def to_position_in_set(self) -> PositionInSet:
        if self.is_empty():
            return PositionInSet()
        t = self._type
        if t == TagDataType.TEXT:
            return PositionInSet.from_string(self._text())
        if t in (TagDataType.INTEGER, TagDataType.UNSIGNED_INTEGER):
            return PositionInSet(self._data)
        if t == TagDataType.POSITION_IN_SET:
            return self._data
        raise self._cannot_convert("position in set")

    def to_time_span(self) -> TimeSpan:
        if self.is_empty():
            return TimeSpan()
        t = self._type
        if t == TagDataType.TEXT:
            return TimeSpan.from_string(self._text())
        if t in (TagDataType.INTEGER, TagDataType.UNSIGNED_INTEGER):
            return TimeSpan(self._data)
        if t == TagDataType.TIME_SPAN:
            return self._data
        raise self._cannot_convert("time span")

    def to_date_time(self) -> DateTime:
        if self.is_empty():
            return DateTime()
        t = self._type
        if t == TagDataType.TEXT:
            return DateTime.from_iso_string(self._text())
        if t in (TagDataType.INTEGER, TagDataType.UNSIGNED_INTEGER):
            return DateTime(self._data)
        if t == TagDataType.DATE_TIME:
            return self._data
        if t == TagDataType.DATE_TIME_EXPRESSION:
            return self._data.gmt()
        raise self._cannot_convert("date time")

    def to_date_time_expression(self) -> DateTimeExpression:
        if self.is_empty():
            return DateTimeExpression()
        t = self._type
        if t == TagDataType.TEXT:
            return DateTimeExpression.from_iso_string(self._text())
        if t == TagDataType.DATE_TIME_EXPRESSION:
            return self._data
        if t in (TagDataType.DATE_TIME, TagDataType.INTEGER, TagDataType.UNSIGNED_INTEGER):
            return DateTimeExpression(self.to_date_time(), parts=DateTimeParts.DATE_TIME)
        raise self._cannot_convert("date time expression")

    def to_popularity(self) -> Popularity:
        if self.is_empty():
            return Popularity()
        t = self._type
        if t == TagDataType.TEXT:
            return Popularity.from_string(self._text())
        if t == TagDataType.POPULARITY:
            return self._data
        if t in (TagDataType.INTEGER, TagDataType.UNSIGNED_INTEGER):
            return Popularity(rating=float(self._data))
        raise self._cannot_convert("popularity")

    def to_scaled_popularity(self, scale: PopularityScale = PopularityScale.GENERIC) -> Popularity:
        return self.to_popularity().scaled(scale)

    ################################################################################
    ## Comparison
    ################################################################################
    def compare_to(self, other: 'TagValue', flags: TagValueComparisonFlags = TagValueComparisonFlags.NONE) -> bool:
        ignore_case = bool(flags & TagValueComparisonFlags.CASE_INSENSITIVE)

        if not flags & TagValueComparisonFlags.IGNORE_META_DATA:
            if (self.mime_type != other.mime_type or self.language != other.language
                    or self.readonly != other.readonly):
                return False
            if not _compare_text(self.description, other.description, ignore_case):
                return False

        if self._type == other._type:
            return self._compare_same_type(other, ignore_case)

        if self._type in _NOT_CROSS_COMPARABLE or other._type in _NOT_CROSS_COMPARABLE:
            return False
        try:
            return _compare_text(self.to_string(), other.to_string(), ignore_case)
        except ConversionError:
            return False

    def _compare_same_type(self, other: 'TagValue', ignore_case: bool) -> bool:
        t = self._type
        if t == TagDataType.TEXT:
            if (self._encoding == other._encoding and not ignore_case) or self.is_empty() or other.is_empty():
                return (self._data or b'') == (other._data or b'')
            try:
                return _compare_text(self._text(), other._text(), ignore_case)
            except ConversionError:
                return False
        if t in (TagDataType.PICTURE, TagDataType.BINARY, TagDataType.UNDEFINED):
            return (self._data or b'') == (other._data or b'')
        if t == TagDataType.POPULARITY:
            return _compare_popularity(self._data, other._data)
        converters = {
            TagDataType.INTEGER: TagValue.to_integer,
            TagDataType.UNSIGNED_INTEGER: TagValue.to_unsigned_integer,
            TagDataType.POSITION_IN_SET: TagValue.to_position_in_set,
            TagDataType.STANDARD_GENRE_INDEX: TagValue.to_standard_genre_index,
            TagDataType.TIME_SPAN: TagValue.to_time_span,
            TagDataType.DATE_TIME: TagValue.to_date_time,
            TagDataType.DATE_TIME_EXPRESSION: TagValue.to_date_time_expression,
        }
        convert = converters[t]
        return convert(self) == convert(other)

    def __eq__(self, other):
        if not isinstance(other, TagValue):
            return NotImplemented
        return self.compare_to(other)

    __hash__ = None

    def __repr__(self):
        return f'TagValue(type={self._type.name}, data={self._data!r}, encoding={self._encoding.name})'
