"""Unit tests for TagValue and its value types."""

import pytest

from tagparser import id3genres
from tagparser.chrono import DateTime, TimeSpan
from tagparser.popularity import Popularity, PopularityScale
from tagparser.positioninset import PositionInSet
from tagparser.tagvalue import TagDataType, TagTextEncoding, TagValue, TagValueComparisonFlags
from tagparser.tools.error import ConversionError


class TestPopularity:
    """Popularity text form and rating scales."""

    def test_to_string(self):
        popularity = Popularity("foo", 40, 123, PopularityScale.VORBIS_COMMENT)
        assert popularity.to_string() == "foo|40|123"
        assert Popularity("foo").to_string() == "foo"
        assert Popularity("foo", 3).to_string() == "foo|3"

    def test_scaling(self):
        popularity = Popularity("foo", 40, 123, PopularityScale.VORBIS_COMMENT)
        assert popularity.scaled(PopularityScale.UNSPECIFIED).rating == pytest.approx(2.0)
        assert popularity.scaled(PopularityScale.ID3V2).rating == pytest.approx(64.0)

    def test_unrated_stays_zero(self):
        assert Popularity(rating=0, scale=PopularityScale.ID3V2).scaled(PopularityScale.GENERIC).rating == 0

    def test_round_trip_through_tag_value(self):
        popularity = Popularity("foo", 40, 123, PopularityScale.VORBIS_COMMENT)
        value = TagValue(popularity)
        text = value.to_string()
        assert text == "foo|40|123"

        reparsed = TagValue(Popularity.from_string(text, PopularityScale.VORBIS_COMMENT))
        assert value.compare_to(reparsed, TagValueComparisonFlags.IGNORE_META_DATA)

    def test_unspecified_ratings_are_not_clamped(self):
        assert Popularity("user", 40).scaled(PopularityScale.GENERIC).rating == 40
        assert TagValue(Popularity("user", 40)) != TagValue(Popularity("user", 100))
        assert TagValue(Popularity("user", 40)) == TagValue(Popularity("user", 40))

    def test_ratings_of_different_scales(self):
        """Ratings of two known scales are compared on the generic scale."""
        vorbis = TagValue(Popularity("user", 60, 0, PopularityScale.VORBIS_COMMENT))
        assert vorbis == TagValue(Popularity("user", 128, 0, PopularityScale.ID3V2))
        assert vorbis != TagValue(Popularity("user", 64, 0, PopularityScale.ID3V2))

    def test_invalid_text(self):
        with pytest.raises(ConversionError):
            Popularity.from_string("foo|bar|1")


class TestPositionInSet:
    @pytest.mark.parametrize("text, position, total", [
        ("3", 3, 0),
        ("/12", 0, 12),
        ("3/12", 3, 12),
    ])
    def test_parse(self, text, position, total):
        value = TagValue(text).to_position_in_set()
        assert (value.position, value.total) == (position, total)
        assert str(value) == text

    def test_invalid(self):
        with pytest.raises(ConversionError):
            PositionInSet.from_string("a/b")


class TestTagValue:
    """Test suite for conversions between the variants."""

    def test_integer_from_text(self):
        assert TagValue("  -42").to_integer() == -42
        assert TagValue(42).to_string() == "42"

    def test_failed_conversion_leaves_value_unchanged(self):
        value = TagValue("not a number")
        with pytest.raises(ConversionError):
            value.to_integer()
        assert value.type == TagDataType.TEXT
        assert value.to_string() == "not a number"

    def test_bom_is_stripped(self):
        value = TagValue(b'\xef\xbb\xbfabc', TagDataType.TEXT, TagTextEncoding.UTF8)
        assert value.data == b'abc'
        value = TagValue(b'\xff\xfea\x00', TagDataType.TEXT, TagTextEncoding.UTF16_LITTLE_ENDIAN)
        assert value.to_string() == 'a'

    def test_genre(self):
        assert TagValue("Rock").to_standard_genre_index() == 17
        assert TagValue("17").to_standard_genre_index() == 17
        assert TagValue(255, TagDataType.STANDARD_GENRE_INDEX).to_string() == ''
        with pytest.raises(ConversionError):
            TagValue("No Such Genre").to_standard_genre_index()
        with pytest.raises(ConversionError):
            TagValue(id3genres.genre_count()).to_standard_genre_index()

    def test_binary_to_text_fails(self):
        with pytest.raises(ConversionError):
            TagValue(b'\x00\x01', TagDataType.BINARY).to_string()

    def test_date_time_and_time_span_never_equal(self):
        assert TagValue(DateTime()) != TagValue(TimeSpan())

    def test_date_time_from_text(self):
        value = TagValue("2009-02-03T14:15:16")
        assert value.to_date_time() == DateTime.from_date_and_time(2009, 2, 3, 14, 15, 16)

    def test_far_date_time_from_text(self):
        assert TagValue("3000-01-01").to_date_time() == DateTime.from_date(3000, 1, 1)

    def test_invalid_date_time_from_text(self):
        with pytest.raises(ConversionError):
            TagValue("0000-01-01").to_date_time()

    def test_to_string_with_encoding(self):
        value = TagValue(PositionInSet(3, 12))
        assert value.to_string() == "3/12"
        assert value.to_string(TagTextEncoding.UTF16_BIG_ENDIAN) == "3/12".encode('utf-16-be')
        assert TagValue("äb").to_string(TagTextEncoding.LATIN1) == b'\xe4b'

    def test_to_string_with_unencodable_text(self):
        with pytest.raises(ConversionError):
            TagValue("€").to_string(TagTextEncoding.LATIN1)

    def test_case_insensitive_comparison(self):
        first = TagValue("Hello")
        second = TagValue("hello", encoding=TagTextEncoding.UTF16_BIG_ENDIAN)
        assert first != second
        assert first.compare_to(second, TagValueComparisonFlags.CASE_INSENSITIVE)

    def test_text_compared_across_encodings(self):
        first = TagValue("abc", encoding=TagTextEncoding.LATIN1)
        second = TagValue("abc", encoding=TagTextEncoding.UTF16_LITTLE_ENDIAN)
        assert first == second

    def test_description_is_meta_data(self):
        first = TagValue("abc")
        second = TagValue("abc")
        second.set_description("other")
        assert first != second
        assert first.compare_to(second, TagValueComparisonFlags.IGNORE_META_DATA)
