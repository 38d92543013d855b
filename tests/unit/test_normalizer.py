"""
Unit tests for the raw item -> NZB normalizer.

Focus on the per-attribute failure policy: dates are logged and left unset,
integers silently fall back to zero, unknown names are skipped.
"""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from newznab_client.models.feed import Attribute, RawNZB
from newznab_client.services.normalizer import (
    ATTRIBUTE_CONVERTERS,
    normalize_item,
    normalize_items,
    parse_int,
)


def _raw(*attrs, **fields) -> RawNZB:
    return RawNZB(
        attributes=[Attribute(name=name, value=value) for name, value in attrs],
        **fields
    )


class TestDirectCopies:

    def test_copies_title_description_and_pub_date(self):
        pub_date = datetime(2015, 4, 13, 2, 13, 49, tzinfo=timezone(timedelta(hours=-4)))
        raw = _raw(title="Show.S01E01", description="desc", pub_date=pub_date, size=999)

        nzb = normalize_item(raw)

        assert nzb.title == "Show.S01E01"
        assert nzb.description == "desc"
        assert nzb.pub_date == pub_date

    def test_item_size_element_is_not_copied(self):
        """Size comes only from the ``size`` attribute."""
        assert normalize_item(_raw(size=999)).size == 0


class TestAttributeConversion:

    def test_size_attribute(self):
        assert normalize_item(_raw(("size", "12345"))).size == 12345

    def test_non_numeric_size_defaults_to_zero_silently(self, caplog):
        with caplog.at_level(logging.DEBUG):
            nzb = normalize_item(_raw(("size", "12 MB")))

        assert nzb.size == 0
        assert caplog.records == []

    def test_negative_values_are_accepted(self):
        assert normalize_item(_raw(("size", "-5"))).size == -5

    def test_grabs_and_comments(self):
        nzb = normalize_item(_raw(("grabs", "1532"), ("comments", "3")))

        assert nzb.num_grabs == 1532
        assert nzb.num_comments == 3

    def test_leading_zero_is_octal(self):
        nzb = normalize_item(_raw(("size", "0123"), ("grabs", "010")))

        assert nzb.size == 83
        assert nzb.num_grabs == 8

    def test_surrounding_whitespace_is_rejected(self):
        assert normalize_item(_raw(("size", " 12"))).size == 0

    def test_large_size_is_kept(self):
        assert normalize_item(_raw(("size", "99999999999"))).size == 99999999999

    def test_grabs_and_comments_clamp_to_32_bits(self):
        nzb = normalize_item(_raw(("grabs", "99999999999"), ("comments", "-99999999999")))

        assert nzb.num_grabs == 2147483647
        assert nzb.num_comments == -2147483648

    def test_non_numeric_grabs_and_comments_default_to_zero(self):
        nzb = normalize_item(_raw(("grabs", ""), ("comments", "many")))

        assert nzb.num_grabs == 0
        assert nzb.num_comments == 0

    def test_guid_is_copied_verbatim_into_id(self):
        assert normalize_item(_raw(("guid", " abc/123 "))).id == " abc/123 "

    def test_tvairdate(self):
        nzb = normalize_item(_raw(("tvairdate", "Sun, 12 Apr 2015 21:00:00 -0400")))

        assert nzb.air_date == datetime(2015, 4, 12, 21, 0, 0, tzinfo=timezone(timedelta(hours=-4)))

    def test_malformed_tvairdate_is_logged_and_left_unset(self, caplog):
        with caplog.at_level(logging.ERROR):
            nzb = normalize_item(_raw(("tvairdate", "12/04/2015"), ("guid", "abc")))

        assert nzb.air_date is None
        assert nzb.id == "abc"
        assert "12/04/2015" in caplog.text

    def test_unknown_attributes_are_ignored(self):
        nzb = normalize_item(_raw(("rageid", "24493"), ("category", "5040"), ("guid", "abc")))

        assert nzb.id == "abc"
        assert nzb.tvrage_id == ""
        assert nzb.category == []

    def test_repeated_attribute_last_write_wins(self):
        nzb = normalize_item(_raw(("size", "1"), ("guid", "a"), ("size", "2"), ("guid", "b")))

        assert nzb.size == 2
        assert nzb.id == "b"

    def test_later_bad_integer_overwrites_with_zero(self):
        assert normalize_item(_raw(("size", "100"), ("size", "oops"))).size == 0

    def test_custom_converter_table(self):
        def set_tvdbid(nzb, value):
            nzb.tvdb_id = value

        converters = dict(ATTRIBUTE_CONVERTERS, tvdbid=set_tvdbid)

        nzb = normalize_item(_raw(("tvdbid", "121361"), ("size", "7")), converters)

        assert nzb.tvdb_id == "121361"
        assert nzb.size == 7


class TestNormalizeItems:

    def test_preserves_count_and_order(self):
        raws = [_raw(("guid", str(i)), title=f"t{i}") for i in range(5)]

        nzbs = normalize_items(raws)

        assert [n.id for n in nzbs] == ["0", "1", "2", "3", "4"]
        assert [n.title for n in nzbs] == ["t0", "t1", "t2", "t3", "t4"]

    def test_bad_attributes_do_not_drop_items(self):
        raws = [_raw(("tvairdate", "bad"), ("size", "bad")), _raw(("guid", "ok"))]

        nzbs = normalize_items(raws)

        assert len(nzbs) == 2
        assert nzbs[1].id == "ok"

    def test_empty_input(self):
        assert normalize_items([]) == []


@pytest.mark.parametrize("value,expected", [
    ("0", 0),
    ("42", 42),
    ("0x1F", 31),
    ("0o17", 15),
    ("0b101", 5),
    ("", 0),
    ("1.5", 0),
    ("abc", 0),
    ("+5", 5),
    ("-5", -5),
    ("-", 0),
    ("0123", 83),        # leading zero is octal
    ("08", 0),
    ("0x", 0),
    (" 12", 0),
    ("12 ", 0),
    ("1_000", 1000),
    ("0x_1F", 31),
    ("_1", 0),
    ("1__0", 0),
    ("1_", 0),
    ("99999999999", 99999999999),
    ("99999999999999999999", 9223372036854775807),
    ("-99999999999999999999", -9223372036854775808),
])
def test_parse_int(value, expected):
    assert parse_int(value) == expected


@pytest.mark.parametrize("value,expected", [
    ("2147483647", 2147483647),
    ("99999999999", 2147483647),
    ("-99999999999", -2147483648),
])
def test_parse_int_clamps_to_bit_size(value, expected):
    assert parse_int(value, bits=32) == expected
