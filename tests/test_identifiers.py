"""Tests for identifier derivation."""

import re

from stackdump_rdf import identifiers


def test_numeric_key_is_prefixed_verbatim():
    assert identifiers.derive(identifiers.USER, "1") == "u1"
    assert identifiers.derive(identifiers.POST, "123456789012345678901234567890") == \
        "p123456789012345678901234567890"


def test_numeric_key_is_not_reparsed():
    assert identifiers.derive(identifiers.COMMENT, "007") == "c007"
    assert identifiers.derive(identifiers.COMMENT, "007") != identifiers.derive(identifiers.COMMENT, "7")


def test_kind_prefixes_are_distinct():
    prefixes = [identifiers.BADGE, identifiers.COMMENT, identifiers.POST, identifiers.POST_HISTORY,
                identifiers.POST_LINK, identifiers.TAG, identifiers.USER]
    assert prefixes == ["b", "c", "p", "h", "l", "t", "u"]
    assert len(set(prefixes)) == len(prefixes)


def test_tag_name_is_base32_without_padding():
    assert identifiers.encode_name("c++") == "MMVSW"
    assert identifiers.encode_name("a") == "ME"
    assert identifiers.derive_tag("c++") == "tMMVSW"


def test_tag_identifier_uses_safe_alphabet():
    for name in ["c#", "node.js", "ruby-on-rails", "日本語", "a b", "<weird>\"tag\""]:
        tag_id = identifiers.derive_tag(name)
        assert re.fullmatch(r"t[A-Z2-7]+", tag_id), tag_id


def test_tag_identifiers_are_deterministic_and_distinct():
    names = ["java", "javascript", "Java", "c", "c++", "c#", "b-c", "bc"]
    ids = [identifiers.derive_tag(n) for n in names]
    assert ids == [identifiers.derive_tag(n) for n in names]
    assert len(set(ids)) == len(names)
