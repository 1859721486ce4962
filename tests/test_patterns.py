# -*- coding: utf-8 -*-
#
# This file is part of i18next-icu.
# Copyright (C) 2025 i18next-icu contributors.
#
# i18next-icu is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Test cases for the i18next syntax matchers."""

import pytest

from i18next_icu.conversion_utilities.patterns import (
    PluralKey,
    Span,
    find_interpolations,
    find_references,
    icu_selector,
    parse_plural_key,
    replace_interpolations,
    replace_references,
)


@pytest.mark.parametrize(
    "key,expected",
    [
        ("item_zero", PluralKey("item", "zero")),
        ("item_one", PluralKey("item", "one")),
        ("item_two", PluralKey("item", "two")),
        ("item_few", PluralKey("item", "few")),
        ("item_many", PluralKey("item", "many")),
        ("item_other", PluralKey("item", "other")),
        ("a_one_other", PluralKey("a_one", "other")),
        ("_one_one", PluralKey("_one", "one")),
    ],
)
def test_parse_plural_key(key, expected):
    """Test that plural-suffixed keys are split into base key and form."""
    assert parse_plural_key(key) == expected


@pytest.mark.parametrize(
    "key", ["item", "_one", "item_plural", "item_ones", "item_One", "item_other ", 5]
)
def test_parse_plural_key_rejects_plain_keys(key):
    """Test that keys without a plural suffix are not plural members."""
    assert parse_plural_key(key) is None


def test_icu_selector():
    """Test that only zero is mapped to an exact selector."""
    assert icu_selector("zero") == "=0"
    assert icu_selector("few") == "few"
    assert icu_selector("other") == "other"
    assert icu_selector("plural") == "plural"


def test_find_interpolations():
    """Test that every placeholder is found with its position."""
    text = "Hi {{first}} {{last, uppercase}}"
    assert find_interpolations(text) == [
        Span(3, 12, "first"),
        Span(13, 32, "last, uppercase"),
    ]


def test_find_interpolations_first_closing_braces_win():
    """Test that the first closing braces end a placeholder."""
    assert find_interpolations("{{a}}}") == [Span(0, 5, "a")]
    assert find_interpolations("{{}}") == []
    assert find_interpolations("{single}") == []


def test_replace_interpolations():
    """Test that placeholders lose one pair of braces."""
    assert replace_interpolations("Hello {{name}}!") == "Hello {name}!"
    assert replace_interpolations("{{a}}{{b}}") == "{a}{b}"
    assert replace_interpolations("{{val, number}}") == "{val, number}"
    assert replace_interpolations("Already {icu}") == "Already {icu}"


def test_find_references():
    """Test that nesting references are found."""
    assert find_references("See $t(other.key) and $t(x)") == [
        Span(4, 17, "other.key"),
        Span(22, 27, "x"),
    ]
    assert find_references("t(key) $t()") == []


def test_replace_references():
    """Test that nesting references become markers."""
    assert replace_references("See $t(other.key)") == "See [REF:other.key]"
    assert replace_references("$t(a)$t(b)") == "[REF:a][REF:b]"


def test_replacements_follow_found_spans():
    """Test that rewriting replaces exactly the spans that are found."""
    text = "{{a{b}} and {{c}} $t(x.{y})"

    assert [span.content for span in find_interpolations(text)] == ["a{b", "c"]
    assert replace_interpolations(text) == "{a{b} and {c} $t(x.{y})"
    assert replace_references(replace_interpolations(text)) == (
        "{a{b} and {c} [REF:x.{y}]"
    )
