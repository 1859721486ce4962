# -*- coding: utf-8 -*-
#
# This file is part of i18next-icu.
# Copyright (C) 2025 i18next-icu contributors.
#
# i18next-icu is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Matchers for i18next syntax found in keys and message strings."""

from __future__ import annotations

import re
from typing import NamedTuple, Optional

PLURAL_FORMS = ("zero", "one", "two", "few", "many", "other")

ICU_PLURAL_SELECTORS = {
    "zero": "=0",
    "one": "one",
    "two": "two",
    "few": "few",
    "many": "many",
    "other": "other",
}

PLURAL_KEY_PATTERN = re.compile(r"(?P<base>.+)_(?P<form>%s)" % "|".join(PLURAL_FORMS))
INTERPOLATION_PATTERN = re.compile(r"\{\{(?P<content>[^}]+)\}\}")
REFERENCE_PATTERN = re.compile(r"\$t\((?P<content>[^)]+)\)")


class PluralKey(NamedTuple):
    """A key split into its base key and plural form, e.g. ``item_one``."""

    base_key: str
    form: str


class Span(NamedTuple):
    """A match inside a message string.

    ``start`` and ``end`` delimit the whole match, ``content`` is the captured
    inner text (the variable for ``{{...}}``, the key for ``$t(...)``).
    """

    start: int
    end: int
    content: str


def parse_plural_key(key) -> Optional[PluralKey]:
    """Split a plural-suffixed key.

    :param key: Translation key like ``item_other``
    :return: PluralKey like ``("item", "other")``, or None if ``key`` is not
        a plural-family member
    """
    if not isinstance(key, str):
        return None
    match = PLURAL_KEY_PATTERN.fullmatch(key)
    if match is None:
        return None
    return PluralKey(match.group("base"), match.group("form"))


def icu_selector(form: str) -> str:
    """Map an i18next plural form to its ICU selector, ``zero`` becomes ``=0``."""
    return ICU_PLURAL_SELECTORS.get(form, form)


def _find_spans(pattern: re.Pattern, text: str) -> list[Span]:
    return [
        Span(match.start(), match.end(), match.group("content"))
        for match in pattern.finditer(text)
    ]


def find_interpolations(text: str) -> list[Span]:
    """Find every ``{{variable}}`` placeholder in ``text``."""
    return _find_spans(INTERPOLATION_PATTERN, text)


def find_references(text: str) -> list[Span]:
    """Find every ``$t(key)`` nesting reference in ``text``."""
    return _find_spans(REFERENCE_PATTERN, text)


def _replace_spans(text: str, spans: list[Span], template: str) -> str:
    parts = []
    position = 0
    for span in spans:
        parts.append(text[position : span.start])
        parts.append(template.format(span.content))
        position = span.end
    parts.append(text[position:])
    return "".join(parts)


def replace_interpolations(text: str) -> str:
    """Rewrite ``{{variable}}`` placeholders to ``{variable}``.

    The placeholder content is kept verbatim, so ``{{date, short}}`` becomes
    ``{date, short}``.
    """
    return _replace_spans(text, find_interpolations(text), "{{{}}}")


def replace_references(text: str) -> str:
    """Rewrite ``$t(key)`` nesting references to ``[REF:key]`` markers."""
    return _replace_spans(text, find_references(text), "[REF:{}]")
