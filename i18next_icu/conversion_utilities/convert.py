# -*- coding: utf-8 -*-
#
# This file is part of i18next-icu.
# Copyright (C) 2025 i18next-icu contributors.
#
# i18next-icu is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Conversion of i18next translation trees to ICU MessageFormat."""

from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from enum import Enum
from json import dumps
from typing import Any, Callable, Optional

from ..config import I18NEXT_ICU_PLURAL_VARIABLE
from .patterns import (
    icu_selector,
    parse_plural_key,
    replace_interpolations,
    replace_references,
)

PluralFamily = dict[str, Any]  # form -> text
CollisionHook = Optional[Callable[[str], None]]


class NodeKind(Enum):
    """Shape of a value found in a translation tree."""

    TREE = "tree"
    OPAQUE = "opaque"
    STRING = "string"
    SCALAR = "scalar"


def classify_node(value: Any) -> NodeKind:
    """Tell which kind of translation node ``value`` is.

    Mappings are trees, lists are opaque, strings are rewritten and every
    other value (numbers, booleans, None) is a scalar kept as is.
    """
    if isinstance(value, Mapping):
        return NodeKind.TREE
    if isinstance(value, list):
        return NodeKind.OPAQUE
    if isinstance(value, str):
        return NodeKind.STRING
    return NodeKind.SCALAR


def convert_string(text: str) -> str:
    """Rewrite one message string: placeholders first, then references."""
    return replace_references(replace_interpolations(text))


def _branch_text(value: Any) -> str:
    if isinstance(value, str):
        return replace_interpolations(value)
    return dumps(value, ensure_ascii=False, separators=(", ", ": "), default=str)


def compile_plural(family: PluralFamily) -> str:
    """Build an ICU plural expression out of a plural family.

    :param family: Plural forms mapped to their texts, in source order,
        e.g. ``{"one": "{{count}} item", "other": "{{count}} items"}``
    :return: ``{count, plural, one{{count} item} other{{count} items}}``
    """
    branches = [
        f"{icu_selector(form)}{{{_branch_text(text)}}}" for form, text in family.items()
    ]
    return f"{{{I18NEXT_ICU_PLURAL_VARIABLE}, plural, {' '.join(branches)}}}"


def convert_node(value: Any, on_collision: CollisionHook = None) -> Any:
    """Convert any value of a translation tree."""
    kind = classify_node(value)
    if kind is NodeKind.TREE:
        return convert_translations(value, on_collision=on_collision)
    if kind is NodeKind.OPAQUE:
        return deepcopy(value)
    if kind is NodeKind.STRING:
        return convert_string(value)
    return value


def convert_translations(
    translations: Mapping, on_collision: CollisionHook = None
) -> dict:
    """Convert an i18next translation tree to ICU MessageFormat.

    Plural families (``key_zero``, ``key_one``, ...) of one level are merged
    into a single ICU plural expression stored under their base key, after
    all other keys of that level. Nested mappings are converted recursively,
    plural grouping never crosses levels. The input is left untouched.

    A plain key equal to the base key of a family is overwritten by the
    plural expression; ``on_collision`` is called with that key when it
    happens.

    :param translations: Parsed translation file, e.g. ``{"hi": "Hi {{name}}"}``
    :param on_collision: Optional callback taking the overwritten key
    :return: New dictionary, e.g. ``{"hi": "Hi {name}"}``
    """
    result: dict = {}
    families: dict[str, PluralFamily] = {}

    for key, value in translations.items():
        plural_key = parse_plural_key(key)
        if plural_key is not None:
            families.setdefault(plural_key.base_key, {})[plural_key.form] = value
            continue
        result[key] = convert_node(value, on_collision=on_collision)

    for base_key, family in families.items():
        if base_key in result and on_collision:
            on_collision(base_key)
        result[base_key] = compile_plural(family)

    return result
