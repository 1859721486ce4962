# -*- coding: utf-8 -*-
#
# This file is part of i18next-icu.
# Copyright (C) 2025 i18next-icu contributors.
#
# i18next-icu is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Reading and writing of JSON and YAML translation files."""

from __future__ import annotations

from collections.abc import Mapping
from json import dumps, load
from pathlib import Path
from typing import Optional

import yaml

from ..config import (
    I18NEXT_ICU_JSON_INDENT,
    I18NEXT_ICU_YAML_EXTENSIONS,
    I18NEXT_ICU_YAML_INDENT,
)

JSON = "json"
YAML = "yaml"
FILE_FORMATS = (JSON, YAML)


class _TranslationLoader(yaml.SafeLoader):
    """Safe loader that keeps dates and timestamps as plain strings."""


_TranslationLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag != "tag:yaml.org,2002:timestamp"
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class _NoAliasDumper(yaml.SafeDumper):
    """Safe dumper that writes repeated values out instead of using anchors."""

    def ignore_aliases(self, data):
        """Never emit ``&anchor``/``*alias`` pairs."""
        return True


def detect_file_format(path: Path) -> str:
    """Return ``yaml`` for ``.yaml``/``.yml`` files and ``json`` otherwise."""
    return YAML if Path(path).suffix.lower() in I18NEXT_ICU_YAML_EXTENSIONS else JSON


def suffix_for_format(file_format: str) -> str:
    """Return the file suffix written for a format."""
    return ".yaml" if file_format == YAML else ".json"


def read_translation_file(path: Path) -> dict:
    """Read a translation file.

    :param path: JSON or YAML file, encoded in UTF-8
    :return: The parsed translation tree
    :raises OSError: If the file cannot be read
    :raises ValueError: If the content is not valid JSON or its root is not
        a mapping
    :raises yaml.YAMLError: If the content is not valid YAML
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as fp:
        if detect_file_format(path) == YAML:
            data = yaml.load(fp, Loader=_TranslationLoader)
            if data is None:
                data = {}
        else:
            data = load(fp)

    if not isinstance(data, Mapping):
        raise ValueError(
            f"Expected a mapping at the root of {path}, got {type(data).__name__}"
        )
    return data


def write_json_file(path: Path, data: Mapping) -> None:
    """Write data to a UTF-8 JSON file, creating parent folders.

    The content is serialized before the file is opened, so a value that
    cannot be written leaves the destination untouched.
    """
    content = dumps(data, indent=I18NEXT_ICU_JSON_INDENT, ensure_ascii=False)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content + "\n", encoding="utf-8")


def write_yaml_file(path: Path, data: Mapping) -> None:
    """Write data to a UTF-8 YAML file, creating parent folders.

    Like :func:`write_json_file`, nothing is written if serializing fails.
    """
    content = yaml.dump(
        data,
        Dumper=_NoAliasDumper,
        indent=I18NEXT_ICU_YAML_INDENT,
        width=float("inf"),
        allow_unicode=True,
        sort_keys=False,
        default_flow_style=False,
    )
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def write_translation_file(
    path: Path, data: Mapping, file_format: Optional[str] = None
) -> None:
    """Write a translation tree in the given format.

    :param path: Destination file
    :param data: Translation tree
    :param file_format: ``json`` or ``yaml``; detected from ``path`` if None
    """
    if (file_format or detect_file_format(path)) == YAML:
        write_yaml_file(path, data)
    else:
        write_json_file(path, data)
