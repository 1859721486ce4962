# -*- coding: utf-8 -*-
#
# This file is part of i18next-icu.
# Copyright (C) 2025 i18next-icu contributors.
#
# i18next-icu is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Translation conversion, discovery, and file processing utilities.

Utilities for moving translation catalogs from i18next JSON/YAML files to
ICU MessageFormat v1: conversion of parsed trees, discovery of files, and
conversion of files on disk.

CONVERSION  ------
Convert a parsed i18next tree:

.. code-block:: python

    from i18next_icu.conversion_utilities import convert_translations
    convert_translations({
        "greeting": "Hello {{name}}!",
        "item_one": "{{count}} item",
        "item_other": "{{count}} items",
    })
    # {"greeting": "Hello {name}!",
    #  "item": "{count, plural, one{{count} item} other{{count} items}}"}

The conversion:
- rewrites ``{{variable}}`` placeholders to ``{variable}``
- merges ``key_zero``/``key_one``/... siblings into one ICU plural expression
  under ``key``, always using ``count`` as plural argument
- rewrites ``$t(key)`` nesting references to ``[REF:key]`` markers, which
  have to be handled by hand, ICU has no nesting

Numbers, booleans, nulls and lists are kept as they are.

DISCOVERY  ------
Find the files to convert:

.. code-block:: python

    from i18next_icu.conversion_utilities import find_translation_files
    for path in find_translation_files("locales"):
        print(path)

A file, a directory (searched recursively for ``.json``, ``.yaml`` and
``.yml``) or a glob pattern is accepted.

PROCESSING  ------
Convert files on disk, in place or into an output directory:

.. code-block:: python

    from pathlib import Path
    from i18next_icu.conversion_utilities import process_files
    summary = process_files("locales", Path("icu-locales"), output_format="yaml")
    print(summary.successful, summary.failed)

CLI COMMANDS  ------
    - ``convert``: convert files, directories or patterns
    - ``convert-string``: convert a single message string

"""

from __future__ import annotations

from .convert import (
    NodeKind,
    classify_node,
    compile_plural,
    convert_node,
    convert_string,
    convert_translations,
)
from .discovery import NoTranslationFilesError, find_translation_files
from .io import (
    detect_file_format,
    read_translation_file,
    write_json_file,
    write_translation_file,
    write_yaml_file,
)
from .patterns import (
    PluralKey,
    Span,
    find_interpolations,
    find_references,
    parse_plural_key,
)
from .process import (
    FileResult,
    ProcessSummary,
    process_file,
    process_files,
    target_path_for,
)

__all__ = [
    "FileResult",
    "NoTranslationFilesError",
    "NodeKind",
    "PluralKey",
    "ProcessSummary",
    "Span",
    "classify_node",
    "compile_plural",
    "convert_node",
    "convert_string",
    "convert_translations",
    "detect_file_format",
    "find_interpolations",
    "find_references",
    "find_translation_files",
    "parse_plural_key",
    "process_file",
    "process_files",
    "read_translation_file",
    "target_path_for",
    "write_json_file",
    "write_translation_file",
    "write_yaml_file",
]
