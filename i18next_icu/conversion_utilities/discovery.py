# -*- coding: utf-8 -*-
#
# This file is part of i18next-icu.
# Copyright (C) 2025 i18next-icu contributors.
#
# i18next-icu is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Discovery helpers for translation files."""

from __future__ import annotations

from glob import glob
from pathlib import Path
from typing import Union

from ..config import I18NEXT_ICU_FILE_EXTENSIONS


class NoTranslationFilesError(RuntimeError):
    """Raised when an input path or pattern matches no translation file."""

    def __init__(self, input_path):
        """Constructor."""
        self.input_path = input_path
        super().__init__(f"No translation files found at: {input_path}")


def is_translation_file(path: Path) -> bool:
    """Check if a file has a JSON or YAML suffix."""
    return path.is_file() and path.suffix.lower() in I18NEXT_ICU_FILE_EXTENSIONS


def is_hidden(relative_path: Path) -> bool:
    """Check if any part of a relative path starts with a dot."""
    return any(part.startswith(".") for part in relative_path.parts)


def find_files_in_directory(directory: Path) -> list[Path]:
    """Find all translation files below a directory.

    Hidden files and anything inside hidden folders (``.git``, ``.cache``)
    are skipped.

    :param directory: Folder to search recursively
    :return: Sorted list of JSON and YAML files
    """
    return sorted(
        path
        for path in directory.rglob("*")
        if not is_hidden(path.relative_to(directory)) and is_translation_file(path)
    )


def find_files_by_pattern(pattern: str) -> list[Path]:
    """Find files matching a glob pattern, ``**`` included.

    :param pattern: Pattern like ``locales/**/*.json``
    :return: Sorted list of matching files, directories excluded
    """
    return sorted(
        Path(match)
        for match in glob(pattern, recursive=True)
        if Path(match).is_file()
    )


def find_translation_files(input_path: Union[str, Path]) -> list[Path]:
    """Resolve a file, a directory or a glob pattern to translation files.

    A file is returned as is, whatever its suffix. A directory is searched
    recursively for ``.json``, ``.yaml`` and ``.yml`` files. Anything else
    is treated as a glob pattern.

    :param input_path: File, directory or pattern
    :return: List of files to convert
    :raises NoTranslationFilesError: If nothing matches
    """
    path = Path(input_path)

    if path.is_file():
        files = [path]
    elif path.is_dir():
        files = find_files_in_directory(path)
    else:
        files = find_files_by_pattern(str(input_path))

    if not files:
        raise NoTranslationFilesError(input_path)

    return files
