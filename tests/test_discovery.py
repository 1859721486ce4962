# -*- coding: utf-8 -*-
#
# This file is part of i18next-icu.
# Copyright (C) 2025 i18next-icu contributors.
#
# i18next-icu is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Test cases for translation file discovery."""

import pytest

from i18next_icu.conversion_utilities.discovery import (
    NoTranslationFilesError,
    find_translation_files,
)


def test_find_single_file(tmp_path):
    """Test that a file is returned whatever its suffix."""
    path = tmp_path / "messages.txt"
    path.write_text("{}")

    assert find_translation_files(path) == [path]
    assert find_translation_files(str(path)) == [path]


def test_find_files_in_directory(locales_dir):
    """Test that directories are searched recursively for JSON and YAML."""
    files = find_translation_files(locales_dir)

    assert files == [
        locales_dir / "de" / "common.json",
        locales_dir / "en.json",
        locales_dir / "fr.yaml",
    ]


def test_find_files_by_pattern(locales_dir):
    """Test that glob patterns are expanded, recursive ones included."""
    assert find_translation_files(str(locales_dir / "*.json")) == [
        locales_dir / "en.json"
    ]
    assert find_translation_files(str(locales_dir / "**" / "*.json")) == [
        locales_dir / "de" / "common.json",
        locales_dir / "en.json",
    ]


def test_pattern_skips_directories(locales_dir):
    """Test that directories matched by a pattern are left out."""
    assert find_translation_files(str(locales_dir / "*")) == [
        locales_dir / "en.json",
        locales_dir / "fr.yaml",
        locales_dir / "notes.txt",
    ]


def test_nothing_found(tmp_path):
    """Test that an empty match raises with the input in the message."""
    missing = tmp_path / "missing"

    with pytest.raises(NoTranslationFilesError, match="No translation files found"):
        find_translation_files(missing)

    (tmp_path / "empty").mkdir()
    with pytest.raises(NoTranslationFilesError) as excinfo:
        find_translation_files(tmp_path / "empty")
    assert excinfo.value.input_path == tmp_path / "empty"


def test_hidden_folders_are_skipped(locales_dir):
    """Test that hidden files and folders below the input are ignored."""
    (locales_dir / ".git").mkdir()
    (locales_dir / ".git" / "config.json").write_text("{}")
    (locales_dir / "de" / ".cache").mkdir()
    (locales_dir / "de" / ".cache" / "de.json").write_text("{}")
    (locales_dir / ".draft.json").write_text("{}")

    assert find_translation_files(locales_dir) == [
        locales_dir / "de" / "common.json",
        locales_dir / "en.json",
        locales_dir / "fr.yaml",
    ]
