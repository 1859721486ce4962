# -*- coding: utf-8 -*-
#
# This file is part of i18next-icu.
# Copyright (C) 2025 i18next-icu contributors.
#
# i18next-icu is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Pytest configuration."""

import json

import pytest
import yaml


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON file below tmp_path and return its path."""

    def _write(relative_path, data):
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_yaml(tmp_path):
    """Write a YAML file below tmp_path and return its path."""

    def _write(relative_path, data):
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def locales_dir(tmp_path, write_json, write_yaml):
    """Create a directory with JSON and YAML translation files."""
    write_json(
        "locales/en.json",
        {
            "greeting": "Hello {{name}}!",
            "item_one": "{{count}} item",
            "item_other": "{{count}} items",
        },
    )
    write_json("locales/de/common.json", {"greeting": "Hallo {{name}}!"})
    write_yaml("locales/fr.yaml", {"greeting": "Bonjour {{name}} !"})
    (tmp_path / "locales" / "notes.txt").write_text("not a translation file")
    return tmp_path / "locales"
