# -*- coding: utf-8 -*-
#
# This file is part of i18next-icu.
# Copyright (C) 2025 i18next-icu contributors.
#
# i18next-icu is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Default configuration for i18next-icu."""

I18NEXT_ICU_FILE_EXTENSIONS = (".json", ".yaml", ".yml")
"""Suffixes picked up when a directory is given as input."""

I18NEXT_ICU_YAML_EXTENSIONS = (".yaml", ".yml")
"""Suffixes read and written as YAML. Everything else is JSON."""

I18NEXT_ICU_JSON_INDENT = 2
"""Indentation of written JSON files."""

I18NEXT_ICU_YAML_INDENT = 2
"""Indentation of written YAML files."""

I18NEXT_ICU_PLURAL_VARIABLE = "count"
"""Argument name of every generated ICU plural expression."""

I18NEXT_ICU_MAX_LISTED_FILES = 10
"""Number of converted files listed by the ``convert`` command."""
