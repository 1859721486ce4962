# -*- coding: utf-8 -*-
#
# This file is part of i18next-icu.
# Copyright (C) 2025 i18next-icu contributors.
#
# i18next-icu is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Convert i18next translation files to ICU MessageFormat v1."""

from .conversion_utilities import convert_string, convert_translations

__version__ = "1.0.0"

__all__ = (
    "__version__",
    "convert_string",
    "convert_translations",
)
