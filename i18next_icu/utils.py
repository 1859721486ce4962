# -*- coding: utf-8 -*-
#
# This file is part of i18next-icu.
# Copyright (C) 2025 i18next-icu contributors.
#
# i18next-icu is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""I18next-icu utils."""

from typing import Callable, Optional

Echo = Optional[Callable[[str], None]]


def _echo(message: str, echo: Echo, **kwargs) -> None:
    """Call the provided echo callback if it exists."""
    if echo:
        echo(message, **kwargs)


def ensure_directory(_, __, value):
    """Make sure the directory given to a Click Path option exists."""
    if value:
        value.mkdir(parents=True, exist_ok=True)
    return value
