# -*- coding: utf-8 -*-
#
# This file is part of i18next-icu.
# Copyright (C) 2025 i18next-icu contributors.
#
# i18next-icu is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""CLI for the i18next to ICU converter."""

from pathlib import Path
from typing import Optional

import rich_click as click
from rich_click import STRING, Choice, IntRange
from rich_click import Path as ClickPath
from rich_click import argument, group, option, secho, version_option

from . import __version__
from .config import I18NEXT_ICU_MAX_LISTED_FILES
from .conversion_utilities.convert import convert_string
from .conversion_utilities.discovery import NoTranslationFilesError
from .conversion_utilities.io import FILE_FORMATS
from .conversion_utilities.process import process_files
from .utils import ensure_directory

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.USE_MARKDOWN = False


@group()
@version_option(__version__, prog_name="i18next-icu")
def i18next_icu():
    """Convert i18next translation files to ICU MessageFormat v1."""


@i18next_icu.command("convert")
@argument("input_path", metavar="INPUT", type=STRING)
@option(
    "--output-directory",
    "-o",
    type=ClickPath(
        exists=False, file_okay=False, dir_okay=True, writable=True, path_type=Path
    ),
    default=None,
    callback=ensure_directory,
    help="Directory for converted files. Default: overwrite input files.",
)
@option(
    "--to",
    "output_format",
    type=Choice(FILE_FORMATS, case_sensitive=False),
    default=None,
    help="Output format. Default: same as each input file.",
)
@option(
    "--jobs",
    "-j",
    type=IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of files converted at the same time.",
)
@option("--quiet", "-q", is_flag=True, help="Only report failures and the summary.")
def convert(
    input_path: str,
    output_directory: Optional[Path],
    output_format: Optional[str],
    jobs: int,
    quiet: bool,
):
    """Convert i18next JSON/YAML translation files to ICU MessageFormat v1.

    INPUT can be a file, a directory (searched recursively for .json, .yaml
    and .yml files) or a glob pattern. Without --output-directory the input
    files are overwritten.

    Examples:
        i18next-icu convert locales/en.json
        i18next-icu convert locales -o icu-locales
        i18next-icu convert 'locales/**/*.yaml' -o icu-locales --to json
    """

    def report_progress(result, summary):
        done = summary.successful + summary.failed
        if not result.success:
            secho(f"Warning: Failed to convert {result.input_path}", fg="yellow")
            secho(f"  Error: {result.error}", fg="red")
        elif not quiet:
            secho(f"Converting files... {done}/{summary.total}", fg="cyan")

    secho("Scanning for translation files...", fg="blue")
    try:
        summary = process_files(
            input_path,
            output_directory,
            output_format=output_format and output_format.lower(),
            progress=report_progress,
            jobs=jobs,
            echo=secho,
        )
    except NoTranslationFilesError as error:
        secho("Conversion failed!", fg="red", bold=True)
        secho(f"Error: {error}", fg="red")
        raise SystemExit(1)

    secho("Conversion complete!", fg="green", bold=True)
    secho("")
    secho("Summary:", bold=True)
    secho(f"Total files:     {summary.total}", fg="cyan")
    secho(f"Successful:      {summary.successful}", fg="green")
    if summary.has_failures:
        secho(f"Failed:          {summary.failed}", fg="red")

    converted = [result for result in summary.files if result.success]
    if converted and not quiet:
        secho("")
        secho("Converted files:", bold=True)
        for result in converted[:I18NEXT_ICU_MAX_LISTED_FILES]:
            if result.in_place:
                secho(f"  {result.input_path} (in-place)")
            else:
                secho(f"  {result.input_path} -> {result.output_path}")
        if len(converted) > I18NEXT_ICU_MAX_LISTED_FILES:
            secho(
                f"  ... and {len(converted) - I18NEXT_ICU_MAX_LISTED_FILES} more",
                dim=True,
            )

    secho("")
    if output_directory:
        secho(f"Mode: Files saved to {output_directory}", fg="cyan")
    elif any(not result.in_place for result in converted):
        secho(
            "Mode: Converted files written next to the originals (originals kept)",
            fg="cyan",
        )
    else:
        secho("Mode: In-place conversion (original files overwritten)", fg="cyan")

    if summary.has_failures:
        raise SystemExit(1)


@i18next_icu.command("convert-string")
@argument("text", type=STRING)
def cmd_convert_string(text: str):
    """Convert a single i18next message string.

    Only placeholders and nesting references are rewritten, plural forms
    need their sibling keys and are handled by the convert command.

    Examples:
        i18next-icu convert-string 'Hello {{name}}, see $t(help.link)'
    """
    secho(convert_string(text))