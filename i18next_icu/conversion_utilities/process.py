# -*- coding: utf-8 -*-
#
# This file is part of i18next-icu.
# Copyright (C) 2025 i18next-icu contributors.
#
# i18next-icu is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Convert translation files on disk."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Union

import yaml

from ..utils import Echo, _echo
from .convert import convert_translations
from .discovery import find_translation_files
from .io import (
    detect_file_format,
    read_translation_file,
    suffix_for_format,
    write_translation_file,
)


@dataclass
class FileResult:
    """Outcome of converting one file."""

    input_path: Path
    success: bool
    output_path: Optional[Path] = None
    in_place: bool = False
    input_format: Optional[str] = None
    output_format: Optional[str] = None
    error: Optional[str] = None


@dataclass
class ProcessSummary:
    """Outcome of converting a batch of files."""

    total: int = 0
    successful: int = 0
    failed: int = 0
    files: list[FileResult] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        """Tell if at least one file could not be converted."""
        return self.failed > 0

    def add(self, result: FileResult) -> None:
        """Count a finished file."""
        if result.success:
            self.successful += 1
        else:
            self.failed += 1


Progress = Optional[Callable[[FileResult, ProcessSummary], None]]


def process_file(
    input_path: Path,
    output_path: Optional[Path] = None,
    *,
    output_format: Optional[str] = None,
    echo: Echo = None,
) -> FileResult:
    """Convert one translation file.

    Read, parse and write errors do not propagate, they are reported in the
    returned result.

    :param input_path: JSON or YAML file to convert
    :param output_path: Destination file, None to overwrite ``input_path``
    :param output_format: ``json`` or ``yaml`` to force the output format,
        the destination suffix is changed to match
    :param echo: Optional callback for warnings
    :return: FileResult with success flag and error message
    """
    input_path = Path(input_path)
    target = Path(output_path) if output_path else input_path
    if output_format:
        target = target.with_suffix(suffix_for_format(output_format))

    def warn_collision(key):
        _echo(
            f"  Warning: plural forms of '{key}' overwrite the plain key '{key}' in {input_path}",
            echo,
            fg="yellow",
        )

    input_format = detect_file_format(input_path)
    try:
        data = read_translation_file(input_path)
        converted = convert_translations(data, on_collision=warn_collision)
        output_format = output_format or detect_file_format(target)
        write_translation_file(target, converted, output_format)
    except (OSError, TypeError, ValueError, yaml.YAMLError) as err:
        return FileResult(
            input_path=input_path,
            success=False,
            input_format=input_format,
            error=str(err),
        )

    return FileResult(
        input_path=input_path,
        success=True,
        output_path=target,
        in_place=target == input_path,
        input_format=input_format,
        output_format=output_format,
    )


def target_path_for(
    file_path: Path, input_path: Union[str, Path], output_directory: Path
) -> Path:
    """Calculate where a converted file goes in the output directory.

    Files found in an input directory keep their path relative to it, files
    given directly or through a pattern keep only their name.
    """
    input_path = Path(input_path)
    if input_path.is_dir():
        relative_path = Path(file_path).relative_to(input_path)
    else:
        relative_path = Path(Path(file_path).name)
    return Path(output_directory) / relative_path


def process_files(
    input_path: Union[str, Path],
    output_directory: Optional[Path] = None,
    *,
    output_format: Optional[str] = None,
    progress: Progress = None,
    jobs: int = 1,
    echo: Echo = None,
) -> ProcessSummary:
    """Convert every translation file found at a path or pattern.

    Files are independent: a failing file is counted and the batch goes on.
    ``progress`` is called once per file, after that file is done. With
    ``jobs`` above one, files are converted on a thread pool and ``progress``
    follows completion order; ``summary.files`` always follows discovery
    order.

    :param input_path: File, directory or glob pattern
    :param output_directory: Where to write, None to convert in place
    :param output_format: ``json`` or ``yaml`` to force the output format
    :param progress: Optional callback taking (result, summary)
    :param jobs: Number of files converted at the same time
    :param echo: Optional callback for warnings
    :return: ProcessSummary of the batch
    :raises NoTranslationFilesError: If no file matches ``input_path``
    """
    files = find_translation_files(input_path)
    summary = ProcessSummary(total=len(files))

    def convert_one(file_path):
        target = (
            target_path_for(file_path, input_path, output_directory)
            if output_directory
            else None
        )
        return process_file(
            file_path, target, output_format=output_format, echo=echo
        )

    def finished(result):
        summary.add(result)
        if progress:
            progress(result, summary)

    if jobs <= 1:
        for file_path in files:
            result = convert_one(file_path)
            summary.files.append(result)
            finished(result)
        return summary

    results: dict[Path, FileResult] = {}
    with ThreadPoolExecutor(max_workers=jobs) as executor:
        futures = {executor.submit(convert_one, path): path for path in files}
        for future in as_completed(futures):
            result = future.result()
            results[futures[future]] = result
            finished(result)

    summary.files = [results[path] for path in files]
    return summary
