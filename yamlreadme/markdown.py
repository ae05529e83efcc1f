"""Finding YAML files and reading and writing the markdown overview."""

from __future__ import annotations

import os
import stat
from collections import defaultdict
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

MARKDOWN_FILE_NAME = "yaml_details.md"
MARKDOWN_HEADER = """# YAML File Details

This document provides an overview of all YAML files in the repository, organized by directory, with a brief description of what each file does or configures. Use this as a reference for understanding the purpose of each manifest or configuration file.

---

## How to Use
- Click the file links to jump to the file in the repository.
- Each entry includes a short summary of the file's intent or function.

---

<!--
  To keep this file up to date, add new YAMLs as they are introduced and provide a short description for each.
-->

"""
YAML_SUFFIXES = (".yaml", ".yml")


def _walk(path: str) -> Iterator[str]:
    info = os.lstat(path)
    if not stat.S_ISDIR(info.st_mode):
        if os.path.basename(path).endswith(YAML_SUFFIXES):
            yield path
        return
    for name in sorted(os.listdir(path)):
        yield from _walk(os.path.normpath(os.path.join(path, name)))


def find_yaml_files(directory: str | os.PathLike[str]) -> list[str]:
    """Return every YAML file under ``directory``, in lexical walk order."""
    return list(_walk(os.fspath(directory)))


def group_summaries_by_dir(
    yaml_files: Iterable[str],
    summaries: Mapping[str, str],
    base_dir: str | os.PathLike[str],
) -> dict[str, list[tuple[str, str]]]:
    """Group ``(file name, summary)`` pairs by directory relative to ``base_dir``."""
    grouped: dict[str, list[tuple[str, str]]] = defaultdict(list)
    for path in yaml_files:
        try:
            relative = os.path.relpath(path, base_dir)
        except ValueError:
            relative = ""
        directory = os.path.dirname(relative) or "."
        grouped[directory].append((os.path.basename(path), summaries.get(path, "")))
    return dict(grouped)


def write_markdown_summary(
    base_dir: str | os.PathLike[str],
    grouped: Mapping[str, Iterable[tuple[str, str]]],
) -> Path:
    """Write the overview file into ``base_dir`` and return its path."""
    md_path = Path(base_dir) / MARKDOWN_FILE_NAME
    with md_path.open("w", encoding="utf-8", newline="\n") as out:
        out.write(MARKDOWN_HEADER)
        for directory in sorted(grouped):
            out.write(f"\n## [{directory}/](../{directory}/)\n")
            for name, summary in sorted(grouped[directory], key=lambda entry: entry[0]):
                out.write(f"- [{name}](../{directory}/{name}): {summary}\n")
    return md_path


def read_lines_from_file(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a file without line endings, or an empty list if unreadable."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            return [line.rstrip("\n").removesuffix("\r") for line in handle]
    except OSError:
        return []


def _bracketed(line: str) -> str | None:
    start = line.index("[") + 1
    end = line.find("]")
    return line[start:end] if end > start else None


def parse_summary_lines(lines: Iterable[str]) -> dict[str, str]:
    """Map each ``directory/file`` listed in overview lines to its summary."""
    existing: dict[str, str] = {}
    current_dir = ""
    for line in lines:
        if line.startswith("## [") and "](" in line:
            name = _bracketed(line)
            if name is not None:
                current_dir = name.removesuffix("/")
        elif line.startswith("- [") and "](" in line:
            name = _bracketed(line)
            if name is None or not current_dir:
                continue
            colon = line.find(": ")
            if colon > 0:
                key = os.path.normpath(os.path.join(current_dir, name))
                existing[key] = line[colon + 2 :].strip()
    return existing


def parse_existing_summaries(md_path: str | os.PathLike[str]) -> dict[str, str]:
    """Read the summaries recorded in an existing overview file."""
    return parse_summary_lines(read_lines_from_file(md_path))