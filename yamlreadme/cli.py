"""Command line entry point that summarises YAML files into a markdown overview."""

from __future__ import annotations

import argparse
import contextlib
import os
import sys
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from .markdown import (
    MARKDOWN_FILE_NAME,
    find_yaml_files,
    group_summaries_by_dir,
    parse_existing_summaries,
    write_markdown_summary,
)
from .ollama import OllamaClient, OllamaError
from .text import clean_summary, truncate_to_sentences

MODEL_NAME = "llama3.2:latest"
CACHE_DIR_NAME = ".yaml_summary_cache"
SUMMARIZE_PROMPT = (
    "Summarize the purpose of this YAML file in no more than two short, high-level "
    "sentences. Do not include any lists, breakdowns, explanations, advice, notes, or "
    "formatting. Do not use markdown. No newlines. No code sections. Only output a "
    "single, concise summary of the file's purpose, and nothing else. Stop after two "
    "sentences. If you cannot summarize in two sentences, summarize in one: \n"
)
_BAR_LENGTH = 40


class _ChatClient(Protocol):
    def list_models(self) -> list[str]: ...

    def chat(
        self,
        model: str,
        messages: Sequence[Mapping[str, str]],
        options: Mapping[str, Any] | None,
    ) -> str: ...


@dataclass
class ProcessResult:
    """Summaries keyed by file path, with counts of new and reused summaries."""

    summaries: dict[str, str] = field(default_factory=dict)
    processed: int = 0
    skipped: int = 0


def progress_bar(current: int, total: int) -> None:
    """Draw a one-line progress bar on standard output."""
    percent = current / total * 100
    filled = int(_BAR_LENGTH * current / total)
    bar = "=" * filled + " " * (_BAR_LENGTH - filled)
    print(
        f"\rProcessing YAML files: [{bar}] {percent:3.0f}% ({current}/{total})",
        end="",
        flush=True,
    )
    if current == total:
        print()


def summarize_yaml_file(client: _ChatClient, path: str | os.PathLike[str]) -> str:
    """Ask the model for a short summary of one YAML file."""
    try:
        content = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise OSError(f"failed to read {path}: {exc}") from exc
    messages = [{"role": "user", "content": SUMMARIZE_PROMPT + content}]
    try:
        reply = client.chat(MODEL_NAME, messages, {"seed": 42})
    except OllamaError as exc:
        raise OllamaError(f"ollama chat error for {path}: {exc}") from exc
    return truncate_to_sentences(clean_summary(reply), 2)


def write_individual_summary(
    base_dir: str | os.PathLike[str], file_path: str | os.PathLike[str], summary: str
) -> Path:
    """Store one summary in the cache directory under the current working directory."""
    cache_dir = Path.cwd() / CACHE_DIR_NAME
    cache_dir.mkdir(parents=True, exist_ok=True)
    try:
        relative = os.path.relpath(file_path, base_dir)
    except ValueError:
        relative = ".."
    if relative.startswith(".."):
        relative = os.path.basename(file_path)
    cache_path = cache_dir / (relative.replace(os.sep, "_") + ".md")
    cache_path.write_text(summary, encoding="utf-8")
    return cache_path


def process_yaml_files(
    yaml_files: Sequence[str],
    directory: str | os.PathLike[str],
    existing_summaries: Mapping[str, str],
    client: _ChatClient,
    force_regenerate: bool = False,
    local_cache: bool = False,
) -> ProcessResult:
    """Summarise each file, reusing existing summaries unless asked to regenerate."""
    result = ProcessResult()
    total = len(yaml_files)
    for position, path in enumerate(yaml_files, start=1):
        relative = os.path.relpath(path, directory).replace(os.sep, "/")
        cached = existing_summaries.get(relative)
        if not force_regenerate and cached:
            result.summaries[path] = cached
            result.skipped += 1
            progress_bar(position, total)
            continue
        progress_bar(position, total)
        try:
            summary = summarize_yaml_file(client, path)
        except (OSError, OllamaError) as exc:
            print(exc)
            continue
        result.summaries[path] = summary
        if local_cache:
            with contextlib.suppress(OSError):
                write_individual_summary(directory, path, summary)
        result.processed += 1
    return result


def _format_elapsed(seconds: float) -> str:
    total = int(seconds + 0.5)
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{minutes}m{secs}s"
    return f"{secs}s"


def run_summarize_yaml(
    directory: str | os.PathLike[str],
    regenerate: bool = False,
    local_cache: bool = False,
    client: _ChatClient | None = None,
) -> ProcessResult:
    """Summarise all YAML files under ``directory`` and write the overview file."""
    directory = os.fspath(directory)
    yaml_files = find_yaml_files(directory)
    md_path = os.path.join(directory, MARKDOWN_FILE_NAME)
    existing = parse_existing_summaries(md_path)

    with contextlib.ExitStack() as stack:
        if client is None:
            client = stack.enter_context(OllamaClient.from_environment())
        try:
            models = client.list_models()
        except OllamaError as exc:
            raise OllamaError(f"failed to list models: {exc}") from exc
        if MODEL_NAME not in models:
            raise OllamaError(
                f"model {MODEL_NAME} is not available. "
                "Please ensure it is downloaded and available in Ollama"
            )
        start = time.monotonic()
        result = process_yaml_files(
            yaml_files, directory, existing, client, regenerate, local_cache
        )
        elapsed = time.monotonic() - start

    grouped = group_summaries_by_dir(yaml_files, result.summaries, directory)
    try:
        write_markdown_summary(directory, grouped)
    except OSError as exc:
        raise OSError(f"failed to write markdown: {exc}") from exc

    print(f"\nMarkdown summary written to {md_path}")
    print(f"Files processed (new summaries): {result.processed}")
    print(f"Files skipped (already summarized): {result.skipped}")
    print(f"Time elapsed: {_format_elapsed(elapsed)}")
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the summariser and return an exit status."""
    parser = argparse.ArgumentParser(
        prog="summarize-yaml",
        description="Summarize YAML files in a directory using Ollama",
    )
    parser.add_argument("directory")
    parser.add_argument(
        "--regenerate",
        action="store_true",
        help="Regenerate all summaries, even if they already exist in yaml_details.md",
    )
    parser.add_argument(
        "--localcache",
        dest="local_cache",
        action="store_true",
        help=(
            "Write individual summaries to .yaml_summary_cache in the repo root. "
            "Mostly used for debugging or local development."
        ),
    )
    args = parser.parse_args(argv)
    try:
        run_summarize_yaml(
            args.directory, regenerate=args.regenerate, local_cache=args.local_cache
        )
    except (OllamaError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())