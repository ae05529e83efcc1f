"""Helpers that tidy and shorten generated file summaries."""

from __future__ import annotations

_SKIPPED_PREFIXES = (
    "#",
    "**",
    "-",
    "Here's a breakdown",
    "The following",
    "* ",
)
_SENTENCE_ENDINGS = frozenset(".!?")


def clean_summary(summary: str) -> str:
    """Drop headings, list items and preambles, joining the rest into one line."""
    lines = (line.strip() for line in summary.split("\n"))
    return " ".join(
        line for line in lines if line and not line.startswith(_SKIPPED_PREFIXES)
    )


def truncate_to_sentences(text: str, n: int) -> str:
    """Return the first ``n`` sentences of ``text``, stripped of outer whitespace."""
    count = 0
    end = 0
    for index, char in enumerate(text):
        if char in _SENTENCE_ENDINGS:
            count += 1
            end = index + 1
            if count == n:
                break
    return (text[:end] if end else text).strip()