import pytest

from yamlreadme.text import clean_summary, truncate_to_sentences


@pytest.mark.parametrize(
    ("text", "n", "expected"),
    [
        ("This is one. This is two. This is three.", 2, "This is one. This is two."),
        ("One! Two? Three.", 2, "One! Two?"),
        ("No period here", 2, "No period here"),
        ("Sentence one. Sentence two.", 1, "Sentence one."),
    ],
)
def test_truncate_to_sentences(text, n, expected):
    assert truncate_to_sentences(text, n) == expected


def test_truncate_with_fewer_sentences_than_requested():
    assert truncate_to_sentences("  One. Two.  ", 5) == "One. Two."


def test_truncate_strips_surrounding_whitespace_without_terminator():
    assert truncate_to_sentences("   plain text   ", 2) == "plain text"


def test_clean_summary_drops_markup_lines():
    raw = (
        "# Heading\n"
        "This file deploys the app.\n"
        "\n"
        "- a list item\n"
        "**Bold note**\n"
        "* bullet\n"
        "Here's a breakdown of it\n"
        "The following keys exist\n"
        "   It sets replicas.   \n"
    )
    assert clean_summary(raw) == "This file deploys the app. It sets replicas."


def test_clean_summary_only_markup_gives_empty_string():
    assert clean_summary("# Title\n- item\n\n**x**") == ""


def test_clean_summary_keeps_star_without_space():
    assert clean_summary("*emphasis* stays") == "*emphasis* stays"