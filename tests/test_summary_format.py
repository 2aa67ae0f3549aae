"""Tests for narrative summary sectioning."""

from aurafit.services.summary_format import SummarySection, split_sections
from tests.conftest import SAMPLE_SUMMARY


def test_split_sections_on_headings() -> None:
    sections = split_sections(SAMPLE_SUMMARY)

    assert [section.heading for section in sections] == [
        "🌟 Daily Quest Report",
        "🔬 Weight & Goal Analysis",
        "✨ Pro-Tip Unlocked!",
    ]
    assert sections[2].body == "Drink a glass of water with every meal."


def test_split_sections_keeps_preamble_and_plain_text() -> None:
    assert split_sections("Nice work today!") == [
        SummarySection(heading=None, body="Nice work today!")
    ]
    sections = split_sections("Intro line\n### Tip\nSleep early")

    assert sections[0] == SummarySection(heading=None, body="Intro line")
    assert sections[1] == SummarySection(heading="Tip", body="Sleep early")


def test_split_sections_ignores_other_heading_levels() -> None:
    sections = split_sections("## Big\n#### Small\ntext")

    assert len(sections) == 1
    assert sections[0].heading is None
    assert "## Big" in sections[0].body


def test_split_sections_empty_text() -> None:
    assert split_sections("") == []
