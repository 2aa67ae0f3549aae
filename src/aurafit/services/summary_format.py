"""Cosmetic structuring of the coach's narrative summary.

The narrative is opaque text. Splitting it into sections only helps a client
style headings; nothing here feeds back into totals, goals or control flow.
"""

import re
from dataclasses import dataclass

_HEADING = re.compile(r"^###\s+(.*\S)\s*$")


@dataclass(frozen=True)
class SummarySection:
    """A heading and the body text that follows it."""

    heading: str | None
    body: str


def split_sections(text: str) -> list[SummarySection]:
    """Split markdown text on level-three headings.

    Text before the first heading becomes a section with no heading.
    """
    sections: list[SummarySection] = []
    heading: str | None = None
    body: list[str] = []
    for line in text.splitlines():
        match = _HEADING.match(line.strip())
        if match:
            if heading is not None or _joined(body):
                sections.append(SummarySection(heading=heading, body=_joined(body)))
            heading = match.group(1)
            body = []
            continue
        body.append(line)
    if heading is not None or _joined(body):
        sections.append(SummarySection(heading=heading, body=_joined(body)))
    return sections


def _joined(lines: list[str]) -> str:
    return "\n".join(lines).strip()
