"""Best-effort parsing of free-form insight text.

All functions here are pure. A section that cannot be found comes back
empty; parsing never raises on unexpected text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from atomic_analyzer.models.insights import Insights


@dataclass(frozen=True)
class Section:
    field: str
    pattern: str
    is_list: bool


# Order matters only for documentation; headers are matched wherever they appear.
SECTIONS: tuple[Section, ...] = (
    Section("executive_summary", r"EXECUTIVE\s+SUMMARY", is_list=False),
    Section("critical_priorities", r"CRITICAL\s+PRIORITIES", is_list=True),
    Section("quick_wins", r"QUICK\s+WINS", is_list=True),
    Section("strategic_moves", r"STRATEGIC\s+MOVES", is_list=True),
    Section("wisdom", r"(?:PMBA\s+)?WISDOM", is_list=False),
    Section("roadmap", r"(?:90[-\s]DAY\s+)?ROADMAP", is_list=False),
)

_DECOR = r"(?:\*\*|__)?"

# A header line: optional markdown heading, bold and numbering around the
# section name, then an optional parenthetical, then an optional colon with
# inline text.
_HEADER_RE = re.compile(
    r"^\s*(?:#{1,6}\s*)?" + _DECOR + r"\s*(?:\d+[.)]\s*)?" + _DECOR + r"\s*"
    + "(?:" + "|".join(f"(?P<{s.field}>{s.pattern})" for s in SECTIONS) + ")"
    + r"\s*(?:\([^)]*\))?\s*" + _DECOR + r"\s*(?:\([^)]*\))?\s*"
    + r"(?::\s*" + _DECOR + r"\s*(?P<inline>.*?))?\s*$",
    re.IGNORECASE,
)

_LIST_ITEM_RE = re.compile(r"^\s*(?:\d+[.)]|[-•*])\s+(.+?)\s*$")
_MD_HEADING_RE = re.compile(r"^#+\s+(.+)$")


def _match_header(line: str) -> tuple[Section, str] | None:
    """A line carrying inline text after the name is a header only when the
    name is uppercase or the line is decorated as a heading or bold."""
    m = _HEADER_RE.match(line)
    if not m:
        return None
    for section in SECTIONS:
        name = m.group(section.field)
        if not name:
            continue
        inline = m.group("inline") or ""
        if inline:
            prefix = line[: m.start(section.field)]
            decorated = "#" in prefix or "**" in prefix or "__" in prefix
            if not (decorated or name.isupper()):
                return None
        return section, inline
    return None


def split_sections(text: str) -> dict[str, str]:
    """Map each section field found in ``text`` to its body.

    A body runs until the next recognised header. When a header repeats,
    the first occurrence wins.
    """
    bodies: dict[str, list[str]] = {}
    current: list[str] | None = None

    for line in text.splitlines():
        header = _match_header(line)
        if header is not None:
            section, inline = header
            if section.field in bodies:
                current = None
                continue
            current = bodies[section.field] = []
            if inline:
                current.append(inline)
            continue
        if current is not None:
            current.append(line)

    return {name: "\n".join(lines).strip() for name, lines in bodies.items()}


def extract_list_items(text: str) -> list[str]:
    """Lines that start with a numeral or bullet marker, marker stripped."""
    items = []
    for line in text.splitlines():
        m = _LIST_ITEM_RE.match(line)
        if m and m.group(1).strip():
            items.append(m.group(1).strip())
    return items


def parse_insights(text: str) -> Insights:
    bodies = split_sections(text)
    fields: dict[str, object] = {}
    for section in SECTIONS:
        body = bodies.get(section.field, "")
        fields[section.field] = extract_list_items(body) if section.is_list else body
    return Insights(raw_response=text, **fields)


def parse_markdown_sections(markdown: str) -> dict[str, str]:
    """Split markdown on ``#`` headings into ``{heading: body}``."""
    sections: dict[str, str] = {}
    current: str | None = None
    content: list[str] = []

    for line in markdown.split("\n"):
        m = _MD_HEADING_RE.match(line)
        if m:
            if current:
                sections[current] = "\n".join(content).strip()
            current = m.group(1)
            content = []
        else:
            content.append(line)

    if current:
        sections[current] = "\n".join(content).strip()
    return sections
