from __future__ import annotations

import re
from typing import List, Optional, Pattern

from app.services.journal.types import JournalSections

# One or two '#' then the section title, alone on its line.
SUMMARY_HEADING = re.compile(r"^#{1,2}\s*Summary\s*$", re.IGNORECASE)
TECHNICAL_HEADING = re.compile(r"^#{1,2}\s*Technical Details\s*$", re.IGNORECASE)


def _find_heading(lines: List[str], pattern: Pattern[str], start: int = 0) -> Optional[int]:
    for i in range(start, len(lines)):
        if pattern.match(lines[i]):
            return i
    return None


def extract_sections(text: str) -> JournalSections:
    """
    Split a model response into its Summary / Technical Details sections.

    - summary: lines after the first Summary heading, up to the next
      Technical Details heading or end of text. Falls back to the whole
      response when there is no Summary heading or its body is empty.
    - technical_details: lines after the first Technical Details heading,
      to end of text. Empty when the heading is missing.
    """
    lines = text.splitlines()

    summary = text
    start = _find_heading(lines, SUMMARY_HEADING)
    if start is not None:
        end = _find_heading(lines, TECHNICAL_HEADING, start + 1)
        body = "\n".join(lines[start + 1:end]).strip()
        if body:
            summary = body

    technical = ""
    tech_start = _find_heading(lines, TECHNICAL_HEADING)
    if tech_start is not None:
        technical = "\n".join(lines[tech_start + 1:]).strip()

    return JournalSections(summary=summary, technical_details=technical)
