from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from app.services.journal.types import CommitRef, GenerationRequest

DEFAULT_SYSTEM_PROMPT = """You are an expert technical writer helping developers document their coding sessions.

**Task:**
Generate a concise, professional development journal entry with the following sections:

## Summary
(2-3 sentences)
- What was accomplished in this session
- Key changes made
- Why this work was important

## Technical Details
(3-5 bullet points)
- Specific files modified
- Methods/functions added or changed
- Technologies or libraries used
- Architecture decisions made

**Guidelines:**
- Be specific and factual, not generic
- Use technical terminology appropriate to the codebase
- Focus on "why" decisions were made, not just "what" changed
- Keep tone professional but conversational
- Limit total response to 300-400 words

**Output Format:** Markdown. Start each section with a heading line that is exactly "## Summary" or "## Technical Details"."""

NO_COMMITS_LINE = "No commits provided"


def format_commit_date(value: str) -> str:
    """
    Calendar date (YYYY-MM-DD) of an ISO-8601 timestamp, taken in the
    timestamp's own offset. Unparseable input is returned as given.
    """
    raw = (value or "").strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(raw).date().isoformat()
    except ValueError:
        return value


def format_commit_line(commit: CommitRef) -> str:
    return f"- {commit.message} (by {commit.author} on {format_commit_date(commit.date)})"


def render_commit_log(commits: List[CommitRef]) -> str:
    if not commits:
        return NO_COMMITS_LINE
    return "\n".join(format_commit_line(c) for c in commits)


def build_prompt(request: GenerationRequest, template: str, custom_prompt: Optional[str] = None) -> str:
    system_prompt = custom_prompt if custom_prompt and custom_prompt.strip() else template

    return f"""{system_prompt}

**Context:**
The developer worked on: {request.repository_name}
Session type: {request.command_type}
Developer's note: {request.user_message}

**Recent commits:**
{render_commit_log(request.commits)}

Generate the development journal entry now:"""
