from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class CommitRef:
    sha: str
    message: str
    author: str
    date: str  # ISO-8601


@dataclass
class GenerationRequest:
    repository_name: str
    command_type: str  # development | maintenance | planning
    user_message: str
    commits: List[CommitRef] = field(default_factory=list)


@dataclass
class GenerationSettings:
    """Per-user settings, as read from the settings store."""
    api_key: Optional[str]
    model_name: Optional[str] = None
    custom_prompt: Optional[str] = None


@dataclass
class JournalSections:
    summary: str
    technical_details: str


@dataclass
class GenerationResult:
    summary: str
    technical_details: str
    full_response_text: str
    model_used: str
