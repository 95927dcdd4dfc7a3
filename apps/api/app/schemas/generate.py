from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List

from app.services.journal.types import CommitRef, GenerationRequest, GenerationResult

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class CommitIn(CamelModel):
    sha: str = ""
    message: str = ""
    author: str = ""
    date: str = ""

class GenerateRequest(CamelModel):
    # presence is checked by the handler so auth/settings failures win over it
    repository_name: str = ""
    command_type: str = ""
    user_message: str = ""
    commits: List[CommitIn] = []

    def to_domain(self) -> GenerationRequest:
        return GenerationRequest(
            repository_name=self.repository_name,
            command_type=self.command_type,
            user_message=self.user_message,
            commits=[CommitRef(sha=c.sha, message=c.message, author=c.author, date=c.date) for c in self.commits],
        )

class GenerateResponse(CamelModel):
    success: bool = True
    summary: str
    technical_details: str
    full_response: str
    model_used: str

    @classmethod
    def from_result(cls, result: GenerationResult) -> "GenerateResponse":
        return cls(
            summary=result.summary,
            technical_details=result.technical_details,
            full_response=result.full_response_text,
            model_used=result.model_used,
        )

class ErrorResponse(BaseModel):
    error: str
