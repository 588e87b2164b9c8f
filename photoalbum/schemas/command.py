"""Command Schemas - command-batch request and result envelope.

Invariants:
    - CommandScript.script is non-empty after stripping
    - BatchResultResponse.error is the same envelope body to_response() produces

Design Decisions:
    - Line-count limit enforced in the route from settings, not here: the
      limit is configuration, the schema stays static
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from photoalbum.core.command_interpreter import BatchResult


class CommandScript(BaseModel):
    """A newline-separated command script."""
    script: str = Field(min_length=1, max_length=1_000_000)

    @field_validator("script")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("script cannot be empty or whitespace")
        return v


class BatchResultResponse(BaseModel):
    status: Literal["completed", "halted"]
    commands_executed: int
    lines_read: int
    line_number: int | None = None
    line: str | None = None
    error: dict[str, Any] | None = None

    @classmethod
    def from_result(cls, result: BatchResult) -> "BatchResultResponse":
        return cls(
            status=result.status.value,
            commands_executed=result.commands_executed,
            lines_read=result.lines_read,
            line_number=result.line_number,
            line=result.line,
            error=result.error.to_response()["error"] if result.error else None,
        )
