from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


ErrorPath = Literal[
    "aws_error/message",
    "aws_error/code",
    "aws_error/type",
    "aws_error/request_id",
]


class AwsErrorDetails(BaseModel):
    """Service-reported error fields. Blank values are stored as None."""
    model_config = ConfigDict(frozen=True)

    message: Optional[str] = None
    code: Optional[str] = None
    type: Optional[str] = None
    request_id: Optional[str] = None

    @field_validator("message", "code", "type", "request_id", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ErrorContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    # absent when no response was received
    aws_error: Optional[AwsErrorDetails] = None

    def get_path(self, path: ErrorPath) -> Optional[str]:
        branch, _, field = path.partition("/")
        if branch != "aws_error" or field not in AwsErrorDetails.model_fields:
            raise KeyError(f"Unknown error context path: {path!r}")
        if self.aws_error is None:
            return None
        return getattr(self.aws_error, field)


class CommandTransaction(BaseModel):
    """Record of one command execution as seen by the error layer."""
    model_config = ConfigDict(frozen=True)

    operation: Optional[str] = None
    request: Dict[str, Any] = Field(default_factory=dict)
    # raw parsed response; None for networking failures
    response: Optional[Dict[str, Any]] = None
    context: ErrorContext = Field(default_factory=ErrorContext)

    @property
    def status_code(self) -> Optional[int]:
        if not self.response:
            return None
        return self.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
