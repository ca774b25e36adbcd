"""Pydantic models for API request/response serialization.

These models mirror the postguard engine dataclasses and provide JSON
serialization for the FastAPI endpoints.  Field names and violation labels
match the records stored by downstream consumers.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from postguard.engine.models import ViolationType

# Checks scan the whole input; requests above this size are rejected.
MAX_CONTENT_LENGTH = 100_000


# ---------------------------------------------------------------------------
# Compliance models
# ---------------------------------------------------------------------------


class CheckRequest(BaseModel):
    """Content to check and the platform it is destined for."""

    content: str = Field(..., max_length=MAX_CONTENT_LENGTH, description="Post text (may be empty)")
    platform: str = Field(..., description="Platform id, e.g. 'twitter'")


class ViolationResponse(BaseModel):
    """Mirrors postguard.engine.models.Violation."""

    phrase: str
    type: ViolationType
    position: int = Field(..., ge=0)
    wordPosition: Optional[str] = None
    originalPhrase: Optional[str] = None


class CheckResponse(BaseModel):
    """Mirrors postguard.engine.models.ComplianceResult."""

    isCompliant: bool
    violations: list[ViolationResponse] = Field(default_factory=list)
    riskLevel: str
    summary: str
    highlighted: str = ""


class HighlightRequest(BaseModel):
    """Content plus the violations returned by a previous check."""

    content: str = Field(..., max_length=MAX_CONTENT_LENGTH)
    violations: list[ViolationResponse] = Field(default_factory=list)


class HighlightResponse(BaseModel):
    highlighted: str


class PlatformResponse(BaseModel):
    """Mirrors postguard.engine.platforms.PlatformProfile."""

    platform: str
    maxLength: int
    hashtagsRequired: bool
    contentKinds: list[str] = Field(default_factory=list)
