"""Compliance router -- content checks, highlighting, and platform listing."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from postguard.engine import ComplianceEngine, Violation
from postguard.records import build_record

from web.backend.app.models.api import (
    CheckRequest,
    CheckResponse,
    HighlightRequest,
    HighlightResponse,
    PlatformResponse,
    ViolationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["compliance"])


def _engine(request: Request) -> ComplianceEngine:
    return request.app.state.engine


def _violation_from_response(v: ViolationResponse) -> Violation:
    return Violation(
        phrase=v.phrase,
        violation_type=v.type,
        position=v.position,
        word_position=v.wordPosition,
        original_phrase=v.originalPhrase,
    )


@router.post(
    "/api/check",
    response_model=CheckResponse,
    summary="Check content against compliance rules",
)
async def check_content(body: CheckRequest, request: Request):
    """Run every checker over the content for the given platform.

    When a record sink is configured on the app, the check is handed to it;
    sink failures are logged and never affect the response.
    """
    engine = _engine(request)
    result = engine.check(body.content, body.platform)

    sink = getattr(request.app.state, "record_sink", None)
    if sink is not None:
        try:
            sink(build_record(body.content, body.platform, result))
        except Exception:
            logger.warning("Record sink failed; returning result anyway", exc_info=True)

    return CheckResponse(
        isCompliant=result.is_compliant,
        violations=[ViolationResponse(**v.to_dict()) for v in result.violations],
        riskLevel=result.risk_level.value,
        summary=result.summary,
        highlighted=engine.highlight(body.content, result.violations, escape=True),
    )


@router.post(
    "/api/highlight",
    response_model=HighlightResponse,
    summary="Annotate content with violation markers",
)
async def highlight_content(body: HighlightRequest, request: Request):
    violations = [_violation_from_response(v) for v in body.violations]
    highlighted = _engine(request).highlight(body.content, violations, escape=True)
    return HighlightResponse(highlighted=highlighted)


@router.get(
    "/api/platforms",
    response_model=list[PlatformResponse],
    summary="List supported platforms",
)
async def list_platforms(request: Request):
    return [
        PlatformResponse(
            platform=p.platform,
            maxLength=p.max_length,
            hashtagsRequired=p.hashtags_required,
            contentKinds=list(p.content_kinds),
        )
        for p in _engine(request).platforms.platforms()
    ]
