"""Build the record a persistence collaborator stores for each check.

The engine never stores anything itself.  Callers hand the record to
whatever store they use and must not let a store failure hide the
``ComplianceResult`` from the user.
"""

from __future__ import annotations

import secrets
import string
import time
from datetime import datetime, timezone
from typing import Optional

from postguard.engine.models import ComplianceResult

CONTENT_LIMIT = 500

_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_post_id() -> str:
    """Return an id like ``post_1718000000000_k3j9x0a1b``."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"post_{int(time.time() * 1000)}_{suffix}"


def build_record(
    content: str,
    platform: str,
    result: ComplianceResult,
    post_id: Optional[str] = None,
    timestamp: Optional[str] = None,
) -> dict:
    labels = [v.label for v in result.violations]
    return {
        "postId": post_id or generate_post_id(),
        "platform": platform,
        "content": content[:CONTENT_LIMIT],
        "status": "Compliant" if result.is_compliant else "Non-Compliant",
        "violationReason": ", ".join(labels) or "None",
        "violations": [v.to_dict() for v in result.violations],
        "riskLevel": result.risk_level.value,
        "timestamp": timestamp or datetime.now(timezone.utc).isoformat(),
    }
