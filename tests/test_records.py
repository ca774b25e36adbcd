"""Tests for persistence records built from compliance results."""

import re

from postguard.engine import ComplianceEngine
from postguard.records import CONTENT_LIMIT, build_record, generate_post_id

ENGINE = ComplianceEngine()


def test_record_for_non_compliant_post():
    content = "scam and fraud"
    result = ENGINE.check(content, "twitter")
    record = build_record(content, "twitter", result, post_id="post_1", timestamp="2024-01-01T00:00:00+00:00")

    assert record == {
        "postId": "post_1",
        "platform": "twitter",
        "content": "scam and fraud",
        "status": "Non-Compliant",
        "violationReason": "Inappropriate Content, Inappropriate Content",
        "violations": [v.to_dict() for v in result.violations],
        "riskLevel": "Medium",
        "timestamp": "2024-01-01T00:00:00+00:00",
    }


def test_record_for_compliant_post():
    content = "Team lunch on Friday."
    record = build_record(content, "facebook", ENGINE.check(content, "facebook"))
    assert record["status"] == "Compliant"
    assert record["violationReason"] == "None"
    assert record["violations"] == []
    assert record["riskLevel"] == "Low"
    assert record["postId"].startswith("post_")
    assert record["timestamp"]


def test_record_truncates_content():
    content = "a" * 1200
    record = build_record(content, "facebook", ENGINE.check(content, "facebook"))
    assert len(record["content"]) == CONTENT_LIMIT == 500


def test_generate_post_id_format():
    post_id = generate_post_id()
    assert re.fullmatch(r"post_\d+_[0-9a-z]{9}", post_id)
    assert generate_post_id() != post_id
