"""Boundary records handed to persistence and reporting collaborators."""

from postguard.records.builder import CONTENT_LIMIT, build_record, generate_post_id

__all__ = ["CONTENT_LIMIT", "build_record", "generate_post_id"]
