"""Per-platform length and hashtag constraints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from postguard.engine.models import Violation, ViolationType


@dataclass(frozen=True)
class PlatformProfile:
    platform: str
    max_length: int
    hashtags_required: bool = False
    content_kinds: tuple[str, ...] = ()


DEFAULT_PROFILES: tuple[PlatformProfile, ...] = (
    PlatformProfile("instagram", 2200, False, ("image", "video", "story")),
    PlatformProfile("twitter", 280, False, ("text", "image", "video")),
    PlatformProfile("facebook", 63206, False, ("text", "image", "video", "link")),
    PlatformProfile("linkedin", 3000, True, ("text", "image", "video", "document")),
    PlatformProfile("tiktok", 150, True, ("video",)),
    PlatformProfile("ad-campaign", 1000, False, ("text", "image", "video")),
    PlatformProfile("email-marketing", 5000, False, ("text", "image", "html")),
)


class PlatformRules:
    """Lookup table of platform profiles.  Identifiers are case-sensitive."""

    def __init__(self, profiles: tuple[PlatformProfile, ...] = DEFAULT_PROFILES) -> None:
        self._profiles = {p.platform: p for p in profiles}

    def __contains__(self, platform: str) -> bool:
        return platform in self._profiles

    def get(self, platform: str) -> Optional[PlatformProfile]:
        return self._profiles.get(platform)

    def platforms(self) -> list[PlatformProfile]:
        return list(self._profiles.values())

    def validate(self, content: str, platform: str) -> list[Violation]:
        profile = self._profiles.get(platform)
        if profile is None:
            return [Violation("Unknown Platform", ViolationType.PLATFORM_ERROR, 0)]

        violations: list[Violation] = []
        if len(content) > profile.max_length:
            violations.append(
                Violation(
                    f"Content too long ({len(content)}/{profile.max_length} characters)",
                    ViolationType.LENGTH,
                    profile.max_length,
                )
            )
        if profile.hashtags_required and "#" not in content:
            violations.append(
                Violation("Missing required hashtags", ViolationType.HASHTAG, 0)
            )
        return violations
