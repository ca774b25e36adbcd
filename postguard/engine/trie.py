"""Prefix-tree matcher for banned phrases.

Phrases are stored case-folded.  ``search`` restarts the walk at every
offset of the input, so overlapping matches that begin at different
offsets are all reported; no longest-match preference is applied.
Cost is O(len(text) * longest phrase).
"""

from __future__ import annotations

import logging
import re
from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Iterator, Optional

from postguard.engine.models import Violation, ViolationType

logger = logging.getLogger(__name__)

# Characters that separate words, besides whitespace.
BOUNDARY_PUNCTUATION = frozenset(".,!?;:-()[]{}'\"@#$%^&*+=<>/\\|`~")

_TOKEN_PATTERN = re.compile(r"\S+")


def fold(text: str) -> str:
    """Lower-case *text* one character at a time, keeping its length.

    Characters whose lower-case form is not a single character (e.g. the
    dotted capital I) are left untouched so offsets stay aligned with the
    original text.
    """
    out = []
    for ch in text:
        low = ch.lower()
        out.append(low if len(low) == 1 else ch)
    return "".join(out)


def is_boundary(ch: str) -> bool:
    return ch.isspace() or ch in BOUNDARY_PUNCTUATION


def token_starts(text: str) -> list[int]:
    """Offsets at which each whitespace-delimited token of *text* begins."""
    return [m.start() for m in _TOKEN_PATTERN.finditer(text)]


def word_position(
    text: str, start: int, end: int, starts: Optional[list[int]] = None
) -> str:
    """Describe the span ``text[start:end]`` in 1-based word numbers.

    Pass *starts* from ``token_starts(text)`` when labelling many spans of
    the same text.
    """
    if starts is None:
        starts = token_starts(text)
    words_before = bisect_left(starts, start)
    in_match = len(text[start:end].split()) or 1
    first = words_before + 1
    last = words_before + in_match
    if in_match == 1:
        return f"Word {first}"
    return f"Words {first}-{last}"


@dataclass(frozen=True)
class PhraseEntry:
    """A banned phrase and the label it is reported under."""

    phrase: str
    violation_type: ViolationType


@dataclass
class TrieNode:
    children: dict[str, TrieNode] = field(default_factory=dict)
    terminal: bool = False
    violation_type: Optional[ViolationType] = None


class PhraseTrie:
    """Case-insensitive phrase store with whole-word substring search."""

    def __init__(self, entries: Optional[list[PhraseEntry]] = None) -> None:
        self._root = TrieNode()
        self._size = 0
        for entry in entries or []:
            self.insert(entry.phrase, entry.violation_type)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, phrase: str) -> bool:
        node = self._find(fold(phrase))
        return node is not None and node.terminal

    def _find(self, folded: str) -> Optional[TrieNode]:
        node = self._root
        for ch in folded:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, phrase: str, violation_type: ViolationType) -> None:
        """Add *phrase*; re-inserting an existing phrase replaces its type."""
        if not phrase:
            raise ValueError("Cannot insert an empty phrase")
        if violation_type is None:
            raise ValueError(f"Phrase '{phrase}' needs a violation type")

        node = self._root
        for ch in fold(phrase):
            node = node.children.setdefault(ch, TrieNode())

        if not node.terminal:
            self._size += 1
        node.terminal = True
        node.violation_type = violation_type

    def search(self, text: str) -> list[Violation]:
        """Return every whole-word phrase occurrence in *text*."""
        violations: list[Violation] = []
        folded = fold(text)
        n = len(folded)
        starts = token_starts(text)

        for start in range(n):
            node = self._root
            end = start
            while end < n:
                node = node.children.get(folded[end])
                if node is None:
                    break
                end += 1
                if node.terminal and self._is_whole_word(text, start, end):
                    original = text[start:end]
                    violations.append(
                        Violation(
                            phrase=folded[start:end],
                            violation_type=node.violation_type,
                            position=start,
                            word_position=word_position(text, start, end, starts),
                            original_phrase=original,
                        )
                    )

        logger.debug("Phrase search found %d match(es) in %d chars", len(violations), n)
        return violations

    @staticmethod
    def _is_whole_word(text: str, start: int, end: int) -> bool:
        before_ok = start == 0 or is_boundary(text[start - 1])
        after_ok = end == len(text) or is_boundary(text[end])
        return before_ok and after_ok

    def phrases(self) -> Iterator[PhraseEntry]:
        """Yield stored phrases (folded) in insertion-independent DFS order."""
        stack: list[tuple[str, TrieNode]] = [("", self._root)]
        while stack:
            prefix, node = stack.pop()
            if node.terminal:
                yield PhraseEntry(prefix, node.violation_type)
            for ch in sorted(node.children, reverse=True):
                stack.append((prefix + ch, node.children[ch]))
