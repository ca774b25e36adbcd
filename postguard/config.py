"""Engine configuration, optionally loaded from YAML.

Example file::

    pattern_offsets: native
    highlight_overlap: skip
    phrases:
      Financial Violation:
        - double your money
      Misleading Content:
        - last chance

``phrases`` adds to the built-in table; it never removes entries.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from postguard.engine.highlighter import OVERLAP_POLICIES, OVERLAP_SPLICE
from postguard.engine.models import ViolationType
from postguard.engine.patterns import OFFSET_FIRST_OCCURRENCE, OFFSET_MODES
from postguard.engine.trie import PhraseEntry

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "POSTGUARD_CONFIG"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


@dataclass
class EngineConfig:
    extra_phrases: list[PhraseEntry] = field(default_factory=list)
    pattern_offsets: str = OFFSET_FIRST_OCCURRENCE
    highlight_overlap: str = OVERLAP_SPLICE


def load_config(path: str | Path) -> EngineConfig:
    """Load an ``EngineConfig`` from a YAML file."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")

    offsets = data.get("pattern_offsets", OFFSET_FIRST_OCCURRENCE)
    if offsets not in OFFSET_MODES:
        raise ConfigError(
            f"pattern_offsets must be one of {', '.join(OFFSET_MODES)}, got '{offsets}'"
        )

    overlap = data.get("highlight_overlap", OVERLAP_SPLICE)
    if overlap not in OVERLAP_POLICIES:
        raise ConfigError(
            f"highlight_overlap must be one of {', '.join(OVERLAP_POLICIES)}, got '{overlap}'"
        )

    phrase_map = data.get("phrases") or {}
    if not isinstance(phrase_map, dict):
        raise ConfigError(f"phrases must map violation types to phrase lists in {path}")

    extra: list[PhraseEntry] = []
    for label, phrases in phrase_map.items():
        try:
            vtype = ViolationType(label)
        except ValueError:
            raise ConfigError(f"Unknown violation type '{label}' in {path}")
        if phrases is None:
            continue
        if not isinstance(phrases, list):
            raise ConfigError(f"Phrases under '{label}' must be a list in {path}")
        for phrase in phrases:
            if not isinstance(phrase, str) or not phrase.strip():
                raise ConfigError(f"Phrases under '{label}' must be non-empty strings")
            extra.append(PhraseEntry(phrase, vtype))

    logger.debug("Loaded config from %s (%d extra phrase(s))", path, len(extra))
    return EngineConfig(
        extra_phrases=extra,
        pattern_offsets=offsets,
        highlight_overlap=overlap,
    )


def config_from_env() -> Optional[EngineConfig]:
    """Load the config named by ``POSTGUARD_CONFIG``, if set."""
    path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return None
    return load_config(path)
