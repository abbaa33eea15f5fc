#!/usr/bin/env python3
"""
JSON exporter for the syllable dictionary.

Writes dictionary.json in the shape consumed by SyllableDictionary.from_json:
    {
        "hello": {"syllables": ["hel", "lo"], "hyphenated": "hel-lo", "stresses": [0, 2], "isKnown": true},
        ...
    }
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping
from logging import getLogger

from lyricizer.nlp.syllable_service.types import DictionaryEntry

logger = getLogger(__name__)


def entries_to_records(entries: Mapping[str, DictionaryEntry]) -> Dict[str, Dict[str, Any]]:
    """Convert entries to plain dicts for serialization."""
    return {word: entry.to_dict() for word, entry in entries.items()}


def export_json(entries: Mapping[str, DictionaryEntry], json_path: Path, indent: int = 2) -> Path:
    """
    Write entries to a JSON file, replacing any existing file.

    Args:
        entries: Mapping of headword to DictionaryEntry
        json_path: Output file
        indent: JSON indentation (None for compact output)

    Returns:
        Path of the written file
    """
    path = Path(json_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(entries_to_records(entries), f, ensure_ascii=False, indent=indent)

    logger.info(f"Exported {len(entries):,} entries to {path} ({path.stat().st_size / (1024*1024):.2f} MB)")
    return path
