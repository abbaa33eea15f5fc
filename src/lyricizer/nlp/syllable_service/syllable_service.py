#!/usr/bin/env python3
"""
Syllable Dictionary Service

Read-only pronunciation dictionary: lowercase headword -> citation form
(syllables + stresses). Built once, then shared by every resolver.
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Union
from logging import getLogger

from pydantic import ValidationError

from lyricizer.dictionary_generator.lmdb_exporter import LMDBQuery
from lyricizer.nlp.syllable_service.types import DictionaryEntry

logger = getLogger(__name__)


class SyllableDictionary:
    """
    Immutable pronunciation dictionary.

    Features:
    - Loads from the JSON export (dictionary.json) or the LMDB export
    - Entries are frozen models behind a read-only mapping proxy
    - Safe to share across threads: nothing is written after construction

    Usage:
        dictionary = SyllableDictionary.from_json()
        entry = dictionary.lookup("hello")
        # entry.syllables == ("hel", "lo"), entry.stresses == (0, 2)

    For tests, build one from a plain mapping:
        dictionary = SyllableDictionary.from_mapping({
            "hello": {"syllables": ["hel", "lo"], "stresses": [0, 2]},
        })
    """

    DEFAULT_JSON_PATH = Path(__file__).parent / "dictionary.json"
    DEFAULT_LMDB_PATH = Path(__file__).parent / "syllables.lmdb"

    def __init__(self, entries: Mapping[str, DictionaryEntry]):
        """
        Initialize dictionary from validated entries.

        Args:
            entries: Mapping of lowercase headword to DictionaryEntry
        """
        self._entries: Mapping[str, DictionaryEntry] = MappingProxyType(dict(entries))
        logger.debug(f"Syllable dictionary initialized with {len(self._entries):,} entries")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Union[DictionaryEntry, Dict[str, Any]]]) -> "SyllableDictionary":
        """
        Build dictionary from raw records.

        Invalid records (mismatched syllables/stresses, unknown stress levels)
        are skipped with a warning so a partial dictionary stays usable.

        Args:
            data: Mapping of headword to DictionaryEntry or raw dict

        Returns:
            SyllableDictionary
        """
        entries: Dict[str, DictionaryEntry] = {}
        skipped = 0

        for word, record in data.items():
            if isinstance(record, DictionaryEntry):
                entries[word] = record
                continue
            try:
                entries[word] = DictionaryEntry.model_validate(record)
            except ValidationError as e:
                skipped += 1
                logger.warning(f"Skipping invalid dictionary entry '{word}': {e.error_count()} error(s)")

        if skipped:
            logger.warning(f"Skipped {skipped:,} invalid dictionary entries")

        return cls(entries)

    @classmethod
    def from_json(cls, json_path: Optional[Path] = None) -> "SyllableDictionary":
        """
        Load dictionary from JSON export.

        Args:
            json_path: Path to dictionary.json.
                      If None, uses default location next to this module.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(json_path) if json_path is not None else cls.DEFAULT_JSON_PATH

        if not path.exists():
            raise FileNotFoundError(
                f"Syllable dictionary not found at {path}. "
                f"Run generate_db.py to create the dictionary."
            )

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        dictionary = cls.from_mapping(data)
        logger.info(f"Syllable dictionary loaded from {path}: {len(dictionary):,} entries")
        return dictionary

    @classmethod
    def from_lmdb(cls, db_path: Optional[Path] = None) -> "SyllableDictionary":
        """
        Load every entry of an LMDB export into memory.

        Args:
            db_path: Path to LMDB database directory.
                    If None, uses default location next to this module.

        Raises:
            FileNotFoundError: If the database does not exist
        """
        path = Path(db_path) if db_path is not None else cls.DEFAULT_LMDB_PATH

        with LMDBQuery(path) as db:
            dictionary = cls.from_mapping(dict(db.items()))

        logger.info(f"Syllable dictionary loaded from {path}: {len(dictionary):,} entries")
        return dictionary

    @staticmethod
    def normalize_word(word: str) -> str:
        """Normalize word for lookup (headwords are lowercase)."""
        return word.lower()

    def lookup(self, word: str, normalize: bool = False) -> Optional[DictionaryEntry]:
        """
        Look up the citation form of a word.

        Args:
            word: Word to look up (e.g., "hello")
            normalize: Whether to lowercase the word first (default: False)

        Returns:
            DictionaryEntry, or None if not found
        """
        key = self.normalize_word(word) if normalize else word
        return self._entries.get(key)

    @property
    def entries(self) -> Mapping[str, DictionaryEntry]:
        """Read-only view of all entries."""
        return self._entries

    def get_stats(self) -> dict:
        """
        Get dictionary statistics.

        Returns:
            Dictionary with entry counts
        """
        known = sum(1 for entry in self._entries.values() if entry.is_known)
        multi = sum(1 for entry in self._entries.values() if len(entry.syllables) > 1)
        return {
            "entries": len(self._entries),
            "known_entries": known,
            "unknown_entries": len(self._entries) - known,
            "multi_syllable_entries": multi,
        }

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
