"""
Syllable Service Package

Provides the read-only pronunciation dictionary used to syllabify lyrics.

Usage:
    from lyricizer.nlp.syllable_service import SyllableDictionary

    dictionary = SyllableDictionary.from_json()
    entry = dictionary.lookup("hello")

    print(entry.syllables)  # ("hel", "lo")
    print(entry.stresses)   # (0, 2)
"""

from .types import (
    DictionaryEntry,
    SyllableRecord,
    SyllableRecordList,
    format_stress_display,
    UNSTRESSED,
    SECONDARY_STRESS,
    PRIMARY_STRESS,
)
from .syllable_service import SyllableDictionary

__all__ = [
    "SyllableDictionary",
    "DictionaryEntry",
    "SyllableRecord",
    "SyllableRecordList",
    "format_stress_display",
    "UNSTRESSED",
    "SECONDARY_STRESS",
    "PRIMARY_STRESS",
]
