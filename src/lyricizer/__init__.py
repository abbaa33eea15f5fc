"""
Lyricizer

Syllabifies song lyrics with per-syllable stress for melody fitting and
karaoke-style display.

Usage:
    from lyricizer import LyricsPipeline, SyllableDictionary

    pipeline = LyricsPipeline(SyllableDictionary.from_json())
    for record in pipeline.resolve("Hello, world!"):
        print(record.hyphenated, record.stresses, record.is_known)
"""

from lyricizer.nlp.syllable_service import (
    DictionaryEntry,
    SyllableDictionary,
    SyllableRecord,
    format_stress_display,
)
from lyricizer.nlp.tokenization_service import LyricsTokenizationService, TokenData
from lyricizer.nlp.pipeline import LyricsDocument, LyricsPipeline, WordResolver, lyricize

__all__ = [
    "DictionaryEntry",
    "SyllableDictionary",
    "SyllableRecord",
    "format_stress_display",
    "LyricsTokenizationService",
    "TokenData",
    "LyricsDocument",
    "LyricsPipeline",
    "WordResolver",
    "lyricize",
]

__version__ = "1.0.0"
