#!/usr/bin/env python3
"""
Lyrics Syllabification Pipeline

Turns lyric text into per-token syllable data:
1. Tokenization - whitespace split + prefix/suffix/core isolation
2. Compound splitting - hyphenated cores resolved part by part
3. Word resolution - dictionary lookup with suffix stripping
4. Case reconciliation - original casing reapplied to the hyphenated form

Usage:
    from lyricizer.nlp.pipeline import LyricsPipeline

    pipeline = LyricsPipeline(dictionary)
    for record in pipeline.resolve("Let the cymbals resound today,"):
        print(f"{record.hyphenated} {record.stresses}")
"""

from typing import List, Optional
from pathlib import Path
from logging import getLogger

from pydantic import BaseModel, Field

from lyricizer.nlp.tokenization_service import LyricsTokenizationService, TokenData
from lyricizer.nlp.syllable_service import SyllableDictionary, SyllableRecord, UNSTRESSED
from lyricizer.nlp.pipeline.word_resolver import WordResolver
from lyricizer.nlp.pipeline.case_reconciler import preserve_case

logger = getLogger(__name__)


class LyricsDocument(BaseModel):
    """Resolution result for a whole text, with coverage statistics."""

    text: str
    words: List[SyllableRecord] = Field(default_factory=list)

    total_tokens: int = 0
    words_processed: int = 0
    words_known: int = 0
    syllable_count: int = 0

    @property
    def known_coverage(self) -> float:
        """Percentage of non-empty tokens resolved against the dictionary."""
        if self.words_processed == 0:
            return 0.0
        return (self.words_known / self.words_processed) * 100

    @property
    def hyphenated_text(self) -> str:
        """Hyphenated forms joined by single spaces."""
        return " ".join(record.hyphenated for record in self.words)


class LyricsPipeline:
    """
    Complete lyrics syllabification pipeline.

    The dictionary is injected (or loaded once from `dictionary_path`) and
    only read afterwards, so one pipeline can serve concurrent callers.
    Nothing is cached between calls.

    Example:
        pipeline = LyricsPipeline(SyllableDictionary.from_json())
        records = pipeline.resolve("life-renewing")
        # records[0].syllables == ["life", "re", "new", "ing"]
    """

    def __init__(
        self,
        dictionary: Optional[SyllableDictionary] = None,
        dictionary_path: Optional[Path] = None,
    ):
        """
        Initialize pipeline with all services.

        Args:
            dictionary: Prebuilt dictionary. If None, loads the JSON export
            dictionary_path: Path to dictionary.json (default: packaged location)
        """
        if dictionary is None:
            dictionary = SyllableDictionary.from_json(dictionary_path)

        self.dictionary = dictionary
        self.tokenizer = LyricsTokenizationService()
        self.word_resolver = WordResolver(dictionary)

        logger.info(f"Pipeline ready: {len(dictionary):,} dictionary entries")

    def resolve(self, text: str) -> List[SyllableRecord]:
        """
        Resolve every whitespace-delimited token of the text.

        Args:
            text: Lyric text

        Returns:
            One SyllableRecord per token, in input order. Whitespace artifacts
            (leading/trailing separators, empty input) give empty records.
        """
        return [self.resolve_token(token) for token in self.tokenizer.tokenize(text)]

    def process(self, text: str) -> LyricsDocument:
        """
        Resolve text and collect coverage statistics.

        Args:
            text: Lyric text

        Returns:
            LyricsDocument with records and statistics
        """
        words = self.resolve(text)
        processed = [record for record in words if not record.is_empty]

        result = LyricsDocument(
            text=text,
            words=words,
            total_tokens=len(words),
            words_processed=len(processed),
            words_known=sum(1 for record in processed if record.is_known),
            syllable_count=sum(record.syllable_count for record in words),
        )

        logger.debug(
            f"Pipeline complete: {result.total_tokens} tokens, "
            f"{result.known_coverage:.1f}% dictionary coverage"
        )

        return result

    def resolve_token(self, token: TokenData) -> SyllableRecord:
        """
        Resolve one decorated token.

        Args:
            token: Token from the tokenization service

        Returns:
            SyllableRecord for the token
        """
        if token.is_empty:
            return SyllableRecord()

        if not token.has_core:
            return SyllableRecord(
                syllables=[token.text],
                hyphenated=token.text,
                stresses=[UNSTRESSED],
                is_known=False,
            )

        if token.is_compound:
            return self._resolve_compound(token)

        return self.word_resolver.resolve(token.core, token.prefix, token.suffix)

    def _resolve_compound(self, token: TokenData) -> SyllableRecord:
        """
        Resolve a hyphenated core part by part and recombine.

        Parts are resolved without decoration; the token's prefix and suffix
        wrap the combined result. The compound is known only if every part is.
        """
        part_records = [self.word_resolver.resolve(part) for part in token.parts]

        syllables: List[str] = []
        stresses: List[int] = []
        for record in part_records:
            syllables.extend(record.syllables)
            stresses.extend(record.stresses)

        combined = "-".join(record.hyphenated for record in part_records)

        return SyllableRecord(
            syllables=syllables,
            hyphenated=token.prefix + preserve_case(token.text, combined, token.core) + token.suffix,
            stresses=stresses,
            is_known=all(record.is_known for record in part_records),
        )

    def close(self):
        """Release resources (the in-memory dictionary needs none)."""
        logger.debug("Pipeline closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


# Convenience function
def lyricize(text: str, dictionary: Optional[SyllableDictionary] = None) -> List[SyllableRecord]:
    """
    Quick syllabification of lyric text.

    Args:
        text: Lyric text
        dictionary: Dictionary to use (default: packaged JSON export)

    Returns:
        One SyllableRecord per whitespace-delimited token
    """
    with LyricsPipeline(dictionary) as pipeline:
        return pipeline.resolve(text)
