#!/usr/bin/env python3
"""
Word Resolution for Lyrics Pipeline

Resolves a single alphabetic word (no hyphens) to syllables and stresses
by dictionary lookup. Words missing from the dictionary are retried with a
fixed list of inflectional suffixes stripped; the first suffix whose base
is a headword wins and rebuilds the syllables from the base entry.

Suffix table (checked in this order):
    s    songs      -> song + s       ["songs"]            no new syllable
    es   boxes      -> box + es       ["box", "es"]
    ed   jumped     -> jump + ed      ["jump", "ed"]
    ing  renewing   -> renew + ing    ["re", "new", "ing"]
    ly   brightly   -> bright + ly    ["bright", "ly"]
    d    translated -> translate + d  ["trans", "lat", "ed"] elided e

Usage:
    from lyricizer.nlp.pipeline.word_resolver import WordResolver

    resolver = WordResolver(dictionary)
    record = resolver.resolve("Singing", suffix="!")
    print(record.hyphenated)  # "Sing-ing!"
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple
from logging import getLogger

from lyricizer.nlp.syllable_service import (
    DictionaryEntry,
    SyllableDictionary,
    SyllableRecord,
    UNSTRESSED,
)
from lyricizer.nlp.pipeline.case_reconciler import preserve_case

logger = getLogger(__name__)


@dataclass(frozen=True)
class Derivation:
    """Syllable data for a word before case and punctuation are reapplied."""
    syllables: List[str]
    hyphenated: str
    stresses: List[int]

    @classmethod
    def from_entry(cls, entry: DictionaryEntry) -> "Derivation":
        return cls(list(entry.syllables), entry.hyphenated, list(entry.stresses))


@dataclass(frozen=True)
class SuffixRule:
    """
    One row of the suffix table.

    Attributes:
        suffix: Ending stripped from the word to find the base headword
        syllable: Syllable appended for the suffix, None if the suffix
                  does not add one
        rebuild: Callable(word, base_entry, rule) -> Derivation
    """
    suffix: str
    syllable: Optional[str]
    rebuild: Callable[[str, DictionaryEntry, "SuffixRule"], Derivation]

    def base_of(self, word: str) -> Optional[str]:
        """Base headword candidate, or None if the word lacks this ending."""
        if not word.endswith(self.suffix):
            return None
        return word[:-len(self.suffix)]


def _merge_plural_s(word: str, entry: DictionaryEntry, rule: SuffixRule) -> Derivation:
    """song -> songs: the s joins the last syllable."""
    syllables = list(entry.syllables[:-1]) + [entry.syllables[-1] + rule.suffix]
    return Derivation(syllables, entry.hyphenated + rule.suffix, list(entry.stresses))


def _append_syllable(word: str, entry: DictionaryEntry, rule: SuffixRule) -> Derivation:
    """sing -> singing: the suffix becomes a new unstressed syllable."""
    syllables = list(entry.syllables) + [rule.syllable]
    return Derivation(syllables, "-".join(syllables), list(entry.stresses) + [UNSTRESSED])


def _split_elided_e(word: str, entry: DictionaryEntry, rule: SuffixRule) -> Derivation:
    """
    translate -> translated: drop the base's final letter and add an 'ed'
    syllable. Only when the word really ends in -ed; any other trailing d
    reuses the base entry unchanged.
    """
    if not word.endswith("ed"):
        return Derivation.from_entry(entry)

    syllables = list(entry.syllables[:-1]) + [entry.syllables[-1][:-1], "ed"]
    hyphenated = entry.hyphenated[:-1] + "-ed"
    return Derivation(syllables, hyphenated, list(entry.stresses) + [UNSTRESSED])


SUFFIX_RULES: Tuple[SuffixRule, ...] = (
    SuffixRule("s", None, _merge_plural_s),
    SuffixRule("es", "es", _append_syllable),
    SuffixRule("ed", "ed", _append_syllable),
    SuffixRule("ing", "ing", _append_syllable),
    SuffixRule("ly", "ly", _append_syllable),
    SuffixRule("d", None, _split_elided_e),
)


class WordResolver:
    """
    Resolves one word against the syllable dictionary.

    Strategy:
    1. Direct lookup of the lowercased word
    2. Suffix stripping in SUFFIX_RULES order, first base found wins
    3. Fallback: the word itself as one unstressed, unknown syllable

    Never raises: every word yields a record.
    """

    def __init__(
        self,
        dictionary: SyllableDictionary,
        suffix_rules: Sequence[SuffixRule] = SUFFIX_RULES,
    ):
        """
        Initialize resolver with dictionary.

        Args:
            dictionary: Read-only pronunciation dictionary
            suffix_rules: Ordered suffix table (default: SUFFIX_RULES)
        """
        self.dictionary = dictionary
        self.suffix_rules = tuple(suffix_rules)
        logger.debug("WordResolver initialized")

    def resolve(self, original: str, prefix: str = "", suffix: str = "") -> SyllableRecord:
        """
        Resolve a word to its syllable record.

        Args:
            original: Word as written, letters only (e.g., "Singing")
            prefix: Leading punctuation to reattach
            suffix: Trailing punctuation to reattach

        Returns:
            SyllableRecord with case and punctuation reapplied
        """
        word = original.lower()

        if not word:
            decorated = prefix + original + suffix
            return SyllableRecord(syllables=[decorated], hyphenated=decorated, stresses=[UNSTRESSED], is_known=False)

        derivation = self.derive(word)

        if derivation is None:
            logger.debug(f"Unknown word: '{original}'")
            return SyllableRecord(
                syllables=[original],
                hyphenated=prefix + original + suffix,
                stresses=[UNSTRESSED],
                is_known=False,
            )

        return SyllableRecord(
            syllables=derivation.syllables,
            hyphenated=prefix + preserve_case(original, derivation.hyphenated, word) + suffix,
            stresses=derivation.stresses,
            is_known=True,
        )

    def derive(self, word: str) -> Optional[Derivation]:
        """
        Find syllable data for a lowercase word.

        Args:
            word: Lowercase word without hyphens

        Returns:
            Derivation from a direct or suffix-stripped hit, or None
        """
        entry = self.dictionary.lookup(word)
        if entry is not None:
            return Derivation.from_entry(entry)

        for rule in self.suffix_rules:
            base = rule.base_of(word)
            if base is None:
                continue

            entry = self.dictionary.lookup(base)
            if entry is None:
                continue

            logger.debug(f"Suffix match for '{word}': base='{base}' suffix='-{rule.suffix}'")
            return rule.rebuild(word, entry, rule)

        return None
