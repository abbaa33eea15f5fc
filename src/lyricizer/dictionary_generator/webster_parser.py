#!/usr/bin/env python3
"""
Webster Wordlist Parser

Parses the pronunciation-marked Webster's Unabridged Dictionary text
(Project Gutenberg #29765) into syllable dictionary entries.

Input Format:
    HELLO
    Hel*lo", interj. & n.

    CYMBAL
    Cym"bal, n. Etym: [F. cymbale, L. cymbalum...]

    LIFE-GIVING
    Life"-giv`ing, a.

Markers split syllables and carry the stress of the syllable they follow:
    "  primary stress (2)
    `  secondary stress (1)
    *  unstressed (0)
    -  unstressed (0)

Output: Dict[str, DictionaryEntry]
    {
        "hello": DictionaryEntry(syllables=("hel", "lo"), stresses=(0, 2)),
        "cymbal": DictionaryEntry(syllables=("cym", "bal"), stresses=(2, 0)),
        "life-giving": DictionaryEntry(syllables=("life", "giv", "ing"), stresses=(2, 0, 1)),
        "lifegiving": <same entry>
    }
"""

import re
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple
from logging import getLogger

from lyricizer.nlp.syllable_service.types import DictionaryEntry, UNSTRESSED

logger = getLogger(__name__)


# Part-of-speech, etymology and definition markers ending the pronunciation
PRONUNCIATION_MARKERS = (
    " n.", " a.", " v.", " adj.", " adv.", " p.", " interj.",
    " Etym:", " Defn:", " [L.", " [Gr.", " [F.", " [NL.",
    " (Bot.", " (Zoöl.", " (Chem.", " fr.",
    ", n.", ", a.", ", v.", ", adj.", ", adv.", ", p.", ", interj.",
    ", Etym:", ", Defn:", ", [L.", ", [Gr.", ", [F.", ", [NL.",
    ", (Bot.", ", (Zoöl.", ", (Chem.", ", fr.",
    ";", ".",
)

STRESS_MARKS = {
    '"': 2,
    "`": 1,
    "*": 0,
    "-": 0,
}

MARK_RE = re.compile(r'[*"`-]')
FORM_CHARS_RE = re.compile(r'[^a-zA-Z*"`-]')
PLAIN_CHARS_RE = re.compile(r"[^a-zA-Z-]")
NUMERIC_LINE_RE = re.compile(r"^\d+$")
PARENTHETICAL_RE = re.compile(r"\(.*?\)")

DIACRITICS = str.maketrans({"ë": "e", "é": "e", "ö": "o"})


class WebsterParser:
    """
    Parser for the Webster pronunciation wordlist.

    Responsibilities:
    - Detect headword lines and split multi-headword entries
    - Isolate pronunciation variants from the following line
    - Convert marked forms into syllables and stresses
    - Degrade to unknown single-syllable entries instead of failing
    """

    @staticmethod
    def is_headword_line(line: str) -> bool:
        """Fully uppercase, non-numeric, non-empty line."""
        return bool(line) and line == line.upper() and not NUMERIC_LINE_RE.match(line)

    @staticmethod
    def split_headwords(line: str) -> List[str]:
        """
        Split a headword line into lowercase headwords.

        Multi-word entries (spaces, apostrophes) are dropped; hyphens are kept.

        Example:
            "COLOR; COLOUR"  ->  ["color", "colour"]
        """
        headwords = [word.strip().lower() for word in line.split(";")]
        return [word for word in headwords if word and " " not in word and "'" not in word]

    @staticmethod
    def extract_pronunciations(pron_line: str) -> List[str]:
        """
        Isolate pronunciation variants at the start of a pronunciation line.

        Args:
            pron_line: Line following a headword (e.g., 'Col"or, n. ...')

        Returns:
            Comma-separated variants found before the first marker,
            with parenthetical alternates removed
        """
        cut = None
        for marker in PRONUNCIATION_MARKERS:
            idx = pron_line.find(marker)
            if idx > 0 and (cut is None or idx < cut):
                cut = idx

        head = pron_line[:cut].strip() if cut is not None else pron_line.strip()
        if head.endswith(","):
            head = head[:-1].strip()

        head = PARENTHETICAL_RE.sub("", head).strip()
        return [part.strip() for part in head.split(",") if part.strip()]

    @staticmethod
    def normalize_form(form: str) -> str:
        """Fold the diacritics used in the wordlist (ë, é → e; ö → o)."""
        return form.translate(DIACRITICS)

    @staticmethod
    def parse_form(form: str) -> DictionaryEntry:
        """
        Convert one pronunciation form into a dictionary entry.

        Args:
            form: Marked form (e.g., 'Hel*lo"') or plain word

        Returns:
            DictionaryEntry. Forms without markers become a single
            unstressed syllable with is_known=False.

        Raises:
            ValueError: If the form yields no syllables
        """
        normalized = WebsterParser.normalize_form(form)

        if not MARK_RE.search(normalized):
            plain = PLAIN_CHARS_RE.sub("", normalized).lower()
            if not plain:
                raise ValueError(f"No letters in form {form!r}")
            return DictionaryEntry(syllables=(plain,), stresses=(UNSTRESSED,), is_known=False)

        cleaned = FORM_CHARS_RE.sub("", normalized)
        syllables = [syllable for syllable in MARK_RE.split(cleaned.lower()) if syllable]
        if not syllables:
            raise ValueError(f"Malformed pronunciation form {form!r}")

        stresses = [STRESS_MARKS[mark] for mark in MARK_RE.findall(cleaned)]
        # Pad unmarked trailing syllables, drop surplus marks
        stresses = (stresses + [UNSTRESSED] * len(syllables))[:len(syllables)]

        return DictionaryEntry(
            syllables=tuple(syllables),
            stresses=tuple(stresses),
            hyphenated="-".join(syllables),
            is_known=True,
        )

    @staticmethod
    def unknown_entry(word: str) -> Optional[DictionaryEntry]:
        """Single unstressed syllable for a headword without usable pronunciation."""
        plain = PLAIN_CHARS_RE.sub("", WebsterParser.normalize_form(word)).replace("-", "").lower()
        if not plain:
            return None
        return DictionaryEntry(syllables=(plain,), stresses=(UNSTRESSED,), is_known=False)

    def _store(self, result: Dict[str, DictionaryEntry], word: str, form: Optional[str]) -> None:
        """
        Parse and store an entry under the headword and its unhyphenated form.

        Headwords without a form are parsed from the headword itself.
        """
        source = form if form is not None else word
        try:
            entry = self.parse_form(source)
        except ValueError as e:
            logger.warning(f"Failed to parse form {source!r} for '{word}': {e}")
            entry = self.unknown_entry(word)
            if entry is None:
                logger.warning(f"Skipping headword without letters: '{word}'")
                return

        result[word] = entry

        unhyphenated = word.replace("-", "")
        if unhyphenated != word:
            result[unhyphenated] = entry

    def parse_entry(self, headwords: Sequence[str], pron_line: str) -> Dict[str, DictionaryEntry]:
        """
        Map headwords of one entry to their pronunciations.

        - No variants: every headword becomes an unknown form
        - One variant: shared by all headwords
        - One variant per headword: mapped in order
        - Otherwise: each headword takes the first variant starting with its
          first letter; unmatched headwords become unknown forms

        Args:
            headwords: Lowercase headwords from the headword line
            pron_line: Stripped pronunciation line

        Returns:
            Entries for this dictionary entry
        """
        result: Dict[str, DictionaryEntry] = {}
        forms = self.extract_pronunciations(pron_line)

        if not forms:
            logger.warning(f"No pronunciation line for {', '.join(headwords)}: {pron_line}")
            for word in headwords:
                self._store(result, word, None)
        elif len(forms) == 1 or len(forms) == len(headwords):
            for j, word in enumerate(headwords):
                self._store(result, word, forms[0] if len(forms) == 1 else forms[j])
        else:
            for word in headwords:
                form = next((f for f in forms if f.lower().startswith(word[0])), None)
                self._store(result, word, form)

        return result

    @staticmethod
    def _next_non_blank(lines: Sequence[str], start: int) -> Tuple[str, int]:
        """Return (stripped line, index after it) of the next non-blank line."""
        i = start
        while i < len(lines) and not lines[i].strip():
            i += 1
        if i >= len(lines):
            return "", i
        return lines[i].strip(), i + 1

    def parse_lines(self, lines: Sequence[str], progress_callback: Optional[Callable] = None) -> Dict[str, DictionaryEntry]:
        """
        Parse the wordlist.

        Args:
            lines: Wordlist lines (line endings optional)
            progress_callback: Optional callback(current, total) for progress tracking

        Returns:
            Dictionary mapping lowercase headwords to entries. Later
            entries for the same headword replace earlier ones.
        """
        result: Dict[str, DictionaryEntry] = {}
        total = len(lines)
        reported = 0
        i = 0

        while i < total:
            line = lines[i].strip()
            i += 1

            if progress_callback and i - reported >= 10000:
                progress_callback(i, total)
                reported = i

            if not self.is_headword_line(line):
                continue

            headwords = self.split_headwords(line)
            if not headwords:
                continue

            if i >= total:
                break

            pron_line, i = self._next_non_blank(lines, i)
            if not pron_line:
                continue

            result.update(self.parse_entry(headwords, pron_line))

        if progress_callback:
            progress_callback(total, total)

        return result

    def parse_file(self, file_path: Path, progress_callback: Optional[Callable] = None) -> Dict[str, DictionaryEntry]:
        """
        Parse a wordlist file.

        Args:
            file_path: Path to the Gutenberg text
            progress_callback: Optional callback(current, total) for progress tracking

        Returns:
            Dictionary mapping lowercase headwords to entries
        """
        logger.info(f"Parsing Webster wordlist from {file_path}")

        with open(file_path, "r", encoding="utf-8-sig") as f:
            lines = f.read().splitlines()

        result = self.parse_lines(lines, progress_callback)

        known = sum(1 for entry in result.values() if entry.is_known)
        logger.info(f"Parsing complete: {len(result):,} headwords ({known:,} with pronunciation)")

        return result


def parse_webster_dictionary(file_path: Path, progress_callback: Optional[Callable] = None) -> Dict[str, DictionaryEntry]:
    """
    Convenience function to parse the Webster wordlist file.

    Args:
        file_path: Path to the Gutenberg text
        progress_callback: Optional callback(current, total) for progress tracking

    Returns:
        Dictionary mapping lowercase headwords to entries
    """
    parser = WebsterParser()
    return parser.parse_file(file_path, progress_callback)
