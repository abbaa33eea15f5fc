"""
Lyrics NLP Pipeline Package

Complete text processing pipeline:
- Tokenization (whitespace split + decoration stripping)
- Word Resolution (dictionary lookup + suffix stripping)
- Case Reconciliation
"""

from .pipeline import (
    LyricsPipeline,
    LyricsDocument,
    lyricize,
)
from .word_resolver import WordResolver, SuffixRule, Derivation, SUFFIX_RULES
from .case_reconciler import preserve_case

__all__ = [
    'LyricsPipeline',
    'LyricsDocument',
    'lyricize',
    'WordResolver',
    'SuffixRule',
    'Derivation',
    'SUFFIX_RULES',
    'preserve_case',
]
