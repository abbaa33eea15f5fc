#!/usr/bin/env python3
"""
Tokenization Service Package

Whitespace tokenization and decoration stripping for lyric text.

Usage:
    from lyricizer.nlp.tokenization_service import LyricsTokenizationService

    service = LyricsTokenizationService()
    for token in service.tokenize("Hello, world!"):
        print(f"{token.prefix!r} {token.core!r} {token.suffix!r}")
"""

from .tokenization_service import LyricsTokenizationService
from .types import TokenData, TokenList

__all__ = [
    "LyricsTokenizationService",
    "TokenData",
    "TokenList",
]
