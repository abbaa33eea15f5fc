#!/usr/bin/env python3
"""
Lyrics Tokenization Service

Splits lyric text on whitespace and isolates each token's punctuation
from its alphabetic core.

Features:
- Whitespace splitting that keeps empty leading/trailing tokens
- Prefix/suffix isolation (non-letter runs at both ends)
- Core extraction (letters and hyphens only)

Usage:
    service = LyricsTokenizationService()
    for token in service.tokenize("  Hello, world!"):
        print(token.prefix, token.core, token.suffix)
"""

import re
from typing import List
from logging import getLogger

from .types import TokenData

logger = getLogger(__name__)


WHITESPACE_RE = re.compile(r"\s+")
PREFIX_RE = re.compile(r"^[^a-zA-Z]*")
SUFFIX_RE = re.compile(r"[^a-zA-Z]*$")
NON_CORE_RE = re.compile(r"[^a-zA-Z-]")


class LyricsTokenizationService:
    """
    Whitespace tokenizer with decoration stripping.

    Splitting "  hello  " yields ["", "hello", ""]: separators at the edges
    produce empty tokens, which downstream stages turn into empty records
    so output stays aligned with the split.
    """

    @staticmethod
    def split(text: str) -> List[str]:
        """
        Split text on runs of whitespace.

        Args:
            text: Raw lyric text

        Returns:
            Raw tokens, including empty strings at the edges
        """
        return WHITESPACE_RE.split(text)

    @staticmethod
    def strip_decorations(token: str) -> TokenData:
        """
        Isolate prefix, suffix and core of a raw token.

        Args:
            token: Raw token (no whitespace)

        Returns:
            TokenData with prefix/suffix/core filled in

        Example:
            >>> LyricsTokenizationService.strip_decorations("123hello456")
            TokenData(text='123hello456', prefix='123', suffix='456', core='hello')
        """
        if not token:
            return TokenData(text=token)

        return TokenData(
            text=token,
            prefix=PREFIX_RE.search(token).group(0),
            suffix=SUFFIX_RE.search(token).group(0),
            core=NON_CORE_RE.sub("", token),
        )

    def tokenize(self, text: str) -> List[TokenData]:
        """
        Tokenize lyric text.

        Args:
            text: Text to tokenize

        Returns:
            One TokenData per whitespace-split token, in input order
        """
        tokens = [self.strip_decorations(raw) for raw in self.split(text)]
        logger.debug(f"Tokenized {len(tokens)} tokens from {len(text)} characters")
        return tokens
