#!/usr/bin/env python3
"""
Tokenization Service Data Types

Pydantic model for a raw lyric token split into its decoration and core.

    "'Life-renewing!"  ->  prefix="'"  core="Life-renewing"  suffix="!"
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class TokenData(BaseModel):
    """
    A whitespace-delimited token with its decoration isolated.

    `core` keeps only letters and hyphens, so characters in the middle of the
    token that are neither (digits, apostrophes, ...) are dropped rather than
    treated as word boundaries.
    """

    text: str = Field(
        ...,
        description="Token exactly as it appears in the source text",
        examples=["hello!", "'tis", "123hello456", ""]
    )

    prefix: str = Field(
        default="",
        description="Leading run of non-letter characters",
        examples=["", "'", "123"]
    )

    suffix: str = Field(
        default="",
        description="Trailing run of non-letter characters",
        examples=["!", "", "456"]
    )

    core: str = Field(
        default="",
        description="Token with everything except letters and hyphens removed, case preserved",
        examples=["hello", "tis", "life-renewing"]
    )

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    @property
    def is_empty(self) -> bool:
        """Whitespace artifact (leading/trailing/consecutive separators)."""
        return not self.text

    @property
    def has_core(self) -> bool:
        return bool(self.core)

    @property
    def is_compound(self) -> bool:
        """Core contains at least one hyphen."""
        return "-" in self.core

    @property
    def parts(self) -> List[str]:
        """Hyphen-delimited parts of the core, empty parts discarded."""
        return [part for part in self.core.split("-") if part]


TokenList = List[TokenData]
"""Type alias: List of TokenData objects for function signatures"""
