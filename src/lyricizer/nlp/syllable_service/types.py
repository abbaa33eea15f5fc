#!/usr/bin/env python3
"""
Type definitions for syllable service.

Defines the dictionary entry stored for each headword and the record
returned for every token of resolved lyrics.

Stress levels:
    0 - unstressed
    1 - secondary stress
    2 - primary stress
"""

from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


UNSTRESSED = 0
SECONDARY_STRESS = 1
PRIMARY_STRESS = 2

STRESS_LEVELS = (UNSTRESSED, SECONDARY_STRESS, PRIMARY_STRESS)


def _check_stresses(stresses, info: ValidationInfo):
    """Shared validation: one stress per syllable, each a known level."""
    syllables = info.data.get("syllables")
    if syllables is not None and len(syllables) != len(stresses):
        raise ValueError(
            f"stresses length {len(stresses)} does not match "
            f"syllables length {len(syllables)}"
        )
    for level in stresses:
        if level not in STRESS_LEVELS:
            raise ValueError(f"Invalid stress level: {level}")
    return stresses


class DictionaryEntry(BaseModel):
    """
    Citation form of a headword as stored in the pronunciation dictionary.

    Entries are frozen: the dictionary is loaded once and never mutated.

    Example:
        {
            "syllables": ["hel", "lo"],
            "hyphenated": "hel-lo",
            "stresses": [0, 2],
            "isKnown": true
        }
    """

    syllables: Tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Lowercase syllables in order",
        examples=[("hel", "lo"), ("song",)]
    )

    stresses: Tuple[int, ...] = Field(
        ...,
        description="Stress level per syllable (0, 1 or 2)",
        examples=[(0, 2), (0,)]
    )

    hyphenated: str = Field(
        default="",
        validate_default=True,
        description="Syllables joined by '-' (derived when omitted)",
        examples=["hel-lo"]
    )

    is_known: bool = Field(
        default=True,
        alias="isKnown",
        description="False when the source had no pronunciation marks for this headword"
    )

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("stresses")
    @classmethod
    def validate_stresses(cls, v: Tuple[int, ...], info: ValidationInfo) -> Tuple[int, ...]:
        return _check_stresses(v, info)

    @field_validator("hyphenated")
    @classmethod
    def default_hyphenated(cls, v: str, info: ValidationInfo) -> str:
        if v:
            return v
        return "-".join(info.data.get("syllables") or ())

    def to_dict(self) -> Dict[str, Any]:
        """Export to the JSON dictionary format."""
        return {
            "syllables": list(self.syllables),
            "hyphenated": self.hyphenated,
            "stresses": list(self.stresses),
            "isKnown": self.is_known,
        }


class SyllableRecord(BaseModel):
    """
    Resolution result for a single whitespace-delimited token.

    `hyphenated` carries the original casing and surrounding punctuation,
    while `syllables` stay lowercase (or hold the raw token when the word
    could not be resolved).
    """

    syllables: List[str] = Field(
        default_factory=list,
        description="Ordered syllables; the raw token for unresolved words",
        examples=[["hel", "lo"], ["xyzabc"], []]
    )

    hyphenated: str = Field(
        default="",
        description="Syllables joined by '-' with case and punctuation reapplied",
        examples=["Hel-lo!", "xyzabc", ""]
    )

    stresses: List[int] = Field(
        default_factory=list,
        description="Stress level per syllable (0, 1 or 2)",
        examples=[[0, 2], [0], []]
    )

    is_known: bool = Field(
        default=False,
        alias="isKnown",
        description="True when derived from a dictionary hit (direct or via suffix)"
    )

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
    )

    @field_validator("stresses")
    @classmethod
    def validate_stresses(cls, v: List[int], info: ValidationInfo) -> List[int]:
        return _check_stresses(v, info)

    @property
    def syllable_count(self) -> int:
        return len(self.syllables)

    @property
    def is_empty(self) -> bool:
        """True for records produced by whitespace artifacts."""
        return not self.syllables and not self.hyphenated

    def to_dict(self) -> Dict[str, Any]:
        """Export in the camelCase shape consumers of the JSON API expect."""
        return self.model_dump(by_alias=True)


# Type alias for the result of resolving a text
SyllableRecordList = List[SyllableRecord]


PRIMARY_MARK = "\u02C8"  # ˈ
SECONDARY_MARK = "\u02CC"  # ˌ


def format_stress_display(record: SyllableRecord) -> str:
    """
    Render a record with IPA-style stress marks for cue sheets.

    Args:
        record: Resolved record

    Returns:
        Syllables joined by '-', primary stress prefixed with ˈ and
        secondary stress with ˌ

    Example:
        >>> format_stress_display(SyllableRecord(syllables=["hel", "lo"], stresses=[0, 2]))
        'hel-ˈlo'
    """
    parts = []
    for syllable, level in zip(record.syllables, record.stresses):
        if level == PRIMARY_STRESS:
            parts.append(PRIMARY_MARK + syllable)
        elif level == SECONDARY_STRESS:
            parts.append(SECONDARY_MARK + syllable)
        else:
            parts.append(syllable)
    return "-".join(parts)
