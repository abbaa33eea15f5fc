#!/usr/bin/env python3
"""
Case Reconciliation

Dictionary syllables are lowercase; the rendered hyphenated form should
follow the casing of the word as it was written:

    "HELLO"  -> "HEL-LO"
    "Hello"  -> "Hel-lo"
    "hello"  -> "hel-lo"
    "hEllo"  -> "hel-lo"   (mixed case is not reproduced)
"""


def capitalize_first(text: str) -> str:
    """Uppercase the first character only; the rest is left as is."""
    return text[:1].upper() + text[1:]


def is_all_upper(original: str) -> bool:
    return original == original.upper()


def is_capitalized(original: str) -> bool:
    return original == capitalize_first(original.lower())


def preserve_case(original: str, hyphenated: str, clean_original: str) -> str:
    """
    Reapply the capitalization pattern of `original` to `hyphenated`.

    Only applies when `original` lowercased equals `clean_original`; an
    original still carrying punctuation, or a clean form that kept its
    casing, leaves the hyphenated string untouched. All-uppercase is checked
    before title case, and only one transformation is ever applied.

    Args:
        original: Word as written (e.g., "Hello")
        hyphenated: Derived lowercase rendering (e.g., "hel-lo")
        clean_original: Clean form used for lookup

    Returns:
        Hyphenated string with case reapplied
    """
    if original.lower() != clean_original:
        return hyphenated

    if is_all_upper(original):
        return hyphenated.upper()
    if is_capitalized(original):
        return capitalize_first(hyphenated)
    return hyphenated
