"""
Offline builder for the syllable dictionary.

Pipeline: Download → Parse (Webster wordlist) → JSON export → LMDB export
"""
