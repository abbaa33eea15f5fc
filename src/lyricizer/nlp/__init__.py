"""
Lyrics NLP services: tokenization, syllable dictionary and the resolution pipeline.
"""
