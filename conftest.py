"""
Pytest configuration: shared in-memory syllable dictionaries.

Tests never need the generated dictionary.json; they build small
dictionaries with the same record shape the generator writes.
"""

import pytest

from lyricizer.nlp.syllable_service import SyllableDictionary
from lyricizer.nlp.pipeline import LyricsPipeline


def entry(syllables, stresses):
    """Raw record in the dictionary.json shape."""
    return {
        "syllables": list(syllables),
        "hyphenated": "-".join(syllables),
        "stresses": list(stresses),
        "isKnown": True,
    }


# Citation forms for the words in the hymn fragment used across the suites
SAMPLE_ENTRIES = {
    "a": entry(["a"], [0]),
    "all": entry(["all"], [0]),
    "and": entry(["and"], [0]),
    "ark": entry(["ark"], [0]),
    "begin": entry(["be", "gin"], [0, 2]),
    "being": entry(["be", "ing"], [2, 0]),
    "bright": entry(["bright"], [2]),
    "cry": entry(["cry"], [0]),
    "cymbal": entry(["cym", "bal"], [2, 0]),
    "departure": entry(["de", "par", "ture"], [0, 2, 0]),
    "doth": entry(["doth"], [0]),
    "earth": entry(["earth"], [0]),
    "feast": entry(["feast"], [0]),
    "for": entry(["for"], [0]),
    "from": entry(["from"], [0]),
    "funeral": entry(["fu", "ner", "al"], [2, 0, 0]),
    "god": entry(["god"], [0]),
    "godlike": entry(["god", "like"], [2, 1]),
    "golden": entry(["gold", "en"], [2, 0]),
    "height": entry(["height"], [0]),
    "hello": entry(["hel", "lo"], [0, 2]),
    "herself": entry(["her", "self"], [0, 2]),
    "holy": entry(["ho", "ly"], [2, 0]),
    "hymn": entry(["hymn"], [0]),
    "joy": entry(["joy"], [0]),
    "joyous": entry(["joy", "ous"], [2, 0]),
    "let": entry(["let"], [0]),
    "life": entry(["life"], [0]),
    "mother": entry(["moth", "er"], [2, 0]),
    "now": entry(["now"], [0]),
    "of": entry(["of"], [0]),
    "our": entry(["our"], [0]),
    "out": entry(["out"], [0]),
    "pass": entry(["pass"], [0]),
    "post": entry(["post"], [0]),
    "pre": entry(["pre"], [0]),
    "prepare": entry(["pre", "pare"], [0, 2]),
    "renew": entry(["re", "new"], [0, 2]),
    "resound": entry(["re", "sound"], [0, 2]),
    "resplendency": entry(["re", "splen", "den", "cy"], [0, 2, 0, 0]),
    "sing": entry(["sing"], [0]),
    "song": entry(["song"], [0]),
    "the": entry(["the"], [0]),
    "this": entry(["this"], [0]),
    "to": entry(["to"], [0]),
    "today": entry(["to", "day"], [0, 2]),
    "translate": entry(["trans", "late"], [0, 0]),
    "unto": entry(["un", "to"], [2, 0]),
    "us": entry(["us"], [0]),
    "with": entry(["with"], [0]),
}


@pytest.fixture
def sample_dictionary():
    """Dictionary covering the hymn fragment and the edge-case words."""
    return SyllableDictionary.from_mapping(SAMPLE_ENTRIES)


@pytest.fixture
def pipeline(sample_dictionary):
    """Pipeline over the sample dictionary."""
    with LyricsPipeline(sample_dictionary) as p:
        yield p
