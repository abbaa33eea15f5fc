#!/usr/bin/env python3
"""
Tests for the Webster wordlist parser

Tests headword detection, pronunciation isolation, form parsing and the
headword-to-variant mapping.
"""

import pytest

from lyricizer.dictionary_generator.webster_parser import WebsterParser, parse_webster_dictionary


SAMPLE_TEXT = """\
The Project Gutenberg EBook of Webster's Unabridged Dictionary

*** START OF THIS PROJECT GUTENBERG EBOOK WEBSTER'S UNABRIDGED DICTIONARY ***

HELLO
Hel*lo", interj. & n.

Defn: An exclamation used as a greeting.

CYMBAL

Cym"bal, n. Etym: [F. cymbale, L. cymbalum.]

COLOR; COLOUR
Col"or, Col"our, n. Etym: [OF. color, colur.]

LIFE-GIVING
Life"-giv`ing, a.

1913
"""


@pytest.fixture
def parser():
    return WebsterParser()


class TestHeadwords:
    """Test headword line detection and splitting."""

    @pytest.mark.parametrize("line,expected", [
        ("HELLO", True),
        ("CO-OPERATE", True),
        ("COLOR; COLOUR", True),
        ("Hello", False),
        ("1913", False),
        ("", False),
    ])
    def test_is_headword_line(self, line, expected):
        assert WebsterParser.is_headword_line(line) is expected

    def test_split(self):
        assert WebsterParser.split_headwords("COLOR; COLOUR") == ["color", "colour"]

    def test_multi_word_headwords_dropped(self):
        assert WebsterParser.split_headwords("AARON'S ROD; JACK O' LANTERN; HELLO") == ["hello"]

    def test_hyphens_kept(self):
        assert WebsterParser.split_headwords("LIFE-GIVING") == ["life-giving"]


class TestPronunciations:
    """Test isolation of the pronunciation variants."""

    def test_cut_at_part_of_speech(self):
        assert WebsterParser.extract_pronunciations('Hel*lo", interj. & n.') == ['Hel*lo"']

    def test_cut_at_earliest_marker(self):
        line = 'Cym"bal, n. Etym: [F. cymbale, L. cymbalum.]'
        assert WebsterParser.extract_pronunciations(line) == ['Cym"bal']

    def test_variants(self):
        line = 'Col"or, Col"our, n. Etym: [OF. color.]'
        assert WebsterParser.extract_pronunciations(line) == ['Col"or', 'Col"our']

    def test_parenthetical_removed(self):
        line = 'Rec"ord (rek"ord), n.'
        assert WebsterParser.extract_pronunciations(line) == ['Rec"ord']

    def test_marker_at_start_is_ignored(self):
        """Only markers after the first character cut the line."""
        assert WebsterParser.extract_pronunciations(".Hel*lo\"") == ['.Hel*lo"']

    def test_only_parenthetical(self):
        assert WebsterParser.extract_pronunciations('(a*bout") n.') == []


class TestParseForm:
    """Test conversion of marked forms."""

    def test_primary_stress(self):
        entry = WebsterParser.parse_form('Hel*lo"')

        assert entry.syllables == ("hel", "lo")
        assert entry.stresses == (0, 2)
        assert entry.hyphenated == "hel-lo"
        assert entry.is_known

    def test_trailing_syllable_padded(self):
        entry = WebsterParser.parse_form('Cym"bal')

        assert entry.syllables == ("cym", "bal")
        assert entry.stresses == (2, 0)

    def test_secondary_stress_and_hyphen(self):
        entry = WebsterParser.parse_form('God"like`')

        assert entry.syllables == ("god", "like")
        assert entry.stresses == (2, 1)

    def test_hyphen_marks_unstressed_boundary(self):
        entry = WebsterParser.parse_form('Life"-giv`ing')

        assert entry.syllables == ("life", "giv", "ing")
        assert entry.stresses == (2, 0, 1)

    def test_surplus_marks_dropped(self):
        entry = WebsterParser.parse_form('A*ble"-')

        assert entry.syllables == ("a", "ble")
        assert entry.stresses == (0, 2)

    def test_diacritics_folded(self):
        entry = WebsterParser.parse_form('Co*ör"di*nate')

        assert entry.syllables == ("co", "or", "di", "nate")
        assert entry.stresses == (0, 2, 0, 0)

    def test_unmarked_form_is_unknown(self):
        entry = WebsterParser.parse_form("Gray")

        assert entry.syllables == ("gray",)
        assert entry.stresses == (0,)
        assert not entry.is_known

    def test_marks_without_letters(self):
        with pytest.raises(ValueError):
            WebsterParser.parse_form('*"')


class TestParseEntry:
    """Test mapping of headwords to variants."""

    def test_one_to_one(self, parser):
        result = parser.parse_entry(["color", "colour"], 'Col"or, Col"our, n.')

        assert result["color"].syllables == ("col", "or")
        assert result["colour"].syllables == ("col", "our")

    def test_shared_variant(self, parser):
        result = parser.parse_entry(["aesthetic", "esthetic"], 'Aes*thet"ic, a.')

        assert result["aesthetic"] == result["esthetic"]
        assert result["esthetic"].stresses == (0, 2, 0)

    def test_first_letter_matching(self, parser):
        result = parser.parse_entry(["color", "colour", "zolor"], 'Col"or, Col"our, n.')

        assert result["color"].syllables == ("col", "or")
        assert result["colour"].syllables == ("col", "or")
        assert result["zolor"].syllables == ("zolor",)
        assert not result["zolor"].is_known

    def test_no_variants(self, parser, caplog):
        result = parser.parse_entry(["about"], '(a*bout") n.')

        assert result["about"].syllables == ("about",)
        assert not result["about"].is_known
        assert "No pronunciation line for about" in caplog.text

    def test_malformed_form_degrades(self, parser, caplog):
        result = parser.parse_entry(["hello"], '*", n.')

        assert result["hello"].syllables == ("hello",)
        assert not result["hello"].is_known
        assert "Failed to parse form" in caplog.text

    def test_unhyphenated_alias(self, parser):
        result = parser.parse_entry(["life-giving"], 'Life"-giv`ing, a.')

        assert result["lifegiving"] is result["life-giving"]


class TestParseLines:
    """Test the full wordlist scan."""

    def test_sample(self, parser):
        result = parser.parse_lines(SAMPLE_TEXT.splitlines())

        assert set(result) == {"hello", "cymbal", "color", "colour", "life-giving", "lifegiving"}
        assert result["hello"].stresses == (0, 2)
        assert result["cymbal"].syllables == ("cym", "bal")

    def test_progress_reported(self, parser):
        calls = []
        lines = SAMPLE_TEXT.splitlines()
        parser.parse_lines(lines, progress_callback=lambda current, total: calls.append((current, total)))

        assert calls[-1] == (len(lines), len(lines))

    def test_headword_at_end(self, parser):
        assert parser.parse_lines(["HELLO"]) == {}

    def test_later_entry_wins(self, parser):
        lines = ["HELLO", 'Hel*lo", interj.', "HELLO", 'Hel"lo, n.']
        assert parser.parse_lines(lines)["hello"].stresses == (2, 0)

    def test_parse_file(self, tmp_path):
        path = tmp_path / "webster.txt"
        path.write_text("\ufeff" + SAMPLE_TEXT, encoding="utf-8")

        result = parse_webster_dictionary(path)

        assert result["colour"].hyphenated == "col-our"
