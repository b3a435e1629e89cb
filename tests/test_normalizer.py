import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from canvas_brain.lang import default_lexicon, normalize_command, normalize_phrase  # noqa: E402
from canvas_brain.lang.lexicon import parse_lexicon  # noqa: E402


@pytest.fixture
def lexicon():
    return default_lexicon()


def test_case_and_whitespace_collapsed(lexicon):
    assert normalize_command("  Make   it   RED  ", lexicon) == "make it red"


def test_substitution_then_phrase_rule(lexicon):
    assert normalize_command("turn it cool", lexicon) == "make it blue"


def test_substitution_expands_to_several_words(lexicon):
    assert normalize_command("fire", lexicon) == "red plasma"
    assert normalize_command("outer space", lexicon) == "outer cosmic dark"


def test_substitution_respects_word_boundaries(lexicon):
    assert normalize_command("hotel", lexicon) == "hotel"


def test_fillers_removed(lexicon):
    assert normalize_command("um make it like red", lexicon) == "make it red"


def test_filler_between_rule_words_converges(lexicon):
    assert normalize_command("i um want red", lexicon) == "make red"


@pytest.mark.parametrize(
    "raw",
    ["I wanna make it HOT", "gonna show me a big swarm", "uh turn it kinda sunny", "i um need like magic"],
)
def test_normalization_is_idempotent(lexicon, raw):
    once = normalize_command(raw, lexicon)
    assert normalize_phrase(once, lexicon) == once


def test_gesture_token_expands(lexicon):
    assert normalize_command("PEACE", lexicon) == "switch the visual style to cosmic"


def test_gesture_lookup_is_case_sensitive(lexicon):
    assert normalize_command("peace", lexicon) == "peace"


def test_gesture_lookup_is_single_level():
    lexicon = parse_lexicon({"gestures": {"A": "B", "B": "make it red"}})
    assert normalize_command("A", lexicon) == "b"


def test_empty_input(lexicon):
    assert normalize_command("", lexicon) == ""
    assert normalize_command(None, lexicon) == ""  # type: ignore[arg-type]


def test_substitution_text_is_literal():
    lexicon = parse_lexicon({"substitutions": [["slash", "a\\b"], ["group", "\\1"]]})
    assert normalize_command("slash group", lexicon) == "a\\b \\1"
