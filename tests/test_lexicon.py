import json
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from canvas_brain import CommandInterpreter, load_config  # noqa: E402
from canvas_brain.constants import (  # noqa: E402
    CATEGORY_ORDER,
    INTENSITY_RANGE,
    PARTICLE_RANGE,
    SPEED_RANGE,
)
from canvas_brain.gestures import GESTURE_TOKENS  # noqa: E402
from canvas_brain.lang.lexicon import (  # noqa: E402
    LexiconError,
    default_lexicon,
    load_lexicon,
    parse_lexicon,
    split_keywords,
)
from canvas_brain.types import MoodPreset  # noqa: E402


def test_every_category_has_groups():
    lexicon = default_lexicon()
    for category in CATEGORY_ORDER:
        assert lexicon.entries(category), category


def test_packaged_groups_hold_four_to_six_keywords():
    lexicon = default_lexicon()
    for category in CATEGORY_ORDER:
        for entry in lexicon.entries(category):
            assert 4 <= len(entry.keywords) <= 6, (category, entry.keywords)


def test_mood_presets_within_ranges():
    for entry in default_lexicon().entries("mood"):
        preset = entry.resolved_value
        assert isinstance(preset, MoodPreset)
        assert INTENSITY_RANGE[0] <= preset.intensity <= INTENSITY_RANGE[1]
        assert SPEED_RANGE[0] <= preset.speed <= SPEED_RANGE[1]
        assert PARTICLE_RANGE[0] <= preset.particle_count <= PARTICLE_RANGE[1]
        assert len(preset.colors) == 2


def test_every_gesture_produces_actions():
    interpreter = CommandInterpreter(cfg=load_config({}))
    for token in GESTURE_TOKENS:
        assert default_lexicon().gesture_phrase(token), token
        result = interpreter.interpret(token)
        assert result.understood, token
        assert result.actions, token


def test_split_keywords_cleans_input():
    assert split_keywords(" Red| crimson ||SCARLET ") == ("red", "crimson", "scarlet")


def test_substitutions_keep_declaration_order():
    lexicon = parse_lexicon({"substitutions": [["b", "c"], ["a", "b"]]})
    assert lexicon.substitutions == (("b", "c"), ("a", "b"))


def test_missing_categories_are_empty():
    lexicon = parse_lexicon({"categories": {"color": [{"key": "red", "keywords": "red", "value": "#f00"}]}})
    assert lexicon.entries("mood") == ()
    assert lexicon.entries("color")[0].canonical_key == "red"


@pytest.mark.parametrize(
    "payload",
    [
        {"categories": {"texture": []}},
        {"categories": {"speed": [{"key": "warp", "keywords": "warp", "value": "teleport"}]}},
        {"categories": {"style": [{"key": "retro", "keywords": "retro", "value": "retro"}]}},
        {"categories": {"color": [{"key": "red", "keywords": " | ", "value": "#f00"}]}},
        {"categories": {"color": [{"key": "red", "keywords": "red"}]}},
        {"categories": {"mood": [{"key": "odd", "keywords": "odd", "value": "not an object"}]}},
        {"categories": {"mood": [{"key": "odd", "keywords": "odd", "value": {"intensity": 1}}]}},
        {
            "categories": {
                "mood": [
                    {
                        "key": "odd",
                        "keywords": "odd",
                        "value": {"intensity": 1, "speed": 1, "particle_count": 900, "colors": ["#fff"]},
                    }
                ]
            }
        },
        {"substitutions": [["only-one"]]},
        {"gestures": ["THUMBS_UP"]},
    ],
)
def test_malformed_payloads_rejected(payload):
    with pytest.raises(LexiconError):
        parse_lexicon(payload)


def test_load_lexicon_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_lexicon(tmp_path / "nope.json")


def test_load_lexicon_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(LexiconError):
        load_lexicon(path)


def test_interpreter_uses_injected_lexicon(tmp_path):
    payload = {
        "categories": {
            "color": [{"key": "teal", "keywords": "teal|sea|lagoon|reef", "value": "#008080"}],
        },
        "gestures": {"WAVE": "lagoon please"},
    }
    path = tmp_path / "custom.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    interpreter = CommandInterpreter(cfg=load_config({"CANVAS_LEXICON_PATH": str(path)}))
    result = interpreter.interpret("WAVE")
    assert [action.key for action in result.actions] == ["teal"]
    assert not interpreter.interpret("make it red").understood


def test_no_keyword_repeats_within_a_category():
    lexicon = default_lexicon()
    for category in CATEGORY_ORDER:
        keywords = [kw for entry in lexicon.entries(category) for kw in entry.keywords]
        assert len(keywords) == len(set(keywords)), category
