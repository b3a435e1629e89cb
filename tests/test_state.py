import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from canvas_brain.state import CanvasState  # noqa: E402
from canvas_brain.types import ParameterState  # noqa: E402



def test_snapshot_is_stable_after_update():
    store = CanvasState()
    before = store.snapshot()
    store.update(intensity=2.0)
    assert before.intensity == 1.0
    assert store.snapshot().intensity == 2.0


def test_mutators_coerce_types():
    store = CanvasState()
    mutators = store.mutators()
    mutators.set_particle_count(2500.0)
    mutators.set_morphing(0)
    state = store.snapshot()
    assert state.particle_count == 2500 and isinstance(state.particle_count, int)
    assert state.morphing is False


def test_reset():
    store = CanvasState(ParameterState(mode="cosmic"))
    store.reset()
    assert store.snapshot() == ParameterState()


def test_from_mapping_accepts_camel_case():
    state = ParameterState.from_mapping(
        {"intensity": 2, "particleCount": 3000, "speed": 1.5, "primaryColor": "#ffffff", "mode": "quantum"}
    )
    assert state.particle_count == 3000
    assert state.primary_color == "#ffffff"
    assert state.mode == "quantum"
    assert state.secondary_color == ParameterState().secondary_color


def test_from_mapping_requires_executor_fields():
    with pytest.raises(KeyError):
        ParameterState.from_mapping({"intensity": 1.0, "speed": 1.0})


def test_to_dict_round_trip():
    state = ParameterState(mode="plasma", intensity=2.5)
    assert ParameterState.from_mapping(state.to_dict()) == state
