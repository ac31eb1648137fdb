# File: tests/test_catalog.py
"""
Test the catalog.py module to verify model constants and display metadata.
"""

import pytest

from prbm.catalog import (
    DEFAULT_MODELS,
    MODEL_STYLES,
    PRB1R_MODELS,
    PRB1R_MOMENT,
    PRB1R_VERTICAL_FORCE,
    ModelStyle,
    Prb1RLoadCase,
    prb1r_constants,
)
from prbm.model import BeamParameters, ModelType
from prbm.solve import solve_model


def test_every_model_has_a_style():
    """
    Every ModelType must have a label and color, otherwise the legend and
    the results table break for that model.
    """
    assert set(MODEL_STYLES) == set(ModelType)
    for model, style in MODEL_STYLES.items():
        assert isinstance(style, ModelStyle)
        assert style.label
        assert style.color.startswith('#') and len(style.color) == 7

    print("✓ All models have display metadata")


def test_labels_and_colors():
    expected = {
        ModelType.LINEAR: ("Linear", "#3b82f6"),
        ModelType.NONLINEAR: ("Nonlinear", "#ef4444"),
        ModelType.PRB_1R_VERTICAL: ("PRB 1R (P)", "#22c55e"),
        ModelType.PRB_1R_COMBINED: ("PRB 1R (nP)", "#f59e0b"),
        ModelType.PRB_1R_MOMENT: ("PRB 1R (M)", "#ec4899"),
        ModelType.PRB_3R: ("PRB 3R", "#8b5cf6"),
    }
    for model, (label, color) in expected.items():
        assert MODEL_STYLES[model].label == label
        assert MODEL_STYLES[model].color == color

    labels = [s.label for s in MODEL_STYLES.values()]
    assert len(set(labels)) == len(labels)


def test_rigid_link_flag():
    """Only the PRB models are drawn as rigid links."""
    assert not MODEL_STYLES[ModelType.LINEAR].rigid_links
    assert not MODEL_STYLES[ModelType.NONLINEAR].rigid_links
    for model in PRB1R_MODELS:
        assert MODEL_STYLES[model].rigid_links
    assert MODEL_STYLES[ModelType.PRB_3R].rigid_links


def test_styles_are_frozen():
    with pytest.raises(Exception):  # dataclass.FrozenInstanceError
        MODEL_STYLES[ModelType.LINEAR].color = "#000000"


def test_prb1r_model_mapping():
    assert PRB1R_MODELS == {
        ModelType.PRB_1R_VERTICAL: Prb1RLoadCase.VERTICAL_FORCE,
        ModelType.PRB_1R_COMBINED: Prb1RLoadCase.COMBINED_FORCE,
        ModelType.PRB_1R_MOMENT: Prb1RLoadCase.MOMENT,
    }
    assert prb1r_constants(Prb1RLoadCase.VERTICAL_FORCE) is PRB1R_VERTICAL_FORCE
    assert prb1r_constants(Prb1RLoadCase.MOMENT) is PRB1R_MOMENT


def test_default_selection():
    assert DEFAULT_MODELS == (
        ModelType.LINEAR,
        ModelType.NONLINEAR,
        ModelType.PRB_1R_COMBINED,
        ModelType.PRB_3R,
    )


@pytest.mark.parametrize("model", list(ModelType))
def test_dispatch_returns_requested_model(model):
    params = BeamParameters(E=206.8e9, I=5.09e-12, L=0.508, P=2.224)
    result = solve_model(model, params)

    assert result.model is model
    assert result.label == MODEL_STYLES[model].label
    assert result.color == MODEL_STYLES[model].color


def test_dispatch_unknown_selector():
    params = BeamParameters(E=206.8e9, I=5.09e-12, L=0.508, P=2.224)
    with pytest.raises(ValueError):
        solve_model("linear", params)
