import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from prbm.compare import run_models
from prbm.model import BeamParameters, ModelType
from prbm.units import UnitSystem
from prbm.viz import plot_deflected_shapes, plot_tip_comparison


SCENARIO = BeamParameters(E=206.8e9, I=5.09e-12, L=0.508, P=2.224)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_deflected_shapes_saved(tmp_path):
    results = run_models(SCENARIO, list(ModelType))
    outpath = tmp_path / "plots" / "shapes.png"

    fig = plot_deflected_shapes(results, SCENARIO, outpath=str(outpath))

    assert isinstance(fig, plt.Figure)
    assert outpath.exists()
    labels = [line.get_label() for line in fig.axes[0].get_lines()]
    assert "Undeformed" in labels
    assert "PRB 3R" in labels


def test_deflected_shapes_skips_empty_results():
    """EI == 0 results have no polyline and are left out of the legend."""
    params = BeamParameters(E=0.0, I=5.09e-12, L=0.508, P=2.224)
    results = run_models(params, [ModelType.LINEAR, ModelType.NONLINEAR])

    fig = plot_deflected_shapes(results, params, unit_system=UnitSystem.ENGLISH)
    labels = [line.get_label() for line in fig.axes[0].get_lines()]
    assert labels == ["Undeformed"]


def test_tip_comparison(tmp_path):
    results = run_models(SCENARIO)
    outpath = tmp_path / "tips.png"

    fig = plot_tip_comparison(results, outpath=str(outpath), unit_system=UnitSystem.ENGLISH)

    assert isinstance(fig, plt.Figure)
    assert outpath.exists()
    assert len(fig.axes[0].patches) == 2 * len(results)
