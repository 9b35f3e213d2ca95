import csv
import json

import numpy as np
import pytest

from thermal_noise.core.errors import ScenarioError, UnknownMethodError, configure_logging
from thermal_noise.core.thermal_noise_core import frequency_sweep, noise_spectrum
from thermal_noise.io.exporters import export_spectrum_csv, spectrum_to_csv
from thermal_noise.io.project_io import load_scenario, save_scenario, scenario_from_dict
from thermal_noise.model.entities import AIR, Scenario


def test_scenario_save_and_load(tmp_path):
    path = tmp_path / "air.json"
    scenario = Scenario.for_medium(AIR, df=10.0, methods=["mellen", "sivianwhite"])
    save_scenario(str(path), scenario)
    assert json.loads(path.read_text())["density"] == AIR.density
    assert load_scenario(str(path)) == scenario


def test_scenario_partial_file_uses_defaults(tmp_path):
    path = tmp_path / "partial.json"
    path.write_text('{"temperature": 293.15, "methods": ["Callen-Welton", "point"]}')
    scenario = load_scenario(str(path))
    assert scenario.temperature == 293.15
    assert scenario.methods == ["callenwelton", "mellen"]
    assert scenario.n_points == Scenario().n_points


def test_scenario_rejects_unknown_fields():
    with pytest.raises(ScenarioError):
        scenario_from_dict({"temperature": 290.0, "salinity": 35.0})


def test_scenario_rejects_unknown_method():
    with pytest.raises(UnknownMethodError):
        scenario_from_dict({"methods": ["rayleigh"]})


def test_scenario_rejects_non_object(tmp_path):
    with pytest.raises(ScenarioError):
        scenario_from_dict([1, 2, 3])
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(ScenarioError):
        load_scenario(str(path))


def test_export_spectrum_csv(tmp_path):
    f = frequency_sweep(1e3, 1e5, 5)
    spectrum = noise_spectrum(277.15, 1027.3, 1500.0, f, 1.0, 0.01)
    path = tmp_path / "spectrum.csv"
    export_spectrum_csv(str(path), spectrum)

    with path.open(newline="", encoding="utf-8") as fh:
        rows = list(csv.reader(fh))
    assert rows[0] == ["frequency_hz", "mellen", "callenwelton", "sivianwhite"]
    assert len(rows) == 6
    assert np.isclose(float(rows[1][0]), 1e3)
    assert abs(float(rows[1][1]) - float(spectrum.levels["mellen"][0])) < 1e-4


def test_spectrum_to_csv_single_method():
    spectrum = noise_spectrum(277.15, 1027.3, 1500.0, [1000.0], 1.0, methods=["mellen"])
    lines = spectrum_to_csv(spectrum).splitlines()
    assert lines[0] == "frequency_hz,mellen"
    assert lines[1].startswith("1000,-14.82")


def test_configure_logging_writes_file(tmp_path):
    log_path = tmp_path / "thermal_noise.log"
    logger = configure_logging(verbose=True, log_file=str(log_path))
    try:
        noise_spectrum(277.15, 1027.3, 1500.0, [1000.0], 1.0, methods=["mellen", "piston"])
        for h in logger.handlers:
            h.flush()
        assert "Skipping sivianwhite" in log_path.read_text(encoding="utf-8")
    finally:
        configure_logging()


def test_scenario_methods_must_be_a_list():
    with pytest.raises(ScenarioError):
        scenario_from_dict({"methods": "mellen"})


@pytest.mark.parametrize(
    "data",
    [
        {"n_points": "many"},
        {"n_points": 12.5},
        {"temperature": "warm"},
        {"radius": [0.01]},
        {"df": True},
        {"name": 42},
    ],
)
def test_scenario_rejects_malformed_values(data):
    with pytest.raises(ScenarioError):
        scenario_from_dict(data)


def test_scenario_coerces_numeric_strings():
    scenario = scenario_from_dict({"n_points": "25", "f_max": "1e4", "radius": None})
    assert scenario.n_points == 25
    assert scenario.f_max == 1e4
    assert scenario.radius is None
