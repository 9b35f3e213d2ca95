from __future__ import annotations

import json
from dataclasses import fields

from thermal_noise.core.errors import ScenarioError, get_logger
from thermal_noise.core.thermal_noise_core import normalize_method
from thermal_noise.model.entities import Scenario

logger = get_logger()

_FIELDS = {f.name for f in fields(Scenario)}
_FLOAT_FIELDS = ("temperature", "density", "sound_speed", "df", "f_min", "f_max")


def save_scenario(path: str, scenario: Scenario) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(scenario.to_dict(), f, indent=2)
    logger.info("Saved scenario '%s' to %s", scenario.name, path)


def _as_float(name: str, value) -> float:
    if isinstance(value, bool):
        raise ScenarioError(f"Scenario field '{name}' must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ScenarioError(f"Scenario field '{name}' must be a number, got {value!r}") from exc


def _as_int(name: str, value) -> int:
    number = _as_float(name, value)
    if not number.is_integer():
        raise ScenarioError(f"Scenario field '{name}' must be an integer, got {value!r}")
    return int(number)


def scenario_from_dict(data: dict) -> Scenario:
    if not isinstance(data, dict):
        raise ScenarioError("Scenario file must contain a JSON object")
    unknown = sorted(set(data) - _FIELDS)
    if unknown:
        raise ScenarioError(f"Unknown scenario fields: {', '.join(unknown)}")
    values = dict(data)

    if "name" in values and not isinstance(values["name"], str):
        raise ScenarioError(f"Scenario field 'name' must be a string, got {values['name']!r}")
    for name in _FLOAT_FIELDS:
        if name in values:
            values[name] = _as_float(name, values[name])
    if values.get("radius") is not None:
        values["radius"] = _as_float("radius", values["radius"])
    if "n_points" in values:
        values["n_points"] = _as_int("n_points", values["n_points"])

    methods = values.get("methods")
    if methods is not None:
        if not isinstance(methods, list):
            raise ScenarioError(f"Scenario field 'methods' must be a list of names, got {methods!r}")
        values["methods"] = [normalize_method(m).value for m in methods]
    return Scenario(**values)


def load_scenario(path: str) -> Scenario:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ScenarioError(f"Scenario file {path} is not valid JSON: {exc}") from exc
    scenario = scenario_from_dict(data)
    logger.info("Loaded scenario '%s' from %s", scenario.name, path)
    return scenario
