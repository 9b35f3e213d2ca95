from __future__ import annotations

import math
from typing import Dict, List, Optional

import numpy as np

from app.models import LevelRequest, SpectrumRequest
from thermal_noise.core.thermal_noise_core import noise_level, require_radius, scenario_spectrum
from thermal_noise.model.entities import NoiseSpectrum, Scenario


def finite_or_none(value) -> Optional[float]:
    value = float(value)
    return value if math.isfinite(value) else None


def finite_list(values: np.ndarray) -> List[Optional[float]]:
    return [finite_or_none(v) for v in np.asarray(values, dtype=np.float64).ravel()]


def _check_single_method(methods, radius) -> None:
    # a single named method raises instead of being skipped
    if methods is not None and len(methods) == 1:
        require_radius(methods[0], radius)


def compute_levels(req: LevelRequest) -> Dict[str, Optional[float]]:
    args = (req.temperature, req.density, req.sound_speed, req.frequency, req.df, req.radius)
    _check_single_method(req.methods, req.radius)
    levels = noise_level(req.methods, *args)
    return {name: finite_or_none(v) for name, v in levels.items()}


def scenario_from_request(req: SpectrumRequest) -> Scenario:
    return Scenario(
        name=req.medium or "custom",
        temperature=req.temperature,
        density=req.density,
        sound_speed=req.sound_speed,
        df=req.df,
        radius=req.radius,
        f_min=req.f_min,
        f_max=req.f_max,
        n_points=req.n_points,
        methods=req.methods,
    )


def compute_spectrum(req: SpectrumRequest) -> NoiseSpectrum:
    _check_single_method(req.methods, req.radius)
    return scenario_spectrum(scenario_from_request(req))


def spectrum_payload(spectrum: NoiseSpectrum) -> dict:
    return {
        "frequencies": [float(f) for f in spectrum.frequencies],
        "levels": {m: finite_list(v) for m, v in spectrum.levels.items()},
    }
