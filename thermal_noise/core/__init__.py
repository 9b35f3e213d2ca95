"""Pure-Python thermal noise core (numpy/scipy only)."""

from .errors import (
    MissingParameterError,
    ScenarioError,
    ThermalNoiseError,
    UnknownMethodError,
    configure_logging,
    get_logger,
)
from .thermal_noise_core import (
    BOLTZMANN_CONSTANT,
    PISTON_SERIES_KA,
    REFERENCE_PRESSURE,
    Method,
    applicable_methods,
    frequency_sweep,
    level_from_mean_square_pressure,
    noise_level,
    noise_spectrum,
    normalize_method,
    piston_directivity_term,
    piston_level,
    piston_mean_square_pressure,
    point_level,
    point_mean_square_pressure,
    require_radius,
    scenario_spectrum,
    sphere_level,
    sphere_mean_square_pressure,
    wavenumber,
)

__all__ = [
    "BOLTZMANN_CONSTANT",
    "PISTON_SERIES_KA",
    "REFERENCE_PRESSURE",
    "Method",
    "MissingParameterError",
    "ScenarioError",
    "ThermalNoiseError",
    "UnknownMethodError",
    "applicable_methods",
    "configure_logging",
    "frequency_sweep",
    "get_logger",
    "level_from_mean_square_pressure",
    "noise_level",
    "noise_spectrum",
    "normalize_method",
    "piston_directivity_term",
    "piston_level",
    "piston_mean_square_pressure",
    "point_level",
    "point_mean_square_pressure",
    "require_radius",
    "scenario_spectrum",
    "sphere_level",
    "sphere_mean_square_pressure",
    "wavenumber",
]
