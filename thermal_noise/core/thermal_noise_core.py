"""Acoustic pressure thermal noise levels.

Closed-form mean-square pressure for a point (Mellen), averaged over a sphere
(Callen & Welton) and averaged over a baffled piston (Sivian & White), as
reviewed in:

Readhead, M. L. (2014). Is underwater thermal noise useful? Inter-Noise and
Noise-Con Congress and Conference Proceedings, 249(2), 4978-4983.

Every formula broadcasts over numpy arrays. Nothing is validated here:
invalid physical inputs give ``inf``/``nan`` through numpy.
"""

from __future__ import annotations

import re
from enum import Enum

import numpy as np
from scipy.special import j1

from ..model.entities import NoiseSpectrum, Scenario
from .errors import MissingParameterError, UnknownMethodError, get_logger

BOLTZMANN_CONSTANT = 1.380649e-23  # J/K
REFERENCE_PRESSURE = 1e-6  # Pa
# below this ka the Bessel form of the piston term loses precision to cancellation
PISTON_SERIES_KA = 1e-3

_NON_LETTERS_RE = re.compile(r"[^a-z]")

logger = get_logger()


def _f64(x):
    return np.asarray(x, dtype=np.float64)


def level_from_mean_square_pressure(p_ms):
    """Noise level in dB re 1 uPa from mean-square pressure in Pa^2."""
    return 20.0 * np.log10(np.sqrt(_f64(p_ms)) / REFERENCE_PRESSURE)


def wavenumber(f, c):
    return 2.0 * np.pi * _f64(f) / _f64(c)


def point_mean_square_pressure(T, rho, c, f, df):
    T, rho, c, f, df = map(_f64, (T, rho, c, f, df))
    return 4.0 * np.pi * BOLTZMANN_CONSTANT * T * rho * f**2 * df / c


def sphere_mean_square_pressure(T, rho, c, f, df, a):
    T, rho, c, f, df, a = map(_f64, (T, rho, c, f, df, a))
    ka = wavenumber(f, c) * a
    return 4.0 * np.pi * BOLTZMANN_CONSTANT * T * rho * f**2 * df / (c * (1.0 + ka**2))


def piston_directivity_term(ka):
    """``1 - J1(2ka)/ka``, switching to its series below ``PISTON_SERIES_KA``."""
    ka = _f64(ka)
    with np.errstate(divide="ignore", invalid="ignore"):
        direct = 1.0 - j1(2.0 * ka) / ka
    ka2 = ka**2
    series = ka2 / 2.0 - ka2**2 / 12.0 + ka2**3 / 144.0
    return np.where(np.abs(ka) < PISTON_SERIES_KA, series, direct)


def piston_mean_square_pressure(T, rho, c, f, df, a):
    T, rho, c, f, df, a = map(_f64, (T, rho, c, f, df, a))
    ka = wavenumber(f, c) * a
    return 4.0 * BOLTZMANN_CONSTANT * T * rho * c * df / (np.pi * a**2) * piston_directivity_term(ka)


def point_level(T, rho, c, f, df):
    """Thermal noise level at a point (Mellen).

    T temperature [K], rho density [kg/m^3], c sound speed [m/s],
    f frequency [Hz], df frequency interval [Hz].
    """
    return level_from_mean_square_pressure(point_mean_square_pressure(T, rho, c, f, df))


def sphere_level(T, rho, c, f, df, a):
    """Thermal noise level averaged over the surface of a sphere of radius ``a`` [m]."""
    return level_from_mean_square_pressure(sphere_mean_square_pressure(T, rho, c, f, df, a))


def piston_level(T, rho, c, f, df, a):
    """Thermal noise level averaged over a rigid piston of radius ``a`` [m] in an infinite baffle."""
    return level_from_mean_square_pressure(piston_mean_square_pressure(T, rho, c, f, df, a))


class Method(str, Enum):
    MELLEN = "mellen"
    CALLEN_WELTON = "callenwelton"
    SIVIAN_WHITE = "sivianwhite"

    @property
    def requires_radius(self) -> bool:
        return self is not Method.MELLEN


_LEVEL_FUNCTIONS = {
    Method.MELLEN: lambda T, rho, c, f, df, a: point_level(T, rho, c, f, df),
    Method.CALLEN_WELTON: sphere_level,
    Method.SIVIAN_WHITE: piston_level,
}

_ALIASES = {
    "point": Method.MELLEN,
    "sphere": Method.CALLEN_WELTON,
    "piston": Method.SIVIAN_WHITE,
}


def normalize_method(name) -> Method:
    if isinstance(name, Method):
        return name
    key = _NON_LETTERS_RE.sub("", str(name).lower())
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return Method(key)
    except ValueError:
        raise UnknownMethodError(f"Unknown thermal noise method '{name}'") from None


def applicable_methods(radius=None) -> list[Method]:
    return [m for m in Method if radius is not None or not m.requires_radius]


def require_radius(method, a=None) -> Method:
    method = normalize_method(method)
    if method.requires_radius and a is None:
        raise MissingParameterError(f"Method '{method.value}' requires a radius 'a'")
    return method


def noise_level(methods, T, rho, c, f, df, a=None):
    """Evaluate one or several thermal noise methods by name.

    ``methods`` may be a single name (case and punctuation are ignored, so
    ``"Callen-Welton"`` works), a sequence of names, or ``None`` for every
    method the given parameters allow. A single name returns the level
    directly; otherwise a dict keyed by method value is returned, skipping
    methods that need a radius when ``a`` is None.
    """
    if isinstance(methods, (str, Method)):
        method = require_radius(methods, a)
        return _LEVEL_FUNCTIONS[method](T, rho, c, f, df, a)

    selected = applicable_methods(a) if methods is None else [normalize_method(m) for m in methods]
    out = {}
    for method in selected:
        if method.requires_radius and a is None:
            logger.debug("Skipping %s: no radius given", method.value)
            continue
        out[method.value] = _LEVEL_FUNCTIONS[method](T, rho, c, f, df, a)
    return out


def frequency_sweep(f_min=1e3, f_max=1e6, n_points=100):
    if not (np.isfinite(f_min) and np.isfinite(f_max)):
        raise ValueError("Sweep bounds must be finite")
    if f_min <= 0.0 or f_max <= 0.0:
        raise ValueError("Sweep bounds must be positive")
    if f_max < f_min:
        raise ValueError("f_max must not be lower than f_min")
    if int(n_points) < 1:
        raise ValueError("n_points must be at least 1")
    return np.logspace(np.log10(f_min), np.log10(f_max), int(n_points))


def noise_spectrum(T, rho, c, frequencies, df, a=None, methods=None) -> NoiseSpectrum:
    freqs = np.atleast_1d(_f64(frequencies))
    if methods is not None and isinstance(methods, (str, Method)):
        methods = [methods]
    levels = noise_level(methods, T, rho, c, freqs, df, a)
    return NoiseSpectrum(frequencies=freqs, levels={m: np.broadcast_to(v, freqs.shape) for m, v in levels.items()})


def scenario_spectrum(scenario: Scenario) -> NoiseSpectrum:
    freqs = frequency_sweep(scenario.f_min, scenario.f_max, scenario.n_points)
    logger.info(
        "Computing spectrum '%s': %d points, %.3g-%.3g Hz",
        scenario.name,
        freqs.size,
        freqs[0],
        freqs[-1],
    )
    return noise_spectrum(
        scenario.temperature,
        scenario.density,
        scenario.sound_speed,
        freqs,
        scenario.df,
        scenario.radius,
        scenario.methods,
    )
