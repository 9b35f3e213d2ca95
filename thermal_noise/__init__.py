"""Acoustic pressure thermal noise levels (Mellen, Callen-Welton, Sivian-White)."""

from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .model import AIR, MEDIA, WATER, Medium, NoiseSpectrum, Scenario, celsius_to_kelvin

__version__ = "0.1.0"

__all__ = list(_core_all) + ["AIR", "MEDIA", "WATER", "Medium", "NoiseSpectrum", "Scenario", "celsius_to_kelvin"]
