from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

import numpy as np


ZERO_CELSIUS_K = 273.15


@dataclass(frozen=True)
class Medium:
    name: str
    density: float
    sound_speed: float


AIR = Medium(name="air", density=1.2041, sound_speed=343.0)
WATER = Medium(name="water", density=1027.3, sound_speed=1500.0)
MEDIA = {m.name: m for m in (AIR, WATER)}


def celsius_to_kelvin(t_c):
    return np.asarray(t_c, dtype=np.float64) + ZERO_CELSIUS_K


@dataclass
class Scenario:
    name: str = "water-4C"
    temperature: float = 4.0 + ZERO_CELSIUS_K
    density: float = WATER.density
    sound_speed: float = WATER.sound_speed
    df: float = 1e5
    radius: float | None = 1e-2
    f_min: float = 1e3
    f_max: float = 1e6
    n_points: int = 100
    methods: list[str] | None = None

    @classmethod
    def for_medium(cls, medium: Medium, **overrides: Any) -> "Scenario":
        values = {"name": medium.name, "density": medium.density, "sound_speed": medium.sound_speed}
        values.update(overrides)
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class NoiseSpectrum:
    frequencies: np.ndarray
    levels: dict[str, np.ndarray] = field(default_factory=dict)

    @property
    def methods(self) -> list[str]:
        return list(self.levels.keys())

    def rows(self):
        for i, f in enumerate(self.frequencies):
            yield float(f), [float(self.levels[m][i]) for m in self.methods]
