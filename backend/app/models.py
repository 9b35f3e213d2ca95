from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from thermal_noise.model.entities import MEDIA


class MediumModel(BaseModel):
    density: float
    sound_speed: float


class MethodInfo(BaseModel):
    name: str
    requires_radius: bool


class LevelRequest(BaseModel):
    temperature: float = Field(..., gt=0, description="Temperature [K]")
    density: float = Field(..., gt=0, description="Density [kg/m^3]")
    sound_speed: float = Field(..., gt=0, description="Sound speed [m/s]")
    frequency: float = Field(..., ge=0, description="Frequency [Hz]")
    df: float = Field(1.0, ge=0, description="Frequency interval [Hz]")
    radius: Optional[float] = Field(None, gt=0, description="Sphere/piston radius [m]")
    methods: Optional[List[str]] = None


class LevelResponse(BaseModel):
    levels: Dict[str, Optional[float]]


class SpectrumRequest(BaseModel):
    medium: Optional[str] = None
    temperature: float = Field(277.15, gt=0)
    density: Optional[float] = Field(None, gt=0)
    sound_speed: Optional[float] = Field(None, gt=0)
    df: float = Field(1e5, ge=0)
    radius: Optional[float] = Field(1e-2, gt=0)
    f_min: float = Field(1e3, gt=0)
    f_max: float = Field(1e6, gt=0)
    n_points: int = Field(100, ge=1, le=10000)
    methods: Optional[List[str]] = None

    @model_validator(mode="after")
    def resolve_medium(self) -> "SpectrumRequest":
        if self.medium is not None:
            preset = MEDIA.get(self.medium.lower())
            if preset is None:
                raise ValueError(f"Unknown medium '{self.medium}'. Available: {', '.join(sorted(MEDIA))}")
            if self.density is None:
                self.density = preset.density
            if self.sound_speed is None:
                self.sound_speed = preset.sound_speed
        if self.density is None or self.sound_speed is None:
            raise ValueError("Give a medium preset or both density and sound_speed")
        if self.f_max < self.f_min:
            raise ValueError("Invalid sweep: f_max must be greater than or equal to f_min")
        return self


class SpectrumResponse(BaseModel):
    frequencies: List[float]
    levels: Dict[str, List[Optional[float]]]
