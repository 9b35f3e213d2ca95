from __future__ import annotations

import logging
import os
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from app.models import LevelRequest, LevelResponse, MediumModel, MethodInfo, SpectrumRequest, SpectrumResponse
from app.services.noise import compute_levels, compute_spectrum, spectrum_payload
from thermal_noise.core.errors import ThermalNoiseError, get_logger
from thermal_noise.core.thermal_noise_core import Method
from thermal_noise.io.exporters import spectrum_to_csv
from thermal_noise.model.entities import MEDIA

logger = get_logger()


def resolve_log_level(name: Optional[str]) -> int:
    level = logging.getLevelName((name or "INFO").strip().upper())
    if not isinstance(level, int):
        logger.warning("Ignoring unknown THERMAL_NOISE_LOG_LEVEL %r, using INFO", name)
        return logging.INFO
    return level


logger.setLevel(resolve_log_level(os.environ.get("THERMAL_NOISE_LOG_LEVEL")))

app = FastAPI(title="Thermal Noise API", version="0.1.0")
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


def _bad_request(exc: ThermalNoiseError) -> HTTPException:
    logger.info("Rejected request: %s", exc)
    return HTTPException(status_code=400, detail=str(exc))


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/media", response_model=Dict[str, MediumModel])
def list_media():
    return {name: MediumModel(density=m.density, sound_speed=m.sound_speed) for name, m in MEDIA.items()}


@app.get("/methods", response_model=List[MethodInfo])
def list_methods():
    return [MethodInfo(name=m.value, requires_radius=m.requires_radius) for m in Method]


@app.post("/noise/level", response_model=LevelResponse)
def noise_level(req: LevelRequest):
    try:
        levels = compute_levels(req)
    except ThermalNoiseError as exc:
        raise _bad_request(exc) from exc
    return LevelResponse(levels=levels)


@app.post("/noise/spectrum", response_model=SpectrumResponse)
def noise_spectrum(req: SpectrumRequest):
    try:
        spectrum = compute_spectrum(req)
    except ThermalNoiseError as exc:
        raise _bad_request(exc) from exc
    return SpectrumResponse(**spectrum_payload(spectrum))


@app.post("/noise/spectrum.csv")
def noise_spectrum_csv(req: SpectrumRequest):
    try:
        spectrum = compute_spectrum(req)
    except ThermalNoiseError as exc:
        raise _bad_request(exc) from exc
    filename = f"thermal_noise_{req.medium or 'custom'}.csv"
    return Response(
        content=spectrum_to_csv(spectrum),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
