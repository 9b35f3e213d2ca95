from __future__ import annotations

import csv
import io

from thermal_noise.core.errors import get_logger
from thermal_noise.model.entities import NoiseSpectrum

logger = get_logger()


def write_spectrum_csv(handle, spectrum: NoiseSpectrum) -> None:
    writer = csv.writer(handle)
    writer.writerow(["frequency_hz"] + spectrum.methods)
    for f, levels in spectrum.rows():
        writer.writerow([f"{f:.6g}"] + [f"{lvl:.4f}" for lvl in levels])


def spectrum_to_csv(spectrum: NoiseSpectrum) -> str:
    buf = io.StringIO()
    write_spectrum_csv(buf, spectrum)
    return buf.getvalue()


def export_spectrum_csv(path: str, spectrum: NoiseSpectrum) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        write_spectrum_csv(f, spectrum)
    logger.info("Exported %d frequencies to %s", len(spectrum.frequencies), path)
