from .entities import AIR, MEDIA, WATER, Medium, NoiseSpectrum, Scenario, celsius_to_kelvin

__all__ = ["AIR", "MEDIA", "WATER", "Medium", "NoiseSpectrum", "Scenario", "celsius_to_kelvin"]
