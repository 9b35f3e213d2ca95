from .exporters import export_spectrum_csv, spectrum_to_csv, write_spectrum_csv
from .project_io import load_scenario, save_scenario, scenario_from_dict

__all__ = [
    "export_spectrum_csv",
    "load_scenario",
    "save_scenario",
    "scenario_from_dict",
    "spectrum_to_csv",
    "write_spectrum_csv",
]
