"""Metric text for the on-screen overlay."""
import math
from typing import List, Optional

from .models import CelestialObject, ObjectProperties, TidalSample
from .tidal import surface_gravity_g

PLACEHOLDER = "--"

def _number(value: float) -> str:
    # drop the trailing .0 of whole masses: 10.0 -> "10"
    return f"{value:g}"

def object_title(props: ObjectProperties, mass: float) -> str:
    return f"{props.name} ({_number(mass)}{props.unit})"

def format_surface_gravity(sample: Optional[TidalSample]) -> str:
    if sample is None:
        return f"Surface Gravity: {PLACEHOLDER} g"
    if math.isinf(sample.surface_gravity):
        return "Surface Gravity: ∞ g"
    return f"Surface Gravity: {surface_gravity_g(sample.surface_gravity):.0f} g"

def format_tidal_force(sample: Optional[TidalSample]) -> str:
    if sample is None:
        return f"Tidal Force: {PLACEHOLDER} × 10⁹ N/m²"
    return f"Tidal Force: {sample.tidal_force / 1e9:.2f} × 10⁹ N/m²"

def format_breakup_distance(sample: Optional[TidalSample]) -> str:
    value = PLACEHOLDER if sample is None else f"{sample.breakup_distance_km:.2f}"
    return f"Breakup Distance: {value} km"

def metric_lines(obj: CelestialObject, sample: Optional[TidalSample]) -> List[str]:
    return [
        object_title(obj.properties, obj.mass),
        format_surface_gravity(sample),
        format_tidal_force(sample),
        format_breakup_distance(sample),
    ]
