"""Closed-form tidal-force quantities.

Units are part of every signature: masses in solar masses, distances and
radii in km, body length in metres, results in SI (m/s^2, N/m^2) except
where the name says km.
"""
import math

from .constants import (
    G, EARTH_GRAVITY, NEUTRON_STAR_RADIUS_KM, REFERENCE_BODY_LENGTH_M,
    REFERENCE_BODY_MASS_KG, km_to_m, m_to_km, schwarzschild_radius, solar_to_kg,
)
from .errors import InvalidArgument
from .models import CelestialObject, ObjectKind, ObjectProperties, TidalSample

_APPEARANCE = {
    ObjectKind.BLACK_HOLE: ("#9d00ff", "Black Hole", "M☉"),
    ObjectKind.NEUTRON_STAR: ("#00a2ff", "Neutron Star", "Mʘ"),
}

def _require_positive(name: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgument(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidArgument(f"{name} must be positive and finite, got {value!r}")
    return float(value)

def schwarzschild_radius_km(mass: float) -> float:
    mass = _require_positive("mass", mass)
    return m_to_km(schwarzschild_radius(solar_to_kg(mass)))

def object_properties(kind: ObjectKind, mass: float) -> ObjectProperties:
    try:
        kind = ObjectKind(kind)
    except ValueError as exc:
        raise InvalidArgument(f"unknown object kind {kind!r}") from exc
    color, name, unit = _APPEARANCE[kind]
    if kind is ObjectKind.BLACK_HOLE:
        radius = schwarzschild_radius_km(mass)
    else:
        radius = NEUTRON_STAR_RADIUS_KM
    return ObjectProperties(radius=radius, color=color, name=name, unit=unit)

def surface_gravity(mass: float, radius_km: float) -> float:
    """Newtonian surface gravity in m/s^2; ``math.inf`` at zero radius."""
    mass = _require_positive("mass", mass)
    if radius_km == 0:
        return math.inf
    radius_km = _require_positive("radius_km", radius_km)
    return G * solar_to_kg(mass) / km_to_m(radius_km) ** 2

def surface_gravity_g(value: float) -> float:
    return value / EARTH_GRAVITY

def tidal_force(mass: float, distance_km: float,
                body_length_m: float = REFERENCE_BODY_LENGTH_M) -> float:
    mass = _require_positive("mass", mass)
    distance_km = _require_positive("distance_km", distance_km)
    body_length_m = _require_positive("body_length_m", body_length_m)
    return 2.0 * G * solar_to_kg(mass) * body_length_m / km_to_m(distance_km) ** 3

def breakup_distance_km(mass: float, body_mass_kg: float = REFERENCE_BODY_MASS_KG) -> float:
    # simplified Roche limit
    mass = _require_positive("mass", mass)
    body_mass_kg = _require_positive("body_mass_kg", body_mass_kg)
    return (2.0 * solar_to_kg(mass) * body_mass_kg / 1000.0) ** (1.0 / 3.0)

def sample(obj: CelestialObject, distance_km: float,
           body_length_m: float = REFERENCE_BODY_LENGTH_M,
           body_mass_kg: float = REFERENCE_BODY_MASS_KG) -> TidalSample:
    radius = obj.radius
    return TidalSample(
        distance_km=distance_km,
        surface_gravity=surface_gravity(obj.mass, radius),
        tidal_force=tidal_force(obj.mass, distance_km, body_length_m),
        breakup_distance_km=breakup_distance_km(obj.mass, body_mass_kg),
        mass=obj.mass,
        radius_km=radius,
    )
