c = 299_792_458.0
G = 6.67430e-11
SOLAR_MASS = 1.989e30  # kg
EARTH_GRAVITY = 9.8  # m/s^2

NEUTRON_STAR_RADIUS_KM = 12.0
REFERENCE_BODY_LENGTH_M = 1.8
REFERENCE_BODY_MASS_KG = 1.8

# one scene unit is 1000 km
SIM_UNIT_KM = 1000.0
M_PER_KM = 1000.0

def solar_to_kg(mass: float) -> float:
    return mass * SOLAR_MASS

def km_to_m(km: float) -> float:
    return km * M_PER_KM

def m_to_km(m: float) -> float:
    return m / M_PER_KM

def sim_units_to_km(units: float) -> float:
    return units * SIM_UNIT_KM

def schwarzschild_radius(mass: float) -> float:
    """Event horizon radius in metres for a mass in kg."""
    return 2.0 * G * mass / (c * c)
