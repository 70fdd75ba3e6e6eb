from dataclasses import dataclass
from enum import Enum
from typing import Tuple

Vec3 = Tuple[float, float, float]

class ObjectKind(str, Enum):
    BLACK_HOLE = "blackHole"
    NEUTRON_STAR = "neutronStar"

@dataclass(frozen=True)
class ObjectProperties:
    radius: float  # km
    color: str
    name: str
    unit: str

@dataclass(frozen=True)
class CelestialObject:
    kind: ObjectKind
    mass: float  # solar masses

    @property
    def properties(self) -> ObjectProperties:
        from .tidal import object_properties
        return object_properties(self.kind, self.mass)

    @property
    def radius(self) -> float:
        return self.properties.radius

@dataclass(frozen=True)
class TidalSample:
    distance_km: float
    surface_gravity: float  # m/s^2, inf at zero radius
    tidal_force: float  # N/m^2
    breakup_distance_km: float
    mass: float
    radius_km: float

@dataclass
class DeformationState:
    active: bool = False
    stretch_factor: float = 0.0

@dataclass(frozen=True)
class DeformationCommand:
    scale: Vec3 = (1.0, 1.0, 1.0)
    velocity: Vec3 = (0.0, 0.0, 0.0)

    @property
    def is_identity(self) -> bool:
        return self == IDENTITY

IDENTITY = DeformationCommand()
