from .constants import c, G, SOLAR_MASS, schwarzschild_radius
from .errors import InvalidArgument
from .models import (CelestialObject, DeformationCommand, DeformationState, ObjectKind,
                     ObjectProperties, TidalSample)
from .tidal import (breakup_distance_km, object_properties, sample, schwarzschild_radius_km,
                    surface_gravity, tidal_force)
from .deformation import DeformationEngine
__all__ = ["c","G","SOLAR_MASS","schwarzschild_radius","InvalidArgument","CelestialObject",
           "DeformationCommand","DeformationState","ObjectKind","ObjectProperties","TidalSample",
           "breakup_distance_km","object_properties","sample","schwarzschild_radius_km",
           "surface_gravity","tidal_force","DeformationEngine"]
