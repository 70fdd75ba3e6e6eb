"""Neutron star vs black hole comparison shown next to the scene."""
from dataclasses import dataclass
from typing import List

from .models import CelestialObject, ObjectKind, TidalSample
from .tidal import sample

COMPARISON_NS_MASS = 1.4
COMPARISON_BH_MASS = 10.0
COMPARISON_DISTANCE_KM = 100.0

@dataclass(frozen=True)
class ComparisonRow:
    prop: str
    neutron_star: str
    black_hole: str

# values as quoted in the lesson text
DOCUMENTED_TABLE: List[ComparisonRow] = [
    ComparisonRow("Radius", "~12 km", "~30 km (Schwarzschild)"),
    ComparisonRow("Surface Gravity", "~2×10¹¹ m/s² (2×10¹⁰ g)", "Infinite at singularity"),
    ComparisonRow("Tidal Force at 100km", "~3×10⁹ N/m²", "~1×10⁸ N/m²"),
    ComparisonRow("Human Survival Distance", "~50 km", "~300 km"),
]

@dataclass(frozen=True)
class ComputedComparison:
    neutron_star: TidalSample
    black_hole: TidalSample

    @property
    def tidal_ratio(self) -> float:
        """Neutron star tidal force over black hole tidal force."""
        return self.neutron_star.tidal_force / self.black_hole.tidal_force

def computed_comparison(distance_km: float = COMPARISON_DISTANCE_KM,
                        ns_mass: float = COMPARISON_NS_MASS,
                        bh_mass: float = COMPARISON_BH_MASS) -> ComputedComparison:
    ns = CelestialObject(ObjectKind.NEUTRON_STAR, ns_mass)
    bh = CelestialObject(ObjectKind.BLACK_HOLE, bh_mass)
    return ComputedComparison(neutron_star=sample(ns, distance_km),
                              black_hole=sample(bh, distance_km))

def computed_table(distance_km: float = COMPARISON_DISTANCE_KM) -> List[ComparisonRow]:
    cmp = computed_comparison(distance_km)
    ns, bh = cmp.neutron_star, cmp.black_hole
    return [
        ComparisonRow("Radius", f"{ns.radius_km:.1f} km", f"{bh.radius_km:.1f} km"),
        ComparisonRow("Surface Gravity", f"{ns.surface_gravity:.2e} m/s²", f"{bh.surface_gravity:.2e} m/s²"),
        ComparisonRow(f"Tidal Force at {distance_km:g}km", f"{ns.tidal_force:.2e} N/m²", f"{bh.tidal_force:.2e} N/m²"),
        ComparisonRow("Breakup Distance", f"{ns.breakup_distance_km:.2f} km", f"{bh.breakup_distance_km:.2f} km"),
    ]
