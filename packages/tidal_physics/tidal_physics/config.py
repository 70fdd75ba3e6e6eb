import logging
import os
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from .logging_config import setup_logging
from .models import CelestialObject, ObjectKind

MASS_RANGES: Dict[ObjectKind, Tuple[float, float]] = {
    ObjectKind.BLACK_HOLE: (3.0, 100.0),
    ObjectKind.NEUTRON_STAR: (1.0, 2.5),
}

DEFAULT_DT = 1.0 / 60.0
DEMONSTRATION_WINDOW_S = 3.0

class ObjectConfig(BaseModel):
    """Learner-facing object controls, checked before they reach the physics."""
    kind: ObjectKind = ObjectKind.BLACK_HOLE
    mass: float = 10.0

    @model_validator(mode="after")
    def _mass_in_range(self):
        lo, hi = MASS_RANGES[self.kind]
        if not lo <= self.mass <= hi:
            raise ValueError(f"{self.kind.value} mass must be within [{lo}, {hi}] solar masses, got {self.mass}")
        return self

    def to_object(self) -> CelestialObject:
        return CelestialObject(kind=self.kind, mass=self.mass)

class SimulationSettings(BaseModel):
    dt: float = Field(DEFAULT_DT, gt=0)
    demonstration_window: float = Field(DEMONSTRATION_WINDOW_S, gt=0)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "SimulationSettings":
        return cls(
            dt=float(os.getenv("TIDAL_DT", DEFAULT_DT)),
            demonstration_window=float(os.getenv("TIDAL_DEMO_WINDOW", DEMONSTRATION_WINDOW_S)),
            log_level=os.getenv("TIDAL_LOG_LEVEL", "INFO").upper(),
        )

    def configure_logging(self, log_file: Optional[str] = None) -> logging.Logger:
        return setup_logging(self.log_level, log_file)
