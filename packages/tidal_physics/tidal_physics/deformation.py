import logging
from dataclasses import replace
from typing import Optional

from .errors import InvalidArgument
from .models import IDENTITY, DeformationCommand, DeformationState, TidalSample, Vec3

logger = logging.getLogger(__name__)

RAMP_RATE = 0.3  # stretch per second
LATERAL_COMPRESSION = 0.5
LONGITUDINAL_STRETCH = 10.0
DRIFT_VELOCITY: Vec3 = (0.0, 0.0, -10.0)

class DeformationEngine:
    """Time-stepped stretch animation for one test body.

    Idle until :meth:`trigger`; while stretching, :meth:`advance` ramps the
    stretch factor linearly toward 1. :meth:`stop` freezes it, only
    :meth:`reset` clears it. The ramp is time based; the tidal sample handed
    to ``advance`` is kept for display and never changes the rate.
    """

    def __init__(self, ramp_rate: float = RAMP_RATE,
                 lateral_compression: float = LATERAL_COMPRESSION,
                 longitudinal_stretch: float = LONGITUDINAL_STRETCH,
                 drift_velocity: Vec3 = DRIFT_VELOCITY):
        if not ramp_rate >= 0:
            raise InvalidArgument(f"ramp_rate must be non-negative, got {ramp_rate!r}")
        if not 0 <= lateral_compression <= 1:
            raise InvalidArgument(f"lateral_compression must be within [0, 1], got {lateral_compression!r}")
        if not longitudinal_stretch >= 0:
            raise InvalidArgument(f"longitudinal_stretch must be non-negative, got {longitudinal_stretch!r}")
        self.ramp_rate = ramp_rate
        self.lateral_compression = lateral_compression
        self.longitudinal_stretch = longitudinal_stretch
        self.drift_velocity = tuple(drift_velocity)
        self._state = DeformationState()
        self.last_sample: Optional[TidalSample] = None

    @property
    def state(self) -> DeformationState:
        return replace(self._state)

    @property
    def active(self) -> bool:
        return self._state.active

    @property
    def stretch_factor(self) -> float:
        return self._state.stretch_factor

    @property
    def command(self) -> DeformationCommand:
        if not self._state.active:
            return IDENTITY
        s = self._state.stretch_factor
        lateral = 1.0 - s * self.lateral_compression
        return DeformationCommand(
            scale=(lateral, 1.0 + s * self.longitudinal_stretch, lateral),
            velocity=self.drift_velocity,
        )

    def trigger(self) -> None:
        if not self._state.active:
            logger.debug("stretch started at factor %.3f", self._state.stretch_factor)
        self._state.active = True

    def stop(self) -> None:
        if self._state.active:
            logger.debug("stretch stopped at factor %.3f", self._state.stretch_factor)
        self._state.active = False

    def reset(self) -> None:
        logger.debug("deformation reset")
        self._state = DeformationState()
        self.last_sample = None

    def advance(self, delta_seconds: float,
                sample: Optional[TidalSample] = None) -> DeformationCommand:
        dt = max(0.0, delta_seconds)
        if sample is not None:
            self.last_sample = sample
        if self._state.active:
            s = self._state.stretch_factor + dt * self.ramp_rate
            self._state.stretch_factor = max(0.0, min(1.0, s))
        return self.command
