"""Fixed-step driver for one or more object/test-body pairs.

Positions are in scene units (1 unit = 1000 km). Any scheduler can call
:meth:`Demonstration.tick`: a render loop with its frame delta, a test with
a fixed step, or :func:`run` for a batch simulation.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .config import SimulationSettings
from .constants import sim_units_to_km
from .deformation import DeformationEngine
from .models import CelestialObject, DeformationCommand, ObjectKind, TidalSample, Vec3
from .reference import COMPARISON_NS_MASS
from .tidal import sample

logger = logging.getLogger(__name__)

BODY_START: Vec3 = (0.0, 0.0, 5.0)
COMPARISON_OFFSET = 10.0

def separation_km(a: Vec3, b: Vec3) -> float:
    return sim_units_to_km(math.dist(a, b))

@dataclass
class TestBody:
    __test__ = False  # not a pytest class

    position: Vec3 = BODY_START
    engine: DeformationEngine = field(default_factory=DeformationEngine)

    def reset(self) -> None:
        self.position = BODY_START
        self.engine.reset()

@dataclass
class SceneObject:
    obj: CelestialObject
    object_distance: float = 0.0
    body: TestBody = field(default_factory=TestBody)

    @property
    def position(self) -> Vec3:
        return (0.0, 0.0, -self.object_distance)

@dataclass(frozen=True)
class Frame:
    time: float
    kind: ObjectKind
    distance_km: float
    sample: Optional[TidalSample]
    command: DeformationCommand
    stretch_factor: float

def step(item: SceneObject, dt: float, time: float = 0.0) -> Frame:
    body = item.body
    distance = separation_km(body.position, item.position)
    if distance > 0:
        tidal = sample(item.obj, distance)
    else:
        logger.warning("test body coincides with %s, no tidal sample", item.obj.kind.value)
        tidal = None
    command = body.engine.advance(dt, tidal)
    body.position = tuple(p + v * dt for p, v in zip(body.position, command.velocity))
    return Frame(time=time, kind=item.obj.kind, distance_km=distance, sample=tidal,
                 command=command, stretch_factor=body.engine.stretch_factor)

class Demonstration:
    """Runs the stretch for a fixed window, then freezes it.

    Calling :meth:`demonstrate` while a window is open keeps that window;
    it does not restart the countdown.
    """

    def __init__(self, items: Sequence[SceneObject], settings: Optional[SimulationSettings] = None):
        self.items = list(items)
        self.settings = settings or SimulationSettings()
        self.time = 0.0
        self._remaining: Optional[float] = None

    @property
    def demonstrating(self) -> bool:
        return self._remaining is not None

    def demonstrate(self) -> None:
        if self._remaining is not None:
            return
        logger.info("demonstration started for %d object(s)", len(self.items))
        for item in self.items:
            item.body.engine.trigger()
        self._remaining = self.settings.demonstration_window

    def tick(self, dt: float) -> List[Frame]:
        dt = max(0.0, dt)
        self.time += dt
        frames = [step(item, dt, self.time) for item in self.items]
        if self._remaining is not None:
            self._remaining -= dt
            # tolerate rounding from summing small steps
            if self._remaining <= 1e-9:
                self._finish()
        return frames

    def _finish(self) -> None:
        for item in self.items:
            item.body.engine.stop()
        self._remaining = None
        logger.info("demonstration window elapsed at t=%.3fs", self.time)

    def reset(self) -> None:
        for item in self.items:
            item.body.reset()
        self.time = 0.0
        self._remaining = None

def single(obj: CelestialObject, settings: Optional[SimulationSettings] = None) -> Demonstration:
    return Demonstration([SceneObject(obj)], settings)

def comparison(mass: float, settings: Optional[SimulationSettings] = None) -> Demonstration:
    """Black hole of ``mass`` beside a 1.4 M☉ neutron star, each with its own body."""
    return Demonstration([
        SceneObject(CelestialObject(ObjectKind.BLACK_HOLE, mass), COMPARISON_OFFSET),
        SceneObject(CelestialObject(ObjectKind.NEUTRON_STAR, COMPARISON_NS_MASS), -COMPARISON_OFFSET),
    ], settings)

def run(demo: Demonstration, seconds: float, dt: Optional[float] = None) -> List[List[Frame]]:
    dt = dt or demo.settings.dt
    steps = int(round(seconds / dt))
    logger.debug("running %d steps of %.4fs", steps, dt)
    return [demo.tick(dt) for _ in range(steps)]
