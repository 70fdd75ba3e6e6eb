"""Shared fixtures."""

import pytest

from tidal_physics import CelestialObject, DeformationEngine, ObjectKind, sample


@pytest.fixture
def black_hole():
    return CelestialObject(ObjectKind.BLACK_HOLE, 10.0)


@pytest.fixture
def neutron_star():
    return CelestialObject(ObjectKind.NEUTRON_STAR, 1.4)


@pytest.fixture
def bh_sample(black_hole):
    return sample(black_hole, 100.0)


@pytest.fixture
def engine():
    return DeformationEngine()
