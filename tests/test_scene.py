import pytest

from tidal_physics import CelestialObject, ObjectKind
from tidal_physics.config import SimulationSettings
from tidal_physics.scene import (
    BODY_START, Demonstration, SceneObject, TestBody, comparison, run, separation_km, single, step,
)


@pytest.fixture
def settings():
    return SimulationSettings(dt=0.1, demonstration_window=3.0)


def test_separation_in_km():
    assert separation_km((0, 0, 5), (0, 0, 0)) == pytest.approx(5000.0)
    assert separation_km((3, 4, 0), (0, 0, 0)) == pytest.approx(5000.0)


def test_idle_scene_samples_without_moving(black_hole):
    demo = single(black_hole)
    frames = demo.tick(0.5)
    frame = frames[0]
    assert frame.distance_km == pytest.approx(5000.0)
    assert frame.sample is not None
    assert frame.command.is_identity
    assert demo.items[0].body.position == BODY_START


def test_body_drifts_inward_while_stretching(black_hole, settings):
    demo = single(black_hole, settings)
    demo.demonstrate()
    demo.tick(0.1)
    assert demo.items[0].body.position == pytest.approx((0.0, 0.0, 4.0))
    frame = demo.tick(0.1)[0]
    assert frame.distance_km == pytest.approx(4000.0)
    assert frame.stretch_factor == pytest.approx(0.06)


def test_window_freezes_stretch(black_hole, settings):
    demo = single(black_hole, settings)
    demo.demonstrate()
    run(demo, 3.0)
    assert not demo.demonstrating
    engine = demo.items[0].body.engine
    assert not engine.active
    assert engine.stretch_factor == pytest.approx(0.9)
    frames = run(demo, 1.0)
    assert engine.stretch_factor == pytest.approx(0.9)
    assert all(f[0].command.is_identity for f in frames)


def test_reset_restores_scene(black_hole, settings):
    demo = single(black_hole, settings)
    demo.demonstrate()
    run(demo, 1.0)
    demo.reset()
    body = demo.items[0].body
    assert body.position == BODY_START
    assert body.engine.stretch_factor == 0.0
    assert not body.engine.active
    assert demo.time == 0.0
    assert not demo.demonstrating


def test_coincident_body_has_no_sample(neutron_star, caplog):
    item = SceneObject(neutron_star, object_distance=-5.0)
    with caplog.at_level("WARNING", logger="tidal_physics"):
        frame = step(item, 0.1)
    assert frame.distance_km == 0.0
    assert frame.sample is None
    assert "coincides" in caplog.text


def test_comparison_pairs_are_independent(settings):
    demo = comparison(20.0, settings)
    bh, ns = demo.items
    assert bh.obj == CelestialObject(ObjectKind.BLACK_HOLE, 20.0)
    assert ns.obj == CelestialObject(ObjectKind.NEUTRON_STAR, 1.4)
    assert bh.body is not ns.body
    assert bh.body.engine is not ns.body.engine

    demo.demonstrate()
    frames = demo.tick(1.0)
    assert [f.kind for f in frames] == [ObjectKind.BLACK_HOLE, ObjectKind.NEUTRON_STAR]
    assert frames[0].distance_km == pytest.approx(15000.0)
    assert frames[1].distance_km == pytest.approx(5000.0)
    assert bh.body.engine.stretch_factor == ns.body.engine.stretch_factor

    ns.body.engine.reset()
    assert bh.body.engine.stretch_factor == pytest.approx(0.3)


def test_test_body_defaults():
    body = TestBody()
    assert body.position == BODY_START
    assert not body.engine.active


def test_run_uses_settings_step(black_hole, settings):
    demo = Demonstration([SceneObject(black_hole)], settings)
    frames = run(demo, 1.0)
    assert len(frames) == 10
    assert frames[-1][0].time == pytest.approx(1.0)


def test_second_demonstrate_keeps_running_window(black_hole, settings):
    demo = single(black_hole, settings)
    demo.demonstrate()
    run(demo, 2.0)
    demo.demonstrate()
    run(demo, 1.0)
    assert not demo.demonstrating
    assert demo.items[0].body.engine.stretch_factor == pytest.approx(0.9)
