import random

import pytest

from enginecore.particles import (
    AABB,
    DELTA_TIME,
    MAX_INSTANCES,
    CameraTransform,
    ParticleEmitter,
    ParticleManager,
    is_collision,
)
from enginecore.vector import Vector3


def make_manager(seed=1):
    manager = ParticleManager(CameraTransform(), random.Random(seed))
    manager.create_particle_group("spark", "./resources/circle.png")
    return manager


def particles(manager, name="spark"):
    return manager.particle_groups()[name].particles


@pytest.mark.parametrize(
    "point,expected",
    [
        (Vector3(0.0, 0.0, 0.0), True),
        (Vector3(1.0, -1.0, 1.0), True),
        (Vector3(1.5, 0.0, 0.0), False),
        (Vector3(0.0, 0.0, -2.0), False),
    ],
)
def test_is_collision(point, expected):
    box = AABB(Vector3(-1.0, -1.0, -1.0), Vector3(1.0, 1.0, 1.0))
    assert is_collision(box, point) is expected


def test_duplicate_group_raises():
    manager = make_manager()
    with pytest.raises(ValueError):
        manager.create_particle_group("spark", "other.png")


def test_emit_unknown_group_raises():
    manager = make_manager()
    with pytest.raises(KeyError):
        manager.emit("missing", Vector3(), 1)


def test_emit_creates_particles_in_ranges():
    manager = make_manager()
    origin = Vector3(5.0, 6.0, 7.0)
    manager.emit("spark", origin, 20)
    created = particles(manager)
    assert len(created) == 20
    for p in created:
        for value, centre in zip(p.transform.translate, origin):
            assert centre - 1.0 <= value <= centre + 1.0
        assert -0.5 <= p.velocity.x <= 0.5
        assert 0.0 <= p.velocity.y <= 1.0
        assert p.color.w == 1.0
        assert 1.0 <= p.life_time <= 3.0
        assert p.current_time == 0.0
        assert tuple(p.transform.scale) == (1.0, 1.0, 1.0)
    assert tuple(origin) == (5.0, 6.0, 7.0)


def test_same_seed_is_deterministic():
    a, b = make_manager(7), make_manager(7)
    a.emit("spark", Vector3(), 5)
    b.emit("spark", Vector3(), 5)
    assert particles(a) == particles(b)


def test_update_moves_and_ages_particles():
    manager = make_manager()
    manager.emit("spark", Vector3(10.0, 10.0, 10.0), 4)
    before = [(tuple(p.transform.translate), tuple(p.velocity)) for p in particles(manager)]
    manager.update()
    group = manager.particle_groups()["spark"]
    assert group.num_instance == 4
    assert len(group.instances) == 4
    for p, (pos, vel), inst in zip(group.particles, before, group.instances):
        assert p.current_time == pytest.approx(DELTA_TIME)
        for now, old, v in zip(p.transform.translate, pos, vel):
            assert now == pytest.approx(old + v * DELTA_TIME)
        assert tuple(p.velocity) == vel
        assert inst.color.w == pytest.approx(1.0 - DELTA_TIME / p.life_time)
        assert inst.world[3][:3] == pytest.approx(list(pos))


def test_acceleration_applies_only_inside_area():
    manager = make_manager()
    manager.field.acceleration = Vector3(0.0, 60.0, 0.0)
    manager.emit("spark", Vector3(0.0, 0.0, 0.0), 1)
    manager.create_particle_group("far", "x.png")
    manager.emit("far", Vector3(10.0, 10.0, 10.0), 1)
    inside_before = particles(manager)[0].velocity.y
    outside_before = particles(manager, "far")[0].velocity.y
    manager.update()
    assert particles(manager)[0].velocity.y == pytest.approx(inside_before + 1.0)
    assert particles(manager, "far")[0].velocity.y == outside_before


def test_dead_particles_are_removed():
    manager = make_manager()
    manager.emit("spark", Vector3(), 3)
    first = particles(manager)[0]
    first.current_time = first.life_time
    manager.update()
    remaining = particles(manager)
    assert len(remaining) == 2
    assert all(p is not first for p in remaining)


def test_instances_capped_at_maximum():
    manager = make_manager()
    manager.emit("spark", Vector3(), MAX_INSTANCES + 50)
    manager.update()
    group = manager.particle_groups()["spark"]
    assert group.num_instance == MAX_INSTANCES
    assert len(group.particles) == MAX_INSTANCES + 50
    assert all(p.current_time == 0.0 for p in group.particles[MAX_INSTANCES:])


def test_billboard_drops_translation():
    camera = CameraTransform(translate=Vector3(1.0, 2.0, 3.0))
    manager = ParticleManager(camera, random.Random(0))
    billboard = manager.make_billboard_matrix()
    assert billboard[3][:3] == [0.0, 0.0, 0.0]
    assert billboard[0][0] == pytest.approx(-1.0)
    assert billboard[3][3] == 1.0


def test_particle_groups_returns_copy():
    manager = make_manager()
    groups = manager.particle_groups()
    del groups["spark"]
    assert "spark" in manager.particle_groups()


def test_emitter_defaults_and_emit():
    manager = make_manager()
    emitter = ParticleEmitter(manager, "spark")
    assert emitter.count == 3
    assert emitter.frequency == 0.5
    assert tuple(emitter.transform.scale) == (1.0, 1.0, 1.0)
    emitter.emit()
    assert len(particles(manager)) == 3


def test_emitter_waits_for_frequency():
    manager = make_manager()
    emitter = ParticleEmitter(manager, "spark")
    emitter.update()
    assert particles(manager) == []
    assert emitter.frequency_time == pytest.approx(DELTA_TIME)


def test_emitter_emits_once_per_group():
    manager = make_manager()
    manager.create_particle_group("smoke", "smoke.png")
    emitter = ParticleEmitter(manager, "spark")
    emitter.frequency = DELTA_TIME
    emitter.update()
    assert len(particles(manager)) == 2 * emitter.count
    assert particles(manager, "smoke") == []
    assert emitter.frequency_time == pytest.approx(0.0)