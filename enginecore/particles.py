"""Billboarded particle groups with a simple acceleration field and emitters."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

from enginecore.matrix import Matrix4x4
from enginecore.mymath import (
    inverse,
    make_affine_matrix,
    make_perspective_fov_matrix,
    make_rotate_y_matrix,
    make_scale_matrix,
    make_translate_matrix,
)
from enginecore.vector import Vector3, Vector4

MAX_INSTANCES = 100
DELTA_TIME = 1.0 / 60.0
CLIENT_WIDTH = 1280
CLIENT_HEIGHT = 720
FOV_Y = 0.45
NEAR_CLIP = 0.1
FAR_CLIP = 100.0


def _unit_scale() -> Vector3:
    return Vector3(1.0, 1.0, 1.0)


@dataclass
class Transform:
    """Scale, rotation and translation of an object."""

    scale: Vector3 = field(default_factory=_unit_scale)
    rotate: Vector3 = field(default_factory=Vector3)
    translate: Vector3 = field(default_factory=Vector3)


@dataclass
class CameraTransform(Transform):
    """The camera's placement in the world."""

    def world_matrix(self) -> Matrix4x4:
        """Affine matrix placing the camera in the world."""
        return make_affine_matrix(self.scale, self.rotate, self.translate)


@dataclass
class AABB:
    """Axis-aligned bounding box."""

    min: Vector3 = field(default_factory=Vector3)
    max: Vector3 = field(default_factory=Vector3)


@dataclass
class AccelerationField:
    """A constant acceleration applied to particles inside an area."""

    acceleration: Vector3 = field(default_factory=Vector3)
    area: AABB = field(
        default_factory=lambda: AABB(Vector3(-1.0, -1.0, -1.0), Vector3(1.0, 1.0, 1.0))
    )


@dataclass
class Particle:
    """One live particle."""

    transform: Transform = field(default_factory=Transform)
    velocity: Vector3 = field(default_factory=Vector3)
    color: Vector4 = field(default_factory=Vector4)
    life_time: float = 0.0
    current_time: float = 0.0


@dataclass
class InstanceData:
    """Per-instance data handed to the renderer."""

    wvp: Matrix4x4
    world: Matrix4x4
    color: Vector4


@dataclass
class ParticleGroup:
    """A named set of particles sharing one texture."""

    texture_file_path: str
    particles: List[Particle] = field(default_factory=list)
    num_instance: int = MAX_INSTANCES
    instances: List[InstanceData] = field(default_factory=list)


def is_collision(aabb: AABB, point: Vector3) -> bool:
    """True if the point lies inside the box, boundaries included."""
    return (
        aabb.min.x <= point.x <= aabb.max.x
        and aabb.min.y <= point.y <= aabb.max.y
        and aabb.min.z <= point.z <= aabb.max.z
    )


class ParticleManager:
    """Owns particle groups, spawns particles and advances them each frame."""

    def __init__(
        self,
        camera: Optional[CameraTransform] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.camera = camera if camera is not None else CameraTransform()
        self.rng = rng if rng is not None else random.Random()
        self.field = AccelerationField()
        self.billboard_matrix = Matrix4x4.identity()
        self._groups: Dict[str, ParticleGroup] = {}

    def create_particle_group(self, name: str, texture_file_path: str) -> ParticleGroup:
        """Register a new empty group; raises ValueError if the name is taken."""
        if name in self._groups:
            raise ValueError(f"particle group {name!r} already exists")
        group = ParticleGroup(texture_file_path=texture_file_path)
        self._groups[name] = group
        return group

    def make_billboard_matrix(self) -> Matrix4x4:
        """Compute the camera-facing rotation with its translation removed."""
        back_to_front = make_rotate_y_matrix(math.pi)
        billboard = back_to_front * self.camera.world_matrix()
        billboard[3][0] = billboard[3][1] = billboard[3][2] = 0.0
        self.billboard_matrix = billboard
        return billboard

    def emit(self, name: str, position: Vector3, count: int) -> None:
        """Spawn ``count`` randomised particles around ``position`` in a group."""
        try:
            group = self._groups[name]
        except KeyError:
            raise KeyError(f"no particle group named {name!r}") from None
        rng = self.rng
        for _ in range(count):
            offset = Vector3(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0))
            velocity = Vector3(rng.random() - 0.5, rng.random(), rng.random() - 0.5)
            color = Vector4(rng.random(), rng.random(), rng.random(), 1.0)
            group.particles.append(
                Particle(
                    transform=Transform(translate=position + offset),
                    velocity=velocity,
                    color=color,
                    life_time=1.0 + rng.random() * 2.0,
                    current_time=0.0,
                )
            )

    def update(self) -> None:
        """Advance every particle one frame and rebuild the instance data."""
        billboard = self.make_billboard_matrix()
        view = inverse(self.camera.world_matrix())
        projection = make_perspective_fov_matrix(
            FOV_Y, CLIENT_WIDTH / CLIENT_HEIGHT, NEAR_CLIP, FAR_CLIP
        )
        view_projection = view * projection

        for group in self._groups.values():
            group.particles = [p for p in group.particles if p.current_time < p.life_time]
            group.num_instance = 0
            group.instances = []
            for particle in group.particles:
                if group.num_instance >= MAX_INSTANCES:
                    continue
                world = (
                    make_scale_matrix(particle.transform.scale)
                    * billboard
                    * make_translate_matrix(particle.transform.translate)
                )
                wvp = world * view_projection
                if is_collision(self.field.area, particle.transform.translate):
                    particle.velocity += self.field.acceleration * DELTA_TIME
                particle.transform.translate += particle.velocity * DELTA_TIME
                particle.current_time += DELTA_TIME
                alpha = 1.0 - particle.current_time / particle.life_time
                group.instances.append(
                    InstanceData(wvp=wvp, world=world, color=replace(particle.color, w=alpha))
                )
                group.num_instance += 1

    def particle_groups(self) -> Dict[str, ParticleGroup]:
        """A shallow copy of the name-to-group mapping."""
        return dict(self._groups)


class ParticleEmitter:
    """Periodically emits particles into one named group."""

    def __init__(self, manager: ParticleManager, name: str) -> None:
        self.manager = manager
        self.name = name
        self.transform = Transform()
        self.count = 3
        self.frequency = 0.5
        self.frequency_time = 0.0

    def emit(self) -> None:
        """Emit one burst at the emitter's position."""
        self.manager.emit(self.name, self.transform.translate, self.count)

    def update(self) -> None:
        """Advance the timer; once per period emit a burst for each existing group."""
        groups = self.manager.particle_groups()
        self.frequency_time += DELTA_TIME
        if self.frequency <= self.frequency_time:
            self.frequency_time -= self.frequency
            for _ in groups:
                self.manager.emit(self.name, self.transform.translate, self.count)