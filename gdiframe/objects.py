"""Game objects and the box colliders attached to them."""

from __future__ import annotations

import copy
import itertools
from typing import Any

from gdiframe.animation import Animator
from gdiframe.geometry import Vec2

_collider_ids = itertools.count()


class Collider:
    """An axis-aligned box that follows its owner at a fixed offset."""

    def __init__(
        self,
        owner: Any = None,
        offset_pos: Vec2 = Vec2(),
        scale: Vec2 = Vec2(),
    ) -> None:
        self.owner = owner
        self.offset_pos = offset_pos
        self.scale = scale
        self.final_pos = Vec2()
        self.id = next(_collider_ids)
        self.contacts = 0

    @property
    def colliding(self) -> bool:
        """Whether the collider currently touches at least one other collider."""
        return self.contacts > 0

    def final_update(self) -> None:
        """Recompute the world position from the owner's position."""
        self.final_pos = self.owner.pos + self.offset_pos
        if self.contacts < 0:
            raise RuntimeError(f"collider {self.id} has a negative contact count")

    def on_collision(self, other: Collider) -> None:
        self.owner.on_collision(other)

    def on_collision_enter(self, other: Collider) -> None:
        self.contacts += 1
        self.owner.on_collision_enter(other)

    def on_collision_exit(self, other: Collider) -> None:
        self.contacts -= 1
        self.owner.on_collision_exit(other)

    def _copy_for(self, owner: Any) -> Collider:
        return Collider(owner, self.offset_pos, self.scale)


class GameObject:
    """Something that lives in a scene: a position, a size and optional components."""

    def __init__(self, name: str = "", pos: Vec2 = Vec2(), scale: Vec2 = Vec2()) -> None:
        self.name = name
        self.pos = pos
        self.scale = scale
        self.collider: Collider | None = None
        self.animator: Animator | None = None
        self.alive = True

    @property
    def is_dead(self) -> bool:
        return not self.alive

    def create_collider(self) -> Collider:
        self.collider = Collider(self)
        return self.collider

    def create_animator(self) -> Animator:
        self.animator = Animator(self)
        return self.animator

    def update(self, dt: float) -> None:
        """Per-frame logic; the base object only advances its animator."""
        if self.animator is not None:
            self.animator.update(dt)

    def final_update(self) -> None:
        """Bring components in line with the state reached this frame."""
        if self.collider is not None:
            self.collider.final_update()

    def mark_dead(self) -> None:
        self.alive = False

    def clone(self) -> GameObject:
        """A live copy with its own collider and animator."""
        twin = copy.copy(self)
        twin.alive = True
        twin.collider = self.collider._copy_for(twin) if self.collider else None
        twin.animator = (
            copy.deepcopy(self.animator, {id(self): twin}) if self.animator else None
        )
        return twin

    def on_collision(self, other: Collider) -> None:
        """Called every frame while touching ``other``."""

    def on_collision_enter(self, other: Collider) -> None:
        """Called on the first frame of touching ``other``."""

    def on_collision_exit(self, other: Collider) -> None:
        """Called when contact with ``other`` ends."""