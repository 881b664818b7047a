"""A monster that patrols left and right and dies after enough missile hits."""

from __future__ import annotations

from dataclasses import replace

from gdiframe.events import EventManager
from gdiframe.geometry import Vec2
from gdiframe.objects import Collider, GameObject

PLAYER_MISSILE_NAME = "Missile_Player"


class Monster(GameObject):
    """Patrols ``max_distance`` either side of ``center_pos``."""

    def __init__(
        self,
        events: EventManager,
        name: str = "",
        pos: Vec2 = Vec2(),
        scale: Vec2 = Vec2(),
    ) -> None:
        super().__init__(name=name, pos=pos, scale=scale)
        self.events = events
        self.center_pos = Vec2()
        self.speed = 100.0
        self.max_distance = 50.0
        self.direction = 1  # 1: right, -1: left
        self.hp = 5
        collider = self.create_collider()
        collider.scale = Vec2(48.0, 24.0)
        collider.offset_pos = Vec2(0.0, 10.0)

    def update(self, dt: float) -> None:
        x = self.pos.x + dt * self.speed * self.direction
        left = self.center_pos.x - self.max_distance
        right = self.center_pos.x + self.max_distance
        if x < left:
            self.direction = 1
            x = left
        elif x > right:
            self.direction = -1
            x = right
        self.pos = replace(self.pos, x=x)

    def on_collision_enter(self, other: Collider) -> None:
        if other.owner.name == PLAYER_MISSILE_NAME:
            self.hp -= 1
            if self.hp <= 0:
                self.events.delete_object(self)