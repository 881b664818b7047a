"""The playable start scene and the empty tool scene."""

from __future__ import annotations

from typing import Callable

from gdiframe.camera import Camera
from gdiframe.collision import CollisionManager
from gdiframe.events import EventManager
from gdiframe.geometry import Vec2, randint
from gdiframe.keyboard import Key, KeyManager
from gdiframe.kinds import GroupType, SceneType
from gdiframe.monster import Monster
from gdiframe.scene import Scene

MONSTER_COUNT = 8
MONSTER_MOVE_DISTANCE = 25.0
MONSTER_SCALE = 50.0
MONSTER_NAME = "Monster"


class StartScene(Scene):
    """A row of patrolling monsters; Enter switches to the tool scene."""

    def __init__(
        self,
        name: str,
        events: EventManager,
        keys: KeyManager,
        collisions: CollisionManager,
        camera: Camera,
        rng: Callable[[int, int], int] = randint,
    ) -> None:
        super().__init__(name)
        self.events = events
        self.keys = keys
        self.collisions = collisions
        self.camera = camera
        self._rng = rng

    def enter(self) -> None:
        """Place the monsters, switch on their collision groups and centre the camera."""
        resolution = self.camera.resolution
        margin = MONSTER_MOVE_DISTANCE + MONSTER_SCALE / 2
        term = (resolution.x - margin * 2) / (MONSTER_COUNT - 1)
        for i in range(MONSTER_COUNT):
            pos = Vec2(margin + term * i, 50.0 * self._rng(1, 3))
            monster = Monster(
                self.events,
                name=MONSTER_NAME,
                pos=pos,
                scale=Vec2(MONSTER_SCALE, MONSTER_SCALE),
            )
            monster.center_pos = pos
            monster.max_distance = MONSTER_MOVE_DISTANCE
            self.add_object(monster, GroupType.MONSTER)

        self.collisions.check_group(GroupType.PLAYER, GroupType.MONSTER)
        self.collisions.check_group(GroupType.MONSTER, GroupType.PROJ_PLAYER)
        self.camera.set_look_at(resolution / 2)

    def exit(self) -> None:
        self.delete_all()
        self.collisions.reset()

    def update(self, dt: float) -> None:
        super().update(dt)
        if self.keys.is_tap(Key.ENTER):
            self.events.change_scene(SceneType.TOOL)


class ToolScene(Scene):
    """An empty scene; Enter switches back to the start scene."""

    def __init__(self, name: str, events: EventManager, keys: KeyManager) -> None:
        super().__init__(name)
        self.events = events
        self.keys = keys

    def enter(self) -> None:
        """Nothing to set up."""

    def exit(self) -> None:
        """Nothing to tear down."""

    def update(self, dt: float) -> None:
        super().update(dt)
        if self.keys.is_tap(Key.ENTER):
            self.events.change_scene(SceneType.START)