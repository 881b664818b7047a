"""The engine: owns every manager and runs one frame at a time."""

from __future__ import annotations

import time
from typing import Callable, Iterable

from gdiframe.camera import Camera
from gdiframe.clock import TimeManager
from gdiframe.collision import CollisionManager
from gdiframe.events import EventManager
from gdiframe.geometry import Vec2, randint
from gdiframe.keyboard import Key, KeyManager
from gdiframe.kinds import SceneType
from gdiframe.scene import SceneManager
from gdiframe.scenes import StartScene, ToolScene

DEFAULT_RESOLUTION = Vec2(1280, 768)


class Engine:
    """Wires the managers together and advances the game frame by frame."""

    def __init__(
        self,
        resolution: Vec2 = DEFAULT_RESOLUTION,
        clock: Callable[[], float] = time.perf_counter,
        max_dt: float | None = None,
        rng: Callable[[int, int], int] = randint,
    ) -> None:
        self.resolution = resolution
        self.title = ""
        self.time = TimeManager(clock, max_dt)
        self.keys = KeyManager()
        self.camera = Camera(resolution)
        self.collisions = CollisionManager()
        self.events = EventManager()
        scenes = {
            SceneType.START: StartScene(
                "Start Scene",
                self.events,
                self.keys,
                self.collisions,
                self.camera,
                rng=rng,
            ),
            SceneType.TOOL: ToolScene("Tool Scene", self.events, self.keys),
        }
        self.scenes = SceneManager(scenes, SceneType.START)

    def progress(self, pressed: Iterable[Key] = (), focused: bool = True) -> str | None:
        """Run one frame; return the status line when the FPS counter refreshes."""
        dt = self.time.update()
        self.keys.update(pressed, focused)

        self.scenes.update(dt)
        self.collisions.update(self.scenes.current)

        # Drawing drops dead objects from the scene.
        self.scenes.current.sweep_dead()
        status = self.time.tick()
        if status is not None:
            self.title = status

        self.events.update(self.scenes)
        return status