"""Scenes holding grouped objects, and the manager that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping

from gdiframe.kinds import GROUP_COUNT, GroupType, SceneType
from gdiframe.objects import GameObject


class Scene(ABC):
    """A set of objects sorted into groups, updated group by group."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._groups: list[list[GameObject]] = [[] for _ in range(GROUP_COUNT)]

    def add_object(self, obj: GameObject, group: GroupType | int) -> None:
        self._groups[int(group)].append(obj)

    def group_objects(self, group: GroupType | int) -> tuple[GameObject, ...]:
        return tuple(self._groups[int(group)])

    def delete_group(self, group: GroupType | int) -> None:
        self._groups[int(group)].clear()

    def delete_all(self) -> None:
        for objects in self._groups:
            objects.clear()

    @abstractmethod
    def enter(self) -> None:
        """Set the scene up when it becomes current."""

    @abstractmethod
    def exit(self) -> None:
        """Tear the scene down when it stops being current."""

    def update(self, dt: float) -> None:
        """Run the frame logic of every live object."""
        for objects in self._groups:
            for obj in list(objects):
                if not obj.is_dead:
                    obj.update(dt)

    def final_update(self) -> None:
        for objects in self._groups:
            for obj in list(objects):
                obj.final_update()

    def sweep_dead(self) -> list[GameObject]:
        """Drop dead objects from every group and return them."""
        removed: list[GameObject] = []
        for objects in self._groups:
            removed.extend(obj for obj in objects if obj.is_dead)
            objects[:] = [obj for obj in objects if not obj.is_dead]
        return removed


class SceneManager:
    """Owns the scenes and drives the current one."""

    def __init__(
        self, scenes: Mapping[SceneType, Scene], start: SceneType = SceneType.START
    ) -> None:
        self.scenes = dict(scenes)
        if start not in self.scenes:
            raise KeyError(f"no scene registered for {start.name}")
        self.current = self.scenes[start]
        self.current.enter()

    def update(self, dt: float) -> None:
        self.current.update(dt)
        self.current.final_update()

    def change_scene(self, scene_type: SceneType) -> None:
        if scene_type not in self.scenes:
            raise KeyError(f"no scene registered for {scene_type.name}")
        self.current.exit()
        self.current = self.scenes[scene_type]
        self.current.enter()