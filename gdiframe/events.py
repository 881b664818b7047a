"""Deferred events: object creation, deletion and scene changes applied at frame end."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gdiframe.kinds import EventType, GroupType, SceneType
from gdiframe.objects import GameObject

if TYPE_CHECKING:
    from gdiframe.scene import SceneManager


@dataclass(frozen=True)
class Event:
    """A request to be carried out at the end of the frame."""

    type: EventType
    obj: GameObject | None = None
    group: GroupType | None = None
    scene: SceneType | None = None


class EventManager:
    """Queues events during a frame and applies them all at its end."""

    def __init__(self) -> None:
        self._events: deque[Event] = deque()
        self._dead: list[GameObject] = []

    @property
    def pending(self) -> tuple[Event, ...]:
        return tuple(self._events)

    @property
    def pending_dead(self) -> tuple[GameObject, ...]:
        """Objects marked dead in the last update, released on the next one."""
        return tuple(self._dead)

    def add_event(self, event: Event) -> None:
        self._events.append(event)

    def create_object(self, obj: GameObject, group: GroupType) -> None:
        self.add_event(Event(EventType.CREATE_OBJECT, obj=obj, group=group))

    def delete_object(self, obj: GameObject) -> None:
        self.add_event(Event(EventType.DELETE_OBJECT, obj=obj))

    def change_scene(self, scene_type: SceneType) -> None:
        self.add_event(Event(EventType.SCENE_CHANGE, scene=scene_type))

    def update(self, scene_manager: SceneManager) -> None:
        """Release last frame's dead objects, then apply queued events in order."""
        self._dead.clear()
        while self._events:
            self._execute(self._events.popleft(), scene_manager)

    def _execute(self, event: Event, scene_manager: SceneManager) -> None:
        if event.type is EventType.CREATE_OBJECT:
            scene_manager.current.add_object(event.obj, event.group)
        elif event.type is EventType.DELETE_OBJECT:
            event.obj.mark_dead()
            self._dead.append(event.obj)
        elif event.type is EventType.SCENE_CHANGE:
            scene_manager.change_scene(event.scene)