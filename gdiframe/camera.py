"""Camera that maps world positions to screen positions."""

from __future__ import annotations

from typing import Protocol

from gdiframe.geometry import Vec2


class _Trackable(Protocol):
    pos: Vec2

    @property
    def is_dead(self) -> bool: ...


class Camera:
    """Keeps a look-at point at the centre of a screen of the given resolution."""

    def __init__(self, resolution: Vec2) -> None:
        self.resolution = resolution
        self.look_at = Vec2()
        self.target: _Trackable | None = None
        self._diff = Vec2()

    def set_look_at(self, look_at: Vec2) -> None:
        self.look_at = look_at

    def set_target(self, target: _Trackable | None) -> None:
        self.target = target

    def update(self) -> None:
        """Follow the target, dropping it once it is dead, and refresh the offset."""
        if self.target is not None:
            if self.target.is_dead:
                self.target = None
            else:
                self.look_at = self.target.pos
        self._diff = self.look_at - self.resolution / 2

    def render_pos(self, pos: Vec2) -> Vec2:
        """Screen position of a world position."""
        return pos - self._diff