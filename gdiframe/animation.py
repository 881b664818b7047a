"""Sprite-sheet frame animations and the per-object animator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from gdiframe.geometry import Vec2


@dataclass
class Frame:
    """One animation frame: where it sits in the sheet and how long it lasts."""

    left_top: Vec2
    slice: Vec2
    duration: float
    offset: Vec2 = field(default_factory=Vec2)


class Animation:
    """A sequence of frames played once; ``current`` is -1 once finished."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.frames: list[Frame] = []
        self.current = 0
        self.acc_time = 0.0
        self.finished = False

    def __len__(self) -> int:
        return len(self.frames)

    def create(
        self,
        left_top: Vec2,
        slice_size: Vec2,
        step: Vec2,
        duration: float,
        frame_count: int,
    ) -> None:
        """Append ``frame_count`` frames laid out from ``left_top`` by ``step``."""
        self.frames.extend(
            Frame(left_top + step * i, slice_size, duration) for i in range(frame_count)
        )

    def update(self, dt: float) -> None:
        """Advance by ``dt`` seconds; finishes on reaching the last frame."""
        if self.finished:
            return
        self.acc_time += dt
        if self.frames[self.current].duration > self.acc_time:
            return
        self.current = (self.current + 1) % len(self.frames)
        if len(self.frames) - 1 <= self.current:
            self.current = -1
            self.finished = True
            self.acc_time = 0.0
            return
        self.acc_time -= self.frames[self.current].duration

    def set_frame(self, index: int) -> None:
        """Jump to a frame and resume playing from it."""
        self.finished = False
        self.current = index
        self.acc_time = 0.0

    def frame(self, index: int) -> Frame:
        return self.frames[index]


class Animator:
    """Holds named animations for one object and plays one of them."""

    def __init__(self, owner: Any = None) -> None:
        self.owner = owner
        self.animations: dict[str, Animation] = {}
        self.current: Animation | None = None
        self.repeat = False

    def create_animation(
        self,
        name: str,
        left_top: Vec2,
        slice_size: Vec2,
        step: Vec2,
        duration: float,
        frame_count: int,
    ) -> Animation:
        """Build and register a new animation; names must be unique."""
        if name in self.animations:
            raise ValueError(f"animation {name!r} already exists")
        anim = Animation(name)
        anim.create(left_top, slice_size, step, duration, frame_count)
        self.animations[name] = anim
        return anim

    def find_animation(self, name: str) -> Animation | None:
        return self.animations.get(name)

    def play(self, name: str, repeat: bool) -> None:
        """Select the animation to play; an unknown name stops playback."""
        self.current = self.find_animation(name)
        self.repeat = repeat

    def update(self, dt: float) -> None:
        if self.current is None:
            return
        self.current.update(dt)
        if self.repeat and self.current.finished:
            self.current.set_frame(0)