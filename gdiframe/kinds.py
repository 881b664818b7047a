"""Enumerations shared across the engine: object groups, scenes and events."""

from enum import IntEnum

GROUP_COUNT = 32
"""Number of slots in the per-scene group table and the collision matrix."""


class GroupType(IntEnum):
    """Object groups; lower values are updated and drawn first."""

    DEFAULT = 0
    PLAYER = 1
    MONSTER = 2
    PROJ_PLAYER = 3
    PROJ_MONSTER = 4


class SceneType(IntEnum):
    """Scenes the scene manager can switch between."""

    TOOL = 0
    START = 1
    STAGE_01 = 2
    STAGE_02 = 3


class EventType(IntEnum):
    """Deferred events processed at the end of a frame."""

    CREATE_OBJECT = 0
    DELETE_OBJECT = 1
    SCENE_CHANGE = 2