"""Group-against-group box collision detection with enter/stay/exit callbacks."""

from __future__ import annotations

from gdiframe.kinds import GROUP_COUNT, GroupType
from gdiframe.objects import Collider
from gdiframe.scene import Scene


def is_collision(left: Collider, right: Collider) -> bool:
    """Whether two boxes overlap; boxes that only touch do not."""
    return (
        abs(right.final_pos.x - left.final_pos.x) < (left.scale.x + right.scale.x) / 2
        and abs(right.final_pos.y - left.final_pos.y) < (left.scale.y + right.scale.y) / 2
    )


class CollisionManager:
    """Tests the group pairs that are switched on and remembers last frame's contacts."""

    def __init__(self) -> None:
        self._check = [0] * GROUP_COUNT
        self._contacts: dict[tuple[int, int], bool] = {}

    @staticmethod
    def _cell(left: GroupType | int, right: GroupType | int) -> tuple[int, int]:
        row, col = sorted((int(left), int(right)))
        return row, 1 << col

    def check_group(self, left: GroupType | int, right: GroupType | int) -> None:
        """Toggle collision checking between two groups."""
        row, bit = self._cell(left, right)
        self._check[row] ^= bit

    def is_checked(self, left: GroupType | int, right: GroupType | int) -> bool:
        row, bit = self._cell(left, right)
        return bool(self._check[row] & bit)

    def reset(self) -> None:
        self._check = [0] * GROUP_COUNT

    def update(self, scene: Scene) -> None:
        for row in range(GROUP_COUNT):
            for col in range(row, GROUP_COUNT):
                if self._check[row] & (1 << col):
                    self._group_update(scene, row, col)

    def _group_update(self, scene: Scene, left: int, right: int) -> None:
        rights = scene.group_objects(right)
        for left_obj in scene.group_objects(left):
            left_col = left_obj.collider
            if left_col is None:
                continue
            for right_obj in rights:
                right_col = right_obj.collider
                if right_col is None or left_obj is right_obj:
                    continue

                key = (left_col.id, right_col.id)
                was_touching = self._contacts.setdefault(key, False)
                either_dead = left_obj.is_dead or right_obj.is_dead

                if is_collision(left_col, right_col):
                    if was_touching:
                        if either_dead:
                            left_col.on_collision_exit(right_col)
                            right_col.on_collision_exit(left_col)
                            self._contacts[key] = False
                        else:
                            left_col.on_collision(right_col)
                            right_col.on_collision(left_col)
                    elif not either_dead:
                        # An object about to be removed does not start a contact.
                        left_col.on_collision_enter(right_col)
                        right_col.on_collision_enter(left_col)
                        self._contacts[key] = True
                elif was_touching:
                    left_col.on_collision_exit(right_col)
                    right_col.on_collision_exit(left_col)
                    self._contacts[key] = False