import itertools

import pytest

from gdiframe.core import Engine
from gdiframe.geometry import Vec2
from gdiframe.keyboard import Key
from gdiframe.kinds import GroupType
from gdiframe.objects import GameObject
from gdiframe.scenes import StartScene, ToolScene


def stepping_clock(step):
    counter = itertools.count()
    return lambda: next(counter) * step


@pytest.fixture
def engine():
    return Engine(clock=stepping_clock(0.5), rng=lambda low, high: 1)


def test_starts_in_start_scene(engine):
    assert isinstance(engine.scenes.current, StartScene)
    assert len(engine.scenes.current.group_objects(GroupType.MONSTER)) == 8
    assert engine.camera.look_at == engine.resolution / 2


def test_enter_switches_scenes_and_back(engine):
    start = engine.scenes.current
    engine.progress([Key.ENTER])
    assert isinstance(engine.scenes.current, ToolScene)
    assert start.group_objects(GroupType.MONSTER) == ()
    assert not engine.collisions.is_checked(GroupType.PLAYER, GroupType.MONSTER)

    engine.progress([Key.ENTER])
    assert isinstance(engine.scenes.current, ToolScene)

    engine.progress([])
    engine.progress([Key.ENTER])
    assert engine.scenes.current is start
    assert len(start.group_objects(GroupType.MONSTER)) == 8
    assert engine.collisions.is_checked(GroupType.PLAYER, GroupType.MONSTER)


def test_status_line_after_one_second(engine):
    assert engine.progress() is None
    status = engine.progress()
    assert status == "FPS : 2 DT : 0.500000"
    assert engine.title == status
    assert engine.time.fps == 2


def test_missile_hit_reduces_monster_hp(engine):
    monster = engine.scenes.current.group_objects(GroupType.MONSTER)[0]
    missile = GameObject(name="Missile_Player", pos=monster.center_pos + Vec2(0, 10))
    missile.create_collider().scale = Vec2(15, 15)
    engine.events.create_object(missile, GroupType.PROJ_PLAYER)

    engine.progress()
    assert missile in engine.scenes.current.group_objects(GroupType.PROJ_PLAYER)
    engine.progress()
    assert monster.hp == 4
    assert monster.collider.colliding


def test_deleted_object_leaves_scene(engine):
    scene = engine.scenes.current
    monster = scene.group_objects(GroupType.MONSTER)[0]
    engine.events.delete_object(monster)
    engine.progress()
    assert monster.is_dead
    assert monster in scene.group_objects(GroupType.MONSTER)
    engine.progress()
    assert monster not in scene.group_objects(GroupType.MONSTER)
    assert len(scene.group_objects(GroupType.MONSTER)) == 7


def test_monsters_stay_within_patrol(engine):
    for _ in range(5):
        engine.progress()
    for monster in engine.scenes.current.group_objects(GroupType.MONSTER):
        assert abs(monster.pos.x - monster.center_pos.x) <= monster.max_distance