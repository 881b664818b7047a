from gdiframe.collision import CollisionManager, is_collision
from gdiframe.geometry import Vec2
from gdiframe.kinds import GroupType
from gdiframe.objects import GameObject
from gdiframe.scene import Scene


class _Recorder(GameObject):
    def __init__(self, name, pos):
        super().__init__(name=name, pos=pos)
        self.log = []

    def on_collision(self, other):
        self.log.append(("stay", other.owner.name))

    def on_collision_enter(self, other):
        self.log.append(("enter", other.owner.name))

    def on_collision_exit(self, other):
        self.log.append(("exit", other.owner.name))


class _Arena(Scene):
    def enter(self):
        self.entered = True

    def exit(self):
        self.delete_all()


def _make(scene, name, pos, group, scale=Vec2(10, 10)):
    obj = _Recorder(name, pos)
    obj.create_collider().scale = scale
    scene.add_object(obj, group)
    return obj


def _frame(scene, manager):
    scene.final_update()
    manager.update(scene)


def _setup():
    scene = _Arena()
    manager = CollisionManager()
    manager.check_group(GroupType.PLAYER, GroupType.MONSTER)
    player = _make(scene, "player", Vec2(0, 0), GroupType.PLAYER)
    monster = _make(scene, "monster", Vec2(5, 0), GroupType.MONSTER)
    return scene, manager, player, monster


def test_is_collision_overlap_and_touch():
    a, b = GameObject(pos=Vec2(0, 0)), GameObject(pos=Vec2(5, 5))
    for obj in (a, b):
        obj.create_collider().scale = Vec2(10, 10)
        obj.final_update()
    assert is_collision(a.collider, b.collider)
    b.pos = Vec2(10, 0)
    b.final_update()
    assert not is_collision(a.collider, b.collider)


def test_check_group_toggles_symmetrically():
    manager = CollisionManager()
    manager.check_group(GroupType.MONSTER, GroupType.PLAYER)
    assert manager.is_checked(GroupType.PLAYER, GroupType.MONSTER)
    manager.check_group(GroupType.PLAYER, GroupType.MONSTER)
    assert not manager.is_checked(GroupType.MONSTER, GroupType.PLAYER)


def test_reset_clears_matrix():
    manager = CollisionManager()
    manager.check_group(GroupType.PLAYER, GroupType.MONSTER)
    manager.reset()
    assert not manager.is_checked(GroupType.PLAYER, GroupType.MONSTER)


def test_unchecked_groups_are_ignored():
    scene, manager, player, monster = _setup()
    manager.reset()
    _frame(scene, manager)
    assert player.log == [] and monster.log == []


def test_enter_then_stay_then_exit():
    scene, manager, player, monster = _setup()
    _frame(scene, manager)
    assert player.log == [("enter", "monster")]
    assert monster.log == [("enter", "player")]
    assert player.collider.contacts == 1

    _frame(scene, manager)
    assert player.log[-1] == ("stay", "monster")
    assert monster.log[-1] == ("stay", "player")

    monster.pos = Vec2(100, 100)
    _frame(scene, manager)
    assert player.log[-1] == ("exit", "monster")
    assert monster.log[-1] == ("exit", "player")
    assert player.collider.contacts == 0 and monster.collider.contacts == 0


def test_dead_object_does_not_start_contact():
    scene, manager, player, monster = _setup()
    monster.mark_dead()
    _frame(scene, manager)
    assert player.log == [] and monster.log == []


def test_dying_during_contact_exits():
    scene, manager, player, monster = _setup()
    _frame(scene, manager)
    monster.mark_dead()
    _frame(scene, manager)
    assert player.log == [("enter", "monster"), ("exit", "monster")]
    assert player.collider.contacts == 0


def test_object_never_collides_with_itself():
    scene = _Arena()
    manager = CollisionManager()
    manager.check_group(GroupType.MONSTER, GroupType.MONSTER)
    lone = _make(scene, "lone", Vec2(0, 0), GroupType.MONSTER)
    _frame(scene, manager)
    assert lone.log == []


def test_object_without_collider_is_skipped():
    scene, manager, player, monster = _setup()
    ghost = _Recorder("ghost", Vec2(0, 0))
    scene.add_object(ghost, GroupType.MONSTER)
    _frame(scene, manager)
    assert ghost.log == []
    assert player.log == [("enter", "monster")]