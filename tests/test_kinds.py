from gdiframe.kinds import GROUP_COUNT, EventType, GroupType, SceneType


def test_group_values_fit_in_collision_matrix():
    values = [int(GroupType(int(group))) for group in GroupType]
    assert all(0 <= value < GROUP_COUNT for value in values)


def test_group_values_are_unique():
    values = [int(group) for group in GroupType]
    assert [GroupType(value) for value in values] == list(GroupType)
    assert len(set(values)) == len(values)


def test_group_order_starts_with_default():
    lowest = min(int(group) for group in GroupType)
    assert GroupType(lowest) is GroupType.DEFAULT


def test_scene_round_trip_by_value():
    for scene in SceneType:
        assert SceneType(int(scene)) is scene


def test_event_round_trip_by_name():
    for event in EventType:
        assert EventType(event.value) is EventType[event.name]