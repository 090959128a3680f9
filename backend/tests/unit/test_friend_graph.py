from linda.domain.social.graph import InMemoryFriendGraph


def test_unknown_user_has_no_friends():
    graph = InMemoryFriendGraph()
    assert graph.get_friends("unknown-user") == []


def test_add_friend_is_symmetric():
    graph = InMemoryFriendGraph()
    graph.add_friend("a", "b")
    assert graph.get_friends("a") == ["b"]
    assert graph.get_friends("b") == ["a"]
    assert graph.are_friends("a", "b")
    assert graph.are_friends("b", "a")


def test_add_friend_twice_keeps_both_entries():
    graph = InMemoryFriendGraph()
    graph.add_friend("a", "b")
    graph.add_friend("a", "b")
    assert graph.get_friends("a") == ["b", "b"]
    assert graph.get_friends("b") == ["a", "a"]


def test_order_follows_insertion():
    graph = InMemoryFriendGraph()
    graph.add_friend("a", "c")
    graph.add_friend("b", "a")
    graph.add_friend("a", "d")
    assert graph.get_friends("a") == ["c", "b", "d"]


def test_remove_friend_strips_every_occurrence_both_ways():
    graph = InMemoryFriendGraph()
    graph.add_friend("a", "b")
    graph.add_friend("b", "a")
    graph.add_friend("a", "c")

    graph.remove_friend("a", "b")

    assert graph.get_friends("a") == ["c"]
    assert graph.get_friends("b") == []
    assert graph.get_friends("c") == ["a"]
    assert not graph.are_friends("a", "b")


def test_remove_unknown_pair_is_noop():
    graph = InMemoryFriendGraph()
    graph.remove_friend("x", "y")
    assert graph.get_friends("x") == []


def test_returned_list_is_a_copy():
    graph = InMemoryFriendGraph()
    graph.add_friend("a", "b")
    friends = graph.get_friends("a")
    friends.append("z")
    assert graph.get_friends("a") == ["b"]
    assert graph.edge_count() == 2


def test_link_writes_one_direction():
    graph = InMemoryFriendGraph()
    graph.link("a", "b")
    assert graph.get_friends("a") == ["b"]
    assert graph.get_friends("b") == []
    assert graph.are_friends("a", "b")
    assert not graph.are_friends("b", "a")
