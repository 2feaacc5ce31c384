import random
from collections import Counter

from docnav.navigation.state import (
    SidebarStateMachine,
    ancestor_paths,
    depth,
    initial_state,
    normalize_slug,
    toggle,
)


def test_ancestor_paths_lists_proper_prefixes():
    assert ancestor_paths("a/b/c") == ("a", "a/b")
    assert ancestor_paths("intro") == ()
    assert ancestor_paths("") == ()
    assert ancestor_paths(None) == ()
    assert ancestor_paths("/guide/setup") == ("guide",)


def test_initial_state_for_nested_slug():
    assert initial_state("a/b/c") == {"a", "a/b"}
    assert initial_state("guide/advanced/tuning") == {"guide", "guide/advanced"}


def test_depth_counts_segments():
    assert depth("guide") == 1
    assert depth("guide/advanced") == 2


def test_toggle_opens_then_closes():
    state = toggle(frozenset(), "guide")
    assert state == {"guide"}
    assert toggle(state, "guide") == frozenset()


def test_toggle_closes_siblings_at_same_depth():
    state = toggle(frozenset(), "guide")
    state = toggle(state, "reference")

    assert state == {"reference"}


def test_toggle_leaves_other_depths_alone():
    state = frozenset({"guide", "guide/advanced", "guide/advanced/deep"})

    state = toggle(state, "reference/cli")

    assert state == {"guide", "guide/advanced/deep", "reference/cli"}


def test_closing_folder_keeps_descendants_open():
    state = toggle(frozenset({"guide", "guide/advanced"}), "guide")

    assert state == {"guide/advanced"}


def test_toggle_empty_path_is_a_no_op():
    assert toggle(frozenset({"guide"}), "") == {"guide"}
    assert toggle(frozenset({"guide"}), "/") == {"guide"}


def test_toggle_outside_known_folders_leaves_state_unchanged():
    known = {"guide", "guide/advanced", "reference"}
    state = frozenset({"guide"})

    assert toggle(state, "no/such/folder", known) == {"guide"}
    assert toggle(state, "intro", known) == {"guide"}
    assert toggle(state, "reference", known) == {"reference"}


def test_toggle_strips_stray_slashes():
    assert toggle(frozenset(), "/guide/") == {"guide"}


def test_random_toggles_keep_one_open_folder_per_depth():
    paths = ["a", "b", "c", "a/x", "a/y", "b/x", "a/x/1", "a/x/2", "b/x/1"]
    rng = random.Random(7)
    state = initial_state("a/x/1/doc")

    for _ in range(500):
        path = rng.choice(paths)
        before = state
        state = toggle(state, path)

        counts = Counter(depth(p) for p in state)
        assert all(count <= 1 for count in counts.values())
        level = depth(path)
        assert {p for p in before if depth(p) != level} == {p for p in state if depth(p) != level}


def test_state_machine_route_change_replaces_state():
    machine = SidebarStateMachine("guide/advanced/tuning")
    assert machine.state == {"guide", "guide/advanced"}

    machine.toggle("reference")
    assert machine.state == {"reference", "guide/advanced"}

    machine.on_route_change("reference/cli/flags")
    assert machine.active_slug == "reference/cli/flags"
    assert machine.state == {"reference", "reference/cli"}


def test_state_machine_same_route_keeps_user_toggles():
    machine = SidebarStateMachine("guide/setup")
    machine.toggle("guide/advanced")

    machine.on_route_change("guide/setup")

    assert machine.is_open("guide/advanced")
    assert machine.is_open("guide")


def test_state_machine_without_route_starts_collapsed():
    machine = SidebarStateMachine()

    assert machine.state == frozenset()
    assert machine.active_slug is None
    assert not machine.is_open("guide")


def test_normalize_slug_drops_empty_segments():
    assert normalize_slug("/guide/setup") == "guide/setup"
    assert normalize_slug("guide//setup/") == "guide/setup"
    assert normalize_slug("/") is None
    assert normalize_slug("") is None
    assert normalize_slug(None) is None


def test_state_machine_normalizes_active_slug():
    machine = SidebarStateMachine("/guide/setup")

    assert machine.active_slug == "guide/setup"
    assert machine.state == {"guide"}

    machine.toggle("guide/advanced")
    machine.on_route_change("guide/setup/")
    assert machine.is_open("guide/advanced")


def test_state_machine_ignores_unknown_folder_toggle():
    machine = SidebarStateMachine("guide/setup")

    machine.toggle("no-such-folder", known_paths={"guide", "reference"})

    assert machine.state == {"guide"}
