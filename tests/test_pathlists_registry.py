from __future__ import annotations

import pytest

from pathreg.lib.pathlists import (
    NOT_FOUND,
    DuplicateEntry,
    EntryNotFound,
    InvalidIndex,
    InvalidList,
    ListRegistry,
    PathListError,
)


@pytest.fixture
def reg() -> ListRegistry:
    return ListRegistry()


def _abc(reg: ListRegistry, name: str = "L") -> None:
    for p in ("a", "b", "c"):
        reg.add_entry(name, p)


def test_create_list_once(reg: ListRegistry) -> None:
    assert not reg.has_list("maps")
    assert reg.create_list("maps") is True
    assert reg.has_list("maps")
    assert reg.create_list("maps") is False
    assert reg.entries("maps") == []


def test_delete_list_then_everything_is_invalid(reg: ListRegistry) -> None:
    _abc(reg)
    assert reg.delete_list("L") is True
    assert not reg.has_list("L")
    assert reg.delete_list("L") is False

    with pytest.raises(InvalidList):
        reg.get_entry_at("L", 0)
    with pytest.raises(InvalidList):
        reg.remove_entry("L", "a")
    with pytest.raises(InvalidList):
        reg.remove_entry_at("L", 0)
    with pytest.raises(InvalidList):
        reg.find_entry_index("L", "a")
    with pytest.raises(InvalidList):
        reg.add_entry("L", "a", auto_create=False)


def test_duplicate_add_is_rejected_without_change(reg: ListRegistry) -> None:
    assert reg.add_entry("L", "a") == 0
    with pytest.raises(DuplicateEntry, match="Entry already in list L: a") as ei:
        reg.add_entry("L", "a")
    assert ei.value.name == "L"
    assert ei.value.path == "a"
    assert reg.entries("L") == ["a"]


def test_same_path_in_different_lists(reg: ListRegistry) -> None:
    assert reg.add_entry("L1", "cfg/server.cfg") == 0
    assert reg.add_entry("L2", "cfg/server.cfg") == 0


def test_index_access_and_shift_down(reg: ListRegistry) -> None:
    _abc(reg)
    assert reg.get_entry_at("L", 1) == "b"

    assert reg.remove_entry_at("L", 0) == "a"
    assert reg.get_entry_at("L", 0) == "b"
    assert reg.get_entry_at("L", 1) == "c"
    with pytest.raises(InvalidIndex) as ei:
        reg.get_entry_at("L", 2)
    assert ei.value.index == 2
    assert ei.value.length == 2


@pytest.mark.parametrize("index", [-1, 3, 100, "1", 1.0, True, None])
def test_invalid_indices(reg: ListRegistry, index) -> None:
    _abc(reg)
    with pytest.raises(InvalidIndex):
        reg.get_entry_at("L", index)
    with pytest.raises(InvalidIndex):
        reg.remove_entry_at("L", index)
    assert reg.entries("L") == ["a", "b", "c"]


def test_empty_list_has_no_valid_index(reg: ListRegistry) -> None:
    reg.create_list("E")
    with pytest.raises(InvalidIndex, match="empty"):
        reg.get_entry_at("E", 0)
    with pytest.raises(InvalidIndex, match="empty"):
        reg.remove_entry_at("E", 0)
    assert reg.has_list("E")
    assert reg.entries("E") == []


def test_find_entry_index(reg: ListRegistry) -> None:
    _abc(reg)
    assert reg.find_entry_index("L", "c") == 2
    assert reg.find_entry_index("L", "missing") == NOT_FOUND == -1
    with pytest.raises(InvalidList):
        reg.find_entry_index("ghost", "x")


def test_lookup_is_exact_match(reg: ListRegistry) -> None:
    reg.add_entry("L", "Maps/Dust.bsp")
    assert reg.find_entry_index("L", "maps/dust.bsp") == NOT_FOUND
    assert reg.find_entry_index("L", "Maps//Dust.bsp") == NOT_FOUND
    assert reg.add_entry("L", "maps/dust.bsp") == 1


def test_remove_missing_entry_leaves_list_unchanged(reg: ListRegistry) -> None:
    _abc(reg)
    with pytest.raises(EntryNotFound):
        reg.remove_entry("L", "z")
    assert reg.entries("L") == ["a", "b", "c"]

    reg.remove_entry("L", "b")
    assert reg.entries("L") == ["a", "c"]
    assert reg.find_entry_index("L", "c") == 1


def test_auto_create(reg: ListRegistry) -> None:
    assert reg.add_entry("NewList", "path1", auto_create=True) == 0
    assert reg.has_list("NewList")

    with pytest.raises(InvalidList):
        reg.add_entry("Other", "path1", auto_create=False)
    assert not reg.has_list("Other")


def test_errors_share_a_base() -> None:
    for cls in (InvalidList, InvalidIndex, DuplicateEntry, EntryNotFound):
        assert issubclass(cls, PathListError)
        assert issubclass(cls, ValueError)


def test_names_counts_and_clear(reg: ListRegistry) -> None:
    _abc(reg, "b-list")
    reg.create_list("a-list")
    assert reg.list_names() == ["a-list", "b-list"]
    assert len(reg) == 2
    assert "a-list" in reg

    assert reg.entry_count("b-list") == 3
    assert reg.clear_list("b-list") == 3
    assert reg.has_list("b-list")
    assert reg.entry_count("b-list") == 0
    with pytest.raises(InvalidList):
        reg.clear_list("nope")


def test_entries_returns_a_copy(reg: ListRegistry) -> None:
    _abc(reg)
    snapshot = reg.entries("L")
    snapshot.append("x")
    assert reg.entries("L") == ["a", "b", "c"]


def test_close_releases_everything() -> None:
    with ListRegistry() as reg:
        _abc(reg)
        reg.create_list("M")
    assert len(reg) == 0
    assert not reg.has_list("L")

    # still usable after close
    assert reg.add_entry("L", "a") == 0
