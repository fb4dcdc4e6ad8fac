# pathreg/lib/pathlists.py
# Registry primitives (no Core dependency).
# store shape: store[name] = list[path]
#
# Lookups are exact string matches. Every operation validates before it
# mutates, so a raised error leaves the store untouched.

from __future__ import annotations

from typing import Dict, List

NOT_FOUND = -1


class PathListError(ValueError):
    pass


class InvalidList(PathListError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"List not found: {name}")


class InvalidIndex(PathListError):
    def __init__(self, name: str, index, length: int):
        self.name = name
        self.index = index
        self.length = length
        if length == 0:
            msg = f"Index {index!r} out of range: list {name} is empty"
        else:
            msg = f"Index {index!r} out of range for list {name} (0..{length - 1})"
        super().__init__(msg)


class DuplicateEntry(PathListError):
    def __init__(self, name: str, path: str):
        self.name = name
        self.path = path
        super().__init__(f"Entry already in list {name}: {path}")


class EntryNotFound(PathListError):
    def __init__(self, name: str, path: str):
        self.name = name
        self.path = path
        super().__init__(f"Entry not in list {name}: {path}")


class ListRegistry:
    """
    Named, ordered, duplicate-free lists of path strings.

    Owned by whoever constructs it (the Core, in this runtime) and passed
    around by reference. close() releases every list; the registry is
    also a context manager.

    Usage:
        reg = ListRegistry()
        reg.add_entry("maps", "maps/de_dust2.bsp")   # -> 0, creates "maps"
        reg.find_entry_index("maps", "nope")         # -> NOT_FOUND
    """

    def __init__(self):
        self._lists: Dict[str, List[str]] = {}

    # ---- list lifecycle ----

    def has_list(self, name: str) -> bool:
        return name in self._lists

    def create_list(self, name: str) -> bool:
        if name in self._lists:
            return False
        self._lists[name] = []
        return True

    def delete_list(self, name: str) -> bool:
        if name not in self._lists:
            return False
        del self._lists[name]
        return True

    def list_names(self) -> List[str]:
        return sorted(self._lists.keys())

    def close(self) -> None:
        for entries in self._lists.values():
            entries.clear()
        self._lists.clear()

    # ---- entries ----

    def add_entry(self, name: str, path: str, auto_create: bool = True) -> int:
        entries = self._lists.get(name)
        if entries is None:
            if not auto_create:
                raise InvalidList(name)
            entries = []
        elif path in entries:
            raise DuplicateEntry(name, path)

        entries.append(path)
        # implicit create only once the append is known to succeed
        self._lists.setdefault(name, entries)
        return len(entries) - 1

    def get_entry_at(self, name: str, index: int) -> str:
        entries = self._require(name)
        self._check_index(name, entries, index)
        return entries[index]

    def remove_entry(self, name: str, path: str) -> None:
        entries = self._require(name)
        try:
            i = entries.index(path)
        except ValueError:
            raise EntryNotFound(name, path) from None
        del entries[i]

    def remove_entry_at(self, name: str, index: int) -> str:
        entries = self._require(name)
        self._check_index(name, entries, index)
        return entries.pop(index)

    def find_entry_index(self, name: str, path: str) -> int:
        entries = self._require(name)
        try:
            return entries.index(path)
        except ValueError:
            return NOT_FOUND

    def entries(self, name: str) -> List[str]:
        return list(self._require(name))

    def entry_count(self, name: str) -> int:
        return len(self._require(name))

    def clear_list(self, name: str) -> int:
        entries = self._require(name)
        n = len(entries)
        entries.clear()
        return n

    # ---- guards ----

    def _require(self, name: str) -> List[str]:
        entries = self._lists.get(name)
        if entries is None:
            raise InvalidList(name)
        return entries

    @staticmethod
    def _check_index(name: str, entries: List[str], index) -> None:
        # bool is an int subclass; True/False are never valid positions here
        if not isinstance(index, int) or isinstance(index, bool):
            raise InvalidIndex(name, index, len(entries))
        if index < 0 or index >= len(entries):
            raise InvalidIndex(name, index, len(entries))

    # ---- dunder ----

    def __len__(self) -> int:
        return len(self._lists)

    def __contains__(self, name) -> bool:
        return self.has_list(name)

    def __enter__(self) -> "ListRegistry":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
