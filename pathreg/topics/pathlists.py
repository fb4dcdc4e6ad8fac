# pathreg/topics/pathlists.py
#
# Internal sys.pl.* primitives over core.registry.
# User reaches these only via aliases.
#
# Path arguments are the remaining tokens joined by single spaces
# (the Core tokenizer splits on whitespace).

from __future__ import annotations


def _path(value_parts) -> str:
    path = " ".join(value_parts)
    if not path:
        raise ValueError("Expected <path>")
    return path


def _new_path(core, value_parts) -> str:
    path = _path(value_parts)
    if len(path) > core.max_path:
        raise ValueError(f"Path exceeds max_path ({len(path)} > {core.max_path})")
    return path


def _index(idx) -> int:
    try:
        return int(idx)
    except (TypeError, ValueError):
        raise ValueError(f"Expected integer index: {idx}") from None


# ---------------- lists ----------------

def lists_ls(core):
    return core.registry.list_names()

def list_has(core, name):
    return "true" if core.registry.has_list(name) else "false"

def list_mk(core, name):
    if not core.registry.create_list(name):
        raise ValueError(f"List exists: {name}")
    return "OK"

def list_rm(core, name):
    if not core.registry.delete_list(name):
        raise ValueError(f"List not found: {name}")
    return "OK"

def list_clear(core, name):
    core.registry.clear_list(name)
    return "OK"

# ---------------- entries ----------------

def items_ls(core, name):
    return core.registry.entries(name)

def items_count(core, name):
    return str(core.registry.entry_count(name))

def entry_add(core, name, *path_parts):
    path = _new_path(core, path_parts)
    return str(core.registry.add_entry(name, path, auto_create=core.auto_create))

def entry_append(core, name, *path_parts):
    path = _new_path(core, path_parts)
    return str(core.registry.add_entry(name, path, auto_create=False))

def entry_get(core, name, idx):
    return core.registry.get_entry_at(name, _index(idx))

def entry_find(core, name, *path_parts):
    return str(core.registry.find_entry_index(name, _path(path_parts)))

def entry_del(core, name, *path_parts):
    core.registry.remove_entry(name, _path(path_parts))
    return "OK"

def entry_del_at(core, name, idx):
    return core.registry.remove_entry_at(name, _index(idx))


COMMANDS = {
    # lists
    "sys.pl.ls":       (lists_ls,     "List path-list names",                    "sys.pl.ls"),
    "sys.pl.has":      (list_has,     "Check whether a path list exists",        "sys.pl.has <name>"),
    "sys.pl.mk":       (list_mk,      "Create empty path list",                  "sys.pl.mk <name>"),
    "sys.pl.rm":       (list_rm,      "Delete path list (and its entries)",      "sys.pl.rm <name>"),
    "sys.pl.clear":    (list_clear,   "Drop all entries, keep the list",         "sys.pl.clear <name>"),

    # entries
    "sys.pl.items":    (items_ls,     "List entries in order",                   "sys.pl.items <name>"),
    "sys.pl.count":    (items_count,  "Number of entries",                       "sys.pl.count <name>"),
    "sys.pl.add":      (entry_add,    "Add path (creates list if allowed)",      "sys.pl.add <name> <path...>"),
    "sys.pl.append":   (entry_append, "Add path to an existing list",            "sys.pl.append <name> <path...>"),
    "sys.pl.get":      (entry_get,    "Get path by index",                       "sys.pl.get <name> <idx>"),
    "sys.pl.find":     (entry_find,   "Index of path, -1 if absent",             "sys.pl.find <name> <path...>"),
    "sys.pl.del":      (entry_del,    "Remove path by value",                    "sys.pl.del <name> <path...>"),
    "sys.pl.del.at":   (entry_del_at, "Remove path by index (returns it)",       "sys.pl.del.at <name> <idx>"),
}
