"""pathreg/core.py

Core runtime + init_core() wiring.

The Core owns the ListRegistry; commands reach it as core.registry.
Avoid importing pathreg.topics (ALL_COMMANDS) at module import time,
to prevent circular-import issues while building the command surface.
"""

from __future__ import annotations

import inspect
import json
import threading
from pathlib import Path

from pathreg.lib.pathlists import ListRegistry
from pathreg.model.schema import (
    CORE_CONFIG_PATH,
    DEFAULT_AUTO_CREATE,
    DEFAULT_EXPAND_MAX_PASSES,
    PLATFORM_MAX_PATH,
)


class Core:
    def __init__(self, registry: ListRegistry | None = None):
        self.registry = registry if registry is not None else ListRegistry()

        self.commands = {}   # cmd -> {handler, help, usage}
        self.log = []
        self.expanders = []
        self.expand_max_passes = DEFAULT_EXPAND_MAX_PASSES
        self.max_path = PLATFORM_MAX_PATH
        self.auto_create = DEFAULT_AUTO_CREATE
        self.alias_mgr = None  # set in init_core()

        # The registry has no lock of its own; one lock per runtime,
        # held for each command.
        self.exec_lock = threading.RLock()

    def dispatch_internal(self, parts):
        """Dispatch internal sys.* tokens without further expansion."""
        if not parts:
            return ""
        cmd = parts[0]
        entry = self.commands.get(cmd)
        if not entry:
            raise ValueError(f"Unknown command: {cmd}")
        with self.exec_lock:
            return entry["handler"](self, *parts[1:])

    def register(self, name, handler, help_text="", usage=""):
        self.commands[name] = {"handler": handler, "help": help_text, "usage": usage}

    def add_expander(self, fn):
        self.expanders.append(fn)

    def close(self):
        with self.exec_lock:
            self.registry.close()

    def _emit(self, out):
        self.log.append({"out": out})
        return out

    def _expand(self, parts):
        seen = set()
        for _ in range(self.expand_max_passes):
            sig = tuple(parts)
            if sig in seen:
                raise ValueError("Expansion loop detected")
            seen.add(sig)

            changed = False
            for ex in self.expanders:
                new_parts = ex(parts)
                if new_parts != parts:
                    parts = new_parts
                    changed = True
                    break
            if not changed:
                return parts

        raise ValueError(f"Expansion depth exceeded (max_passes={self.expand_max_passes})")

    def execute(self, raw):
        with self.exec_lock:
            self.log.append({"in": raw})

            parts = raw.strip().split()
            if not parts:
                return self._emit(None)

            # --- EXPOSED SURFACE GATE: only aliases + help ---
            head = parts[0]
            if head != "help":
                if not self.alias_mgr or not self.alias_mgr.has_alias(head):
                    return self._emit("Unknown command")
            # ----------------------------------------------

            try:
                parts = self._expand(parts)
            except Exception as e:
                return self._emit(f"Error: {e}")

            cmd, *args = parts
            entry = self.commands.get(cmd)
            if not entry:
                return self._emit(f"Unknown command: {cmd}")

            handler = entry["handler"]
            try:
                inspect.signature(handler).bind(self, *args)
            except TypeError as e:
                # wrong token count for the primitive
                return self._emit(f"Error: {e}\nUsage: {entry['usage']}")

            try:
                out = handler(self, *args)
            except Exception as e:
                out = f"Error: {e}"

            return self._emit(out)


# ---------- exposed help: only aliases ----------
def help_cmd(core, name=None):
    am = core.alias_mgr
    surface = am.list_aliases() if am else []

    if name:
        exp = am.get_alias(name) if am else None
        if exp is None:
            return "Alias not found"
        entry = core.commands.get(am.target(name), {})
        return (
            "Command: " + str(name) + "\n"
            "Expands: " + str(exp) + "\n"
            "Help:    " + str(entry.get("help", "")) + "\n"
            "Usage:   " + str(entry.get("usage", "")).replace(exp, name, 1)
        )

    lines = []
    lines.append("Path List Registry")
    lines.append("----------------------------------------")
    lines.append("")
    lines.append("Surface commands:")
    for cmd in surface:
        lines.append("  - " + cmd)
    lines.append("")
    lines.append("Examples:")
    lines.append("  add maps maps/de_dust2.bsp")
    lines.append("  get maps 0")
    lines.append("  find maps maps/de_inferno.bsp")
    lines.append("  del.at maps 0")
    lines.append("  help add")
    return "\n".join(lines)


def _load_core_config(path):
    p = Path(path)
    if not p.exists():
        return {}
    try:
        cfg = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return cfg if isinstance(cfg, dict) else {}


def _config_int(cfg, key, minimum):
    """Integer config value >= minimum, or None (bools and junk rejected)."""
    raw = cfg.get(key)
    if raw is None or isinstance(raw, bool):
        return None
    try:
        v = int(raw)
    except (TypeError, ValueError):
        return None
    return v if v >= minimum else None


def apply_config(core, cfg):
    # one alias expansion takes two passes: expand, then confirm no change
    v = _config_int(cfg, "expand_max_passes", 2)
    if v is not None:
        core.expand_max_passes = v

    v = _config_int(cfg, "max_path", 1)
    if v is not None:
        core.max_path = v

    if isinstance(cfg.get("auto_create"), bool):
        core.auto_create = cfg["auto_create"]


def init_core(config_path=CORE_CONFIG_PATH):
    # Late imports to avoid circular-import issues.
    from pathreg.aliases import AliasManager, ALIASES
    from pathreg.topics import ALL_COMMANDS

    core = Core()
    apply_config(core, _load_core_config(config_path))

    # register internal primitives
    for name, (handler, help_text, usage) in ALL_COMMANDS.items():
        core.register(name, handler, help_text, usage)

    # attach aliases
    core.alias_mgr = AliasManager(ALIASES)
    core.add_expander(core.alias_mgr.expand)

    # exposed help
    core.register(
        "help",
        help_cmd,
        "Show available surface commands (aliases)",
        "help [alias]"
    )

    return core
