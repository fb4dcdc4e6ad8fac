# pathreg/aliases.py
#
# User never invokes sys.* directly.
# Alias expansion is token0 replacement to internal sys.* primitives.

ALIASES = {
    # lists
    "ls":       "sys.pl.ls",
    "has":      "sys.pl.has",
    "mk":       "sys.pl.mk",
    "rm":       "sys.pl.rm",
    "clear":    "sys.pl.clear",

    # entries
    "items":    "sys.pl.items",
    "count":    "sys.pl.count",
    "add":      "sys.pl.add",       # creates the list unless auto_create is off
    "append":   "sys.pl.append",    # list must already exist
    "get":      "sys.pl.get",
    "find":     "sys.pl.find",
    "del":      "sys.pl.del",
    "del.at":   "sys.pl.del.at",
}


class AliasManager:
    def __init__(self, aliases):
        self.aliases = dict(aliases)

    def has_alias(self, name: str) -> bool:
        return name in self.aliases

    def expand(self, parts):
        if not parts:
            return parts
        head = parts[0]
        exp = self.aliases.get(head)
        if not exp:
            return parts
        return exp.strip().split() + parts[1:]

    def list_aliases(self):
        return sorted(self.aliases.keys())

    def get_alias(self, name):
        return self.aliases.get(name)

    def target(self, name):
        """First token of the expansion (the sys.* primitive), or None."""
        exp = self.aliases.get(name)
        if not exp:
            return None
        return exp.split()[0]
