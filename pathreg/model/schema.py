# pathreg/model/schema.py
#
# Host constants for the path-list runtime.
#
# NOTE:
# The registry itself never checks path length. PLATFORM_MAX_PATH is the
# ceiling the command surface holds callers to; config/core.json may lower
# or raise it per deployment (max_path).

# -----------------------------
# Host limits
# -----------------------------

PLATFORM_MAX_PATH = 256


# -----------------------------
# Core defaults (config/core.json overrides)
# -----------------------------

DEFAULT_EXPAND_MAX_PASSES = 10

# add <name> <path...> creates the list when missing
DEFAULT_AUTO_CREATE = True

CORE_CONFIG_PATH = "config/core.json"
