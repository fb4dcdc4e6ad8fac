# pathreg/topics/__init__.py
#
# Aggregated internal command table (sys.* -> (handler, help, usage)).

from pathreg.topics import pathlists

ALL_COMMANDS = {}
ALL_COMMANDS.update(pathlists.COMMANDS)
