"""Example: a messages file with typed keys, defaults and write-through.

Declares a shape for a ``messages.yml`` file, loads it, reads a few values
through the typed accessors, changes one setting and reads it back from a
fresh store.  Run it twice to see the persisted value survive.

Usage:
    python examples/standalone_usage.py [path/to/messages.yml]
"""

import logging
import sys

from configcore import ConfigKey, ConfigShape, ShapeConfig, ValueType


class Messages(ConfigShape):
    """Keys of the example messages file."""

    PREFIX = ConfigKey("messages.prefix", ValueType.STRING, "&d[Wed] &r")
    PROPOSAL = ConfigKey("messages.proposal", ValueType.STRING, "&e{player} proposed to you!")
    HELP = ConfigKey("messages.help", ValueType.STRING_LIST, ["&7/marry <player>", "&7/divorce"])
    COOLDOWN = ConfigKey("messages.cooldown-seconds", ValueType.INT, 60)
    BROADCAST = ConfigKey("messages.broadcast", ValueType.BOOLEAN, True)


class MessagesConfig(ShapeConfig):
    """Store for ``messages.yml``."""

    shape = Messages
    section = "messages"


def main():
    """Load the file, print the values, bump the cooldown and reload."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    path = sys.argv[1] if len(sys.argv) > 1 else "messages.yml"

    store = MessagesConfig(path)
    print(store.get_string(Messages.PREFIX) + store.get_string(Messages.PROPOSAL))
    for line in store.get_string_list(Messages.HELP):
        print(line)

    cooldown = store.get_int(Messages.COOLDOWN)
    if not store.set_value(Messages.COOLDOWN, cooldown + 1):
        print("Could not save; the new value only lives in memory.")
        return

    fresh = MessagesConfig(path)
    print(f"cooldown: {cooldown} -> {fresh.get_int(Messages.COOLDOWN)}")


if __name__ == "__main__":
    main()
