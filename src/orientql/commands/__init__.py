"""Statement commands.

Each module holds one statement family; ``registry.DEFAULT_COMMANDS`` maps
the ids used by ``orientql.query.Query`` to these classes.
"""

from orientql.commands.base import Command
from orientql.commands.registry import DEFAULT_COMMANDS, CommandFactory

__all__ = [
    "Command",
    "CommandFactory",
    "DEFAULT_COMMANDS",
]
