from typing import Any

from orientql.commands.base import Command


class Find(Command):
    """FIND REFERENCES to a record, optionally limited to some classes."""

    SCHEMA = "FIND REFERENCES :Rid :ClassList"

    def __init__(self, rid: Any):
        super().__init__()

        self.set_token("Rid", rid)
