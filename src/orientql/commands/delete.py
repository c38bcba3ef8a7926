from typing import Any

from orientql.commands.base import Command


class Delete(Command):
    SCHEMA = "DELETE FROM :Target :Where"

    def __init__(self, target: Any):
        super().__init__()

        self.from_(target, append=False)
