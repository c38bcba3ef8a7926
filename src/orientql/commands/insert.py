from orientql.commands.base import Command


class Insert(Command):
    """INSERT of a single record; fill it with ``into``, ``fields`` and ``values``."""

    SCHEMA = "INSERT INTO :Target (:Fields) VALUES (:Values)"
