"""Class DDL: CREATE, DROP and ALTER CLASS."""

from typing import Any

from orientql.commands.base import Command


class Create(Command):
    SCHEMA = "CREATE CLASS :Class"

    def __init__(self, class_: str):
        super().__init__()

        self.set_token("Class", class_)


class Drop(Create):
    SCHEMA = "DROP CLASS :Class"


class Alter(Create):
    SCHEMA = "ALTER CLASS :Class :Attribute :Value"

    def __init__(self, class_: str, attribute: str, value: Any):
        super().__init__(class_)

        self.set_token("Attribute", attribute)
        self.set_token("Value", value)
