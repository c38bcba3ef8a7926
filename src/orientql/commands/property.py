"""Property DDL: CREATE, DROP and ALTER PROPERTY on a class."""

from typing import Any, Optional

from orientql.commands.base import Command


class Property(Command):
    """Common base for statements addressing ``Class.property``."""

    def __init__(self, property: str):
        super().__init__()

        self.set_token("Property", property)

    def on(self, class_: str) -> "Property":
        return self.set_token("Class", class_, append=False)


class Create(Property):
    SCHEMA = "CREATE PROPERTY :Class.:Property :Type :Linked"

    def __init__(self, property: str, type: Optional[str] = None, linked: Optional[str] = None):
        super().__init__(property)

        if type:
            self.type(type)

        if linked:
            self.linked(linked)

    def type(self, type: str) -> "Create":
        return self.set_token("Type", type, append=False)

    def linked(self, linked: str) -> "Create":
        """Set the linked class or type of a LINK/EMBEDDED property."""
        return self.set_token("Linked", linked, append=False)


class Drop(Property):
    SCHEMA = "DROP PROPERTY :Class.:Property"


class Alter(Property):
    SCHEMA = "ALTER PROPERTY :Class.:Property :Attribute :Value"

    def changing(self, attribute: str, value: Any) -> "Alter":
        self.set_token("Attribute", attribute, append=False)
        return self.set_token("Value", value, append=False)
