"""Index statements: DDL on indexes and direct manipulation of index entries.

Entry-level statements address the index through the ``index:name``
target, e.g. ``SELECT FROM index:dictionary WHERE key = "luke"``.
"""

from types import MappingProxyType
from typing import Any, Optional

from orientql.commands.base import Command
from orientql.formatters import EmbeddedRid, Regular
from orientql.types import RecordId


class Index(Command):
    """Common base for index statements."""


class Create(Index):
    SCHEMA = "CREATE INDEX :IndexClass:Property :Type"

    def __init__(self, property: str, class_: Optional[str] = None, type: Optional[str] = None):
        """Index ``property``, optionally qualified by its ``class_``.

        Args:
            property: Property to index
            class_: Class owning the property; renders ``Class.property``
            type: Index type, e.g. ``UNIQUE`` or ``NOTUNIQUE``
        """
        super().__init__()

        if class_:
            self.set_token("IndexClass", class_)

        if type:
            self.type(type)

        self.set_token("Property", property)

    def type(self, type: str) -> "Create":
        return self.set_token("Type", type, append=False)


class Drop(Index):
    SCHEMA = "DROP INDEX :IndexClass:Property"

    def __init__(self, property: str, class_: Optional[str] = None):
        super().__init__()

        if class_:
            self.set_token("IndexClass", class_)

        self.set_token("Property", property)


class Count(Index):
    SCHEMA = "SELECT count(*) AS size FROM index::Name"

    def __init__(self, name: str):
        super().__init__()

        self.set_token("Name", name)


class Put(Index):
    SCHEMA = 'INSERT INTO index::Name (key, rid) VALUES (":Key", :Value)'
    FORMATTERS = MappingProxyType({
        **Index.FORMATTERS,
        "Name": Regular,
        "Key": Regular,
        "Value": EmbeddedRid,
    })

    def __init__(self, name: str, key: Any, rid: Any):
        super().__init__()

        self.set_token("Name", name)
        self.set_token("Key", key)
        self.set_token("Value", rid)


class Remove(Index):
    """Removes the entries of ``key``, or only the one pointing to ``rid``."""

    SCHEMA = "DELETE FROM index::Name :Where"

    def __init__(self, name: str, key: Any, rid: Optional[Any] = None):
        super().__init__()

        self.set_token("Name", name)
        self.where("key = ?", key)

        if rid is not None:
            self.and_where("rid = ?", RecordId.parse(rid) or rid)


class Lookup(Index):
    SCHEMA = "SELECT FROM index::Index :Where"

    def __init__(self, name: str):
        super().__init__()

        self.set_token("Index", name)
