"""UPDATE statements: plain field assignment and link/map collection edits."""

from typing import Any, Dict, Mapping

from orientql.commands.base import Command


class Update(Command):
    """``UPDATE Class SET field = value``."""

    SCHEMA = "UPDATE :Class SET :Updates :Where"

    def __init__(self, class_: str):
        super().__init__()

        self.set_token("Class", class_)

    def set(self, updates: Mapping[str, Any], append: bool = True) -> "Update":
        return self.set_token("Updates", list(updates.items()), append)


class Add(Command):
    """Adds record references to link collections: ``UPDATE Class ADD field = #c:p``."""

    SCHEMA = "UPDATE :Class ADD :RidUpdates :Where"

    def __init__(self, updates: Mapping[str, Any], class_: str, append: bool = True):
        super().__init__()

        self.set_token("Class", class_)
        self.set_token("RidUpdates", list(updates.items()), append)


class Remove(Add):
    """Removes record references from link collections."""

    SCHEMA = "UPDATE :Class REMOVE :RidUpdates :Where"


class Put(Command):
    """Puts entries into link maps.

    ``updates`` maps each field to a ``{key: rid}`` mapping, e.g.
    ``{"addresses": {"home": "#12:0"}}`` renders
    ``UPDATE Account PUT addresses = "home", #12:0``.
    """

    SCHEMA = "UPDATE :Class PUT :MapUpdates :Where"

    def __init__(self, updates: Mapping[str, Dict[str, Any]], class_: str, append: bool = True):
        super().__init__()

        self.set_token("Class", class_)
        entries = [
            (field, key, rid)
            for field, pairs in updates.items()
            for key, rid in pairs.items()
        ]
        self.set_token("MapUpdates", entries, append)
