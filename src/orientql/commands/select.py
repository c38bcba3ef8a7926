from typing import Any, Optional

from orientql.commands.base import Command


class Select(Command):
    """SELECT statement over one or more targets (classes, clusters, RIDs)."""

    SCHEMA = "SELECT :Projections FROM :Target :Where :OrderBy :Skip :Limit :Range"

    def __init__(self, target: Optional[Any] = None):
        super().__init__()

        if target:
            self.from_(target)

    def select(self, projections: Any, append: bool = True) -> "Select":
        """Set the projections, e.g. ``["name", "count(*)"]``."""
        return self.set_token("Projections", projections, append)
