"""Value types shared by formatters and commands."""

import re
from typing import Any, NamedTuple, Optional

RID_PATTERN = re.compile(r"^#?(\d+):(\d+)$")


class RecordId(NamedTuple):
    """Reference to a stored record, rendered as ``#cluster:position``.

    A RecordId is not a string, so WHERE values of this type render bare
    instead of being quoted.
    """

    cluster: int
    position: int

    def __str__(self) -> str:
        return f"#{self.cluster}:{self.position}"

    @classmethod
    def parse(cls, value: Any) -> Optional["RecordId"]:
        """Parse ``#12:0`` or ``12:0``; returns None for anything else."""
        if isinstance(value, RecordId):
            return value
        if not isinstance(value, str):
            return None

        match = RID_PATTERN.match(value.strip())
        if not match:
            return None
        return cls(int(match.group(1)), int(match.group(2)))

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        return cls.parse(value) is not None


class WhereCondition(NamedTuple):
    """One entry of a command's WHERE accumulator.

    Attributes:
        connector: None for the first condition, otherwise "AND" or "OR"
        condition: Condition text with ``?`` placeholders
        value: Value bound to the placeholders; a tuple binds one item per ``?``
    """

    connector: Optional[str]
    condition: str
    value: Any = None
