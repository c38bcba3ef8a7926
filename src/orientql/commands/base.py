"""Base command: schema template, token store and rendering engine.

A command binds one statement skeleton (``SCHEMA``) to the raw values the
caller collected for each of its placeholders. Rendering walks the schema
once, left to right, and substitutes every ``:Name`` placeholder with the
output of the formatter bound to ``Name`` (``Regular`` when unbound).

Example:
    >>> from orientql.commands.index import Lookup
    >>> lookup = Lookup("dictionary")
    >>> lookup.where("key = ?", "luke").get_raw()
    'SELECT FROM index:dictionary WHERE key = "luke"'
"""

import re
from types import MappingProxyType
from typing import Any, ClassVar, Dict, List, Mapping, Type

from orientql.formatters import (
    TokenFormatter,
    IndexClass,
    Limit,
    LinkType,
    List as ListFormatter,
    MapUpdates,
    OrderBy,
    Range,
    Regular,
    Rid,
    RidUpdates,
    Skip,
    Target,
    Updates,
    Values,
    Where,
)
from orientql.logging import get_logger
from orientql.types import WhereCondition

logger = get_logger(__name__)

PLACEHOLDER = re.compile(r":(\w+)")
WHITESPACE = re.compile(r"\s+")
SPACE_AFTER_PAREN = re.compile(r"\(\s+")
SPACE_BEFORE_PUNCTUATION = re.compile(r"\s+([,)])")
DANGLING_KEYWORDS = re.compile(r"(?:^|\s)(?:(?:WHERE|AND|OR)\s*)+$")


class Command:
    """Base class of every statement.

    Subclasses declare ``SCHEMA`` and extend ``FORMATTERS``; they only add
    constructors that seed tokens and the fluent setters specific to their
    statement. Clause handling (WHERE/AND/OR, ordering, limits) lives here
    and is shared unchanged.

    Attributes:
        SCHEMA: Statement template with ``:Name`` placeholders
        FORMATTERS: Token name -> formatter bindings, fixed per class
        WHERE_OPERATORS: Connectors accepted by the WHERE accumulator
    """

    SCHEMA: ClassVar[str] = ""
    FORMATTERS: ClassVar[Mapping[str, Type[TokenFormatter]]] = MappingProxyType({
        "Where": Where,
        "Target": Target,
        "Values": Values,
        "Updates": Updates,
        "RidUpdates": RidUpdates,
        "MapUpdates": MapUpdates,
        "OrderBy": OrderBy,
        "Limit": Limit,
        "Skip": Skip,
        "Range": Range,
        "Rid": Rid,
        "ClassList": ListFormatter,
        "IndexClass": IndexClass,
        "LinkType": LinkType,
    })
    WHERE_OPERATORS: ClassVar[tuple] = ("AND", "OR")

    def __init__(self):
        self._tokens: Dict[str, List[Any]] = {name: [] for name in self.placeholders()}

    @classmethod
    def placeholders(cls) -> List[str]:
        """Placeholder names of the schema, in order of first occurrence."""
        names: List[str] = []
        for name in PLACEHOLDER.findall(cls.SCHEMA):
            if name not in names:
                names.append(name)
        return names

    @classmethod
    def formatter_for(cls, name: str) -> Type[TokenFormatter]:
        return cls.FORMATTERS.get(name, Regular)

    def set_token(self, name: str, values: Any, append: bool = True) -> "Command":
        """Store raw values under a token.

        Args:
            name: Token name, without the leading colon
            values: A list of values, or a single value
            append: Add to the existing values instead of replacing them

        Returns:
            The command itself
        """
        if not isinstance(values, list):
            values = [values]

        if append:
            self._tokens.setdefault(name, []).extend(values)
        else:
            self._tokens[name] = list(values)

        return self

    def get_token(self, name: str) -> List[Any]:
        return list(self._tokens.get(name, []))

    def get_tokens(self) -> Dict[str, List[Any]]:
        """Raw, pre-formatting token state keyed by token name."""
        return {name: list(values) for name, values in self._tokens.items()}

    def where(self, condition: str, value: Any = None) -> "Command":
        """Start a fresh WHERE clause with a single condition.

        Args:
            condition: Condition with ``?`` placeholders, e.g. ``"name = ?"``
            value: Value bound to the placeholders; strings are quoted,
                   numbers and record ids are rendered bare

        Returns:
            The command itself
        """
        return self.set_token("Where", [WhereCondition(None, condition, value)], append=False)

    def and_where(self, condition: str, value: Any = None) -> "Command":
        return self._add_condition("AND", condition, value)

    def or_where(self, condition: str, value: Any = None) -> "Command":
        return self._add_condition("OR", condition, value)

    def reset_where(self) -> "Command":
        return self.set_token("Where", [], append=False)

    def between(self, key: str, left: Any, right: Any) -> "Command":
        """Add ``key BETWEEN left AND right`` to the WHERE clause."""
        return self.and_where(f"{key} BETWEEN ? AND ?", (left, right))

    def from_(self, target: Any, append: bool = True) -> "Command":
        return self.set_token("Target", target, append)

    def into(self, target: Any) -> "Command":
        if isinstance(target, (list, tuple)):
            target = target[0] if target else None
        return self.set_token("Target", [target], append=False)

    def fields(self, fields: Any, append: bool = True) -> "Command":
        return self.set_token("Fields", fields, append)

    def values(self, values: Any, append: bool = True) -> "Command":
        return self.set_token("Values", values, append)

    def in_(self, classes: Any, append: bool = True) -> "Command":
        return self.set_token("ClassList", classes, append)

    def order_by(self, order: Any, append: bool = True, first: bool = False) -> "Command":
        """Add ordering criteria such as ``"name DESC"``.

        Args:
            order: One criterion or a list of criteria
            append: Keep the criteria already set
            first: Put the new criteria before the existing ones
        """
        if first and append:
            if not isinstance(order, list):
                order = [order]
            return self.set_token("OrderBy", order + self.get_token("OrderBy"), append=False)
        return self.set_token("OrderBy", order, append)

    def limit(self, limit: Any) -> "Command":
        return self.set_token("Limit", [limit], append=False)

    def skip(self, records: Any) -> "Command":
        return self.set_token("Skip", [records], append=False)

    def range(self, left: Any = None, right: Any = None) -> "Command":
        """Restrict the statement to the RID range ``left`` .. ``right``."""
        bounds = [bound for bound in (left, right) if bound is not None]
        return self.set_token("Range", bounds, append=False)

    def get_raw(self) -> str:
        """Render the statement.

        Every placeholder is replaced by the output of its formatter; tokens
        that were never set render as empty text. A WHERE/AND/OR keyword
        written in the schema is dropped when everything after it rendered
        empty; keywords inside token values are never touched. The result
        is then normalized by ``canonicalize``.
        """
        rendered: Dict[str, str] = {}

        # Literal schema text sits at even indexes, placeholder names at odd ones.
        parts = PLACEHOLDER.split(self.SCHEMA)
        for index in range(1, len(parts), 2):
            name = parts[index]
            if name not in rendered:
                rendered[name] = self.format_token(name)
            parts[index] = rendered[name]

        last = max((index for index, part in enumerate(parts) if part.strip()), default=None)
        if last is not None and last % 2 == 0:
            parts[last] = DANGLING_KEYWORDS.sub("", parts[last])

        statement = self.canonicalize("".join(parts))
        logger.debug("Rendered %s statement", type(self).__name__, extra={"statement": statement})
        return statement

    def format_token(self, name: str) -> str:
        return self.formatter_for(name).format(self._tokens.get(name, []))

    @staticmethod
    def canonicalize(statement: str) -> str:
        """Normalize a substituted schema.

        Rules:
            1. Runs of whitespace collapse to a single space.
            2. Spaces just inside an opening parenthesis are removed.
            3. Spaces before a comma or a closing parenthesis are removed.
            4. Leading and trailing whitespace is removed.
        """
        statement = WHITESPACE.sub(" ", statement)
        statement = SPACE_AFTER_PAREN.sub("(", statement)
        statement = SPACE_BEFORE_PUNCTUATION.sub(r"\1", statement)
        return statement.strip()

    def _add_condition(self, connector: str, condition: str, value: Any) -> "Command":
        if connector not in self.WHERE_OPERATORS:
            connector = "AND"
        if not self._tokens.get("Where"):
            return self.where(condition, value)
        return self.set_token("Where", [WhereCondition(connector, condition, value)])

    def __str__(self) -> str:
        return self.get_raw()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.get_raw()!r}>"
