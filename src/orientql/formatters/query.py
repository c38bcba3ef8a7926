"""Token formatters for OrientDB SQL statements.

Each class renders the values of one kind of placeholder. Clause
formatters (Where, Limit, OrderBy, ...) emit their own keyword, so a clause
without values disappears from the statement entirely.
"""

import re
from typing import Any, Optional, Sequence

from orientql.formatters.base import (
    SEPARATOR,
    TokenFormatter,
    filter_non_sql_chars,
    format_literal,
)
from orientql.types import RecordId, WhereCondition

INTEGER_PATTERN = re.compile(r"^-?\d+$")


def _first_integer(values: Sequence[Any]) -> Optional[int]:
    if not values:
        return None
    value = values[0]
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and INTEGER_PATTERN.match(value.strip()):
        return int(value)
    return None


def _record_ids(values: Sequence[Any]) -> list:
    rids = (RecordId.parse(value) for value in values or ())
    return [rid for rid in rids if rid is not None]


class Regular(TokenFormatter):
    """Filtered values joined by a comma."""

    @classmethod
    def format(cls, values: Sequence[Any]) -> str:
        return SEPARATOR.join(cls.filtered(values))


class String(TokenFormatter):
    """Filtered values rendered as double quoted string literals."""

    @classmethod
    def format(cls, values: Sequence[Any]) -> str:
        return SEPARATOR.join(f'"{value}"' for value in cls.filtered(values))


class Rid(TokenFormatter):
    """Valid record ids rendered as ``#cluster:position``."""

    @classmethod
    def format(cls, values: Sequence[Any]) -> str:
        return SEPARATOR.join(str(rid) for rid in _record_ids(values))


class EmbeddedRid(TokenFormatter):
    """A single record id placed inside another value position.

    Only the first valid record id is used and it is never quoted, so it can
    sit next to literals, e.g. in an index entry's ``(key, rid)`` pair.
    """

    @classmethod
    def format(cls, values: Sequence[Any]) -> str:
        rids = _record_ids(values)
        return str(rids[0]) if rids else ""


class IndexClass(TokenFormatter):
    """Class qualifier prefix (``Class.``) for index names."""

    @classmethod
    def format(cls, values: Sequence[Any]) -> str:
        if values:
            value = filter_non_sql_chars(values[0]).strip()
            if value:
                return f"{value}."
        return ""


class List(TokenFormatter):
    """Filtered values rendered as a bracketed list."""

    @classmethod
    def format(cls, values: Sequence[Any]) -> str:
        filtered = cls.filtered(values)
        if not filtered:
            return ""
        return "[" + SEPARATOR.join(filtered) + "]"


class Target(TokenFormatter):
    """A single target bare, several targets as a bracketed list."""

    @classmethod
    def format(cls, values: Sequence[Any]) -> str:
        filtered = cls.filtered(values)
        if len(filtered) > 1:
            return "[" + SEPARATOR.join(filtered) + "]"
        return SEPARATOR.join(filtered)


class Values(TokenFormatter):
    """Typed literals: strings quoted, numbers and record ids bare."""

    @classmethod
    def format(cls, values: Sequence[Any]) -> str:
        return SEPARATOR.join(format_literal(value) for value in values or ())


class Where(TokenFormatter):
    """Render the WHERE accumulator.

    Conditions keep their call order; the first one is introduced by
    ``WHERE`` and the following ones by their own connector. Each ``?`` in
    a condition is replaced by the bound value; a tuple value binds one item
    per placeholder.
    """

    @classmethod
    def format(cls, values: Sequence[Any]) -> str:
        clauses = []
        for entry in values or ():
            if not isinstance(entry, WhereCondition):
                continue
            condition = cls.bind(entry.condition, entry.value).strip()
            if not condition:
                continue
            keyword = entry.connector if clauses and entry.connector else "WHERE"
            if clauses and keyword == "WHERE":
                keyword = "AND"
            clauses.append(f"{keyword} {condition}")
        return " ".join(clauses)

    @staticmethod
    def bind(condition: str, value: Any) -> str:
        parts = condition.split("?")
        if len(parts) == 1:
            return condition

        placeholders = len(parts) - 1
        if isinstance(value, tuple) and not isinstance(value, RecordId) and placeholders > 1:
            params = list(value)
        else:
            params = [value]

        bound = parts[0]
        for index, part in enumerate(parts[1:]):
            param = format_literal(params[index]) if index < len(params) else ""
            bound += param + part
        return bound


class Limit(TokenFormatter):
    @classmethod
    def format(cls, values: Sequence[Any]) -> str:
        limit = _first_integer(values)
        return f"LIMIT {limit}" if limit is not None else ""


class Skip(TokenFormatter):
    @classmethod
    def format(cls, values: Sequence[Any]) -> str:
        skip = _first_integer(values)
        return f"SKIP {skip}" if skip is not None else ""


class OrderBy(TokenFormatter):
    @classmethod
    def format(cls, values: Sequence[Any]) -> str:
        filtered = cls.filtered(values)
        return f"ORDER BY {SEPARATOR.join(filtered)}" if filtered else ""


class Range(TokenFormatter):
    """RID range: ``RANGE #c:p`` or ``RANGE #c:p #c:p``."""

    @classmethod
    def format(cls, values: Sequence[Any]) -> str:
        rids = _record_ids(values)[:2]
        if not rids:
            return ""
        return "RANGE " + " ".join(str(rid) for rid in rids)


class Updates(TokenFormatter):
    """``field = literal`` assignments from (field, value) pairs."""

    @classmethod
    def format(cls, values: Sequence[Any]) -> str:
        assignments = []
        for entry in values or ():
            if not isinstance(entry, tuple) or len(entry) != 2:
                continue
            field = filter_non_sql_chars(entry[0]).strip()
            if field:
                assignments.append(f"{field} = {format_literal(entry[1])}")
        return SEPARATOR.join(assignments)


class RidUpdates(TokenFormatter):
    """``field = #c:p`` assignments from (field, rid) pairs."""

    @classmethod
    def format(cls, values: Sequence[Any]) -> str:
        assignments = []
        for entry in values or ():
            if not isinstance(entry, tuple) or len(entry) != 2:
                continue
            field = filter_non_sql_chars(entry[0]).strip()
            rid = RecordId.parse(entry[1])
            if field and rid is not None:
                assignments.append(f"{field} = {rid}")
        return SEPARATOR.join(assignments)


class MapUpdates(TokenFormatter):
    """``field = "key", #c:p`` entries from (field, key, rid) triples."""

    @classmethod
    def format(cls, values: Sequence[Any]) -> str:
        assignments = []
        for entry in values or ():
            if not isinstance(entry, tuple) or len(entry) != 3:
                continue
            field = filter_non_sql_chars(entry[0]).strip()
            key = filter_non_sql_chars(entry[1]).strip()
            rid = RecordId.parse(entry[2])
            if field and key and rid is not None:
                assignments.append(f'{field} = "{key}", {rid}')
        return SEPARATOR.join(assignments)


class LinkType(TokenFormatter):
    @classmethod
    def format(cls, values: Sequence[Any]) -> str:
        filtered = cls.filtered(values)
        return f"TYPE {filtered[0]}" if filtered else ""
