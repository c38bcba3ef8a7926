"""Formatter set used to render command tokens.

Every formatter exposes ``format(values) -> str`` and is bound to token
names by the command classes (see ``Command.FORMATTERS``).
"""

from orientql.formatters.base import (
    TokenFormatter,
    filter_non_sql_chars,
    format_literal,
)
from orientql.formatters.query import (
    EmbeddedRid,
    IndexClass,
    Limit,
    LinkType,
    List,
    MapUpdates,
    OrderBy,
    Range,
    Regular,
    Rid,
    RidUpdates,
    Skip,
    String,
    Target,
    Updates,
    Values,
    Where,
)

__all__ = [
    "TokenFormatter",
    "filter_non_sql_chars",
    "format_literal",
    "EmbeddedRid",
    "IndexClass",
    "Limit",
    "LinkType",
    "List",
    "MapUpdates",
    "OrderBy",
    "Range",
    "Regular",
    "Rid",
    "RidUpdates",
    "Skip",
    "String",
    "Target",
    "Updates",
    "Values",
    "Where",
]
