"""orientql: a fluent builder for OrientDB SQL statements.

Example:
    >>> from orientql import Query, RecordId
    >>> Query().index_put("dictionary", "luke", RecordId(12, 0)).get_raw()
    'INSERT INTO index:dictionary (key, rid) VALUES ("luke", #12:0)'
"""

from orientql.__version__ import __version__
from orientql.commands import DEFAULT_COMMANDS, Command, CommandFactory
from orientql.common import ErrorCode, OrientQLError
from orientql.query import Query
from orientql.types import RecordId, WhereCondition

__all__ = [
    "__version__",
    "Command",
    "CommandFactory",
    "DEFAULT_COMMANDS",
    "ErrorCode",
    "OrientQLError",
    "Query",
    "RecordId",
    "WhereCondition",
]
