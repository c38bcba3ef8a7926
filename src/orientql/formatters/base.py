"""Base formatter contract and value-safety helpers.

A formatter turns the raw values stored under one token into the text
substituted at the token's placeholder. Formatters are stateless and never
raise: values they cannot render are dropped.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Sequence

from orientql.types import RecordId

# Word characters, spaces and the punctuation that may legitimately appear in
# identifiers, projections, record ids and function calls.
NON_SQL_CHARS = re.compile(r"[^\w .,:#@*()\[\]+/-]")

SEPARATOR = ", "


def filter_non_sql_chars(value: Any) -> str:
    """Strip characters that are unsafe in an unquoted or quoted position.

    Args:
        value: Raw value; non-strings are converted with ``str()``

    Returns:
        The value with every character outside the whitelist removed
    """
    if value is None:
        return ""
    return NON_SQL_CHARS.sub("", str(value))


def format_literal(value: Any) -> str:
    """Render a value as a literal according to its runtime type.

    Strings are filtered and double quoted; record ids and numbers are
    rendered bare; booleans as ``true``/``false``; None as ``NULL``;
    lists, tuples and sets as ``[a, b]``.
    """
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, RecordId):
        return str(value)
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return "[" + SEPARATOR.join(format_literal(item) for item in value) + "]"
    return f'"{filter_non_sql_chars(value)}"'


class TokenFormatter(ABC):
    """Contract shared by every token formatter."""

    @classmethod
    @abstractmethod
    def format(cls, values: Sequence[Any]) -> str:
        """Format the token values according to the formatter's rules.

        Args:
            values: Raw values stored under the token

        Returns:
            Rendered text; empty when nothing can be rendered
        """

    @staticmethod
    def filtered(values: Sequence[Any]) -> list:
        """Filter every value, dropping the ones that end up empty."""
        filtered = (filter_non_sql_chars(value).strip() for value in values or ())
        return [value for value in filtered if value]
