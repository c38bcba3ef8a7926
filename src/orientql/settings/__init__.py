"""Settings for orientql, built on Pydantic Settings.

Configuration Sources (precedence order):
    1. Environment variables (``ORIENTQL_`` prefix)
    2. ``.env`` file in the working directory
    3. Default values in code

Quick Start:
    >>> from orientql.settings import get_settings
    >>> settings = get_settings()
    >>> settings.log_level
    'INFO'
"""

from .main import get_settings, _reload_settings
from .base import QuerySettings

__all__ = [
    "get_settings",
    "QuerySettings",
]
