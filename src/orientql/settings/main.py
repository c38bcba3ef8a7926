from typing import Optional

from .base import QuerySettings

_settings: Optional[QuerySettings] = None


def get_settings(force_reload: bool = False) -> QuerySettings:
    """Get the singleton settings instance.

    Settings are loaded from the environment on first access and reused
    afterwards.

    Args:
        force_reload: If True, creates a new instance even if one already
                     exists. Useful for testing or when environment
                     variables have changed.

    Returns:
        QuerySettings: The singleton settings instance

    Example:
        ```python
        settings = get_settings()
        assert settings is get_settings()

        new_settings = get_settings(force_reload=True)
        assert new_settings is not settings
        ```
    """
    global _settings

    if _settings is None or force_reload:
        _settings = QuerySettings()

    return _settings


def _reload_settings() -> QuerySettings:
    """Force reload of settings.

    This is primarily for testing purposes where you need to reset
    the singleton instance.

    Returns:
        A fresh QuerySettings instance
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)
