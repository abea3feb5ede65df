"""
Configuration module for the Hebrew calendar and Tachanun lookup service.

This module centralizes all configuration values and supports environment variable overrides.
"""

import os

# ========= LOCALE CONFIGURATION =========

_TRUE_VALUES = ("1", "true", "yes", "on", "il")
_FALSE_VALUES = ("0", "false", "no", "off", "diaspora")


def _get_bool(env_var: str, default: bool) -> bool:
    """Read a boolean flag from the environment, falling back to the default."""
    value = os.getenv(env_var)
    if value is None:
        return default
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    print(f"Warning: Unrecognised value {value!r} for {env_var}, using {default}")
    return default


# Locale used when a lookup does not say whether it is for Israel
DEFAULT_IL = _get_bool("TACHANUN_DEFAULT_IL", False)

# ========= CACHE CONFIGURATION =========

# lru_cache size for the new-year computation (one entry per Hebrew year)
ELAPSED_DAYS_CACHE_SIZE = int(os.getenv("ELAPSED_DAYS_CACHE_SIZE", "4096"))
