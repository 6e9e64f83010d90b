"""Configuration Module for envfile

Example:
    from envfile.config import LoaderSettings

    settings = LoaderSettings.from_env(prefix="MYAPP")
"""

from envfile.config.settings import LoaderSettings, parse_bool

__all__ = [
    "LoaderSettings",
    "parse_bool",
]
