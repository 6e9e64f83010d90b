"""Loading key/value definitions from .env files.

Example:
    from envfile.dotenv import configure

    env = configure().directory("/srv/app").ignore_if_missing().load()
    env.get("LOG_LEVEL", "INFO")
"""

from envfile.dotenv.builder import (
    DotenvBuilder,
    PropertySink,
    ReaderFactory,
    configure,
    load,
)
from envfile.dotenv.entry import DotenvEntry, RawLine
from envfile.dotenv.parser import DotenvParser, ParseState
from envfile.dotenv.reader import DotenvReader, Reader
from envfile.dotenv.store import Dotenv

__all__ = [
    "Dotenv",
    "DotenvBuilder",
    "DotenvEntry",
    "DotenvParser",
    "DotenvReader",
    "ParseState",
    "PropertySink",
    "RawLine",
    "Reader",
    "ReaderFactory",
    "configure",
    "load",
]
