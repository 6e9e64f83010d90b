"""Line-oriented parser for .env files.

Supported syntax, evaluated per line:

    # full-line comment
    KEY=value                 # unquoted, cut at the first '#', trimmed
    KEY: value                # ':' works as a separator too
    export KEY=value          # 'export ' prefix is ignored
    KEY='literal $NOT_EXPANDED'
    KEY="escapes \\n \\r \\" \\\\ and ${REFS}"
    KEY="values in double quotes
    may span several lines"

``$NAME`` and ``${NAME}`` are expanded in unquoted and double-quoted values
from entries defined earlier in the same file, then from the environment,
then to the empty string. Expansion is a single pass; substituted text is
not expanded again.
"""

from __future__ import annotations

import enum
import os
import re
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Union

from envfile.dotenv.entry import DotenvEntry, RawLine
from envfile.dotenv.reader import Reader
from envfile.exceptions import MalformedEntryError, MissingFileError
from envfile.logger import Logger, get_logger

# Only a prefix when an assignment follows; "export = 5" defines the key "export"
_EXPORT_PREFIX = re.compile(r"^export\s+(?=[A-Za-z0-9_.]+\s*[=:])")
_ASSIGNMENT = re.compile(r"^(?P<key>[A-Za-z0-9_.]+)\s*[=:]\s*(?P<value>.*)$")
_REFERENCE = re.compile(r"\$(?:\{(?P<braced>[A-Za-z0-9_]+)\}|(?P<bare>[A-Za-z0-9_]+))")
_ESCAPES = {"n": "\n", "r": "\r", '"': '"', "\\": "\\"}


class ParseState(enum.Enum):
    NORMAL = "normal"
    IN_DOUBLE_QUOTE = "in_double_quote"


def _numbered(lines: Iterable[Union[str, RawLine]]) -> Iterator[RawLine]:
    for number, line in enumerate(lines, start=1):
        yield line if isinstance(line, RawLine) else RawLine(number, line)


def _find_closing_quote(text: str) -> int:
    """Index of the first unescaped double quote in ``text``, or -1."""
    i = 0
    while i < len(text):
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if char == '"':
            return i
        i += 1
    return -1


def _is_blank_or_comment(text: str) -> bool:
    rest = text.strip()
    return not rest or rest.startswith("#")


class DotenvParser:
    """Turn the lines supplied by a Reader into an ordered list of entries.

    Duplicate keys are kept in the output in file order; collapsing them
    (last write wins) is left to the Store.
    """

    def __init__(
        self,
        reader: Reader,
        throw_if_missing: bool = True,
        throw_if_malformed: bool = True,
        environ: Optional[Mapping[str, str]] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._reader = reader
        self._throw_if_missing = throw_if_missing
        self._throw_if_malformed = throw_if_malformed
        self._environ = environ
        self._logger = logger or get_logger()

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def parse(self) -> List[DotenvEntry]:
        """Read and parse the source.

        Raises:
            MissingFileError: If the source is missing and throw_if_missing is set
            MalformedEntryError: On the first bad line if throw_if_malformed is set
        """
        try:
            lines = self._reader.read()
        except MissingFileError as e:
            if self._throw_if_missing:
                raise
            self._logger.debug("No .env file found, continuing without entries", path=e.path)
            return []
        return self.parse_lines(lines)

    def parse_lines(self, lines: Iterable[Union[str, RawLine]]) -> List[DotenvEntry]:
        numbered = list(_numbered(lines))
        entries: List[DotenvEntry] = []
        defined: Dict[str, str] = {}

        state = ParseState.NORMAL
        opening_index = -1
        pending_key = ""
        chunks: List[str] = []

        def emit(key: str, value: str) -> None:
            entries.append(DotenvEntry(key, value))
            defined[key] = value

        index = 0
        while index < len(numbered) or state is ParseState.IN_DOUBLE_QUOTE:
            if index >= len(numbered):
                # Input ended inside a quote: drop the opening line, re-read the rest
                self._reject(numbered[opening_index], "unterminated double quote")
                state = ParseState.NORMAL
                index = opening_index + 1
                continue

            line = numbered[index]
            index += 1

            if state is ParseState.IN_DOUBLE_QUOTE:
                chunks.append(line.text)
                quoted = "\n".join(chunks)
                end = _find_closing_quote(quoted)
                if end == -1:
                    continue
                state = ParseState.NORMAL
                if not _is_blank_or_comment(quoted[end + 1:]):
                    self._reject(line, "unexpected content after closing quote")
                    continue
                emit(pending_key, self._expand(quoted[:end], defined, escapes=True))
                continue

            body = line.text.lstrip()
            if not body.strip() or body.startswith("#"):
                continue

            match = _ASSIGNMENT.match(_EXPORT_PREFIX.sub("", body, count=1))
            if match is None:
                self._reject(line, "expected KEY=VALUE")
                continue

            key, raw = match.group("key"), match.group("value")

            if raw.startswith('"'):
                content = raw[1:]
                end = _find_closing_quote(content)
                if end == -1:
                    state = ParseState.IN_DOUBLE_QUOTE
                    opening_index, pending_key, chunks = index - 1, key, [content]
                    continue
                if not _is_blank_or_comment(content[end + 1:]):
                    self._reject(line, "unexpected content after closing quote")
                    continue
                emit(key, self._expand(content[:end], defined, escapes=True))
            elif raw.startswith("'"):
                end = raw.find("'", 1)
                if end == -1:
                    self._reject(line, "unterminated single quote")
                    continue
                if not _is_blank_or_comment(raw[end + 1:]):
                    self._reject(line, "unexpected content after closing quote")
                    continue
                emit(key, raw[1:end])
            else:
                value = raw.split("#", 1)[0].strip()
                emit(key, self._expand(value, defined, escapes=False))

        self._logger.debug("Parsed .env entries", entries=len(entries))
        return entries

    def _expand(self, text: str, defined: Mapping[str, str], escapes: bool) -> str:
        out: List[str] = []
        i = 0
        while i < len(text):
            char = text[i]
            if escapes and char == "\\" and i + 1 < len(text):
                # Unknown sequences are kept verbatim, backslash included
                out.append(_ESCAPES.get(text[i + 1], text[i : i + 2]))
                i += 2
                continue
            if char == "$":
                ref = _REFERENCE.match(text, i)
                if ref is not None:
                    out.append(self._lookup(ref.group("braced") or ref.group("bare"), defined))
                    i = ref.end()
                    continue
            out.append(char)
            i += 1
        return "".join(out)

    def _lookup(self, name: str, defined: Mapping[str, str]) -> str:
        if name in defined:
            return defined[name]
        return self.environ.get(name, "")

    def _reject(self, line: RawLine, reason: str) -> None:
        if self._throw_if_malformed:
            raise MalformedEntryError(line.number, line.text, reason)
        self._logger.warning("Skipping malformed .env line", line_number=line.number, reason=reason)


__all__ = ["DotenvParser", "ParseState"]
