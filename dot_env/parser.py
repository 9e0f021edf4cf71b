"""Line-oriented `.env` parser.

Format:
  - one ``KEY=value`` per line, split on the first ``=``
  - blank lines and lines starting with ``#`` are ignored (no inline comments)
  - key and value are trimmed independently
  - a value wrapped in one pair of double quotes has exactly those quotes removed,
    with no escape processing
  - an empty key or empty value makes the line invalid
"""

from __future__ import annotations

import io
import logging
import os
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from .utils.strings import strip_whitespace

logger = logging.getLogger(__name__)


class EnvEntry(BaseModel):
    """Validated key/value pair ready for the store."""
    model_config = ConfigDict(frozen=True, extra="forbid")
    key: str = Field(min_length=1)
    value: str = Field(min_length=1)


@dataclass(frozen=True)
class ParsedLine:
    """Result of parsing one non-blank, non-comment line.

    Attributes:
        line_number: 1-based line number in the file (0 when parsed standalone).
        raw: The line after outer whitespace trimming.
        key: Trimmed key (may be empty for invalid lines).
        value: Trimmed, unquoted value (may be empty for invalid lines).
        error: Why the line is invalid, None if valid.
    """
    line_number: int
    raw: str
    key: str = ""
    value: str = ""
    error: Optional[str] = None

    @property
    def valid(self) -> bool:
        return self.error is None

    def to_entry(self) -> EnvEntry:
        """Return the validated entry. Only call on valid lines."""
        return EnvEntry(key=self.key, value=self.value)


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def parse_line(line: str, line_number: int = 0) -> Optional[ParsedLine]:
    """Parse a single line.

    Returns:
        None for blank and comment lines, otherwise a ParsedLine whose
        ``valid`` flag says whether it should be stored.
    """
    text = strip_whitespace(line)
    if not text or text.startswith("#"):
        return None

    key, sep, value = text.partition("=")
    if not sep:
        return ParsedLine(line_number=line_number, raw=text, error="missing '='")
    if "\x00" in text:
        # os.environ rejects NUL in names and values
        return ParsedLine(line_number=line_number, raw=text.replace("\x00", "\\x00"), error="embedded NUL")

    key = strip_whitespace(key)
    value = _unquote(strip_whitespace(value))

    try:
        EnvEntry(key=key, value=value)
    except ValidationError:
        reason = "empty key" if not key else "empty value"
        return ParsedLine(line_number=line_number, raw=text, key=key, value=value, error=reason)

    return ParsedLine(line_number=line_number, raw=text, key=key, value=value)


def _decode_and_parse(raw_line: bytes, line_number: int) -> Optional[ParsedLine]:
    try:
        line = raw_line.decode("utf-8")
    except UnicodeDecodeError:
        # still skip blank/comment lines, report anything else as invalid
        parsed = parse_line(raw_line.decode("utf-8", errors="replace"), line_number)
        if parsed is None:
            return None
        return ParsedLine(line_number=line_number, raw=parsed.raw, error="invalid UTF-8")
    return parse_line(line, line_number)


def iter_env_file(path: str | os.PathLike[str]) -> Iterator[ParsedLine]:
    """Yield parsed records for every non-blank, non-comment line of *path*.

    Lines are split on LF and decoded one at a time, so an undecodable line
    is reported as invalid without affecting the rest of the file. The file
    is closed when iteration finishes, fails, or is abandoned.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(path, "rb") as fh:
        for line_number, raw_line in enumerate(fh, start=1):
            parsed = _decode_and_parse(raw_line, line_number)
            if parsed is not None:
                yield parsed


def log_invalid_line(path: str | os.PathLike[str], parsed: ParsedLine) -> None:
    logger.warning(f"Invalid line in env file {path}:{parsed.line_number} ({parsed.error}): {parsed.raw}")


def _collect(records: Iterable[ParsedLine], source: str | os.PathLike[str]) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for parsed in records:
        if not parsed.valid:
            log_invalid_line(source, parsed)
            continue
        if parsed.key in values:
            logger.warning(f"Duplicate env key: {parsed.key}, overwriting.")
        values[parsed.key] = parsed.value
    return values


def parse_env_file(path: str | os.PathLike[str]) -> Dict[str, str]:
    """Parse *path* into a dict without touching any environment.

    Invalid lines are logged and skipped; for duplicate keys the last value wins.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    return _collect(iter_env_file(path), path)


def parse_env_text(text: str) -> Dict[str, str]:
    """Parse `.env` content held in a string. Same rules as parse_env_file."""
    # StringIO splits on LF only, like iter_env_file
    records = (
        parse_line(line, line_number)
        for line_number, line in enumerate(io.StringIO(text), start=1)
    )
    return _collect((r for r in records if r is not None), "<string>")


__all__ = [
    "EnvEntry",
    "ParsedLine",
    "parse_line",
    "iter_env_file",
    "parse_env_file",
    "parse_env_text",
]
