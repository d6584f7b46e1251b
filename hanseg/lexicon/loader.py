"""
Dictionary record reader.

Dictionary sources are line-oriented UTF-8 text, one record per line:

    word[ frequency[ part_of_speech]]

Fields are separated by single spaces. A byte-order mark on the first field
is stripped. Records are parsed lazily so large dictionaries can be streamed
into a lexicon without being buffered.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from pydantic import ValidationError

from hanseg.schema.token import Token
from .core import Lexicon

# Module-level logger
logger = logging.getLogger(__name__)

BOM = "\ufeff"

DictionarySource = Union[str, Path, Iterable[str]]


class DictionaryFormatError(ValueError):
    """Raised when a dictionary record cannot be turned into a token."""

    def __init__(self, message: str, lineno: Optional[int] = None, line: Optional[str] = None):
        self.lineno = lineno
        self.line = line
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)


def parse_token_line(line: str, lineno: Optional[int] = None) -> Optional[Token]:
    """
    Parse one dictionary record.

    Args:
        line: Raw record text (trailing newline allowed)
        lineno: 1-based line number, used in error messages

    Returns:
        The parsed token, or None for a blank line

    Raises:
        DictionaryFormatError: If the word field is empty while other fields
            follow, or the frequency is not a finite non-negative number
    """
    line = line.rstrip("\r\n")
    if not line.replace(BOM, "", 1).strip():
        return None
    fields = line.split(" ")
    text = fields[0].replace(BOM, "", 1).strip()
    if not text:
        raise DictionaryFormatError("empty word field", lineno, line)

    frequency = 0.0
    pos = None
    if len(fields) > 1:
        try:
            frequency = float(fields[1])
        except ValueError:
            raise DictionaryFormatError(f"invalid frequency {fields[1]!r} for word {text!r}", lineno, line)
        if len(fields) > 2:
            pos = fields[2].strip() or None

    try:
        return Token(text=text, frequency=frequency, pos=pos)
    except ValidationError as e:
        raise DictionaryFormatError(f"invalid record for word {text!r}: {e.errors()[0]['msg']}", lineno, line) from e


def _resolve_path(source: Union[str, Path]) -> Path:
    path = Path(source)
    if not path.is_absolute():
        path = (Path.cwd() / path).resolve()
    return path


def _iter_lines(source: DictionarySource) -> Iterator[str]:
    if isinstance(source, (str, Path)):
        path = _resolve_path(source)
        if not path.exists():
            raise FileNotFoundError(f"Dictionary not found: {path}")
        logger.info(f"Reading dictionary: {path}")
        with path.open("r", encoding="utf-8") as f:
            yield from f
    else:
        yield from source


def iter_dictionary(source: DictionarySource) -> Iterator[Token]:
    """
    Lazily yield tokens from a dictionary file path or an iterable of lines.

    Blank lines are skipped. Parsing stops at the first malformed record.
    """
    for lineno, line in enumerate(_iter_lines(source), 1):
        token = parse_token_line(line, lineno)
        if token is not None:
            yield token


def load_dictionary(lexicon: Lexicon, source: DictionarySource, batch_size: Optional[int] = None) -> int:
    """
    Stream a dictionary source into a lexicon.

    Records read before a malformed one stay in the lexicon; the
    DictionaryFormatError still reaches the caller.

    Returns:
        Number of tokens loaded
    """
    count = lexicon.load_tokens(iter_dictionary(source), batch_size=batch_size)
    logger.info(f"Dictionary load complete: {count:,} records")
    return count
