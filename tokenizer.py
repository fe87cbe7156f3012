# tokenizer.py - split stdin into file path tokens
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator

from errors import FatalError

CHUNK_SIZE = 65536


class Delimitation(enum.Enum):
    LINE = "line"
    NULL_BYTE = "null"
    WHITESPACE = "whitespace"


@dataclass(frozen=True)
class Token:
    """One candidate file path.

    ``record`` holds the bytes written back out when the token is
    displayed: the path plus a newline, or for NUL-delimited input the
    raw record exactly as it was read.
    """
    path: bytes
    record: bytes


def _records(stream, delimiter: bytes) -> Iterator[bytes]:
    """Yield raw records from a binary stream, delimiter included."""
    read = getattr(stream, "read1", None) or stream.read
    pending = b""
    while True:
        try:
            chunk = read(CHUNK_SIZE)
        except OSError as e:
            raise FatalError("read", e.strerror or e) from e
        if not chunk:
            break
        pending += chunk
        start = 0
        while True:
            end = pending.find(delimiter, start)
            if end == -1:
                break
            yield pending[start:end + 1]
            start = end + 1
        pending = pending[start:]
    if pending:
        yield pending


def read_tokens(stream, delimitation: Delimitation) -> Iterator[Token]:
    """Lazily tokenize ``stream`` according to ``delimitation``.

    Blank records in line and NUL mode produce no token. In whitespace
    mode each line may produce any number of tokens, including none.
    A null byte inside a line ends the name, as it would for a C string:
    in line mode the rest of the line is dropped, in whitespace mode it
    separates fields.
    """
    if delimitation is Delimitation.NULL_BYTE:
        for record in _records(stream, b"\0"):
            path = record[:-1] if record.endswith(b"\0") else record
            if path:
                yield Token(path, record)
        return

    for record in _records(stream, b"\n"):
        if delimitation is Delimitation.WHITESPACE:
            # bytes.split() with no separator splits on ASCII whitespace
            for field in record.replace(b"\0", b" ").split():
                yield Token(field, field + b"\n")
            continue
        path = record[:-1] if record.endswith(b"\n") else record
        path = path.split(b"\0", 1)[0]
        if path:
            yield Token(path, path + b"\n")
