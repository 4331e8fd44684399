import os
import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator
from config import settings
from src.utils.exceptions import SourceReadError

STDIN_MARKER = "-"

def _read_chunks(stream: BinaryIO, chunk_size: int, name: str) -> Iterator[bytes]:
    while True:
        try:
            chunk = stream.read(chunk_size)
        except OSError as e:
            raise SourceReadError(f"failed reading {name}: {e}") from e
        if not chunk:
            return
        yield chunk

@contextmanager
def _stdin_context(chunk_size):
    # stdin belongs to the process, leave it open
    yield _read_chunks(sys.stdin.buffer, chunk_size, "<stdin>")

@contextmanager
def _file_context(path, chunk_size):
    try:
        stream = open(path, "rb")
    except OSError as e:
        raise SourceReadError(f"cannot open {path}: {e}") from e
    with stream:
        yield _read_chunks(stream, chunk_size, str(path))

@contextmanager
def _iter_context(it):
    yield it

class ChunkReaderFactory:
    def __new__(cls, source, chunk_size: int | None = None):
        chunk_size = chunk_size or settings.chunk_size
        if source == STDIN_MARKER:
            return _stdin_context(chunk_size)
        elif isinstance(source, (str, os.PathLike)):
            return _file_context(source, chunk_size)
        elif hasattr(source, "__iter__") and not isinstance(source, (bytes, bytearray)):
            return _iter_context(iter(source))
        else:
            raise ValueError("Invalid input type")
