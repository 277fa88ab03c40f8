"""
Gzip-compressed N-Triples output.
Statements are written one line at a time in the order they are given,
no graph is held in memory.
"""
import gzip
import logging
from typing import Iterable, Iterator

# rdflib's own N-Triples row formatter (rdflib/plugins/serializers/nt.py, _nt_row),
# shipped by rdflib 6.x and 7.x; pinned in pyproject.toml
from rdflib.plugins.serializers.nt import _nt_row

from .config import COMPRESSION_LEVEL
from .errors import OutputFileError, SerializationError

logger = logging.getLogger(__name__)


def format_statement(statement) -> str:
    """One N-Triples line (with trailing newline), escaped like rdflib's nt serializer."""
    try:
        return _nt_row(statement)
    except Exception as e:
        raise SerializationError(f"Cannot serialize statement {statement!r}: {e}") from e


class NTriplesWriter:
    """Writes statements to a gzip stream; use as a context manager."""

    def __init__(self, path, compresslevel: int = COMPRESSION_LEVEL):
        self.path = str(path)
        self.compresslevel = compresslevel
        self.count = 0
        self._stream = None

    def open(self):
        try:
            self._stream = gzip.open(self.path, "wt", encoding="utf-8", newline="\n",
                                     compresslevel=self.compresslevel)
        except OSError as e:
            raise OutputFileError(self.path, e) from e
        logger.debug(f"Writing statements to {self.path}")
        return self

    def write(self, statement):
        if self._stream is None:
            raise SerializationError(f"Output {self.path} is not open")
        line = format_statement(statement)
        try:
            self._stream.write(line)
        except OSError as e:
            raise SerializationError(f"Cannot write to {self.path}: {e}") from e
        self.count += 1

    def write_all(self, statements: Iterable) -> int:
        """Write a batch of statements, return how many were written."""
        n = 0
        for statement in statements:
            self.write(statement)
            n += 1
        return n

    def close(self):
        if self._stream is None:
            return
        stream, self._stream = self._stream, None
        try:
            stream.close()
        except OSError as e:
            raise SerializationError(f"Cannot finish {self.path}: {e}") from e

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.close()
            return
        # Already failing: release the file, let the pending exception propagate
        try:
            self.close()
        except SerializationError:
            logger.warning(f"Could not close {self.path} after an error")


def read_statements(path) -> Iterator[str]:
    """Decompress an output file and yield its lines without the newline."""
    with gzip.open(path, "rt", encoding="utf-8", newline="\n") as f:
        for line in f:
            yield line.rstrip("\n")
