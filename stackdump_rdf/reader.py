"""
Streaming reader for dump files.
Yields the attributes of every self-closing row element without building a tree.
"""
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
from xml.parsers import expat

from .errors import InputFileError, ParseError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def _drain(rows: list):
    pending = rows[:]
    rows.clear()
    return pending


def iter_rows(path) -> Iterator[List[Tuple[str, str]]]:
    """
    Iterate over the records of one dump file.

    A record is a self-closing element (`<row ... />`) below the root; its
    attributes are yielded as (name, value) pairs in document order, already
    unescaped. Paired tags (`<row></row>`), elements with text or children
    and the root itself are skipped.

    Raises:
        InputFileError: the file cannot be opened or read
        ParseError: the markup is malformed or not valid UTF-8
    """
    try:
        source = open(path, "rb")
    except OSError as e:
        raise InputFileError(path, e) from e

    parser = expat.ParserCreate()
    parser.ordered_attributes = True
    rows = []
    opened = []

    def start(name, attrs):
        opened.append((parser.CurrentByteIndex, attrs))

    def end(name):
        index, attrs = opened.pop()
        # expat reports both events of an empty-element tag at the same offset
        if opened and parser.CurrentByteIndex == index:
            rows.append(list(zip(attrs[0::2], attrs[1::2])))

    parser.StartElementHandler = start
    parser.EndElementHandler = end

    with source:
        while True:
            try:
                data = source.read(CHUNK_SIZE)
            except OSError as e:
                raise InputFileError(path, e) from e
            try:
                parser.Parse(data, not data)
            except expat.ExpatError as e:
                yield from _drain(rows)
                raise ParseError(expat.ErrorString(e.code), path, (e.lineno, e.offset)) from e
            yield from _drain(rows)
            if not data:
                break


def collect_attributes(pairs: Iterable[Tuple[str, str]],
                       names: Iterable[str]) -> Dict[str, Optional[str]]:
    """
    Pick the recognized attributes out of one record.

    Every recognized name gets a slot, None when the attribute is absent.
    Unknown names are ignored; a repeated name keeps its last value.
    `iter_rows` always yields text; raw byte values from direct callers
    must decode as UTF-8.
    """
    slots = {name: None for name in names}
    for name, value in pairs:
        if name not in slots:
            continue
        if isinstance(value, bytes):
            try:
                value = value.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ParseError(f"invalid utf-8 in attribute `{name}`: {e}") from e
        slots[name] = value
    return slots
