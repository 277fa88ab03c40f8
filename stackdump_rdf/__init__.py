"""StackExchange XML dump to gzipped N-Triples converter."""

from .errors import (
    ConversionError,
    InputFileError,
    MissingAttributeError,
    OutputFileError,
    ParseError,
    SerializationError,
)
from .mappers import MAPPERS, EntityKind, map_record
from .xml_to_rdf import DumpToRDFConverter, convert

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "InputFileError",
    "MissingAttributeError",
    "OutputFileError",
    "ParseError",
    "SerializationError",
    "MAPPERS",
    "EntityKind",
    "map_record",
    "DumpToRDFConverter",
    "convert",
]
