"""
Parsing Context

Responsibilities:
- Reads indentation-delimited resume markup into a generic value tree
- Tracks indentation, disambiguates mappings, sequences and block literals
- Skips blank lines, comments and lines it can't interpret (or rejects them in strict mode)

Owns: Document parsing, the Scalar/Mapping/Sequence value model
Never: Interprets resume fields or touches the filesystem
"""

from termresume.contexts.parsing.document_tree import (
    Mapping,
    Scalar,
    Sequence,
    Value,
    to_python,
)
from termresume.contexts.parsing.exceptions import DocumentParsingError
from termresume.contexts.parsing.parser import DocumentParser, normalize_scalar, parse_document

__all__ = [
    # Entry points
    "parse_document",
    "DocumentParser",
    "normalize_scalar",
    "DocumentParsingError",
    # Value model
    "Scalar",
    "Mapping",
    "Sequence",
    "Value",
    "to_python",
]
