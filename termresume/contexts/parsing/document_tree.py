"""
Document Tree

Value model produced by the document parser: a closed union of three node
types. Every consumer dispatches on exactly these three classes.

- Scalar: a single string (quotes already stripped, never type-coerced)
- Mapping: ordered string keys to values (insertion order significant)
- Sequence: ordered list of values
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union


@dataclass(frozen=True)
class Scalar:
    """A single string value."""

    text: str

    def __bool__(self) -> bool:
        return bool(self.text)


@dataclass
class Mapping:
    """
    Ordered mapping of unique string keys to values.

    Assigning an existing key replaces its value in place (last write wins,
    original position kept), matching line-by-line assignment in the parser.
    An empty Mapping is how the parser represents a key whose value was left
    blank.
    """

    entries: Dict[str, "Value"] = field(default_factory=dict)

    def __getitem__(self, key: str) -> "Value":
        return self.entries[key]

    def __setitem__(self, key: str, value: "Value") -> None:
        self.entries[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> List[str]:
        return list(self.entries)

    def items(self):
        return self.entries.items()

    def get(self, key: str, default: Optional["Value"] = None) -> Optional["Value"]:
        return self.entries.get(key, default)

    def get_text(self, key: str, default: str = "") -> str:
        """
        Get the scalar text stored under a key.

        Args:
            key: Mapping key
            default: Returned when the key is missing or doesn't hold a Scalar

        Returns:
            Scalar text or default
        """
        value = self.entries.get(key)
        if isinstance(value, Scalar):
            return value.text
        return default

    def get_mapping(self, key: str) -> "Mapping":
        """Get the nested Mapping under a key (empty Mapping when missing or not a mapping)."""
        value = self.entries.get(key)
        if isinstance(value, Mapping):
            return value
        return Mapping()

    def get_sequence(self, key: str) -> "Sequence":
        """Get the nested Sequence under a key (empty Sequence when missing or not a sequence)."""
        value = self.entries.get(key)
        if isinstance(value, Sequence):
            return value
        return Sequence()


@dataclass
class Sequence:
    """Ordered list of values."""

    items: List["Value"] = field(default_factory=list)

    def __getitem__(self, index: int) -> "Value":
        return self.items[index]

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def append(self, value: "Value") -> None:
        self.items.append(value)

    def mappings(self) -> List[Mapping]:
        """Items that are mappings (the shape of resume sections), in order."""
        return [item for item in self.items if isinstance(item, Mapping)]

    def texts(self) -> List[str]:
        """Scalar items as strings, in order."""
        return [item.text for item in self.items if isinstance(item, Scalar)]


Value = Union[Scalar, Mapping, Sequence]


def to_python(value: Value) -> Any:
    """
    Convert a value tree to plain Python containers.

    Args:
        value: Scalar, Mapping or Sequence

    Returns:
        str for Scalar, dict for Mapping (order preserved), list for Sequence

    Raises:
        TypeError: If value is not one of the three node types
    """
    if isinstance(value, Scalar):
        return value.text
    elif isinstance(value, Mapping):
        return {key: to_python(item) for key, item in value.items()}
    elif isinstance(value, Sequence):
        return [to_python(item) for item in value]
    raise TypeError(f"Not a document value: {type(value).__name__}")
