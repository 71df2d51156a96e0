"""Domain value objects and shared value types."""

from sidebyside.domain.value_objects.core import (
    Hasher,
    HostQueryArgsPair,
    QueryArguments,
    QueryOptions,
    SearchResult,
)

__all__ = [
    "Hasher",
    "HostQueryArgsPair",
    "QueryArguments",
    "QueryOptions",
    "SearchResult",
]
