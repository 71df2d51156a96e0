"""Domain value objects for side-by-side comparison.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from dataclasses import dataclass
from typing import Protocol


def _require_str(value: object, field_name: str) -> None:
    """Reject None and non-string values. Empty strings are allowed."""
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string, got {type(value).__name__}")


class Hasher(Protocol):
    """Anything that accepts bytes incrementally (e.g. hashlib objects)."""

    def update(self, data: bytes, /) -> None: ...


@dataclass(frozen=True)
class QueryOptions:
    """Options used with a query formatter to complete one search request.

    The query may be empty; num_results must be a positive integer.
    """

    query: str
    num_results: int

    def __post_init__(self) -> None:
        """Validate the query text and the result count.

        Raises:
            ValueError: If query is not a string or num_results is not positive.
        """
        _require_str(self.query, "Query")
        if isinstance(self.num_results, bool) or not isinstance(self.num_results, int):
            raise ValueError("Number of results must be an integer")
        if self.num_results <= 0:
            raise ValueError(
                f"Number of results must be positive, got {self.num_results}"
            )


@dataclass(frozen=True)
class QueryArguments:
    """Per-policy arguments of a query: collection, frontend, extra GET parameters.

    An empty collection or frontend means "use the appliance's default".
    """

    collection: str
    frontend: str
    extra_params: str

    def __post_init__(self) -> None:
        _require_str(self.collection, "Collection")
        _require_str(self.frontend, "Frontend")
        _require_str(self.extra_params, "Extra params")


@dataclass(frozen=True)
class HostQueryArgsPair:
    """A search appliance host paired with the query arguments sent to it."""

    host: str
    query_arguments: QueryArguments

    def __post_init__(self) -> None:
        _require_str(self.host, "Host")
        if not isinstance(self.query_arguments, QueryArguments):
            raise ValueError("Query arguments are required")


@dataclass(frozen=True)
class SearchResult:
    """A single normalized search result, independent of the backend.

    crowded is True when the backend grouped the result under another one
    (indented display).
    """

    url: str
    title: str
    snippet: str
    size: str
    crowded: bool

    def __post_init__(self) -> None:
        """Validate that every text field is present.

        Raises:
            ValueError: If url, title, snippet, or size is not a string.
        """
        _require_str(self.url, "URL")
        _require_str(self.title, "Title")
        _require_str(self.snippet, "Snippet")
        _require_str(self.size, "Size")

    def update_hasher(self, hasher: Hasher) -> None:
        """Feed this result's fingerprint into a running hash.

        Order is fixed (url, title, snippet, size, crowded) so a digest over
        a list of results is sensitive to both content and position.

        Args:
            hasher: Object with an update(bytes) method.
        """
        hasher.update(self.url.encode("utf-8"))
        hasher.update(self.title.encode("utf-8"))
        hasher.update(self.snippet.encode("utf-8"))
        hasher.update(self.size.encode("utf-8"))
        hasher.update(str(self.crowded).lower().encode("utf-8"))
