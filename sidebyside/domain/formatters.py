"""Query formatter abstraction and the empty placeholder formatter.

The set of formatters is closed: EmptyFormatter here, UrlPrefixFormatter
and GsaFormatter in infrastructure. Callers dispatch on formatter_type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from sidebyside.domain.enums import FormatterType

if TYPE_CHECKING:
    import httpx

    from sidebyside.domain.value_objects.core import (
        HostQueryArgsPair,
        QueryOptions,
        SearchResult,
    )


class QueryFormatter(ABC):
    """Formats queries to one search backend and optionally extracts its results."""

    @property
    @abstractmethod
    def formatter_type(self) -> FormatterType:
        """Kind of this formatter."""
        ...

    @property
    def url_prefix(self) -> str | None:
        """URL prefix for URL_PREFIX formatters, None otherwise."""
        return None

    @property
    def host_query_args_pair(self) -> HostQueryArgsPair | None:
        """Host and query arguments for GSA formatters, None otherwise."""
        return None

    @abstractmethod
    def create_query_uri(self, query_options: QueryOptions) -> httpx.URL | None:
        """Return a URI whose response can be shown to an assessor (e.g. in a frame)."""
        ...

    @abstractmethod
    def get_search_results(
        self,
        query_options: QueryOptions,
        http_client: httpx.Client | None = None,
    ) -> list[SearchResult] | None:
        """Return the parsed result list, or None if this formatter cannot produce one."""
        ...


class EmptyFormatter(QueryFormatter):
    """Formatter of the empty profile: no backend configured.

    Every operation yields None. Compared by identity; use EMPTY_FORMATTER.
    """

    @property
    def formatter_type(self) -> FormatterType:
        return FormatterType.EMPTY

    def create_query_uri(self, query_options: QueryOptions) -> httpx.URL | None:
        return None

    def get_search_results(
        self,
        query_options: QueryOptions,
        http_client: httpx.Client | None = None,
    ) -> list[SearchResult] | None:
        return None

    def __repr__(self) -> str:
        return "EmptyFormatter()"


EMPTY_FORMATTER = EmptyFormatter()
