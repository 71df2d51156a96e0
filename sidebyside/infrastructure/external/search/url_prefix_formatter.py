"""Formatter that appends the encoded query to a fixed URL prefix."""

from dataclasses import dataclass

import httpx

from sidebyside.domain.enums import FormatterType
from sidebyside.domain.exceptions import InvariantViolationException
from sidebyside.domain.formatters import QueryFormatter
from sidebyside.domain.value_objects.core import QueryOptions, SearchResult
from sidebyside.shared.utils.url import url_encode


@dataclass(frozen=True)
class UrlPrefixFormatter(QueryFormatter):
    """Builds query URIs as prefix + encoded query.

    Such backends are not assumed to return structured results, so
    get_search_results is unsupported and returns None.
    """

    prefix: str

    @property
    def formatter_type(self) -> FormatterType:
        return FormatterType.URL_PREFIX

    @property
    def url_prefix(self) -> str:
        return self.prefix

    def create_query_uri(self, query_options: QueryOptions) -> httpx.URL:
        uri = self.prefix + url_encode(query_options.query)
        try:
            return httpx.URL(uri)
        except httpx.InvalidURL as e:
            raise InvariantViolationException(
                "URL prefix formatter built an unparseable URI", uri
            ) from e

    def get_search_results(
        self,
        query_options: QueryOptions,
        http_client: httpx.Client | None = None,
    ) -> list[SearchResult] | None:
        return None
