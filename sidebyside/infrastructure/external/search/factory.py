"""Query formatter factory: creates URL-prefix or GSA formatters."""

from sidebyside.domain.exceptions import ValidationException
from sidebyside.domain.formatters import QueryFormatter
from sidebyside.domain.value_objects.core import HostQueryArgsPair, QueryArguments
from sidebyside.infrastructure.external.search.gsa_formatter import GsaFormatter
from sidebyside.infrastructure.external.search.url_prefix_formatter import (
    UrlPrefixFormatter,
)


class QueryFormatterFactory:
    """Factory for the non-empty query formatter variants."""

    @staticmethod
    def create_url_prefix_formatter(url_prefix: str) -> QueryFormatter:
        """Create a formatter that generates query URLs from a URL prefix.

        Raises:
            ValidationException: url_prefix is not a string.
        """
        if not isinstance(url_prefix, str):
            raise ValidationException("URL prefix is required", field="url_prefix")
        return UrlPrefixFormatter(url_prefix)

    @staticmethod
    def create_gsa_formatter(host_query_args_pair: HostQueryArgsPair) -> QueryFormatter:
        """Create a formatter that generates query URLs from a GSA description.

        Raises:
            ValidationException: host_query_args_pair is missing.
        """
        if not isinstance(host_query_args_pair, HostQueryArgsPair):
            raise ValidationException(
                "Host and query arguments are required",
                field="host_query_args_pair",
            )
        return GsaFormatter(host_query_args_pair)

    @staticmethod
    def create_gsa(
        host: str,
        collection: str = "",
        frontend: str = "",
        extra_params: str = "",
    ) -> QueryFormatter:
        """Create a GSA formatter from its parts; empty values use appliance defaults."""
        return QueryFormatterFactory.create_gsa_formatter(
            HostQueryArgsPair(host, QueryArguments(collection, frontend, extra_params))
        )
