"""Search backends: URL-prefix and GSA query formatters.

Together with EmptyFormatter (sidebyside.domain.formatters) these form
the closed set of QueryFormatter variants. Build them through
QueryFormatterFactory.
"""

from sidebyside.infrastructure.external.search.factory import QueryFormatterFactory
from sidebyside.infrastructure.external.search.gsa_formatter import GsaFormatter
from sidebyside.infrastructure.external.search.gsa_parser import (
    GsaResultParser,
    parse_document,
)
from sidebyside.infrastructure.external.search.url_prefix_formatter import (
    UrlPrefixFormatter,
)

__all__ = [
    "GsaFormatter",
    "GsaResultParser",
    "QueryFormatterFactory",
    "UrlPrefixFormatter",
    "parse_document",
]
