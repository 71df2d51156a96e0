"""Formatter for Google Search Appliance (GSA) backends.

Builds GSA /search URLs from a host and query arguments, and captures
results by requesting raw XML output and parsing it with GsaResultParser.
"""

from dataclasses import dataclass

import httpx

from sidebyside.core.config import get_settings
from sidebyside.core.constants import (
    DEFAULT_COLLECTION,
    DEFAULT_FRONTEND,
    GSA_HTTP_SCHEME,
    GSA_PROXY_STYLESHEET,
    GSA_SEARCH_PATH,
    GSA_XML_OUTPUT,
    RESPONSE_ENCODING,
)
from sidebyside.domain.enums import FormatterType
from sidebyside.domain.exceptions import (
    InvariantViolationException,
    SearchTransportException,
)
from sidebyside.domain.formatters import QueryFormatter
from sidebyside.domain.value_objects.core import (
    HostQueryArgsPair,
    QueryOptions,
    SearchResult,
)
from sidebyside.infrastructure.external.search.gsa_parser import (
    GsaResultParser,
    parse_document,
)
from sidebyside.shared.telemetry.logging import get_logger
from sidebyside.shared.utils.url import url_encode

logger = get_logger(__name__)

ENCODED_DEFAULT_FRONTEND = url_encode(DEFAULT_FRONTEND)
ENCODED_DEFAULT_COLLECTION = url_encode(DEFAULT_COLLECTION)


@dataclass(frozen=True)
class GsaFormatter(QueryFormatter):
    """Formats queries to a GSA and extracts results from its XML output.

    Two formatters are equal when their host and query arguments are equal.
    """

    config: HostQueryArgsPair

    @property
    def formatter_type(self) -> FormatterType:
        return FormatterType.GSA

    @property
    def host_query_args_pair(self) -> HostQueryArgsPair:
        return self.config

    def build_query_url(self, query_options: QueryOptions, use_xml: bool) -> str:
        """Build the GSA search URL for a query.

        Parameters are emitted in a fixed order: q, client, site, num,
        output, then proxystylesheet (styled URLs only), then the extra
        parameters verbatim.

        Args:
            query_options: Query text and number of results.
            use_xml: True for raw XML (result capture), False for the
                styled page an assessor views.

        Returns:
            The URL as a string.
        """
        host = self.config.host
        query_args = self.config.query_arguments
        parts = []
        if not host.startswith(GSA_HTTP_SCHEME):
            parts.append(GSA_HTTP_SCHEME)
        parts.append(host)
        parts.append(GSA_SEARCH_PATH)
        parts.append("?q=" + url_encode(query_options.query))

        frontend = query_args.frontend
        collection = query_args.collection
        parts.append(
            "&client="
            + (url_encode(frontend) if frontend else ENCODED_DEFAULT_FRONTEND)
        )
        parts.append(
            "&site="
            + (url_encode(collection) if collection else ENCODED_DEFAULT_COLLECTION)
        )
        parts.append(f"&num={query_options.num_results}")
        parts.append("&output=" + GSA_XML_OUTPUT)
        if not use_xml:
            parts.append("&proxystylesheet=" + GSA_PROXY_STYLESHEET)

        extra_params = query_args.extra_params
        if extra_params:
            if not extra_params.startswith("&"):
                parts.append("&")
            parts.append(extra_params)
        return "".join(parts)

    def create_query_uri(self, query_options: QueryOptions) -> httpx.URL:
        return self._parse_uri(self.build_query_url(query_options, use_xml=False))

    def get_search_results(
        self,
        query_options: QueryOptions,
        http_client: httpx.Client | None = None,
    ) -> list[SearchResult]:
        """Fetch and parse the results of a query.

        Blocks until the whole response is read. Nothing is retried.

        Args:
            query_options: Query text and number of results.
            http_client: Optional client to send the request with; when
                omitted, a client is created using
                settings.gsa_request_timeout_seconds.

        Returns:
            Results in document order.

        Raises:
            SearchTransportException: Request, HTTP status, or decoding failed.
            MalformedResponseException: Response is not a usable GSA document.
        """
        url = self.build_query_url(query_options, use_xml=True)
        self._parse_uri(url)
        logger.debug("Requesting GSA results: %s", url)
        xml_text = self._fetch(url, http_client)
        results = GsaResultParser.build_result_list(parse_document(xml_text))
        logger.debug("Parsed %d GSA results from %s", len(results), url)
        return results

    @staticmethod
    def _parse_uri(uri: str) -> httpx.URL:
        try:
            return httpx.URL(uri)
        except httpx.InvalidURL as e:
            raise InvariantViolationException(
                "GSA formatter built an unparseable URI", uri
            ) from e

    @staticmethod
    def _fetch(url: str, http_client: httpx.Client | None) -> str:
        try:
            if http_client is None:
                timeout = get_settings().gsa_request_timeout_seconds
                with httpx.Client(timeout=timeout) as client:
                    response = client.get(url, follow_redirects=True)
            else:
                response = http_client.get(url, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise SearchTransportException(
                url, f"HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise SearchTransportException(url, str(e) or type(e).__name__) from e
        try:
            return response.content.decode(RESPONSE_ENCODING)
        except UnicodeDecodeError as e:
            raise SearchTransportException(
                url, f"response is not valid {RESPONSE_ENCODING}"
            ) from e
