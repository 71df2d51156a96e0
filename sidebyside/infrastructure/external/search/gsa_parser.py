"""Extraction of search results from GSA XML responses.

The parser is tolerant of missing optional elements (title, snippet,
cached size, indent) and strict about required ones: a result without a
usable URL, or with a non-numeric indent, fails the whole document.
"""

import re

import httpx
from lxml import etree

from sidebyside.core.constants import (
    GSA_CACHE,
    GSA_HAS,
    GSA_INDENT,
    GSA_RESULT,
    GSA_RESULTS,
    GSA_SIZE,
    GSA_SNIPPET,
    GSA_TITLE,
    GSA_URL,
    RESPONSE_ENCODING,
    SIZE_UNKNOWN,
)
from sidebyside.domain.exceptions import MalformedResponseException
from sidebyside.domain.value_objects.core import SearchResult


def parse_document(xml_text: str) -> etree._Element:
    """Parse GSA response text into its root element.

    Entities are not resolved and no network access is allowed.

    Raises:
        MalformedResponseException: If the text is not well-formed XML.
    """
    parser = etree.XMLParser(
        encoding=RESPONSE_ENCODING,
        resolve_entities=False,
        no_network=True,
    )
    try:
        root = etree.fromstring(xml_text.encode(RESPONSE_ENCODING), parser)
    except etree.XMLSyntaxError as e:
        raise MalformedResponseException(f"invalid XML ({e})") from e
    if root is None:
        raise MalformedResponseException("empty document")
    return root


# RFC 3986 characters: unreserved, reserved, and %HH escapes.
_URI_TEXT = re.compile(r"(?:[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=]|%[0-9A-Fa-f]{2})*")
_URI_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_INTEGER = re.compile(r"[+-]?[0-9]+")


def is_uri_reference(text: str) -> bool:
    """Return whether text is an absolute URI or a relative reference (RFC 3986).

    Whitespace, characters such as <>"{}|\\^ and stray '%' are rejected. A
    colon in the first path segment must introduce a valid scheme.
    """
    if not _URI_TEXT.fullmatch(text):
        return False
    first_segment = re.split(r"[/?#]", text, maxsplit=1)[0]
    if ":" in first_segment:
        return bool(_URI_SCHEME.fullmatch(first_segment.split(":", 1)[0]))
    return True


def _element_text(element: etree._Element) -> str:
    # String value of the element: all descendant text, markup removed.
    return str(element.xpath("string()"))


class GsaResultParser:
    """Converts GSA result elements into SearchResult instances."""

    @staticmethod
    def build_result_list(root: etree._Element) -> list[SearchResult]:
        """Convert every result element of the document, in document order.

        Args:
            root: Root element of a GSA XML response.

        Returns:
            Search results; empty if the document has no results container.
        """
        results_element = root.find(GSA_RESULTS)
        if results_element is None:
            return []
        return [
            GsaResultParser.build_result(result_element, position)
            for position, result_element in enumerate(
                results_element.findall(GSA_RESULT), start=1
            )
        ]

    @staticmethod
    def build_result(element: etree._Element, position: int = 1) -> SearchResult:
        """Convert a single result element.

        Args:
            element: A result element.
            position: 1-based position of the element, reported in errors.

        Raises:
            MalformedResponseException: If the URL is missing or unparseable,
                or the indent attribute is not an integer.
        """
        url_element = element.find(GSA_URL)
        if url_element is None:
            raise MalformedResponseException("result has no URL", position=position)
        url = _element_text(url_element)
        if not is_uri_reference(url):
            raise MalformedResponseException(
                "result URL is not a valid URI", position=position, url=url
            )
        try:
            httpx.URL(url)
        except httpx.InvalidURL as e:
            raise MalformedResponseException(
                f"result URL is not a valid URI ({e})", position=position, url=url
            ) from e

        title_element = element.find(GSA_TITLE)
        title = _element_text(title_element) if title_element is not None else url

        snippet_element = element.find(GSA_SNIPPET)
        snippet = _element_text(snippet_element) if snippet_element is not None else ""

        size = None
        has_element = element.find(GSA_HAS)
        if has_element is not None:
            cache_element = has_element.find(GSA_CACHE)
            if cache_element is not None:
                size = cache_element.get(GSA_SIZE)
        if size is None:
            size = SIZE_UNKNOWN

        crowded = False
        indent = element.get(GSA_INDENT)
        if indent is not None:
            if not _INTEGER.fullmatch(indent):
                raise MalformedResponseException(
                    "result indent is not an integer",
                    position=position,
                    indent=indent,
                )
            crowded = int(indent) > 1

        return SearchResult(
            url=url,
            title=title,
            snippet=snippet,
            size=size,
            crowded=crowded,
        )
