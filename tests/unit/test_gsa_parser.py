"""Tests for GSA XML result parsing."""

import pytest

from sidebyside.domain.exceptions import MalformedResponseException
from sidebyside.domain.value_objects.core import SearchResult
from sidebyside.infrastructure.external.search import GsaResultParser, parse_document
from sidebyside.infrastructure.external.search.gsa_parser import is_uri_reference


def _results(xml_text: str) -> list[SearchResult]:
    return GsaResultParser.build_result_list(parse_document(xml_text))


def _single(result_xml: str) -> str:
    return f"<GSP><RES>{result_xml}</RES></GSP>"


class TestBuildResultList:
    """Results are read in document order with defaults for missing elements."""

    def test_sample_document(self, sample_gsa_xml: str) -> None:
        results = _results(sample_gsa_xml)
        assert results == [
            SearchResult(
                url="http://example.com/cats",
                title="All about <b>cats</b>",
                snippet="Cats are small carnivorous mammals.",
                size="12k",
                crowded=False,
            ),
            SearchResult(
                url="http://example.com/cats/more",
                title="http://example.com/cats/more",
                snippet="",
                size="Size unknown",
                crowded=True,
            ),
            SearchResult(
                url="http://example.org/felines",
                title="Felines",
                snippet="",
                size="Size unknown",
                crowded=False,
            ),
        ]

    def test_no_results_container(self, no_results_gsa_xml: str) -> None:
        assert _results(no_results_gsa_xml) == []

    def test_empty_results_container(self) -> None:
        assert _results("<GSP><RES></RES></GSP>") == []

    def test_nested_markup_in_title_is_flattened(self) -> None:
        results = _results(_single("<R><U>http://a/</U><T>one <b>two</b> three</T></R>"))
        assert results[0].title == "one two three"


class TestBuildResultErrors:
    """A result without a usable URL or with a bad indent fails the document."""

    def test_missing_url(self) -> None:
        xml_text = _single("<R><U>http://a/</U></R><R><T>no url</T></R>")
        with pytest.raises(MalformedResponseException, match="result has no URL") as exc_info:
            _results(xml_text)
        assert exc_info.value.details["position"] == 2

    def test_invalid_url(self) -> None:
        with pytest.raises(MalformedResponseException, match="not a valid URI"):
            _results(_single("<R><U>http://example.com:notaport/</U></R>"))

    @pytest.mark.parametrize(
        "url",
        [
            "not a url",
            "http://example.com/a b",
            "http://exa mple.com/",
            "%zz",
            "http://example.com/100%",
            "http://example.com/<tag>",
            "http://example.com/a|b",
            "1http://example.com/",
        ],
    )
    def test_url_outside_uri_syntax(self, url: str) -> None:
        escaped = url.replace("<", "&lt;").replace(">", "&gt;")
        with pytest.raises(MalformedResponseException, match="not a valid URI") as exc_info:
            _results(_single(f"<R><U>{escaped}</U></R>"))
        assert exc_info.value.details["url"] == url

    @pytest.mark.parametrize("indent", ["2_0", " 2", "2 ", "", "1.5", "٢"])
    def test_indent_must_be_plain_integer(self, indent: str) -> None:
        with pytest.raises(MalformedResponseException, match="indent"):
            _results(_single(f'<R L="{indent}"><U>http://a/</U></R>'))

    def test_non_numeric_indent(self) -> None:
        with pytest.raises(MalformedResponseException, match="indent") as exc_info:
            _results(_single('<R L="deep"><U>http://a/</U></R>'))
        assert exc_info.value.details["indent"] == "deep"

    def test_malformed_xml(self) -> None:
        with pytest.raises(MalformedResponseException, match="invalid XML"):
            parse_document("<GSP><RES>")

    def test_empty_text(self) -> None:
        with pytest.raises(MalformedResponseException):
            parse_document("")


def test_build_result_indent_one_is_not_crowded() -> None:
    root = parse_document(_single('<R L="1"><U>http://a/</U></R>'))
    result = GsaResultParser.build_result(root.find("RES").find("R"))
    assert result.crowded is False


@pytest.mark.parametrize(
    "url",
    [
        "http://example.com/a%20b?q=x#frag",
        "/relative/path",
        "page.html",
        "mailto:someone@example.com",
        "",
    ],
)
def test_uri_references_accepted(url: str) -> None:
    assert is_uri_reference(url) is True


def test_signed_indent_accepted() -> None:
    results = _results(
        _single('<R L="+2"><U>http://a/</U></R><R L="-1"><U>http://b/</U></R>')
    )
    assert [r.crowded for r in results] == [True, False]
