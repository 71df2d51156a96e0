"""URL helpers: form encoding of query values and display trimming."""

from urllib.parse import quote_plus, unquote_plus

from sidebyside.core.constants import MAX_DISPLAY_URL_LENGTH

_URL_ENCODING = "utf-8"


def url_encode(value: str) -> str:
    """Form-encode a value for use in a query string (UTF-8, space as '+')."""
    return quote_plus(value, encoding=_URL_ENCODING)


def url_decode(value: str) -> str:
    """Inverse of url_encode."""
    return unquote_plus(value, encoding=_URL_ENCODING)


def trim_url(url: str, max_length: int = MAX_DISPLAY_URL_LENGTH) -> str:
    """Trim a URL so that it fits a side-by-side column.

    URLs longer than max_length keep their first max_length - 3 characters
    followed by an ellipsis.

    Args:
        url: URL text to display.
        max_length: Longest string returned; must be greater than 3.

    Returns:
        The URL unchanged, or its trimmed form.
    """
    if max_length <= 3:
        raise ValueError(f"max_length must be greater than 3, got {max_length}")
    if len(url) > max_length:
        return url[: max_length - 3] + "..."
    return url
