"""Shared utilities: datetime and URL helpers."""

from sidebyside.shared.utils.datetime import (
    to_epoch_ms,
    utc_now,
    utc_now_ms,
)
from sidebyside.shared.utils.url import trim_url, url_decode, url_encode

__all__ = [
    "utc_now",
    "utc_now_ms",
    "to_epoch_ms",
    "trim_url",
    "url_decode",
    "url_encode",
]
