"""Service interfaces (ports) for the application layer."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from sidebyside.domain.value_objects.core import SearchResult


class IResultsFingerprintService(Protocol):
    """Protocol for fingerprinting captured result lists."""

    def fingerprint(self, results: Sequence[SearchResult]) -> str:
        """Return an order-sensitive hex digest over the results."""

    def results_id(
        self,
        first_results: Sequence[SearchResult] | None,
        second_results: Sequence[SearchResult] | None,
    ) -> str | None:
        """Return the identifier of a side-by-side pair of result lists, or None."""
