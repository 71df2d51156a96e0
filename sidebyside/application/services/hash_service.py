"""Fingerprints of captured result lists (streaming digest over SearchResult fields)."""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from sidebyside.domain.exceptions import ValidationException
from sidebyside.domain.value_objects.core import SearchResult

if TYPE_CHECKING:
    from sidebyside.core.config import Settings


class HashAlgorithm(ABC):
    """Abstract digest algorithm (OCP)."""

    name: str

    @abstractmethod
    def new(self) -> Any:
        """Return a fresh hasher with update(bytes) and hexdigest()."""
        ...

    @property
    def hex_length(self) -> int:
        """Number of hex characters in one digest."""
        return self.new().digest_size * 2


class SHA1Algorithm(HashAlgorithm):
    """SHA-1 implementation."""

    name = "sha1"

    def new(self) -> Any:
        return hashlib.sha1()


class SHA256Algorithm(HashAlgorithm):
    """SHA-256 implementation."""

    name = "sha256"

    def new(self) -> Any:
        return hashlib.sha256()


_ALGORITHMS: dict[str, type[HashAlgorithm]] = {
    SHA1Algorithm.name: SHA1Algorithm,
    SHA256Algorithm.name: SHA256Algorithm,
}


class ResultsFingerprintService:
    """Single source of truth for result list fingerprints (IResultsFingerprintService).

    Two lists have the same fingerprint only if they hold equal results in
    the same order.
    """

    def __init__(self, algorithm: HashAlgorithm | None = None) -> None:
        self.algorithm = algorithm or SHA1Algorithm()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ResultsFingerprintService:
        """Create the service with settings.results_hash_algorithm.

        Args:
            settings: Application settings; if None, uses get_settings().
        """
        from sidebyside.core.config import get_settings

        s = settings or get_settings()
        return cls(_ALGORITHMS[s.results_hash_algorithm]())

    @property
    def fingerprint_length(self) -> int:
        """Number of hex characters in one fingerprint."""
        return self.algorithm.hex_length

    def fingerprint(self, results: Sequence[SearchResult]) -> str:
        """Compute the fingerprint of a result list."""
        hasher = self.algorithm.new()
        for result in results:
            result.update_hasher(hasher)
        return hasher.hexdigest()

    def results_id(
        self,
        first_results: Sequence[SearchResult] | None,
        second_results: Sequence[SearchResult] | None,
    ) -> str | None:
        """Identifier of a side-by-side pair: both fingerprints concatenated.

        Returns None when either list was not captured.
        """
        if first_results is None or second_results is None:
            return None
        return self.fingerprint(first_results) + self.fingerprint(second_results)

    def split_results_id(self, results_id: str) -> tuple[str, str]:
        """Split a side-by-side identifier into its two fingerprints.

        Raises:
            ValidationException: If the identifier has the wrong length.
        """
        size = self.fingerprint_length
        if len(results_id) != 2 * size:
            raise ValidationException(
                f"Results identifier must be {2 * size} characters, got {len(results_id)}",
                field="results_id",
            )
        return results_id[:size], results_id[size:]
