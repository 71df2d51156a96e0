"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Ranges are validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_HASH_ALGORITHMS = ("sha1", "sha256")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Every field has a default, so an empty environment yields a usable
    configuration.
    """

    # App
    app_name: str = "sidebyside"
    app_version: str = "1.0.0"
    debug: bool = False

    # Result retrieval
    max_results: int = 10
    result_retrieval_timeout_seconds: float = 10.0
    # None = the GSA formatter imposes no timeout of its own; callers bound latency.
    gsa_request_timeout_seconds: float | None = None

    # Judging
    random_swapping: bool = True
    submitting_automatically: bool = False

    # Fingerprinting of captured result lists
    results_hash_algorithm: str = "sha1"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_ranges(self) -> "Settings":
        """Validate numeric ranges and the hash algorithm name."""
        if self.max_results <= 0:
            raise ValueError(f"MAX_RESULTS must be positive, got: {self.max_results}")
        if self.result_retrieval_timeout_seconds <= 0:
            raise ValueError(
                "RESULT_RETRIEVAL_TIMEOUT_SECONDS must be positive, "
                f"got: {self.result_retrieval_timeout_seconds}"
            )
        if (
            self.gsa_request_timeout_seconds is not None
            and self.gsa_request_timeout_seconds <= 0
        ):
            raise ValueError(
                "GSA_REQUEST_TIMEOUT_SECONDS must be positive when set, "
                f"got: {self.gsa_request_timeout_seconds}"
            )
        algorithm = self.results_hash_algorithm.lower()
        if algorithm not in SUPPORTED_HASH_ALGORITHMS:
            raise ValueError(
                f"results_hash_algorithm must be one of {SUPPORTED_HASH_ALGORITHMS}, "
                f"got: {self.results_hash_algorithm!r}"
            )
        self.results_hash_algorithm = algorithm
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
