"""Application services: result fingerprints and side-by-side comparison."""

from sidebyside.application.services.comparison_service import (
    ComparisonService,
    SideBySideResults,
    allow_judgment_for_profiles,
    allow_judgment_for_results,
    should_swap,
    swap_judgment,
)
from sidebyside.application.services.hash_service import (
    HashAlgorithm,
    ResultsFingerprintService,
    SHA1Algorithm,
    SHA256Algorithm,
)

__all__ = [
    "ComparisonService",
    "SideBySideResults",
    "allow_judgment_for_profiles",
    "allow_judgment_for_results",
    "should_swap",
    "swap_judgment",
    "HashAlgorithm",
    "ResultsFingerprintService",
    "SHA1Algorithm",
    "SHA256Algorithm",
]
