"""Domain entities: scoring policy profiles and judgments."""

from sidebyside.domain.entities.judgment import JudgmentDetails
from sidebyside.domain.entities.profile import EMPTY_PROFILE, ScoringPolicyProfile

__all__ = [
    "EMPTY_PROFILE",
    "JudgmentDetails",
    "ScoringPolicyProfile",
]
