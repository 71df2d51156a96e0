"""Scoring policy profile domain entity.

A named query formatter: the unit an assessor or administrator picks
when setting up a comparison.
"""

from dataclasses import dataclass

from sidebyside.domain.enums import FormatterType
from sidebyside.domain.exceptions import ValidationException
from sidebyside.domain.formatters import EMPTY_FORMATTER, QueryFormatter


@dataclass(frozen=True)
class ScoringPolicyProfile:
    """Immutable pairing of a profile name with a query formatter.

    A constructed profile never wraps the empty formatter; the only profile
    that does is EMPTY_PROFILE.
    """

    name: str
    query_formatter: QueryFormatter

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate profile rules. Raises ValidationException if invalid."""
        if not isinstance(self.name, str):
            raise ValidationException("Profile name is required", field="name")
        if not isinstance(self.query_formatter, QueryFormatter):
            raise ValidationException(
                "Profile query formatter is required", field="query_formatter"
            )
        if self.query_formatter.formatter_type is FormatterType.EMPTY:
            raise ValidationException(
                "Profile cannot use the empty query formatter",
                field="query_formatter",
            )

    @property
    def is_empty(self) -> bool:
        """Return whether this is the EMPTY_PROFILE placeholder."""
        return self.query_formatter.formatter_type is FormatterType.EMPTY


def _blank_profile() -> ScoringPolicyProfile:
    # Bypasses validation: the only profile allowed to hold the empty formatter.
    profile = object.__new__(ScoringPolicyProfile)
    object.__setattr__(profile, "name", None)
    object.__setattr__(profile, "query_formatter", EMPTY_FORMATTER)
    return profile


EMPTY_PROFILE = _blank_profile()
