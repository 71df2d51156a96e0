"""Domain enumerations.

Enums represent fixed sets of domain values (formatter kinds, verdicts).
"""

from enum import Enum


class FormatterType(str, Enum):
    """Kind of query formatter.

    The set is closed: every formatter is exactly one of these.
    """

    EMPTY = "empty"
    URL_PREFIX = "url_prefix"
    GSA = "gsa"

    @classmethod
    def values(cls) -> list[str]:
        """Return all formatter type values as strings."""
        return [kind.value for kind in cls]


class Judgment(str, Enum):
    """Verdict issued by an assessor comparing two result sets."""

    FIRST_BETTER = "first_better"
    EQUAL = "equal"
    SECOND_BETTER = "second_better"

    @classmethod
    def values(cls) -> list[str]:
        """Return all judgment values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [judgment.value for judgment in cls]
