"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure. Concrete backend formatters live in
sidebyside.infrastructure.external.search.
"""

from sidebyside.domain.entities import (
    EMPTY_PROFILE,
    JudgmentDetails,
    ScoringPolicyProfile,
)
from sidebyside.domain.enums import FormatterType, Judgment
from sidebyside.domain.exceptions import (
    InvariantViolationException,
    MalformedResponseException,
    SearchTransportException,
    SideBySideException,
    ValidationException,
)
from sidebyside.domain.formatters import EMPTY_FORMATTER, EmptyFormatter, QueryFormatter
from sidebyside.domain.value_objects import (
    Hasher,
    HostQueryArgsPair,
    QueryArguments,
    QueryOptions,
    SearchResult,
)

__all__ = [
    # Entities
    "EMPTY_PROFILE",
    "JudgmentDetails",
    "ScoringPolicyProfile",
    # Enums
    "FormatterType",
    "Judgment",
    # Exceptions
    "InvariantViolationException",
    "MalformedResponseException",
    "SearchTransportException",
    "SideBySideException",
    "ValidationException",
    # Formatters
    "EMPTY_FORMATTER",
    "EmptyFormatter",
    "QueryFormatter",
    # Value objects
    "Hasher",
    "HostQueryArgsPair",
    "QueryArguments",
    "QueryOptions",
    "SearchResult",
]
