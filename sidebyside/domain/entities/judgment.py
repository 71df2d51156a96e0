"""Judgment domain entity.

Represents the outcome of one side-by-side comparison, independent of
persistence. Judgments are immutable once issued.
"""

from dataclasses import dataclass

from sidebyside.domain.enums import Judgment
from sidebyside.domain.exceptions import ValidationException
from sidebyside.domain.formatters import QueryFormatter


@dataclass(frozen=True)
class JudgmentDetails:
    """Immutable record of a judgment issued by an assessor.

    Holds the exact formatters compared so the judgment stays meaningful
    after profiles are renamed or reconfigured. results_id references the
    captured result lists in external storage, or is None when none were
    captured.
    """

    query: str
    judgment: Judgment
    timestamp: int
    first_query_formatter: QueryFormatter
    second_query_formatter: QueryFormatter
    results_id: str | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate required fields. Raises ValidationException if invalid."""
        if not isinstance(self.query, str):
            raise ValidationException("Judgment query is required", field="query")
        if not isinstance(self.judgment, Judgment):
            raise ValidationException("Judgment verdict is required", field="judgment")
        if isinstance(self.timestamp, bool) or not isinstance(self.timestamp, int):
            raise ValidationException(
                "Judgment timestamp (epoch milliseconds) is required",
                field="timestamp",
            )
        if not isinstance(self.first_query_formatter, QueryFormatter):
            raise ValidationException(
                "First query formatter is required", field="first_query_formatter"
            )
        if not isinstance(self.second_query_formatter, QueryFormatter):
            raise ValidationException(
                "Second query formatter is required", field="second_query_formatter"
            )
