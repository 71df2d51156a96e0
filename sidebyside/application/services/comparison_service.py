"""Side-by-side retrieval of results from two scoring policy profiles.

Issues both profiles' queries in parallel under a single deadline, decides
whether the pair can be judged, and turns an assessor's verdict into a
JudgmentDetails record. Profiles may be swapped for presentation; records
are always produced in the original (un-swapped) order.
"""

from __future__ import annotations

import time
import zlib
from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import uuid4

import httpx

from sidebyside.application.interfaces.services import IResultsFingerprintService
from sidebyside.application.services.hash_service import ResultsFingerprintService
from sidebyside.domain.entities.judgment import JudgmentDetails
from sidebyside.domain.entities.profile import ScoringPolicyProfile
from sidebyside.domain.enums import Judgment
from sidebyside.domain.exceptions import (
    MalformedResponseException,
    SearchTransportException,
    ValidationException,
)
from sidebyside.domain.formatters import QueryFormatter
from sidebyside.domain.value_objects.core import QueryOptions, SearchResult
from sidebyside.shared.telemetry.logging import get_logger
from sidebyside.shared.utils.datetime import utc_now_ms

if TYPE_CHECKING:
    from sidebyside.core.config import Settings

logger = get_logger(__name__)

ResultList = tuple[SearchResult, ...]


def swap_judgment(judgment: Judgment | None) -> Judgment | None:
    """Swap FIRST_BETTER and SECOND_BETTER; EQUAL and None are unchanged."""
    if judgment is Judgment.FIRST_BETTER:
        return Judgment.SECOND_BETTER
    if judgment is Judgment.SECOND_BETTER:
        return Judgment.FIRST_BETTER
    return judgment


def should_swap(query: str, random_swapping: bool) -> bool:
    """Return whether the two profiles are shown in reverse order for a query.

    The decision is stable for a given query across processes, so an
    assessor sees the same layout each time the query comes up.
    """
    return random_swapping and (zlib.crc32(query.encode("utf-8")) & 0x1) == 0x1


def allow_judgment_for_profiles(
    first_profile: ScoringPolicyProfile,
    second_profile: ScoringPolicyProfile,
    query: str | None,
) -> bool:
    """A query can be judged if it exists and at least one profile is configured."""
    return query is not None and not (first_profile.is_empty and second_profile.is_empty)


def allow_judgment_for_results(
    first_results: Sequence[SearchResult] | None,
    second_results: Sequence[SearchResult] | None,
) -> bool:
    """A pair of result lists can be judged only if both were retrieved."""
    return first_results is not None and second_results is not None


@dataclass(frozen=True)
class SideBySideResults:
    """Results of one query from two profiles, in presentation order.

    A side is None when its results could not be retrieved (failure,
    deadline, or a formatter without result capture). The empty profile
    contributes an empty tuple.
    """

    query: str
    first_query_formatter: QueryFormatter
    second_query_formatter: QueryFormatter
    first_results: ResultList | None
    second_results: ResultList | None
    swapped: bool = False
    auto_judgment: Judgment | None = None
    uuid: str = field(default_factory=lambda: str(uuid4()))

    @property
    def judgeable(self) -> bool:
        return allow_judgment_for_results(self.first_results, self.second_results)

    def unswapped(
        self,
    ) -> tuple[QueryFormatter, QueryFormatter, ResultList | None, ResultList | None]:
        """Return formatters and results in the original profile order."""
        if self.swapped:
            return (
                self.second_query_formatter,
                self.first_query_formatter,
                self.second_results,
                self.first_results,
            )
        return (
            self.first_query_formatter,
            self.second_query_formatter,
            self.first_results,
            self.second_results,
        )


class ComparisonService:
    """Retrieves side-by-side results and records judgments on them.

    Transport and response failures are logged and reported as a missing
    side; they are never retried. InvariantViolationException propagates.

    Without an injected http_client the service owns a client whose timeout
    is retrieval_timeout_seconds, so a request abandoned at the deadline
    still ends; call close() (or use the service as a context manager) to
    release it.
    """

    def __init__(
        self,
        max_results: int = 10,
        retrieval_timeout_seconds: float = 10.0,
        random_swapping: bool = True,
        submitting_automatically: bool = False,
        fingerprint_service: IResultsFingerprintService | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        if max_results <= 0:
            raise ValidationException("max_results must be positive", field="max_results")
        if retrieval_timeout_seconds <= 0:
            raise ValidationException(
                "retrieval_timeout_seconds must be positive",
                field="retrieval_timeout_seconds",
            )
        self.max_results = max_results
        self.retrieval_timeout_seconds = retrieval_timeout_seconds
        self.random_swapping = random_swapping
        self.submitting_automatically = submitting_automatically
        self.fingerprint_service = fingerprint_service or ResultsFingerprintService()
        self.http_client = (
            http_client
            if http_client is not None
            else httpx.Client(timeout=retrieval_timeout_seconds)
        )
        self._owns_http_client = http_client is None

    def close(self) -> None:
        """Close the HTTP client if this service created it."""
        if self._owns_http_client:
            self.http_client.close()

    def __enter__(self) -> ComparisonService:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        http_client: httpx.Client | None = None,
    ) -> ComparisonService:
        """Create the service from application settings.

        Args:
            settings: Application settings; if None, uses get_settings().
            http_client: Optional client shared by all backend requests; when
                omitted, the service creates and owns one.
        """
        from sidebyside.core.config import get_settings

        s = settings or get_settings()
        return cls(
            max_results=s.max_results,
            retrieval_timeout_seconds=s.result_retrieval_timeout_seconds,
            random_swapping=s.random_swapping,
            submitting_automatically=s.submitting_automatically,
            fingerprint_service=ResultsFingerprintService.from_settings(s),
            http_client=http_client,
        )

    def fetch_side_by_side(
        self,
        query: str,
        first_profile: ScoringPolicyProfile,
        second_profile: ScoringPolicyProfile,
    ) -> SideBySideResults:
        """Retrieve both profiles' results for a query, in parallel.

        Both requests share one deadline of retrieval_timeout_seconds. A side
        that has not answered by then is abandoned and reported as None.

        Args:
            query: Query text issued to both profiles.
            first_profile: Profile shown first unless swapped.
            second_profile: Profile shown second unless swapped.

        Returns:
            Results in presentation order.
        """
        if not allow_judgment_for_profiles(first_profile, second_profile, query):
            return SideBySideResults(
                query=query,
                first_query_formatter=first_profile.query_formatter,
                second_query_formatter=second_profile.query_formatter,
                first_results=None,
                second_results=None,
            )

        swapped = should_swap(query, self.random_swapping)
        if swapped:
            first_profile, second_profile = second_profile, first_profile

        options = QueryOptions(query, self.max_results)
        executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="sidebyside")
        try:
            deadline = time.monotonic() + self.retrieval_timeout_seconds
            first_future = self._issue_query(executor, first_profile, options)
            second_future = self._issue_query(executor, second_profile, options)
            first_results = self._collect(first_future, first_profile, query, deadline)
            second_results = self._collect(second_future, second_profile, query, deadline)
        finally:
            # Do not wait on requests abandoned at the deadline.
            executor.shutdown(wait=False, cancel_futures=True)

        auto_judgment = None
        if (
            self.submitting_automatically
            and allow_judgment_for_results(first_results, second_results)
            and first_results == second_results
        ):
            auto_judgment = Judgment.EQUAL

        return SideBySideResults(
            query=query,
            first_query_formatter=first_profile.query_formatter,
            second_query_formatter=second_profile.query_formatter,
            first_results=first_results,
            second_results=second_results,
            swapped=swapped,
            auto_judgment=auto_judgment,
        )

    def results_id(self, side_by_side: SideBySideResults) -> str | None:
        """Identifier of the captured results, computed in un-swapped order."""
        _, _, first_results, second_results = side_by_side.unswapped()
        return self.fingerprint_service.results_id(first_results, second_results)

    def record_judgment(
        self,
        side_by_side: SideBySideResults,
        judgment: Judgment,
        timestamp: int | None = None,
    ) -> JudgmentDetails:
        """Build the judgment record for a verdict on presented results.

        The verdict refers to presentation order; it is swapped back along
        with the formatters when the profiles were swapped.

        Args:
            side_by_side: Results the assessor judged.
            judgment: Verdict in presentation order.
            timestamp: Epoch milliseconds; defaults to now.

        Returns:
            Judgment in original profile order, ready for storage.
        """
        first_formatter, second_formatter, _, _ = side_by_side.unswapped()
        if side_by_side.swapped:
            judgment = swap_judgment(judgment)
        return JudgmentDetails(
            query=side_by_side.query,
            judgment=judgment,
            timestamp=utc_now_ms() if timestamp is None else timestamp,
            first_query_formatter=first_formatter,
            second_query_formatter=second_formatter,
            results_id=self.results_id(side_by_side),
        )

    def _issue_query(
        self,
        executor: ThreadPoolExecutor,
        profile: ScoringPolicyProfile,
        options: QueryOptions,
    ) -> Future[list[SearchResult] | None] | None:
        if profile.is_empty:
            return None
        return executor.submit(
            profile.query_formatter.get_search_results, options, self.http_client
        )

    @staticmethod
    def _collect(
        future: Future[list[SearchResult] | None] | None,
        profile: ScoringPolicyProfile,
        query: str,
        deadline: float,
    ) -> ResultList | None:
        if future is None:
            # Empty profile shows no results.
            return ()
        remaining = max(0.0, deadline - time.monotonic())
        try:
            results = future.result(timeout=remaining)
        except FutureTimeoutError:
            logger.warning(
                "Results for profile %r timed out (query=%r)", profile.name, query
            )
            return None
        except (SearchTransportException, MalformedResponseException) as e:
            logger.error(
                "Results for profile %r failed (query=%r, error_code=%s): %s",
                profile.name,
                query,
                e.error_code,
                e.message,
            )
            return None
        if results is None:
            logger.debug("Profile %r does not capture results", profile.name)
            return None
        return tuple(results)
