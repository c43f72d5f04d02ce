"""Tiered term matching: exact, substring and fuzzy edit-distance search."""

from functools import partial
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

from rapidfuzz import fuzz, process

from .normalizer import normalize

TIER_ALL = "all"
TIER_EXACT = "exact"
TIER_SUBSTRING = "substring"
TIER_FUZZY = "fuzzy"
TIER_NONE = "none"

SUGGESTION_LIMIT = 8


class TermMatch(NamedTuple):
    """A matched entry and, for fuzzy matches, its edit distance."""

    entry: object
    distance: Optional[int] = None


Strategy = Callable[[str, Sequence], List[TermMatch]]


def levenshtein(a: str, b: str) -> int:
    """
    Compute the edit distance between the canonical forms of two strings.

    Uses the classic dynamic-programming table with unit cost for
    insertion, deletion and substitution.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character edits turning ``a`` into ``b``
    """
    a = normalize(a)
    b = normalize(b)
    m, n = len(a), len(b)
    if m == 0:
        return n
    if n == 0:
        return m

    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,
                dp[i][j - 1] + 1,
                dp[i - 1][j - 1] + cost,
            )

    return dp[m][n]


def exact_tier(query: str, entries: Sequence) -> List[TermMatch]:
    """Entries whose canonical term equals the canonical query."""
    return [TermMatch(entry) for entry in entries if normalize(entry.term) == query]


def substring_tier(query: str, entries: Sequence) -> List[TermMatch]:
    """Entries whose canonical term contains the canonical query."""
    return [TermMatch(entry) for entry in entries if query in normalize(entry.term)]


def fuzzy_tier(query: str, entries: Sequence, tolerance: int = 2) -> List[TermMatch]:
    """Entries within ``tolerance`` edits of the query, closest first."""
    matches = []
    for entry in entries:
        distance = levenshtein(query, entry.term)
        if distance <= tolerance:
            matches.append(TermMatch(entry, distance))

    # sort() is stable, equal distances keep their input order
    matches.sort(key=lambda match: match.distance)
    return matches


def build_strategies(fuzzy_enabled: bool, fuzzy_tolerance: int) -> List[Tuple[str, Strategy]]:
    """Ordered list of (tier name, strategy) pairs evaluated by ``search_with_details``."""
    strategies: List[Tuple[str, Strategy]] = [
        (TIER_EXACT, exact_tier),
        (TIER_SUBSTRING, substring_tier),
    ]
    if fuzzy_enabled:
        strategies.append((TIER_FUZZY, partial(fuzzy_tier, tolerance=fuzzy_tolerance)))
    return strategies


def search_with_details(
    query: str,
    entries: Sequence,
    fuzzy_enabled: bool = True,
    fuzzy_tolerance: int = 2
) -> Tuple[str, List[TermMatch]]:
    """
    Run the tier strategies in order and stop at the first non-empty result.

    Args:
        query: Raw search query
        entries: Term entries, already sorted by the caller
        fuzzy_enabled: Whether the fuzzy tier takes part
        fuzzy_tolerance: Maximum edit distance accepted by the fuzzy tier

    Returns:
        Tuple of (tier name, matches)
    """
    trimmed = (query or "").strip()
    if not trimmed:
        return TIER_ALL, [TermMatch(entry) for entry in entries]

    canonical_query = normalize(trimmed)
    for tier, strategy in build_strategies(fuzzy_enabled, fuzzy_tolerance):
        matches = strategy(canonical_query, entries)
        if matches:
            return tier, matches

    return TIER_NONE, []


def search(
    query: str,
    entries: Sequence,
    fuzzy_enabled: bool = True,
    fuzzy_tolerance: int = 2
) -> List:
    """Search ``entries`` for ``query`` and return the matching entries."""
    _, matches = search_with_details(query, entries, fuzzy_enabled, fuzzy_tolerance)
    return [match.entry for match in matches]


def suggest(query: str, entries: Sequence, limit: int = SUGGESTION_LIMIT) -> List:
    """
    Autocomplete suggestions for a partially typed query.

    Prefix matches come first, followed by entries that only contain the
    query further inside; both groups keep their input order.
    """
    canonical_query = normalize((query or "").strip())
    if not canonical_query:
        return []

    prefix = []
    interior = []
    for entry in entries:
        term = normalize(entry.term)
        if term.startswith(canonical_query):
            prefix.append(entry)
        elif canonical_query in term:
            interior.append(entry)

    return (prefix + interior)[:limit]


class TermMatcher:
    """Matcher with default fuzzy settings, used by the glossary engine."""

    def __init__(
        self,
        fuzzy_enabled: bool = True,
        fuzzy_tolerance: int = 2,
        suggestion_limit: int = SUGGESTION_LIMIT,
        correction_cutoff: float = 0.6
    ) -> None:
        """
        Initialize the matcher.

        Args:
            fuzzy_enabled: Default for whether the fuzzy tier runs
            fuzzy_tolerance: Default maximum edit distance
            suggestion_limit: Maximum number of autocomplete suggestions
            correction_cutoff: Minimum similarity (0-1) for "did you mean" corrections
        """
        self.fuzzy_enabled = fuzzy_enabled
        self.fuzzy_tolerance = fuzzy_tolerance
        self.suggestion_limit = suggestion_limit
        self.correction_cutoff = correction_cutoff

    def match(
        self,
        query: str,
        entries: Sequence,
        fuzzy_enabled: Optional[bool] = None,
        fuzzy_tolerance: Optional[int] = None
    ) -> Tuple[str, List[TermMatch]]:
        """Tiered search returning the producing tier and the matches."""
        if fuzzy_enabled is None:
            fuzzy_enabled = self.fuzzy_enabled
        if fuzzy_tolerance is None:
            fuzzy_tolerance = self.fuzzy_tolerance
        return search_with_details(query, entries, fuzzy_enabled, fuzzy_tolerance)

    def search(
        self,
        query: str,
        entries: Sequence,
        fuzzy_enabled: Optional[bool] = None,
        fuzzy_tolerance: Optional[int] = None
    ) -> List:
        _, matches = self.match(query, entries, fuzzy_enabled, fuzzy_tolerance)
        return [match.entry for match in matches]

    def suggest(self, query: str, entries: Sequence) -> List:
        return suggest(query, entries, self.suggestion_limit)

    def suggest_corrections(
        self,
        query: str,
        entries: Sequence,
        max_suggestions: int = 5
    ) -> List[str]:
        """
        Suggest existing terms resembling a query that found nothing.

        Scored with rapidfuzz's ratio on canonical forms, independent of the
        fuzzy tolerance used by the search tiers.
        """
        canonical_query = normalize((query or "").strip())
        if not canonical_query or not entries:
            return []

        choices = {index: normalize(entry.term) for index, entry in enumerate(entries)}
        extracted = process.extract(
            canonical_query,
            choices,
            scorer=fuzz.ratio,
            limit=max_suggestions,
            score_cutoff=self.correction_cutoff * 100
        )
        return [entries[index].term for _, _, index in extracted]
