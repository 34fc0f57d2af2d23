# -*- coding: utf-8 -*-
"""
Result aggregation: query rows to report entries grouped by country.

Each row becomes one entry string

    (IN) "Graphs" por Ana y Bo

filed under the row's country. Countries iterate in ascending order and the
entries of a country are ascending and unique, so the rendered report is the
same on every run.

Examples:
    aggregator = ResultAggregator(resolver.resolve_authors)
    grouping = aggregator.aggregate(rows)
    # Returns: {"Spain": ['(IN) "Graphs" por A y B']}

"""
# Standard library
import logging
from typing import Callable, Dict, Iterable, List, Optional, Set

# Local
from iswc_report.query.track_query import (
    ARTICLE_VAR,
    COUNTRY_VAR,
    TITLE_VAR,
    TRACK_VAR,
)
from iswc_report.report.author_chain import AuthorChainError
from iswc_report.utils.dataclasses import (
    Binding,
    ChainDiagnostic,
    GroupingMap,
    term_text,
)

logger = logging.getLogger(__name__)


# =============================================================================
# TRACK TAGS
# =============================================================================

# Track label -> report tag. Every other label, Resource included, is (RC).
TRACK_TAGS = {
    "Research": "(IN)",
    "In-Use": "(EU)",
}
DEFAULT_TRACK_TAG = "(RC)"


def map_track(track: str) -> str:
    """
    Report tag for a track label.

    Example:
        >>> map_track("In-Use")
        '(EU)'
    """
    return TRACK_TAGS.get(track, DEFAULT_TRACK_TAG)


def format_entry(tag: str, title: str, authors: str) -> str:
    """One report line: <tag> "<title>" por <authors>."""
    return f'{tag} "{title}" por {authors}'


# =============================================================================
# AGGREGATOR
# =============================================================================

class ResultAggregator:
    """
    Groups query rows into the country -> entries map.

    Author text comes from author_formatter (normally
    AuthorChainResolver.resolve_authors). An AuthorChainError for one article
    is logged and recorded in diagnostics; that article's entries are left out
    and the remaining rows are still processed. diagnostics holds the faults of
    the latest aggregate() call only.
    """

    def __init__(
        self,
        author_formatter: Callable[[str], str],
        country_var: str = COUNTRY_VAR,
        title_var: str = TITLE_VAR,
        article_var: str = ARTICLE_VAR,
        track_var: str = TRACK_VAR,
    ):
        """
        Initialize aggregator.

        Args:
            author_formatter: Article identifier -> author display text
            country_var: Variable holding the country name
            title_var: Variable holding the article title
            article_var: Variable holding the article identifier
            track_var: Variable holding the track label
        """
        self.author_formatter = author_formatter
        self.country_var = country_var
        self.title_var = title_var
        self.article_var = article_var
        self.track_var = track_var
        self.diagnostics: List[ChainDiagnostic] = []

    def aggregate(self, bindings: Iterable[Binding]) -> GroupingMap:
        """
        Build the grouping map.

        Args:
            bindings: Query rows

        Returns:
            Country -> ascending unique entries, keys in ascending order
        """
        self.diagnostics = []
        groups: Dict[str, Set[str]] = {}
        authors_by_article: Dict[str, Optional[str]] = {}
        skipped = 0

        for binding in bindings:
            country = term_text(binding.get(self.country_var))
            title = term_text(binding.get(self.title_var))
            track = term_text(binding.get(self.track_var))
            article = binding.get(self.article_var)

            if country is None or title is None or track is None or article is None:
                logger.warning(f"Row without country/title/track/article skipped: {binding}")
                skipped += 1
                continue

            if article not in authors_by_article:
                authors_by_article[article] = self._resolve(article)
            authors = authors_by_article[article]
            if authors is None:
                skipped += 1
                continue

            entry = format_entry(map_track(track), title, authors)
            groups.setdefault(country, set()).add(entry)

        grouping = {country: sorted(groups[country]) for country in sorted(groups)}

        total = sum(len(entries) for entries in grouping.values())
        logger.info(
            f"Aggregated {total} entries in {len(grouping)} countries "
            f"({skipped} rows skipped)"
        )
        return grouping

    def _resolve(self, article: str) -> Optional[str]:
        try:
            return self.author_formatter(article)
        except AuthorChainError as e:
            logger.error(f"Data-integrity error, entry omitted: {e}")
            self.diagnostics.append(ChainDiagnostic(article=e.article, message=str(e)))
            return None


def aggregate(
    bindings: Iterable[Binding],
    formatter: Callable[[str], str],
) -> GroupingMap:
    """Group rows with a one-off ResultAggregator."""
    return ResultAggregator(formatter).aggregate(bindings)
