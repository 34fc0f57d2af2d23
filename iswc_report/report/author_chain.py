# -*- coding: utf-8 -*-
"""
Author-chain resolution for articles.

Articles point to an ordered author list stored as linked list nodes:

    article --hasAuthorList--> list --hasFirstItem--> item1
    item1 --hasContent--> person --rdfs:label--> "Ana"
    item1 --next--> item2 --next--> ... (last item has no next)

Gaps are not errors: a missing list or first item gives "", and an item with no
content or no label is left out. A chain that revisits a node or runs past
max_hops is a data-integrity fault and raises AuthorChainError for that article
only.

Example:
    resolver = AuthorChainResolver(store)
    resolver.resolve_authors(article)
    # Returns: "Ana, Bo y Cruz"
"""
# Standard library
import logging
from typing import List, Optional, Sequence

# Local
from iswc_report.graph.namespaces import (
    CON_HAS_AUTHOR_LIST,
    CON_HAS_CONTENT,
    CON_HAS_FIRST_ITEM,
    CON_NEXT,
    RDFS_LABEL,
)
from iswc_report.graph.triple_store import TripleStore
from iswc_report.utils.dataclasses import Literal, term_text

logger = logging.getLogger(__name__)

DEFAULT_MAX_HOPS = 10_000


class AuthorChainError(ValueError):
    """Author list that loops or never ends."""

    def __init__(self, article: str, message: str):
        super().__init__(f"Malformed author chain for {article}: {message}")
        self.article = article


def format_author_names(names: Sequence[str], conjunction: str = "y") -> str:
    """
    Join author names for display.

    Args:
        names: Names in list order
        conjunction: Word placed before the last name

    Returns:
        "" for no names, the name for one, "A, B <conjunction> C" otherwise
    """
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    return f"{', '.join(names[:-1])} {conjunction} {names[-1]}"


class AuthorChainResolver:
    """
    Walk author lists in the store.

    Traversal is iterative and bounded by max_hops.
    """

    def __init__(
        self,
        store: TripleStore,
        conjunction: str = "y",
        max_hops: int = DEFAULT_MAX_HOPS,
    ):
        """
        Initialize resolver.

        Args:
            store: Populated triple store
            conjunction: Word before the last author name
            max_hops: Longest list accepted before the chain is reported as malformed
        """
        if max_hops < 1:
            raise ValueError(f"max_hops must be positive, got {max_hops}")
        self.store = store
        self.conjunction = conjunction
        self.max_hops = max_hops

    def author_names(self, article: str) -> List[str]:
        """
        Ordered author names of an article.

        Args:
            article: Article identifier

        Returns:
            Names in list order (empty if the article has no usable list)

        Raises:
            AuthorChainError: The chain revisits a node or exceeds max_hops
        """
        author_list = self.store.value(article, CON_HAS_AUTHOR_LIST)
        if author_list is None or isinstance(author_list, Literal):
            return []

        item = self.store.value(author_list, CON_HAS_FIRST_ITEM)
        names: List[str] = []
        visited = set()
        hops = 0

        while item is not None and not isinstance(item, Literal):
            if item in visited:
                raise AuthorChainError(article, f"list node {item} is visited twice")
            hops += 1
            if hops > self.max_hops:
                raise AuthorChainError(article, f"more than {self.max_hops} list nodes")
            visited.add(item)

            name = self._label_of(self.store.value(item, CON_HAS_CONTENT))
            if name is not None:
                names.append(name)

            item = self.store.value(item, CON_NEXT)

        logger.debug(f"{article}: {len(names)} authors over {hops} list nodes")
        return names

    def resolve_authors(self, article: str) -> str:
        """Display text of an article's authors, e.g. "Ana, Bo y Cruz"."""
        return format_author_names(self.author_names(article), self.conjunction)

    def _label_of(self, author) -> Optional[str]:
        if author is None or isinstance(author, Literal):
            return None
        return term_text(self.store.value(author, RDFS_LABEL))
