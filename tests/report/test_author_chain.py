# -*- coding: utf-8 -*-
"""
Module: test_author_chain.py
Package: tests.report
Purpose: Unit tests for author list traversal and name formatting

Tests:
- Name joining for 0, 1, 2 and 3+ names
- Ordered traversal, gaps inside the list
- Cyclic and over-long chains raise AuthorChainError
"""

# Standard library
import sys
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Third-party
import pytest

# Local
from iswc_report.graph.namespaces import (
    CON_HAS_AUTHOR_LIST,
    CON_HAS_CONTENT,
    CON_HAS_FIRST_ITEM,
    CON_NEXT,
    RDFS_LABEL,
)
from iswc_report.graph.triple_store import TripleStore
from iswc_report.report.author_chain import (
    AuthorChainError,
    AuthorChainResolver,
    format_author_names,
)
from iswc_report.utils.dataclasses import Literal, Triple

EX = "http://example.org/"
PAPER = EX + "paper"


def _chain(names, link_back_to=None):
    """Triples for PAPER's author list; optionally point the last item back to an earlier one."""
    triples = [
        Triple(PAPER, CON_HAS_AUTHOR_LIST, EX + "list"),
        Triple(EX + "list", CON_HAS_FIRST_ITEM, EX + "item0"),
    ]
    for i, name in enumerate(names):
        item = EX + f"item{i}"
        person = EX + f"person{i}"
        triples.append(Triple(item, CON_HAS_CONTENT, person))
        triples.append(Triple(person, RDFS_LABEL, Literal(name)))
        if i < len(names) - 1:
            triples.append(Triple(item, CON_NEXT, EX + f"item{i + 1}"))
    if link_back_to is not None:
        last = EX + f"item{len(names) - 1}"
        triples.append(Triple(last, CON_NEXT, EX + f"item{link_back_to}"))
    return triples


# ============================================================================
# TESTS: FORMATTING
# ============================================================================

@pytest.mark.parametrize("names,expected", [
    ([], ""),
    (["Ana"], "Ana"),
    (["Ana", "Bo"], "Ana y Bo"),
    (["Ana", "Bo", "Cruz"], "Ana, Bo y Cruz"),
    (["A", "B", "C", "D"], "A, B, C y D"),
])
def test_format_author_names(names, expected):
    assert format_author_names(names) == expected


def test_format_author_names_custom_conjunction():
    assert format_author_names(["Ana", "Bo"], conjunction="and") == "Ana and Bo"


# ============================================================================
# TESTS: TRAVERSAL
# ============================================================================

def test_names_in_list_order():
    resolver = AuthorChainResolver(TripleStore(_chain(["Cruz", "Ana", "Bo"])))
    assert resolver.author_names(PAPER) == ["Cruz", "Ana", "Bo"]
    assert resolver.resolve_authors(PAPER) == "Cruz, Ana y Bo"


def test_single_author_verbatim():
    resolver = AuthorChainResolver(TripleStore(_chain(["Ana"])))
    assert resolver.resolve_authors(PAPER) == "Ana"


def test_missing_author_list_gives_empty_text():
    resolver = AuthorChainResolver(TripleStore([Triple(PAPER, RDFS_LABEL, Literal("Graphs"))]))
    assert resolver.resolve_authors(PAPER) == ""


def test_missing_first_item_gives_empty_text():
    resolver = AuthorChainResolver(TripleStore([Triple(PAPER, CON_HAS_AUTHOR_LIST, EX + "list")]))
    assert resolver.resolve_authors(PAPER) == ""


def test_item_without_content_or_label_is_skipped():
    triples = _chain(["Ana", "Bo", "Cruz"])
    # person1 loses its label, item2 loses its content
    triples = [
        t for t in triples
        if t != Triple(EX + "person1", RDFS_LABEL, Literal("Bo"))
        and t != Triple(EX + "item2", CON_HAS_CONTENT, EX + "person2")
    ]
    resolver = AuthorChainResolver(TripleStore(triples))
    assert resolver.author_names(PAPER) == ["Ana"]


def test_custom_conjunction():
    resolver = AuthorChainResolver(TripleStore(_chain(["Ana", "Bo"])), conjunction="&")
    assert resolver.resolve_authors(PAPER) == "Ana & Bo"


# ============================================================================
# TESTS: MALFORMED CHAINS
# ============================================================================

def test_cycle_raises_chain_error():
    resolver = AuthorChainResolver(TripleStore(_chain(["Ana", "Bo", "Cruz"], link_back_to=0)))

    with pytest.raises(AuthorChainError) as exc_info:
        resolver.resolve_authors(PAPER)

    assert exc_info.value.article == PAPER
    assert PAPER in str(exc_info.value)


def test_self_loop_raises_chain_error():
    resolver = AuthorChainResolver(TripleStore(_chain(["Ana"], link_back_to=0)))
    with pytest.raises(AuthorChainError):
        resolver.author_names(PAPER)


def test_chain_longer_than_max_hops():
    resolver = AuthorChainResolver(TripleStore(_chain(["A", "B", "C", "D"])), max_hops=3)
    with pytest.raises(AuthorChainError):
        resolver.author_names(PAPER)


def test_chain_at_max_hops_is_accepted():
    resolver = AuthorChainResolver(TripleStore(_chain(["A", "B", "C"])), max_hops=3)
    assert resolver.author_names(PAPER) == ["A", "B", "C"]


def test_chain_error_is_value_error():
    assert issubclass(AuthorChainError, ValueError)


def test_invalid_max_hops():
    with pytest.raises(ValueError):
        AuthorChainResolver(TripleStore(), max_hops=0)
