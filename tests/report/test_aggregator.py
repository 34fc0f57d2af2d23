# -*- coding: utf-8 -*-
"""
Module: test_aggregator.py
Package: tests.report
Purpose: Unit tests for track tags and country grouping

Tests:
- Track label -> tag table, (RC) fallback
- Entry format
- Sorted, de-duplicated grouping
- Chain faults omit one article without stopping the run
"""

# Standard library
import logging
import sys
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Third-party
import pytest

# Local
from iswc_report.report.aggregator import (
    ResultAggregator,
    aggregate,
    format_entry,
    map_track,
)
from iswc_report.report.author_chain import AuthorChainError
from iswc_report.utils.dataclasses import Literal

EX = "http://example.org/"

AUTHORS = {
    EX + "p1": "A y B",
    EX + "p2": "Cruz",
    EX + "p3": "Dana",
}


def _row(country, title, article, track):
    return {
        "country": Literal(country),
        "title": Literal(title),
        "article": EX + article,
        "track": Literal(track),
    }


@pytest.fixture
def formatter():
    """Author lookup that records how often each article is resolved."""
    calls = []

    def _format(article):
        calls.append(article)
        if article == EX + "loop":
            raise AuthorChainError(article, "list node is visited twice")
        return AUTHORS[article]

    _format.calls = calls
    return _format


# ============================================================================
# TESTS: TAGS AND ENTRIES
# ============================================================================

@pytest.mark.parametrize("track,tag", [
    ("Research", "(IN)"),
    ("In-Use", "(EU)"),
    ("Resource", "(RC)"),
    ("Workshop", "(RC)"),
    ("", "(RC)"),
    ("research", "(RC)"),
])
def test_map_track(track, tag):
    assert map_track(track) == tag


def test_format_entry():
    assert format_entry("(IN)", "Graphs", "A y B") == '(IN) "Graphs" por A y B'


# ============================================================================
# TESTS: GROUPING
# ============================================================================

def test_single_row(formatter):
    grouping = aggregate([_row("Spain", "Graphs", "p1", "Research")], formatter)
    assert grouping == {"Spain": ['(IN) "Graphs" por A y B']}


def test_countries_and_entries_sorted(formatter):
    rows = [
        _row("Spain", "Zeta", "p2", "Resource"),
        _row("Germany", "Lists", "p3", "In-Use"),
        _row("Spain", "Alpha", "p1", "Research"),
    ]

    grouping = aggregate(rows, formatter)

    assert list(grouping) == ["Germany", "Spain"]
    assert grouping["Spain"] == [
        '(IN) "Alpha" por A y B',
        '(RC) "Zeta" por Cruz',
    ]
    assert grouping["Germany"] == ['(EU) "Lists" por Dana']


def test_duplicate_rows_collapse(formatter):
    row = _row("Spain", "Graphs", "p1", "Research")
    grouping = aggregate([row, dict(row), dict(row)], formatter)
    assert grouping == {"Spain": ['(IN) "Graphs" por A y B']}


def test_article_in_two_countries_listed_under_each(formatter):
    rows = [
        _row("Spain", "Graphs", "p1", "Research"),
        _row("France", "Graphs", "p1", "Research"),
    ]
    grouping = aggregate(rows, formatter)
    assert grouping["Spain"] == grouping["France"]


def test_authors_resolved_once_per_article(formatter):
    rows = [
        _row("Spain", "Graphs", "p1", "Research"),
        _row("France", "Graphs", "p1", "Research"),
    ]
    ResultAggregator(formatter).aggregate(rows)
    assert formatter.calls == [EX + "p1"]


def test_empty_bindings(formatter):
    assert aggregate([], formatter) == {}


def test_row_missing_variable_skipped(formatter, caplog):
    incomplete = _row("Spain", "Graphs", "p1", "Research")
    del incomplete["track"]

    with caplog.at_level(logging.WARNING):
        grouping = aggregate([incomplete, _row("Italy", "Lists", "p2", "In-Use")], formatter)

    assert grouping == {"Italy": ['(EU) "Lists" por Cruz']}
    assert "skipped" in caplog.text


# ============================================================================
# TESTS: CHAIN FAULTS
# ============================================================================

def test_chain_error_omits_article_only(formatter, caplog):
    rows = [
        _row("Spain", "Broken", "loop", "Research"),
        _row("Spain", "Graphs", "p1", "Research"),
    ]
    aggregator = ResultAggregator(formatter)

    with caplog.at_level(logging.ERROR):
        grouping = aggregator.aggregate(rows)

    assert grouping == {"Spain": ['(IN) "Graphs" por A y B']}
    assert len(aggregator.diagnostics) == 1
    assert aggregator.diagnostics[0].article == EX + "loop"
    assert "visited twice" in aggregator.diagnostics[0].message
    assert "Data-integrity" in caplog.text


def test_country_with_only_faulty_articles_is_absent(formatter):
    grouping = aggregate([_row("Chile", "Broken", "loop", "Research")], formatter)
    assert grouping == {}


def test_other_errors_propagate():
    def failing(article):
        raise KeyError(article)

    with pytest.raises(KeyError):
        aggregate([_row("Spain", "Graphs", "p1", "Research")], failing)


def test_diagnostics_cover_latest_call_only(formatter):
    rows = [_row("Spain", "Broken", "loop", "Research")]
    aggregator = ResultAggregator(formatter)

    aggregator.aggregate(rows)
    aggregator.aggregate(rows)

    assert len(aggregator.diagnostics) == 1
