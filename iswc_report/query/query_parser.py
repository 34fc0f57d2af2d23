# -*- coding: utf-8 -*-
"""
SPARQL SELECT text to the conjunctive query model.

rdflib parses the text and translates it to SPARQL algebra; this module walks
that algebra and keeps the part the engine evaluates:

- SELECT [DISTINCT] ?v ... | *
- basic graph patterns (PREFIX names, "a", ";" and "," already expanded)
- sequence property paths p1/p2/.../pn
- FILTER(?v IN (t1, t2, ...)) and FILTER(?v = t), alone or joined with &&

Anything else (OPTIONAL, UNION, LIMIT, ORDER BY, other filter expressions,
other path operators, literal subjects) raises QuerySyntaxError, as does text
rdflib cannot parse. Blank nodes in patterns act as unprojected variables.

Examples:
    from iswc_report.query.query_parser import parse_query

    query = parse_query('''
        PREFIX rdfs: <http://www.w3.org/2000/01/rdf-schema#>
        SELECT DISTINCT ?title WHERE { ?article rdfs:label ?title . }
    ''')
    # Returns: SelectQuery(variables=[Variable('title')], patterns=[...], distinct=True)
"""
# Standard library
import logging
from typing import Dict, List, Optional

# Third-party
from rdflib.paths import Path, SequencePath
from rdflib.plugins.sparql.algebra import translateQuery
from rdflib.plugins.sparql.parser import parseQuery
from rdflib.term import BNode, Node, URIRef
from rdflib.term import Literal as RDFLiteral
from rdflib.term import Variable as RDFVariable

# Local
from iswc_report.graph.rdf_loader import to_term
from iswc_report.query.patterns import (
    BLANK_PREFIX,
    InFilter,
    PatternTerm,
    PredicateTerm,
    PropertyPath,
    SelectQuery,
    TriplePattern,
    Variable,
)
from iswc_report.utils.dataclasses import Literal, Term

logger = logging.getLogger(__name__)

# Algebra operators that only wrap the pattern part of a SELECT
_MODIFIERS = ("Project", "Distinct")

# Filter operators with a set-membership reading
_MEMBERSHIP_OPS = ("IN", "=")


class QuerySyntaxError(ValueError):
    """Query text outside the supported subset."""


class QueryParser:
    """
    Build SelectQuery objects from SPARQL text.

    Default prefixes are available to every query; PREFIX declarations in the
    text add to or override them.
    """

    def __init__(self, prefixes: Optional[Dict[str, str]] = None):
        """
        Initialize parser.

        Args:
            prefixes: Prefix -> namespace IRI available without declaration
        """
        self.default_prefixes = dict(prefixes or {})

    def parse(self, text: str) -> SelectQuery:
        """
        Parse query text.

        Args:
            text: SPARQL SELECT query

        Returns:
            SelectQuery

        Raises:
            QuerySyntaxError: Unparseable text or constructs outside the subset
        """
        try:
            parsed = parseQuery(text)
            select_star = parsed[1].projection is None
            algebra = translateQuery(parsed, initNs=self.default_prefixes).algebra
        except Exception as e:
            raise QuerySyntaxError(f"Cannot parse query: {e}") from e

        if algebra.name != "SelectQuery":
            raise QuerySyntaxError(f"Only SELECT queries are supported, got {algebra.name}")

        variables = [] if select_star else [Variable(str(v)) for v in algebra.PV]

        distinct = False
        node = algebra.p
        while node.name in _MODIFIERS:
            distinct = distinct or node.name == "Distinct"
            node = node.p

        patterns: List[TriplePattern] = []
        filters: List[InFilter] = []
        self._collect(node, patterns, filters)
        if not patterns:
            raise QuerySyntaxError("Query has no triple patterns")

        logger.debug(f"Parsed query: {len(patterns)} patterns, {len(filters)} filters")
        return SelectQuery(
            variables=variables,
            patterns=patterns,
            filters=filters,
            distinct=distinct,
        )

    # ==================== ALGEBRA ====================

    def _collect(self, node, patterns: List[TriplePattern], filters: List[InFilter]) -> None:
        """Flatten Filter/Join/BGP operators into patterns and filters."""
        if node.name == "BGP":
            patterns.extend(self._pattern(triple) for triple in node.triples)
        elif node.name == "Join":
            self._collect(node.p1, patterns, filters)
            self._collect(node.p2, patterns, filters)
        elif node.name == "Filter":
            filters.extend(self._filters(node.expr))
            self._collect(node.p, patterns, filters)
        else:
            raise QuerySyntaxError(f"Unsupported query construct: {node.name}")

    def _filters(self, expr) -> List[InFilter]:
        name = getattr(expr, "name", None)

        if name == "ConditionalAndExpression":
            filters = self._filters(expr.expr)
            for other in expr.other:
                filters.extend(self._filters(other))
            return filters

        if (
            name == "RelationalExpression"
            and expr.op in _MEMBERSHIP_OPS
            and isinstance(expr.expr, RDFVariable)
        ):
            values = [expr.other] if isinstance(expr.other, Node) else list(expr.other)
            allowed = frozenset(self._constant(value) for value in values)
            return [InFilter(Variable(str(expr.expr)), allowed)]

        raise QuerySyntaxError("Only FILTER(?v IN (...)) and FILTER(?v = term) are supported")

    # ==================== TERMS ====================

    def _pattern(self, triple) -> TriplePattern:
        s, p, o = triple
        subject = self._term(s)
        if isinstance(subject, Literal):
            raise QuerySyntaxError(f"Literal subject in pattern: {s.n3()}")
        return TriplePattern(subject, self._predicate(p), self._term(o))

    def _predicate(self, node) -> PredicateTerm:
        if isinstance(node, SequencePath):
            if not all(isinstance(step, URIRef) for step in node.args):
                raise QuerySyntaxError(f"Only sequences of IRIs are supported in paths: {node}")
            return PropertyPath(tuple(str(step) for step in node.args))
        if isinstance(node, Path):
            raise QuerySyntaxError(f"Unsupported property path: {node}")

        predicate = self._term(node)
        if isinstance(predicate, Literal):
            raise QuerySyntaxError(f"Literal predicate in pattern: {node.n3()}")
        return predicate

    def _term(self, node) -> PatternTerm:
        if isinstance(node, RDFVariable):
            return Variable(str(node))
        if isinstance(node, BNode):
            return Variable(f"{BLANK_PREFIX}{node}")
        return self._constant(node)

    def _constant(self, node) -> Term:
        if isinstance(node, (URIRef, RDFLiteral)):
            return to_term(node)
        raise QuerySyntaxError(f"Expected an IRI or literal, got {node!r}")


def parse_query(text: str, prefixes: Optional[Dict[str, str]] = None) -> SelectQuery:
    """Parse query text with an optional set of predeclared prefixes."""
    return QueryParser(prefixes).parse(text)
