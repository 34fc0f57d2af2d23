# -*- coding: utf-8 -*-
"""
Nested-loop join evaluator for conjunctive queries over the triple store.

Clauses are evaluated in declaration order. The first clause is matched using
only its constants; each later clause is matched with the variables bound so
far substituted in as constraints, and a partial binding is dropped as soon as
a clause has no match. A variable used more than once must take the same value
at every occurrence. Property paths are walked hop by hop through anonymous
intermediate nodes.

Filters run after all joins, then rows are projected and, for DISTINCT,
collapsed. Row order is not defined; the aggregator imposes the final order.

Examples:
    engine = QueryEngine(store)
    rows = engine.query(TRACK_QUERY)

    # Or with a hand-built pattern list
    bindings = engine.evaluate(patterns, filter=InFilter(track, allowed))
"""
# Standard library
import logging
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

# Local
from iswc_report.graph.triple_store import TripleStore
from iswc_report.query.patterns import (
    PatternTerm,
    PropertyPath,
    SelectQuery,
    TriplePattern,
    Variable,
)
from iswc_report.query.query_parser import parse_query
from iswc_report.utils.dataclasses import Binding, Term

logger = logging.getLogger(__name__)


class QueryEngine:
    """
    Evaluate conjunctive queries against a TripleStore.

    The engine never writes to the store; bindings are fresh dicts.
    """

    def __init__(self, store: TripleStore):
        """
        Initialize engine.

        Args:
            store: Populated triple store
        """
        self.store = store

    # ==================== PUBLIC API ====================

    def evaluate(
        self,
        patterns: Sequence[TriplePattern],
        filter: Optional[Callable[[Binding], bool]] = None,
    ) -> List[Binding]:
        """
        Find every binding that satisfies all patterns.

        Args:
            patterns: Clauses in evaluation order
            filter: Predicate over complete bindings, applied after the joins

        Returns:
            One binding per solution (not deduplicated)
        """
        solutions = list(self._solve(list(patterns), 0, {}))
        if filter is not None:
            kept = [b for b in solutions if filter(b)]
            logger.debug(f"Filter kept {len(kept)}/{len(solutions)} solutions")
            solutions = kept
        return solutions

    def select(self, query: SelectQuery) -> List[Binding]:
        """
        Run a parsed SELECT query.

        Args:
            query: Parsed query

        Returns:
            Projected rows, duplicates collapsed when query.distinct
        """
        solutions = self.evaluate(
            query.patterns,
            filter=query.accepts if query.filters else None,
        )

        names = query.projection()
        rows = [{n: b[n] for n in names if n in b} for b in solutions]

        if query.distinct:
            seen = set()
            unique = []
            for row in rows:
                key = tuple(row.get(n) for n in names)
                if key not in seen:
                    seen.add(key)
                    unique.append(row)
            rows = unique

        logger.info(f"Query matched {len(solutions)} solutions ({len(rows)} rows)")
        return rows

    def query(self, text: str) -> List[Binding]:
        """Parse SPARQL-subset text and run it."""
        return self.select(parse_query(text))

    # ==================== JOINS ====================

    def _solve(
        self,
        patterns: List[TriplePattern],
        index: int,
        binding: Binding,
    ) -> Iterator[Binding]:
        if index == len(patterns):
            yield binding
            return

        for extended in self._extend(binding, patterns[index]):
            yield from self._solve(patterns, index + 1, extended)

    def _extend(self, binding: Binding, pattern: TriplePattern) -> Iterator[Binding]:
        """Yield binding extended by every match of one clause."""
        subject = self._resolve(pattern.subject, binding)
        obj = self._resolve(pattern.obj, binding)

        if isinstance(pattern.predicate, PropertyPath):
            for head, end in self._walk_path(subject, pattern.predicate.steps, obj):
                extended = _unify(binding, ((pattern.subject, head), (pattern.obj, end)))
                if extended is not None:
                    yield extended
            return

        predicate = self._resolve(pattern.predicate, binding)
        for triple in self.store.match(subject, predicate, obj):
            extended = _unify(binding, (
                (pattern.subject, triple.subject),
                (pattern.predicate, triple.predicate),
                (pattern.obj, triple.obj),
            ))
            if extended is not None:
                yield extended

    def _walk_path(
        self,
        subject: Optional[Term],
        steps: Tuple[str, ...],
        obj: Optional[Term],
    ) -> Iterator[Tuple[Term, Term]]:
        """
        Yield (start, end) node pairs connected by the predicate sequence.

        Each pair is reported once however many routes connect it.
        """
        if subject is not None:
            heads: Iterable[Term] = [subject]
        else:
            heads = {t.subject for t in self.store.match(None, steps[0], None)}

        for head in heads:
            frontier = {head}
            for step in steps:
                frontier = {
                    t.obj
                    for node in frontier
                    for t in self.store.match(node, step, None)
                }
                if not frontier:
                    break

            for end in frontier:
                if obj is None or end == obj:
                    yield head, end

    @staticmethod
    def _resolve(term, binding: Binding) -> Optional[Term]:
        """Constant as-is, bound variable to its value, unbound variable to None."""
        if isinstance(term, Variable):
            return binding.get(term.name)
        return term


def _unify(
    binding: Binding,
    assignments: Iterable[Tuple[PatternTerm, Term]],
) -> Optional[Binding]:
    """
    Bind variables to matched values.

    Returns a new binding, the same binding when nothing new is bound, or None
    when a variable already holds a different value.
    """
    result = binding
    for term, value in assignments:
        if not isinstance(term, Variable):
            continue
        bound = result.get(term.name)
        if bound is None:
            if result is binding:
                result = dict(binding)
            result[term.name] = value
        elif bound != value:
            return None
    return result
