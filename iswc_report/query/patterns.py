# -*- coding: utf-8 -*-
"""
Query model for conjunctive pattern matching.

A SelectQuery is an ordered list of TriplePatterns plus filters. Pattern
positions hold either a Variable or a constant term; the predicate position may
also hold a PropertyPath (p1/p2/.../pn), which matches through anonymous
intermediate nodes.

Example:
    country = Variable("country")
    pattern = TriplePattern(
        Variable("article"),
        PropertyPath((PURL_CREATOR, CON_HAS_AFFILIATION, CON_WITH_ORGANISATION,
                      DBO_COUNTRY, DBP_NAME)),
        country,
    )
    tracks = InFilter(Variable("track"), frozenset({Literal("Research")}))
"""
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple, Union

from iswc_report.utils.dataclasses import Binding, Literal, Term

# Name prefix of variables standing for query blank nodes
BLANK_PREFIX = "_:"


@dataclass(frozen=True)
class Variable:
    """Named query variable (written ?name)."""
    name: str

    def __str__(self) -> str:
        return f"?{self.name}"


@dataclass(frozen=True)
class PropertyPath:
    """Sequence path: each step is a predicate IRI."""
    steps: Tuple[str, ...]

    def __post_init__(self):
        if not self.steps:
            raise ValueError("Property path needs at least one step")

    def __str__(self) -> str:
        return "/".join(f"<{step}>" for step in self.steps)


PatternTerm = Union[Variable, str, Literal]
PredicateTerm = Union[Variable, str, PropertyPath]


@dataclass(frozen=True)
class TriplePattern:
    """One (subject, predicate, object) clause."""
    subject: PatternTerm
    predicate: PredicateTerm
    obj: PatternTerm

    def __str__(self) -> str:
        return f"{_show(self.subject)} {_show(self.predicate)} {_show(self.obj)} ."


@dataclass(frozen=True)
class InFilter:
    """
    Set-membership filter: keeps bindings whose variable is one of allowed.

    FILTER(?v = t) is the single-value case. An unbound variable never passes.
    """
    variable: Variable
    allowed: FrozenSet[Term]

    def __call__(self, binding: Binding) -> bool:
        value = binding.get(self.variable.name)
        return value is not None and value in self.allowed


@dataclass
class SelectQuery:
    """
    Parsed SELECT query.

    Attributes:
        variables: Projected variables; empty means SELECT *
        patterns: Clauses in evaluation order
        filters: Filters, all of which must pass
        distinct: Collapse identical projected rows
    """
    variables: List[Variable]
    patterns: List[TriplePattern]
    filters: List[InFilter] = field(default_factory=list)
    distinct: bool = False

    def projection(self) -> List[str]:
        """Output variable names (pattern variables in order for SELECT *, blank nodes excluded)."""
        if self.variables:
            return [v.name for v in self.variables]
        names: List[str] = []
        for pattern in self.patterns:
            for term in (pattern.subject, pattern.predicate, pattern.obj):
                if (
                    isinstance(term, Variable)
                    and not term.name.startswith(BLANK_PREFIX)
                    and term.name not in names
                ):
                    names.append(term.name)
        return names

    def accepts(self, binding: Binding) -> bool:
        return all(f(binding) for f in self.filters)


def _show(term: Optional[object]) -> str:
    if isinstance(term, Literal):
        suffix = f"@{term.language}" if term.language else ""
        if term.datatype:
            suffix = f"^^<{term.datatype}>"
        return f'"{term.value}"{suffix}'
    if isinstance(term, (Variable, PropertyPath)):
        return str(term)
    return f"<{term}>"
