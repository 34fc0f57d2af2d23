# -*- coding: utf-8 -*-
"""
Core data structures for the ISWC track report pipeline

Single source of truth for the terms, triples and run summaries shared by the
graph, query and report packages. Import from this module rather than
redefining structures locally.

Examples:
    from iswc_report.utils.dataclasses import Literal, Triple

    title = Triple(
        subject="https://w3id.org/scholarlydata/inproceedings/iswc2019/paper/research/research-1",
        predicate="http://www.w3.org/2000/01/rdf-schema#label",
        obj=Literal("Graphs"),
    )

"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from iswc_report.graph.namespaces import XSD_STRING


# ============================================================================
# TERMS
# ============================================================================

@dataclass(frozen=True)
class Literal:
    """
    Literal text value.

    Plain and xsd:string literals are the same term, so the datatype is only
    kept when it is something else.
    """
    value: str
    language: Optional[str] = None
    datatype: Optional[str] = None

    def __post_init__(self):
        if self.datatype == XSD_STRING:
            object.__setattr__(self, 'datatype', None)
        if self.language:
            object.__setattr__(self, 'language', self.language.lower())

    def __str__(self) -> str:
        return self.value


# Identifiers (IRIs and "_:" blank node labels) are plain strings
Term = Union[str, Literal]

# Variable name -> bound term
Binding = Dict[str, Term]

# Country -> ordered, unique entry strings
GroupingMap = Dict[str, List[str]]


def term_sort_key(term: Term) -> Tuple:
    """Total order over mixed identifiers and literals (identifiers first)."""
    if isinstance(term, Literal):
        return (1, term.value, term.language or "", term.datatype or "")
    return (0, term, "", "")


def term_text(term: Optional[Term]) -> Optional[str]:
    """Lexical text of a term, or None."""
    if term is None:
        return None
    if isinstance(term, Literal):
        return term.value
    return str(term)


# ============================================================================
# TRIPLES
# ============================================================================

@dataclass(frozen=True)
class Triple:
    """Subject-predicate-object fact. Immutable once created."""
    subject: str
    predicate: str
    obj: Term

    def __iter__(self):
        return iter((self.subject, self.predicate, self.obj))


# ============================================================================
# RUN SUMMARIES
# ============================================================================

@dataclass
class LoadReport:
    """
    Outcome of loading a set of source files into the store.

    Attributes:
        loaded: Files whose triples were inserted
        failed: File -> reason, for files skipped because they could not be read or parsed
        triples_added: New triples inserted (duplicates not counted)
    """
    loaded: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)
    triples_added: int = 0

    @property
    def ok(self) -> bool:
        return not self.failed


@dataclass
class ChainDiagnostic:
    """Data-integrity fault found while resolving one article's author chain."""
    article: str
    message: str


@dataclass
class ReportResult:
    """Everything produced by one report run."""
    grouping: GroupingMap
    load_report: LoadReport
    diagnostics: List[ChainDiagnostic] = field(default_factory=list)
    binding_count: int = 0
    output_path: Optional[Path] = None
    json_output_path: Optional[Path] = None

    @property
    def entry_count(self) -> int:
        return sum(len(entries) for entries in self.grouping.values())
