# -*- coding: utf-8 -*-
"""
Turtle parsing into store triples.

rdflib does the tokenizing and parsing; its terms are converted straight into
the plain-string identifiers and Literal values the triple store indexes, so no
rdflib object outlives a parse.

Example:
    with open("data/ttl/iswc2019.ttl", "rb") as stream:
        triples = parse_stream(stream)
"""
# Standard library
import logging
from typing import BinaryIO, List, Optional

# Third-party
from rdflib import BNode, Graph, URIRef
from rdflib import Literal as RDFLiteral
from rdflib.exceptions import ParserError

# Local
from iswc_report.utils.dataclasses import Literal, Term, Triple

logger = logging.getLogger(__name__)

# Raised by rdflib for malformed content (BadSyntax is a SyntaxError,
# UnicodeDecodeError a ValueError)
PARSE_ERRORS = (SyntaxError, ValueError, ParserError)


def to_term(node) -> Term:
    """
    Convert an rdflib node to a store term.

    URIRefs become their IRI string, blank nodes a "_:" label and literals a
    Literal carrying the lexical form, language and datatype.
    """
    if isinstance(node, RDFLiteral):
        datatype = str(node.datatype) if node.datatype is not None else None
        return Literal(str(node), language=node.language, datatype=datatype)
    if isinstance(node, BNode):
        return f"_:{node}"
    return str(node)


def parse_stream(
    stream: BinaryIO,
    fmt: str = "turtle",
    public_id: Optional[str] = None,
) -> List[Triple]:
    """
    Parse one opened byte stream completely.

    Args:
        stream: Binary file-like object positioned at the start of the document
        fmt: rdflib parser name (default "turtle")
        public_id: Base IRI for relative references

    Returns:
        All triples of the document (nothing is returned for a partial parse)

    Raises:
        SyntaxError, ParserError: Malformed content
        ValueError: Undecodable content, or a triple the store cannot hold
            (literal subject or predicate, blank node predicate)
    """
    graph = Graph()
    graph.parse(source=stream, format=fmt, publicID=public_id)

    triples = []
    for s, p, o in graph:
        if not isinstance(s, (URIRef, BNode)) or not isinstance(p, URIRef):
            raise ValueError(f"Triple with a non-identifier subject or predicate: {s!r} {p!r}")
        triples.append(Triple(to_term(s), to_term(p), to_term(o)))
    logger.debug(f"Parsed {len(triples)} triples ({fmt})")
    return triples
