# -*- coding: utf-8 -*-
"""
Shared fixtures for the report test suite.

Provides Turtle snippets for a small ISWC graph and a factory that writes them
into a temporary input directory.
"""

# Standard library
import sys
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Third-party
import pytest


EX = "http://example.org/"

TTL_PREFIXES = """\
@prefix conference: <https://w3id.org/scholarlydata/ontology/conference-ontology.owl#> .
@prefix purl: <http://purl.org/dc/elements/1.1/> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .
@prefix dbo: <http://dbpedia.org/ontology/> .
@prefix dbp: <http://dbpedia.org/property/> .
@prefix ex: <http://example.org/> .
"""

# Research track, one talk, article "Graphs" by A and B, A affiliated in Spain
TTL_EVENTS = TTL_PREFIXES + """
ex:research a conference:Track ;
    rdfs:label "Research" ;
    conference:hasSubEvent ex:talk1 .

ex:talk1 a conference:Talk ;
    conference:isEventRelatedTo ex:paper1 .
"""

TTL_PAPERS = TTL_PREFIXES + """
ex:paper1 rdfs:label "Graphs" ;
    purl:creator ex:a ;
    conference:hasAuthorList ex:list1 .

ex:list1 conference:hasFirstItem ex:item1 .
ex:item1 conference:hasContent ex:a ;
    conference:next ex:item2 .
ex:item2 conference:hasContent ex:b .
"""

TTL_PEOPLE = TTL_PREFIXES + """
ex:a rdfs:label "A" ;
    conference:hasAffiliation ex:aff1 .
ex:b rdfs:label "B" .

ex:aff1 conference:withOrganisation ex:upm .
ex:upm dbo:country ex:spain .
ex:spain dbp:name "Spain" .
"""

TTL_BROKEN = TTL_PREFIXES + """
ex:x rdfs:label "unterminated
"""


@pytest.fixture
def write_ttl(tmp_path):
    """Write named Turtle documents into tmp_path/ttl and return the directory."""
    input_dir = tmp_path / "ttl"
    input_dir.mkdir()

    def _write(**documents):
        for name, content in documents.items():
            (input_dir / f"{name}.ttl").write_text(content, encoding="utf-8")
        return input_dir

    return _write


@pytest.fixture
def iswc_dir(write_ttl):
    """Input directory with the one-article graph split over three files."""
    return write_ttl(events=TTL_EVENTS, papers=TTL_PAPERS, people=TTL_PEOPLE)
