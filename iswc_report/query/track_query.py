# -*- coding: utf-8 -*-
"""
The report query: ISWC articles by track and author country.

A track (conference:Track) has talks as sub-events; each talk is related to an
article whose label is its title. The country is reached from the article
through creator -> affiliation -> organisation -> DBpedia country -> name.
Only the Research, In-Use and Resource tracks are reported.
"""
# Standard library
from typing import Iterable

# Local
from iswc_report.graph.namespaces import STANDARD_PREFIXES
from iswc_report.query.patterns import SelectQuery
from iswc_report.query.query_parser import parse_query

REPORTED_TRACKS = ("Research", "In-Use", "Resource")

# Output variables
COUNTRY_VAR = "country"
TITLE_VAR = "title"
ARTICLE_VAR = "article"
TRACK_VAR = "track"


def build_track_query(tracks: Iterable[str] = REPORTED_TRACKS) -> str:
    """
    Query text restricted to the given track labels.

    Args:
        tracks: Track labels to keep

    Returns:
        SPARQL-subset query text
    """
    allowed = ", ".join(f'"{track}"' for track in tracks)
    prologue = [f"PREFIX {name}: <{iri}>" for name, iri in STANDARD_PREFIXES.items()]
    return "\n".join(prologue + [
        f"SELECT DISTINCT ?{COUNTRY_VAR} ?{TITLE_VAR} ?{ARTICLE_VAR} ?{TRACK_VAR} WHERE {{",
        "  ?t a conference:Track ;",
        "     conference:hasSubEvent ?e ;",
        f"     rdfs:label ?{TRACK_VAR} .",
        "  ?e a conference:Talk ;",
        f"     conference:isEventRelatedTo ?{ARTICLE_VAR} .",
        f"  ?{ARTICLE_VAR} rdfs:label ?{TITLE_VAR} ;",
        "      purl:creator/conference:hasAffiliation/",
        f"      conference:withOrganisation/dbo:country/dbp:name ?{COUNTRY_VAR} .",
        f"  FILTER(?{TRACK_VAR} IN ({allowed}))",
        "}",
    ])


TRACK_QUERY = build_track_query()


def track_query(tracks: Iterable[str] = REPORTED_TRACKS) -> SelectQuery:
    """Parsed report query."""
    return parse_query(build_track_query(tracks))
