# -*- coding: utf-8 -*-
"""
Namespaces and vocabulary for the ISWC conference graph.

Single source of truth for the namespace strings used by the loader, the track
query and the author-chain walk. Identifiers in the store are plain strings, so
everything here is a plain string constant.
"""

# Canonical namespaces
CON_NS = "https://w3id.org/scholarlydata/ontology/conference-ontology.owl#"
PURL_NS = "http://purl.org/dc/elements/1.1/"
RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDFS_NS = "http://www.w3.org/2000/01/rdf-schema#"
XSD_NS = "http://www.w3.org/2001/XMLSchema#"
DBO_NS = "http://dbpedia.org/ontology/"
DBP_NS = "http://dbpedia.org/property/"

# Prefixes declared at the top of the report query
STANDARD_PREFIXES = {
    "conference": CON_NS,
    "purl": PURL_NS,
    "rdf": RDF_NS,
    "rdfs": RDFS_NS,
    "xsd": XSD_NS,
    "dbo": DBO_NS,
    "dbp": DBP_NS,
}

RDF_TYPE = RDF_NS + "type"
RDFS_LABEL = RDFS_NS + "label"
XSD_STRING = XSD_NS + "string"

# Author list vocabulary
CON_HAS_AUTHOR_LIST = CON_NS + "hasAuthorList"
CON_HAS_FIRST_ITEM = CON_NS + "hasFirstItem"
CON_HAS_CONTENT = CON_NS + "hasContent"
CON_NEXT = CON_NS + "next"

# Event and affiliation vocabulary
CON_TRACK = CON_NS + "Track"
CON_TALK = CON_NS + "Talk"
CON_HAS_SUB_EVENT = CON_NS + "hasSubEvent"
CON_IS_EVENT_RELATED_TO = CON_NS + "isEventRelatedTo"
CON_HAS_AFFILIATION = CON_NS + "hasAffiliation"
CON_WITH_ORGANISATION = CON_NS + "withOrganisation"
PURL_CREATOR = PURL_NS + "creator"
DBO_COUNTRY = DBO_NS + "country"
DBP_NAME = DBP_NS + "name"

__all__ = [
    "CON_NS",
    "PURL_NS",
    "RDF_NS",
    "RDFS_NS",
    "XSD_NS",
    "DBO_NS",
    "DBP_NS",
    "STANDARD_PREFIXES",
    "RDF_TYPE",
    "RDFS_LABEL",
    "XSD_STRING",
    "CON_HAS_AUTHOR_LIST",
    "CON_HAS_FIRST_ITEM",
    "CON_HAS_CONTENT",
    "CON_NEXT",
    "CON_TRACK",
    "CON_TALK",
    "CON_HAS_SUB_EVENT",
    "CON_IS_EVENT_RELATED_TO",
    "CON_HAS_AFFILIATION",
    "CON_WITH_ORGANISATION",
    "PURL_CREATOR",
    "DBO_COUNTRY",
    "DBP_NAME",
]
