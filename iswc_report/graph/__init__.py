# -*- coding: utf-8 -*-
"""
Graph package for loading and indexing conference triples.

Contains namespaces (vocabulary constants), rdf_loader (Turtle stream to Triple
list via rdflib) and triple_store (subject/predicate indexed in-memory store).
"""
