# -*- coding: utf-8 -*-
"""
Query package for conjunctive pattern matching over the triple store.

Contains patterns (variables, triple patterns, property paths, filters),
query_parser (SPARQL subset parser), query_engine (nested-loop join evaluator)
and track_query (the fixed report query).
"""
