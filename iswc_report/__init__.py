# -*- coding: utf-8 -*-
"""
ISWC track report package.

Top-level package for the report pipeline: Turtle loading into an in-memory
triple store, the conjunctive track query, author-chain resolution, grouping by
country and HTML rendering.
"""

__version__ = "0.1.0"
