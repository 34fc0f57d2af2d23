# -*- coding: utf-8 -*-
"""
Report package turning query bindings into the published track report.

Contains author_chain (linked-list author resolution), aggregator (grouping
entries by country), html_renderer (static page) and report_processor (full
pipeline orchestrator).
"""
