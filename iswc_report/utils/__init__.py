# -*- coding: utf-8 -*-
"""
Utilities package for common functionality across the report pipeline.

Contains configuration, logging setup, I/O helpers and the shared dataclasses.
"""
