# -*- coding: utf-8 -*-
"""
Module: test_html_renderer.py
Package: tests.report
Purpose: Unit tests for the static HTML page
"""

# Standard library
import sys
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Local
from iswc_report.report.html_renderer import render_html, write_report
from iswc_report.utils.config import REPORT_TITLE, TAILWIND_CSS_URL


GROUPING = {
    "Germany": ['(EU) "Lists" por Dana'],
    "Spain": ['(IN) "Alpha" por A y B', '(RC) "Zeta" por Cruz'],
}


def test_page_skeleton():
    page = render_html(GROUPING)

    assert page.startswith("<!DOCTYPE html>")
    assert '<html lang="es">' in page
    assert f"<title>{REPORT_TITLE}</title>" in page
    assert TAILWIND_CSS_URL in page
    assert page.rstrip().endswith("</html>")


def test_one_section_per_country_in_map_order():
    page = render_html(GROUPING)

    assert page.count("<section") == 2
    assert page.index(">Germany</h2>") < page.index(">Spain</h2>")


def test_entries_listed_in_order():
    page = render_html(GROUPING)

    assert page.count("<li ") == 3
    assert page.index("Alpha") < page.index("Zeta")
    assert '(IN) "Alpha" por A y B</li>' in page


def test_text_is_escaped():
    page = render_html({"R&D <Land>": ['(IN) "<b>Bold</b>" por A & B']})

    assert ">R&amp;D &lt;Land&gt;</h2>" in page
    assert '(IN) "&lt;b&gt;Bold&lt;/b&gt;" por A &amp; B' in page
    assert "<b>" not in page


def test_empty_grouping_renders_page_without_sections():
    page = render_html({})
    assert "<section" not in page
    assert REPORT_TITLE in page


def test_custom_title():
    page = render_html(GROUPING, title="Informe")
    assert "<title>Informe</title>" in page


def test_write_report_creates_parent_dirs(tmp_path):
    output = tmp_path / "site" / "report.html"

    path = write_report(GROUPING, output)

    assert path == output
    assert output.read_text(encoding="utf-8") == render_html(GROUPING)
