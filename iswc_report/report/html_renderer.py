# -*- coding: utf-8 -*-
"""
Static HTML rendering of the grouping map.

One section per country, in the map's order, each holding a bulleted list of
its entries. Styling comes from the Tailwind CDN stylesheet; all text is
HTML-escaped.
"""
# Standard library
import html
import logging
from pathlib import Path
from typing import List, Union

# Local
from iswc_report.utils.config import REPORT_INTRO, REPORT_TITLE, TAILWIND_CSS_URL
from iswc_report.utils.dataclasses import GroupingMap
from iswc_report.utils.io import write_text

logger = logging.getLogger(__name__)


def render_html(
    grouping: GroupingMap,
    title: str = REPORT_TITLE,
    intro: str = REPORT_INTRO,
    stylesheet: str = TAILWIND_CSS_URL,
) -> str:
    """
    Render the report page.

    Args:
        grouping: Country -> entries, already ordered
        title: Page title and header
        intro: Paragraph shown above the sections
        stylesheet: Stylesheet URL

    Returns:
        Complete HTML document
    """
    title = html.escape(title)
    lines: List[str] = [
        "<!DOCTYPE html>",
        '<html lang="es">',
        "<head>",
        '<meta charset="UTF-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"<title>{title}</title>",
        f'<link href="{html.escape(stylesheet)}" rel="stylesheet">',
        "</head>",
        '<body class="bg-gray-100 text-gray-900">',
        '<header class="bg-blue-600 py-6 mb-8">',
        f'  <h1 class="text-center text-white text-4xl font-extrabold">{title}</h1>',
        "</header>",
        '<div class="container mx-auto px-4">',
        f'  <p class="text-lg mb-6">{html.escape(intro)}</p>',
    ]

    for country, entries in grouping.items():
        lines.append('  <section class="bg-white rounded-lg shadow-md p-6 mb-6">')
        lines.append(
            f'    <h2 class="text-2xl font-semibold text-blue-700 mb-4">{html.escape(country)}</h2>'
        )
        lines.append('    <ul class="list-disc list-inside space-y-2">')
        for entry in entries:
            lines.append(
                '      <li class="hover:underline hover:text-blue-600 transition-colors">'
                f"{html.escape(entry, quote=False)}</li>"
            )
        lines.append("    </ul>")
        lines.append("  </section>")

    lines.extend(["</div>", "</body>", "</html>"])
    return "\n".join(lines)


def write_report(grouping: GroupingMap, output_path: Union[str, Path], **kwargs) -> Path:
    """
    Render and write the report.

    Args:
        grouping: Country -> entries
        output_path: HTML file to write
        **kwargs: Passed to render_html

    Returns:
        Written path
    """
    path = Path(write_text(render_html(grouping, **kwargs), output_path))
    logger.info(f"HTML report written to {path}")
    return path
