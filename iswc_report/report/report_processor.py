# -*- coding: utf-8 -*-
"""
Main report pipeline orchestrator.

Runs the complete workflow from a directory of Turtle files to the published
page: (1) discover source files, (2) load them into a TripleStore, skipping
files that fail, (3) run the track query, (4) resolve author chains and group
entries by country, (5) render the HTML report and optionally dump the grouping
map as JSON.

The input directory is checked first; a missing or non-directory path raises
NotADirectoryError before anything is loaded. Per-file load failures and
per-article chain faults are logged and collected in the ReportResult instead.

Examples:
    from iswc_report.report.report_processor import ReportProcessor

    processor = ReportProcessor(
        input_dir="data/ttl",
        output_path="PublicacionesISWC2019.html",
        max_workers=4,
    )
    result = processor.run()

    print(f"{result.entry_count} entries in {len(result.grouping)} countries")
    for diagnostic in result.diagnostics:
        print(diagnostic.message)
"""
# Standard library
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

# Local
from iswc_report.graph.triple_store import TripleStore
from iswc_report.query.query_engine import QueryEngine
from iswc_report.query.track_query import REPORTED_TRACKS, track_query
from iswc_report.report.aggregator import ResultAggregator
from iswc_report.report.author_chain import AuthorChainResolver
from iswc_report.report.html_renderer import write_report
from iswc_report.utils.config import (
    AUTHOR_CONJUNCTION,
    MAX_CHAIN_HOPS,
    SOURCE_FORMAT,
    SOURCE_SUFFIXES,
)
from iswc_report.utils.dataclasses import GroupingMap, LoadReport, ReportResult
from iswc_report.utils.io import discover_source_files, save_json

logger = logging.getLogger(__name__)


class ReportProcessor:
    """
    Orchestrate load -> query -> aggregate -> render.

    The store is built once per processor; collect() and run() load it on
    first use.
    """

    def __init__(
        self,
        input_dir: Union[str, Path],
        output_path: Optional[Union[str, Path]] = None,
        json_output_path: Optional[Union[str, Path]] = None,
        max_workers: int = 1,
        conjunction: str = AUTHOR_CONJUNCTION,
        max_chain_hops: int = MAX_CHAIN_HOPS,
        tracks: Iterable[str] = REPORTED_TRACKS,
        suffixes: Iterable[str] = SOURCE_SUFFIXES,
        show_progress: bool = False,
    ):
        """
        Initialize report processor.

        Args:
            input_dir: Directory of Turtle files
            output_path: HTML report path (None: do not render)
            json_output_path: Grouping map JSON path (None: do not write)
            max_workers: Parser threads for loading
            conjunction: Word before the last author name
            max_chain_hops: Author list length treated as malformed
            tracks: Track labels to report
            suffixes: Source file suffixes
            show_progress: Show a progress bar while loading
        """
        self.input_dir = Path(input_dir)
        self.output_path = Path(output_path) if output_path else None
        self.json_output_path = Path(json_output_path) if json_output_path else None
        self.max_workers = max_workers
        self.tracks = tuple(tracks)
        self.suffixes = tuple(suffixes)
        self.show_progress = show_progress

        self.store = TripleStore()
        self.engine = QueryEngine(self.store)
        self.resolver = AuthorChainResolver(
            self.store,
            conjunction=conjunction,
            max_hops=max_chain_hops,
        )
        self.aggregator = ResultAggregator(self.resolver.resolve_authors)

        self.load_report: Optional[LoadReport] = None
        self.binding_count = 0

    # ==================== STAGES ====================

    def discover(self) -> List[Path]:
        """Source files of the run (raises NotADirectoryError for a bad input path)."""
        return discover_source_files(self.input_dir, self.suffixes)

    def load(self) -> LoadReport:
        """Load every source file into the store."""
        paths = self.discover()
        if not paths:
            logger.warning(f"No {'/'.join(self.suffixes)} files in {self.input_dir}")

        self.load_report = self.store.load(
            paths,
            fmt=SOURCE_FORMAT,
            max_workers=self.max_workers,
            show_progress=self.show_progress,
        )
        return self.load_report

    def collect(self) -> GroupingMap:
        """Run the track query and group the rows by country."""
        if self.load_report is None:
            self.load()

        rows = self.engine.select(track_query(self.tracks))
        self.binding_count = len(rows)
        return self.aggregator.aggregate(rows)

    def run(self) -> ReportResult:
        """
        Execute the full pipeline.

        Returns:
            ReportResult with the grouping map, load report, chain diagnostics
            and written paths
        """
        logger.info(f"Building report from {self.input_dir}")
        grouping = self.collect()

        result = ReportResult(
            grouping=grouping,
            load_report=self.load_report,
            diagnostics=list(self.aggregator.diagnostics),
            binding_count=self.binding_count,
        )

        if self.output_path is not None:
            result.output_path = write_report(grouping, self.output_path)
        if self.json_output_path is not None:
            result.json_output_path = Path(save_json(grouping, self.json_output_path))

        logger.info(
            f"Report complete: {result.entry_count} entries, {len(grouping)} countries, "
            f"{len(result.load_report.failed)} files skipped, "
            f"{len(result.diagnostics)} chain diagnostics"
        )
        return result
