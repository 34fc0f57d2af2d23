# -*- coding: utf-8 -*-
"""
In-memory triple store for the conference graph.

Holds every triple of a run in a subject -> predicate -> objects index. Every
traversal in this domain starts from a known node and predicate (track to
talks, article to author list, list item to next item), so that single index
serves both the query engine and the author-chain walk; wildcard subjects fall
back to a scan.

Loading is per file and all-or-nothing: a file is parsed completely before any
of its triples are inserted, and a file that cannot be read or parsed is
skipped and reported while the rest of the directory loads. Triples carry no
file provenance, so the final store does not depend on load order, and
inserting a triple twice changes nothing.

Examples:
    from iswc_report.graph.triple_store import TripleStore

    store = TripleStore()
    report = store.load(paths, max_workers=4)
    print(f"{len(store)} triples, {len(report.failed)} files skipped")

    labels = store.match(predicate="http://www.w3.org/2000/01/rdf-schema#label")
    first = store.value(list_node, CON_HAS_FIRST_ITEM)
"""
# Standard library
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import BinaryIO, Dict, Iterable, List, Optional, Set, Union

# Third-party
from tqdm import tqdm

# Local
from iswc_report.graph.rdf_loader import PARSE_ERRORS, parse_stream
from iswc_report.utils.dataclasses import (
    Literal,
    LoadReport,
    Term,
    Triple,
    term_sort_key,
)

logger = logging.getLogger(__name__)

# Per-file failures that skip the file instead of aborting the load
LOAD_ERRORS = PARSE_ERRORS + (OSError,)


class TripleStore:
    """
    Subject/predicate indexed set of triples.

    Populated by load()/add(); read by match(), objects() and value(). A
    concurrent load only inserts from the calling thread, so after load()
    returns the store can be read without locking.
    """

    def __init__(self, triples: Optional[Iterable[Triple]] = None):
        """
        Initialize store.

        Args:
            triples: Optional initial triples
        """
        self._index: Dict[str, Dict[str, Set[Term]]] = {}
        self._size = 0

        if triples is not None:
            self.add_many(triples)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, triple) -> bool:
        subject, predicate, obj = triple
        return obj in self._index.get(subject, {}).get(predicate, ())

    def __repr__(self) -> str:
        return f"TripleStore(triples={self._size}, subjects={len(self._index)})"

    # ==================== INSERTION ====================

    def add(self, triple: Triple) -> bool:
        """
        Insert one triple.

        Args:
            triple: Triple to insert

        Returns:
            True if the triple was new, False if it was already present
        """
        subject, predicate, obj = triple
        if isinstance(subject, Literal) or isinstance(predicate, Literal):
            raise ValueError(f"Subject and predicate must be identifiers: {triple}")

        objects = self._index.setdefault(subject, {}).setdefault(predicate, set())
        if obj in objects:
            return False
        objects.add(obj)
        self._size += 1
        return True

    def add_many(self, triples: Iterable[Triple]) -> int:
        """Insert triples; returns how many were new."""
        return sum(1 for triple in triples if self.add(triple))

    # ==================== LOADING ====================

    def load_stream(
        self,
        stream: BinaryIO,
        name: str = "<stream>",
        fmt: str = "turtle",
        public_id: Optional[str] = None,
    ) -> int:
        """
        Parse one opened byte stream and insert its triples.

        Parse errors propagate; nothing from a failing stream is inserted.

        Args:
            stream: Binary file-like object
            name: Source name for logging
            fmt: rdflib parser name
            public_id: Base IRI for relative references

        Returns:
            Number of new triples
        """
        triples = parse_stream(stream, fmt=fmt, public_id=public_id)
        added = self.add_many(triples)
        logger.debug(f"{name}: {len(triples)} triples ({added} new)")
        return added

    def load(
        self,
        paths: Iterable[Union[str, Path]],
        fmt: str = "turtle",
        max_workers: int = 1,
        show_progress: bool = False,
    ) -> LoadReport:
        """
        Load source files, skipping the ones that fail.

        With max_workers > 1 files are parsed on a thread pool; insertion still
        happens here, one whole file at a time.

        Args:
            paths: Files to load
            fmt: rdflib parser name (default "turtle")
            max_workers: Parser threads
            show_progress: Show a tqdm progress bar

        Returns:
            LoadReport with loaded files, skipped files and new triple count
        """
        paths = [Path(p) for p in paths]
        report = LoadReport()

        with tqdm(total=len(paths), desc="Loading triples", unit="file",
                  disable=not show_progress) as pbar:
            if max_workers > 1 and len(paths) > 1:
                with ThreadPoolExecutor(max_workers=max_workers) as executor:
                    futures = {
                        executor.submit(self._parse_file, path, fmt): path
                        for path in paths
                    }

                    for future in as_completed(futures):
                        path = futures[future]
                        try:
                            triples = future.result()
                        except LOAD_ERRORS as e:
                            self._skip(report, path, e)
                        else:
                            self._commit(report, path, triples)
                        finally:
                            pbar.update(1)
            else:
                for path in paths:
                    try:
                        triples = self._parse_file(path, fmt)
                    except LOAD_ERRORS as e:
                        self._skip(report, path, e)
                    else:
                        self._commit(report, path, triples)
                    finally:
                        pbar.update(1)

        report.loaded.sort()
        logger.info(
            f"Loaded {report.triples_added} triples from {len(report.loaded)} files "
            f"({len(report.failed)} skipped, {self._size} in store)"
        )
        return report

    def _parse_file(self, path: Path, fmt: str) -> List[Triple]:
        with open(path, 'rb') as stream:
            return parse_stream(stream, fmt=fmt, public_id=path.resolve().as_uri())

    def _commit(self, report: LoadReport, path: Path, triples: List[Triple]) -> None:
        added = self.add_many(triples)
        report.loaded.append(str(path))
        report.triples_added += added
        logger.debug(f"{path.name}: {len(triples)} triples ({added} new)")

    def _skip(self, report: LoadReport, path: Path, error: Exception) -> None:
        report.failed[str(path)] = f"{type(error).__name__}: {error}"
        logger.warning(f"Skipped {path.name}: could not load ({type(error).__name__}: {error})")

    # ==================== LOOKUP ====================

    def match(
        self,
        subject: Optional[str] = None,
        predicate: Optional[str] = None,
        obj: Optional[Term] = None,
    ) -> List[Triple]:
        """
        Find triples matching the given constraints.

        None acts as a wildcard. A known subject uses the index directly;
        otherwise all subjects are scanned.

        Args:
            subject: Subject identifier or None
            predicate: Predicate identifier or None
            obj: Object term or None

        Returns:
            Matching triples (unordered)
        """
        if subject is not None:
            by_predicate = self._index.get(subject)
            if not by_predicate:
                return []
            candidates = [(subject, by_predicate)]
        else:
            candidates = self._index.items()

        results = []
        for s, by_predicate in candidates:
            if predicate is not None:
                objects = by_predicate.get(predicate)
                if not objects:
                    continue
                groups = [(predicate, objects)]
            else:
                groups = by_predicate.items()

            for p, objects in groups:
                if obj is not None:
                    if obj in objects:
                        results.append(Triple(s, p, obj))
                else:
                    results.extend(Triple(s, p, o) for o in objects)

        return results

    def objects(self, subject: str, predicate: str) -> List[Term]:
        """All objects of (subject, predicate), identifiers first then literals."""
        objects = self._index.get(subject, {}).get(predicate)
        if not objects:
            return []
        return sorted(objects, key=term_sort_key)

    def value(self, subject: str, predicate: str) -> Optional[Term]:
        """
        Single object of (subject, predicate), or None.

        Multi-valued predicates return the first object in objects() order so
        the choice does not depend on load order.
        """
        objects = self._index.get(subject, {}).get(predicate)
        if not objects:
            return None
        return min(objects, key=term_sort_key)
