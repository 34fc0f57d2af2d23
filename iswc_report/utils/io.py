# -*- coding: utf-8 -*-
"""
I/O utilities for report inputs and artifacts

Discovers the Turtle sources of a run and writes the rendered report plus an
optional JSON dump of the grouping map, with consistent encoding and logging.

Examples:
    from iswc_report.utils.io import discover_source_files, write_text, save_json
    paths = discover_source_files("data/ttl")
    write_text(html, "PublicacionesISWC2019.html")
    save_json(grouping, "out/grouping.json")

"""
import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Union

logger = logging.getLogger(__name__)


# ============================================================================
# SOURCES
# ============================================================================

def discover_source_files(
    directory: Union[str, Path],
    suffixes: Iterable[str] = (".ttl",),
) -> List[Path]:
    """
    List the source files of a run.

    Args:
        directory: Input directory (not searched recursively)
        suffixes: Accepted file suffixes, compared case-insensitively

    Returns:
        Matching files sorted by name

    Raises:
        NotADirectoryError: If directory does not exist, is not a directory or
            cannot be listed
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise NotADirectoryError(f"Provided path is not a directory: {directory}")

    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise NotADirectoryError(f"Input directory cannot be read: {directory} ({e})") from e

    accepted = {suffix.lower() for suffix in suffixes}
    paths = sorted(
        p for p in entries
        if p.is_file() and p.suffix.lower() in accepted
    )
    logger.info(f"Found {len(paths)} source files in {directory}")
    return paths


# ============================================================================
# ARTIFACTS
# ============================================================================

def write_text(text: str, path: Union[str, Path]) -> str:
    """
    Write text file (UTF-8), creating parent directories.

    Args:
        text: Content
        path: Output path

    Returns:
        Path string
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)

    logger.info(f"Saved {path} ({_size_str(path)})")
    return str(path)


def save_json(
    data: Any,
    path: Union[str, Path],
    indent: int = 2,
) -> str:
    """
    Save data to JSON file.

    Args:
        data: Data to save (sets and dataclasses are converted)
        path: Output path
        indent: Indentation level (default 2)

    Returns:
        Path string
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent, ensure_ascii=False, default=_serialize)

    logger.info(f"Saved {path} ({_size_str(path)})")
    return str(path)


def load_json(path: Union[str, Path]) -> Any:
    """Load JSON file."""
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


# ============================================================================
# HELPERS
# ============================================================================

def _serialize(obj: Any) -> Any:
    """Convert non-JSON-serializable objects."""
    if isinstance(obj, (set, frozenset)):
        return sorted(obj)
    if hasattr(obj, '__dict__'):
        return obj.__dict__
    return str(obj)


def _size_str(path: Path) -> str:
    """Human-readable file size."""
    size = path.stat().st_size
    for unit in ['B', 'KB', 'MB']:
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GB"
