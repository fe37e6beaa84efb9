"""Category-tree scanner that seeds the registry from a stylesheet directory.

Layout conventions:

* a top-level directory name (lower-cased) becomes the category for every
  file below it, however deeply nested;
* a top-level file is its own category, named after the file stem;
* a file whose name contains ``-critical`` is a critical stylesheet, anything
  else is async.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from loguru import logger

from critical_assets.errors import DirectoryScanFailure
from critical_assets.models import Scope


CRITICAL_MARKER = "-critical"

StylesheetMap = Dict[Scope, Dict[str, List[str]]]


def empty_stylesheet_map() -> StylesheetMap:
    return {scope: {} for scope in Scope}


def scope_for_filename(name: str) -> Scope:
    return Scope.CRITICAL if CRITICAL_MARKER in name else Scope.ASYNC


def _list_directory(directory: Path) -> List[Path]:
    try:
        return sorted(directory.iterdir(), key=lambda child: child.name)
    except OSError as exc:
        raise DirectoryScanFailure(directory, exc.strerror or str(exc)) from exc


def _pending(directory: Path, category: Optional[str]) -> List[Tuple[Path, Optional[str]]]:
    # Reversed so that popping from the end visits entries in listing order.
    return [(child, category) for child in reversed(_list_directory(directory))]


def scan_stylesheets_directory(
    directory_path: Union[str, Path],
    file_extensions: Iterable[str],
) -> StylesheetMap:
    """Walk ``directory_path`` and map every stylesheet to its scope and category.

    Args:
        directory_path: Root of the stylesheet tree.
        file_extensions: Allowed file extensions including the dot (``.css``).

    Returns:
        ``{Scope.CRITICAL: {category: [paths]}, Scope.ASYNC: {category: [paths]}}``.
        Every category met during the walk is present under both scopes, in
        the order it was first encountered.

    Raises:
        DirectoryScanFailure: If the root is missing, is not a directory, or a
            directory in the tree cannot be listed.
    """
    root = Path(directory_path)
    if not root.is_dir():
        reason = "not a directory" if root.exists() else "no such directory"
        raise DirectoryScanFailure(root, reason)

    extensions = set(file_extensions)
    stylesheets = empty_stylesheet_map()
    found = 0

    stack = _pending(root, None)
    while stack:
        entry, category = stack.pop()
        is_directory = entry.is_dir() and not entry.is_symlink()

        if not is_directory:
            if not entry.is_file() or entry.suffix not in extensions:
                continue

        if category is None:
            category = entry.name.lower() if is_directory else entry.stem

        for scope in Scope:
            stylesheets[scope].setdefault(category, [])

        if is_directory:
            stack.extend(_pending(entry, category))
            continue

        stylesheets[scope_for_filename(entry.name)][category].append(str(entry))
        found += 1

    logger.info(
        "Scanned {} stylesheets in {} categories from {}",
        found,
        len(stylesheets[Scope.ASYNC]),
        root,
    )
    return stylesheets
