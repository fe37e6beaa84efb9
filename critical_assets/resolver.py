"""Read-time style resolution: ordering, reading, deduplication and compression."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, Sequence

from loguru import logger

from critical_assets.compressor import Compressor
from critical_assets.errors import FileReadFailure
from critical_assets.models import Scope
from critical_assets.registry import AssetRegistry


Reader = Callable[[str], bytes]


def read_file(path: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise FileReadFailure(path, exc.strerror or str(exc)) from exc


def sort_categories(categories: Iterable[str], category_sort_order: Sequence[str]) -> List[str]:
    """Order categories for concatenation.

    Categories missing from ``category_sort_order`` come first in discovery
    order; listed ones follow in the configured order.
    """
    order = list(category_sort_order)

    def sort_key(category: str) -> int:
        if category in order:
            return order.index(category) + 1
        return 0

    # Stable: unlisted categories share key 0 and keep their relative order.
    return sorted(categories, key=sort_key)


def unique(values: Iterable[Any]) -> List[Any]:
    result: List[Any] = []
    for value in values:
        if value not in result:
            result.append(value)
    return result


class StyleResolver:
    """Materialize the CSS bundle for a scope, category or identifier."""

    def __init__(
        self,
        registry: AssetRegistry,
        compressor: Compressor,
        category_sort_order: Sequence[str] = (),
        reader: Reader = read_file,
    ):
        self.registry = registry
        self.compressor = compressor
        self.category_sort_order = list(category_sort_order)
        self.reader = reader

    def stylesheet_paths(self, scope: Any, category: Optional[str] = None) -> List[str]:
        scope = Scope.parse(scope)
        if category:
            return self.registry.stylesheet_paths(scope, category)

        paths: List[str] = []
        for name in sort_categories(self.registry.stylesheet_categories(scope), self.category_sort_order):
            paths.extend(self.registry.stylesheet_paths(scope, name))
        return paths

    def resolve_styles(
        self,
        scope: Any,
        category: Optional[str] = None,
        identifier: Optional[str] = None,
    ) -> str:
        """Concatenate stylesheet contents and inline styles, then compress them."""
        scope = Scope.parse(scope)
        blocks = [self._decode(self.reader(path), path) for path in self.stylesheet_paths(scope, category)]
        stylesheet_count = len(blocks)

        if identifier:
            blocks.extend(unique(self.registry.styles_for(scope, identifier)))

        logger.debug(
            "Resolved {} styles (category={}, identifier={}): {} stylesheets, {} inline",
            scope,
            category,
            identifier,
            stylesheet_count,
            len(blocks) - stylesheet_count,
        )
        return self.compressor("\n".join(blocks))

    @staticmethod
    def _decode(content: bytes, path: str) -> str:
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FileReadFailure(path, "not valid UTF-8") from exc
