"""Build-wide asset context used by page and template renders."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from loguru import logger

from critical_assets.compressor import Compressor, StyleCompressor
from critical_assets.config_loader import AssetOptions, build_asset_options, get_assets_config
from critical_assets.models import DEFAULT_CATEGORY, Scope
from critical_assets.registry import AssetRegistry
from critical_assets.resolver import Reader, StyleResolver, read_file
from critical_assets.scanner import scan_stylesheets_directory
from critical_assets.scripts import render_scripts


class AssetBundler:
    """Collect critical and async assets across renders and emit merged output.

    One instance lives for one build. Create it explicitly and hand it to
    whatever renders pages; separate instances share no state.
    """

    def __init__(
        self,
        category_sort_order: Optional[List[str]] = None,
        directories: Optional[Dict[str, str]] = None,
        file_extensions: Optional[List[str]] = None,
        compressor: Optional[Compressor] = None,
        reader: Reader = read_file,
    ):
        self.options: AssetOptions = build_asset_options({
            "category_sort_order": category_sort_order or [],
            "dir": directories or {},
            "file_extensions": file_extensions or [],
        })
        self.registry = AssetRegistry()
        self.compressor = compressor if compressor is not None else StyleCompressor()
        self.resolver = StyleResolver(
            self.registry,
            self.compressor,
            category_sort_order=self.options.category_sort_order,
            reader=reader,
        )

    @classmethod
    def from_config(cls, config: Dict[str, Any], **kwargs: Any) -> "AssetBundler":
        assets = get_assets_config(config)
        return cls(
            category_sort_order=assets.get("category_sort_order"),
            directories=assets.get("dir"),
            file_extensions=assets.get("file_extensions"),
            **kwargs,
        )

    @property
    def category_sort_order(self) -> List[str]:
        return self.options.category_sort_order

    @property
    def file_extensions(self) -> List[str]:
        return self.options.file_extensions

    # Registration

    def add_style(self, scope: Any, identifier: str, style: str) -> None:
        self.registry.add_style(scope, identifier, style)

    def add_stylesheet(self, scope: Any, stylesheet: str, category: str = DEFAULT_CATEGORY) -> None:
        self.registry.add_stylesheet_path(scope, stylesheet, category)

    def add_script(self, scope: Any, identifier: str, script: Any) -> None:
        self.registry.add_script(scope, identifier, script)

    def add_stylesheets_directory(self, directory_path: Union[str, Path]) -> None:
        """Scan a stylesheet tree and register everything it contains."""
        scanned = scan_stylesheets_directory(directory_path, self.file_extensions)
        self.registry.merge_stylesheets_from_scan(scanned)
        logger.debug("Merged stylesheets from {}", directory_path)

    # Styles

    def get_styles(self, scope: Any, category: Optional[str] = None, identifier: Optional[str] = None) -> str:
        return self.resolver.resolve_styles(scope, category=category, identifier=identifier)

    def critical_styles(self, identifier: Optional[str] = None, category: Optional[str] = None) -> str:
        """Return all critical styles associated with the requested identifier."""
        return self.get_styles(Scope.CRITICAL, category=category, identifier=identifier)

    def async_styles(self, identifier: Optional[str] = None, category: Optional[str] = None) -> str:
        """Return all async styles associated with the requested identifier."""
        return self.get_styles(Scope.ASYNC, category=category, identifier=identifier)

    def has_critical_styles(self, identifier: Optional[str] = None) -> bool:
        return self.registry.has_styles(Scope.CRITICAL, identifier)

    def has_async_styles(self, identifier: Optional[str] = None) -> bool:
        return self.registry.has_styles(Scope.ASYNC, identifier)

    # Scripts

    def critical_scripts(self, identifier: str) -> str:
        return render_scripts(self.registry, Scope.CRITICAL, identifier)

    def async_scripts(self, identifier: str) -> str:
        return render_scripts(self.registry, Scope.ASYNC, identifier)

    def has_critical_scripts(self, identifier: str) -> bool:
        return self.registry.has_scripts(Scope.CRITICAL, identifier)

    def has_async_scripts(self, identifier: str) -> bool:
        return self.registry.has_scripts(Scope.ASYNC, identifier)
