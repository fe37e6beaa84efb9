"""In-memory store of every asset registered during a build."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from loguru import logger

from critical_assets.models import DEFAULT_CATEGORY, Scope, ScriptEntry, coerce_script_entry


class AssetRegistry:
    """Accumulates styles, stylesheet paths and scripts per scope.

    Entries only ever grow; nothing is removed for the lifetime of a build.
    A registry is not thread-safe, callers that render pages in parallel
    must serialize access themselves.
    """

    def __init__(self):
        self.styles: Dict[Scope, Dict[str, List[str]]] = {scope: {} for scope in Scope}
        self.stylesheets: Dict[Scope, Dict[str, List[str]]] = {scope: {} for scope in Scope}
        self.scripts: Dict[Scope, Dict[str, List[ScriptEntry]]] = {scope: {} for scope in Scope}

    def add_style(self, scope: Any, identifier: str, style: str) -> None:
        """Register an inline CSS snippet; an identical snippet is kept once."""
        styles = self.styles[Scope.parse(scope)].setdefault(identifier, [])
        if style not in styles:
            styles.append(style)
            logger.debug("Registered {} style for '{}'", scope, identifier)

    def add_stylesheet_path(self, scope: Any, path: str, category: Optional[str] = None) -> None:
        """Append a stylesheet path to a category. Paths are not deduplicated."""
        if category is None:
            category = DEFAULT_CATEGORY
        self.stylesheets[Scope.parse(scope)].setdefault(category, []).append(str(path))
        logger.debug("Registered {} stylesheet {} under '{}'", scope, path, category)

    def add_script(self, scope: Any, identifier: str, script: Any) -> None:
        """Register a script URL or attribute mapping; equal entries are kept once."""
        scripts = self.scripts[Scope.parse(scope)].setdefault(identifier, [])
        entry = coerce_script_entry(script)
        if all(existing.key != entry.key for existing in scripts):
            scripts.append(entry)
            logger.debug("Registered {} script {} for '{}'", scope, entry.src, identifier)

    def merge_stylesheets_from_scan(self, scan_result: Mapping[Any, Mapping[str, List[str]]]) -> None:
        """Fold a scanner result into the stylesheet map.

        Existing categories keep their position and get the new paths appended;
        unseen categories are added after them.
        """
        for scope, categories in scan_result.items():
            target = self.stylesheets[Scope.parse(scope)]
            for category, paths in categories.items():
                target.setdefault(category, []).extend(str(path) for path in paths)

    def has_styles(self, scope: Any, identifier: Optional[str] = None) -> bool:
        scope = Scope.parse(scope)
        if any(self.stylesheets[scope].values()):
            return True
        if identifier:
            return bool(self.styles[scope].get(identifier))
        return False

    def has_scripts(self, scope: Any, identifier: str) -> bool:
        return bool(self.scripts[Scope.parse(scope)].get(identifier))

    def stylesheet_categories(self, scope: Any) -> List[str]:
        return list(self.stylesheets[Scope.parse(scope)])

    def stylesheet_paths(self, scope: Any, category: str) -> List[str]:
        return list(self.stylesheets[Scope.parse(scope)].get(category, []))

    def styles_for(self, scope: Any, identifier: str) -> List[str]:
        return list(self.styles[Scope.parse(scope)].get(identifier, []))

    def scripts_for(self, scope: Any, identifier: str) -> List[ScriptEntry]:
        return list(self.scripts[Scope.parse(scope)].get(identifier, []))
