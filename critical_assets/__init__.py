"""Critical/async CSS and script aggregation for static site builds."""

from loguru import logger

from critical_assets.bundler import AssetBundler
from critical_assets.errors import AssetError, DirectoryScanFailure, FileReadFailure, UnsupportedScope
from critical_assets.models import AttributedSource, PlainSource, Scope
from critical_assets.registry import AssetRegistry

logger.disable("critical_assets")

__all__ = [
    "AssetBundler",
    "AssetError",
    "AssetRegistry",
    "AttributedSource",
    "DirectoryScanFailure",
    "FileReadFailure",
    "PlainSource",
    "Scope",
    "UnsupportedScope",
]
