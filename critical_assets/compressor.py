"""CSS post-processing applied to every resolved stylesheet bundle."""

from __future__ import annotations

import os
from typing import Callable, Optional

import csscompressor
import cssbeautifier


ENVIRONMENT_VARIABLE = "SITE_ENV"
PRODUCTION = "production"

Compressor = Callable[[str], str]


def is_production(env_var: str = ENVIRONMENT_VARIABLE) -> bool:
    return os.getenv(env_var) == PRODUCTION


class StyleCompressor:
    """Minify CSS for production builds, pretty-print it otherwise.

    With ``production=None`` the mode follows ``SITE_ENV`` at each call.
    """

    def __init__(self, production: Optional[bool] = None):
        self.production = production

    @property
    def minify(self) -> bool:
        return is_production() if self.production is None else self.production

    @property
    def mode(self) -> str:
        return "minify" if self.minify else "beautify"

    def __call__(self, css: str) -> str:
        if not css.strip():
            return ""
        if self.minify:
            return csscompressor.compress(css)
        return cssbeautifier.beautify(css)
